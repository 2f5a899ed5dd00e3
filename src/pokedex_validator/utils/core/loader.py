"""
Dataset and report file I/O.

Datasets are read fully into memory with orjson; reports are written with
orjson in one shot. Any I/O or decoding problem is logged and re-raised:
a validator cannot continue without its input or output file.
"""

from pathlib import Path
from typing import Any, Iterable, Optional, Type, TypeVar

import orjson
from dacite import Config, DaciteError, from_dict

from pokedex_validator.utils.core.logger import get_logger
from pokedex_validator.utils.data.models import BaseStats

logger = get_logger(__name__)

T = TypeVar("T")


class DatasetLoader:
    """
    Utility class for reading dataset files and writing validation reports.

    Also converts conforming records into the typed models in
    pokedex_validator.utils.data.models using dacite.
    """

    # Dacite configuration for deserialization of already-validated records
    _dacite_config = Config(
        check_types=False,  # Shapes were already checked by check_record()
        type_hooks={
            BaseStats: BaseStats.from_dict,
        },
    )

    @classmethod
    def load_dataset(cls, file_path: Path) -> list[Any]:
        """Load a dataset file holding a JSON array of records.

        Args:
            file_path (Path): Path to the dataset file

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not valid JSON
            TypeError: If the top-level JSON value is not an array

        Returns:
            list[Any]: The decoded records, in file order and of unknown shape
        """
        logger.debug(f"Loading dataset: {file_path}")
        try:
            with open(file_path, "rb") as f:
                data = orjson.loads(f.read())
        except FileNotFoundError:
            logger.error(f"Dataset file not found: {file_path}")
            raise
        except ValueError as e:
            # orjson raises JSONDecodeError, a ValueError subclass
            logger.error(f"Invalid JSON in file {file_path}: {e}", exc_info=True)
            raise
        except OSError as e:
            logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
            raise

        if not isinstance(data, list):
            logger.error(f"Dataset {file_path} does not contain a JSON array")
            raise TypeError(
                f"Dataset {file_path} must contain a JSON array, got {type(data).__name__}"
            )

        logger.debug(f"Loaded {len(data)} records from {file_path}")
        return data

    @classmethod
    def save_report(cls, file_path: Path, report: dict[str, Any]) -> Path:
        """Write a validation report as indented JSON.

        Args:
            file_path (Path): Destination of the report
            report (dict[str, Any]): Report document

        Raises:
            OSError: If the report cannot be written

        Returns:
            Path: Path to the written report
        """
        file_path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = file_path.with_suffix(".tmp")
        try:
            with open(temp_path, "wb") as f:
                f.write(orjson.dumps(report, option=orjson.OPT_INDENT_2))
            temp_path.replace(file_path)
        except OSError as e:
            logger.error(f"Error writing report {file_path}: {e}", exc_info=True)
            if temp_path.exists():
                temp_path.unlink()
            raise

        logger.debug(f"Wrote report: {file_path}")
        return file_path

    @classmethod
    def to_model(cls, record: dict[str, Any], data_class: Type[T]) -> T:
        """Convert a single conforming record into its dataclass.

        Raises:
            DaciteError: If a required field is missing
            ValueError: If a value is rejected by the model (e.g. unknown move category)
        """
        return from_dict(data_class=data_class, data=record, config=cls._dacite_config)

    @classmethod
    def to_models(
        cls,
        records: Iterable[Any],
        data_class: Type[T],
        label: Optional[str] = None,
    ) -> list[T]:
        """Convert records into dataclasses, skipping the ones that cannot be converted.

        Args:
            records (Iterable[Any]): Records that passed structural validation
            data_class (Type[T]): Target dataclass type
            label (Optional[str], optional): Name used in log messages. Defaults to the class name.

        Returns:
            list[T]: Converted models, in input order
        """
        label = label or data_class.__name__
        models = []
        for index, record in enumerate(records):
            try:
                models.append(cls.to_model(record, data_class))
            except (DaciteError, ValueError, TypeError, KeyError) as e:
                logger.warning(f"Could not convert {label} record #{index}: {e}")
        return models
