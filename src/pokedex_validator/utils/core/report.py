"""
Validation report structures and aggregation.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Union

RecordId = Union[int, float, str]


@dataclass(slots=True)
class Failure:
    """A record that failed validation.

    Args:
        missing_keys: Missing or malformed field paths, in report order.
        id: Record id, the "unknown" sentinel, or None for datasets without ids.
        name: Display name of the record, if one could be extracted.
    """

    missing_keys: list[str]
    id: Optional[RecordId] = None
    name: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the JSON report, omitting absent id and name."""
        result: dict[str, Any] = {}
        if self.id is not None:
            result["id"] = self.id
        if self.name is not None:
            result["name"] = self.name
        result["missingKeys"] = list(self.missing_keys)
        return result


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(slots=True)
class ValidationReport:
    """Outcome of validating one dataset."""

    total: int
    failures: list[Failure] = field(default_factory=list)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures

    def to_dict(self, total_key: str, failed_key: str) -> dict[str, Any]:
        """Build the report document.

        Args:
            total_key (str): Key for the record count (e.g. "totalMoves")
            failed_key (str): Key for the failing record count (e.g. "movesWithMissingKeys")
        """
        return {
            "timestamp": format_timestamp(self.timestamp),
            total_key: self.total,
            failed_key: self.failed,
            "failures": [failure.to_dict() for failure in self.failures],
        }


def build_report(
    records: list[Any],
    check: Callable[[Any], list[str]],
    describe: Callable[[Any, list[str]], Failure],
) -> ValidationReport:
    """Validate every record in order and collect the failures.

    Args:
        records (list[Any]): Loaded dataset records
        check (Callable[[Any], list[str]]): Returns the failing field paths of a record
        describe (Callable[[Any, list[str]], Failure]): Builds the failure descriptor of a record

    Returns:
        ValidationReport: Record count and failures in input order
    """
    failures = []
    for record in records:
        missing_keys = check(record)
        if missing_keys:
            failures.append(describe(record, missing_keys))
    return ValidationReport(total=len(records), failures=failures)
