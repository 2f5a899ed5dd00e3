"""
Structural schema checking for loosely-typed JSON records.

A RecordSchema is a declarative, ordered list of FieldSpec entries. check_record()
walks a decoded JSON value against it and returns the dotted paths of every
missing or malformed field, without raising. Records are treated as untrusted:
nothing is assumed about their shape until it has been checked here.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class FieldKind(Enum):
    """Shape constraint applied to a field's value."""

    STRING = "string"
    NUMBER = "number"
    STRING_ARRAY = "string-array"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """A required field and the shape its value must have.

    Args:
        name: Key of the field in its parent object.
        kind: Shape constraint for the value.
        non_empty: For STRING_ARRAY fields, require at least one element.
        fields: Required sub-fields, checked when the value is an object.
    """

    name: str
    kind: FieldKind
    non_empty: bool = False
    fields: tuple["FieldSpec", ...] = ()

    def __post_init__(self):
        if self.fields and self.kind is not FieldKind.OBJECT:
            raise ValueError(f"Field '{self.name}' declares sub-fields but is not an object field")


@dataclass(frozen=True, slots=True)
class RecordSchema:
    """Top-level required fields of one dataset, in canonical order."""

    name: str
    fields: tuple[FieldSpec, ...]

    @property
    def field_names(self) -> list[str]:
        return [spec.name for spec in self.fields]


def is_non_empty_string(value: Any) -> bool:
    """True for strings with at least one non-whitespace character."""
    return isinstance(value, str) and len(value.strip()) > 0


def is_number(value: Any) -> bool:
    """True for finite ints and floats. Booleans and numeric-looking strings are rejected."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def is_string_array(value: Any) -> bool:
    """True for lists whose elements are all strings (an empty list qualifies)."""
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def matches_kind(spec: FieldSpec, value: Any) -> bool:
    """Check a single value against the shape constraint of its spec."""
    if spec.kind is FieldKind.STRING:
        return is_non_empty_string(value)
    if spec.kind is FieldKind.NUMBER:
        return is_number(value)
    if spec.kind is FieldKind.STRING_ARRAY:
        return is_string_array(value) and (not spec.non_empty or len(value) > 0)
    if spec.kind is FieldKind.ARRAY:
        return isinstance(value, list)
    return isinstance(value, Mapping)


def _add_once(failures: list[str], path: str) -> None:
    if path not in failures:
        failures.append(path)


def _collect_absent(
    data: Mapping[str, Any], fields: tuple[FieldSpec, ...], prefix: str, failures: list[str]
) -> None:
    for spec in fields:
        path = f"{prefix}{spec.name}"
        if spec.name not in data:
            _add_once(failures, path)
        elif spec.fields and isinstance(data[spec.name], Mapping):
            _collect_absent(data[spec.name], spec.fields, f"{path}.", failures)


def _collect_invalid(
    data: Mapping[str, Any], fields: tuple[FieldSpec, ...], prefix: str, failures: list[str]
) -> None:
    for spec in fields:
        path = f"{prefix}{spec.name}"
        value = data.get(spec.name)
        if spec.name not in data or not matches_kind(spec, value):
            _add_once(failures, path)
        elif spec.fields:
            _collect_invalid(value, spec.fields, f"{path}.", failures)


def check_record(record: Any, schema: RecordSchema) -> list[str]:
    """Return the missing or malformed field paths of a record.

    Absent keys are listed first (top-level scan order, descending into present
    objects), followed by keys that are present but have the wrong shape. A path
    is listed once even when it is both absent and malformed. Sub-fields of an
    object are only inspected when the object itself is a JSON object.

    Args:
        record (Any): A decoded JSON value of unknown shape.
        schema (RecordSchema): The dataset's required-field specification.

    Returns:
        list[str]: Dotted field paths; empty when the record conforms.
    """
    if not isinstance(record, Mapping):
        return schema.field_names

    failures: list[str] = []
    _collect_absent(record, schema.fields, "", failures)
    _collect_invalid(record, schema.fields, "", failures)
    return failures
