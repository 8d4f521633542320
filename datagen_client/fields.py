"""Field definitions and the JSON body sent to the generation service."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

MIN_MAX_RANGE = (-1_000_000, 1_000_000)
LENGTH_RANGE = (1, 1000)
ROWS_RANGE = (1, 10_000)

_PARAM_RANGES = {
    "min": MIN_MAX_RANGE,
    "max": MIN_MAX_RANGE,
    "length": LENGTH_RANGE,
}


class FieldType(str, Enum):
    """Kinds of column the service can generate."""

    INT = "int"
    DOUBLE = "double"
    STRING = "string"
    NAME = "name"


_PARAM_KEYS = {
    FieldType.INT: ("min", "max"),
    FieldType.DOUBLE: ("min", "max"),
    FieldType.STRING: ("length",),
    FieldType.NAME: (),
}


class ValidationError(ValueError):
    """Raised when a request is not fit to be sent."""

    title = "Input Error"


def default_params(field_type: FieldType | str) -> dict[str, int]:
    """Return the initial parameters for a field of the given type."""
    kind = FieldType(field_type)
    if kind in (FieldType.INT, FieldType.DOUBLE):
        return {"min": 1, "max": 100}
    if kind is FieldType.STRING:
        return {"length": 10}
    return {}


def _clamp(key: str, value: Any) -> int:
    low, high = _PARAM_RANGES[key]
    return max(low, min(high, int(value)))


@dataclasses.dataclass
class Field:
    """One column of the generated table."""

    name: str = ""
    type: FieldType = FieldType.INT
    params: dict[str, int] | None = None

    def __post_init__(self) -> None:
        self.type = FieldType(self.type)
        if self.params is None:
            self.params = default_params(self.type)

    def set_type(self, field_type: FieldType | str) -> None:
        """Change the type; parameters are reset when the type changes."""
        kind = FieldType(field_type)
        if kind is self.type:
            return
        self.type = kind
        self.params = default_params(kind)

    def to_json(self) -> dict[str, Any]:
        """Return the field as it appears in the request body."""
        body: dict[str, Any] = {"name": self.name, "type": self.type.value}
        if self.type is FieldType.NAME:
            return body
        keys = _PARAM_KEYS[self.type]
        params = self.params or {}
        if all(key in params for key in keys):
            body["params"] = {key: str(_clamp(key, params[key])) for key in keys}
        else:
            body["params"] = {}
        return body


@dataclasses.dataclass
class GenerationRequest:
    """Everything the service needs to generate one table."""

    table_name: str = "users"
    rows: int = 10
    output_file: str = "output.csv"
    fields: list[Field] = dataclasses.field(default_factory=list)

    def validate(self) -> None:
        """Raise ValidationError for the first problem found."""
        if not self.table_name:
            raise ValidationError("Table name cannot be empty.")
        if not self.fields:
            raise ValidationError("At least one field is required.")
        for row, field in enumerate(self.fields, start=1):
            if not field.name:
                raise ValidationError(f"Field name in row {row} cannot be empty.")

    def to_json(self) -> dict[str, Any]:
        """Return the request body as a JSON-ready dictionary."""
        low, high = ROWS_RANGE
        return {
            "table_name": self.table_name,
            "rows": max(low, min(high, int(self.rows))),
            "output_file": self.output_file,
            "fields": [field.to_json() for field in self.fields],
        }