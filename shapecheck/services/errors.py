"""Error values produced by the validation engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

PathStep = Union[str, int]
Path = tuple[PathStep, ...]


class ErrorKind(str, Enum):
    TYPE_MISMATCH = "type_mismatch"
    ENUM_VIOLATION = "enum_violation"
    MISSING_REQUIRED_FIELD = "missing_required_field"
    UNKNOWN_PROPERTY = "unknown_property"
    DEPTH_EXCEEDED = "depth_exceeded"


@dataclass(frozen=True)
class ValidationError:
    """
    The first mismatch found in a value.

    ``path`` holds the property names and array indexes leading from the
    root value to the offending one.
    """

    kind: ErrorKind
    expected: str
    actual: str
    path: Path = ()
    detail: str | None = None

    @property
    def location(self) -> str:
        return format_path(self.path)

    @property
    def message(self) -> str:
        text = f"{self.location}: expected {self.expected}, got {self.actual}"
        if self.detail:
            text = f"{text} ({self.detail})"
        return text

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "expected": self.expected,
            "actual": self.actual,
            "path": list(self.path),
            "location": self.location,
            "message": self.message,
            "detail": self.detail,
        }

    def __str__(self) -> str:
        return self.message


class SchemaViolation(ValueError):
    """Raised by ``assert_valid`` when a value does not match its schema."""

    def __init__(self, error: ValidationError):
        super().__init__(error.message)
        self.error = error


def format_path(path: Path) -> str:
    """Render a path the way it would be written in code: ``items[2].name``."""
    location = ""
    for step in path:
        if isinstance(step, int):
            location += f"[{step}]"
        else:
            location += f".{step}" if location else step
    return location or "<root>"


def type_name(value: Any) -> str:
    """Name a runtime value by its schema vocabulary: ``number``, ``object`` and so on."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    if value is None:
        return "null"
    return type(value).__name__
