"""
Schema validation engine.

Walks a value and a schema tree together, dispatching on the schema node's
kind at every level. The schema alone decides which check runs; the shape
of the value is never used to guess one.

Validation is fail-fast: the first mismatch is returned as a
ValidationError and nothing past it is inspected. The engine keeps no
state between calls and never mutates its inputs.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, Union

from shapecheck.config import normalize_max_depth, settings
from shapecheck.schemas.nodes import (
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    SchemaKind,
    SchemaNode,
    StringSchema,
)
from shapecheck.services.errors import (
    ErrorKind,
    Path,
    SchemaViolation,
    ValidationError,
    type_name,
)

logger = logging.getLogger(__name__)


class _Default(Enum):
    # take the depth limit from settings
    CONFIGURED = "configured"


_CONFIGURED = _Default.CONFIGURED
DepthLimit = Union[int, None, _Default]


def validate(
    value: Any,
    schema: SchemaNode,
    *,
    max_depth: DepthLimit = _CONFIGURED,
) -> ValidationError | None:
    """
    Validate a value against a schema tree.
    Returns None when the value conforms, otherwise the first mismatch found.

    ``max_depth`` bounds how many levels below the root are visited; None
    or a value of 0 or below disables the guard. Defaults to
    ``VALIDATION_MAX_DEPTH``, read the same way.
    """
    if max_depth is _CONFIGURED:
        limit = settings.max_depth
    else:
        limit = normalize_max_depth(max_depth)
    error = _validate_node(value, schema, (), limit)
    if error is not None:
        logger.debug("Validation failed at %s: %s", error.location, error.kind.value)
    return error


def assert_valid(value: Any, schema: SchemaNode, *, max_depth: DepthLimit = _CONFIGURED) -> None:
    """Like validate(), but raises SchemaViolation instead of returning the error."""
    error = validate(value, schema, max_depth=max_depth)
    if error is not None:
        raise SchemaViolation(error)


def _validate_node(
    value: Any, schema: SchemaNode, path: Path, max_depth: int | None
) -> ValidationError | None:
    if max_depth is not None and len(path) > max_depth:
        return ValidationError(
            kind=ErrorKind.DEPTH_EXCEEDED,
            expected=f"at most {max_depth} levels of nesting",
            actual=f"{len(path)} levels",
            path=path,
        )
    check = _CHECKS[schema.kind]
    return check(value, schema, path, max_depth)


def _type_mismatch(value: Any, schema: SchemaNode, path: Path) -> ValidationError:
    return ValidationError(
        kind=ErrorKind.TYPE_MISMATCH,
        expected=schema.kind.value,
        actual=type_name(value),
        path=path,
    )


# ---------------------------------------------------------------------------
# Per-kind checks
# ---------------------------------------------------------------------------


def _check_string(
    value: Any, schema: StringSchema, path: Path, max_depth: int | None
) -> ValidationError | None:
    if not isinstance(value, str):
        return _type_mismatch(value, schema, path)
    if schema.enum is not None and value not in schema.enum:
        return ValidationError(
            kind=ErrorKind.ENUM_VIOLATION,
            expected=f"one of {list(schema.enum)}",
            actual="string",
            path=path,
            detail=f"{value!r} is not an allowed value",
        )
    return None


def _check_number(
    value: Any, schema: NumberSchema, path: Path, max_depth: int | None
) -> ValidationError | None:
    # bool is an int subclass but never a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return _type_mismatch(value, schema, path)
    return None


def _check_boolean(
    value: Any, schema: BooleanSchema, path: Path, max_depth: int | None
) -> ValidationError | None:
    if not isinstance(value, bool):
        return _type_mismatch(value, schema, path)
    return None


def _check_object(
    value: Any, schema: ObjectSchema, path: Path, max_depth: int | None
) -> ValidationError | None:
    if not isinstance(value, Mapping):
        return _type_mismatch(value, schema, path)

    # Presence of required names is decided on the data's keys, before any
    # per-key schema lookup.
    if schema.required:
        for name in sorted(schema.required):
            if name not in value:
                return ValidationError(
                    kind=ErrorKind.MISSING_REQUIRED_FIELD,
                    expected="required property",
                    actual="missing",
                    path=path + (name,),
                    detail=f"required property {name!r} is absent",
                )

    for key, item in value.items():
        step = key if isinstance(key, str) else repr(key)
        sub_schema = schema.properties.get(key) if isinstance(key, str) else None
        if sub_schema is None:
            return ValidationError(
                kind=ErrorKind.UNKNOWN_PROPERTY,
                expected="declared property",
                actual=type_name(item),
                path=path + (step,),
                detail=f"property {step!r} is not declared by the schema",
            )
        error = _validate_node(item, sub_schema, path + (step,), max_depth)
        if error is not None:
            return error
    return None


def _check_array(
    value: Any, schema: ArraySchema, path: Path, max_depth: int | None
) -> ValidationError | None:
    if not isinstance(value, (list, tuple)):
        return _type_mismatch(value, schema, path)
    for index, item in enumerate(value):
        error = _validate_node(item, schema.items, path + (index,), max_depth)
        if error is not None:
            return error
    return None


_CHECKS: dict[SchemaKind, Callable[[Any, Any, Path, int | None], ValidationError | None]] = {
    SchemaKind.STRING: _check_string,
    SchemaKind.NUMBER: _check_number,
    SchemaKind.BOOLEAN: _check_boolean,
    SchemaKind.OBJECT: _check_object,
    SchemaKind.ARRAY: _check_array,
}
