"""
Schema model – the five node kinds a schema tree is built from.

Nodes are frozen pydantic models forming a closed tagged union. The tag
lives under the interchange key ``type`` (``{"type": "string"}``) and is
exposed as ``node.kind``. Construction is type-checked, so a malformed
tree fails when it is built rather than halfway through a validation.

Schemas are assumed to be acyclic; nodes may be shared freely between
trees since nothing ever mutates them.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_serializer, field_validator

JSON_SCHEMA_DRAFT7 = "http://json-schema.org/draft-07/schema#"


class SchemaKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"


class _SchemaBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def kind(self) -> SchemaKind:
        return SchemaKind(self.type)


class StringSchema(_SchemaBase):
    """Any string, or only the listed strings when ``enum`` is given."""

    type: Literal["string"] = "string"
    enum: tuple[str, ...] | None = None


class NumberSchema(_SchemaBase):
    type: Literal["number"] = "number"


class BooleanSchema(_SchemaBase):
    type: Literal["boolean"] = "boolean"


class ObjectSchema(_SchemaBase):
    """
    A closed object: data keys missing from ``properties`` are rejected.

    ``required`` names are checked against the data's keys only; a name that
    is not also declared in ``properties`` can never be satisfied.
    """

    type: Literal["object"] = "object"
    properties: Mapping[str, SchemaNode] = Field(default_factory=dict, validate_default=True)
    required: frozenset[str] | None = None

    @field_validator("properties", mode="after")
    @classmethod
    def _freeze_properties(cls, value):
        # read-only view over a private copy
        return MappingProxyType(dict(value))

    @field_serializer("properties", mode="wrap")
    def _dump_properties(self, value, handler):
        return handler(dict(value))


class ArraySchema(_SchemaBase):
    """A homogeneous array whose every element matches ``items``."""

    type: Literal["array"] = "array"
    items: SchemaNode


SchemaNode = Annotated[
    Union[StringSchema, NumberSchema, BooleanSchema, ObjectSchema, ArraySchema],
    Field(discriminator="type"),
]

ObjectSchema.model_rebuild()
ArraySchema.model_rebuild()

_schema_adapter: TypeAdapter[SchemaNode] = TypeAdapter(SchemaNode)


def parse_schema(data: Any) -> SchemaNode:
    """
    Build a schema tree from deserialized interchange data.
    Raises pydantic.ValidationError when the data is not a well-formed schema.
    """
    return _schema_adapter.validate_python(data)


def to_json_schema(node: SchemaNode) -> dict[str, Any]:
    """Render a schema tree as an equivalent JSON Schema (draft-07) document."""
    return {"$schema": JSON_SCHEMA_DRAFT7, **_export(node)}


def _export(node: SchemaNode) -> dict[str, Any]:
    if isinstance(node, ObjectSchema):
        document: dict[str, Any] = {
            "type": "object",
            "properties": {name: _export(sub) for name, sub in node.properties.items()},
            "additionalProperties": False,
        }
        if node.required:
            document["required"] = sorted(node.required)
        return document
    if isinstance(node, ArraySchema):
        return {"type": "array", "items": _export(node.items)}
    if isinstance(node, StringSchema) and node.enum is not None:
        return {"type": "string", "enum": list(node.enum)}
    return {"type": node.type}
