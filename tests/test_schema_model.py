"""Tests for the schema model: construction, parsing and JSON Schema export."""

import jsonschema
import pytest
from pydantic import ValidationError as SchemaDefinitionError

from shapecheck.schemas.nodes import (
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    SchemaKind,
    StringSchema,
    parse_schema,
    to_json_schema,
)
from shapecheck.services.validation import validate


def test_kind_accessor():
    assert StringSchema().kind == SchemaKind.STRING
    assert NumberSchema().kind == SchemaKind.NUMBER
    assert BooleanSchema().kind == SchemaKind.BOOLEAN
    assert ObjectSchema(properties={}).kind == SchemaKind.OBJECT
    assert ArraySchema(items=NumberSchema()).kind == SchemaKind.ARRAY


def test_nodes_are_frozen():
    node = StringSchema(enum=["a"])
    with pytest.raises(SchemaDefinitionError):
        node.enum = ("b",)


def test_object_properties_are_read_only():
    """Neither the node nor the dict it was built from can change its properties."""
    source = {"name": StringSchema()}
    schema = ObjectSchema(properties=source)

    with pytest.raises(TypeError):
        schema.properties["extra"] = NumberSchema()
    source["extra"] = NumberSchema()

    assert set(schema.properties) == {"name"}
    assert validate({"extra": 1}, schema) is not None
    assert ObjectSchema().properties == {}


def test_object_schema_dumps_properties_as_plain_dict():
    schema = ObjectSchema(properties={"n": NumberSchema()})
    assert schema.model_dump() == {
        "type": "object",
        "properties": {"n": {"type": "number"}},
        "required": None,
    }
    assert parse_schema(schema.model_dump()) == schema


def test_shared_subschema():
    """The same node can appear at several places in a tree."""
    name = StringSchema()
    schema = ObjectSchema(properties={"first": name, "last": name})
    assert schema.properties["first"] is schema.properties["last"]
    assert validate({"first": "Ada", "last": "Lovelace"}, schema) is None


def test_parse_schema_from_interchange_data():
    schema = parse_schema(
        {
            "type": "object",
            "properties": {
                "tags": {"type": "array", "items": {"type": "string", "enum": ["x", "y"]}},
                "count": {"type": "number"},
            },
            "required": ["count"],
        }
    )
    assert isinstance(schema, ObjectSchema)
    assert schema.required == frozenset({"count"})
    assert isinstance(schema.properties["tags"], ArraySchema)
    assert schema.properties["tags"].items.enum == ("x", "y")


@pytest.mark.parametrize(
    "data",
    [
        {"type": "integer"},
        {"kind": "string"},
        {"type": "string", "pattern": "^a"},
        {"type": "string", "enum": [1, 2]},
        {"type": "object", "properties": {"a": "string"}},
        {"type": "array"},
        "string",
    ],
)
def test_parse_schema_rejects_malformed_schemas(data):
    with pytest.raises(SchemaDefinitionError):
        parse_schema(data)


def test_json_schema_export_shape():
    schema = ObjectSchema(
        properties={"color": StringSchema(enum=["red"]), "n": NumberSchema()},
        required=["n"],
    )
    assert to_json_schema(schema) == {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "type": "object",
        "properties": {
            "color": {"type": "string", "enum": ["red"]},
            "n": {"type": "number"},
        },
        "additionalProperties": False,
        "required": ["n"],
    }


ORDER = ObjectSchema(
    properties={
        "id": StringSchema(),
        "paid": BooleanSchema(),
        "lines": ArraySchema(
            items=ObjectSchema(
                properties={"sku": StringSchema(), "qty": NumberSchema()},
                required=["sku"],
            )
        ),
        "status": StringSchema(enum=["open", "closed"]),
    },
    required=["id"],
)


@pytest.mark.parametrize(
    "value",
    [
        {"id": "o-1"},
        {"id": "o-1", "paid": True, "status": "open", "lines": [{"sku": "A", "qty": 2}]},
        {"id": "o-1", "paid": 1},
        {"id": "o-1", "status": "pending"},
        {"id": "o-1", "lines": [{"qty": 2}]},
        {"id": "o-1", "lines": [{"sku": "A", "qty": "2"}]},
        {"id": "o-1", "note": "extra"},
        {"paid": False},
        [],
        "o-1",
    ],
)
def test_export_agrees_with_jsonschema(value):
    """Our verdict matches a draft-07 validator run on the exported schema."""
    checker = jsonschema.Draft7Validator(to_json_schema(ORDER))
    assert (validate(value, ORDER) is None) == checker.is_valid(value)
