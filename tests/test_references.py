"""Tests for model placeholder resolution."""

import pytest

from serverless_openapi_docs.references import parse_placeholder, resolve_placeholders


@pytest.mark.parametrize(
    "value, expected",
    [
        ("{{model: Pet}}", "Pet"),
        ("{{model:Pet}}", "Pet"),
        ("{{ model: Pet-Owner }}", "Pet-Owner"),
        ("Pet", None),
        ("#/components/schemas/Pet", None),
        ("{{model: }}", None),
        (42, None),
        (None, None),
    ],
)
def test_parse_placeholder(value, expected):
    assert parse_placeholder(value) == expected


def test_ref_placeholder_becomes_pointer():
    schema = {"type": "array", "items": {"$ref": "{{model: Pet}}"}}

    assert resolve_placeholders(schema) == {
        "type": "array",
        "items": {"$ref": "#/components/schemas/Pet"},
    }


def test_nested_placeholders():
    schema = {
        "type": "object",
        "properties": {
            "owner": {"$ref": "{{model: Owner}}"},
            "tags": {"type": "array", "items": {"$ref": "{{model: Tag}}"}},
        },
        "allOf": [{"$ref": "{{model: Base}}"}, {"required": ["owner"]}],
    }

    result = resolve_placeholders(schema)

    assert result["properties"]["owner"] == {"$ref": "#/components/schemas/Owner"}
    assert result["properties"]["tags"]["items"] == {"$ref": "#/components/schemas/Tag"}
    assert result["allOf"] == [{"$ref": "#/components/schemas/Base"}, {"required": ["owner"]}]


def test_bare_placeholder_becomes_reference_object():
    schema = {"type": "array", "items": "{{model: Pet}}", "oneOf": ["{{model: Cat}}"]}

    assert resolve_placeholders(schema) == {
        "type": "array",
        "items": {"$ref": "#/components/schemas/Pet"},
        "oneOf": [{"$ref": "#/components/schemas/Cat"}],
    }


def test_other_references_untouched():
    schema = {"items": {"$ref": "http://external/Foo"}, "description": "see {{model: Foo}} docs"}

    assert resolve_placeholders(schema) == schema


def test_input_not_modified():
    schema = {"properties": {"id": {"$ref": "{{model: Id}}"}}}

    result = resolve_placeholders(schema)

    assert schema == {"properties": {"id": {"$ref": "{{model: Id}}"}}}
    assert result is not schema
