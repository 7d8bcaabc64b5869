"""Tests for converting schema documents and building registries."""

import pytest

from json_codegen.core.schema import (
    Registry,
    Schema,
    SchemaError,
    SchemaKind,
    SchemaType,
    parse_schema,
)


class TestParseSchema:
    def test_empty_schema(self):
        assert parse_schema({}).kind == SchemaKind.EMPTY

    @pytest.mark.parametrize("type_name", ["null", "boolean", "number", "string"])
    def test_type_form(self, type_name):
        schema = parse_schema({"type": type_name})

        assert schema.kind == SchemaKind.TYPE
        assert schema.type == SchemaType(type_name)

    def test_elements_form(self):
        schema = parse_schema({"elements": {"type": "string"}})

        assert schema.kind == SchemaKind.ELEMENTS
        assert schema.elements.type == SchemaType.STRING

    def test_values_form(self):
        schema = parse_schema({"values": {}})

        assert schema.kind == SchemaKind.VALUES
        assert schema.values.kind == SchemaKind.EMPTY

    def test_properties_form_keeps_document_order(self):
        schema = parse_schema(
            {
                "properties": {"z": {"type": "string"}, "a": {"type": "number"}},
                "optionalProperties": {"m": {}},
            }
        )

        assert schema.kind == SchemaKind.PROPERTIES
        assert list(schema.properties) == ["z", "a"]
        assert list(schema.optional_properties) == ["m"]

    def test_optional_properties_alone_is_properties_form(self):
        schema = parse_schema({"optionalProperties": {"a": {}}})

        assert schema.kind == SchemaKind.PROPERTIES
        assert schema.properties == {}

    def test_discriminator_form_with_shared_properties(self):
        schema = parse_schema(
            {
                "discriminator": {
                    "propertyName": "kind",
                    "mapping": {
                        "b": {"properties": {}},
                        "a": {"elements": {}},
                    },
                },
                "properties": {"id": {"type": "string"}},
            }
        )

        assert schema.kind == SchemaKind.DISCRIMINATOR
        assert schema.discriminator_property_name == "kind"
        assert list(schema.discriminator_mapping) == ["b", "a"]
        # Mapping entries are not restricted here
        assert schema.discriminator_mapping["a"].kind == SchemaKind.ELEMENTS
        assert list(schema.properties) == ["id"]

    def test_id_and_default_id(self):
        assert parse_schema({"id": "user.json"}, default_id="x").id == "user.json"
        assert parse_schema({}, default_id="x").id == "x"
        assert parse_schema({}).id is None

    @pytest.mark.parametrize(
        ("document", "message"),
        [
            ([], "must be a JSON object"),
            ({"type": "integer"}, "unknown type"),
            ({"type": "string", "elements": {}}, "mixes forms"),
            ({"ref": "other"}, "unsupported keywords: ref"),
            ({"elements": 1}, "#/elements: schema must be a JSON object"),
            ({"properties": []}, "#/properties: must be a JSON object"),
            ({"discriminator": {"mapping": {}}}, "propertyName"),
            ({"discriminator": {"propertyName": "t"}}, "mapping"),
            ({"id": 3}, "id: must be a string"),
            (
                {"properties": {"a": {}}, "optionalProperties": {"a": {}}},
                "both required and optional: a",
            ),
        ],
    )
    def test_malformed_documents(self, document, message):
        with pytest.raises(SchemaError, match=message):
            parse_schema(document)

    def test_error_location_points_into_tree(self):
        with pytest.raises(SchemaError, match="#/properties/pets/elements/type"):
            parse_schema({"properties": {"pets": {"elements": {"type": "cat"}}}})


class TestRegistry:
    def test_from_documents_keeps_order_and_fallback_ids(self):
        registry = Registry.from_documents(
            [{"id": "a"}, {"type": "string"}], ids=["first.json", "second.json"]
        )

        assert [schema.id for schema in registry] == ["a", "second.json"]
        assert len(registry) == 2
        assert registry.get("second.json").kind == SchemaKind.TYPE
        assert registry.get("missing") is None

    def test_duplicate_ids_are_rejected(self):
        with pytest.raises(SchemaError, match="Duplicate schema id: a"):
            Registry.from_documents([{"id": "a"}, {"id": "a"}])

    def test_anonymous_roots_are_allowed(self):
        registry = Registry([Schema.empty(), Schema.empty()])

        assert len(registry) == 2

    def test_ids_must_match_documents(self):
        with pytest.raises(SchemaError):
            Registry.from_documents([{}], ids=[])
