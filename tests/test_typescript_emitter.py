"""Tests for the TypeScript emitter."""

import io

import pytest

from json_codegen import generate_from_documents
from json_codegen.core.config import EmitterConfig, load_config
from json_codegen.core.descriptors import Array, Struct
from json_codegen.core.emitter import EmitterError
from json_codegen.core.encoder import StructuralError
from json_codegen.core.naming import NamePath, Segment
from json_codegen.languages.typescript import (
    TypeScriptEmitter,
    create_typescript_emitter,
)


def generate(*documents, **config):
    result = generate_from_documents(list(documents), "typescript", config)
    assert result.success, result.error_message
    return result.code


class TestPrimitives:
    def test_primitive_names(self):
        emitter = TypeScriptEmitter()

        assert emitter.primitive_empty() == "any"
        assert emitter.primitive_null() == "null"
        assert emitter.primitive_boolean() == "boolean"
        assert emitter.primitive_number() == "number"
        assert emitter.primitive_string() == "string"

    def test_primitive_root_writes_nothing(self):
        assert generate({"type": "string"}) == ""


class TestDeclarations:
    def test_array_of_strings(self):
        assert generate({"elements": {"type": "string"}}) == (
            "export type Default = string[];\n\n"
        )

    def test_generic_array_style(self):
        code = generate({"elements": {}}, custom={"array_style": "generic"})

        assert code == "export type Default = Array<any>;\n\n"

    def test_struct_lists_required_then_optional(self):
        code = generate(
            {
                "optionalProperties": {"age": {"type": "number"}},
                "properties": {"name": {"type": "string"}},
            }
        )

        assert code == (
            "export interface Default {\n"
            "  name: string;\n"
            "  age?: number;\n"
            "}\n\n"
        )

    def test_empty_struct(self):
        assert generate({"properties": {}}) == "export interface Default {\n}\n\n"

    def test_values(self):
        assert generate({"values": {"type": "boolean"}}) == (
            "export interface Default {\n"
            "  [key: string]: boolean;\n"
            "}\n\n"
        )

    def test_keys_that_are_not_identifiers_are_quoted(self):
        code = generate(
            {"properties": {"first-name": {"type": "string"}, "$ok": {"type": "null"}}}
        )

        assert '  "first-name": string;\n' in code
        assert "  $ok: null;\n" in code

    def test_nested_types_come_before_their_parent(self):
        code = generate(
            {
                "properties": {
                    "tags": {"elements": {"type": "string"}},
                    "meta": {"values": {}},
                }
            }
        )

        assert code == (
            "export type DefaultTags = string[];\n\n"
            "export interface DefaultMeta {\n"
            "  [key: string]: any;\n"
            "}\n\n"
            "export interface Default {\n"
            "  tags: DefaultTags;\n"
            "  meta: DefaultMeta;\n"
            "}\n\n"
        )


class TestDiscriminator:
    def test_variants_then_union(self):
        code = generate(
            {
                "discriminator": {
                    "propertyName": "type",
                    "mapping": {"a": {"properties": {}}, "b": {"properties": {}}},
                }
            }
        )

        assert code == (
            "export interface DefaultVariantA {\n"
            '  type: "a";\n'
            "}\n\n"
            "export interface DefaultVariantB {\n"
            '  type: "b";\n'
            "}\n\n"
            "export type Default =\n"
            "  | DefaultVariantA\n"
            "  | DefaultVariantB;\n\n"
        )

    def test_shared_properties_appear_in_every_variant(self):
        code = generate(
            {
                "discriminator": {
                    "propertyName": "kind",
                    "mapping": {"x": {"properties": {}}, "y": {"properties": {}}},
                },
                "properties": {"id": {"type": "string"}},
            }
        )

        assert code.count("  id: string;\n") == 2

    def test_tag_value_is_escaped(self):
        code = generate(
            {
                "discriminator": {
                    "propertyName": "event-type",
                    "mapping": {'say "hi"': {"properties": {}}},
                }
            }
        )

        assert '  "event-type": "say \\"hi\\"";\n' in code

    def test_empty_mapping_is_never(self):
        code = generate({"discriminator": {"propertyName": "t", "mapping": {}}})

        assert code == "export type Default = never;\n\n"

    def test_non_struct_mapping_entry_fails_without_output(self):
        result = generate_from_documents(
            [
                {
                    "discriminator": {
                        "propertyName": "t",
                        "mapping": {"a": {"properties": {}}, "b": {"elements": {}}},
                    }
                }
            ],
            "typescript",
        )

        assert not result.success
        assert isinstance(result.exception, StructuralError)
        assert result.exception.mapping_key == "b"
        assert result.code == ""


class TestNaming:
    def test_name_comes_from_schema_id(self):
        code = generate(
            {"id": "https://example.com/schemas/user.json", "properties": {}}
        )

        assert code == "export interface User {\n}\n\n"

    def test_root_name_override(self):
        code = generate({"id": "user.json", "properties": {}}, root_name="Account")

        assert code.startswith("export interface Account {")

    def test_colliding_names_get_a_suffix(self):
        code = generate(
            {
                "properties": {
                    "foo-bar": {"elements": {}},
                    "foo_bar": {"elements": {}},
                }
            }
        )

        assert "export type DefaultFooBar = any[];" in code
        assert "export type DefaultFooBar_1 = any[];" in code
        assert "  foo_bar: DefaultFooBar_1;\n" in code

    def test_builtin_names_are_avoided(self):
        code = generate({"elements": {}}, root_name="Array")

        assert code == "export type Array_ = any[];\n\n"

    def test_two_roots_without_id_are_both_declared(self):
        code = generate(
            {"properties": {"a": {"type": "string"}}},
            {"properties": {"b": {"type": "number"}}},
        )

        assert code == (
            "export interface Default {\n  a: string;\n}\n\n"
            "export interface Default_1 {\n  b: number;\n}\n\n"
        )

    def test_invalid_type_case_on_a_direct_config(self):
        emitter = TypeScriptEmitter(EmitterConfig(type_case="kebab"))

        with pytest.raises(EmitterError, match="Invalid type_case"):
            emitter.type_name(NamePath())

    def test_runs_are_deterministic(self):
        emitter = TypeScriptEmitter()
        path = NamePath("user.json", [Segment.elements()])

        first = emitter.type_name(path)
        emitter.reset()

        assert emitter.type_name(path) == first == "UserElement"


class TestOptions:
    def test_no_export(self):
        assert generate({"elements": {}}, export_types=False) == (
            "type Default = any[];\n\n"
        )

    def test_comments_name_the_source_position(self):
        code = generate(
            {"id": "pets.json", "properties": {"tags": {"elements": {}}}},
            add_comments=True,
        )

        assert "// Generated from pets.json at tags\nexport type PetsTags" in code
        assert "// Generated from pets.json\nexport interface Pets {" in code

    def test_tab_indentation(self):
        code = generate({"properties": {"a": {}}}, use_tabs=True)

        assert "\ta: any;\n" in code

    @pytest.mark.parametrize("indent_size", [2, 4])
    def test_indent_size(self, indent_size):
        code = generate({"properties": {"a": {}}}, indent_size=indent_size)

        assert f"\n{' ' * indent_size}a: any;\n" in code


class TestEmitterDirect:
    def test_emit_returns_name_and_writes_block(self):
        emitter = TypeScriptEmitter(load_config("typescript"))
        out = io.StringIO()

        name = emitter.emit_array(out, Array(NamePath("list.json"), "number"))

        assert name == "List"
        assert out.getvalue() == "export type List = number[];\n\n"

    def test_struct_from_descriptor(self):
        emitter = create_typescript_emitter({"export_types": False})
        out = io.StringIO()

        emitter.emit_struct(out, Struct(NamePath(), {"a": "string"}, {"b": "null"}))

        assert out.getvalue() == "interface Default {\n  a: string;\n  b?: null;\n}\n\n"

    def test_metadata(self):
        emitter = TypeScriptEmitter()

        assert emitter.language_name == "typescript"
        assert emitter.file_extension == ".ts"
        assert emitter.template_exists("union.ts.j2")
