"""
TypeScript emitter implementation.

Renders arrays and unions as type aliases, and structs, dictionaries and
union variants as interfaces.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from ...core.config import EmitterConfig, load_config
from ...core.descriptors import Array, Struct, Union, Values, Variant
from ...core.emitter import Emitter
from ...core.naming import NamePath, NameSanitizer
from .naming import create_typescript_sanitizer, is_identifier


class TypeScriptEmitter(Emitter):
    """Emitter for TypeScript interfaces and type aliases."""

    def __init__(self, config: Optional[EmitterConfig] = None):
        super().__init__(config)
        self.array_style = self.config.custom.get("array_style", "brackets")

    @property
    def language_name(self) -> str:
        return "typescript"

    @property
    def file_extension(self) -> str:
        return ".ts"

    def get_template_directory(self) -> Path:
        """Return the TypeScript templates directory."""
        return Path(__file__).parent / "templates"

    def create_sanitizer(self) -> NameSanitizer:
        return create_typescript_sanitizer()

    def primitive_empty(self) -> str:
        return "any"

    def primitive_null(self) -> str:
        return "null"

    def primitive_boolean(self) -> str:
        return "boolean"

    def primitive_number(self) -> str:
        return "number"

    def primitive_string(self) -> str:
        return "string"

    def emit_array(self, out: TextIO, array: Array) -> str:
        context = self._context(array.path)
        context["elements"] = array.elements
        context["array_style"] = self.array_style
        return self._emit(out, "array.ts.j2", context)

    def emit_struct(self, out: TextIO, struct: Struct) -> str:
        context = self._context(struct.path)
        context["properties"] = self._properties(
            struct.required_properties, struct.optional_properties
        )
        return self._emit(out, "struct.ts.j2", context)

    def emit_values(self, out: TextIO, values: Values) -> str:
        context = self._context(values.path)
        context["values"] = values.values
        return self._emit(out, "values.ts.j2", context)

    def emit_variant(self, out: TextIO, variant: Variant) -> str:
        context = self._context(variant.path)
        context["tag_name"] = self._property_key(variant.tag_name)
        context["tag_value"] = variant.tag_value
        context["properties"] = self._properties(
            variant.required_properties, variant.optional_properties
        )
        return self._emit(out, "variant.ts.j2", context)

    def emit_union(self, out: TextIO, union: Union) -> str:
        context = self._context(union.path)
        context["variants"] = list(union.variants)
        return self._emit(out, "union.ts.j2", context)

    def _emit(self, out: TextIO, template_name: str, context: Dict[str, Any]) -> str:
        self.write_block(out, self.render_template(template_name, context))
        return context["name"]

    def _context(self, path: NamePath) -> Dict[str, Any]:
        """Template variables shared by every declaration."""
        return {
            "name": self.type_name(path),
            "export": "export " if self.config.export_types else "",
            "indent": self.config.indent,
            "comment": self._comment(path),
        }

    def _comment(self, path: NamePath) -> Optional[str]:
        if not self.config.add_comments:
            return None
        source = path.schema_id or "schema"
        if path.segments:
            return f"Generated from {source} at {path}"
        return f"Generated from {source}"

    def _properties(
        self, required: Dict[str, str], optional: Dict[str, str]
    ) -> List[Dict[str, Any]]:
        """Interface members: required ones first, each group in schema order."""
        members = []
        for key, type_name in required.items():
            members.append(
                {"name": self._property_key(key), "type": type_name, "optional": False}
            )
        for key, type_name in optional.items():
            members.append(
                {"name": self._property_key(key), "type": type_name, "optional": True}
            )
        return members

    def _property_key(self, key: str) -> str:
        return key if is_identifier(key) else json.dumps(key, ensure_ascii=False)


def create_typescript_emitter(config: Optional[Dict[str, Any]] = None) -> TypeScriptEmitter:
    """Create a TypeScript emitter from a dictionary of overrides."""
    return TypeScriptEmitter(load_config("typescript", custom_config=config))
