"""
Python emitter implementation.

Generates ``typing`` based declarations: TypedDict classes for structs and
union variants, and type aliases for arrays, dictionaries and unions.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO, Tuple

from ...core.config import EmitterConfig, load_config
from ...core.descriptors import Array, Struct, Union, Values, Variant
from ...core.emitter import Emitter
from ...core.naming import NamePath, NameSanitizer
from .naming import (
    TYPING_EXTENSIONS_IMPORTS,
    TYPING_IMPORTS,
    create_python_sanitizer,
    is_attribute_name,
)


class PythonEmitter(Emitter):
    """Emitter for Python TypedDicts and type aliases."""

    def __init__(self, config: Optional[EmitterConfig] = None):
        super().__init__(config)
        self.alias_style = self.config.custom.get("alias_style", "assignment")
        self.typing_module = self.config.custom.get("typing_module", "typing")

    @property
    def language_name(self) -> str:
        return "python"

    @property
    def file_extension(self) -> str:
        return ".py"

    def get_template_directory(self) -> Path:
        """Return the Python templates directory."""
        return Path(__file__).parent / "templates"

    def create_sanitizer(self) -> NameSanitizer:
        return create_python_sanitizer()

    def prelude(self) -> str:
        context = {
            "imports": self._imports(),
            "comment": "Generated by json-codegen" if self.config.add_comments else None,
        }
        return self.render_template("prelude.py.j2", context)

    def _imports(self) -> List[Tuple[str, List[str]]]:
        """Import lines as (module, names) pairs."""
        if self.typing_module != "typing_extensions":
            return [("typing", TYPING_IMPORTS)]

        typing_names = [n for n in TYPING_IMPORTS if n not in TYPING_EXTENSIONS_IMPORTS]
        return [
            ("typing", typing_names),
            ("typing_extensions", TYPING_EXTENSIONS_IMPORTS),
        ]

    def primitive_empty(self) -> str:
        return "Any"

    def primitive_null(self) -> str:
        return "None"

    def primitive_boolean(self) -> str:
        return "bool"

    def primitive_number(self) -> str:
        return "float"

    def primitive_string(self) -> str:
        return "str"

    def emit_array(self, out: TextIO, array: Array) -> str:
        return self._emit_alias(out, array.path, f"List[{array.elements}]")

    def emit_values(self, out: TextIO, values: Values) -> str:
        return self._emit_alias(out, values.path, f"Dict[str, {values.values}]")

    def emit_union(self, out: TextIO, union: Union) -> str:
        if union.variants:
            value = f"Union[{', '.join(union.variants)}]"
        else:
            value = "NoReturn"
        return self._emit_alias(out, union.path, value)

    def emit_struct(self, out: TextIO, struct: Struct) -> str:
        fields = self._fields(struct.required_properties, struct.optional_properties)
        return self._emit_typeddict(out, struct.path, fields)

    def emit_variant(self, out: TextIO, variant: Variant) -> str:
        tag = {
            "name": variant.tag_name,
            "type": f"Literal[{json.dumps(variant.tag_value, ensure_ascii=False)}]",
        }
        fields = [tag] + self._fields(
            variant.required_properties, variant.optional_properties
        )
        return self._emit_typeddict(out, variant.path, fields)

    def _emit_alias(self, out: TextIO, path: NamePath, value: str) -> str:
        context = self._context(path)
        context["value"] = value
        context["alias_style"] = self.alias_style
        self.write_block(out, self.render_template("alias.py.j2", context))
        return context["name"]

    def _emit_typeddict(
        self, out: TextIO, path: NamePath, fields: List[Dict[str, str]]
    ) -> str:
        context = self._context(path)
        context["fields"] = fields
        # Keys that are not identifiers need the functional syntax
        context["functional"] = not all(is_attribute_name(f["name"]) for f in fields)
        self.write_block(out, self.render_template("typeddict.py.j2", context))
        return context["name"]

    def _context(self, path: NamePath) -> Dict[str, Any]:
        comment = None
        if self.config.add_comments:
            comment = f"Generated from {path.schema_id or 'schema'}"
            if path.segments:
                comment += f" at {path}"

        return {
            "name": self.type_name(path),
            "indent": self.config.indent,
            "comment": comment,
        }

    def _fields(
        self, required: Dict[str, str], optional: Dict[str, str]
    ) -> List[Dict[str, str]]:
        fields = [{"name": key, "type": value} for key, value in required.items()]
        fields.extend(
            {"name": key, "type": f"NotRequired[{value}]"}
            for key, value in optional.items()
        )
        return fields


def create_python_emitter(config: Optional[Dict[str, Any]] = None) -> PythonEmitter:
    """Create a Python emitter from a dictionary of overrides."""
    return PythonEmitter(load_config("python", custom_config=config))
