"""
TypeScript-specific naming utilities and sanitization.

Handles TypeScript reserved words and the global types a generated
declaration must not shadow.
"""

import re

from ...core.naming import NameSanitizer

TYPESCRIPT_RESERVED_WORDS = {
    "any",
    "as",
    "bigint",
    "boolean",
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "declare",
    "default",
    "delete",
    "do",
    "else",
    "enum",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "implements",
    "import",
    "in",
    "instanceof",
    "interface",
    "let",
    "never",
    "new",
    "null",
    "number",
    "object",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "static",
    "string",
    "super",
    "switch",
    "symbol",
    "this",
    "throw",
    "true",
    "try",
    "type",
    "typeof",
    "undefined",
    "unknown",
    "var",
    "void",
    "while",
    "with",
    "yield",
}

# Global types and utility types
TYPESCRIPT_BUILTIN_TYPES = {
    "Array",
    "Boolean",
    "Date",
    "Error",
    "Exclude",
    "Extract",
    "Function",
    "Map",
    "Number",
    "Object",
    "Omit",
    "Partial",
    "Pick",
    "Promise",
    "Readonly",
    "Record",
    "RegExp",
    "Required",
    "ReturnType",
    "Set",
    "String",
    "Symbol",
}

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def create_typescript_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for TypeScript."""
    return NameSanitizer(TYPESCRIPT_RESERVED_WORDS, TYPESCRIPT_BUILTIN_TYPES)


def is_identifier(name: str) -> bool:
    """Whether ``name`` can be used as a property key without quotes."""
    return bool(_IDENTIFIER.match(name))
