"""
TypeScript emitter module.

Generates TypeScript interfaces and type aliases from json-validate schemas.
"""

from .emitter import TypeScriptEmitter, create_typescript_emitter
from .naming import create_typescript_sanitizer

__all__ = [
    "TypeScriptEmitter",
    "create_typescript_emitter",
    "create_typescript_sanitizer",
]
