"""
Language-specific emitters.

This module contains emitters for different target languages.
"""

from .python import PythonEmitter, create_python_emitter
from .typescript import TypeScriptEmitter, create_typescript_emitter

__all__ = [
    "PythonEmitter",
    "TypeScriptEmitter",
    "create_python_emitter",
    "create_typescript_emitter",
]
