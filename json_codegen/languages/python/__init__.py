"""
Python emitter module.

Generates TypedDict classes and typing aliases from json-validate schemas.
"""

from .emitter import PythonEmitter, create_python_emitter
from .naming import create_python_sanitizer

__all__ = [
    "PythonEmitter",
    "create_python_emitter",
    "create_python_sanitizer",
]
