"""
Python-specific naming utilities and sanitization.

Handles Python keywords, builtins, and the typing names the generated
module imports.
"""

import builtins
import keyword

from ...core.naming import NameSanitizer

PYTHON_RESERVED_WORDS = set(keyword.kwlist) | set(keyword.softkwlist)

# Names imported by the generated module
TYPING_IMPORTS = [
    "Any",
    "Dict",
    "List",
    "Literal",
    "NoReturn",
    "NotRequired",
    "TypedDict",
    "Union",
]

# Imported from typing_extensions for generated code that runs before Python 3.11
TYPING_EXTENSIONS_IMPORTS = ["NotRequired", "TypedDict"]

PYTHON_BUILTIN_TYPES = set(dir(builtins)) | set(TYPING_IMPORTS)


def create_python_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Python."""
    return NameSanitizer(PYTHON_RESERVED_WORDS, PYTHON_BUILTIN_TYPES)


def is_attribute_name(name: str) -> bool:
    """Whether ``name`` can be declared with class-based TypedDict syntax."""
    return name.isidentifier() and not keyword.iskeyword(name)
