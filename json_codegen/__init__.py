"""
json-codegen: generate type definitions from JSON Validate schemas.

The encoder walks every schema in a registry and hands each composite
type to a language emitter, children before parents.
"""

__version__ = "0.1.0"

from .core.config import ConfigManager, EmitterConfig, load_config
from .core.emitter import Emitter, EmitterError, GeneratorError
from .core.encoder import Encoder, GenerationResult, StructuralError, generate_code
from .core.schema import Registry, Schema, SchemaError, SchemaKind, SchemaType, parse_schema
from .registry import (
    EmitterRegistry,
    RegistryError,
    get_emitter,
    get_registry,
    list_supported_languages,
    register_emitter,
)


def generate_from_documents(documents, language="typescript", config=None):
    """
    Generate code from parsed schema documents.

    Args:
        documents: JSON Validate schema documents (dicts), in registry order
        language: Target language name or alias
        config: Emitter configuration, dict of overrides, or config file path

    Returns:
        GenerationResult with generated code
    """
    registry = Registry.from_documents(documents)
    emitter = get_emitter(language, config)
    return generate_code(registry, emitter)


def quick_generate(document, language="typescript", **options):
    """
    Quick code generation from a single schema document.

    Args:
        document: Schema document (dict or JSON string)
        language: Target language
        **options: Emitter options

    Returns:
        Generated code string
    """
    if isinstance(document, str):
        import json

        document = json.loads(document)

    result = generate_from_documents([document], language, options)

    if result.success:
        return result.code
    else:
        raise result.exception


__all__ = [
    "__version__",
    "Encoder",
    "Emitter",
    "EmitterConfig",
    "EmitterError",
    "EmitterRegistry",
    "ConfigManager",
    "GenerationResult",
    "GeneratorError",
    "Registry",
    "RegistryError",
    "Schema",
    "SchemaError",
    "SchemaKind",
    "SchemaType",
    "StructuralError",
    "generate_code",
    "generate_from_documents",
    "get_emitter",
    "get_registry",
    "list_supported_languages",
    "load_config",
    "parse_schema",
    "quick_generate",
    "register_emitter",
]
