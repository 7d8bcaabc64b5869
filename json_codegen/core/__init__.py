"""
Core code generation components.

Provides the schema model, the encoder that walks it, and the emitter
contract every target language implements.
"""

from .config import ConfigError, ConfigManager, EmitterConfig, load_config
from .descriptors import Array, Struct, Union, Values, Variant
from .emitter import Emitter, EmitterError, GeneratorError
from .encoder import Encoder, GenerationResult, StructuralError, generate_code
from .naming import NamePath, NameSanitizer, NamingCase, Segment, SegmentKind
from .schema import Registry, Schema, SchemaError, SchemaKind, SchemaType, parse_schema
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Encoder
    "Encoder",
    "GenerationResult",
    "generate_code",
    # Errors
    "GeneratorError",
    "EmitterError",
    "StructuralError",
    # Emitter contract and descriptors
    "Emitter",
    "Struct",
    "Array",
    "Values",
    "Variant",
    "Union",
    # Naming
    "NamePath",
    "Segment",
    "SegmentKind",
    "NameSanitizer",
    "NamingCase",
    # Schema model
    "Registry",
    "Schema",
    "SchemaError",
    "SchemaKind",
    "SchemaType",
    "parse_schema",
    # Configuration
    "EmitterConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Templates
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
