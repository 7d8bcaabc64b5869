"""
Encoder: walks a schema registry and drives an emitter.

For every root schema, the encoder descends the tree depth-first, records
the route it took in a NamePath, and calls the emitter for each composite
node once all of its children have been named. Children are therefore
always emitted before the parents that reference them.
"""

import io
from typing import Any, Dict, List, Optional, TextIO

from ..logging_config import get_logger
from .descriptors import Array, Struct, Union, Values, Variant
from .emitter import Emitter, GeneratorError
from .naming import NamePath, Segment
from .schema import Registry, Schema, SchemaKind, SchemaType

logger = get_logger(__name__)


class StructuralError(GeneratorError):
    """Raised when a schema has a shape the encoder cannot generate code for."""

    def __init__(self, message: str, mapping_key: Optional[str] = None, path: str = ""):
        super().__init__(message)
        self.mapping_key = mapping_key
        self.path = path


class Encoder:
    """Drives code generation for every root schema of a registry."""

    def __init__(self, out: TextIO, registry: Registry, emitter: Emitter):
        """
        Args:
            out: Where generated code is written
            registry: Root schemas to generate code for
            emitter: Handles the specifics of the target language
        """
        self.out = out
        self.registry = registry
        self.emitter = emitter
        self.emitted: List[str] = []

    def run(self) -> List[str]:
        """
        Generate code for every root schema, in registry order.

        Stops at the first error. Code already written for earlier roots or
        earlier siblings stays in the output.

        Returns:
            The generated name of each root, in registry order
        """
        self.emitted = []
        self.emitter.reset()

        prelude = self.emitter.prelude()
        if prelude:
            self.out.write(prelude.strip("\n") + "\n\n")

        names = []
        for index, schema in enumerate(self.registry):
            logger.info(
                "Generating %s code for schema %s",
                self.emitter.language_name,
                schema.id or "<anonymous>",
            )
            path = NamePath(schema.id, root_index=index)
            names.append(self.walk(path, schema))

        return names

    def walk(self, path: NamePath, schema: Schema) -> str:
        """
        Resolve a schema to the name of its type in the target language.

        ``path`` is left exactly as it was found, whether this returns or raises.
        """
        kind = schema.kind

        if kind == SchemaKind.EMPTY:
            return self.emitter.primitive_empty()

        if kind == SchemaKind.TYPE:
            return self._primitive(schema.type)

        if kind == SchemaKind.ELEMENTS:
            with path.pushed(Segment.elements()):
                elements = self.walk(path, schema.elements)

            name = self.emitter.emit_array(self.out, Array(path=path, elements=elements))
            return self._emitted("array", path, name)

        if kind == SchemaKind.PROPERTIES:
            required = self._walk_properties(path, schema.properties)
            optional = self._walk_properties(path, schema.optional_properties)

            name = self.emitter.emit_struct(
                self.out,
                Struct(
                    path=path,
                    required_properties=required,
                    optional_properties=optional,
                ),
            )
            return self._emitted("struct", path, name)

        if kind == SchemaKind.VALUES:
            with path.pushed(Segment.values()):
                values = self.walk(path, schema.values)

            name = self.emitter.emit_values(self.out, Values(path=path, values=values))
            return self._emitted("values", path, name)

        if kind == SchemaKind.DISCRIMINATOR:
            return self._walk_discriminator(path, schema)

        raise GeneratorError(f"Unsupported schema kind at '{path}': {kind!r}")

    def _primitive(self, schema_type: SchemaType) -> str:
        if schema_type == SchemaType.NULL:
            return self.emitter.primitive_null()
        elif schema_type == SchemaType.BOOLEAN:
            return self.emitter.primitive_boolean()
        elif schema_type == SchemaType.NUMBER:
            return self.emitter.primitive_number()
        elif schema_type == SchemaType.STRING:
            return self.emitter.primitive_string()
        raise GeneratorError(f"Unsupported primitive type: {schema_type!r}")

    def _walk_properties(
        self, path: NamePath, properties: Dict[str, Schema]
    ) -> Dict[str, str]:
        """Name every property schema, each under its own path segment."""
        names = {}
        for key, value in properties.items():
            with path.pushed(Segment.property_(key)):
                names[key] = self.walk(path, value)
        return names

    def _walk_discriminator(self, path: NamePath, schema: Schema) -> str:
        mapping = schema.discriminator_mapping

        # Checked up front so a bad entry stops the union before any variant is written
        with path.pushed(Segment.variants()):
            for key, variant in mapping.items():
                if variant.kind != SchemaKind.PROPERTIES:
                    raise StructuralError(
                        f"Schema for mapping key '{key}' at '{path}' must use only "
                        f"properties and optionalProperties, got {variant.kind.value}",
                        mapping_key=key,
                        path=str(path),
                    )

        variants = []
        with path.pushed(Segment.variants()):
            for key in mapping:
                with path.pushed(Segment.property_(key)):
                    # Every variant gets the discriminator's own shared properties
                    required = self._walk_properties(path, schema.properties)
                    optional = self._walk_properties(path, schema.optional_properties)

                    name = self.emitter.emit_variant(
                        self.out,
                        Variant(
                            path=path,
                            tag_name=schema.discriminator_property_name,
                            tag_value=key,
                            required_properties=required,
                            optional_properties=optional,
                        ),
                    )
                    variants.append(self._emitted("variant", path, name))

        name = self.emitter.emit_union(self.out, Union(path=path, variants=variants))
        return self._emitted("union", path, name)

    def _emitted(self, kind: str, path: NamePath, name: str) -> str:
        if not name:
            raise GeneratorError(
                f"{self.emitter.language_name} emitter returned an empty name "
                f"for {kind} at '{path}'"
            )
        logger.debug("Emitted %s %s at '%s'", kind, name, path)
        self.emitted.append(name)
        return name


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(
        cls, message: str, exception: Exception = None, partial_code: str = ""
    ) -> "GenerationResult":
        """
        Create a failed generation result.

        ``code`` holds whatever was written before the failure.
        """
        result = cls(code=partial_code)
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(registry: Registry, emitter: Emitter) -> GenerationResult:
    """
    Generate code for a registry into memory, with error handling.

    Args:
        registry: Root schemas to generate code for
        emitter: Target language emitter

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    buffer = io.StringIO()
    encoder = Encoder(buffer, registry, emitter)

    try:
        root_names = encoder.run()
    except (GeneratorError, OSError) as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(
            f"Code generation failed: {e}", exception=e, partial_code=buffer.getvalue()
        )

    metadata = {
        "language": emitter.language_name,
        "file_extension": emitter.file_extension,
        "schema_count": len(registry),
        "type_count": len(encoder.emitted),
        "root_types": root_names,
    }

    return GenerationResult(buffer.getvalue(), metadata=metadata)
