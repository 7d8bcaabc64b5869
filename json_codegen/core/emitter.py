"""
Emitter interface for all code generation targets.

Defines the contract the encoder drives: one method per primitive type,
returning the target language's name for it, and one method per composite
type, writing code to the output and returning the generated type's name.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from .config import TYPE_CASES, EmitterConfig, load_config
from .descriptors import Array, Struct, Union, Values, Variant
from .naming import NamePath, NameSanitizer, NamingCase, SegmentKind, root_token
from .templates import TemplateEngine, TemplateError, create_template_engine


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class EmitterError(GeneratorError):
    """Raised when an emitter fails to render a type."""

    pass


# Words the default naming scheme uses for unnamed positions
SEGMENT_WORDS = {
    SegmentKind.ELEMENTS: "Element",
    SegmentKind.VALUES: "Value",
    SegmentKind.VARIANTS: "Variant",
}


class Emitter(ABC):
    """Abstract base class for all target-language emitters."""

    def __init__(self, config: Optional[EmitterConfig] = None):
        """Initialize emitter with optional configuration."""
        self.config = config or load_config(self.language_name)
        self.sanitizer = self.create_sanitizer()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this emitter."""
        template_dir = self.get_template_directory()
        if template_dir:
            self._template_engine = create_template_engine(template_dir)
        else:
            # Fallback to in-memory templates
            self._template_engine = create_template_engine()

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this emitter.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    def create_sanitizer(self) -> NameSanitizer:
        """Return the sanitizer used for generated type names."""
        return NameSanitizer()

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this emitter."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    # Primitive types

    @abstractmethod
    def primitive_empty(self) -> str:
        """Return the name of the "empty" or "top" type."""
        pass

    @abstractmethod
    def primitive_null(self) -> str:
        """Return the name of the "null" type."""
        pass

    @abstractmethod
    def primitive_boolean(self) -> str:
        """Return the name of the "boolean" type."""
        pass

    @abstractmethod
    def primitive_number(self) -> str:
        """Return the name of the "number" or "float64" type."""
        pass

    @abstractmethod
    def primitive_string(self) -> str:
        """Return the name of the "string" type."""
        pass

    # Composite types

    @abstractmethod
    def emit_struct(self, out: TextIO, struct: Struct) -> str:
        """Output a struct, returning the name of the emitted type."""
        pass

    @abstractmethod
    def emit_array(self, out: TextIO, array: Array) -> str:
        """Output an array, returning the name of the emitted type."""
        pass

    @abstractmethod
    def emit_values(self, out: TextIO, values: Values) -> str:
        """Output a dictionary, returning the name of the emitted type."""
        pass

    @abstractmethod
    def emit_variant(self, out: TextIO, variant: Variant) -> str:
        """
        Output a struct that is a variant of a discriminated union,
        returning the name of the emitted type.
        """
        pass

    @abstractmethod
    def emit_union(self, out: TextIO, union: Union) -> str:
        """Output a discriminated union, returning the name of the emitted type."""
        pass

    # Hooks

    def prelude(self) -> Optional[str]:
        """
        Text written once before any type, such as imports.

        Returns:
            Prelude text, or None when the language needs none
        """
        return None

    def reset(self):
        """Forget names handed out by a previous run."""
        self.sanitizer.reset_used_names()

    # Naming

    def type_name(self, path: NamePath) -> str:
        """
        Name the type generated at ``path``.

        Joins the root's base name with one word per path segment and runs
        the result through the sanitizer, so the same position always gets
        the same name and different positions never share one.
        """
        base = (
            self.config.root_name
            or root_token(path.schema_id)
            or self.config.default_root_name
        )

        if self.config.type_case not in TYPE_CASES:
            raise EmitterError(f"Invalid type_case: {self.config.type_case!r}")

        parts = [base]
        for segment in path.segments:
            parts.append(SEGMENT_WORDS.get(segment.kind, segment.property))

        return self.sanitizer.sanitize_name(
            "_".join(parts),
            NamingCase(self.config.type_case),
            key=(path.root_index, path.schema_id, tuple(path.segments)),
        )

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Raises:
            EmitterError: If the template is missing or fails to render
        """
        try:
            return self.template_engine.render_template(template_name, context)
        except TemplateError as e:
            raise EmitterError(f"{self.language_name}: {e}") from e

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)

    def write_block(self, out: TextIO, code: str):
        """Write one type definition, followed by a blank line."""
        out.write(code.strip("\n") + "\n\n")
