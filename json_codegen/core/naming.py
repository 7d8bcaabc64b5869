"""
Naming utilities for code generation.

Tracks where the encoder currently is inside a schema tree (NamePath), and
turns such positions into safe, collision-free identifiers for the target
language (NameSanitizer).
"""

import re
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Hashable, Iterator, List, Optional, Set


class SegmentKind(Enum):
    """Kinds of descent recorded in a NamePath."""

    ELEMENTS = "elements"
    VALUES = "values"
    VARIANTS = "variants"
    PROPERTY = "property"


@dataclass(frozen=True)
class Segment:
    """One step from a schema into one of its children."""

    kind: SegmentKind
    property: Optional[str] = None

    @classmethod
    def elements(cls) -> "Segment":
        return cls(SegmentKind.ELEMENTS)

    @classmethod
    def values(cls) -> "Segment":
        return cls(SegmentKind.VALUES)

    @classmethod
    def variants(cls) -> "Segment":
        return cls(SegmentKind.VARIANTS)

    @classmethod
    def property_(cls, name: str) -> "Segment":
        return cls(SegmentKind.PROPERTY, name)

    def token(self) -> str:
        """Short marker used when printing a path."""
        if self.kind == SegmentKind.ELEMENTS:
            return "[]"
        elif self.kind == SegmentKind.VALUES:
            return "{}"
        elif self.kind == SegmentKind.VARIANTS:
            return "|"
        return self.property


@dataclass
class NamePath:
    """
    Route from a root schema to the node currently being visited.

    The encoder pushes a segment right before descending into a child and
    pops it right after the child returns, so the segments always mirror
    the descents taken from the root. Emitters only read the path.
    """

    schema_id: Optional[str] = None
    segments: List[Segment] = field(default_factory=list)
    # Position of the root in its registry; tells apart roots without an id
    root_index: Optional[int] = None

    def push(self, segment: Segment) -> None:
        self.segments.append(segment)

    def pop(self) -> Segment:
        if not self.segments:
            raise IndexError("pop from empty NamePath")
        return self.segments.pop()

    @contextmanager
    def pushed(self, segment: Segment) -> Iterator["NamePath"]:
        """Push ``segment`` for the duration of the block, even if it raises."""
        self.push(segment)
        try:
            yield self
        finally:
            self.pop()

    @property
    def depth(self) -> int:
        return len(self.segments)

    def tokens(self) -> List[str]:
        return [segment.token() for segment in self.segments]

    def __str__(self) -> str:
        return "/".join(self.tokens())


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName
    KEBAB_CASE = "kebab"  # user-name
    SCREAMING_SNAKE = "screaming_snake"  # USER_NAME


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(
        self,
        reserved_words: Set[str] = None,
        builtin_types: Set[str] = None,
        fallback: str = "type",
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin type names that might conflict
            fallback: Name used when nothing usable is left after cleanup
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()
        self.fallback = fallback
        self._name_cache: Dict[Hashable, str] = {}
        self._used_names: Set[str] = set()

    def sanitize_name(
        self,
        name: str,
        target_case: NamingCase = NamingCase.SNAKE_CASE,
        suffix_on_conflict: str = "_",
        key: Optional[Hashable] = None,
    ) -> str:
        """
        Sanitize a name for safe use in target language.

        The same ``key`` (``name`` when not given) always yields the same
        result; two different keys never share a result.

        Args:
            name: Original name to sanitize
            target_case: Desired case style
            suffix_on_conflict: Suffix to add for conflicts
            key: Identity of the thing being named

        Returns:
            Sanitized name safe for use
        """
        cache_key = (key if key is not None else name, target_case, suffix_on_conflict)
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        cleaned = self._clean_basic(name)
        converted = self._convert_case(cleaned, target_case) or self.fallback

        # Case conversion can strip the guard underscore added in cleanup
        if converted[0].isdigit():
            converted = f"_{converted}"

        final_name = self._resolve_conflicts(converted, suffix_on_conflict)

        self._name_cache[cache_key] = final_name
        self._used_names.add(final_name)

        return final_name

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - remove invalid characters."""
        cleaned = re.sub(r"[^a-zA-Z0-9_-]", "_", name)
        cleaned = cleaned.strip("_-")

        if cleaned and cleaned[0].isdigit():
            cleaned = f"_{cleaned}"

        if not cleaned:
            cleaned = self.fallback

        return cleaned

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.SNAKE_CASE:
            return self._to_snake_case(name)
        elif target_case == NamingCase.CAMEL_CASE:
            return self._to_camel_case(name)
        elif target_case == NamingCase.PASCAL_CASE:
            return self._to_pascal_case(name)
        elif target_case == NamingCase.KEBAB_CASE:
            return self._to_kebab_case(name)
        elif target_case == NamingCase.SCREAMING_SNAKE:
            return self._to_snake_case(name).upper()
        else:
            return name

    def _to_snake_case(self, name: str) -> str:
        name = name.replace("-", "_")
        name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
        name = name.lower()
        name = re.sub(r"_+", "_", name)
        return name.strip("_")

    def _to_camel_case(self, name: str) -> str:
        snake = self._to_snake_case(name)
        parts = snake.split("_")

        if not parts:
            return name

        return parts[0].lower() + "".join(part.capitalize() for part in parts[1:])

    def _to_pascal_case(self, name: str) -> str:
        snake = self._to_snake_case(name)
        parts = snake.split("_")
        return "".join(part.capitalize() for part in parts if part)

    def _to_kebab_case(self, name: str) -> str:
        return self._to_snake_case(name).replace("_", "-")

    def _resolve_conflicts(self, name: str, suffix: str) -> str:
        """Resolve naming conflicts with reserved words and existing names."""
        if name in self.reserved_words or name in self.builtin_types:
            name = f"{name}{suffix}"

        original_name = name
        counter = 1
        while name in self._used_names:
            if suffix == "_":
                name = f"{original_name}{suffix}{counter}"
            else:
                name = f"{original_name}{counter}"
            counter += 1

        return name

    def reset_used_names(self):
        """Forget every name handed out so far."""
        self._used_names.clear()
        self._name_cache.clear()

    def add_used_name(self, name: str):
        """Manually add a name to the used names set."""
        self._used_names.add(name)


def root_token(schema_id: Optional[str]) -> Optional[str]:
    """
    Derive a base name from a root schema identifier.

    ``https://example.com/schemas/user.json#`` and ``./schemas/user.json``
    both give ``user``.
    """
    if not schema_id:
        return None

    path = re.split(r"[#?]", str(schema_id), maxsplit=1)[0]
    parts = [part for part in re.split(r"[/\\:]", path) if part]
    if not parts:
        return None

    last = parts[-1]
    if "." in last.lstrip("."):
        last = last.rsplit(".", 1)[0]

    return last or None
