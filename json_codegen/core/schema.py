"""
Schema representation consumed by the encoder.

Converts json-validate schema documents into a normalized tree of Schema
nodes, and groups root schemas into an ordered Registry. The encoder never
looks at the raw documents, only at these nodes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional

from ..logging_config import get_logger

logger = get_logger(__name__)


class SchemaError(ValueError):
    """Raised when a schema document cannot be converted."""

    pass


class SchemaKind(Enum):
    """The form a schema takes."""

    EMPTY = "empty"
    TYPE = "type"
    ELEMENTS = "elements"
    PROPERTIES = "properties"
    VALUES = "values"
    DISCRIMINATOR = "discriminator"


class SchemaType(Enum):
    """Primitive types available to the ``type`` form."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"


@dataclass
class Schema:
    """A single node of a schema tree."""

    kind: SchemaKind
    id: Optional[str] = None

    # type form
    type: Optional[SchemaType] = None

    # elements form
    elements: Optional["Schema"] = None

    # properties form; discriminators may carry shared properties too
    properties: Dict[str, "Schema"] = field(default_factory=dict)
    optional_properties: Dict[str, "Schema"] = field(default_factory=dict)

    # values form
    values: Optional["Schema"] = None

    # discriminator form
    discriminator_property_name: Optional[str] = None
    discriminator_mapping: Dict[str, "Schema"] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "Schema":
        return cls(SchemaKind.EMPTY)

    @classmethod
    def of_type(cls, type_: SchemaType) -> "Schema":
        return cls(SchemaKind.TYPE, type=type_)

    @classmethod
    def of_elements(cls, elements: "Schema") -> "Schema":
        return cls(SchemaKind.ELEMENTS, elements=elements)

    @classmethod
    def of_properties(
        cls,
        required: Optional[Dict[str, "Schema"]] = None,
        optional: Optional[Dict[str, "Schema"]] = None,
    ) -> "Schema":
        return cls(
            SchemaKind.PROPERTIES,
            properties=dict(required or {}),
            optional_properties=dict(optional or {}),
        )

    @classmethod
    def of_values(cls, values: "Schema") -> "Schema":
        return cls(SchemaKind.VALUES, values=values)

    @classmethod
    def of_discriminator(
        cls,
        property_name: str,
        mapping: Dict[str, "Schema"],
        required: Optional[Dict[str, "Schema"]] = None,
        optional: Optional[Dict[str, "Schema"]] = None,
    ) -> "Schema":
        return cls(
            SchemaKind.DISCRIMINATOR,
            discriminator_property_name=property_name,
            discriminator_mapping=dict(mapping),
            properties=dict(required or {}),
            optional_properties=dict(optional or {}),
        )


# Keywords that select a form; "properties" and "optionalProperties" are one form
_FORM_KEYWORDS = {
    "type": SchemaKind.TYPE,
    "elements": SchemaKind.ELEMENTS,
    "properties": SchemaKind.PROPERTIES,
    "optionalProperties": SchemaKind.PROPERTIES,
    "values": SchemaKind.VALUES,
    "discriminator": SchemaKind.DISCRIMINATOR,
}

_KNOWN_KEYWORDS = set(_FORM_KEYWORDS) | {"id", "description", "metadata"}


def parse_schema(document: Any, default_id: Optional[str] = None) -> Schema:
    """
    Convert a json-validate schema document into a Schema tree.

    Args:
        document: Parsed JSON object describing the root schema
        default_id: Identifier to use when the document has no ``id``

    Returns:
        Root Schema node, with ``id`` set

    Raises:
        SchemaError: If the document is not a well-formed schema
    """
    root = _convert_node(document, "#")
    if root.id is None:
        root.id = default_id
    return root


def _convert_node(node: Any, location: str) -> Schema:
    """Recursively convert a schema object to a Schema node."""
    if not isinstance(node, dict):
        raise SchemaError(f"{location}: schema must be a JSON object")

    unknown = sorted(set(node) - _KNOWN_KEYWORDS)
    if unknown:
        raise SchemaError(f"{location}: unsupported keywords: {', '.join(unknown)}")

    kinds = {_FORM_KEYWORDS[key] for key in node if key in _FORM_KEYWORDS}

    # A discriminator may share properties across all of its variants
    if kinds == {SchemaKind.DISCRIMINATOR, SchemaKind.PROPERTIES}:
        kinds = {SchemaKind.DISCRIMINATOR}

    if len(kinds) > 1:
        names = sorted(kind.value for kind in kinds)
        raise SchemaError(f"{location}: schema mixes forms: {', '.join(names)}")

    kind = kinds.pop() if kinds else SchemaKind.EMPTY
    schema = Schema(kind)

    schema_id = node.get("id")
    if schema_id is not None:
        if not isinstance(schema_id, str):
            raise SchemaError(f"{location}/id: must be a string")
        schema.id = schema_id

    if kind == SchemaKind.TYPE:
        try:
            schema.type = SchemaType(node["type"])
        except (ValueError, TypeError):
            raise SchemaError(f"{location}/type: unknown type {node['type']!r}")

    elif kind == SchemaKind.ELEMENTS:
        schema.elements = _convert_node(node["elements"], f"{location}/elements")

    elif kind == SchemaKind.VALUES:
        schema.values = _convert_node(node["values"], f"{location}/values")

    elif kind == SchemaKind.DISCRIMINATOR:
        discriminator = node["discriminator"]
        if not isinstance(discriminator, dict):
            raise SchemaError(f"{location}/discriminator: must be a JSON object")

        property_name = discriminator.get("propertyName")
        if not isinstance(property_name, str):
            raise SchemaError(
                f"{location}/discriminator/propertyName: must be a string"
            )

        mapping = _convert_members(
            discriminator.get("mapping"), f"{location}/discriminator/mapping"
        )
        schema.discriminator_property_name = property_name
        schema.discriminator_mapping = mapping

    if kind in (SchemaKind.PROPERTIES, SchemaKind.DISCRIMINATOR):
        schema.properties = _convert_members(
            node.get("properties", {}), f"{location}/properties"
        )
        schema.optional_properties = _convert_members(
            node.get("optionalProperties", {}), f"{location}/optionalProperties"
        )

        shared = set(schema.properties) & set(schema.optional_properties)
        if shared:
            raise SchemaError(
                f"{location}: properties both required and optional: "
                f"{', '.join(sorted(shared))}"
            )

    return schema


def _convert_members(members: Any, location: str) -> Dict[str, Schema]:
    """Convert a JSON object of named sub-schemas, keeping document order."""
    if not isinstance(members, dict):
        raise SchemaError(f"{location}: must be a JSON object")

    return {
        name: _convert_node(member, f"{location}/{name}")
        for name, member in members.items()
    }


@dataclass
class Registry:
    """Ordered collection of root schemas, each with a unique identifier."""

    schemas: List[Schema] = field(default_factory=list)

    def __post_init__(self):
        seen = set()
        for schema in self.schemas:
            if schema.id is None:
                continue
            if schema.id in seen:
                raise SchemaError(f"Duplicate schema id: {schema.id}")
            seen.add(schema.id)

    def __iter__(self) -> Iterator[Schema]:
        return iter(self.schemas)

    def __len__(self) -> int:
        return len(self.schemas)

    def get(self, schema_id: str) -> Optional[Schema]:
        for schema in self.schemas:
            if schema.id == schema_id:
                return schema
        return None

    @classmethod
    def from_documents(
        cls, documents: Iterable[Any], ids: Optional[Iterable[Optional[str]]] = None
    ) -> "Registry":
        """
        Build a registry from schema documents.

        Args:
            documents: Parsed JSON schema documents, in registry order
            ids: Fallback identifiers, one per document, for documents
                without their own ``id``

        Returns:
            Registry holding one root per document
        """
        documents = list(documents)
        fallback_ids = list(ids) if ids is not None else [None] * len(documents)
        if len(fallback_ids) != len(documents):
            raise SchemaError("Number of ids does not match number of documents")

        schemas = [
            parse_schema(document, default_id)
            for document, default_id in zip(documents, fallback_ids)
        ]
        logger.debug("Loaded %d root schema(s)", len(schemas))
        return cls(schemas)
