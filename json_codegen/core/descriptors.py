"""
Descriptors handed from the encoder to an emitter.

Each descriptor summarizes one resolved composite schema: where it sits
(its NamePath) and the already generated names of its children. Emitters
never see schema nodes, only these names.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from .naming import NamePath


@dataclass(frozen=True)
class Struct:
    path: NamePath
    required_properties: Dict[str, str] = field(default_factory=dict)
    optional_properties: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Array:
    path: NamePath
    elements: str


@dataclass(frozen=True)
class Values:
    path: NamePath
    values: str


@dataclass(frozen=True)
class Variant:
    """A struct that is one tagged case of a discriminated union."""

    path: NamePath
    tag_name: str
    tag_value: str
    required_properties: Dict[str, str] = field(default_factory=dict)
    optional_properties: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Union:
    path: NamePath
    variants: List[str] = field(default_factory=list)
