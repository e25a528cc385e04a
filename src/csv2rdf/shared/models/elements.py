"""
Property graph elements built from CSV rows.

Elements and their properties are modelled as tagged values: the mapper
dispatches on ``ElementKind`` and ``PropertyKind`` instead of on classes.
An element owns its properties and lives only while its row is mapped.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, Optional, Union

from ...constants import CsvSyntax
from ...core.exceptions import ElementError
from .columns import DataType

# Unescaped array separator
_SEPARATOR_PATTERN = re.compile(
    r'(?<!' + re.escape(CsvSyntax.ESCAPE_CHARACTER) + r')' + re.escape(CsvSyntax.ARRAY_VALUE_SEPARATOR)
)
_ESCAPED_SEPARATOR = CsvSyntax.ESCAPE_CHARACTER + CsvSyntax.ARRAY_VALUE_SEPARATOR


def split_values(value: str) -> List[str]:
    """
    Split a field on unescaped separators.
    
    Empty parts are dropped and escaped separators are unescaped.

    Example:
        >>> split_values("a;b;;c")
        ['a', 'b', 'c']
    """
    return [
        part.replace(_ESCAPED_SEPARATOR, CsvSyntax.ARRAY_VALUE_SEPARATOR)
        for part in _SEPARATOR_PATTERN.split(value)
        if part
    ]


class ElementKind(Enum):
    """Kind of a property graph element."""
    VERTEX = "vertex"
    EDGE = "edge"


class PropertyKind(Enum):
    """Kind of a user defined property."""
    SINGLE = "single"
    SET = "set"
    ARRAY = "array"


@dataclass
class UserDefinedProperty:
    """
    A user defined property of a vertex or an edge.
    
    SINGLE properties hold exactly one value. SET properties hold unique
    values in insertion order. ARRAY properties are SET properties whose
    raw values are additionally split on unescaped ``;``.
    """
    name: str
    data_type: DataType
    kind: PropertyKind
    values: List[str] = field(default_factory=list)
    
    @classmethod
    def create(cls, name: str, data_type: DataType, kind: PropertyKind, value: str) -> "UserDefinedProperty":
        """Create a property holding the given raw value."""
        prop = cls(name=name, data_type=data_type, kind=kind)
        prop.add(value)
        return prop
    
    @property
    def value(self) -> str:
        """The value of a single-valued property."""
        return self.values[0]
    
    def add(self, value: str) -> None:
        """Add a raw field value according to the property kind."""
        if self.kind == PropertyKind.SINGLE:
            if self.values:
                raise ElementError(f"Single-valued property {self.name} already has a value.")
            self.values.append(value)
        elif self.kind == PropertyKind.SET:
            if value not in self.values:
                self.values.append(value)
        else:
            for part in split_values(value):
                if part not in self.values:
                    self.values.append(part)


def _require_id(element_id: Optional[str]) -> str:
    if not element_id:
        raise ElementError("Vertex or edge ID must not be null or empty.")
    return element_id


@dataclass
class Vertex:
    """A vertex with ordered labels and user defined properties."""
    
    kind: ClassVar[ElementKind] = ElementKind.VERTEX
    
    id: str
    labels: List[str] = field(default_factory=list)
    properties: List[UserDefinedProperty] = field(default_factory=list)
    
    def __post_init__(self) -> None:
        self.id = _require_id(self.id)
    
    def add_label(self, label: Optional[str]) -> None:
        if not label:
            raise ElementError("Vertex labels must not be null or empty.")
        self.labels.append(label)
    
    def add_property(self, prop: UserDefinedProperty) -> None:
        self.properties.append(prop)


@dataclass
class Edge:
    """
    An edge between two vertices with an optional label.
    
    Edge properties are always single-valued.
    """
    
    kind: ClassVar[ElementKind] = ElementKind.EDGE
    
    id: str
    from_id: str
    to_id: str
    label: Optional[str] = None
    properties: List[UserDefinedProperty] = field(default_factory=list)
    
    def __post_init__(self) -> None:
        self.id = _require_id(self.id)
        if not self.from_id:
            raise ElementError(f"Value for {CsvSyntax.FROM} is missing at edge {self.id}.")
        if not self.to_id:
            raise ElementError(f"Value for {CsvSyntax.TO} is missing at edge {self.id}.")
    
    @property
    def has_label(self) -> bool:
        return bool(self.label)
    
    def add_property(self, prop: UserDefinedProperty) -> None:
        if prop.kind != PropertyKind.SINGLE:
            raise ElementError(f"Edge properties must be single-valued: {prop.name}")
        self.properties.append(prop)


PropertyGraphElement = Union[Vertex, Edge]
