"""
Column descriptors of the Neptune CSV header.

A user defined column is declared in the header as ``name[:type[(cardinality)][[]]]``,
for example ``age:int``, ``nicknames:string[]`` or ``code:string(single)``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class DataType(Enum):
    """Scalar data types of user defined columns."""
    BYTE = "byte"
    BOOL = "bool"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"
    DATETIME = "datetime"
    
    @classmethod
    def from_name(cls, name: str) -> Optional["DataType"]:
        """
        Resolve a (lower case) type name, including aliases.
        
        Returns:
            The data type, or None if the name is unknown.
        """
        return _DATA_TYPE_ALIASES.get(name)


_DATA_TYPE_ALIASES: Dict[str, DataType] = {
    **{data_type.value: data_type for data_type in DataType},
    "boolean": DataType.BOOL,
    "integer": DataType.INT,
    "date": DataType.DATETIME,
}


class Cardinality(Enum):
    """
    Declared multiplicity of a column.
    
    DEFAULT means no cardinality was declared; it resolves to SET for
    vertices and SINGLE for edges.
    """
    SINGLE = "single"
    SET = "set"
    DEFAULT = "default"


@dataclass(frozen=True)
class UserDefinedColumn:
    """
    A parsed user defined (non-system) header column.
    
    Attributes:
        name: Column name with escaped colons resolved.
        data_type: Scalar type of the values.
        cardinality: Declared cardinality.
        is_array: Values are split on unescaped ``;``.
        index: Position of the column in the header row.
    """
    name: str
    data_type: DataType = DataType.STRING
    cardinality: Cardinality = Cardinality.DEFAULT
    is_array: bool = False
    index: int = 0
    
    def __post_init__(self) -> None:
        if self.is_array and self.cardinality == Cardinality.SINGLE:
            raise ValueError(f"Array column {self.name} cannot have single cardinality")
