"""
Shared data models for the CSV to RDF converter.

This module contains the data classes passed between the CSV reader, the
RDF mapper and the conversion service.

Usage:
    from csv2rdf.shared.models import Vertex, Edge, UserDefinedColumn, ConversionResult
"""

from .columns import (
    Cardinality,
    DataType,
    UserDefinedColumn,
)
from .elements import (
    Edge,
    ElementKind,
    PropertyGraphElement,
    PropertyKind,
    UserDefinedProperty,
    Vertex,
    split_values,
)
from .conversion import (
    ConversionResult,
    FileConversion,
)

__all__ = [
    # Header columns
    "Cardinality",
    "DataType",
    "UserDefinedColumn",
    # Property graph elements
    "Edge",
    "ElementKind",
    "PropertyGraphElement",
    "PropertyKind",
    "UserDefinedProperty",
    "Vertex",
    "split_values",
    # Conversion results
    "ConversionResult",
    "FileConversion",
]
