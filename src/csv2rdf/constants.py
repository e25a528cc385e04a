"""
Centralized configuration constants for the Neptune CSV to RDF converter.

This module provides a single source of truth for all configuration constants,
default values, and limits used throughout the application.
"""

from enum import IntEnum
from typing import Final

# ============================================================================
# Exit Codes
# ============================================================================

class ExitCode(IntEnum):
    """Standard exit codes for CLI commands.
    
    Following Unix conventions:
    - 0: Success
    - 1: Conversion error reported to the user
    - 2: Unexpected error, details are in the log file
    - 3+: Specific error categories
    """
    SUCCESS = 0
    ERROR = 1
    VALIDATION_ERROR = 2
    CONFIG_ERROR = 3
    FILE_NOT_FOUND = 5


# ============================================================================
# RDF Namespaces and Defaults
# ============================================================================

class Namespaces:
    """Default namespaces and IRIs used when mapping property graphs to RDF."""
    
    DEFAULT_TYPE_NAMESPACE: Final[str] = "http://aws.amazon.com/neptune/csv2rdf/class/"
    """Namespace for vertex labels (RDF classes)."""
    
    DEFAULT_VERTEX_NAMESPACE: Final[str] = "http://aws.amazon.com/neptune/csv2rdf/resource/"
    """Namespace for vertex and edge IDs."""
    
    DEFAULT_EDGE_NAMESPACE: Final[str] = "http://aws.amazon.com/neptune/csv2rdf/objectProperty/"
    """Namespace for edge labels (object properties)."""
    
    DEFAULT_VERTEX_PROPERTY_NAMESPACE: Final[str] = "http://aws.amazon.com/neptune/csv2rdf/datatypeProperty/"
    """Namespace for vertex property names (datatype properties)."""
    
    DEFAULT_EDGE_PROPERTY_NAMESPACE: Final[str] = "http://aws.amazon.com/neptune/csv2rdf/datatypeProperty/"
    """Namespace for edge property names (datatype properties)."""
    
    DEFAULT_TYPE: Final[str] = "http://www.w3.org/2002/07/owl#Thing"
    """Type of vertices without a label."""
    
    DEFAULT_PREDICATE: Final[str] = DEFAULT_EDGE_NAMESPACE + "edge"
    """Predicate of edges without a label."""
    
    DEFAULT_NAMED_GRAPH: Final[str] = "http://aws.amazon.com/neptune/vocab/v01/DefaultNamedGraph"
    """Context of all statements except edge relations."""


REPLACEMENT_VARIABLE: Final[str] = "{{VALUE}}"
"""Placeholder substituted by an encoded value in resource and rewrite patterns."""


# ============================================================================
# File Extensions
# ============================================================================

class FileExtensions:
    """Supported file extensions."""
    
    DEFAULT_INPUT_EXTENSION: Final[str] = "csv"
    """Extension of property graph input files (without dot)."""
    
    RDF_OUTPUT_EXTENSION: Final[str] = "nq"
    """Extension of the N-Quads output files (without dot)."""
    
    TRANSFORMED_FILE_PREFIX: Final[str] = "transformed."
    """Prefix of the temporary file written while rewriting an output file."""


# ============================================================================
# CSV Syntax
# ============================================================================

class CsvSyntax:
    """Reserved characters and system columns of the Neptune CSV format."""
    
    ARRAY_VALUE_SEPARATOR: Final[str] = ";"
    """Separator for multiple values in one field."""
    
    ESCAPE_CHARACTER: Final[str] = "\\"
    """Escapes the separator in values and the type colon in column names."""
    
    ARRAY_DECLARATION: Final[str] = "[]"
    """Suffix of a column type declaring an array."""
    
    SYSTEM_COLUMN_PREFIX: Final[str] = "~"
    """All system columns start with this prefix."""
    
    ID: Final[str] = "~id"
    LABEL: Final[str] = "~label"
    FROM: Final[str] = "~from"
    TO: Final[str] = "~to"
    
    SYSTEM_COLUMNS: Final[tuple[str, ...]] = (ID, LABEL, FROM, TO)


# ============================================================================
# Memory Management
# ============================================================================

class MemoryLimits:
    """Memory management constants."""
    
    REWRITE_TABLE_REPORT_THRESHOLD: Final[int] = 100_000
    """Number of rewrite table entries above which memory usage is reported."""


# ============================================================================
# Logging Configuration
# ============================================================================

class LoggingConfig:
    """Logging configuration constants."""
    
    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    """Default logging level."""
    
    LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    """Default log message format."""
    
    DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
    """Default date format for log messages."""
    
    DEFAULT_FORMAT_STYLE: Final[str] = "text"
    """Default formatter style (text or json)."""
    
    JSON_DATE_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S.%fZ"
    """Timestamp format used by the JSON formatter."""
    
    SUPPORTED_FORMATS: Final[tuple[str, ...]] = ("text", "json")
    """Supported logging formatter styles."""
    
    SETTINGS: Final[tuple[str, ...]] = ("level", "file", "format")
    """Keys of the logging section of the configuration."""
    
    MAX_LOG_FILE_MB: Final[int] = 10
    """Maximum size of a single log file before rotation (MB)."""
    
    LOG_BACKUP_COUNT: Final[int] = 5
    """Number of rotated log files to keep."""
    
    DEFAULT_LOG_FILE: Final[str] = "csv2rdf.log"
    """Log file written by the command line tool."""
