"""
Exception types raised by the converter.

Every error a user can cause (bad header, bad row, bad configuration,
inconsistent rewrite values) is a ``Csv2RdfError`` carrying a readable
message. The CLI prints that message as is; anything else is treated as
an internal failure and only logged.
"""

from typing import Any, Dict, Iterable, Optional


class Csv2RdfError(Exception):
    """Exception raised when converting property graph CSV to RDF fails."""
    
    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ColumnHeaderError(Csv2RdfError):
    """Raised for malformed header cells and invalid header rows."""


class ElementError(Csv2RdfError):
    """Raised when a data row does not describe a valid vertex or edge."""


class MappingError(Csv2RdfError):
    """Raised when an RDF term cannot be generated from a property graph value."""


class ConfigurationError(Csv2RdfError):
    """Raised when the configuration cannot be loaded or is invalid."""
    
    @classmethod
    def unknown_property(cls, name: str) -> "ConfigurationError":
        return cls(f"Loading configuration failed because of unknown property: {name}")
    
    @classmethod
    def invalid_input(cls, field: Optional[str], message: str) -> "ConfigurationError":
        if field is None:
            return cls(f"Loading configuration failed because of invalid input: {message}")
        return cls(f"Loading configuration failed because of invalid input at {field}: {message}")
    
    @classmethod
    def check_known_keys(cls, data: Dict[str, Any], allowed: Iterable[str]) -> None:
        """Reject keys of a configuration section that are not in ``allowed``."""
        allowed = set(allowed)
        for key in data:
            if key not in allowed:
                raise cls.unknown_property(key)


class PostTransformationError(Csv2RdfError):
    """Raised by URI post transformation rules and the rewrite passes."""
