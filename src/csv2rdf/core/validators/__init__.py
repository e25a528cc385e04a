"""
Validation utilities for the CSV to RDF converter.

This package provides validators organized by concern:
- input.py: InputValidator - file and directory parameter validation
- iri.py: IRIValidator - encoding of local names and absolute IRI validation

Usage:
    from csv2rdf.core.validators import InputValidator, IRIValidator
"""

from .input import InputValidator
from .iri import IRIValidator

__all__ = [
    'InputValidator',
    'IRIValidator',
]
