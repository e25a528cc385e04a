"""
Neptune property graph CSV reading.

Usage:
    from csv2rdf.formats.csv import NeptuneCsvInputParser, CsvHeader, parse_column
"""

from .column_parser import parse_column
from .header import CsvHeader
from .input_parser import NeptuneCsvInputParser, create_element, normalize_record

__all__ = [
    'parse_column',
    'CsvHeader',
    'NeptuneCsvInputParser',
    'create_element',
    'normalize_record',
]
