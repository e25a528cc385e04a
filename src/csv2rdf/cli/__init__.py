"""
Command line interface of the converter.
"""

from .commands import BaseCommand, ConvertCommand, ValidateConfigCommand
from .helpers import JSONFormatter, setup_logging
from .parsers import create_argument_parser


__all__ = [
    'BaseCommand',
    'ConvertCommand',
    'ValidateConfigCommand',
    'JSONFormatter',
    'setup_logging',
    'create_argument_parser',
]
