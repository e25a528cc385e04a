"""
CLI command implementations.

- base.py: Base command class
- convert.py: ConvertCommand
- validate_config.py: ValidateConfigCommand
"""

from .base import BaseCommand, print_conversion_summary
from .convert import ConvertCommand
from .validate_config import ValidateConfigCommand


__all__ = [
    'BaseCommand',
    'print_conversion_summary',
    'ConvertCommand',
    'ValidateConfigCommand',
]
