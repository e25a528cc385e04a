"""
CLI argument parser configuration.

This module defines the argument parser structure for all CLI commands.
"""

import argparse

from .. import __version__
from ..constants import LoggingConfig


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser with all subcommands.
    """
    parser = argparse.ArgumentParser(
        prog='csv2rdf',
        description="Amazon Neptune property graph CSV to RDF N-Quads converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s convert -i csv/ -o rdf/
    %(prog)s convert -i csv/ -o rdf/ -c csv2rdf.json --log-level DEBUG
    %(prog)s validate-config -c csv2rdf.json
        """,
    )
    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    _add_convert_parser(subparsers)
    _add_validate_config_parser(subparsers)

    return parser


def _add_convert_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the convert command parser."""
    parser = subparsers.add_parser(
        'convert',
        help='Convert a directory of Neptune CSV files to N-Quads'
    )
    parser.add_argument(
        '--input', '-i',
        required=True,
        help='Directory containing the property graph CSV files'
    )
    parser.add_argument(
        '--output', '-o',
        required=True,
        help='Directory for the N-Quads files (created if missing)'
    )
    parser.add_argument(
        '--config', '-c',
        help='JSON configuration file; defaults apply without one'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help=f'Log level (default: {LoggingConfig.DEFAULT_LOG_LEVEL})'
    )
    parser.add_argument(
        '--log-file',
        help=f'Log file path (default: {LoggingConfig.DEFAULT_LOG_FILE})'
    )
    parser.add_argument(
        '--progress',
        action='store_true',
        help='Show a progress bar over the input files'
    )


def _add_validate_config_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the validate-config command parser."""
    parser = subparsers.add_parser(
        'validate-config',
        help='Load a configuration file and print the effective settings'
    )
    parser.add_argument(
        '--config', '-c',
        required=True,
        help='JSON configuration file to validate'
    )
