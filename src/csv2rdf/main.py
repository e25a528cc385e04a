#!/usr/bin/env python3
"""
Amazon Neptune CSV to RDF converter command line entry point.

Usage:
    csv2rdf convert -i <input directory> -o <output directory> [-c <config.json>]
    csv2rdf validate-config -c <config.json>
    csv2rdf --version
"""

import sys
from typing import Dict, List, Optional, Type

from .cli.commands import BaseCommand, ConvertCommand, ValidateConfigCommand
from .cli.parsers import create_argument_parser
from .constants import ExitCode


COMMANDS: Dict[str, Type[BaseCommand]] = {
    'convert': ConvertCommand,
    'validate-config': ValidateConfigCommand,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return ExitCode.ERROR

    command = COMMANDS[args.command](config_path=getattr(args, 'config', None))
    try:
        return int(command.execute(args))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
