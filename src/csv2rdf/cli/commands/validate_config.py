"""
Validate-config command.
"""

import argparse
import json
import logging
from pathlib import Path

from ...constants import ExitCode
from ...core.exceptions import Csv2RdfError
from ..helpers import print_error, print_footer, print_header
from .base import BaseCommand


logger = logging.getLogger(__name__)


class ValidateConfigCommand(BaseCommand):
    """Loads a configuration file and prints the effective settings, defaults included."""

    def execute(self, args: argparse.Namespace) -> int:
        self.config_path = getattr(args, 'config', None) or self.config_path
        config_path = Path(self.config_path)

        if not config_path.is_file():
            print_error(f"✗ Configuration file not found: {config_path.absolute()}")
            return ExitCode.FILE_NOT_FOUND

        try:
            config = self.config
        except Csv2RdfError as e:
            print_error(f"✗ Invalid configuration: {e.message}")
            return ExitCode.CONFIG_ERROR

        print(f"✓ Configuration is valid: {config_path}")
        mapping = config.mapper.mapping
        print(f"  ✓ Input file extension: {config.input_file_extension}")
        print(f"  ✓ Vertex namespace: {mapping.vertex_namespace}")
        print(f"  ✓ URI post transformations: {len(config.transformer.transformations)}")

        print_header("Effective configuration")
        print(json.dumps(config.to_dict(), indent=2, ensure_ascii=False))
        print_footer()
        return ExitCode.SUCCESS
