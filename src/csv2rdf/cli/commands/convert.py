"""
Convert command: a directory of Neptune CSV files to N-Quads.
"""

import argparse
import logging
from typing import List, Tuple

from ...constants import ExitCode
from ...core.exceptions import Csv2RdfError
from ...core.services.converter import PropertyGraph2RdfConverter
from ...core.validators.input import InputValidator
from ..helpers import print_error
from .base import BaseCommand, print_conversion_summary


logger = logging.getLogger(__name__)

BANNER = "*** Amazon Neptune CSV to RDF Converter ***"


class ConvertCommand(BaseCommand):
    """
    Converts all CSV files of an input directory.

    Usage:
        convert -i <input directory> -o <output directory> [-c <configuration file>]
    """

    def execute(self, args: argparse.Namespace) -> int:
        print(BANNER)
        self.config_path = getattr(args, 'config', None) or self.config_path
        log_level = getattr(args, 'log_level', None)
        log_file = getattr(args, 'log_file', None)
        self.setup_logging_from_config(log_level, log_file)

        try:
            parameters: List[Tuple[str, str]] = []
            if self.config_path:
                config_file = InputValidator.validate_file_param(self.config_path, "<configuration file>")
                parameters.append(("<configuration file>", str(config_file.absolute())))
            input_dir = InputValidator.validate_directory_param(args.input, "<input directory>")
            parameters.append(("<input directory>", str(input_dir.absolute())))
            output_dir = InputValidator.validate_directory_param(args.output, "<output directory>", create=True)
            parameters.append(("<output directory>", str(output_dir.absolute())))

            print("Parameter values:")
            for label, value in parameters:
                print(f"* {label} : {value}")

            print("Initializing the converter...")
            config = self.config
            if config.logging:
                self.setup_logging_from_config(log_level, log_file)
            converter = PropertyGraph2RdfConverter(config, show_progress=getattr(args, 'progress', False))

            print("Running CSV to RDF conversion...")
            result = converter.convert(input_dir, output_dir)
        except Csv2RdfError as e:
            logger.error(f"CSV to RDF conversion failed: {e.message}")
            print_error("CSV to RDF conversion failed.", e.message)
            if e.details:
                print_error(e.details)
            return ExitCode.ERROR
        except Exception as e:
            logger.exception("CSV to RDF conversion failed with an unexpected error")
            print_error(f"CSV to RDF conversion failed: {e}")
            print_error(f"Please see log file for details: {self.log_file or 'console output'}")
            return ExitCode.VALIDATION_ERROR

        print_conversion_summary(result)
        print(f"Your RDF files have been written to: {output_dir.absolute()}")
        print("All done.")
        return ExitCode.SUCCESS
