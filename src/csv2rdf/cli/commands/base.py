"""
Base command class.

This module contains the base command class that all CLI commands inherit from.
"""

import argparse
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ...constants import LoggingConfig
from ...core.config import Csv2RdfConfig
from ...shared.models import ConversionResult
from ..helpers import print_footer, print_header, setup_logging


logger = logging.getLogger(__name__)


def print_conversion_summary(result: ConversionResult, heading: Optional[str] = None) -> None:
    """Print a consistent summary for a conversion result."""
    if heading:
        print_header(heading)
    print(result.get_summary())
    if heading:
        print_footer()


class BaseCommand(ABC):
    """
    Base class for CLI commands.

    Provides configuration loading and logging setup.
    Subclasses should implement the execute() method.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the command.

        Args:
            config_path: Path to the JSON configuration file, if any.
        """
        self.config_path = config_path
        self._config: Optional[Csv2RdfConfig] = None
        self.log_file: Optional[str] = None

    @property
    def config(self) -> Csv2RdfConfig:
        """Lazy-load configuration; defaults apply without a configuration file."""
        if self._config is None:
            if self.config_path:
                self._config = Csv2RdfConfig.from_file(self.config_path)
            else:
                self._config = Csv2RdfConfig()
        return self._config

    def setup_logging_from_config(
        self,
        level: Optional[str] = None,
        log_file: Optional[str] = None,
    ) -> Optional[str]:
        """
        Setup logging from the ``logging`` section of the loaded configuration.

        Command line values take precedence over the configuration. Without
        either, logs go to ``csv2rdf.log`` in the working directory.
        """
        log_config: Dict[str, Any] = self._config.logging if self._config is not None else {}
        if log_file is None and not log_config.get('file'):
            log_file = LoggingConfig.DEFAULT_LOG_FILE

        self.log_file = setup_logging(level, log_file, config=log_config, include_console=False)
        return self.log_file

    @abstractmethod
    def execute(self, args: argparse.Namespace) -> int:
        """
        Execute the command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code (0 for success, non-zero for error).
        """
        pass
