"""
Converter configuration.

The configuration is a JSON object with snake_case keys:

    {
        "input_file_extension": "csv",
        "mapper": {
            "always_add_property_statements": true,
            "mapping": {
                "vertex_namespace": "http://example.org/resource/",
                "rdfs_label_properties": {"city": "name"},
                "resource_patterns": {"country": "http://example.org/country/{{VALUE}}"}
            }
        },
        "transformer": {
            "uri_post_transformations": [
                {"src_pattern": "...", "type_uri": "...", "property_uri": "...", "dst_pattern": "..."}
            ]
        },
        "logging": {"level": "INFO", "file": "csv2rdf.log"}
    }

Every section is optional and unknown keys are rejected. The ``logging``
section accepts ``level``, ``file`` and ``format`` (``text`` or ``json``).
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

from ..constants import FileExtensions, LoggingConfig
from ..formats.rdf.mapper import PropertyGraph2RdfMapper
from ..formats.rdf.uri_post_transformer import UriPostTransformer
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def resolve_log_level(level: Any) -> int:
    """
    Numeric level for a level name such as ``info``.

    Raises:
        ConfigurationError: If the name is not a logging level.
    """
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        raise ConfigurationError.invalid_input("logging.level", f"Unknown log level: {level}")
    return numeric


def validate_logging_section(section: Dict[str, Any]) -> Dict[str, Any]:
    """Check the keys and values of the ``logging`` section."""
    ConfigurationError.check_known_keys(section, LoggingConfig.SETTINGS)
    if "level" in section:
        resolve_log_level(section["level"])
    log_file = section.get("file")
    if log_file is not None and (not isinstance(log_file, str) or not log_file):
        raise ConfigurationError.invalid_input("logging.file", f"Expected a non-empty string, got {log_file!r}")
    format_style = section.get("format", LoggingConfig.DEFAULT_FORMAT_STYLE)
    if format_style not in LoggingConfig.SUPPORTED_FORMATS:
        raise ConfigurationError.invalid_input(
            "logging.format", f"Expected one of {', '.join(LoggingConfig.SUPPORTED_FORMATS)}, got {format_style!r}"
        )
    return dict(section)


@dataclass
class Csv2RdfConfig:
    """
    Complete configuration of a conversion run.

    Attributes:
        input_file_extension: Extension (without dot) of the CSV files to convert.
        mapper: Statement generator including its mapping.
        transformer: URI post transformation rules.
        logging: Logging settings passed to ``setup_logging``.
    """
    input_file_extension: str = FileExtensions.DEFAULT_INPUT_EXTENSION
    mapper: PropertyGraph2RdfMapper = field(default_factory=PropertyGraph2RdfMapper)
    transformer: UriPostTransformer = field(default_factory=UriPostTransformer)
    logging: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "Csv2RdfConfig":
        """
        Create a configuration from a dictionary.

        Raises:
            ConfigurationError: For unknown keys or invalid values.
        """
        if not isinstance(config_dict, dict):
            raise ConfigurationError.invalid_input(
                None, f"Configuration must be a JSON object, got {type(config_dict).__name__}"
            )
        ConfigurationError.check_known_keys(
            config_dict, ("input_file_extension", "mapper", "transformer", "logging")
        )

        extension = config_dict.get("input_file_extension", FileExtensions.DEFAULT_INPUT_EXTENSION)
        if not isinstance(extension, str) or not extension:
            raise ConfigurationError.invalid_input("input_file_extension", f"Expected a non-empty string, got {extension!r}")

        sections: Dict[str, Dict[str, Any]] = {}
        for name in ("mapper", "transformer", "logging"):
            section = config_dict.get(name, {})
            if not isinstance(section, dict):
                raise ConfigurationError.invalid_input(name, "Expected an object")
            sections[name] = section

        return cls(
            input_file_extension=extension.lstrip('.'),
            mapper=PropertyGraph2RdfMapper.from_dict(sections["mapper"]),
            transformer=UriPostTransformer.from_dict(sections["transformer"]),
            logging=validate_logging_section(sections["logging"]),
        )

    @classmethod
    def from_file(cls, config_path: Union[str, os.PathLike]) -> "Csv2RdfConfig":
        """
        Load configuration from a JSON file.

        Raises:
            ConfigurationError: If the file is missing, unreadable, not valid
                JSON, or contains an invalid configuration.
        """
        path = Path(config_path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {path.absolute()}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file {path} at line {e.lineno}, column {e.colno}: {e.msg}"
            ) from e
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"Encoding error reading {path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Error reading configuration file {path}: {e}") from e

        logger.debug(f"Loaded configuration from {path}")
        return cls.from_dict(config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Effective configuration, including defaults."""
        return {
            "input_file_extension": self.input_file_extension,
            "mapper": {
                "always_add_property_statements": self.mapper.always_add_property_statements,
                "mapping": self.mapper.mapping.to_dict(),
            },
            "transformer": self.transformer.to_dict(),
            "logging": dict(self.logging),
        }
