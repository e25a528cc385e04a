"""
Input validation for command line parameters.

This module checks the files and directories passed to the converter before
any conversion work starts, so that mistakes are reported with the name of
the offending parameter.

Usage:
    from csv2rdf.core.validators.input import InputValidator

    config_file = InputValidator.validate_file_param(path, "<configuration file>")
    output_dir = InputValidator.validate_directory_param(path, "<output directory>", create=True)
"""

import logging
import os
from pathlib import Path
from typing import Union

from ..exceptions import Csv2RdfError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class InputValidator:
    """
    Validates file and directory parameters.
    
    All methods raise ``Csv2RdfError`` with a message naming the parameter
    label and the absolute path, so the CLI can print it unchanged.
    """
    
    @staticmethod
    def validate_file_param(path: PathLike, param: str) -> Path:
        """
        Validate that a parameter points to an existing regular file.
        
        Args:
            path: Path given for the parameter.
            param: Parameter label used in error messages.
            
        Returns:
            The path as a ``Path`` object.
            
        Raises:
            Csv2RdfError: If the path does not exist or is not a file.
        """
        file_path = Path(path)
        if file_path.is_file():
            return file_path
        if file_path.exists():
            raise Csv2RdfError(f"Parameter {param} does not point to a file: {file_path.absolute()}")
        raise Csv2RdfError(f"File for parameter {param} does not exist: {file_path.absolute()}")
    
    @staticmethod
    def validate_directory_param(path: PathLike, param: str, create: bool = False) -> Path:
        """
        Validate that a parameter points to a directory, optionally creating it.
        
        Args:
            path: Path given for the parameter.
            param: Parameter label used in error messages.
            create: Create the directory (and missing parents) if it does not exist.
            
        Returns:
            The path as a ``Path`` object.
            
        Raises:
            Csv2RdfError: If the path is not a directory, does not exist
                (and ``create`` is False), or cannot be created.
        """
        directory = Path(path)
        if directory.is_dir():
            return directory
        if directory.exists():
            raise Csv2RdfError(f"Parameter {param} does not point to a directory: {directory.absolute()}")
        if not create:
            raise Csv2RdfError(f"Directory for parameter {param} does not exist: {directory.absolute()}")
        
        try:
            directory.mkdir(parents=True)
        except OSError as e:
            raise Csv2RdfError(
                f"Directory for parameter {param} could not be created: {directory.absolute()}",
                details=str(e),
            ) from e
        
        logger.info(f"Created directory for parameter {param}: {directory.absolute()}")
        return directory
