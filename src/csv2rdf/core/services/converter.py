"""
Directory level conversion of property graph CSV files to RDF.

Conversion runs in two phases:

1. Every ``*.<input_file_extension>`` file of the input directory is mapped
   to an N-Quads file of the same base name in the output directory.
2. If URI post transformation rules are configured, all N-Quads files are
   rewritten together (see ``UriPostTransformer``).

Usage:
    from csv2rdf.core.config import Csv2RdfConfig
    from csv2rdf.core.services.converter import PropertyGraph2RdfConverter

    converter = PropertyGraph2RdfConverter(Csv2RdfConfig.from_file("config.json"))
    result = converter.convert("csv/", "rdf/")
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from tqdm import tqdm

from ...constants import FileExtensions
from ...formats.rdf.mapper import PropertyGraph2RdfMapper
from ...formats.rdf.uri_post_transformer import UriPostTransformer
from ...shared.models import ConversionResult
from ..config import Csv2RdfConfig
from ..exceptions import Csv2RdfError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class PropertyGraph2RdfConverter:
    """
    Converts a directory of Neptune CSV files into N-Quads files.

    Attributes:
        input_file_extension: Extension (without dot) of the input files.
        output_file_extension: Extension of the written RDF files.
        mapper: Statement generator.
        transformer: URI post transformer.
    """

    output_file_extension = FileExtensions.RDF_OUTPUT_EXTENSION

    def __init__(self, config: Optional[Csv2RdfConfig] = None, show_progress: bool = False):
        config = config or Csv2RdfConfig()
        self.input_file_extension: str = config.input_file_extension
        self.mapper: PropertyGraph2RdfMapper = config.mapper
        self.transformer: UriPostTransformer = config.transformer
        self.show_progress = show_progress

    def convert(self, input_directory: PathLike, output_directory: PathLike) -> ConversionResult:
        """
        Convert all input files and apply the URI post transformations.

        Args:
            input_directory: Directory containing the CSV files.
            output_directory: Existing directory for the N-Quads files.

        Returns:
            Statistics of the conversion.

        Raises:
            Csv2RdfError: If any file fails; the run is aborted.
        """
        result = ConversionResult()
        property_graph_files = self.list_property_graph_files(input_directory)
        logger.info(
            f"Phase 1: Converting {len(property_graph_files)} file(s) from {input_directory}"
        )

        rdf_files: List[Path] = []
        for property_graph_file in tqdm(
            property_graph_files,
            desc="Converting files",
            unit="file",
            disable=not self.show_progress or len(property_graph_files) < 2,
        ):
            rdf_file = self.get_rdf_file(output_directory, property_graph_file)
            result.files.append(self.mapper.map_file(property_graph_file, rdf_file))
            rdf_files.append(rdf_file)

        if self.transformer.transformations:
            logger.info(f"Phase 2: Applying {len(self.transformer.transformations)} URI post transformation(s)")
        stats = self.transformer.apply_to(rdf_files, self.mapper.mapping.vertex_namespace)
        result.transformation_count = len(self.transformer.transformations)
        result.rewritten_statement_count = stats.rewritten_statements
        result.unresolved_resources = stats.unresolved_resources
        if stats.unresolved_resources:
            result.warnings.append(
                f"{stats.unresolved_resources} resource(s) matched a URI post transformation "
                f"but had no replacement value"
            )

        logger.info(
            f"Conversion complete: {len(result.files)} file(s), {result.statement_count} statements"
        )
        return result

    def list_property_graph_files(self, directory: PathLike) -> List[Path]:
        """
        List the input files of a directory, sorted by name.

        Raises:
            Csv2RdfError: If the directory cannot be read or contains no
                input files.
        """
        directory = Path(directory)
        suffix = "." + self.input_file_extension
        try:
            files = sorted(
                (entry for entry in directory.iterdir() if entry.is_file() and entry.name.endswith(suffix)),
                key=lambda entry: entry.name,
            )
        except OSError as e:
            raise Csv2RdfError(
                f"Could not read from input directory: {directory.absolute()}",
                details=str(e),
            ) from e

        if not files:
            raise Csv2RdfError(
                f"No files with extension {self.input_file_extension} found at: {directory.absolute()}"
            )
        return files

    def get_rdf_file(self, rdf_directory: PathLike, property_graph_file: PathLike) -> Path:
        """Output file for an input file: same base name, RDF extension."""
        name = Path(property_graph_file).name
        if name.endswith(self.input_file_extension):
            name = name[: -len(self.input_file_extension)] + self.output_file_extension
        return Path(rdf_directory) / name
