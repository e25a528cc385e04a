"""
Statement generation from property graph elements.

Each element is mapped on its own into an ordered list of statements:

Vertex:
    1. one ``rdf:type`` statement per label, or one with the default type
    2. per property either resource statements (property has a resource
       pattern) or ``rdfs:label`` and/or datatype property statements

Edge:
    1. one relation statement with the edge ID in the context position
    2. one datatype property statement per edge property

All statements except edge relations go into the default named graph.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Set, Union

from rdflib import RDF, RDFS

from ...core.exceptions import ConfigurationError, Csv2RdfError
from ...shared.models import (
    DataType,
    Edge,
    ElementKind,
    FileConversion,
    PropertyGraphElement,
    Vertex,
)
from ..csv.input_parser import NeptuneCsvInputParser
from .mapping import PropertyGraph2RdfMapping
from .nquads import NQuadsWriter, Quad

logger = logging.getLogger(__name__)


@dataclass
class PropertyGraph2RdfMapper:
    """
    Maps vertices and edges to RDF statements.

    Attributes:
        mapping: Namespaces and per-name mapping rules.
        always_add_property_statements: Also emit the datatype property
            statement for properties already emitted as ``rdfs:label``.
    """
    mapping: PropertyGraph2RdfMapping = field(default_factory=PropertyGraph2RdfMapping)
    always_add_property_statements: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PropertyGraph2RdfMapper":
        """
        Create a mapper from its configuration section.

        Raises:
            ConfigurationError: For unknown keys or invalid values.
        """
        ConfigurationError.check_known_keys(data, ("always_add_property_statements", "mapping"))

        always_add = data.get("always_add_property_statements", True)
        if not isinstance(always_add, bool):
            raise ConfigurationError.invalid_input(
                "always_add_property_statements", f"Expected true or false, got {always_add!r}"
            )

        mapping_data = data.get("mapping", {})
        if not isinstance(mapping_data, dict):
            raise ConfigurationError.invalid_input("mapping", "Expected an object")

        return cls(
            mapping=PropertyGraph2RdfMapping.from_dict(mapping_data),
            always_add_property_statements=always_add,
        )

    def map_element(self, element: PropertyGraphElement) -> List[Quad]:
        """Map a vertex or an edge to its ordered list of statements."""
        if element.kind == ElementKind.EDGE:
            return self.map_edge(element)
        if element.kind == ElementKind.VERTEX:
            return self.map_vertex(element)
        raise ValueError(f"Property graph element type not recognized: {element.kind}")

    def map_edge(self, edge: Edge) -> List[Quad]:
        mapping = self.mapping
        predicate = mapping.edge_iri(edge.label) if edge.has_label else mapping.default_predicate

        # the edge ID goes into the context position
        statements: List[Quad] = [(
            mapping.vertex_iri(edge.from_id),
            predicate,
            mapping.vertex_iri(edge.to_id),
            mapping.edge_context_iri(edge.id),
        )]

        for prop in edge.properties:
            statements.append((
                mapping.vertex_iri(edge.id),
                mapping.edge_property_iri(prop.name),
                mapping.literal(prop.value, prop.data_type),
                mapping.default_named_graph,
            ))
        return statements

    def map_vertex(self, vertex: Vertex) -> List[Quad]:
        mapping = self.mapping
        subject = mapping.vertex_iri(vertex.id)
        graph = mapping.default_named_graph
        statements: List[Quad] = []
        rdfs_label_properties: Set[str] = set()

        if not vertex.labels:
            statements.append((subject, RDF.type, mapping.default_type, graph))
        for label in vertex.labels:
            statements.append((subject, RDF.type, mapping.type_iri(label), graph))
            label_property = mapping.rdfs_label_property(label)
            if label_property is not None:
                rdfs_label_properties.add(label_property)

        for prop in vertex.properties:
            if mapping.has_resource_pattern(prop.name):
                predicate = mapping.edge_iri(prop.name)
                for value in prop.values:
                    statements.append((subject, predicate, mapping.resource_iri(prop.name, value), graph))
                continue

            add_rdfs_label = prop.name in rdfs_label_properties
            if add_rdfs_label:
                for value in prop.values:
                    statements.append((subject, RDFS.label, mapping.literal(value, DataType.STRING), graph))

            if not add_rdfs_label or self.always_add_property_statements:
                predicate = mapping.vertex_property_iri(prop.name)
                for value in prop.values:
                    statements.append((subject, predicate, mapping.literal(value, prop.data_type), graph))

        return statements

    def map_file(self, input_file: Union[str, os.PathLike], output_file: Union[str, os.PathLike]) -> FileConversion:
        """
        Convert one CSV file into one N-Quads file.

        Args:
            input_file: Neptune property graph CSV file.
            output_file: N-Quads file to write (overwritten).

        Returns:
            Number of elements and statements converted.

        Raises:
            Csv2RdfError: If the input is invalid or cannot be converted.
        """
        input_path = Path(input_file)
        output_path = Path(output_file)
        logger.info(f"-> Converting input file {input_path.name}...")

        stats = FileConversion(input_file=str(input_path), output_file=str(output_path))
        try:
            with NeptuneCsvInputParser(input_path) as parser, NQuadsWriter(output_path) as writer:
                for element in parser:
                    for statement in self.map_element(element):
                        writer.write(statement)
                    stats.element_count += 1
                stats.statement_count = writer.count
        except Csv2RdfError:
            raise
        except Exception as e:
            raise Csv2RdfError(
                f"Conversion of file {input_path.absolute()} failed.",
                details=str(e),
            ) from e

        logger.debug(
            f"Wrote {stats.statement_count} statements for {stats.element_count} elements to {output_path.name}"
        )
        return stats
