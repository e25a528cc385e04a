"""
Mapping configuration from property graph names to RDF terms.

``PropertyGraph2RdfMapping`` is an immutable value: all configured IRIs and
patterns are validated once when it is built, afterwards it only translates
local names and values into IRIs and literals.

Usage:
    from csv2rdf.formats.rdf.mapping import PropertyGraph2RdfMapping

    mapping = PropertyGraph2RdfMapping.from_dict({
        "vertex_namespace": "http://example.org/resource/",
        "resource_patterns": {"country": "http://example.org/country/{{VALUE}}"},
    })
    mapping.vertex_iri("1")   # URIRef('http://example.org/resource/1')
"""

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

from rdflib import Literal, URIRef, XSD

from ...constants import Namespaces, REPLACEMENT_VARIABLE
from ...core.exceptions import ConfigurationError, MappingError
from ...core.validators.iri import IRIValidator
from ...shared.models import DataType

logger = logging.getLogger(__name__)


# Data type to XSD datatype mapping; STRING literals stay untyped
DATA_TYPE_TO_XSD: Dict[DataType, Optional[URIRef]] = {
    DataType.BYTE: XSD.byte,
    DataType.BOOL: XSD.boolean,
    DataType.SHORT: XSD.short,
    DataType.INT: XSD.integer,
    DataType.LONG: XSD.long,
    DataType.FLOAT: XSD.float,
    DataType.DOUBLE: XSD.double,
    DataType.STRING: None,
    DataType.DATETIME: XSD.date,
}

_IRI_FIELDS = ("default_type", "default_predicate", "default_named_graph")
_NAMESPACE_FIELDS = (
    "type_namespace",
    "vertex_namespace",
    "edge_namespace",
    "vertex_property_namespace",
    "edge_property_namespace",
    "edge_context_namespace",
)


def check_replacement_variable(pattern: str) -> str:
    """
    Ensure a pattern contains the replacement variable.

    Raises:
        ValueError: If ``{{VALUE}}`` is missing from the pattern.
    """
    if not isinstance(pattern, str) or REPLACEMENT_VARIABLE not in pattern:
        raise ValueError(
            f"The pattern <{pattern}> for the new URI must contain the replacement variable "
            f"{REPLACEMENT_VARIABLE}."
        )
    return pattern


def _validate_field(name: str, value: Any) -> Any:
    """Validate and normalize one mapping field, raising ValueError on bad input."""
    if name in _IRI_FIELDS:
        return IRIValidator.validate_iri(value)
    if name in _NAMESPACE_FIELDS:
        if value is None and name == "edge_context_namespace":
            return value
        if not isinstance(value, str):
            raise ValueError(f"Namespace must be a string, got {type(value).__name__}")
        return value
    if name in ("rdfs_label_properties", "resource_patterns"):
        if not isinstance(value, dict):
            raise ValueError(f"Expected an object mapping names to strings, got {type(value).__name__}")
        if name == "resource_patterns":
            for pattern in value.values():
                check_replacement_variable(pattern)
        return dict(value)
    return value


@dataclass(frozen=True)
class PropertyGraph2RdfMapping:
    """
    Namespaces, defaults and per-name rules for mapping property graphs to RDF.

    Attributes:
        type_namespace: Namespace of classes created from vertex labels.
        vertex_namespace: Namespace of vertex resources.
        edge_namespace: Namespace of predicates created from edge labels.
        vertex_property_namespace: Namespace of vertex property predicates.
        edge_property_namespace: Namespace of edge property predicates.
        edge_context_namespace: Namespace of edge IDs in the context position;
            falls back to ``vertex_namespace``.
        default_type: Type of vertices without labels.
        default_predicate: Predicate of edges without label.
        default_named_graph: Context of all statements except edge relations.
        rdfs_label_properties: Vertex label to property whose values also
            become ``rdfs:label`` statements.
        resource_patterns: Property name to IRI pattern; values of these
            properties become resources instead of literals.
    """
    type_namespace: str = Namespaces.DEFAULT_TYPE_NAMESPACE
    vertex_namespace: str = Namespaces.DEFAULT_VERTEX_NAMESPACE
    edge_namespace: str = Namespaces.DEFAULT_EDGE_NAMESPACE
    vertex_property_namespace: str = Namespaces.DEFAULT_VERTEX_PROPERTY_NAMESPACE
    edge_property_namespace: str = Namespaces.DEFAULT_EDGE_PROPERTY_NAMESPACE
    edge_context_namespace: Optional[str] = None
    default_type: URIRef = URIRef(Namespaces.DEFAULT_TYPE)
    default_predicate: URIRef = URIRef(Namespaces.DEFAULT_PREDICATE)
    default_named_graph: URIRef = URIRef(Namespaces.DEFAULT_NAMED_GRAPH)
    rdfs_label_properties: Dict[str, str] = field(default_factory=dict)
    resource_patterns: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in _IRI_FIELDS:
                value = self._validated(value)
            else:
                try:
                    value = _validate_field(f.name, value)
                except ValueError as e:
                    raise MappingError(str(e)) from e
            object.__setattr__(self, f.name, value)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PropertyGraph2RdfMapping":
        """
        Create a mapping from a configuration section.

        Raises:
            ConfigurationError: For unknown keys or invalid values.
        """
        ConfigurationError.check_known_keys(data, (f.name for f in fields(cls)))
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            try:
                kwargs[key] = _validate_field(key, value)
            except ValueError as e:
                raise ConfigurationError.invalid_input(key, str(e)) from e
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            f.name: (str(getattr(self, f.name)) if f.name in _IRI_FIELDS else getattr(self, f.name))
            for f in fields(self)
        }

    @property
    def effective_edge_context_namespace(self) -> str:
        if self.edge_context_namespace is None:
            return self.vertex_namespace
        return self.edge_context_namespace

    # ------------------------------------------------------------------
    # IRI construction
    # ------------------------------------------------------------------

    def type_iri(self, label: str) -> URIRef:
        """Class IRI of a vertex label; the first character is upper-cased."""
        if label:
            first = label[0].upper()
            if len(first) != 1:
                first = label[0]
            label = first + label[1:]
        return self._iri(self.type_namespace, label)

    def vertex_iri(self, vertex: str) -> URIRef:
        return self._iri(self.vertex_namespace, vertex)

    def edge_iri(self, edge: str) -> URIRef:
        return self._iri(self.edge_namespace, edge)

    def edge_context_iri(self, edge_id: str) -> URIRef:
        return self._iri(self.effective_edge_context_namespace, edge_id)

    def vertex_property_iri(self, vertex_property: str) -> URIRef:
        return self._iri(self.vertex_property_namespace, vertex_property)

    def edge_property_iri(self, edge_property: str) -> URIRef:
        return self._iri(self.edge_property_namespace, edge_property)

    def has_resource_pattern(self, property_name: str) -> bool:
        return property_name in self.resource_patterns

    def resource_iri(self, property_name: str, value: str) -> Optional[URIRef]:
        """
        Resource IRI for a property value, built from the property's pattern.

        Returns:
            The IRI, or None if no pattern is configured for the property.
        """
        pattern = self.resource_patterns.get(property_name)
        if pattern is None:
            return None
        return self._validated(pattern.replace(REPLACEMENT_VARIABLE, IRIValidator.encode(value)))

    def rdfs_label_property(self, vertex_label: str) -> Optional[str]:
        """Property whose values become rdfs:label statements for this vertex label."""
        return self.rdfs_label_properties.get(vertex_label)

    def literal(self, value: str, data_type: DataType) -> Literal:
        """
        Literal with the XSD datatype of the given data type.

        The lexical form is kept exactly as it appears in the input.
        """
        if data_type not in DATA_TYPE_TO_XSD:
            raise MappingError(f"Data type not recognized: {data_type} for value {value}")
        return Literal(value, datatype=DATA_TYPE_TO_XSD[data_type], normalize=False)

    def _iri(self, namespace: str, local_name: str) -> URIRef:
        return self._validated(namespace + IRIValidator.encode(local_name))

    @staticmethod
    def _validated(iri: str) -> URIRef:
        try:
            return IRIValidator.validate_iri(iri)
        except ValueError as e:
            raise MappingError(
                f"Invalid resource URI <{iri}> generated when mapping to RDF.",
                details=str(e),
            ) from e
