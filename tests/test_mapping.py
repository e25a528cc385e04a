"""
Tests for PropertyGraph2RdfMapping: IRI construction, literals and validation.
"""

import pytest
from rdflib import URIRef, XSD

from csv2rdf.core.exceptions import ConfigurationError, MappingError
from csv2rdf.formats.rdf import DATA_TYPE_TO_XSD, PropertyGraph2RdfMapping
from csv2rdf.shared.models import DataType

HEIZOEL = "{Heizölrückstoßabdämpfung}"
HEIZOEL_ENCODED = "%7BHeiz%C3%B6lr%C3%BCcksto%C3%9Fabd%C3%A4mpfung%7D"

NAMESPACES = {
    "type_namespace": "tn:",
    "vertex_namespace": "vn:",
    "edge_namespace": "en:",
    "vertex_property_namespace": "vpn:",
    "edge_property_namespace": "epn:",
    "default_named_graph": "dng:a",
    "default_type": "dt:a",
}


def mapping_with(**overrides) -> PropertyGraph2RdfMapping:
    return PropertyGraph2RdfMapping(**{**NAMESPACES, **overrides})


@pytest.fixture
def mapping():
    return mapping_with()


@pytest.mark.unit
class TestInvalidIris:
    """Generated IRIs must be valid absolute IRIs."""

    @pytest.mark.parametrize("field,value", [
        ("default_named_graph", "dgn:"),
        ("default_named_graph", "dgn"),
        ("default_type", "dt:"),
        ("default_type", "dt"),
        ("default_predicate", "dp"),
    ])
    def test_invalid_default(self, field, value):
        with pytest.raises(MappingError) as exc_info:
            mapping_with(**{field: value})
        assert exc_info.value.message == f"Invalid resource URI <{value}> generated when mapping to RDF."

    @pytest.mark.parametrize("field,method,expected", [
        ("type_namespace", "type_iri", "tnType"),
        ("vertex_namespace", "vertex_iri", "vntype"),
        ("edge_namespace", "edge_iri", "entype"),
        ("vertex_property_namespace", "vertex_property_iri", "vpntype"),
        ("edge_property_namespace", "edge_property_iri", "epntype"),
    ])
    def test_invalid_namespace(self, field, method, expected):
        mapping = mapping_with(**{field: expected[:-4]})
        with pytest.raises(MappingError) as exc_info:
            getattr(mapping, method)("type")
        assert exc_info.value.message == f"Invalid resource URI <{expected}> generated when mapping to RDF."
        assert exc_info.value.details == f"Not a valid (absolute) IRI: {expected}"

    def test_namespace_without_scheme(self):
        mapping = mapping_with(type_namespace=":tn")
        with pytest.raises(MappingError, match="Invalid resource URI <:tnType> generated"):
            mapping.type_iri("type")

    @pytest.mark.parametrize("pattern,expected", [
        (":bad{{VALUE}}", ":baddeleyite"),
        ("bad{{VALUE}}", "baddeleyite"),
    ])
    def test_invalid_resource_pattern(self, pattern, expected):
        mapping = mapping_with(resource_patterns={"word": pattern})
        with pytest.raises(MappingError) as exc_info:
            mapping.resource_iri("word", "deleyite")
        assert exc_info.value.message == f"Invalid resource URI <{expected}> generated when mapping to RDF."

    def test_namespace_must_be_string(self):
        with pytest.raises(MappingError, match="Namespace must be a string, got int"):
            mapping_with(vertex_namespace=42)


@pytest.mark.unit
class TestIriConstruction:
    """Tests for the IRI builders."""

    def test_empty_type(self):
        assert mapping_with(type_namespace="tn://types/").type_iri("") == URIRef("tn://types/")

    def test_tiny_type(self):
        assert mapping_with(type_namespace="tn://types/").type_iri("t") == URIRef("tn://types/T")

    def test_type_first_character_is_upper_cased(self, mapping):
        assert mapping.type_iri("city") == URIRef("tn:City")
        assert mapping.type_iri("äpfel") == URIRef("tn:%C3%84pfel")

    def test_iris_are_encoded(self, mapping):
        assert mapping.type_iri(HEIZOEL) == URIRef("tn:" + HEIZOEL_ENCODED)
        assert mapping.vertex_iri(HEIZOEL) == URIRef("vn:" + HEIZOEL_ENCODED)
        assert mapping.edge_iri(HEIZOEL) == URIRef("en:" + HEIZOEL_ENCODED)
        assert mapping.vertex_property_iri(HEIZOEL) == URIRef("vpn:" + HEIZOEL_ENCODED)
        assert mapping.edge_property_iri(HEIZOEL) == URIRef("epn:" + HEIZOEL_ENCODED)
        assert mapping.default_named_graph == URIRef("dng:a")
        assert mapping.default_type == URIRef("dt:a")

    @pytest.mark.parametrize("value,encoded", [
        (" { very späcial } ", "+%7B+very+sp%C3%A4cial+%7D+"),
        ("[] {} ß ä ", "%5B%5D+%7B%7D+%C3%9F+%C3%A4+"),
        ("a.b-c*d_e", "a.b-c*d_e"),
        ("~x/y", "%7Ex%2Fy"),
    ])
    def test_form_encoding(self, mapping, value, encoded):
        assert mapping.vertex_iri(value) == URIRef("vn:" + encoded)

    def test_edge_context_defaults_to_vertex_namespace(self, mapping):
        assert mapping.edge_context_namespace is None
        assert mapping.edge_context_iri("e1") == URIRef("vn:e1")

    def test_edge_context_namespace(self):
        mapping = mapping_with(edge_context_namespace="ec:")
        assert mapping.edge_context_iri("e1") == URIRef("ec:e1")

    def test_defaults(self):
        mapping = PropertyGraph2RdfMapping()
        assert mapping.vertex_iri("1") == URIRef("http://aws.amazon.com/neptune/csv2rdf/resource/1")
        assert mapping.default_type == URIRef("http://www.w3.org/2002/07/owl#Thing")
        assert mapping.default_named_graph == URIRef(
            "http://aws.amazon.com/neptune/vocab/v01/DefaultNamedGraph"
        )


@pytest.mark.unit
class TestLiterals:
    """Literal values are never encoded."""

    @pytest.mark.parametrize("data_type,xsd", [
        (DataType.BOOL, "boolean"),
        (DataType.BYTE, "byte"),
        (DataType.DATETIME, "date"),
        (DataType.DOUBLE, "double"),
        (DataType.FLOAT, "float"),
        (DataType.INT, "integer"),
        (DataType.LONG, "long"),
        (DataType.SHORT, "short"),
    ])
    def test_typed_literals_are_not_encoded(self, mapping, data_type, xsd):
        literal = mapping.literal(HEIZOEL, data_type)
        assert literal.n3() == f'"{HEIZOEL}"^^<http://www.w3.org/2001/XMLSchema#{xsd}>'

    def test_string_literal_is_plain(self, mapping):
        literal = mapping.literal(HEIZOEL, DataType.STRING)
        assert literal.datatype is None
        assert literal.n3() == f'"{HEIZOEL}"'

    def test_lexical_form_is_kept(self, mapping):
        assert str(mapping.literal("01", DataType.INT)) == "01"
        assert str(mapping.literal("1.50", DataType.DOUBLE)) == "1.50"

    def test_every_data_type_is_mapped(self):
        assert set(DATA_TYPE_TO_XSD) == set(DataType)
        assert DATA_TYPE_TO_XSD[DataType.DATETIME] == XSD.date


@pytest.mark.unit
class TestPerNameRules:
    """Tests for rdfs:label properties and resource patterns."""

    def test_rdfs_label_property(self, mapping):
        assert mapping.rdfs_label_property("country") is None

        mapping = mapping_with(rdfs_label_properties={"country": "code"})
        assert mapping.rdfs_label_property("country") == "code"
        assert mapping.rdfs_label_property("city") is None

    def test_property_value_to_resource(self, mapping):
        pattern = "http://example.org/resource/word/{{VALUE}}"
        assert not mapping.has_resource_pattern("word")
        assert mapping.resource_iri("word", HEIZOEL) is None

        mapping = mapping_with(resource_patterns={"word": pattern})
        assert mapping.has_resource_pattern("word")
        assert mapping.resource_iri("word", HEIZOEL) == URIRef(
            "http://example.org/resource/word/" + HEIZOEL_ENCODED
        )

    def test_pattern_without_variable_is_rejected(self):
        with pytest.raises(MappingError) as exc_info:
            mapping_with(resource_patterns={"country": "something"})
        assert exc_info.value.message == (
            "The pattern <something> for the new URI must contain the replacement variable {{VALUE}}."
        )


@pytest.mark.unit
class TestMappingFromDict:
    """Tests for loading the mapping section."""

    def test_from_dict(self):
        mapping = PropertyGraph2RdfMapping.from_dict({
            **NAMESPACES,
            "edge_context_namespace": "ec:",
            "rdfs_label_properties": {"country": "code"},
        })
        assert mapping.default_named_graph == URIRef("dng:a")
        assert mapping.edge_context_iri("1") == URIRef("ec:1")
        assert mapping.rdfs_label_property("country") == "code"

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError) as exc_info:
            PropertyGraph2RdfMapping.from_dict({"vertexNamespace": "vn:"})
        assert exc_info.value.message == (
            "Loading configuration failed because of unknown property: vertexNamespace"
        )

    def test_invalid_default_iri(self):
        with pytest.raises(ConfigurationError) as exc_info:
            PropertyGraph2RdfMapping.from_dict({"default_type": "dt"})
        assert exc_info.value.message == (
            "Loading configuration failed because of invalid input at default_type: "
            "Not a valid (absolute) IRI: dt"
        )

    def test_invalid_pattern(self):
        with pytest.raises(ConfigurationError, match="must contain the replacement variable"):
            PropertyGraph2RdfMapping.from_dict({"resource_patterns": {"country": "something"}})

    def test_to_dict_round_trip(self):
        mapping = mapping_with(resource_patterns={"country": "c:{{VALUE}}"})
        assert PropertyGraph2RdfMapping.from_dict(mapping.to_dict()) == mapping
