"""
Tests for the streaming Neptune CSV reader and the element builder.
"""

import io

import pytest

from fixtures import (
    CARDINALITY_EDGES_CSV,
    CITY_NODES_CSV,
    EDGE_MISSING_FROM_CSV,
    EDGE_WITH_ARRAY_CSV,
    EMPTY_CSV,
    TYPED_VERTEX_CSV,
    VERTEX_WITHOUT_ID_CSV,
)

from csv2rdf.core.exceptions import ColumnHeaderError, Csv2RdfError, ElementError
from csv2rdf.formats.csv import NeptuneCsvInputParser, normalize_record
from csv2rdf.shared.models import DataType, Edge, ElementKind, PropertyKind, Vertex


def elements_of(content: str):
    with NeptuneCsvInputParser(io.StringIO(content)) as parser:
        return list(parser)


@pytest.mark.unit
class TestNormalizeRecord:
    """Tests for normalize_record."""

    def test_fields_are_trimmed(self):
        assert normalize_record([" a ", "\tb"]) == ["a", "b"]

    def test_empty_fields_become_none(self):
        assert normalize_record(["", "   ", "x"]) == [None, None, "x"]


@pytest.mark.unit
class TestNeptuneCsvInputParser:
    """Tests for reading vertices and edges."""

    def test_city_vertices(self):
        vertices = elements_of(CITY_NODES_CSV)

        assert len(vertices) == 2
        seattle = vertices[0]
        assert isinstance(seattle, Vertex)
        assert seattle.id == "1"
        assert seattle.labels == ["city"]
        assert [(p.name, p.values) for p in seattle.properties] == [
            ("name", ["Seattle"]),
            ("code", ["S"]),
            ("country", ["USA"]),
        ]

    def test_vertex_properties_by_cardinality(self):
        p1, p2 = elements_of(TYPED_VERTEX_CSV)

        props = {p.name: p for p in p1.properties}
        assert props["age"].data_type == DataType.INT
        assert props["age"].kind == PropertyKind.SET
        assert props["nicknames"].kind == PropertyKind.ARRAY
        assert props["nicknames"].values == ["Bob", "Bobby"]
        assert props["tags"].kind == PropertyKind.SET
        assert props["code"].kind == PropertyKind.SINGLE
        assert props["code"].value == "B-1"

        assert p2.labels == ["person", "employee"]
        assert [p.name for p in p2.properties] == ["nicknames"]
        assert p2.properties[0].values == ["a;b", "c"]

    def test_edges(self):
        e1, e2 = elements_of(CARDINALITY_EDGES_CSV)

        assert isinstance(e1, Edge)
        assert e1.kind == ElementKind.EDGE
        assert (e1.id, e1.from_id, e1.to_id, e1.label) == ("e1", "p1", "p2", "knows")
        assert [(p.name, p.value, p.kind) for p in e1.properties] == [
            ("since", "2020-02-29", PropertyKind.SINGLE),
            ("weight", "0.5", PropertyKind.SINGLE),
        ]

        assert not e2.has_label
        assert e2.properties == []

    def test_edge_label_is_not_split(self):
        (edge,) = elements_of("~id,~label,~from,~to\n1,a;b,2,3\n")
        assert edge.label == "a;b"

    def test_whitespace_label_means_no_label(self):
        (vertex,) = elements_of("~id,~label,name\n1,   ,x\n")
        assert vertex.labels == []

    def test_short_rows_are_tolerated(self):
        (edge,) = elements_of("~id,~label,~from,~to,name\n1,a,2,3\n")
        assert edge.properties == []

    def test_long_rows_are_tolerated(self):
        (edge,) = elements_of("~id,~label,~from,~to,name\n1,a,2,3,Alice,Bob\n")
        assert [p.value for p in edge.properties] == ["Alice"]

    def test_empty_lines_are_skipped(self):
        vertices = elements_of("\n~id,name\n\n1,x\n   \n2,y\n")
        assert [v.id for v in vertices] == ["1", "2"]

    def test_quoted_fields(self):
        (vertex,) = elements_of('~id,name\n1,"Doe, Jane"\n')
        assert vertex.properties[0].values == ["Doe, Jane"]

    def test_row_count(self):
        with NeptuneCsvInputParser(io.StringIO(CITY_NODES_CSV)) as parser:
            list(parser)
            assert parser.row_count == 2

    def test_no_header(self):
        with pytest.raises(Csv2RdfError, match="No header column found in input CSV file!"):
            NeptuneCsvInputParser(io.StringIO(EMPTY_CSV))

    def test_invalid_header(self):
        with pytest.raises(ColumnHeaderError, match="An edge requires a ~from field."):
            NeptuneCsvInputParser(io.StringIO(EDGE_MISSING_FROM_CSV))

    def test_array_on_edge(self):
        with pytest.raises(ColumnHeaderError, match="Array types are not allowed for edges: tags"):
            NeptuneCsvInputParser(io.StringIO(EDGE_WITH_ARRAY_CSV))

    def test_vertex_without_id(self):
        with pytest.raises(ElementError, match="Vertex or edge ID must not be null or empty."):
            elements_of(VERTEX_WITHOUT_ID_CSV)

    def test_edge_without_to(self):
        with pytest.raises(ElementError, match="Value for ~to is missing at edge 1."):
            elements_of("~id,~label,~from,~to\n1,a,2,\n")

    def test_reads_file(self, write_csv):
        path = write_csv("nodes.csv", CITY_NODES_CSV)
        with NeptuneCsvInputParser(path) as parser:
            assert parser.name == "nodes.csv"
            assert [v.id for v in parser] == ["1", "2"]

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.csv"
        with pytest.raises(Csv2RdfError, match="Error creating input stream for CSV file"):
            NeptuneCsvInputParser(path)

    def test_invalid_utf8_is_replaced(self, tmp_path):
        path = tmp_path / "latin1.csv"
        path.write_bytes("~id,name\n1,Gr\xf6\xdfe\n".encode("latin-1"))
        with NeptuneCsvInputParser(path) as parser:
            (vertex,) = list(parser)
        assert "�" in vertex.properties[0].value
