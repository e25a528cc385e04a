"""
Streaming reader for Neptune property graph CSV files.

The first non-empty row is parsed as header; every following row is turned
into a vertex or an edge on demand, so only one row is held in memory.

Usage:
    from csv2rdf.formats.csv import NeptuneCsvInputParser

    with NeptuneCsvInputParser("vertices.csv") as parser:
        for element in parser:
            ...
"""

import csv
import logging
import os
from pathlib import Path
from typing import IO, Iterator, List, Optional, Sequence, Union

from ...core.exceptions import Csv2RdfError
from ...shared.models import (
    Cardinality,
    Edge,
    PropertyGraphElement,
    PropertyKind,
    UserDefinedProperty,
    Vertex,
    split_values,
)
from .header import CsvHeader

logger = logging.getLogger(__name__)

Record = List[Optional[str]]


def normalize_record(row: Sequence[str]) -> Record:
    """Trim all fields of a row; empty fields become None."""
    return [value.strip() or None for value in row]


def _is_empty_row(row: Sequence[str]) -> bool:
    return not row or (len(row) == 1 and not row[0].strip())


def _value_at(record: Record, index: Optional[int]) -> Optional[str]:
    if index is None:
        return None
    if index >= len(record):
        logger.debug(f"CSV record does not contain field {index}.")
        return None
    return record[index]


def create_element(header: CsvHeader, record: Record) -> PropertyGraphElement:
    """
    Create a vertex or an edge from a normalized data row.

    Args:
        header: Parsed header of the file.
        record: Row fields, trimmed, with None for empty fields.

    Returns:
        The vertex or edge described by the row.

    Raises:
        ElementError: If the row does not describe a valid element.
    """
    if header.is_edge:
        return _create_edge(header, record)
    return _create_vertex(header, record)


def _create_edge(header: CsvHeader, record: Record) -> Edge:
    edge = Edge(
        id=_value_at(record, header.id),
        from_id=_value_at(record, header.from_),
        to_id=_value_at(record, header.to),
        label=_value_at(record, header.label),
    )

    for column in header.columns:
        value = _value_at(record, column.index)
        if not value:
            continue
        edge.add_property(
            UserDefinedProperty.create(column.name, column.data_type, PropertyKind.SINGLE, value)
        )

    return edge


def _create_vertex(header: CsvHeader, record: Record) -> Vertex:
    vertex = Vertex(id=_value_at(record, header.id))

    for column in header.columns:
        value = _value_at(record, column.index)
        if not value:
            continue
        if column.cardinality == Cardinality.SINGLE:
            kind = PropertyKind.SINGLE
        elif column.is_array:
            kind = PropertyKind.ARRAY
        else:
            kind = PropertyKind.SET
        vertex.add_property(UserDefinedProperty.create(column.name, column.data_type, kind, value))

    labels = _value_at(record, header.label)
    if labels:
        for label in split_values(labels):
            vertex.add_label(label)

    return vertex


class NeptuneCsvInputParser:
    """
    Iterator over the elements of a Neptune CSV file.

    The file is read as UTF-8 (undecodable bytes are replaced) with RFC 4180
    quoting. Empty lines are ignored, fields are trimmed and empty fields
    count as missing. Rows shorter than the header are allowed.
    """

    def __init__(self, source: Union[str, os.PathLike, IO[str]]):
        """
        Open the input and parse the header row.

        Args:
            source: Path of the CSV file, or an open text stream.

        Raises:
            Csv2RdfError: If the file cannot be opened or has no header.
            ColumnHeaderError: If the header is invalid.
        """
        self._file: Optional[IO[str]] = None
        self._owns_file = False

        if isinstance(source, (str, os.PathLike)):
            path = Path(source)
            self.name = path.name
            try:
                self._file = open(path, 'r', encoding='utf-8', errors='replace', newline='')
            except OSError as e:
                raise Csv2RdfError(f"Error creating input stream for CSV file {path.absolute()}") from e
            self._owns_file = True
        else:
            self._file = source
            self.name = getattr(source, 'name', '<stream>')

        try:
            self._rows = csv.reader(self._file, dialect='excel')
            self.header = self._read_header()
        except Exception:
            self.close()
            raise

        self.row_count = 0

    def _non_empty_rows(self) -> Iterator[List[str]]:
        for row in self._rows:
            if not _is_empty_row(row):
                yield row

    def _read_header(self) -> CsvHeader:
        row = next(self._non_empty_rows(), None)
        if row is None:
            raise Csv2RdfError("No header column found in input CSV file!")
        return CsvHeader.parse(normalize_record(row))

    def __iter__(self) -> Iterator[PropertyGraphElement]:
        for row in self._non_empty_rows():
            self.row_count += 1
            yield create_element(self.header, normalize_record(row))

    def close(self) -> None:
        if self._owns_file and self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "NeptuneCsvInputParser":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
