"""
Header row of a Neptune CSV file.

The header decides whether a file contains vertices or edges: a file is an
edge file as soon as a ``~from`` or ``~to`` column is present.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set

from ...constants import CsvSyntax
from ...core.exceptions import ColumnHeaderError
from ...shared.models import Cardinality, ElementKind, UserDefinedColumn
from .column_parser import parse_column

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CsvHeader:
    """
    A parsed header row.

    Attributes:
        kind: Whether the rows describe vertices or edges.
        id: Index of the ``~id`` column.
        label: Index of the ``~label`` column.
        from_: Index of the ``~from`` column (edges only).
        to: Index of the ``~to`` column (edges only).
        columns: User defined columns in header order.
    """
    kind: ElementKind
    id: Optional[int] = None
    label: Optional[int] = None
    from_: Optional[int] = None
    to: Optional[int] = None
    columns: List[UserDefinedColumn] = field(default_factory=list)

    @property
    def is_edge(self) -> bool:
        return self.kind == ElementKind.EDGE

    @classmethod
    def parse(cls, record: Sequence[Optional[str]]) -> "CsvHeader":
        """
        Parse a header row.

        Args:
            record: Header cells; empty cells may be given as None.

        Returns:
            A vertex or edge header.

        Raises:
            ColumnHeaderError: For empty cells, unknown system columns,
                duplicate columns, invalid column definitions, or edge
                headers lacking required columns.
        """
        names: Set[str] = set()
        system: Dict[str, int] = {}
        columns: List[UserDefinedColumn] = []

        for index, name in enumerate(record):
            if name is None or not name.strip():
                raise ColumnHeaderError("Empty column header encountered.")

            normalized = name.strip().lower()
            if normalized in CsvSyntax.SYSTEM_COLUMNS:
                system[normalized] = index
            elif normalized.startswith(CsvSyntax.SYSTEM_COLUMN_PREFIX):
                raise ColumnHeaderError(f"Invalid system column encountered: {normalized}")
            else:
                column = parse_column(name, index)
                columns.append(column)
                normalized = column.name

            if normalized in names:
                raise ColumnHeaderError(f"Found duplicate field: {name}")
            names.add(normalized)

        if CsvSyntax.FROM in system or CsvSyntax.TO in system:
            header = cls._edge_header(system, columns)
        else:
            header = cls(
                kind=ElementKind.VERTEX,
                id=system.get(CsvSyntax.ID),
                label=system.get(CsvSyntax.LABEL),
                columns=columns,
            )

        logger.debug(
            f"Parsed {header.kind.value} header with {len(columns)} user defined column(s)"
        )
        return header

    @classmethod
    def _edge_header(cls, system: Dict[str, int], columns: List[UserDefinedColumn]) -> "CsvHeader":
        for required in (CsvSyntax.FROM, CsvSyntax.TO, CsvSyntax.LABEL):
            if required not in system:
                raise ColumnHeaderError(f"An edge requires a {required} field.")

        for column in columns:
            if column.is_array:
                raise ColumnHeaderError(f"Array types are not allowed for edges: {column.name}")
            if column.cardinality == Cardinality.SET:
                raise ColumnHeaderError(f"Set-valued types are not allowed for edges: {column.name}")

        return cls(
            kind=ElementKind.EDGE,
            id=system.get(CsvSyntax.ID),
            label=system[CsvSyntax.LABEL],
            from_=system[CsvSyntax.FROM],
            to=system[CsvSyntax.TO],
            columns=columns,
        )
