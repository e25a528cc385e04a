"""
Parser for user defined column headers.

Grammar (case-insensitive type part):

    column    := name [ ':' typeSpec ]
    typeSpec  := typeName [ '(' ( 'single' | 'set' ) ')' ] [ '[]' ]

A colon that belongs to the name must be escaped as ``\\:``.
"""

import logging
import re

from ...constants import CsvSyntax
from ...core.exceptions import ColumnHeaderError
from ...shared.models import Cardinality, DataType, UserDefinedColumn

logger = logging.getLogger(__name__)

# name, then an optional unescaped colon starting the type definition
USER_HEADER_PATTERN = re.compile(r'(\S+?)((?<!\\):\S+)?')

USER_TYPE_PATTERN = re.compile(
    r':([^' + re.escape(CsvSyntax.ARRAY_DECLARATION) + r'()]+)'
    r'(?:\((' + Cardinality.SINGLE.value + r'|' + Cardinality.SET.value + r')\))?'
    r'(' + re.escape(CsvSyntax.ARRAY_DECLARATION) + r')?'
)

_ESCAPED_COLON = CsvSyntax.ESCAPE_CHARACTER + ":"


def parse_column(header_field: str, index: int = 0) -> UserDefinedColumn:
    """
    Parse a user defined column header cell.
    
    Args:
        header_field: Raw header cell.
        index: Position of the cell in the header row.
        
    Returns:
        The parsed column.
        
    Raises:
        ColumnHeaderError: If the cell is malformed, names an unknown data
            type, or declares an array with single cardinality.
    """
    trimmed = header_field.strip()
    
    header_match = USER_HEADER_PATTERN.fullmatch(trimmed)
    if not header_match:
        raise ColumnHeaderError(f"Invalid column encountered while parsing header: {trimmed}")
    
    name = header_match.group(1)
    if not name:
        raise ColumnHeaderError(f"Column name is not present for header field: {trimmed}")
    name = name.replace(_ESCAPED_COLON, ":")
    
    type_definition = header_match.group(2)
    if type_definition is None:
        return UserDefinedColumn(name=name, index=index)
    
    type_match = USER_TYPE_PATTERN.fullmatch(type_definition.lower())
    if not type_match:
        raise ColumnHeaderError(f"Invalid column encountered while parsing header: {trimmed}")
    
    data_type = DataType.from_name(type_match.group(1))
    if data_type is None:
        raise ColumnHeaderError(f"Invalid data type encountered for header: {trimmed}")
    
    cardinality = Cardinality.DEFAULT
    if type_match.group(2) is not None:
        cardinality = Cardinality(type_match.group(2))
    
    is_array = type_match.group(3) is not None
    if is_array:
        if cardinality == Cardinality.SINGLE:
            raise ColumnHeaderError(f"Type definition cannot be single cardinality but array: {name}")
        cardinality = Cardinality.SET
    
    column = UserDefinedColumn(
        name=name,
        data_type=data_type,
        cardinality=cardinality,
        is_array=is_array,
        index=index,
    )
    logger.debug(f"Parsed column {trimmed!r} as {column}")
    return column
