"""
Centralized test fixtures for the CSV to RDF converter test suite.

This package provides reusable fixtures for testing, including:
- Neptune CSV sample content and the expected N-Quads output
- Converter configurations

Usage:
    from fixtures import CITY_NODES_CSV, CITY_CONFIG

Or use the pytest fixtures in conftest.py which import from here.
"""

from .csv_fixtures import (
    # City example
    CITY_NODES_CSV,
    CITY_EDGES_CSV,
    CITY_NODES_NQ,
    CITY_EDGES_NQ,
    RDF_TYPE,

    # Typed columns
    TYPED_VERTEX_CSV,
    CARDINALITY_EDGES_CSV,

    # Malformed input
    EMPTY_CSV,
    EDGE_MISSING_FROM_CSV,
    EDGE_WITH_ARRAY_CSV,
    VERTEX_WITHOUT_ID_CSV,
)

from .config_fixtures import (
    CITY_MAPPING,
    CITY_CONFIG,
    CITY_RULE,
    CITY_CONFIG_WITH_TRANSFORMATION,
    LOGGING_CONFIG,
    config_with,
)

__all__ = [
    'CITY_NODES_CSV',
    'CITY_EDGES_CSV',
    'CITY_NODES_NQ',
    'CITY_EDGES_NQ',
    'RDF_TYPE',
    'TYPED_VERTEX_CSV',
    'CARDINALITY_EDGES_CSV',
    'EMPTY_CSV',
    'EDGE_MISSING_FROM_CSV',
    'EDGE_WITH_ARRAY_CSV',
    'VERTEX_WITHOUT_ID_CSV',
    'CITY_MAPPING',
    'CITY_CONFIG',
    'CITY_RULE',
    'CITY_CONFIG_WITH_TRANSFORMATION',
    'LOGGING_CONFIG',
    'config_with',
]
