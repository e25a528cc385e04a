"""
Amazon Neptune CSV to RDF converter.

Converts property graphs stored in the Neptune Gremlin load CSV format into
RDF N-Quads, and optionally rewrites generated resource IRIs into readable
ones using property values found in the generated data.

Usage:
    from csv2rdf import Csv2RdfConfig, PropertyGraph2RdfConverter

    config = Csv2RdfConfig.from_file("csv2rdf.json")
    converter = PropertyGraph2RdfConverter(config)
    result = converter.convert("input/", "output/")
    print(result.get_summary())
"""

__version__ = "1.1.0"

from .core.exceptions import Csv2RdfError
from .core.config import Csv2RdfConfig
from .core.services.converter import PropertyGraph2RdfConverter

__all__ = [
    '__version__',
    'Csv2RdfError',
    'Csv2RdfConfig',
    'PropertyGraph2RdfConverter',
]
