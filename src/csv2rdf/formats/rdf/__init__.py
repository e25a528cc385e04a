"""
RDF package - property graph to RDF mapping components.

Components:
- mapping: namespaces and per-name rules, IRI and literal construction
- mapper: statement generation per vertex/edge and per CSV file
- nquads: streaming N-Quads reading and writing
- uri_post_transformation: a single IRI rewrite rule and its tables
- uri_post_transformer: the two-pass rewrite over all output files
"""

from .mapping import DATA_TYPE_TO_XSD, PropertyGraph2RdfMapping
from .mapper import PropertyGraph2RdfMapper
from .nquads import NQuadsWriter, Quad, format_quad, read_nquads
from .uri_post_transformation import RewriteTables, UriPostTransformation
from .uri_post_transformer import TransformationStats, UriPostTransformer

__all__ = [
    'DATA_TYPE_TO_XSD',
    'PropertyGraph2RdfMapping',
    'PropertyGraph2RdfMapper',
    'NQuadsWriter',
    'Quad',
    'format_quad',
    'read_nquads',
    'RewriteTables',
    'UriPostTransformation',
    'TransformationStats',
    'UriPostTransformer',
]
