"""
Conversion services.

- converter: PropertyGraph2RdfConverter, which maps every CSV file of a
  directory to N-Quads and then runs the URI post transformation
"""

from .converter import PropertyGraph2RdfConverter

__all__ = ['PropertyGraph2RdfConverter']
