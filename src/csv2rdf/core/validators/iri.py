"""
IRI construction and validation.

Every IRI the converter generates is built from a namespace (or pattern) and
an encoded local value, then checked to be a syntactically valid absolute IRI
before it is handed to rdflib.

Usage:
    from csv2rdf.core.validators.iri import IRIValidator

    local = IRIValidator.encode("New York")          # 'New+York'
    iri = IRIValidator.validate_iri("http://example.org/" + local)
"""

import logging
import re
from urllib.parse import quote_plus

from rdflib import URIRef

logger = logging.getLogger(__name__)


class IRIValidator:
    """
    Encoding and validation of generated IRIs.
    
    Encoding follows the ``application/x-www-form-urlencoded`` rules on UTF-8
    bytes: letters, digits and ``.-*_`` are kept, a space becomes ``+`` and
    everything else is percent-encoded with uppercase hex digits.
    """
    
    SCHEME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*:')
    
    # Characters never allowed unescaped in an IRI (RFC 3987)
    FORBIDDEN_CHARACTERS = frozenset('<>"{}|\\^`')
    
    PERCENT_ESCAPE_PATTERN = re.compile(r'%(?![0-9A-Fa-f]{2})')
    
    @staticmethod
    def encode(value: str) -> str:
        """
        Form-urlencode a local name or value.
        
        Args:
            value: Raw value from the property graph.
            
        Returns:
            Encoded value safe for concatenation after a namespace.
        """
        return quote_plus(value, safe='*', encoding='utf-8').replace('~', '%7E')
    
    @classmethod
    def validate_iri(cls, iri: str) -> URIRef:
        """
        Validate that a string is a syntactically valid absolute IRI.
        
        Args:
            iri: Candidate IRI string.
            
        Returns:
            The IRI as an rdflib ``URIRef``.
            
        Raises:
            ValueError: If the string is not a valid absolute IRI.
        """
        if not isinstance(iri, str) or not iri:
            raise ValueError(f"Not a valid (absolute) IRI: {iri}")
        
        scheme = cls.SCHEME_PATTERN.match(iri)
        if not scheme or scheme.end() == len(iri):
            raise ValueError(f"Not a valid (absolute) IRI: {iri}")
        
        for index, char in enumerate(iri):
            if char in cls.FORBIDDEN_CHARACTERS or char.isspace() or ord(char) < 0x20 or ord(char) == 0x7F:
                raise ValueError(f"Illegal character in IRI at index {index}: {iri}")
        
        if iri.count('#') > 1:
            raise ValueError(f"Illegal character in fragment at index {iri.rindex('#')}: {iri}")
        
        bad_escape = cls.PERCENT_ESCAPE_PATTERN.search(iri)
        if bad_escape:
            raise ValueError(f"Malformed escape pair at index {bad_escape.start()}: {iri}")
        
        return URIRef(iri)
    
    @classmethod
    def is_valid_iri(cls, iri: str) -> bool:
        """Check whether a string is a valid absolute IRI."""
        try:
            cls.validate_iri(iri)
            return True
        except ValueError:
            return False
