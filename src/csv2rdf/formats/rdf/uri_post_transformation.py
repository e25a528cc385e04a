"""
URI post transformation rules.

A rule replaces generated resource IRIs by readable ones. For example, with

    src_pattern  = http://example.org/resource/([0-9]+)
    type_uri     = http://example.org/class/City
    property_uri = http://example.org/datatypeProperty/code
    dst_pattern  = http://example.org/city/{{VALUE}}

every resource ``http://example.org/resource/<n>`` typed as ``City`` that
has a ``code`` value becomes ``http://example.org/city/<code>``.

The rule itself is immutable. What it learns about the data lives in a
``RewriteTables`` instance that is filled in a first pass over all
statements and only read in the second pass. Per identifier the tables move
from unseen, to candidate (matched and typed), to resolved (has a value).
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Pattern, Set

from rdflib import RDF, URIRef

from ...constants import REPLACEMENT_VARIABLE
from ...core.exceptions import ConfigurationError, PostTransformationError
from ...core.validators.iri import IRIValidator
from .mapping import check_replacement_variable

logger = logging.getLogger(__name__)

_RDF_TYPE = str(RDF.type)


@dataclass
class RewriteTables:
    """
    Identifier tables of one rule.

    Attributes:
        resources: Identifiers matching the source pattern and typed with
            the rule's type.
        replacement_values: Identifier to the value of the rule's property.
        unresolved: Matched identifiers that were looked up without a value.
    """
    resources: Set[str] = field(default_factory=set)
    replacement_values: Dict[str, str] = field(default_factory=dict)
    unresolved: Set[str] = field(default_factory=set)

    def __len__(self) -> int:
        return len(self.resources) + len(self.replacement_values)


@dataclass(frozen=True)
class UriPostTransformation:
    """
    A rule rewriting resource IRIs using a property value.

    Attributes:
        src_pattern: Regular expression the whole resource IRI must match.
        type_uri: Type the resource must have.
        property_uri: Property whose literal value replaces the variable.
        dst_pattern: New IRI, containing ``{{VALUE}}``.
    """
    src_pattern: str
    type_uri: str
    property_uri: str
    dst_pattern: str
    _regex: Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            regex = re.compile(self.src_pattern)
        except (re.error, TypeError) as e:
            raise PostTransformationError(f"Regex is bad. {e} in <{self.src_pattern}>.") from e
        object.__setattr__(self, "_regex", regex)

        try:
            check_replacement_variable(self.dst_pattern)
        except ValueError as e:
            raise PostTransformationError(str(e)) from e

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UriPostTransformation":
        """
        Create a rule from its configuration entry.

        Raises:
            ConfigurationError: For unknown or missing keys.
            PostTransformationError: For an invalid regex or pattern.
        """
        if not isinstance(data, dict):
            raise ConfigurationError.invalid_input("uri_post_transformations", "Expected an object per rule")

        keys = ("src_pattern", "type_uri", "property_uri", "dst_pattern")
        ConfigurationError.check_known_keys(data, keys)
        for key in keys:
            if key not in data:
                raise ConfigurationError.invalid_input(key, f"Missing required property '{key}'")
            if not isinstance(data[key], str):
                raise ConfigurationError.invalid_input(key, f"Expected a string, got {data[key]!r}")
        return cls(**data)

    def to_dict(self) -> Dict[str, str]:
        return {
            "src_pattern": self.src_pattern,
            "type_uri": self.type_uri,
            "property_uri": self.property_uri,
            "dst_pattern": self.dst_pattern,
        }

    def register_resource(self, tables: RewriteTables, subject: str, predicate: str, obj: str) -> None:
        """Record ``subject`` if the statement types it with this rule's type and it matches."""
        if predicate == _RDF_TYPE and obj == self.type_uri and self._regex.fullmatch(subject):
            tables.resources.add(subject)

    def register_replacement_value(self, tables: RewriteTables, subject: str, predicate: str, value: str) -> None:
        """
        Record the replacement value of ``subject``.

        Raises:
            PostTransformationError: If a different value is already recorded.
        """
        if predicate != self.property_uri:
            return
        previous = tables.replacement_values.get(subject)
        if previous is not None and previous != value:
            raise PostTransformationError(
                f"Found duplicate, inconsistent value for <{subject}>: {value} vs. {previous}"
            )
        tables.replacement_values[subject] = value

    def apply(self, tables: RewriteTables, uri: str) -> Optional[URIRef]:
        """
        Rewrite a resource IRI.

        Returns:
            The new IRI, or None if the IRI is not handled by this rule or no
            replacement value was found for it.

        Raises:
            PostTransformationError: If the new IRI is invalid.
        """
        if uri not in tables.resources:
            return None

        value = tables.replacement_values.get(uri)
        if value is None:
            if uri not in tables.unresolved:
                tables.unresolved.add(uri)
                logger.warning(f"No replacement value found for <{uri}>. Resource was not transformed.")
            return None

        iri = self.dst_pattern.replace(REPLACEMENT_VARIABLE, IRIValidator.encode(value))
        try:
            return IRIValidator.validate_iri(iri)
        except ValueError as e:
            raise PostTransformationError(
                f"Invalid resource URI <{iri}> generated when applying {self!r}.",
                details=str(e),
            ) from e
