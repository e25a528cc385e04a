"""
Two-pass URI post transformation over all generated N-Quads files.

Phase 1 reads every statement of every file and fills the tables of each
rule. Phase 2 reads every file again, rewrites subject, predicate, object
and context independently (the first rule that resolves a term wins) and
replaces the file with its rewritten version.

The tables hold every matched identifier of the whole corpus, so memory
grows with the number of distinct rewritten resources, not with the number
of statements.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from rdflib import Literal, URIRef
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ...constants import FileExtensions
from ...core.exceptions import ConfigurationError, Csv2RdfError, PostTransformationError
from ...core.memory import MemoryManager
from .nquads import NQuadsWriter, Quad, read_nquads
from .uri_post_transformation import RewriteTables, UriPostTransformation

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


@dataclass
class TransformationStats:
    """Counts of one post transformation run."""
    files: int = 0
    statements: int = 0
    rewritten_statements: int = 0
    unresolved_resources: int = 0


@retry(
    stop=stop_after_attempt(5),
    wait=wait_exponential(multiplier=0.5, min=0.5, max=8),
    retry=retry_if_exception_type(PermissionError),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
def replace_file(source: Path, target: Path) -> None:
    """Atomically replace ``target`` with ``source``, retrying while the target is locked."""
    os.replace(source, target)


@dataclass
class UriPostTransformer:
    """
    Applies an ordered list of URI post transformation rules.

    Attributes:
        transformations: Rules in priority order.
    """
    transformations: List[UriPostTransformation] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UriPostTransformer":
        """
        Create a transformer from its configuration section.

        Raises:
            ConfigurationError: For unknown keys or invalid rules.
        """
        ConfigurationError.check_known_keys(data, ("uri_post_transformations",))
        rules = data.get("uri_post_transformations", [])
        if not isinstance(rules, list):
            raise ConfigurationError.invalid_input("uri_post_transformations", "Expected a list of rules")

        transformations = []
        for rule in rules:
            try:
                transformations.append(UriPostTransformation.from_dict(rule))
            except PostTransformationError as e:
                raise ConfigurationError.invalid_input("uri_post_transformations", e.message) from e
        return cls(transformations=transformations)

    def to_dict(self) -> Dict[str, Any]:
        return {"uri_post_transformations": [t.to_dict() for t in self.transformations]}

    def create_tables(self) -> List[RewriteTables]:
        """One empty table set per rule, in rule order."""
        return [RewriteTables() for _ in self.transformations]

    def register(self, statement: Quad, tables: Sequence[RewriteTables]) -> None:
        """Record resources and replacement values found in one statement."""
        subject, predicate, obj, _ = statement
        if not isinstance(subject, URIRef) or not isinstance(predicate, URIRef):
            return

        for transformation, rule_tables in zip(self.transformations, tables):
            if isinstance(obj, URIRef):
                transformation.register_resource(rule_tables, str(subject), str(predicate), str(obj))
            elif isinstance(obj, Literal):
                transformation.register_replacement_value(rule_tables, str(subject), str(predicate), str(obj))

    def transform(self, statement: Quad, tables: Sequence[RewriteTables]) -> Quad:
        """
        Rewrite the IRIs of one statement.

        Returns:
            A new statement, or ``statement`` itself if nothing changed.
        """
        new_terms: List[Optional[URIRef]] = [None, None, None, None]

        for transformation, rule_tables in zip(self.transformations, tables):
            for position, term in enumerate(statement):
                if new_terms[position] is None and isinstance(term, URIRef):
                    new_terms[position] = transformation.apply(rule_tables, str(term))

        if all(term is None for term in new_terms):
            return statement

        return tuple(
            new if new is not None else old
            for new, old in zip(new_terms, statement)
        )

    def apply_to(self, files: Sequence[PathLike], base_uri: Optional[str] = None) -> TransformationStats:
        """
        Run both passes over all files, rewriting them in place.

        Args:
            files: N-Quads files written by the mapper.
            base_uri: Base URI used when parsing the files.

        Returns:
            Statistics of the run; empty if no rules are configured.

        Raises:
            Csv2RdfError: If a file cannot be read or written, or a rule
                finds inconsistent values.
        """
        stats = TransformationStats()
        if not self.transformations:
            return stats

        logger.info("-> Applying URI post transformations...")
        paths = [Path(f) for f in files]
        tables = self.create_tables()

        for path in paths:
            self._extract(path, tables, base_uri)

        entries = sum(len(t) for t in tables)
        for transformation, rule_tables in zip(self.transformations, tables):
            logger.info(
                f"--> {transformation.type_uri}: {len(rule_tables.resources)} resources, "
                f"{len(rule_tables.replacement_values)} replacement values"
            )
        MemoryManager.log_memory_status("URI post transformation", entries)

        for path in paths:
            self._transform_file(path, tables, base_uri, stats)

        stats.files = len(paths)
        stats.unresolved_resources = sum(len(t.unresolved) for t in tables)
        return stats

    def _extract(self, path: Path, tables: Sequence[RewriteTables], base_uri: Optional[str]) -> None:
        logger.info(f"--> Extracting URI transformation resources and replacement values from {path.name}...")
        try:
            read_nquads(path, lambda statement: self.register(statement, tables), base_uri)
        except Csv2RdfError:
            raise
        except Exception as e:
            raise PostTransformationError(
                f"Extracting URI transformation resources and replacement values from {path.absolute()} failed.",
                details=str(e),
            ) from e

    def _transform_file(
        self,
        path: Path,
        tables: Sequence[RewriteTables],
        base_uri: Optional[str],
        stats: TransformationStats,
    ) -> None:
        logger.info(f"--> Transforming resources in {path.name}...")
        transformed = path.with_name(FileExtensions.TRANSFORMED_FILE_PREFIX + path.name)

        def handle(statement: Quad) -> None:
            new_statement = self.transform(statement, tables)
            if new_statement is not statement:
                stats.rewritten_statements += 1
            stats.statements += 1
            writer.write(new_statement)

        try:
            with NQuadsWriter(transformed) as writer:
                read_nquads(path, handle, base_uri)
        except Csv2RdfError:
            transformed.unlink(missing_ok=True)
            raise
        except Exception as e:
            transformed.unlink(missing_ok=True)
            raise PostTransformationError(
                f"Applying URI transformation to file {path.absolute()} failed.",
                details=str(e),
            ) from e

        try:
            replace_file(transformed, path)
        except OSError as e:
            raise PostTransformationError(
                f"Transformed file {transformed.name} could not be renamed to: {path.absolute()}",
                details=str(e),
            ) from e
