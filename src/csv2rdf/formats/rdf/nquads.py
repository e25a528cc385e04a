"""
Streaming N-Quads reading and writing.

Generated statements are written line by line, and read back through
rdflib's N-Quads parser into a store that hands every statement to a
callback instead of keeping it. Neither direction builds a graph in memory.

Usage:
    from csv2rdf.formats.rdf.nquads import NQuadsWriter, read_nquads

    with NQuadsWriter("out.nq") as writer:
        writer.write((s, p, o, g))

    read_nquads("out.nq", handler=print)
"""

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, IO, Iterator, Optional, Tuple, Union

import rdflib
from rdflib import Graph
from rdflib.parser import create_input_source
from rdflib.plugins.parsers.nquads import NQuadsParser
# Private row serializer of the nquads plugin; the public serializer needs a Dataset.
from rdflib.plugins.serializers.nquads import _nq_row
from rdflib.store import Store
from rdflib.term import Node

logger = logging.getLogger(__name__)

Quad = Tuple[Node, Node, Node, Node]
"""An RDF statement: subject, predicate, object and context."""

QuadHandler = Callable[[Quad], None]

PathLike = Union[str, os.PathLike]


def format_quad(quad: Quad) -> str:
    """Serialize one statement as an N-Quads line (including newline)."""
    subject, predicate, obj, context = quad
    return _nq_row((subject, predicate, obj), context)


class NQuadsWriter:
    """Writes statements to an N-Quads file, one line per statement."""

    def __init__(self, path: PathLike):
        self.path = Path(path)
        self.count = 0
        self._file: Optional[IO[str]] = None

    def open(self) -> "NQuadsWriter":
        self._file = open(self.path, 'w', encoding='utf-8', newline='\n')
        return self

    def write(self, quad: Quad) -> None:
        self._file.write(format_quad(quad))
        self.count += 1

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "NQuadsWriter":
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class QuadHandlerStore(Store):
    """
    Write-only rdflib store forwarding every added statement to a handler.

    Lookups always come back empty; nothing is retained.
    """

    context_aware = True
    graph_aware = True
    formula_aware = False
    transaction_aware = False

    def __init__(self, handler: QuadHandler):
        super().__init__()
        self._handler = handler

    def add(self, triple, context, quoted=False):
        subject, predicate, obj = triple
        identifier = context.identifier if context is not None else None
        self._handler((subject, predicate, obj, identifier))

    def addN(self, quads):
        for subject, predicate, obj, context in quads:
            self.add((subject, predicate, obj), context)

    def remove(self, triple, context=None):
        pass

    def triples(self, triple_pattern, context=None):
        return iter(())

    def contexts(self, triple=None):
        return iter(())

    def __len__(self, context=None):
        return 0

    def add_graph(self, graph):
        pass

    def remove_graph(self, graph):
        pass


@contextmanager
def _literal_normalization_disabled() -> Iterator[None]:
    # The parser reads this module level flag when it builds literals. Without
    # it "01"^^xsd:integer would be rewritten as "1". The flag is process-wide,
    # so files are parsed one at a time.
    previous = rdflib.NORMALIZE_LITERALS
    rdflib.NORMALIZE_LITERALS = False
    try:
        yield
    finally:
        rdflib.NORMALIZE_LITERALS = previous


def read_nquads(path: PathLike, handler: QuadHandler, base_uri: Optional[str] = None) -> None:
    """
    Parse an N-Quads file and pass every statement to ``handler``.

    Literal lexical forms are kept as written.

    Args:
        path: N-Quads file.
        handler: Called once per statement, in file order.
        base_uri: Base URI for the parser.

    Raises:
        OSError: If the file cannot be read.
        Exception: rdflib parse errors and anything raised by ``handler``.
    """
    store = QuadHandlerStore(handler)
    with open(path, 'rb') as stream, _literal_normalization_disabled():
        source = create_input_source(file=stream, publicID=base_uri, format="nquads")
        NQuadsParser().parse(source, Graph(store=store))
