"""
Format handlers of the CSV to RDF converter.

- csv: Neptune property graph CSV (header grammar, row to element building)
- rdf: property graph to RDF mapping, N-Quads I/O and URI post transformation
"""
