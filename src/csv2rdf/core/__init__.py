"""
Core services and cross-cutting concerns of the CSV to RDF converter.

- Exceptions (Csv2RdfError and its categories)
- Configuration loading (Csv2RdfConfig)
- Input and IRI validation (InputValidator, IRIValidator)
- Conversion orchestration (PropertyGraph2RdfConverter)

Usage:
    from csv2rdf.core.exceptions import Csv2RdfError
    from csv2rdf.core.config import Csv2RdfConfig
    from csv2rdf.core.validators import InputValidator, IRIValidator
    from csv2rdf.core.services.converter import PropertyGraph2RdfConverter
"""
