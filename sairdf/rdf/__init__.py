"""
RDF Package

Term classification, error taxonomy and format parsing/serialization.
"""

from .rdf_exceptions import (
    SaiRdfException,
    RdfNotFoundError,
    RdfTypeMismatchError,
    RdfDecodeError,
    RdfEncodeError,
    RdfConfigurationError,
)
from .rdf_utils import (
    TEXT_TURTLE,
    LD_JSON,
    RDF_XML,
    N_TRIPLES,
    RDFFormat,
    get_format_for_content_type,
    decode,
    decode_from_source,
    encode,
)

__all__ = [
    'SaiRdfException',
    'RdfNotFoundError',
    'RdfTypeMismatchError',
    'RdfDecodeError',
    'RdfEncodeError',
    'RdfConfigurationError',
    'TEXT_TURTLE',
    'LD_JSON',
    'RDF_XML',
    'N_TRIPLES',
    'RDFFormat',
    'get_format_for_content_type',
    'decode',
    'decode_from_source',
    'encode',
]
