"""
RDF Exceptions for sai-rdf-utils

Error taxonomy shared by the typed resource accessors and the format codec.
Every error is raised to the immediate caller; nothing here is retried.
"""

from typing import Optional


class SaiRdfException(Exception):
    """Base class for RDF processing errors."""
    pass


class RdfNotFoundError(SaiRdfException):
    """Raised when required data cannot be found in an RDF graph."""
    pass


class RdfTypeMismatchError(SaiRdfException):
    """Raised when an object has the wrong term kind, datatype or URI syntax."""
    pass


class RdfDecodeError(SaiRdfException):
    """Raised when input cannot be read or parsed as the declared format."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class RdfEncodeError(SaiRdfException):
    """Raised when a graph cannot be serialized to the requested output."""
    pass


class RdfConfigurationError(SaiRdfException):
    """Raised when there are configuration loading or validation errors."""
    pass
