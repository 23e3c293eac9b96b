"""
RDF Term Utilities for sai-rdf-utils

Classifies rdflib terms into the three RDF term kinds and converts literal
lexical forms and IRIs into checked Python values. Accessors branch on the
TermKind tag rather than on rdflib's class hierarchy.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Any

from rdflib import BNode, Literal, URIRef
from rdflib.namespace import RDF, XSD
from rdflib.resource import Resource
from rfc3986 import uri_reference, validators
from rfc3986.exceptions import ValidationError

from .rdf_exceptions import RdfTypeMismatchError


class TermKind(Enum):
    """Kinds of RDF terms."""
    IRI = "iri"
    LITERAL = "literal"
    BLANK = "blank"


# RFC 3339 profile of ISO-8601: date, time, optional fraction, mandatory offset
_RFC3339_DATE_TIME = re.compile(
    r'^(\d{4}-\d{2}-\d{2})T(\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|z|[+-]\d{2}:\d{2})$'
)

_INTEGER_LEXICAL = re.compile(r'^[+-]?\d+$')

_URI_EXCLUDED_CHARS = re.compile(r'[\s<>"{}|\\^`]')

_BOOLEAN_LEXICAL = {
    'true': True,
    '1': True,
    'false': False,
    '0': False,
}

_URI_VALIDATOR = (
    validators.Validator()
    .require_presence_of('scheme')
    .check_validity_of('scheme', 'userinfo', 'host', 'port', 'path', 'query', 'fragment')
)


def as_term(value: Any):
    """Unwrap an rdflib Resource to its identifier, pass other terms through."""
    if isinstance(value, Resource):
        return value.identifier
    return value


def term_kind(node) -> TermKind:
    """
    Classify an rdflib term.

    Args:
        node: URIRef, Literal, BNode or a Resource wrapping one of those

    Returns:
        The TermKind tag of the node

    Raises:
        TypeError: If the value is not an RDF term
    """
    node = as_term(node)
    # Literal and URIRef are both str subclasses, test Literal first
    if isinstance(node, Literal):
        return TermKind.LITERAL
    if isinstance(node, BNode):
        return TermKind.BLANK
    if isinstance(node, URIRef):
        return TermKind.IRI
    raise TypeError(f"Not an RDF term: {node!r}")


def literal_datatype(literal: Literal) -> URIRef:
    """
    Get the datatype tag of a literal.

    Literals without an explicit datatype are RDF 1.1 simple literals
    (xsd:string) or language-tagged strings (rdf:langString).
    """
    if literal.datatype is not None:
        return literal.datatype
    if literal.language:
        return RDF.langString
    return XSD.string


def is_valid_uri(value: str) -> bool:
    """Check that a string is an absolute URI per RFC 3986."""
    # uri_reference percent-encodes these before validation
    if _URI_EXCLUDED_CHARS.search(value):
        return False
    try:
        _URI_VALIDATOR.validate(uri_reference(value))
    except ValidationError:
        return False
    return True


def node_to_uri(node) -> URIRef:
    """
    Convert a non-literal node into a validated absolute URI.

    Raises:
        RdfTypeMismatchError: If the node is a literal, a blank node, or an
            IRI that fails URI validation
    """
    if node is None:
        raise ValueError("Cannot convert a null node to URI")
    node = as_term(node)
    kind = term_kind(node)
    if kind is TermKind.LITERAL:
        raise RdfTypeMismatchError(f"Cannot convert literal node to URI - {node}")
    if kind is TermKind.BLANK:
        raise RdfTypeMismatchError(f"Cannot convert blank node to URI - _:{node}")
    if not is_valid_uri(str(node)):
        raise RdfTypeMismatchError(f"Failed to convert node to URI - {node}")
    return URIRef(str(node))


def parse_integer(lexical: str) -> int:
    """Parse an xsd:integer lexical form."""
    if not _INTEGER_LEXICAL.match(lexical.strip()):
        raise RdfTypeMismatchError(f"Invalid xsd:integer lexical value '{lexical}'")
    return int(lexical)


def parse_boolean(lexical: str) -> bool:
    """Parse an xsd:boolean lexical form (true, false, 1, 0)."""
    try:
        return _BOOLEAN_LEXICAL[lexical.strip()]
    except KeyError:
        raise RdfTypeMismatchError(f"Invalid xsd:boolean lexical value '{lexical}'")


def parse_date_time(lexical: str) -> datetime:
    """
    Parse an xsd:dateTime lexical form into a timezone-aware datetime.

    Only the RFC 3339 date-time-with-offset profile is accepted, so values
    without an offset or with a date part only are rejected.

    Raises:
        RdfTypeMismatchError: If the value does not match the profile or is
            not a real calendar date/time
    """
    match = _RFC3339_DATE_TIME.match(lexical.strip())
    if match is None:
        raise RdfTypeMismatchError(f"Invalid xsd:dateTime value '{lexical}', expected an offset date-time")

    date_part, time_part, fraction, offset = match.groups()
    # datetime carries microseconds
    fraction = ((fraction or '') + '000000')[:6]
    if offset in ('Z', 'z'):
        offset = '+00:00'

    try:
        return datetime.fromisoformat(f"{date_part}T{time_part}.{fraction}{offset}")
    except ValueError as e:
        raise RdfTypeMismatchError(f"Invalid xsd:dateTime value '{lexical}': {e}") from e


def format_date_time(value: datetime) -> str:
    """Format an aware datetime as an xsd:dateTime lexical form."""
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError("Cannot store a date time value without a UTC offset")
    return value.isoformat()
