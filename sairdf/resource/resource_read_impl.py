"""
Resource Read Implementation

Typed, fail-fast reads of a resource's properties. Optional readers return
None (or an empty set) when nothing matches; required readers raise
RdfNotFoundError instead. Both raise RdfTypeMismatchError when a value is
present but of the wrong term kind or datatype.
"""

import logging
from datetime import datetime
from typing import Callable, Optional, Set, Tuple, TypeVar

from rdflib import URIRef
from rdflib.namespace import XSD
from rdflib.resource import Resource

from ..rdf.rdf_exceptions import RdfNotFoundError, RdfTypeMismatchError
from ..rdf.rdf_terms import (
    TermKind,
    literal_datatype,
    node_to_uri,
    parse_boolean,
    parse_date_time,
    parse_integer,
    term_kind,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')

Statement = Tuple[object, URIRef, object]


def get_statement(resource: Resource, prop: URIRef) -> Optional[Statement]:
    """
    Get a single statement matching the property on the resource.

    When several statements match, which one is returned is undefined; use
    get_objects to see every value.

    Args:
        resource: Resource to navigate
        prop: Property to search for

    Returns:
        Matching (subject, predicate, object) triple or None
    """
    _require_lookup_args(resource, prop)
    statements = resource.graph.triples((resource.identifier, prop, None))
    statement = next(statements, None)
    if statement is not None and next(statements, None) is not None:
        logger.debug(f"Multiple statements for {resource.identifier} -- {prop}, returning an arbitrary one")
    return statement


def get_required_statement(resource: Resource, prop: URIRef) -> Statement:
    """
    Get a single statement matching the property on the resource.

    Raises:
        RdfNotFoundError: When nothing is found
    """
    statement = get_statement(resource, prop)
    if statement is None:
        raise RdfNotFoundError(_msg_nothing_found(resource, prop))
    return statement


def get_object(resource: Resource, prop: URIRef):
    """Get the object node of a statement matching the property, or None."""
    statement = get_statement(resource, prop)
    if statement is None:
        return None
    return statement[2]


def get_required_object(resource: Resource, prop: URIRef):
    """
    Get the object node of a statement matching the property.

    Raises:
        RdfNotFoundError: When nothing is found
    """
    return get_required_statement(resource, prop)[2]


def get_objects(resource: Resource, prop: URIRef) -> Set:
    """Get every object node for the property, untyped. Possibly empty."""
    _require_lookup_args(resource, prop)
    return set(resource.graph.objects(resource.identifier, prop))


def get_required_objects(resource: Resource, prop: URIRef) -> Set:
    """
    Get every object node for the property, untyped.

    Raises:
        RdfNotFoundError: When nothing is found
    """
    objects = get_objects(resource, prop)
    if not objects:
        raise RdfNotFoundError(_msg_nothing_found(resource, prop))
    return objects


def get_uri_objects(resource: Resource, prop: URIRef) -> Set[URIRef]:
    """
    Get every object of the property as a URI. Possibly empty.

    Raises:
        RdfTypeMismatchError: On the first object that is not a valid URI
    """
    return {_to_uri(resource, prop, node) for node in get_objects(resource, prop)}


def get_required_uri_objects(resource: Resource, prop: URIRef) -> Set[URIRef]:
    """
    Get every object of the property as a URI.

    Raises:
        RdfTypeMismatchError: On the first object that is not a valid URI
        RdfNotFoundError: When nothing is found
    """
    uris = get_uri_objects(resource, prop)
    if not uris:
        raise RdfNotFoundError(_msg_nothing_found(resource, prop))
    return uris


def get_string_objects(resource: Resource, prop: URIRef) -> Set[str]:
    """
    Get every object of the property as a string. Possibly empty.

    Raises:
        RdfTypeMismatchError: On the first object that is not an xsd:string literal
    """
    return {_to_string(resource, prop, node) for node in get_objects(resource, prop)}


def get_required_string_objects(resource: Resource, prop: URIRef) -> Set[str]:
    """
    Get every object of the property as a string.

    Raises:
        RdfTypeMismatchError: On the first object that is not an xsd:string literal
        RdfNotFoundError: When nothing is found
    """
    strings = get_string_objects(resource, prop)
    if not strings:
        raise RdfNotFoundError(_msg_nothing_found(resource, prop))
    return strings


def get_uri_object(resource: Resource, prop: URIRef) -> Optional[URIRef]:
    """
    Get the object of the property as a URI, or None when absent.

    Raises:
        RdfTypeMismatchError: If the object is a literal, a blank node or an invalid URI
    """
    node = get_object(resource, prop)
    if node is None:
        return None
    return _to_uri(resource, prop, node)


def get_required_uri_object(resource: Resource, prop: URIRef) -> URIRef:
    uri = get_uri_object(resource, prop)
    if uri is None:
        raise RdfNotFoundError(_msg_nothing_found(resource, prop))
    return uri


def get_string_object(resource: Resource, prop: URIRef) -> Optional[str]:
    """
    Get the object of the property as a string, or None when absent.

    Raises:
        RdfTypeMismatchError: If the object is not an xsd:string literal
    """
    return _get_typed_object(resource, prop, _to_string)


def get_required_string_object(resource: Resource, prop: URIRef) -> str:
    return _get_required_typed_object(resource, prop, _to_string, XSD.string)


def get_integer_object(resource: Resource, prop: URIRef) -> Optional[int]:
    """
    Get the object of the property as an integer, or None when absent.

    Raises:
        RdfTypeMismatchError: If the object is not an xsd:integer literal
    """
    return _get_typed_object(resource, prop, _to_integer)


def get_required_integer_object(resource: Resource, prop: URIRef) -> int:
    return _get_required_typed_object(resource, prop, _to_integer, XSD.integer)


def get_date_time_object(resource: Resource, prop: URIRef) -> Optional[datetime]:
    """
    Get the object of the property as an aware datetime, or None when absent.

    Raises:
        RdfTypeMismatchError: If the object is not an xsd:dateTime literal with an offset
    """
    return _get_typed_object(resource, prop, _to_date_time)


def get_required_date_time_object(resource: Resource, prop: URIRef) -> datetime:
    return _get_required_typed_object(resource, prop, _to_date_time, XSD.dateTime)


def get_boolean_object(resource: Resource, prop: URIRef) -> Optional[bool]:
    """
    Get the object of the property as a boolean, or None when absent.

    Raises:
        RdfTypeMismatchError: If the object is not an xsd:boolean literal
    """
    return _get_typed_object(resource, prop, _to_boolean)


def get_required_boolean_object(resource: Resource, prop: URIRef) -> bool:
    return _get_required_typed_object(resource, prop, _to_boolean, XSD.boolean)


def _get_typed_object(resource: Resource, prop: URIRef, convert: Callable[..., T]) -> Optional[T]:
    node = get_object(resource, prop)
    if node is None:
        return None
    return convert(resource, prop, node)


def _get_required_typed_object(resource: Resource, prop: URIRef, convert: Callable[..., T], datatype: URIRef) -> T:
    value = _get_typed_object(resource, prop, convert)
    if value is None:
        raise RdfNotFoundError(_msg_nothing_found(resource, prop, datatype))
    return value


def _to_uri(resource: Resource, prop: URIRef, node) -> URIRef:
    if term_kind(node) is TermKind.LITERAL:
        raise RdfTypeMismatchError(_msg_not_uri_resource(resource, prop, node))
    try:
        return node_to_uri(node)
    except RdfTypeMismatchError as e:
        raise RdfTypeMismatchError(f"{_msg_not_uri_resource(resource, prop, node)}: {e}") from e


def _literal_lexical(resource: Resource, prop: URIRef, node, datatype: URIRef) -> str:
    """Return the lexical form of node, checking kind and exact datatype."""
    if term_kind(node) is not TermKind.LITERAL:
        raise RdfTypeMismatchError(_msg_invalid_data_type(resource, prop, datatype))
    if literal_datatype(node) != datatype:
        raise RdfTypeMismatchError(_msg_invalid_data_type(resource, prop, datatype))
    return str(node)


def _to_string(resource: Resource, prop: URIRef, node) -> str:
    return _literal_lexical(resource, prop, node, XSD.string)


def _to_integer(resource: Resource, prop: URIRef, node) -> int:
    lexical = _literal_lexical(resource, prop, node, XSD.integer)
    try:
        return parse_integer(lexical)
    except RdfTypeMismatchError as e:
        raise RdfTypeMismatchError(f"{_msg_invalid_data_type(resource, prop, XSD.integer)}: {e}") from e


def _to_date_time(resource: Resource, prop: URIRef, node) -> datetime:
    lexical = _literal_lexical(resource, prop, node, XSD.dateTime)
    try:
        return parse_date_time(lexical)
    except RdfTypeMismatchError as e:
        raise RdfTypeMismatchError(f"{_msg_invalid_data_type(resource, prop, XSD.dateTime)}: {e}") from e


def _to_boolean(resource: Resource, prop: URIRef, node) -> bool:
    lexical = _literal_lexical(resource, prop, node, XSD.boolean)
    try:
        return parse_boolean(lexical)
    except RdfTypeMismatchError as e:
        raise RdfTypeMismatchError(f"{_msg_invalid_data_type(resource, prop, XSD.boolean)}: {e}") from e


def _require_lookup_args(resource: Resource, prop: URIRef) -> None:
    if resource is None:
        raise ValueError("Must provide a resource to navigate")
    if prop is None:
        raise ValueError("Must provide a property to search for")


def _msg_invalid_data_type(resource: Resource, prop: URIRef, datatype: URIRef) -> str:
    return f"Expected literal value of type {datatype} for {resource.identifier} -- {prop}"


def _msg_nothing_found(resource: Resource, prop: URIRef, datatype: Optional[URIRef] = None) -> str:
    if datatype is None:
        return f"Nothing found for {resource.identifier} -- {prop}"
    return f"Nothing found for {resource.identifier} -- {prop} of type {datatype}"


def _msg_not_uri_resource(resource: Resource, prop: URIRef, node) -> str:
    return f"Expected non-literal value for object at {resource.identifier} -- {prop} -- {node}"
