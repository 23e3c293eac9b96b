"""
Resource Update Implementation

Replace-style updates of a resource's properties. Every update removes all
existing statements for the (resource, property) pair and then inserts the
new ones, so values are never merged. Updates return the resource so calls
can be chained; arguments are checked before the graph is touched.
"""

import logging
from datetime import datetime
from typing import Iterable, List

from rdflib import BNode, Literal, URIRef
from rdflib.namespace import XSD
from rdflib.resource import Resource

from ..rdf.rdf_terms import as_term, format_date_time, is_valid_uri

logger = logging.getLogger(__name__)


def update_object(resource: Resource, prop: URIRef, value) -> Resource:
    """
    Replace every object of the property with a single value.

    The literal or IRI term is built from the Python type of value:

    - URIRef, BNode, Literal or Resource: stored as is
    - bool: xsd:boolean
    - int: xsd:integer
    - datetime (timezone-aware): xsd:dateTime
    - str: xsd:string

    Args:
        resource: Resource to update
        prop: Property to replace
        value: New object value

    Returns:
        The updated resource
    """
    value = as_term(value)
    if isinstance(value, (URIRef, BNode, Literal)):
        return _replace(resource, prop, [value])
    # bool is an int subclass
    if isinstance(value, bool):
        return update_boolean_object(resource, prop, value)
    if isinstance(value, int):
        return update_integer_object(resource, prop, value)
    if isinstance(value, datetime):
        return update_date_time_object(resource, prop, value)
    if isinstance(value, str):
        return update_string_object(resource, prop, value)
    if value is None:
        raise ValueError("Cannot update a resource by passing a null object")
    raise TypeError(f"Cannot update a resource with a value of type {type(value).__name__}")


def update_string_object(resource: Resource, prop: URIRef, value: str) -> Resource:
    if value is None:
        raise ValueError("Cannot update a resource by passing a null string")
    return _replace(resource, prop, [_string_literal(value)])


def update_uri_object(resource: Resource, prop: URIRef, uri) -> Resource:
    if uri is None:
        raise ValueError("Cannot update a resource by passing a null uri")
    return _replace(resource, prop, [_uri_node(uri)])


def update_date_time_object(resource: Resource, prop: URIRef, value: datetime) -> Resource:
    if value is None:
        raise ValueError("Cannot update a resource by passing a null date time value")
    if not isinstance(value, datetime):
        raise ValueError(f"Cannot update a resource by passing a non-datetime value {value!r}")
    node = Literal(format_date_time(value), datatype=XSD.dateTime)
    return _replace(resource, prop, [node])


def update_integer_object(resource: Resource, prop: URIRef, value: int) -> Resource:
    if value is None or isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Cannot update a resource by passing a non-integer value {value!r}")
    return _replace(resource, prop, [Literal(str(value), datatype=XSD.integer)])


def update_boolean_object(resource: Resource, prop: URIRef, value: bool) -> Resource:
    if not isinstance(value, bool):
        raise ValueError(f"Cannot update a resource by passing a non-boolean value {value!r}")
    return _replace(resource, prop, [Literal('true' if value else 'false', datatype=XSD.boolean)])


def update_objects(resource: Resource, prop: URIRef, objects: Iterable) -> Resource:
    """Replace every object of the property with the given nodes."""
    if objects is None:
        raise ValueError("Cannot update a resource by passing a null list")
    nodes = []
    for obj in objects:
        obj = as_term(obj)
        if not isinstance(obj, (URIRef, BNode, Literal)):
            raise TypeError(f"Cannot update a resource with a non-RDF object {obj!r}")
        nodes.append(obj)
    return _replace(resource, prop, nodes)


def update_uri_objects(resource: Resource, prop: URIRef, uris: Iterable) -> Resource:
    """Replace every object of the property with the given URIs."""
    if uris is None:
        raise ValueError("Cannot update a resource by passing a null list")
    return _replace(resource, prop, [_uri_node(uri) for uri in uris])


def update_string_objects(resource: Resource, prop: URIRef, strings: Iterable[str]) -> Resource:
    """Replace every object of the property with the given strings."""
    if strings is None:
        raise ValueError("Cannot update a resource by passing a null list")
    nodes = []
    for value in strings:
        if value is None:
            raise ValueError("Cannot update a resource by passing a null string")
        nodes.append(_string_literal(value))
    return _replace(resource, prop, nodes)


def _replace(resource: Resource, prop: URIRef, nodes: List) -> Resource:
    if resource is None:
        raise ValueError("Cannot update a null resource")
    if prop is None:
        raise ValueError("Cannot update a resource by passing a null property")

    graph = resource.graph
    subject = resource.identifier
    graph.remove((subject, prop, None))
    for node in nodes:
        graph.add((subject, prop, node))

    logger.debug(f"Replaced objects of {subject} -- {prop} with {len(nodes)} value(s)")
    return resource


def _string_literal(value: str) -> Literal:
    if not isinstance(value, str):
        raise ValueError(f"Cannot update a resource by passing a non-string value {value!r}")
    return Literal(value)


def _uri_node(uri) -> URIRef:
    uri = as_term(uri)
    if isinstance(uri, URIRef):
        return uri
    if isinstance(uri, str) and not isinstance(uri, (Literal, BNode)) and is_valid_uri(uri):
        return URIRef(uri)
    raise ValueError(f"Cannot update a resource by passing an invalid uri {uri!r}")
