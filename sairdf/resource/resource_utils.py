"""
Resource Utilities

Helpers for looking up and creating resources bound to a graph.
"""

import logging
from typing import Optional, Union

from rdflib import Graph, URIRef
from rdflib.namespace import RDF
from rdflib.resource import Resource

from ..rdf.rdf_terms import as_term

logger = logging.getLogger(__name__)


def get_resource_from_graph(graph: Graph, resource_uri: Union[str, URIRef]) -> Resource:
    """
    Get the resource at resource_uri, bound to the provided graph.

    The resource is returned whether or not the graph holds statements about it.
    """
    if graph is None:
        raise ValueError("Must provide a graph to get a resource from it")
    if resource_uri is None:
        raise ValueError("Must provide resource to get from graph")
    return graph.resource(URIRef(str(resource_uri)))


def get_new_resource(resource_uri: Union[str, URIRef], graph: Optional[Graph] = None) -> Resource:
    """
    Get a resource for resource_uri in the provided graph, or in a new graph.
    """
    if resource_uri is None:
        raise ValueError("Must provide a resource uri to create a resource")
    if graph is None:
        graph = Graph()
    return graph.resource(URIRef(str(resource_uri)))


def get_new_resource_for_type(resource_uri: Union[str, URIRef], rdf_type,
                              graph: Optional[Graph] = None) -> Resource:
    """
    Get a new resource and add a statement identifying it as rdf_type.

    Args:
        resource_uri: URI of the resource
        rdf_type: Type IRI, as a string or an RDF node
        graph: Graph to create the resource in, a new graph when None

    Returns:
        Resource with an rdf:type statement
    """
    if rdf_type is None:
        raise ValueError("Must provide a type for the new resource")
    resource = get_new_resource(resource_uri, graph)
    type_node = as_term(rdf_type)
    # plain strings name a type IRI, rdflib terms are used as given
    if type(type_node) is str:
        type_node = URIRef(type_node)
    resource.graph.add((resource.identifier, RDF.type, type_node))
    logger.debug(f"Created resource {resource.identifier} of type {type_node}")
    return resource
