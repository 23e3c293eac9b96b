"""
Graph comparison utilities.

Compares rdflib graphs as sets of triples, treating blank nodes by structure
rather than by identifier, so a graph and its encode/decode round trip
compare equal.
"""

from typing import Tuple
import logging

from rdflib import Graph
from rdflib.compare import graph_diff, isomorphic, to_isomorphic

logger = logging.getLogger(__name__)


def graphs_equivalent(graph_a: Graph, graph_b: Graph) -> bool:
    """
    Compare two graphs for equality, blank node identity aside.

    Args:
        graph_a: First graph to compare
        graph_b: Second graph to compare

    Returns:
        bool: True if the graphs hold the same triples
    """
    # Handle null cases
    if graph_a is None and graph_b is None:
        return True
    if graph_a is None or graph_b is None:
        return False

    if len(graph_a) != len(graph_b):
        logger.debug(f"Graph sizes differ: {len(graph_a)} != {len(graph_b)}")
        return False

    return isomorphic(graph_a, graph_b)


def graph_difference(graph_a: Graph, graph_b: Graph) -> Tuple[Graph, Graph]:
    """
    Get the triples found in only one of two graphs.

    Returns:
        Tuple of (only_in_a, only_in_b) graphs
    """
    _, only_in_a, only_in_b = graph_diff(to_isomorphic(graph_a), to_isomorphic(graph_b))
    return only_in_a, only_in_b
