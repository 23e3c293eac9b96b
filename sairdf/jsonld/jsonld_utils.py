"""
JSON-LD Utilities

Converts rdflib graphs to JSON-LD through pyld and builds remote context
documents. Graph output is the expanded, context-free node list produced by
the RDF to JSON-LD algorithm; compacted output applies a caller supplied
context with IRIs kept absolute.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from pyld import jsonld
from pyld.jsonld import JsonLdError
from rdflib import Graph

from ..config.config_loader import SaiRdfConfig, get_config
from ..rdf.rdf_exceptions import RdfConfigurationError, RdfEncodeError
from .document_loader import build_document_loader

logger = logging.getLogger(__name__)


def encode_jsonld(graph: Graph, context_document: Optional[str] = None,
                  config: Optional[SaiRdfConfig] = None) -> str:
    """
    Serialize the whole graph as JSON-LD.

    Args:
        graph: Graph to serialize
        context_document: JSON-LD context document text. When empty or None
            the uncompacted graph form is returned
        config: Configuration for JSON-LD output and document loading

    Returns:
        Serialized JSON-LD string

    Raises:
        RdfEncodeError: If the graph cannot be lifted to JSON-LD or the
            context cannot be parsed or applied
    """
    if graph is None:
        raise ValueError("Cannot serialize a null graph")

    config = config or get_config()
    jsonld_config = config.get_jsonld_config()

    expanded = graph_to_expanded_jsonld(graph, use_native_types=bool(jsonld_config.get('use_native_types')))
    document: Any = expanded

    if context_document is not None and context_document.strip():
        document = compact_jsonld(expanded, context_document, config)

    return json.dumps(document, indent=jsonld_config.get('indent'))


def graph_to_expanded_jsonld(graph: Graph, use_native_types: bool = False) -> List[Dict[str, Any]]:
    """
    Lift a graph to expanded JSON-LD with the RDF to JSON-LD algorithm.

    Raises:
        RdfEncodeError: If the conversion fails
    """
    try:
        # N-Triples is the default-graph subset of N-Quads
        quads = graph.serialize(format='nt')
        if isinstance(quads, bytes):
            quads = quads.decode('utf-8')
        expanded = jsonld.from_rdf(quads, {
            'format': 'application/n-quads',
            'useNativeTypes': use_native_types
        })
    except JsonLdError as e:
        raise RdfEncodeError(f"Failed to serialize resource to JSON-LD: {e}") from e
    except Exception as e:
        raise RdfEncodeError(f"Failed to serialize graph to N-Quads for JSON-LD: {e}") from e

    logger.debug(f"Converted {len(graph)} triples to {len(expanded)} JSON-LD node objects")
    return expanded


def compact_jsonld(expanded: List[Dict[str, Any]], context_document: str,
                   config: Optional[SaiRdfConfig] = None) -> Dict[str, Any]:
    """
    Compact expanded JSON-LD against a context document.

    Relative IRI compaction is disabled so compacted IRIs stay absolute.
    Remote contexts are fetched with the configured document loader.

    Raises:
        RdfEncodeError: If the context is not valid JSON or compaction fails
    """
    try:
        context = json.loads(context_document)
    except ValueError as e:
        raise RdfEncodeError(f"Failed to serialize resource to JSON-LD, invalid context document: {e}") from e

    options = {
        'compactToRelative': False,
        'documentLoader': build_document_loader(config)
    }
    try:
        compacted = jsonld.compact(expanded, context, options)
    except JsonLdError as e:
        raise RdfEncodeError(f"Failed to serialize resource to JSON-LD: {e}") from e
    except Exception as e:
        raise RdfEncodeError(f"Failed to compact JSON-LD against the supplied context: {e}") from e

    logger.debug("Compacted JSON-LD document against supplied context")
    return compacted


def build_remote_context_document(remote_context: str) -> str:
    """
    Build a JSON-LD context document referencing one remote context.

    Returns:
        Document text of the form {"@context": "<uri>"}
    """
    if remote_context is None:
        raise ValueError("Must provide remote JSON-LD context to build")
    return json.dumps({'@context': remote_context}, indent=2)


def build_remote_context_documents(remote_contexts: List[str]) -> str:
    """
    Build a JSON-LD context document referencing several remote contexts.

    Returns:
        Document text of the form {"@context": ["<uri-1>", "<uri-2>", ...]},
        in input order

    Raises:
        RdfConfigurationError: If no contexts are provided
    """
    if remote_contexts is None:
        raise ValueError("Must provide JSON-LD contexts to build")
    remote_contexts = list(remote_contexts)
    if not remote_contexts:
        raise RdfConfigurationError("Cannot build JSON-LD context with no input")
    return json.dumps({'@context': remote_contexts}, indent=2)
