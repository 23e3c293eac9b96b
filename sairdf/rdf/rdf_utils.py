"""
RDF Utilities for sai-rdf-utils

Provides parsing and serialization of RDF graphs in the supported formats,
selected by media type.
"""

import gzip
import logging
import zlib
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from rdflib import Graph

from .rdf_exceptions import RdfDecodeError, RdfEncodeError

logger = logging.getLogger(__name__)


TEXT_TURTLE = "text/turtle"
LD_JSON = "application/ld+json"
RDF_XML = "application/rdf+xml"
N_TRIPLES = "application/n-triples"


class RDFFormat(Enum):
    """Supported RDF formats, valued by rdflib plugin name."""
    TURTLE = "turtle"
    JSON_LD = "json-ld"
    XML = "xml"
    NT = "nt"


# Mapping between media types and RDFFormat, matched case-sensitively
_CONTENT_TYPE_TO_RDFFORMAT = {
    TEXT_TURTLE: RDFFormat.TURTLE,
    LD_JSON: RDFFormat.JSON_LD,
    RDF_XML: RDFFormat.XML,
    N_TRIPLES: RDFFormat.NT,
}

_RDFFORMAT_TO_CONTENT_TYPE = {v: k for k, v in _CONTENT_TYPE_TO_RDFFORMAT.items()}


def get_format_for_content_type(content_type: Optional[str]) -> RDFFormat:
    """
    Get the RDF format for a media type.

    Unrecognized or missing media types default to Turtle.
    """
    if content_type is None:
        return RDFFormat.TURTLE
    return _CONTENT_TYPE_TO_RDFFORMAT.get(content_type, RDFFormat.TURTLE)


def get_content_type_for_format(rdf_format: RDFFormat) -> str:
    """Get the media type for an RDF format."""
    return _RDFFORMAT_TO_CONTENT_TYPE[rdf_format]


def decode(base_uri: str, content: Union[str, bytes], content_type: Optional[str]) -> Graph:
    """
    Deserialize RDF content into a new graph.

    Args:
        base_uri: Base URI used to resolve relative IRIs in the content
        content: RDF text (str or UTF-8 bytes)
        content_type: Media type of the content, Turtle when unrecognized

    Returns:
        Graph holding the parsed triples

    Raises:
        RdfDecodeError: If the content does not parse as the declared format
    """
    if not base_uri:
        raise ValueError("Must provide a base URI to generate a graph")
    if content is None:
        raise ValueError("Must provide content to generate a graph from")

    return _parse(base_uri, content, get_format_for_content_type(content_type), source=None)


def decode_from_source(base_uri: str, source: Union[str, Path], content_type: Optional[str]) -> Graph:
    """
    Deserialize the contents of a file into a new graph.

    Files ending in .gz are decompressed while reading. The file is only
    held open for the duration of the parse.

    Args:
        base_uri: Base URI used to resolve relative IRIs in the content
        source: Path to the file containing RDF
        content_type: Media type of the file contents, Turtle when unrecognized

    Returns:
        Graph holding the parsed triples

    Raises:
        RdfDecodeError: If the file cannot be read or does not parse
    """
    if not base_uri:
        raise ValueError("Must provide a base URI to generate a graph")
    if source is None:
        raise ValueError("Must provide an input file path to provide data for the generated graph")

    source_path = str(source)
    rdf_format = get_format_for_content_type(content_type)

    try:
        if source_path.lower().endswith('.gz'):
            file_handle = gzip.open(source_path, 'rb')
        else:
            file_handle = open(source_path, 'rb')

        with file_handle as f:
            content = f.read()
    except (OSError, EOFError, zlib.error) as e:
        raise RdfDecodeError(f"Error reading input from file {source_path}: {e}", source=source_path) from e

    return _parse(base_uri, content, rdf_format, source=source_path)


def _parse(base_uri: str, content: Union[str, bytes], rdf_format: RDFFormat, source: Optional[str]) -> Graph:
    graph = Graph()
    try:
        graph.parse(data=content, publicID=base_uri, format=rdf_format.value)
    except Exception as e:
        if source:
            message = f"Error processing input from file {source}: {e}"
        else:
            message = f"Error processing input string: {e}"
        raise RdfDecodeError(message, source=source) from e

    logger.debug(f"Parsed {len(graph)} triples as {rdf_format.value} from {source or 'string'} with base {base_uri}")
    return graph


def encode(graph: Graph, content_type: Optional[str]) -> str:
    """
    Serialize the whole graph in the format selected by media type.

    Raises:
        RdfEncodeError: If the serializer fails
    """
    if graph is None:
        raise ValueError("Cannot serialize a null graph")

    rdf_format = get_format_for_content_type(content_type)
    try:
        serialized = graph.serialize(format=rdf_format.value)
    except Exception as e:
        raise RdfEncodeError(f"Failed to serialize graph to {rdf_format.value}: {e}") from e

    if isinstance(serialized, bytes):
        serialized = serialized.decode('utf-8')

    logger.debug(f"Serialized {len(graph)} triples as {rdf_format.value}")
    return serialized
