"""
JSON-LD Package

JSON-LD output for rdflib graphs, context documents and document loaders.
"""

from .jsonld_utils import (
    encode_jsonld,
    build_remote_context_document,
    build_remote_context_documents,
)

__all__ = [
    'encode_jsonld',
    'build_remote_context_document',
    'build_remote_context_documents',
]
