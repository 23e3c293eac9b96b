"""
JSON-LD Document Loaders

Builds the pyld document loader used to dereference remote contexts during
compaction. The loader is handed to pyld per call through the
'documentLoader' option; the pyld module-level loader is left untouched.
"""

import json
import logging
from typing import Any, Callable, Dict, Optional

from pyld import jsonld
from pyld.jsonld import JsonLdError

from ..config.config_loader import SaiRdfConfig, get_config

logger = logging.getLogger(__name__)

DocumentLoader = Callable[..., Dict[str, Any]]


def _load_error(message: str, url: str, cause: Optional[Exception] = None) -> JsonLdError:
    return JsonLdError(
        message,
        'jsonld.LoadDocumentError',
        {'url': url},
        code='loading document failed',
        cause=cause)


def disabled_document_loader(url: str, options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Document loader that refuses every remote document."""
    raise _load_error(f"Remote document loading is disabled, cannot load {url}", url)


def local_document_loader(contexts: Dict[str, str],
                          fallback: Optional[DocumentLoader] = None) -> DocumentLoader:
    """
    Create a document loader serving known URLs from local files.

    Args:
        contexts: Mapping of document URL to local JSON file path
        fallback: Loader used for URLs not in contexts; unmapped URLs fail when None

    Returns:
        pyld document loader callable
    """
    contexts = dict(contexts)

    def loader(url: str, options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        path = contexts.get(url)
        if path is None:
            if fallback is not None:
                logger.debug(f"No local document for {url}, using remote loader")
                return fallback(url, options or {})
            raise _load_error(f"No local document configured for {url}", url)

        try:
            with open(path, 'r', encoding='utf-8') as f:
                document = json.load(f)
        except (OSError, ValueError) as e:
            raise _load_error(f"Could not load local document {path} for {url}: {e}", url, cause=e)

        logger.debug(f"Loaded {url} from local document {path}")
        return {
            'contentType': 'application/ld+json',
            'contextUrl': None,
            'documentUrl': url,
            'document': document
        }

    return loader


def build_document_loader(config: Optional[SaiRdfConfig] = None) -> DocumentLoader:
    """
    Build the document loader described by the jsonld.document_loader config.

    Args:
        config: Configuration to read, the global configuration when None

    Returns:
        pyld document loader callable
    """
    config = config or get_config()
    loader_config = config.get_document_loader_config()
    loader_type = loader_config.get('type', 'requests')
    timeout = loader_config.get('timeout')

    if loader_type == 'none':
        return disabled_document_loader

    if loader_type == 'local':
        fallback = None
        if loader_config.get('allow_remote'):
            fallback = jsonld.requests_document_loader(timeout=timeout)
        return local_document_loader(loader_config.get('contexts') or {}, fallback)

    return jsonld.requests_document_loader(timeout=timeout)
