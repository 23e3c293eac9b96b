"""Test Helper Functions

Utility functions to support sai-rdf-utils testing.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from sairdf.config.config_loader import SaiRdfConfig


def setup_test_logging():
    """Set up logging for tests."""
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def write_config(directory: Path, config_data: Dict[str, Any]) -> SaiRdfConfig:
    """Write a YAML configuration file and load it.

    Args:
        directory: Directory to write sairdf-config.yaml into
        config_data: Configuration content

    Returns:
        Loaded and validated SaiRdfConfig
    """
    config_path = directory / "sairdf-config.yaml"
    config_path.write_text(yaml.safe_dump(config_data), encoding='utf-8')
    config = SaiRdfConfig(str(config_path))
    config.validate_config()
    return config


def write_context_file(directory: Path, name: str, document: Dict[str, Any]) -> Path:
    """Write a JSON-LD context document to a file."""
    path = directory / name
    path.write_text(json.dumps(document), encoding='utf-8')
    return path


def find_node(document: Any, node_id: str) -> Optional[Dict[str, Any]]:
    """Find the node object with the given @id in expanded or compacted JSON-LD.

    Args:
        document: Parsed JSON-LD (a node list, a node object or an @graph object)
        node_id: Absolute IRI of the node

    Returns:
        Node object or None
    """
    if isinstance(document, dict):
        if document.get('@id') == node_id:
            return document
        nodes = document.get('@graph', [])
    else:
        nodes = document

    for node in nodes:
        if node.get('@id') == node_id:
            return node
    return None
