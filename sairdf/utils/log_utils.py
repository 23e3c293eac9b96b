"""
Logging setup for sai-rdf-utils.
"""

import logging
import sys
from typing import Optional

from ..config.config_loader import SaiRdfConfig, get_config


def setup_logging(level: Optional[str] = None, config: Optional[SaiRdfConfig] = None) -> None:
    """
    Set up logging configuration.

    Args:
        level: Log level name; read from the configuration when None
        config: Configuration to read the level from, the global configuration when None
    """
    if level is None:
        level = (config or get_config()).get_log_level()

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
