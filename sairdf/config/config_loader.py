"""
sai-rdf-utils Configuration Loader

This module provides functionality to load and validate configuration from
YAML files. Sections missing from the file fall back to built-in defaults.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
import logging

from ..rdf.rdf_exceptions import RdfConfigurationError

logger = logging.getLogger(__name__)


DOCUMENT_LOADER_TYPES = ('requests', 'local', 'none')


class SaiRdfConfig:
    """
    Configuration loader and manager.

    Loads configuration from a YAML file, or uses built-in defaults when no
    path is given, and provides access to configuration sections.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration loader.

        Args:
            config_path: Path to configuration file. If None, built-in defaults are used.
        """
        self.config_data: Dict[str, Any] = {}
        self.config_path: Optional[str] = None

        if config_path is not None:
            self.load_config(config_path)

    def load_config(self, config_path: str) -> None:
        """
        Load configuration from a specific file path.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            RdfConfigurationError: If the file cannot be loaded or parsed
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise RdfConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise RdfConfigurationError(f"Error parsing YAML configuration: {e}")
        except OSError as e:
            raise RdfConfigurationError(f"Error loading configuration file: {e}")

        if not isinstance(config_data, dict):
            raise RdfConfigurationError(f"Configuration must be a mapping: {config_path}")

        self.config_data = config_data
        self.config_path = str(config_file.absolute())
        logger.info(f"Loaded configuration from: {self.config_path}")

    def _get_default_config(self) -> Dict[str, Any]:
        """
        Get the default configuration values.

        Returns:
            Dictionary containing default configuration values
        """
        return {
            'jsonld': {
                'use_native_types': False,
                'indent': None,
            },
            'document_loader': {
                'type': 'requests',
                'timeout': 10,
                'allow_remote': False,
                'contexts': {},
            },
            'app': {
                'log_level': 'INFO'
            }
        }

    def get_jsonld_config(self) -> Dict[str, Any]:
        """
        Get JSON-LD output configuration section.

        Returns:
            Dictionary containing JSON-LD configuration, merged with defaults
        """
        defaults = self._get_default_config()['jsonld']
        config = dict(self.config_data.get('jsonld') or {})
        config.pop('document_loader', None)
        return {**defaults, **config}

    def get_document_loader_config(self) -> Dict[str, Any]:
        """
        Get the JSON-LD document loader configuration (jsonld.document_loader).

        Relative context file paths are resolved against the directory of
        the configuration file.

        Returns:
            Dictionary containing document loader configuration, merged with defaults
        """
        defaults = self._get_default_config()['document_loader']
        jsonld_config = self.config_data.get('jsonld') or {}
        config = {**defaults, **(jsonld_config.get('document_loader') or {})}

        contexts = config.get('contexts') or {}
        if isinstance(contexts, dict) and self.config_path:
            base_dir = Path(self.config_path).parent
            contexts = {url: str(base_dir / path) for url, path in contexts.items()}
        config['contexts'] = contexts
        return config

    def get_app_config(self) -> Dict[str, Any]:
        """
        Get application configuration section.

        Returns:
            Dictionary containing app configuration
        """
        defaults = self._get_default_config()['app']
        return {**defaults, **(self.config_data.get('app') or {})}

    def get_log_level(self) -> str:
        """
        Get the log level, SAIRDF_LOG_LEVEL overriding app.log_level.

        Returns:
            Log level name
        """
        return os.getenv('SAIRDF_LOG_LEVEL', self.get_app_config().get('log_level', 'INFO')).upper()

    def validate_config(self) -> None:
        """
        Validate the loaded configuration.

        Raises:
            RdfConfigurationError: If configuration is invalid
        """
        loader_config = self.get_document_loader_config()

        loader_type = loader_config.get('type')
        if loader_type not in DOCUMENT_LOADER_TYPES:
            raise RdfConfigurationError(
                f"Invalid document loader type: {loader_type}. Must be one of {', '.join(DOCUMENT_LOADER_TYPES)}"
            )

        try:
            timeout = float(loader_config.get('timeout'))
        except (ValueError, TypeError):
            raise RdfConfigurationError("Document loader timeout must be a number")
        if timeout <= 0:
            raise RdfConfigurationError(f"Invalid document loader timeout: {timeout}")

        if not isinstance(loader_config.get('contexts'), dict):
            raise RdfConfigurationError("Document loader contexts must be a mapping of URL to file path")

        indent = self.get_jsonld_config().get('indent')
        if indent is not None and (not isinstance(indent, int) or isinstance(indent, bool) or indent < 0):
            raise RdfConfigurationError(f"Invalid JSON-LD indent: {indent}")

        logger.info("Configuration validation passed")

    def __str__(self) -> str:
        """String representation of the configuration."""
        return f"SaiRdfConfig(path={self.config_path}, sections={list(self.config_data.keys())})"


# Global configuration instance
_config_instance: Optional[SaiRdfConfig] = None


def get_config(config_path: Optional[str] = None) -> SaiRdfConfig:
    """
    Get the global configuration instance.

    Args:
        config_path: Optional path to configuration file, defaulting to the
            SAIRDF_CONFIG environment variable. Only used on first call.

    Returns:
        SaiRdfConfig instance
    """
    global _config_instance

    if _config_instance is None:
        _config_instance = SaiRdfConfig(config_path or os.getenv('SAIRDF_CONFIG'))
        _config_instance.validate_config()

    return _config_instance


def reload_config(config_path: Optional[str] = None) -> SaiRdfConfig:
    """
    Reload the global configuration instance.

    Args:
        config_path: Optional path to configuration file

    Returns:
        New SaiRdfConfig instance
    """
    global _config_instance

    _config_instance = SaiRdfConfig(config_path or os.getenv('SAIRDF_CONFIG'))
    _config_instance.validate_config()

    return _config_instance
