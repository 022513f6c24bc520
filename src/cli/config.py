"""Publish configuration loading and merging.

Settings come from an optional YAML file and are overridden by CLI options.
Configuration file structure (every key optional):

    manifest: build/pages.yaml
    space_key: DOCS
    ancestor_id: "123456"
    strategy: APPEND_TO_ANCESTOR
    page_title_prefix: ""
    page_title_suffix: ""
    source_encoding: utf-8
    confluence_url: https://example.atlassian.net/wiki
"""

import dataclasses
import logging
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError, ConfigNotFoundError
from .models import PublishConfig

logger = logging.getLogger(__name__)


class PublishConfigLoader:
    """Handles configuration file loading, validation, and CLI overrides."""

    DEFAULT_CONFIG_PATH = '.confluence-publisher.yaml'

    KNOWN_FIELDS = {f.name for f in dataclasses.fields(PublishConfig)}

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> PublishConfig:
        """Load configuration from a YAML file.

        A missing default file yields an empty configuration; a missing file
        that was explicitly requested is an error.

        Args:
            config_path: Path to the YAML file, or None for the default path

        Returns:
            PublishConfig parsed from the file

        Raises:
            ConfigNotFoundError: If an explicit config_path does not exist
            ConfigError: If the file is malformed
        """
        explicit = config_path is not None
        path = config_path or cls.DEFAULT_CONFIG_PATH

        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            if explicit:
                raise ConfigNotFoundError(path)
            logger.debug(f"No configuration file at {path}, using CLI options only")
            return PublishConfig()
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}")

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")

        if config_dict is None:
            return PublishConfig()

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        logger.info(f"Loaded configuration from {path}")
        return cls._parse_config(config_dict)

    @classmethod
    def merge(cls, config: PublishConfig, overrides: Dict[str, Any]) -> PublishConfig:
        """Return a copy of config with every non-None override applied."""
        unknown = set(overrides) - cls.KNOWN_FIELDS
        if unknown:
            raise ConfigError(f"Unknown configuration fields: {', '.join(sorted(unknown))}")

        values = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(config, **values)

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> PublishConfig:
        unknown = set(config_dict) - cls.KNOWN_FIELDS
        if unknown:
            raise ConfigError(f"Unknown configuration fields: {', '.join(sorted(unknown))}")

        values: Dict[str, Any] = {}
        for key, value in config_dict.items():
            if value is None:
                continue
            if isinstance(value, (dict, list)):
                raise ConfigError(f"Field '{key}' must be a scalar value", key)
            values[key] = str(value)

        return PublishConfig(**values)
