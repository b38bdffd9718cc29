"""
Settings for the fetcher and logging: packaged config.yaml, overridden by
environment variables.
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


class Config:
    """Two-section configuration (``fetcher``, ``logging``) read from YAML."""

    env_mappings = {
        'FETCHER_USER_AGENT': ('fetcher', 'user_agent'),
        'FETCHER_TIMEOUT': ('fetcher', 'timeout'),
        'FETCHER_MAX_REDIRECTS': ('fetcher', 'max_redirects'),
        'FETCHER_MAX_CONNECTIONS': ('fetcher', 'max_connections'),
        'LOG_LEVEL': ('logging', 'level'),
        'LOG_FORMAT': ('logging', 'format'),
    }

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH)
        self._config = self._read_yaml()
        for env_var, (section, key) in self.env_mappings.items():
            raw = os.getenv(env_var)
            if raw is not None:
                self._section(section)[key] = parse_env_value(raw)

    def _read_yaml(self) -> Dict[str, Any]:
        if not self.config_path.is_file():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        try:
            loaded = yaml.safe_load(self.config_path.read_text())
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file: {e}")
        return loaded if isinstance(loaded, dict) else {}

    def _section(self, name: str) -> Dict[str, Any]:
        section = self._config.get(name)
        if not isinstance(section, dict):
            section = self._config[name] = {}
        return section

    def get(self, *keys, default=None):
        """Look up a nested value, e.g. ``get('fetcher', 'timeout')``."""
        node: Any = self._config
        for key in keys:
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return node

    @property
    def fetcher(self) -> Dict[str, Any]:
        return self.get('fetcher', default={})

    @property
    def logging(self) -> Dict[str, Any]:
        return self.get('logging', default={})


def parse_env_value(raw: str) -> Any:
    """Type an environment string the way a YAML scalar would be typed.

    ``"2.5"`` -> 2.5, ``"4"`` -> 4, ``"true"`` -> True. Anything that does not
    parse to a scalar stays a string.
    """
    try:
        value = yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
    if value is None or isinstance(value, (dict, list)):
        return raw
    return value
