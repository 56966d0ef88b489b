"""
Configuration loader for seqdistance.
"""

import copy
import logging
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.yaml"

METHODS = ('ktuple', 'needleman_wunsch')


def merge_config(base: Dict[str, Any], overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Recursively merge ``overrides`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigurationError(f"Invalid YAML format in {config_path}")
    return config


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Check the values the engines depend on."""
    method = config.get('distance', {}).get('method')
    if method not in METHODS:
        raise ConfigurationError(
            f"Unknown distance method: {method!r}",
            suggestion=f"use one of {', '.join(METHODS)}",
        )

    kmer_size = config.get('distance', {}).get('kmer_size')
    if not isinstance(kmer_size, int) or isinstance(kmer_size, bool):
        raise ConfigurationError(f"distance.kmer_size must be an integer, got {kmer_size!r}")

    return config


def load_config(config_path: Optional[str] = None,
                overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Load the defaults, layer a user YAML file and ``overrides`` on top.
    A user file that does not exist raises FileNotFoundError.
    """
    config = _read_yaml(DEFAULT_CONFIG_PATH)
    source = DEFAULT_CONFIG_PATH

    if config_path is not None:
        source = Path(config_path)
        config = merge_config(config, _read_yaml(source))

    config = merge_config(config, overrides)
    validate_config(config)

    config['_source'] = str(Path(source).resolve())
    logger.debug("Configuration loaded from %s", config['_source'])
    return config
