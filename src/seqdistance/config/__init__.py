"""
Configuration handling for seqdistance.
"""

from .config_loader import (
    DEFAULT_CONFIG_PATH,
    METHODS,
    load_config,
    merge_config,
    validate_config,
)

__all__ = [
    'DEFAULT_CONFIG_PATH',
    'METHODS',
    'load_config',
    'merge_config',
    'validate_config',
]
