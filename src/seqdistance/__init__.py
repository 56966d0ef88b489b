"""
Pairwise sequence distances for clustering and tree building.
"""

from pathlib import Path

__version__ = "1.0.0"
__description__ = "K-tuple and Needleman-Wunsch distances between symbolic sequences"
__license__ = "MIT"

from .algorithms.ktuple import find_alignment, ktuple_alignment, ktuple_distance
from .algorithms.needleman_wunsch import needleman_wunsch_alignment, needleman_wunsch_distance
from .errors import (
    AnchorLookupError,
    ConfigurationError,
    InvalidSequenceError,
    SeqDistanceError,
)


def get_version():
    """Get the package version."""
    return __version__


def get_config_path():
    """Get the path to the default configuration file."""
    return str(Path(__file__).parent / "config" / "default_config.yaml")


__all__ = [
    # Metadata
    '__version__',
    '__description__',
    '__license__',
    'get_version',
    'get_config_path',

    # Distances
    'ktuple_distance',
    'ktuple_alignment',
    'find_alignment',
    'needleman_wunsch_distance',
    'needleman_wunsch_alignment',

    # Errors
    'SeqDistanceError',
    'InvalidSequenceError',
    'AnchorLookupError',
    'ConfigurationError',
]
