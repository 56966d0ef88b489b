"""
Pairwise distance matrix pipeline.
"""

from .main_pipeline import (
    compute_distance,
    distance_matrix,
    main,
    parse_num_workers,
    run_distances,
    setup_logging,
)

__all__ = [
    'compute_distance',
    'distance_matrix',
    'main',
    'parse_num_workers',
    'run_distances',
    'setup_logging',
]
