"""
Input/output utilities for seqdistance.
"""

from .fasta_reader import (
    validate_fasta_file,
    read_fasta_file,
    list_fasta_sequences,
)

from .results_writer import (
    FORMATS,
    write_distance_matrix,
    save_configuration,
)

__all__ = [
    'validate_fasta_file',
    'read_fasta_file',
    'list_fasta_sequences',
    'FORMATS',
    'write_distance_matrix',
    'save_configuration',
]
