"""
K-mer indexing and cross-sequence matching for the k-tuple distance.
"""

import logging
from collections import defaultdict

logger = logging.getLogger(__name__)

# ================================================================
# Build index for one sequence
# ================================================================
def build_kmer_index(sequence, kmer_size):
    """
    Construct the occurrence table of a sequence:
        kmer -> [offsets]

    Offsets are appended in ascending order. A k-mer size below 1 or
    larger than the sequence yields an empty index.
    """
    index = defaultdict(list)

    if kmer_size < 1 or kmer_size > len(sequence):
        return dict(index)

    for offset in range(len(sequence) - kmer_size + 1):
        index[sequence[offset:offset + kmer_size]].append(offset)

    return dict(index)

# ================================================================
# Cross product of shared k-mers
# ================================================================
def cross_product(a_offsets, b_offsets, output, offset_base=0):
    """Append every (a, b) offset combination to ``output``."""
    for a in a_offsets:
        for b in b_offsets:
            output.append((a + offset_base, b + offset_base))

def generate_kmer_matches(index_a, index_b, offset_base=0):
    """
    index_a, index_b: k-mer -> offsets tables built with the same k

    For every k-mer present in both tables emit all (a_pos, b_pos)
    pairs, then sort ascending by (a_pos, b_pos). ``offset_base=1``
    reports positions 1-based for display.
    """
    if len(index_b) < len(index_a):
        shared = [k for k in index_b if k in index_a]
    else:
        shared = [k for k in index_a if k in index_b]

    matches = []
    for kmer in shared:
        cross_product(index_a[kmer], index_b[kmer], matches, offset_base)

    # hash order of the tables must not leak into the chaining order
    matches.sort()
    logger.debug("%d shared k-mers, %d match pairs", len(shared), len(matches))
    return matches

__all__ = [
    'build_kmer_index',
    'cross_product',
    'generate_kmer_matches',
]
