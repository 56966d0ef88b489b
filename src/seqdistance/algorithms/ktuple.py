"""
K-tuple distance: shared k-mers, greedy sparse chaining and a gap-aware
score over the resulting anchor path.

The result is an approximation. Chaining takes the first improving
predecessor rather than the best one, and the distance is not symmetric
in its arguments.
"""

import logging
from typing import List, Tuple

from ..errors import InvalidSequenceError
from .anchor_chaining import find_anchor_path
from .seed_matcher import build_kmer_index, generate_kmer_matches

logger = logging.getLogger(__name__)


def check_sequence(name, value):
    """Raise InvalidSequenceError unless ``value`` is str or bytes."""
    if not isinstance(value, (str, bytes)):
        raise InvalidSequenceError(name, value)


def check_sequence_pair(seq_a, seq_b):
    """Both sequences must be valid and of the same type."""
    check_sequence('seq_a', seq_a)
    check_sequence('seq_b', seq_b)
    if isinstance(seq_a, str) != isinstance(seq_b, str):
        raise InvalidSequenceError(
            'seq_b', seq_b,
            message=f"cannot compare {type(seq_a).__name__} with {type(seq_b).__name__}",
        )


def score_anchor_path(len_a: int, len_b: int, path) -> float:
    """
    Distance from an anchor path (synthetic origin excluded).

    A cursor advances through both sequences towards each anchor; when a
    cursor is already at the anchor coordinate the step is counted as a
    gap in that sequence instead. The alignment length is the longer
    sequence plus its gaps and the distance is
    ``1 - anchors / alignment_length``.
    """
    total = first = second = 0
    gap_a = gap_b = 0

    for qpos, tpos in path:
        while total < max(qpos, tpos):
            if first < qpos:
                first += 1
            else:
                gap_a += 1

            if second < tpos:
                second += 1
            else:
                gap_b += 1

            total += 1

    alignment_length = max(len_a + gap_a, len_b + gap_b)
    logger.debug("Pair length: %d | alignment length: %d", len(path), alignment_length)
    if alignment_length == 0:
        return 0.0
    return 1.0 - len(path) / alignment_length


def ktuple_alignment(seq_a, seq_b, kmer_size: int, offset_base: int = 0) -> List[Tuple[int, int]]:
    """
    Ordered anchor path of the k-tuple heuristic, for inspection.

    ``offset_base=1`` reports 1-based positions.
    """
    check_sequence_pair(seq_a, seq_b)

    index_a = build_kmer_index(seq_a, kmer_size)
    index_b = build_kmer_index(seq_b, kmer_size)
    matches = generate_kmer_matches(index_a, index_b, offset_base)
    return find_anchor_path(matches)


def ktuple_distance(seq_a, seq_b, kmer_size: int) -> float:
    """
    Approximate distance in [0, 1] between two sequences from shared
    k-mers of length ``kmer_size``.

    A k-mer size of zero or one larger than either sequence produces no
    matches, so the distance only reflects the sequence lengths.
    """
    path = ktuple_alignment(seq_a, seq_b, kmer_size)
    return score_anchor_path(len(seq_a), len(seq_b), path)


# Name exported by the original extension module.
find_alignment = ktuple_distance

__all__ = [
    'check_sequence',
    'check_sequence_pair',
    'score_anchor_path',
    'ktuple_alignment',
    'ktuple_distance',
    'find_alignment',
]
