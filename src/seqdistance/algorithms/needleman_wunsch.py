"""
Exact global alignment distance (Needleman-Wunsch).

Cells hold costs, so each cell keeps the minimum of its three
transitions. Gaps cost a flat amount per step; there is no separate
gap-open charge.
"""

import logging

import numpy as np

from .ktuple import check_sequence_pair

logger = logging.getLogger(__name__)

# Costs are the negated pairwise scores: a match of +2 costs -2,
# a mismatch of -3 costs +3, every gap step costs 7.
MATCH_COST = -2
MISMATCH_COST = 3
GAP_PENALTY = 7

# Traceback codes
STOP = 0
DIAG = 1
VERT = 2    # consumes a symbol of seq_a (gap in seq_b)
HORIZ = 3   # consumes a symbol of seq_b (gap in seq_a)


def init_matrices(len_a, len_b, gap_penalty=GAP_PENALTY):
    """
    Allocate the (len_a+1) x (len_b+1) scoring and traceback matrices
    and fill the pure-gap boundary row and column.
    """
    score = np.zeros((len_a + 1, len_b + 1), dtype=np.int64)
    trace = np.zeros((len_a + 1, len_b + 1), dtype=np.uint8)

    score[0, :] = np.arange(len_b + 1, dtype=np.int64) * gap_penalty
    score[:, 0] = np.arange(len_a + 1, dtype=np.int64) * gap_penalty
    trace[0, 1:] = HORIZ
    trace[1:, 0] = VERT
    trace[0, 0] = STOP

    return score, trace


def fill_matrices(
    seq_a, seq_b,
    score, trace,
    match_cost=MATCH_COST,
    mismatch_cost=MISMATCH_COST,
    gap_penalty=GAP_PENALTY
):
    """
    Fill every interior cell with the cheapest of the diagonal, vertical
    and horizontal transitions. Ties go to diagonal, then vertical, then
    horizontal. Row 0 and column 0 are left untouched.
    """
    m, n = len(seq_a), len(seq_b)
    prev = score[0].tolist()

    for i in range(1, m + 1):
        a = seq_a[i - 1]
        cur = [prev[0] + gap_penalty] + [0] * n
        moves = [VERT] + [STOP] * n

        for j in range(1, n + 1):
            diag = prev[j - 1] + (match_cost if a == seq_b[j - 1] else mismatch_cost)
            vert = prev[j] + gap_penalty
            horiz = cur[j - 1] + gap_penalty

            best = diag
            move = DIAG
            if vert < best:
                best = vert
                move = VERT
            if horiz < best:
                best = horiz
                move = HORIZ

            cur[j] = best
            moves[j] = move

        score[i, 1:] = cur[1:]
        trace[i, 1:] = moves[1:]
        prev = cur

    return score, trace


def _walk(seq_a, seq_b, trace, to_origin=True):
    """
    Yield (move, i, j) from the bottom-right cell. With ``to_origin`` the
    walk runs through the boundary to (0, 0); otherwise it ends on the
    first cell of row 0 or column 0.
    """
    i, j = len(seq_a), len(seq_b)
    while (i > 0 or j > 0) if to_origin else (i > 0 and j > 0):
        move = trace[i, j]
        yield move, i, j
        if move == DIAG:
            i -= 1
            j -= 1
        elif move == VERT:
            i -= 1
        elif move == HORIZ:
            j -= 1
        else:
            raise RuntimeError(f"Traceback reached an unset cell at ({i}, {j})")


def traceback_distance(seq_a, seq_b, trace):
    """
    Count mismatching diagonal steps plus gap steps until the walk reaches
    row 0 or column 0, and normalize by the longer sequence length.
    Leading end gaps (the boundary run) are not counted.
    """
    longest = max(len(seq_a), len(seq_b))
    if longest == 0:
        return 0.0

    dist = 0
    for move, i, j in _walk(seq_a, seq_b, trace, to_origin=False):
        if move == DIAG:
            if seq_a[i - 1] != seq_b[j - 1]:
                dist += 1
        else:
            dist += 1

    return dist / longest


def traceback_alignment(seq_a, seq_b, trace, gap='-'):
    """
    Rebuild the gapped alignment strings from the traceback matrix.
    Returns (aligned_a, aligned_b).
    """
    if isinstance(seq_a, bytes):
        seq_a = seq_a.decode('ascii')
    if isinstance(seq_b, bytes):
        seq_b = seq_b.decode('ascii')

    a1, a2 = [], []
    for move, i, j in _walk(seq_a, seq_b, trace):
        if move == DIAG:
            a1.append(seq_a[i - 1])
            a2.append(seq_b[j - 1])
        elif move == VERT:
            a1.append(seq_a[i - 1])
            a2.append(gap)
        else:
            a1.append(gap)
            a2.append(seq_b[j - 1])

    return ''.join(reversed(a1)), ''.join(reversed(a2))


def _align(seq_a, seq_b, match_cost, mismatch_cost, gap_penalty):
    check_sequence_pair(seq_a, seq_b)

    score, trace = init_matrices(len(seq_a), len(seq_b), gap_penalty)
    fill_matrices(seq_a, seq_b, score, trace, match_cost, mismatch_cost, gap_penalty)
    logger.debug(
        "NW %dx%d, final cost %d", len(seq_a), len(seq_b), score[len(seq_a), len(seq_b)]
    )
    return score, trace


def needleman_wunsch_distance(
    seq_a, seq_b,
    match_cost=MATCH_COST,
    mismatch_cost=MISMATCH_COST,
    gap_penalty=GAP_PENALTY
):
    """
    Exact distance in [0, 1]: mismatches plus gap steps along the
    optimal global alignment, divided by the longer sequence length.

    Memory use is O(len(seq_a) * len(seq_b)).
    """
    _, trace = _align(seq_a, seq_b, match_cost, mismatch_cost, gap_penalty)
    return traceback_distance(seq_a, seq_b, trace)


def needleman_wunsch_alignment(
    seq_a, seq_b,
    match_cost=MATCH_COST,
    mismatch_cost=MISMATCH_COST,
    gap_penalty=GAP_PENALTY
):
    """Optimal global alignment as a pair of gapped strings."""
    _, trace = _align(seq_a, seq_b, match_cost, mismatch_cost, gap_penalty)
    return traceback_alignment(seq_a, seq_b, trace)

__all__ = [
    'MATCH_COST',
    'MISMATCH_COST',
    'GAP_PENALTY',
    'STOP',
    'DIAG',
    'VERT',
    'HORIZ',
    'init_matrices',
    'fill_matrices',
    'traceback_distance',
    'traceback_alignment',
    'needleman_wunsch_distance',
    'needleman_wunsch_alignment',
]
