"""
Sparse chaining of k-mer matches into an approximate alignment path.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..errors import AnchorLookupError

logger = logging.getLogger(__name__)

ORIGIN_MATCH_INDEX = -1

# ================================================================
# ANCHOR OBJECT
# ================================================================
@dataclass
class Anchor:
    qpos: int                      # position in sequence A
    tpos: int                      # position in sequence B
    score: int                     # chain score ending here
    match_index: int               # index into the sorted match list
    parent: Optional[int] = None   # match_index of the predecessor

    @property
    def index(self) -> Tuple[int, int]:
        return (self.qpos, self.tpos)

    @property
    def is_origin(self) -> bool:
        return self.match_index == ORIGIN_MATCH_INDEX

# ================================================================
# Gap penalty between two chained anchors
# ================================================================
def distance_penalty(di, dj):
    """Kronecker-delta penalty: 0 on a clean diagonal step, 1 otherwise."""
    return 0 if di == dj else 1

# ================================================================
# Score-ordered insertion
# ================================================================
def insert_by_score(anchors, anchor):
    """
    Insert ``anchor`` into ``anchors`` (descending by score) before the
    first anchor whose score is <= anchor.score. Among equal scores
    the newest anchor therefore comes first.
    """
    lo, hi = 0, len(anchors)
    while lo < hi:
        mid = (lo + hi) // 2
        if anchors[mid].score > anchor.score:
            lo = mid + 1
        else:
            hi = mid
    anchors.insert(lo, anchor)
    return lo

# ================================================================
# Greedy chaining engine
# ================================================================
def _improve_once(anchors, candidate):
    """
    Scan anchors in list order and apply the first extension that beats
    the candidate's current score. Returns True if one was applied.
    """
    i, j = candidate.qpos, candidate.tpos
    for p in anchors:
        if i <= p.qpos or j <= p.tpos:
            continue

        penalty = distance_penalty(i - p.qpos, j - p.tpos)
        if p.score - penalty + 1 > candidate.score:
            candidate.score = p.score - penalty + candidate.score
            candidate.parent = p.match_index
            return True
    return False

def chain_anchors(matches) -> List[Anchor]:
    """
    Build the anchor list from match pairs sorted by (a_pos, b_pos).

    Each match starts as a lone anchor of score 1. The anchor list is
    scanned and the FIRST predecessor that improves the score is taken
    (not the best one); the scan then restarts with the improved score
    until nothing improves it, and the anchor is inserted by score.

    Returns the anchor list ordered by descending chain score, seeded
    with the synthetic origin at (0, 0).
    """
    anchors = [Anchor(0, 0, 0, ORIGIN_MATCH_INDEX)]

    for match_index, (i, j) in enumerate(matches):
        candidate = Anchor(i, j, 1, match_index)
        while _improve_once(anchors, candidate):
            pass
        insert_by_score(anchors, candidate)

    logger.debug("Chained %d matches, best score %d", len(matches), anchors[0].score)
    return anchors

# ================================================================
# Backtrack
# ================================================================
def trace_anchor_path(anchors) -> List[Tuple[int, int]]:
    """
    Follow predecessor links from the terminal anchor (the head of the
    score-ordered list) and return positions ordered from the chain
    start to the terminal. The synthetic origin is not included.
    """
    terminal = anchors[0]
    if terminal.is_origin:
        return []

    by_match = {a.match_index: a for a in anchors}

    path = []
    current = terminal
    while True:
        path.append(current.index)
        if current.parent is None:
            break
        if current.parent not in by_match:
            raise AnchorLookupError(current.parent)
        current = by_match[current.parent]

    path.reverse()
    return path

def find_anchor_path(matches):
    """Chain the matches and return the resulting ordered anchor path."""
    return trace_anchor_path(chain_anchors(matches))

__all__ = [
    'Anchor',
    'ORIGIN_MATCH_INDEX',
    'distance_penalty',
    'insert_by_score',
    'chain_anchors',
    'trace_anchor_path',
    'find_anchor_path',
]
