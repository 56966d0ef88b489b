from .seed_matcher import *
from .anchor_chaining import *
from .ktuple import *
from .needleman_wunsch import *

__all__ = [
    # K-mer indexing
    'build_kmer_index',
    'cross_product',
    'generate_kmer_matches',

    # Anchor chaining
    'Anchor',
    'ORIGIN_MATCH_INDEX',
    'distance_penalty',
    'insert_by_score',
    'chain_anchors',
    'trace_anchor_path',
    'find_anchor_path',

    # K-tuple distance
    'check_sequence',
    'check_sequence_pair',
    'score_anchor_path',
    'ktuple_alignment',
    'ktuple_distance',
    'find_alignment',

    # Needleman-Wunsch
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
