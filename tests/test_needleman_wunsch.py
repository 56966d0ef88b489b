import numpy as np
import pytest
from seqdistance.algorithms.needleman_wunsch import (
    DIAG,
    GAP_PENALTY,
    HORIZ,
    STOP,
    VERT,
    fill_matrices,
    init_matrices,
    needleman_wunsch_alignment,
    needleman_wunsch_distance,
    traceback_distance,
)
from seqdistance.errors import InvalidSequenceError

def test_init_matrices():
    score, trace = init_matrices(2, 3, 7)

    assert score.shape == (3, 4)
    assert trace.shape == (3, 4)
    assert score[0].tolist() == [0, 7, 14, 21]
    assert score[:, 0].tolist() == [0, 7, 14]
    assert trace[0].tolist() == [STOP, HORIZ, HORIZ, HORIZ]
    assert trace[:, 0].tolist() == [STOP, VERT, VERT]

def test_init_matrices_empty():
    score, trace = init_matrices(0, 0)
    assert score.shape == (1, 1)
    assert trace[0, 0] == STOP

def test_fill_keeps_boundary():
    seq_a, seq_b = "ACGT", "ACGTT"
    score, trace = init_matrices(len(seq_a), len(seq_b))
    row0, col0 = score[0].copy(), score[:, 0].copy()

    fill_matrices(seq_a, seq_b, score, trace)

    assert np.array_equal(score[0], row0)
    assert np.array_equal(score[:, 0], col0)
    assert score[4, 5] == -1

def test_fill_tie_prefers_diagonal():
    """At (4, 5) diagonal and horizontal both cost -1."""
    seq_a, seq_b = "ACGT", "ACGTT"
    score, trace = init_matrices(len(seq_a), len(seq_b))
    fill_matrices(seq_a, seq_b, score, trace)

    assert score[4, 4] + GAP_PENALTY == score[4, 5]
    assert trace[4, 5] == DIAG
    assert trace[3, 4] == HORIZ

def test_traceback_distance_counts_gaps():
    seq_a, seq_b = "ACGT", "ACGTT"
    score, trace = init_matrices(len(seq_a), len(seq_b))
    fill_matrices(seq_a, seq_b, score, trace)

    assert traceback_distance(seq_a, seq_b, trace) == pytest.approx(0.2)

def test_identical_sequences():
    assert needleman_wunsch_distance("ACGTACGT", "ACGTACGT") == 0.0
    for seq in ("A", "GATTACA", "ACACACACACAC"):
        assert needleman_wunsch_distance(seq, seq) == 0.0

def test_all_mismatches():
    assert needleman_wunsch_distance("AAAA", "TTTT") == 1.0

def test_compares_aligned_symbols():
    """A single substitution counts once, not the whole pair."""
    assert needleman_wunsch_distance("ACGT", "ACGA") == pytest.approx(0.25)
    assert needleman_wunsch_distance("AC", "CA") == 1.0

def test_empty_sequences():
    """The walk starts on the boundary, so nothing is counted."""
    assert needleman_wunsch_distance("", "") == 0.0
    assert needleman_wunsch_distance("", "ACG") == 0.0
    assert needleman_wunsch_distance("ACG", "") == 0.0

def test_leading_end_gap_not_counted():
    assert needleman_wunsch_distance("ACG", "TACG") == 0.0
    assert needleman_wunsch_distance("TACG", "ACG") == 0.0
    assert needleman_wunsch_alignment("ACG", "TACG") == ("-ACG", "TACG")

def test_traceback_stops_at_boundary():
    seq_a, seq_b = "ACG", "TTACG"
    score, trace = init_matrices(len(seq_a), len(seq_b))
    fill_matrices(seq_a, seq_b, score, trace)

    assert trace[0, 2] == HORIZ
    assert traceback_distance(seq_a, seq_b, trace) == 0.0

def test_bytes_input():
    assert needleman_wunsch_distance(b"ACGT", b"ACGA") == pytest.approx(0.25)

def test_rejects_non_sequences():
    with pytest.raises(InvalidSequenceError):
        needleman_wunsch_distance(None, "ACGT")

def test_rejects_mixed_types():
    with pytest.raises(InvalidSequenceError, match="cannot compare bytes with str"):
        needleman_wunsch_distance(b"ACGT", "ACGT")
    with pytest.raises(InvalidSequenceError):
        needleman_wunsch_alignment("ACGT", b"ACGT")

def test_alignment_strings():
    assert needleman_wunsch_alignment("ACGT", "ACGTT") == ("ACG-T", "ACGTT")
    assert needleman_wunsch_alignment("ACGT", "ACGT") == ("ACGT", "ACGT")
    assert needleman_wunsch_alignment("", "AC") == ("--", "AC")

def test_range_and_determinism():
    sequences = ["ACGTACGT", "ACGTTCGT", "GATTACA", "TTGACCAGTAGGCATTAC", "AAAA", "C"]
    for a in sequences:
        for b in sequences:
            d = needleman_wunsch_distance(a, b)
            assert 0.0 <= d <= 1.0
            assert needleman_wunsch_distance(a, b) == d
