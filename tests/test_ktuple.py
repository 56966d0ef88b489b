import pytest
from seqdistance import find_alignment, ktuple_alignment, ktuple_distance
from seqdistance.algorithms.ktuple import score_anchor_path
from seqdistance.errors import InvalidSequenceError

SEQUENCES = [
    "ACGTACGT",
    "ACGTTCGT",
    "TTGACCAGTAGGCATTAC",
    "GATTACA",
    "AAAAAAAAAA",
    "ACACACACACAC",
]

def test_score_anchor_path_no_gaps():
    assert score_anchor_path(5, 5, [(0, 0), (1, 1), (4, 4)]) == pytest.approx(0.4)

def test_score_anchor_path_counts_gaps():
    """
    Cursor at 0 cannot advance in B towards (2, 0): two gaps in B.
    Towards (3, 5) the A cursor stalls twice: two gaps in A.
    Alignment length max(4 + 2, 6 + 2) = 8.
    """
    assert score_anchor_path(4, 6, [(2, 0), (3, 5)]) == pytest.approx(0.75)

def test_score_anchor_path_order_matters():
    """Walked start first, (1, 5) stalls the A cursor four times."""
    assert score_anchor_path(6, 6, [(1, 5), (6, 6)]) == pytest.approx(0.8)
    assert score_anchor_path(6, 6, [(6, 6), (1, 5)]) == pytest.approx(1 - 2 / 6)

def test_score_anchor_path_empty():
    assert score_anchor_path(4, 4, []) == 1.0
    assert score_anchor_path(0, 0, []) == 0.0

def test_ktuple_distance_identical():
    """Six chained 3-mers over an alignment of length 8."""
    assert ktuple_distance("ACGTACGT", "ACGTACGT", 3) == 0.25

def test_ktuple_distance_no_shared_kmers():
    assert ktuple_distance("AAAA", "TTTT", 2) == 1.0

def test_ktuple_distance_one_substitution():
    assert ktuple_distance("ACGTACGT", "ACGTTCGT", 3) == pytest.approx(0.625)
    assert ktuple_distance("ACGTTCGT", "ACGTACGT", 3) == pytest.approx(0.625)

def test_ktuple_distance_kmer_equals_length():
    assert ktuple_distance("ACGT", "ACGT", 4) == pytest.approx(0.75)

@pytest.mark.parametrize("kmer_size", [0, 5, 50])
def test_ktuple_distance_no_kmers(kmer_size):
    assert ktuple_distance("ACGT", "ACGT", kmer_size) == 1.0

def test_ktuple_distance_empty_sequences():
    assert ktuple_distance("", "", 3) == 0.0
    assert ktuple_distance("", "ACGT", 2) == 1.0

def test_ktuple_distance_bytes():
    assert ktuple_distance(b"ACGTACGT", b"ACGTACGT", 3) == 0.25

@pytest.mark.parametrize("bad", [None, 42, ["A", "C"]])
def test_ktuple_distance_rejects_non_sequences(bad):
    with pytest.raises(InvalidSequenceError):
        ktuple_distance(bad, "ACGT", 2)
    with pytest.raises(TypeError):
        ktuple_distance("ACGT", bad, 2)

def test_ktuple_distance_rejects_mixed_types():
    with pytest.raises(InvalidSequenceError, match="cannot compare str with bytes"):
        ktuple_distance("ACGT", b"ACGT", 2)
    with pytest.raises(InvalidSequenceError):
        ktuple_alignment(b"ACGT", "ACGT", 2)

def test_ktuple_distance_range_and_determinism():
    for a in SEQUENCES:
        for b in SEQUENCES:
            for k in (1, 2, 3, 4):
                d = ktuple_distance(a, b, k)
                assert 0.0 <= d <= 1.0
                assert ktuple_distance(a, b, k) == d

def test_ktuple_alignment_path():
    assert ktuple_alignment("ACGTACGT", "ACGTACGT", 3) == [(i, i) for i in range(6)]

def test_ktuple_alignment_one_based():
    path = ktuple_alignment("ACGTACGT", "ACGTACGT", 3, offset_base=1)
    assert path == [(i, i) for i in range(1, 7)]

def test_ktuple_alignment_empty():
    assert ktuple_alignment("AAAA", "TTTT", 2) == []

def test_find_alignment_alias():
    assert find_alignment("ACGTACGT", "ACGTTCGT", 3) == ktuple_distance("ACGTACGT", "ACGTTCGT", 3)
