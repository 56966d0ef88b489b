__description__ = "Test suite for seqdistance"

TEST_CATEGORIES = {
    'kmer': 'K-mer indexing and matching tests',
    'chaining': 'Sparse anchor chaining tests',
    'ktuple': 'K-tuple distance tests',
    'needleman_wunsch': 'Exact alignment distance tests',
    'config': 'Configuration loader tests',
    'io': 'FASTA and results writer tests',
    'integration': 'Pipeline and CLI tests',
}
