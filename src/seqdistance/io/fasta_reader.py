"""
FASTA input for the distance pipeline.
"""

import os
import re
from typing import Dict, List, Optional, Tuple

from Bio import SeqIO


def validate_fasta_file(filepath: str, alphabet: Optional[str] = None) -> Tuple[bool, str]:
    """
    Validate if a file is a valid FASTA file.

    Args:
        filepath: Path to the FASTA file
        alphabet: Allowed symbols (case-insensitive); None accepts anything

    Returns:
        Tuple of (is_valid, message)
    """
    if not os.path.exists(filepath):
        return False, f"File does not exist: {filepath}"

    if not os.path.isfile(filepath):
        return False, f"Not a file: {filepath}"

    if os.path.getsize(filepath) == 0:
        return False, f"File is empty: {filepath}"

    try:
        with open(filepath, 'r') as f:
            first_line = f.readline().strip()
            if not first_line.startswith('>'):
                return False, f"File does not start with '>' character: {filepath}"
    except UnicodeDecodeError:
        return False, f"File is not a valid text file: {filepath}"

    records = list(SeqIO.parse(filepath, "fasta"))
    if len(records) == 0:
        return False, f"No sequences found in file: {filepath}"

    allowed = set(alphabet.upper()) if alphabet else None
    for i, record in enumerate(records):
        if len(record.seq) == 0:
            return False, f"Sequence {i+1} is empty in file: {filepath}"

        if allowed is not None:
            invalid_chars = set(str(record.seq).upper()) - allowed
            if invalid_chars:
                return False, f"Sequence {i+1} contains invalid characters: {sorted(invalid_chars)}"

    return True, f"Valid FASTA file with {len(records)} sequence(s)"


def read_fasta_file(filepath: str, uppercase: bool = True) -> Dict[str, str]:
    """
    Read all sequences from a FASTA file.

    Returns:
        Dictionary of sequence id -> sequence, in file order
    """
    sequences = {}
    for record in SeqIO.parse(filepath, "fasta"):
        if record.id in sequences:
            raise ValueError(f"Duplicate sequence id {record.id!r} in {filepath}")
        seq = str(record.seq)
        sequences[record.id] = seq.upper() if uppercase else seq

    if not sequences:
        raise ValueError(f"No sequences found in file: {filepath}")
    return sequences


def list_fasta_sequences(filepath: str, max_sequences: int = 50) -> List[str]:
    """
    List sequence IDs in a FASTA file in natural order (seq2 before seq10).
    ``max_sequences=0`` lists all of them.
    """
    sequence_ids = [record.id for record in SeqIO.parse(filepath, "fasta")]

    def natural_sort_key(name):
        parts = re.split(r'(\d+)', name)
        return [int(part) if part.isdigit() else part.lower() for part in parts]

    sequence_ids.sort(key=natural_sort_key)

    if max_sequences > 0 and len(sequence_ids) > max_sequences:
        return sequence_ids[:max_sequences]
    return sequence_ids
