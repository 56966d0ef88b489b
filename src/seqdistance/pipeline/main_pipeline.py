import logging
import time
from functools import partial
from multiprocessing import Pool, cpu_count
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import numpy as np

from ..algorithms.ktuple import ktuple_distance
from ..algorithms.needleman_wunsch import needleman_wunsch_distance
from ..config.config_loader import METHODS, load_config
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'seqdistance.log'


def parse_num_workers(value) -> int:
    """
    Worker count from ``performance.num_workers``: ``'auto'`` leaves one
    core free, integers and digit strings are clamped to at least 1 and
    anything else falls back to a single worker.
    """
    if value == 'auto':
        count = cpu_count() - 1
    elif isinstance(value, int) and not isinstance(value, bool):
        count = value
    elif isinstance(value, str) and value.strip().isdigit():
        count = int(value)
    else:
        if value is not None:
            logger.warning("Unrecognized num_workers %r, using 1", value)
        count = 1
    return max(1, count)


def setup_logging(config: Dict[str, Any], log_to_file: bool = True) -> logging.Logger:
    """
    Configure the ``seqdistance`` logger from the ``debug`` section.

    The log file in ``io.logs_dir`` records everything at
    ``debug.log_level``. The console shows warnings and errors only,
    unless ``debug.verbose`` is set, in which case it follows
    ``debug.log_level`` too. ``log_to_file=False`` skips the file
    (single-pair runs from the CLI).
    """
    debug = config.get('debug', {})
    level = getattr(logging, str(debug.get('log_level', 'INFO')).upper(), logging.INFO)
    console_level = level if debug.get('verbose') else max(level, logging.WARNING)

    package_logger = logging.getLogger('seqdistance')
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    handlers = [(logging.StreamHandler(), console_level)]
    if log_to_file:
        log_dir = Path(config['io']['logs_dir'])
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append((logging.FileHandler(log_dir / LOG_FILE), level))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler, handler_level in handlers:
        handler.setLevel(handler_level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    return package_logger


def compute_distance(seq_a, seq_b, method: str = 'ktuple', kmer_size: int = 3,
                     nw_params: Optional[Dict[str, Any]] = None) -> float:
    """Distance between two sequences with the selected engine."""
    if method == 'ktuple':
        return ktuple_distance(seq_a, seq_b, kmer_size)
    if method == 'needleman_wunsch':
        return needleman_wunsch_distance(seq_a, seq_b, **(nw_params or {}))
    raise ConfigurationError(
        f"Unknown distance method: {method!r}",
        suggestion=f"use one of {', '.join(METHODS)}",
    )


def _pair_worker(pair, sequences, method, kmer_size, nw_params):
    i, j = pair
    return i, j, compute_distance(sequences[i], sequences[j], method, kmer_size, nw_params)


def distance_matrix(
    sequences: Sequence[str],
    method: str = 'ktuple',
    kmer_size: int = 3,
    nw_params: Optional[Dict[str, Any]] = None,
    num_workers: int = 1
) -> np.ndarray:
    """
    N x N matrix of distances between every ordered pair of sequences.

    The k-tuple distance is not symmetric, so both (i, j) and (j, i)
    are computed. The diagonal is 0.
    """
    n = len(sequences)
    matrix = np.zeros((n, n), dtype=np.float64)
    pairs = [(i, j) for i in range(n) for j in range(n) if i != j]
    if not pairs:
        return matrix

    worker = partial(_pair_worker, sequences=list(sequences), method=method,
                     kmer_size=kmer_size, nw_params=nw_params)

    if num_workers > 1:
        chunksize = max(1, len(pairs) // (num_workers * 4))
        with Pool(processes=num_workers) as pool:
            results = pool.map(worker, pairs, chunksize=chunksize)
    else:
        results = map(worker, pairs)

    for i, j, dist in results:
        matrix[i, j] = dist

    return matrix


def run_distances(config: Dict[str, Any], sequences: Dict[str, str]) -> np.ndarray:
    """Compute the distance matrix for ``sequences`` as configured."""
    distance = config['distance']
    performance = config.get('performance', {})

    num_workers = 1
    if performance.get('use_multiprocessing', True):
        num_workers = parse_num_workers(performance.get('num_workers', 'auto'))

    logger.info("Computing %s distances for %d sequences with %d worker(s)",
                distance['method'], len(sequences), num_workers)

    start = time.time()
    matrix = distance_matrix(
        list(sequences.values()),
        method=distance['method'],
        kmer_size=distance['kmer_size'],
        nw_params=config.get('needleman_wunsch'),
        num_workers=num_workers,
    )
    logger.info("Distances computed in %.2fs", time.time() - start)
    return matrix


def main(config_path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> int:
    """Load config, read the FASTA input, compute and write the matrix."""
    from ..io.fasta_reader import read_fasta_file, validate_fasta_file
    from ..io.results_writer import save_configuration, write_distance_matrix

    config = load_config(config_path, overrides)
    logger = setup_logging(config)
    logger.info("Configuration loaded from %s", config['_source'])

    fasta = config['io'].get('fasta')
    if not fasta:
        logger.error("No FASTA input given")
        return 1

    valid, message = validate_fasta_file(fasta)
    if not valid:
        logger.error(message)
        return 1

    sequences = read_fasta_file(fasta)
    if len(sequences) < 2:
        logger.warning("Only %d sequence in %s; matrix is trivial", len(sequences), fasta)

    matrix = run_distances(config, sequences)

    output_dir = config['io']['output_dir']
    path = write_distance_matrix(
        list(sequences),
        matrix,
        output_dir=output_dir,
        base_name=Path(fasta).stem,
        output_format=config['io'].get('output_format', 'tsv'),
        method=config['distance']['method'],
    )
    save_configuration(config, output_dir)
    logger.info("Results written to %s", path)
    return 0
