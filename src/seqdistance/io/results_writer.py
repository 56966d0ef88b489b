"""
Writers for pairwise distance matrices.
"""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

logger = logging.getLogger(__name__)

FORMATS = {
    'tsv': '.tsv',
    'phylip': '.phy',
    'json': '.json',
}


def write_tsv(path: Path, names: Sequence[str], matrix: np.ndarray, precision: int = 6):
    with open(path, 'w', newline='') as f:
        writer = csv.writer(f, delimiter='\t')
        writer.writerow([''] + list(names))
        for name, row in zip(names, matrix):
            writer.writerow([name] + [f"{value:.{precision}f}" for value in row])


def write_phylip(path: Path, names: Sequence[str], matrix: np.ndarray, precision: int = 6):
    """Square PHYLIP distance matrix; names are padded to 10 columns."""
    with open(path, 'w') as f:
        f.write(f"{len(names)}\n")
        for name, row in zip(names, matrix):
            values = ' '.join(f"{value:.{precision}f}" for value in row)
            f.write(f"{name[:10]:<10} {values}\n")


def write_json(path: Path, names: Sequence[str], matrix: np.ndarray, method: Optional[str] = None):
    payload = {
        'method': method,
        'created': datetime.now().isoformat(timespec='seconds'),
        'names': list(names),
        'distances': matrix.tolist(),
    }
    with open(path, 'w') as f:
        json.dump(payload, f, indent=2)


def write_distance_matrix(
    names: Sequence[str],
    matrix: np.ndarray,
    output_dir: str = "Results",
    base_name: str = "distances",
    output_format: str = "tsv",
    method: Optional[str] = None
) -> str:
    """
    Write an N x N distance matrix. Returns the written path.
    """
    if output_format not in FORMATS:
        raise ValueError(f"Unknown output format {output_format!r}; "
                         f"expected one of {', '.join(FORMATS)}")

    matrix = np.asarray(matrix, dtype=float)
    if matrix.shape != (len(names), len(names)):
        raise ValueError(f"Matrix shape {matrix.shape} does not match {len(names)} names")

    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    path = output_path / f"{base_name}{FORMATS[output_format]}"

    if output_format == 'tsv':
        write_tsv(path, names, matrix)
    elif output_format == 'phylip':
        write_phylip(path, names, matrix)
    else:
        write_json(path, names, matrix, method)

    logger.info("Wrote %dx%d distance matrix to %s", len(names), len(names), path)
    return str(path)


def save_configuration(config: dict, output_dir: str = "Results") -> str:
    """
    Save the run configuration next to the results.
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    config_copy = {key: value for key, value in config.items()
                   if key != '_source' and not key.startswith('__')}

    config_path = output_path / "run_config.json"
    with open(config_path, 'w') as f:
        json.dump(config_copy, f, indent=2, default=str)

    return str(config_path)
