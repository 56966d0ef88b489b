"""
Command-line interface for seqdistance.
"""

import sys
import argparse


def build_parser():
    parser = argparse.ArgumentParser(
        prog='seqdistance',
        description="Pairwise sequence distances - fast k-tuple heuristic or exact Needleman-Wunsch",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Distance matrix of every sequence in a FASTA file
  %(prog)s --fasta proteins.fa --method ktuple --kmer-size 2

  # Exact distances written as a PHYLIP matrix
  %(prog)s --fasta genes.fa --method needleman_wunsch --format phylip

  # One pair, with the anchor path of the k-tuple heuristic
  %(prog)s --pair ACGTACGT ACGTTCGT --show-path --one-based

  # Sequence ids of a FASTA file, in natural order
  %(prog)s --list-sequences proteins.fa --list-limit 20
        """
    )

    parser.add_argument('--fasta', type=str, help='FASTA file with the sequences to compare')
    parser.add_argument('--pair', nargs=2, metavar=('SEQ_A', 'SEQ_B'),
                        help='Compare two literal sequences and print the distance')
    parser.add_argument('--list-sequences', metavar='FASTA_FILE', type=str,
                        help='List the sequence ids in a FASTA file')
    parser.add_argument('--list-limit', type=int, default=0,
                        help='Limit number of ids to display (0 for all)')
    parser.add_argument('--method', choices=['ktuple', 'needleman_wunsch'],
                        help='Distance engine')
    parser.add_argument('--kmer-size', type=int, help='K-mer size for the k-tuple engine')
    parser.add_argument('--config', type=str, help='Path to configuration YAML file')
    parser.add_argument('--workers', type=int, help='Number of worker processes (0 = auto)')
    parser.add_argument('--no-multiprocessing', action='store_true',
                        help='Disable multiprocessing')
    parser.add_argument('--output-dir', type=str, help='Output directory')
    parser.add_argument('--format', choices=['tsv', 'phylip', 'json'], help='Matrix output format')
    parser.add_argument('--show-path', action='store_true',
                        help='With --pair, also print the k-tuple anchor path')
    parser.add_argument('--one-based', action='store_true',
                        help='Report anchor path positions 1-based')
    parser.add_argument('--version', action='store_true', help='Show version information')
    parser.add_argument('--verbose', action='store_true', help='Show INFO log messages on the console')
    parser.add_argument('--debug', action='store_true', help='Log at DEBUG level, on the console too')
    return parser


def build_overrides(args):
    """Translate parsed arguments into config overrides."""
    config_overrides = {}

    if args.method:
        config_overrides.setdefault('distance', {})['method'] = args.method

    if args.kmer_size is not None:
        config_overrides.setdefault('distance', {})['kmer_size'] = args.kmer_size

    if args.fasta:
        config_overrides.setdefault('io', {})['fasta'] = args.fasta

    if args.output_dir:
        config_overrides.setdefault('io', {})['output_dir'] = args.output_dir

    if args.format:
        config_overrides.setdefault('io', {})['output_format'] = args.format

    if args.workers is not None:
        config_overrides.setdefault('performance', {})['num_workers'] = (
            'auto' if args.workers == 0 else args.workers
        )

    if args.no_multiprocessing:
        config_overrides.setdefault('performance', {})['use_multiprocessing'] = False

    if args.verbose:
        config_overrides.setdefault('debug', {})['verbose'] = True

    if args.debug:
        config_overrides.setdefault('debug', {}).update(log_level='DEBUG', verbose=True)

    return config_overrides


def list_sequences(fasta, limit=0):
    from seqdistance.io.fasta_reader import list_fasta_sequences, validate_fasta_file

    valid, message = validate_fasta_file(fasta)
    if not valid:
        print(f"ERROR: {message}", file=sys.stderr)
        return 1

    sequence_ids = list_fasta_sequences(fasta, max_sequences=limit)
    for seq_id in sequence_ids:
        print(seq_id)
    return 0


def run_pair(args, overrides):
    from seqdistance.algorithms.ktuple import ktuple_alignment
    from seqdistance.config.config_loader import load_config
    from seqdistance.pipeline.main_pipeline import compute_distance, setup_logging

    config = load_config(args.config, overrides)
    setup_logging(config, log_to_file=False)
    seq_a, seq_b = args.pair
    method = config['distance']['method']
    kmer_size = config['distance']['kmer_size']

    dist = compute_distance(seq_a, seq_b, method, kmer_size, config.get('needleman_wunsch'))
    print(f"{method}\t{dist:.6f}")

    if args.show_path:
        path = ktuple_alignment(seq_a, seq_b, kmer_size, offset_base=1 if args.one_based else 0)
        for qpos, tpos in path:
            print(f"{qpos}\t{tpos}")
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from seqdistance import __version__
        print(f"seqdistance {__version__}")
        return 0

    if args.list_sequences:
        return list_sequences(args.list_sequences, args.list_limit)

    overrides = build_overrides(args)

    if args.pair:
        try:
            return run_pair(args, overrides)
        except Exception as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

    if not args.fasta:
        parser.print_usage(sys.stderr)
        print("ERROR: one of --fasta, --pair or --list-sequences is required", file=sys.stderr)
        return 2

    from seqdistance.pipeline.main_pipeline import main as pipeline_main

    try:
        return pipeline_main(config_path=args.config, overrides=overrides)
    except Exception as e:
        print(f"Pipeline failed: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
