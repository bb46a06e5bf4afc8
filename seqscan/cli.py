#!/usr/bin/env python3
"""
seqscan command line interface
"""

import argparse
import logging
import sys

from .api import index, render, summarize
from .config.formats import SUPPORTED_FORMATS
from .errors import SeqScanError
from .utils.misc import setup_logging

logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """Parse command line arguments."""
    # Custom formatter that preserves formatting and shows defaults
    class CustomFormatter(argparse.RawDescriptionHelpFormatter, argparse.ArgumentDefaultsHelpFormatter):
        pass

    example_text = '''
Examples:
  Count symbols of reads with at least 50 bases:
    seqscan count reads.fastq --min-length 50 --workers 8 --output counts.tsv

  Print the first and last record of a FASTA file:
    seqscan show proteins.fasta --record 0 -1
'''

    parser = argparse.ArgumentParser(
        prog='seqscan',
        description='Zero-copy FASTA/FASTQ scanning tools',
        formatter_class=CustomFormatter,
        epilog=example_text
    )
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Also write log messages to this file')

    subparsers = parser.add_subparsers(dest='command', required=True)

    count_parser = subparsers.add_parser('count', formatter_class=CustomFormatter,
                                         help='Count symbol frequencies of all records')
    count_parser.add_argument('file', type=str, help='Path to a FASTA or FASTQ file')
    count_parser.add_argument('--format', type=str, default=None, choices=SUPPORTED_FORMATS,
                              help='Record format, detected from the file when omitted')
    count_parser.add_argument('--min-length', type=int, default=0,
                              help='Ignore records with shorter sequences')
    count_parser.add_argument('--workers', type=int, default=None,
                              help='Number of counting workers (defaults to CPU count)')
    count_parser.add_argument('--output', type=str, default=None,
                              help='Write the TSV table here instead of stdout')

    show_parser = subparsers.add_parser('show', formatter_class=CustomFormatter,
                                        help='Print records in canonical form')
    show_parser.add_argument('file', type=str, help='Path to a FASTA or FASTQ file')
    show_parser.add_argument('--format', type=str, default=None, choices=SUPPORTED_FORMATS,
                             help='Record format, detected from the file when omitted')
    show_parser.add_argument('--record', type=int, nargs='+', default=None,
                             help='Record indices to print, negative values count from the end')

    return parser.parse_args(argv)


def run_count(args) -> int:
    summary = summarize(args.file, file_format=args.format,
                        min_length=args.min_length, n_workers=args.workers)
    logger.info(f"Records: {summary.num_records}, retained: {summary.num_retained} "
                f"({summary.retention_rate:.1%})")
    logger.info(f"Total symbols: {summary.symbol_counts.total}, "
                f"average length: {summary.average_length:.2f}")

    table = summary.symbol_counts.to_df()
    if args.output:
        table.to_csv(args.output, sep='\t', index=False)
        logger.info(f"Results saved to: {args.output}")
    else:
        table.to_csv(sys.stdout, sep='\t', index=False)
    return 0


def run_show(args) -> int:
    sections = index(args.file, file_format=args.format)
    selected = args.record if args.record is not None else range(len(sections))
    for number in selected:
        if not -len(sections) <= number < len(sections):
            logger.error(f"Record {number} out of range, file holds {len(sections)} records")
            return 1
        sys.stdout.write(render(sections[number]))
    return 0


def main(argv=None) -> int:
    args = parse_arguments(argv)

    log_level = getattr(logging, args.log_level.upper())
    setup_logging(args.log_file, log_level)
    logger.debug(f"Arguments: {vars(args)}")

    try:
        if args.command == 'count':
            return run_count(args)
        return run_show(args)
    except (SeqScanError, OSError) as e:
        logger.error(f"Error during processing: {str(e)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
