"""
seqscan - zero-copy FASTA/FASTQ parsing

Main features:
- Lazy record iteration over memory-mapped files
- Filtered, random-access record indexes
- Parallel symbol frequency counting
- Biopython interoperability

Author: seqscan developers
"""

__version__ = "0.1.0"
__author__ = "seqscan developers"

# Export main API interfaces
from .api import iterate, index, render, count_symbols, detect_format, summarize, ScanSummary
from .errors import SeqScanError, MalformedRecordError, QualityLengthError, UnknownFormatError
from .parser import (
    FastaRecord,
    FastqRecord,
    SectionIndex,
    iter_fasta,
    iter_fastq,
    index_fasta,
    index_fastq,
)
from .stats import SymbolCounts

__all__ = [
    '__version__',
    '__author__',
    # Main API
    'iterate',
    'index',
    'render',
    'count_symbols',
    'detect_format',
    'summarize',
    'ScanSummary',
    # Per-format parsers
    'FastaRecord',
    'FastqRecord',
    'SectionIndex',
    'iter_fasta',
    'iter_fastq',
    'index_fasta',
    'index_fastq',
    'SymbolCounts',
    # Errors
    'SeqScanError',
    'MalformedRecordError',
    'QualityLengthError',
    'UnknownFormatError'
]
