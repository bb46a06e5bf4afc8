"""
Record parsers

Zero-copy scanners for FASTA and FASTQ buffers, and the random-access index
built on top of them.
"""

from .fasta import FastaRecord, FastaSection, FastaScanner, iter_fasta, index_fasta
from .fastq import FastqRecord, FastqSection, FastqScanner, iter_fastq, index_fastq
from .scanner import SectionScanner
from .section_index import SectionIndex, build_index

__all__ = [
    'FastaRecord',
    'FastaSection',
    'FastaScanner',
    'iter_fasta',
    'index_fasta',
    'FastqRecord',
    'FastqSection',
    'FastqScanner',
    'iter_fastq',
    'index_fastq',
    'SectionScanner',
    'SectionIndex',
    'build_index'
]
