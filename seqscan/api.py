#!/usr/bin/env python3
"""
seqscan Main API Module

Provides the format-independent entry points: iterate, index, render and
count_symbols, plus a one-call file summary.
"""

import logging
import os
import re
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

from .config.formats import FormatConfig, format_for_path, get_format_config
from .errors import UnknownFormatError
from .parser.fasta import FastaRecord, FastaScanner
from .parser.fastq import FastqRecord, FastqScanner
from .parser.scanner import SectionScanner
from .parser.section_index import SectionIndex, build_index
from .stats.letters import count_letters, count_letters_parallel, count_sections
from .stats.symbol_counts import SymbolCounts
from .utils.misc import as_buffer

logger = logging.getLogger(__name__)

_SCANNERS = {
    'fasta': FastaScanner,
    'fastq': FastqScanner,
}

_FIRST_CONTENT = re.compile(rb"\S")


def detect_format(source) -> FormatConfig:
    """
    Detect the record format of a file or buffer

    Paths are matched by extension first; otherwise the first non-whitespace
    byte decides (``>`` for FASTA, ``@`` for FASTQ).

    Args:
        source: Path or bytes-like buffer

    Returns:
        FormatConfig: Configuration of the detected format
    """
    if isinstance(source, (str, os.PathLike)):
        config = format_for_path(source)
        if config is not None:
            return config
        return _sniff_file(source)
    return _sniff_format(source)


def _config_for_marker(first: bytes) -> FormatConfig:
    for name in _SCANNERS:
        config = get_format_config(name)
        if first == config.record_marker_byte:
            return config
    raise UnknownFormatError(f"Cannot detect record format from first byte {first!r}")


def _sniff_format(buffer) -> FormatConfig:
    match = _FIRST_CONTENT.search(buffer)
    if match is None:
        raise UnknownFormatError("Cannot detect record format from empty or blank content")
    return _config_for_marker(buffer[match.start():match.start() + 1])


def _sniff_file(path, chunk_size: int = 4096) -> FormatConfig:
    """Read just enough of a file to find its first non-whitespace byte"""
    with open(path, 'rb') as handle:
        for chunk in iter(lambda: handle.read(chunk_size), b''):
            match = _FIRST_CONTENT.search(chunk)
            if match is not None:
                return _config_for_marker(chunk[match.start():match.start() + 1])
    raise UnknownFormatError(f"Cannot detect record format of blank file: {path}")


def _resolve(source, file_format: Union[str, FormatConfig, None]) -> Tuple[Any, FormatConfig]:
    """Return the buffer and format configuration for source"""
    buffer = as_buffer(source)
    if isinstance(file_format, FormatConfig):
        config = file_format
    elif file_format is not None:
        config = get_format_config(file_format)
    else:
        is_path = isinstance(source, (str, os.PathLike))
        config = format_for_path(source) if is_path else None
        if config is None:
            config = _sniff_format(buffer)
    if config.name not in _SCANNERS:
        raise UnknownFormatError(f"No scanner for format: {config.name}")
    return buffer, config


def iterate(source, file_format: Union[str, FormatConfig, None] = None) -> SectionScanner:
    """
    Lazily iterate over the records of a file or buffer

    Args:
        source: Path or bytes-like buffer
        file_format: "fasta", "fastq", a FormatConfig, or None to detect

    Returns:
        SectionScanner: Iterator of (index, section) pairs in file order
    """
    buffer, config = _resolve(source, file_format)
    return _SCANNERS[config.name](buffer, config=config)


def index(source,
          predicate: Optional[Callable[[Any], bool]] = None,
          file_format: Union[str, FormatConfig, None] = None) -> SectionIndex:
    """
    Index the records of a file or buffer

    Args:
        source: Path or bytes-like buffer
        predicate: Pure function over a section, None keeps every section
        file_format: "fasta", "fastq", a FormatConfig, or None to detect

    Returns:
        SectionIndex: Retained sections, randomly addressable and reusable
    """
    return build_index(iterate(source, file_format), predicate)


def render(record: Union[FastaRecord, FastqRecord, Any]) -> str:
    """
    Canonical textual form of a record or section

    Args:
        record: FastaRecord, FastqRecord, or a section (materialized first)

    Returns:
        str: Record text, every line newline-terminated
    """
    if hasattr(record, 'to_record'):
        record = record.to_record()
    return record.render()


def count_symbols(sequences: Union[str, Sequence[str], Sequence[Any]],
                  n_workers: Optional[int] = None) -> SymbolCounts:
    """
    Count symbol occurrences

    Args:
        sequences: One sequence string, or a collection of sequences,
            sections or records (a SectionIndex, a list of sections, ...)
            whose sequences are counted
        n_workers: Number of workers for collections, defaults to the CPU count

    Returns:
        SymbolCounts: Per-symbol counts and total
    """
    if isinstance(sequences, str):
        return count_letters(sequences)
    return count_letters_parallel(sequences, n_workers=n_workers)


@dataclass
class ScanSummary:
    """
    Summary of one scanned file

    Attributes:
        file_format: Name of the parsed format
        num_records: Number of records in the file
        num_retained: Number of records kept by the length filter
        symbol_counts: Symbol counts over retained records
        processing_time: Processing time in seconds
    """
    file_format: str
    num_records: int
    num_retained: int
    symbol_counts: SymbolCounts = field(default_factory=SymbolCounts.empty)
    processing_time: float = 0.0

    @property
    def retention_rate(self) -> float:
        """Fraction of records kept by the length filter"""
        if self.num_records == 0:
            return 0.0
        return self.num_retained / self.num_records

    @property
    def average_length(self) -> float:
        """Average sequence length of retained records"""
        if self.num_retained == 0:
            return 0.0
        return self.symbol_counts.total / self.num_retained

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file_format': self.file_format,
            'num_records': self.num_records,
            'num_retained': self.num_retained,
            'total_symbols': self.symbol_counts.total,
            'average_length': self.average_length,
            'processing_time': self.processing_time,
        }


def summarize(source,
              file_format: Union[str, FormatConfig, None] = None,
              min_length: int = 0,
              n_workers: Optional[int] = None) -> ScanSummary:
    """
    Index a file and count the symbols of its records

    Args:
        source: Path or bytes-like buffer
        file_format: "fasta", "fastq", a FormatConfig, or None to detect
        min_length: Records with fewer sequence symbols are filtered out
        n_workers: Number of counting workers

    Returns:
        ScanSummary: Record numbers and symbol counts
    """
    start_time = time.time()

    if min_length < 0:
        raise ValueError(f"min_length must be non-negative, got {min_length}")

    scanner = iterate(source, file_format)
    format_name = scanner.config.name
    logger.info(f"Indexing {format_name} records...")

    num_records = 0
    kept = []
    for _, section in scanner:
        num_records += 1
        if section.sequence_length >= min_length:
            kept.append(section)
    sections = SectionIndex(kept)
    if len(sections) < num_records:
        logger.info(f"Filtered {num_records - len(sections)} short records (< {min_length})")

    logger.info(f"Counting symbols of {len(sections)} records...")
    symbol_counts = count_sections(sections, n_workers=n_workers)

    processing_time = time.time() - start_time
    logger.info(f"Scan completed, {symbol_counts.total} symbols, time taken: {processing_time:.2f} seconds")

    return ScanSummary(
        file_format=format_name,
        num_records=num_records,
        num_retained=len(sections),
        symbol_counts=symbol_counts,
        processing_time=processing_time,
    )
