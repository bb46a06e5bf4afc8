#!/usr/bin/env python3
"""
FASTA parsing over a shared read-only buffer

A FASTA record is a header line starting with ``>`` followed by any number of
sequence lines. The scanner only records offsets; header and sequence text are
decoded when requested.

Examples:
    >>> for number, section in iter_fasta(b">s1\\nACGT\\n>s2\\nTT\\n"):
    ...     print(number, section.header, section.sequence)
    0 >s1 ['ACGT']
    1 >s2 ['TT']
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from ..config.formats import FormatConfig, get_default_fasta_config
from ..utils.ascii import count_non_whitespace, normalize
from ..utils.misc import as_buffer
from .scanner import SectionScanner
from .section_index import SectionIndex, build_index


@dataclass
class FastaRecord:
    """
    Materialized FASTA record

    Attributes:
        header: Header line including the leading marker
        sequence: Normalized sequence lines in file order
    """
    header: str
    sequence: List[str] = field(default_factory=list)

    @classmethod
    def from_sequence(cls, header: str, sequence: str, line_length: Optional[int] = None) -> "FastaRecord":
        """
        Build a record from a flat sequence, wrapping it into lines

        Args:
            header: Header line including the marker
            sequence: Sequence text, normalized before wrapping
            line_length: Characters per line, defaults to the FASTA configuration

        Returns:
            FastaRecord: Record with wrapped sequence lines
        """
        if line_length is None:
            line_length = get_default_fasta_config().line_length
        flat = ''.join(sequence.split()).upper()
        lines = [flat[i:i + line_length] for i in range(0, len(flat), line_length)]
        return cls(header=header, sequence=lines)

    @property
    def flat_sequence(self) -> str:
        """Sequence lines joined together"""
        return ''.join(self.sequence)

    def render(self) -> str:
        """Canonical text: header then each sequence line, newline-terminated"""
        return ''.join(line + '\n' for line in [self.header, *self.sequence])

    def __str__(self) -> str:
        return self.render()

    def to_seqrecord(self) -> SeqRecord:
        """Convert to a Biopython SeqRecord using SeqIO's FASTA title rules"""
        title = self.header[1:]
        parts = title.split(None, 1)
        identifier = parts[0] if parts else ""
        return SeqRecord(Seq(self.flat_sequence), id=identifier, name=identifier, description=title)


@dataclass(frozen=True, eq=False)
class FastaSection:
    """
    Offsets of one FASTA record inside a buffer

    The header occupies ``[header_start, header_end)``, the sequence body runs
    from the byte after the header newline to ``sequence_end``. Sections are
    equal when they share the same buffer object and the same offsets.
    """
    buffer: Any = field(repr=False)
    header_start: int
    header_end: int
    sequence_end: int
    encoding: str = field(default="latin-1", repr=False)

    def _offsets(self):
        return self.header_start, self.header_end, self.sequence_end

    def __eq__(self, other) -> bool:
        if not isinstance(other, FastaSection):
            return NotImplemented
        return self.buffer is other.buffer and self._offsets() == other._offsets()

    def __hash__(self) -> int:
        return hash((id(self.buffer), self._offsets()))

    @property
    def sequence_start(self) -> int:
        start = self.header_end + 1
        # \r\n line ending
        if (start < self.sequence_end and self.buffer[self.header_end] == 0x0D
                and self.buffer[start] == 0x0A):
            start += 1
        return min(start, self.sequence_end)

    @property
    def header(self) -> str:
        return bytes(self.buffer[self.header_start:self.header_end]).decode(self.encoding)

    @property
    def sequence(self) -> List[str]:
        body = bytes(self.buffer[self.sequence_start:self.sequence_end]).rstrip()
        if not body:
            return []
        return [normalize(line).decode(self.encoding) for line in body.split(b'\n')]

    @property
    def sequence_length(self) -> int:
        """Number of sequence symbols, counted without materializing the lines"""
        return count_non_whitespace(self.buffer, self.sequence_start, self.sequence_end)

    def to_record(self) -> FastaRecord:
        return FastaRecord(self.header, self.sequence)


class FastaScanner(SectionScanner):
    """
    Forward-only iterator over the sections of a FASTA buffer

    Yields ``(index, FastaSection)`` pairs. Bytes before the first ``>`` are
    skipped; a header without a terminating newline is malformed.
    """

    format_name = "FASTA"

    def __init__(self, buffer, config: Optional[FormatConfig] = None):
        super().__init__(buffer, config or get_default_fasta_config())

    def _scan_section(self) -> FastaSection:
        header_start = self._position
        self._move_to_newline("header")
        header_end = self._position
        self._position += 1
        self._move_to_next_section()
        sequence_end = self._position
        return FastaSection(
            self._buffer, header_start, header_end, sequence_end, encoding=self.config.encoding
        )


def iter_fasta(source, config: Optional[FormatConfig] = None) -> FastaScanner:
    """
    Iterate over a FASTA file or buffer

    Args:
        source: Path to a FASTA file, or a bytes-like buffer
        config: FASTA format configuration

    Returns:
        FastaScanner: Lazy iterator of (index, FastaSection)
    """
    return FastaScanner(as_buffer(source), config=config)


def index_fasta(source,
                predicate: Optional[Callable[[FastaSection], bool]] = None,
                config: Optional[FormatConfig] = None) -> SectionIndex:
    """
    Index a FASTA file or buffer

    Allows random access to records, repeated and parallel iteration, and
    filtering of the records to keep.

    Args:
        source: Path to a FASTA file, or a bytes-like buffer
        predicate: Pure function deciding which sections to keep, None keeps all
        config: FASTA format configuration

    Returns:
        SectionIndex: Retained sections in file order

    Examples:
        >>> sections = index_fasta(b">a\\nAC\\n>b\\n\\n", lambda s: s.sequence_length > 0)
        >>> [s.header for s in sections]
        ['>a']
    """
    return build_index(iter_fasta(source, config=config), predicate)
