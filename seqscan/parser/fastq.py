#!/usr/bin/env python3
"""
FASTQ parsing over a shared read-only buffer

A FASTQ record is an identifier line (``@``), one or more sequence lines, a
description line (``+``) and one or more quality lines. Quality strings may
contain ``@`` and ``+``, so the quality block is bounded by counting: it ends
once it holds as many non-whitespace characters as the sequence block.
The sequence block ends at the first ``+`` after the identifier line.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import numpy as np
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from ..config.formats import FormatConfig, get_default_fastq_config
from ..errors import QualityLengthError
from ..utils.ascii import advance_non_whitespace, count_non_whitespace, normalize
from ..utils.misc import as_buffer
from .scanner import SectionScanner
from .section_index import SectionIndex, build_index

PHRED_OFFSET = 33


@dataclass
class FastqRecord:
    """
    Materialized FASTQ record

    Attributes:
        identifier: Identifier line including the leading marker
        sequence: Normalized sequence
        description: Description line including the leading marker
        quality: Normalized quality string, same length as sequence
    """
    identifier: str
    sequence: str
    description: str
    quality: str

    def __post_init__(self):
        """Validate sequence/quality length"""
        if len(self.sequence) != len(self.quality):
            raise QualityLengthError(
                f"Length mismatch (seq {len(self.sequence)} vs qual {len(self.quality)}) "
                f"at read {self.identifier}"
            )

    def render(self) -> str:
        """Canonical text: the four lines, each newline-terminated"""
        return f"{self.identifier}\n{self.sequence}\n{self.description}\n{self.quality}\n"

    def __str__(self) -> str:
        return self.render()

    def phred_scores(self, offset: int = PHRED_OFFSET) -> np.ndarray:
        """Decode quality characters into integer Phred scores"""
        encoded = np.frombuffer(self.quality.encode('latin-1'), dtype=np.uint8)
        return encoded.astype(np.int64) - offset

    def to_seqrecord(self, offset: int = PHRED_OFFSET) -> SeqRecord:
        """Convert to a Biopython SeqRecord carrying phred_quality annotations"""
        title = self.identifier[1:]
        parts = title.split(None, 1)
        identifier = parts[0] if parts else ""
        return SeqRecord(
            Seq(self.sequence),
            id=identifier,
            name=identifier,
            description=title,
            letter_annotations={'phred_quality': self.phred_scores(offset).tolist()},
        )


@dataclass(frozen=True, eq=False)
class FastqSection:
    """
    Offsets of one FASTQ record inside a buffer

    Fields:
        identifier: ``[identifier_start, sequence_start - 1)``
        sequence: ``[sequence_start, description_start)``
        description: ``[description_start, quality_start - 1)``
        quality: ``[quality_start, quality_end)``

    Sections are equal when they share the same buffer object and offsets.
    """
    buffer: Any = field(repr=False)
    identifier_start: int
    sequence_start: int
    description_start: int
    quality_start: int
    quality_end: int
    encoding: str = field(default="latin-1", repr=False)

    def _offsets(self):
        return (self.identifier_start, self.sequence_start, self.description_start,
                self.quality_start, self.quality_end)

    def __eq__(self, other) -> bool:
        if not isinstance(other, FastqSection):
            return NotImplemented
        return self.buffer is other.buffer and self._offsets() == other._offsets()

    def __hash__(self) -> int:
        return hash((id(self.buffer), self._offsets()))

    def _text(self, start: int, end: int) -> str:
        return bytes(self.buffer[start:end]).decode(self.encoding)

    def _normalized(self, start: int, end: int) -> str:
        return normalize(bytes(self.buffer[start:end])).decode(self.encoding)

    @property
    def identifier(self) -> str:
        return self._text(self.identifier_start, self.sequence_start - 1)

    @property
    def sequence(self) -> str:
        return self._normalized(self.sequence_start, self.description_start)

    @property
    def description(self) -> str:
        return self._text(self.description_start, self.quality_start - 1)

    @property
    def quality(self) -> str:
        return self._normalized(self.quality_start, self.quality_end)

    @property
    def sequence_length(self) -> int:
        """Number of sequence symbols, counted without materializing the sequence"""
        return count_non_whitespace(self.buffer, self.sequence_start, self.description_start)

    def to_record(self) -> FastqRecord:
        return FastqRecord(self.identifier, self.sequence, self.description, self.quality)


class FastqScanner(SectionScanner):
    """
    Forward-only iterator over the sections of a FASTQ buffer

    Yields ``(index, FastqSection)`` pairs. Raises ``QualityLengthError`` when
    the buffer ends before the quality block reaches the sequence length.
    """

    format_name = "FASTQ"

    def __init__(self, buffer, config: Optional[FormatConfig] = None):
        config = config or get_default_fastq_config()
        if config.separator_marker is None:
            raise ValueError(f"Format '{config.name}' has no separator marker, cannot scan FASTQ")
        self._separator = config.separator_marker_byte
        self._letters = 0
        super().__init__(buffer, config)

    def _move_to_end_sequence(self):
        found = self._buffer.find(self._separator, self._position)
        if found == -1:
            raise self._error("FASTQ sequence never reaches the description line")
        self._letters = count_non_whitespace(self._buffer, self._position, found)
        self._position = found

    def _move_to_end_quality(self):
        end, missing = advance_non_whitespace(self._buffer, self._position, self._letters)
        if missing:
            self._position = end
            raise self._error(
                f"FASTQ quality holds {self._letters - missing} characters "
                f"but sequence holds {self._letters}",
                error_class=QualityLengthError,
            )
        self._position = end

    def _scan_section(self) -> FastqSection:
        identifier_start = self._position
        self._move_to_newline("identifier")
        sequence_start = self._position + 1
        self._position = sequence_start
        self._move_to_end_sequence()
        description_start = self._position
        self._move_to_newline("description")
        quality_start = self._position + 1
        self._position = quality_start
        self._move_to_end_quality()
        quality_end = self._position
        return FastqSection(
            self._buffer, identifier_start, sequence_start, description_start,
            quality_start, quality_end, encoding=self.config.encoding
        )


def iter_fastq(source, config: Optional[FormatConfig] = None) -> FastqScanner:
    """
    Iterate over a FASTQ file or buffer

    Args:
        source: Path to a FASTQ file, or a bytes-like buffer
        config: FASTQ format configuration

    Returns:
        FastqScanner: Lazy iterator of (index, FastqSection)

    Examples:
        >>> [s.to_record() for _, s in iter_fastq(b"@id1\\nTGCA\\n+\\nABCD\\n")]
        [FastqRecord(identifier='@id1', sequence='TGCA', description='+', quality='ABCD')]
    """
    return FastqScanner(as_buffer(source), config=config)


def index_fastq(source,
                predicate: Optional[Callable[[FastqSection], bool]] = None,
                config: Optional[FormatConfig] = None) -> SectionIndex:
    """
    Index a FASTQ file or buffer

    Args:
        source: Path to a FASTQ file, or a bytes-like buffer
        predicate: Pure function deciding which sections to keep, None keeps all
        config: FASTQ format configuration

    Returns:
        SectionIndex: Retained sections in file order
    """
    return build_index(iter_fastq(source, config=config), predicate)
