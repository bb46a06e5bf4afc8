"""
Cursor state machine shared by the FASTA and FASTQ scanners
"""

import logging
import re
from typing import Any, Optional, Tuple

from ..config.formats import FormatConfig
from ..errors import MalformedRecordError

logger = logging.getLogger(__name__)

_NEWLINE = re.compile(rb"[\r\n]")


class SectionScanner:
    """
    Forward-only iterator over the record sections of a buffer

    The first record is located at construction. Iterating yields
    ``(index, section)`` pairs in file order; ``empty``, ``front`` and
    ``pop_front`` expose the cursor directly.

    A malformed record raises ``MalformedRecordError``. When the problem is
    found while looking ahead, the current record is still returned and the
    error is raised by the following call to ``next``.

    Subclasses implement ``_scan_section`` starting from a record marker.
    """

    format_name = "records"

    def __init__(self, buffer, config: FormatConfig):
        """
        Initialize scanner

        Args:
            buffer: Read-only bytes-like object (bytes or mmap) holding the file
            config: Format configuration providing the marker bytes
        """
        self.config = config
        self._buffer = buffer
        self._marker = config.record_marker_byte
        self._length = len(buffer)
        self._position = 0
        self._number = -1
        self._current: Any = None
        self._is_empty = self._length == 0
        self._pending_error: Optional[MalformedRecordError] = None

        logger.debug(f"Scanning {self.format_name} buffer of {self._length} bytes")
        if not self._is_empty:
            self.pop_front()

    @property
    def empty(self) -> bool:
        return self._is_empty

    @property
    def buffer_length(self) -> int:
        return self._length

    @property
    def position(self) -> int:
        """Current cursor offset"""
        return self._position

    @property
    def front(self) -> Tuple[int, Any]:
        if self._is_empty:
            raise IndexError(f"front() called on an exhausted {self.format_name} scanner")
        return self._number, self._current

    def _move_to_next_section(self):
        found = self._buffer.find(self._marker, self._position)
        self._position = self._length if found == -1 else found

    def _move_to_newline(self, what: str):
        match = _NEWLINE.search(self._buffer, self._position)
        if match is None:
            raise self._error(f"{self.format_name} {what} never reaches the end of its line")
        self._position = match.start()

    def _error(self, message: str, error_class=MalformedRecordError) -> MalformedRecordError:
        return error_class(message, offset=self._position, record_index=self._number + 1)

    def _scan_section(self):
        raise NotImplementedError

    def pop_front(self):
        """Advance the cursor to the next record"""
        if self._is_empty:
            raise IndexError(f"pop_front() called on an exhausted {self.format_name} scanner")

        self._move_to_next_section()
        if self._position >= self._length:
            self._is_empty = True
            self._current = None
            logger.debug(f"{self.format_name} scan finished after {self._number + 1} records")
            return

        section = self._scan_section()
        self._number += 1
        self._current = section

    def __iter__(self):
        return self

    def __next__(self) -> Tuple[int, Any]:
        if self._pending_error is not None:
            error, self._pending_error = self._pending_error, None
            self._is_empty = True
            raise error
        if self._is_empty:
            raise StopIteration

        result = self.front
        try:
            self.pop_front()
        except MalformedRecordError as error:
            self._pending_error = error
        return result
