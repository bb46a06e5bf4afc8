"""
Byte-level character classes shared by the scanners

All helpers work on single byte values (ints 0-255) so they can be applied
directly to items of a ``bytes`` or ``mmap`` buffer.
"""

import numpy as np

NEWLINE_BYTES = b"\n\r"
WHITESPACE_BYTES = b" \t\n\r\x0b\x0c"

# Lookup table: True for every byte value that is not whitespace
NON_WHITESPACE_TABLE = np.ones(256, dtype=bool)
NON_WHITESPACE_TABLE[list(WHITESPACE_BYTES)] = False


def is_newline(byte: int) -> bool:
    """Return True for line feed and carriage return"""
    return byte == 0x0A or byte == 0x0D


def is_whitespace(byte: int) -> bool:
    """Return True for ASCII whitespace (space, \\t, \\n, \\r, \\v, \\f)"""
    return byte in WHITESPACE_BYTES


def strip_whitespace(data: bytes) -> bytes:
    """Remove every whitespace byte, wherever it occurs"""
    return data.translate(None, WHITESPACE_BYTES)


def normalize(data: bytes) -> bytes:
    """Remove whitespace and upper-case ASCII letters"""
    return strip_whitespace(data).upper()


def count_non_whitespace(buffer, start: int, end: int) -> int:
    """
    Count non-whitespace bytes of buffer[start:end] without copying the range
    
    Args:
        buffer: Any object exposing the buffer protocol (bytes, mmap)
        start: First offset (inclusive)
        end: Last offset (exclusive)
        
    Returns:
        int: Number of non-whitespace bytes in the range
    """
    if end <= start:
        return 0
    window = np.frombuffer(buffer, dtype=np.uint8, count=end - start, offset=start)
    return int(np.count_nonzero(NON_WHITESPACE_TABLE[window]))


def advance_non_whitespace(buffer, start: int, count: int, chunk_size: int = 4096):
    """
    Advance from start until exactly count non-whitespace bytes are consumed
    
    Args:
        buffer: Any object exposing the buffer protocol (bytes, mmap)
        start: Offset where consumption begins
        count: Number of non-whitespace bytes to consume
        chunk_size: Extra bytes examined per step beyond the remaining count
        
    Returns:
        Tuple[int, int]: (offset just past the last consumed byte, bytes still
        missing). The second value is 0 on success and positive when the buffer
        ended first.
    """
    length = len(buffer)
    position = start
    remaining = count
    while remaining > 0 and position < length:
        end = min(length, position + remaining + chunk_size)
        window = np.frombuffer(buffer, dtype=np.uint8, count=end - position, offset=position)
        consumed = np.cumsum(NON_WHITESPACE_TABLE[window])
        if consumed[-1] >= remaining:
            # First index where the running count reaches the target
            position += int(np.searchsorted(consumed, remaining)) + 1
            remaining = 0
        else:
            remaining -= int(consumed[-1])
            position = end
    return position, remaining
