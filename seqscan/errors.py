"""
Exceptions raised by seqscan
"""

from typing import Optional


class SeqScanError(Exception):
    """Base class for all seqscan errors"""


class MalformedRecordError(SeqScanError, ValueError):
    """
    A required delimiter (newline, marker byte or exact quality length) is
    missing before the end of the buffer
    
    Attributes:
        offset: Buffer offset where the problem was detected
        record_index: Zero-based index of the record being scanned
    """
    
    def __init__(self, message: str, offset: Optional[int] = None, record_index: Optional[int] = None):
        self.offset = offset
        self.record_index = record_index
        details = []
        if record_index is not None:
            details.append(f"record {record_index}")
        if offset is not None:
            details.append(f"offset {offset}")
        if details:
            message = f"{message} ({', '.join(details)})"
        super().__init__(message)


class QualityLengthError(MalformedRecordError):
    """FASTQ quality block does not match the sequence length"""


class UnknownFormatError(SeqScanError, ValueError):
    """Requested or detected file format is not supported"""
