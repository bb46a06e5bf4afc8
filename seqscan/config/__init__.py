"""
Configuration module - record format definitions
"""

from .formats import (
    FormatConfig,
    SUPPORTED_FORMATS,
    load_format_config,
    get_format_config,
    get_default_fasta_config,
    get_default_fastq_config,
    format_for_path,
)

__all__ = [
    'FormatConfig',
    'SUPPORTED_FORMATS',
    'load_format_config',
    'get_format_config',
    'get_default_fasta_config',
    'get_default_fastq_config',
    'format_for_path'
]
