#!/usr/bin/env python3
"""
Record format configuration module

Describes the marker bytes, file extensions and text encoding of each
supported record format. Configurations are stored as JSON files under
``config/data`` and loaded into ``FormatConfig`` objects.
"""

import codecs
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from ..errors import UnknownFormatError

SUPPORTED_FORMATS = ["fasta", "fastq"]


@dataclass(frozen=True)
class FormatConfig:
    """
    Configuration of one record format

    Attributes:
        name: Format name ("fasta" or "fastq")
        record_marker: Character opening every record (">" or "@")
        separator_marker: Character opening the FASTQ description line, None for FASTA
        extensions: File extensions recognized for this format
        encoding: Codec used to decode field bytes
        line_length: Default line width when wrapping sequences, None for no wrapping
    """
    name: str
    record_marker: str
    separator_marker: Optional[str] = None
    extensions: Tuple[str, ...] = field(default_factory=tuple)
    encoding: str = "latin-1"
    line_length: Optional[int] = None

    def __post_init__(self):
        """Validate configuration parameters"""
        if len(self.record_marker) != 1:
            raise ValueError(f"record_marker must be a single character, got {self.record_marker!r}")
        if self.separator_marker is not None and len(self.separator_marker) != 1:
            raise ValueError(f"separator_marker must be a single character, got {self.separator_marker!r}")
        if self.separator_marker == self.record_marker:
            raise ValueError("separator_marker and record_marker must differ")
        if self.line_length is not None and self.line_length <= 0:
            raise ValueError(f"line_length must be positive, got {self.line_length}")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding}") from None

    @classmethod
    def from_dict(cls, config_data: Dict) -> "FormatConfig":
        """Build configuration from a dictionary"""
        return cls(
            name=config_data['name'],
            record_marker=config_data['record_marker'],
            separator_marker=config_data.get('separator_marker'),
            extensions=tuple(ext.lower() for ext in config_data.get('extensions', [])),
            encoding=config_data.get('encoding', 'latin-1'),
            line_length=config_data.get('line_length'),
        )

    @classmethod
    def from_file(cls, config_file: Union[str, Path]) -> "FormatConfig":
        """Load configuration from JSON file"""
        config_path = Path(config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file does not exist: {config_file}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)

        return cls.from_dict(config_data)

    @property
    def record_marker_byte(self) -> bytes:
        return self.record_marker.encode(self.encoding)

    @property
    def separator_marker_byte(self) -> Optional[bytes]:
        if self.separator_marker is None:
            return None
        return self.separator_marker.encode(self.encoding)

    def matches_path(self, path: Union[str, Path]) -> bool:
        """Check whether the file extension belongs to this format"""
        return Path(path).suffix.lower() in self.extensions


def load_format_config(name: str = "fasta") -> FormatConfig:
    """
    Load format configuration by name

    Args:
        name: Format name, supports "fasta", "fastq"

    Returns:
        FormatConfig: Corresponding configuration object
    """
    name = name.lower()
    if name not in SUPPORTED_FORMATS:
        raise UnknownFormatError(f"Unsupported format: {name}. Supported formats: {SUPPORTED_FORMATS}")

    config_file = Path(__file__).parent / "data" / f"{name}.json"
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    return FormatConfig.from_file(config_file)


# Predefined configurations, lazily loaded on first access
_DEFAULT_CONFIGS: Dict[str, FormatConfig] = {}


def get_format_config(name: str) -> FormatConfig:
    """Get the packaged configuration of a format, loaded once and cached"""
    name = name.lower()
    if name not in _DEFAULT_CONFIGS:
        _DEFAULT_CONFIGS[name] = load_format_config(name)
    return _DEFAULT_CONFIGS[name]


def get_default_fasta_config() -> FormatConfig:
    """Get default FASTA configuration (lazy loading)"""
    return get_format_config("fasta")


def get_default_fastq_config() -> FormatConfig:
    """Get default FASTQ configuration (lazy loading)"""
    return get_format_config("fastq")


def format_for_path(path: Union[str, Path]) -> Optional[FormatConfig]:
    """Return the configuration whose extensions match path, or None"""
    for name in SUPPORTED_FORMATS:
        config = get_format_config(name)
        if config.matches_path(path):
            return config
    return None
