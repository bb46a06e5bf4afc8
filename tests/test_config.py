#!/usr/bin/env python3
"""
Format configuration tests
"""

import json

import pytest

from seqscan.config import (
    FormatConfig,
    format_for_path,
    get_default_fasta_config,
    get_default_fastq_config,
    get_format_config,
    load_format_config,
)
from seqscan.errors import UnknownFormatError
from seqscan.parser import FastaScanner


class TestFormatConfig:
    """Packaged format configurations"""

    def test_load_fasta(self):
        config = load_format_config("fasta")
        assert config.name == "fasta"
        assert config.record_marker == ">"
        assert config.separator_marker is None
        assert config.record_marker_byte == b">"
        assert config.separator_marker_byte is None
        assert ".fa" in config.extensions
        assert config.line_length == 60

    def test_load_fastq(self):
        config = load_format_config("FASTQ")
        assert config.name == "fastq"
        assert config.record_marker_byte == b"@"
        assert config.separator_marker_byte == b"+"
        assert config.line_length is None

    def test_unknown_format(self):
        """Unknown names raise UnknownFormatError, which is also a ValueError"""
        with pytest.raises(UnknownFormatError):
            load_format_config("genbank")
        with pytest.raises(ValueError):
            get_format_config("sam")

    def test_defaults_are_cached(self):
        assert get_default_fasta_config() is get_default_fasta_config()
        assert get_default_fastq_config() is get_format_config("fastq")

    def test_hashable(self):
        """Frozen configs can be used as dict keys"""
        configs = {get_default_fasta_config(): 1, get_default_fastq_config(): 2}
        assert len(configs) == 2


class TestFormatConfigValidation:
    """Parameter validation"""

    def test_marker_length(self):
        with pytest.raises(ValueError):
            FormatConfig(name="fasta", record_marker=">>")
        with pytest.raises(ValueError):
            FormatConfig(name="fastq", record_marker="@", separator_marker="")

    def test_markers_must_differ(self):
        with pytest.raises(ValueError):
            FormatConfig(name="fastq", record_marker="@", separator_marker="@")

    def test_line_length(self):
        with pytest.raises(ValueError):
            FormatConfig(name="fasta", record_marker=">", line_length=0)

    def test_encoding(self):
        with pytest.raises(ValueError):
            FormatConfig(name="fasta", record_marker=">", encoding="no-such-codec")


class TestConfigFiles:
    """Loading configurations from JSON"""

    def test_from_file(self, tmp_path):
        path = tmp_path / "pir.json"
        path.write_text(json.dumps({
            "name": "fasta",
            "record_marker": ";",
            "extensions": [".PIR"],
        }))
        config = FormatConfig.from_file(path)
        assert config.record_marker == ";"
        assert config.extensions == (".pir",)
        assert config.encoding == "latin-1"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            FormatConfig.from_file(tmp_path / "missing.json")

    def test_custom_marker_scanning(self):
        """Scanners use the configured marker"""
        config = FormatConfig(name="fasta", record_marker=";")
        sections = [section for _, section in FastaScanner(b";a\nAC\n>b\n;c\nG\n", config)]
        assert [s.header for s in sections] == [";a", ";c"]
        assert sections[0].sequence == ["AC", ">B"]


class TestFormatForPath:
    """Extension matching"""

    def test_known_extensions(self):
        assert format_for_path("reads.fq").name == "fastq"
        assert format_for_path("reads.FASTQ").name == "fastq"
        assert format_for_path("/data/proteins.faa").name == "fasta"

    def test_unknown_extension(self):
        assert format_for_path("notes.txt") is None
        assert format_for_path("reads") is None
