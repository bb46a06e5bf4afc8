#!/usr/bin/env python3
"""
Symbol counting tests
"""

import pandas as pd
import pytest

from seqscan.parser import index_fastq
from seqscan.stats import (
    SymbolCounts,
    count_letters,
    count_letters_parallel,
    count_sections,
    merge_counts,
)

SEQUENCE = "ACGATCGATCGATCGATCGATCGATCGATCGATCGGAGATAG"

SEQUENCE_LIST = [
    "AGCTAGCTGATCGATCGTAGCTGATGCA",
    "CCGTAGCTAGCTATTAGCTAGCCTCGTAGCTAGCTAGCTA",
    "CGATCGATCGATCGATGCTATGCG",
]


class TestCountLetters:
    """Single-sequence counting"""

    def test_known_counts(self):
        counts = count_letters(SEQUENCE)
        assert counts['A'] == 12
        assert counts['C'] == 9
        assert counts['T'] == 9
        assert counts['G'] == 12
        assert counts.total == 42

    def test_unknown_symbols(self):
        """No alphabet is assumed"""
        counts = count_letters("N-*N")
        assert counts.counts == {'N': 2, '-': 1, '*': 1}
        assert counts['A'] == 0
        assert 'A' not in counts

    def test_empty(self):
        counts = count_letters("")
        assert counts == SymbolCounts.empty()
        assert counts.total == 0

    def test_lines(self):
        """A FASTA sequence given as lines"""
        assert count_letters(["MTEIT", "AAMVK"]) == count_letters("MTEITAAMVK")


class TestCountLettersParallel:
    """Counting collections of sequences"""

    def test_known_counts(self):
        counts = count_letters_parallel(SEQUENCE_LIST, n_workers=2)
        assert counts['A'] == 21
        assert counts['C'] == 23
        assert counts['T'] == 24
        assert counts['G'] == 24
        assert counts.total == 92

    @pytest.mark.parametrize("n_workers", [1, 2, 3, 4, 8])
    def test_worker_count_independent(self, n_workers):
        """Same result as counting the concatenation"""
        expected = count_letters("".join(SEQUENCE_LIST))
        assert count_letters_parallel(SEQUENCE_LIST, n_workers=n_workers) == expected

    def test_empty_collection(self):
        assert count_letters_parallel([], n_workers=4) == SymbolCounts.empty()

    def test_generator_input(self):
        counts = count_letters_parallel((s for s in SEQUENCE_LIST), n_workers=2)
        assert counts.total == 92

    def test_count_sections(self):
        data = b"@a\nACGT\n+\nIIII\n@b\nAA\nCC\n+\nIIII\n"
        counts = count_sections(index_fastq(data), n_workers=2)
        assert counts.counts == {'A': 3, 'C': 3, 'G': 1, 'T': 1}
        assert counts.total == 8


class TestSymbolCounts:
    """Merging and derived statistics"""

    def test_merge_identity(self):
        counts = count_letters(SEQUENCE)
        assert counts.merge(SymbolCounts.empty()) == counts
        assert SymbolCounts.empty() + counts == counts

    def test_merge_commutative_associative(self):
        a, b, c = (count_letters(s) for s in SEQUENCE_LIST)
        assert a + b == b + a
        assert (a + b) + c == a + (b + c)
        assert merge_counts([c, a, b]) == count_letters("".join(SEQUENCE_LIST))

    def test_validation(self):
        with pytest.raises(ValueError):
            SymbolCounts({'A': 2}, 3)
        with pytest.raises(ValueError):
            SymbolCounts({'A': -1, 'C': 1}, 0)

    def test_counts_are_copied(self):
        source = {'A': 1}
        counts = SymbolCounts(source, 1)
        source['A'] = 5
        assert counts['A'] == 1

    def test_counts_are_read_only(self):
        counts = count_letters("AAC")
        with pytest.raises(TypeError):
            counts.counts['A'] = 99
        assert counts['A'] == 2
        assert sum(counts.counts.values()) == counts.total

    def test_hashable(self):
        assert hash(count_letters("AAC")) == hash(count_letters("ACA"))
        assert len({count_letters("AAC"), count_letters("ACA"), count_letters("G")}) == 2

    def test_frequencies(self):
        counts = count_letters(SEQUENCE)
        frequencies = counts.frequencies()
        assert frequencies['A'] == pytest.approx(12 / 42)
        assert sum(frequencies.values()) == pytest.approx(1.0)
        assert SymbolCounts.empty().frequencies() == {}

    def test_fraction(self):
        assert count_letters(SEQUENCE).fraction("GC") == pytest.approx(0.5)
        assert SymbolCounts.empty().fraction("GC") == 0.0

    def test_most_common(self):
        counts = count_letters(SEQUENCE)
        assert counts.most_common(2) == [('A', 12), ('G', 12)]
        assert [symbol for symbol, _ in counts.most_common()] == ['A', 'G', 'C', 'T']

    def test_symbols(self):
        assert count_letters(SEQUENCE).symbols == ['A', 'C', 'G', 'T']

    def test_to_df(self):
        df = count_letters(SEQUENCE).to_df()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ['symbol', 'count', 'frequency']
        assert list(df['symbol']) == ['A', 'C', 'G', 'T']
        assert df['count'].sum() == 42
        assert df['frequency'].sum() == pytest.approx(1.0)

    def test_to_df_empty(self):
        df = SymbolCounts.empty().to_df()
        assert len(df) == 0
        assert list(df.columns) == ['symbol', 'count', 'frequency']
