#!/usr/bin/env python3
"""
Section index and worker partitioning tests
"""

import pytest

from seqscan.parser import SectionIndex, build_index, index_fasta, iter_fasta
from seqscan.utils.misc import partition, resolve_workers, run_partitioned

RECORDS = b"".join(
    f">seq{i} len={i}\n{'ACGT' * i}\n".encode() for i in range(10)
)


class TestSectionIndex:
    """Random access over indexed sections"""

    def test_order_matches_scan(self):
        sections = index_fasta(RECORDS)
        assert len(sections) == 10
        assert list(sections) == [s for _, s in iter_fasta(RECORDS)]

    def test_random_access(self):
        sections = index_fasta(RECORDS)
        assert sections[3].header == ">seq3 len=3"
        assert sections[-1].header == ">seq9 len=9"
        with pytest.raises(IndexError):
            sections[10]

    def test_slice_returns_index(self):
        sections = index_fasta(RECORDS)
        tail = sections[7:]
        assert isinstance(tail, SectionIndex)
        assert [s.header for s in tail] == [">seq7 len=7", ">seq8 len=8", ">seq9 len=9"]

    def test_reversed(self):
        sections = index_fasta(RECORDS)
        assert [s.header for s in reversed(sections)][0] == ">seq9 len=9"

    def test_repeated_iteration(self):
        sections = index_fasta(RECORDS)
        assert list(sections) == list(sections)

    def test_predicate(self):
        sections = index_fasta(RECORDS, lambda s: s.sequence_length % 8 == 0)
        assert [s.header for s in sections] == [">seq0 len=0", ">seq2 len=2", ">seq4 len=4",
                                                 ">seq6 len=6", ">seq8 len=8"]

    def test_empty(self):
        sections = index_fasta(b"")
        assert len(sections) == 0
        assert sections.to_records() == []
        assert sections.parallel_map(len, n_workers=4) == []

    def test_equality_and_repr(self):
        assert index_fasta(RECORDS) == index_fasta(RECORDS)
        assert index_fasta(RECORDS) != index_fasta(RECORDS)[1:]
        assert repr(index_fasta(RECORDS)) == "SectionIndex(10 sections)"

    def test_build_index_from_pairs(self):
        """Any iterator of (index, section) pairs can be indexed"""
        sections = build_index(enumerate(["a", "bb", "ccc"]), lambda s: len(s) > 1)
        assert list(sections) == ["bb", "ccc"]


class TestParallelMap:
    """Worker pool over an index"""

    @pytest.mark.parametrize("n_workers", [1, 2, 3, 16])
    def test_results_in_index_order(self, n_workers):
        sections = index_fasta(RECORDS)
        results = sections.parallel_map(lambda s: s.to_record(), n_workers=n_workers)
        assert results == sections.to_records()

    def test_invalid_workers(self):
        with pytest.raises(ValueError):
            index_fasta(RECORDS).parallel_map(len, n_workers=0)


class TestPartitioning:
    """Static work slices"""

    def test_partition(self):
        assert partition(10, 3) == [(0, 4), (4, 7), (7, 10)]
        assert partition(2, 5) == [(0, 1), (1, 2)]
        assert partition(0, 3) == []

    def test_partition_covers_every_item(self):
        bounds = partition(17, 4)
        covered = [i for start, stop in bounds for i in range(start, stop)]
        assert covered == list(range(17))

    def test_resolve_workers(self):
        assert resolve_workers(3) == 3
        assert resolve_workers() >= 1
        with pytest.raises(ValueError):
            resolve_workers(0)

    def test_run_partitioned(self):
        results = run_partitioned(sum, list(range(10)), 3)
        assert results == [0 + 1 + 2 + 3, 4 + 5 + 6, 7 + 8 + 9]

    def test_run_partitioned_propagates_errors(self):
        def fail(chunk):
            raise RuntimeError("worker failed")

        with pytest.raises(RuntimeError):
            run_partitioned(fail, [1, 2, 3], 2)
