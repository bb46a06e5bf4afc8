"""
Symbol frequency counting

Counts occurrences of every symbol in a sequence without assuming an alphabet.
Collections of sequences are split into static slices counted in parallel,
then merged in a single thread.
"""

import logging
from collections import Counter
from functools import reduce
from typing import Any, Iterable, List, Optional, Sequence, Union

from ..utils.misc import resolve_workers, run_partitioned
from .symbol_counts import SymbolCounts

logger = logging.getLogger(__name__)

SequenceLike = Union[str, Sequence[str]]


def count_letters(sequence: SequenceLike) -> SymbolCounts:
    """
    Count symbols of one sequence in a single pass

    Args:
        sequence: Sequence string, or list of lines (a FASTA record's sequence)

    Returns:
        SymbolCounts: Counts with total equal to the sequence length

    Examples:
        >>> count_letters("ACGA")['A']
        2
    """
    lines = [sequence] if isinstance(sequence, str) else sequence
    counter = Counter()
    total = 0
    for line in lines:
        counter.update(line)
        total += len(line)
    return SymbolCounts(dict(counter), total)


def merge_counts(results: Iterable[SymbolCounts]) -> SymbolCounts:
    """Merge partial results, order does not matter"""
    return reduce(SymbolCounts.merge, results, SymbolCounts.empty())


def _count_chunk(chunk: Sequence[Any]) -> SymbolCounts:
    # Sections and records are counted by their materialized sequence
    return merge_counts(count_letters(getattr(item, 'sequence', item)) for item in chunk)


def count_letters_parallel(sequences: Iterable[Any], n_workers: Optional[int] = None) -> SymbolCounts:
    """
    Count symbols over many sequences using a fixed-size worker pool

    Workers are threads sharing the input without copies. Counting itself
    holds the GIL, so the speed-up over a single worker is limited.

    Args:
        sequences: Sequences (strings or lists of lines), or sections and
            records whose ``sequence`` is counted
        n_workers: Number of workers, defaults to the CPU count

    Returns:
        SymbolCounts: Same result as counting the concatenation of all sequences
    """
    sequences = list(sequences)
    n_workers = resolve_workers(n_workers)
    partials: List[SymbolCounts] = run_partitioned(_count_chunk, sequences, n_workers)
    result = merge_counts(partials)
    logger.debug(f"Counted {result.total} symbols in {len(sequences)} sequences "
                 f"using {len(partials)} slices")
    return result


def count_sections(sections: Iterable[Any], n_workers: Optional[int] = None) -> SymbolCounts:
    """
    Count sequence symbols of indexed sections in parallel

    Each worker materializes the sequences of its own slice of sections, so
    parsing work is spread over the pool as well. Errors raised while
    materializing a sequence propagate unchanged.

    Args:
        sections: FASTA or FASTQ sections, e.g. a SectionIndex
        n_workers: Number of workers, defaults to the CPU count

    Returns:
        SymbolCounts: Counts over every section's sequence
    """
    return count_letters_parallel(sections, n_workers=n_workers)
