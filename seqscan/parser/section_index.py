"""
Random-access collection of sections built from a forward scan
"""

import logging
from collections.abc import Sequence
from typing import Any, Callable, Iterable, List, Optional, Tuple

from ..utils.misc import resolve_workers, run_partitioned

logger = logging.getLogger(__name__)


class SectionIndex(Sequence):
    """
    Ordered, filtered list of sections

    Unlike the scanner it was built from, the index can be traversed any
    number of times, addressed by position and consumed in parallel.
    """

    def __init__(self, sections: Iterable[Any]):
        self._sections = list(sections)

    def __getitem__(self, item):
        if isinstance(item, slice):
            return SectionIndex(self._sections[item])
        return self._sections[item]

    def __len__(self) -> int:
        return len(self._sections)

    def __eq__(self, other) -> bool:
        if isinstance(other, SectionIndex):
            return self._sections == other._sections
        return NotImplemented

    def __repr__(self) -> str:
        return f"SectionIndex({len(self._sections)} sections)"

    def to_records(self) -> List[Any]:
        """Materialize every section"""
        return [section.to_record() for section in self._sections]

    def parallel_map(self, func: Callable[[Any], Any], n_workers: Optional[int] = None) -> List[Any]:
        """
        Apply func to every section using a fixed-size worker pool

        Sections are split into contiguous slices, one per worker. func must
        only read the section it receives.

        Args:
            func: Function applied to each section
            n_workers: Number of workers, defaults to the CPU count

        Returns:
            List: func results in index order
        """
        n_workers = resolve_workers(n_workers)
        partials = run_partitioned(
            lambda chunk: [func(section) for section in chunk],
            self._sections,
            n_workers,
        )
        return [result for partial in partials for result in partial]


def build_index(scanner: Iterable[Tuple[int, Any]],
                predicate: Optional[Callable[[Any], bool]] = None) -> SectionIndex:
    """
    Run one full pass of scanner, keeping sections accepted by predicate

    Args:
        scanner: Iterator of (index, section) pairs
        predicate: Pure function over a section, None keeps every section

    Returns:
        SectionIndex: Retained sections in file order
    """
    kept = []
    scanned = 0
    for _, section in scanner:
        scanned += 1
        if predicate is None or predicate(section):
            kept.append(section)
    logger.debug(f"Indexed {len(kept)}/{scanned} sections")
    return SectionIndex(kept)
