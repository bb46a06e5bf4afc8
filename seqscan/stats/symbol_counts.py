"""
Symbol counting result data structure
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import pandas as pd


@dataclass(frozen=True)
class SymbolCounts:
    """
    Per-symbol occurrence counts of one or more sequences

    Merging is commutative and associative with ``SymbolCounts.empty()`` as
    identity, so partial results can be combined in any order. The counts
    mapping is read-only.

    Attributes:
        counts: Mapping from symbol to number of occurrences
        total: Number of symbols scanned
    """
    counts: Mapping[str, int] = field(default_factory=dict)
    total: int = 0

    def __post_init__(self):
        """Validate data consistency"""
        object.__setattr__(self, 'counts', MappingProxyType(dict(self.counts)))
        if any(count < 0 for count in self.counts.values()):
            raise ValueError("Symbol counts must be non-negative")
        if sum(self.counts.values()) != self.total:
            raise ValueError(
                f"Sum of symbol counts ({sum(self.counts.values())}) does not match total ({self.total})"
            )

    def __hash__(self) -> int:
        return hash((frozenset(self.counts.items()), self.total))

    @classmethod
    def empty(cls) -> "SymbolCounts":
        return cls({}, 0)

    def merge(self, other: "SymbolCounts") -> "SymbolCounts":
        """Add counts symbol by symbol and sum totals"""
        merged = dict(self.counts)
        for symbol, count in other.counts.items():
            merged[symbol] = merged.get(symbol, 0) + count
        return SymbolCounts(merged, self.total + other.total)

    def __add__(self, other: "SymbolCounts") -> "SymbolCounts":
        if not isinstance(other, SymbolCounts):
            return NotImplemented
        return self.merge(other)

    def __getitem__(self, symbol: str) -> int:
        return self.counts.get(symbol, 0)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self.counts

    @property
    def symbols(self) -> List[str]:
        """Observed symbols in sorted order"""
        return sorted(self.counts)

    def frequencies(self) -> Dict[str, float]:
        """Fraction of the total taken by each symbol"""
        if self.total == 0:
            return {}
        return {symbol: count / self.total for symbol, count in self.counts.items()}

    def fraction(self, symbols: Iterable[str]) -> float:
        """
        Combined fraction of the given symbols

        Examples:
            >>> SymbolCounts({'A': 2, 'C': 1, 'G': 1}, 4).fraction('GC')
            0.5
        """
        if self.total == 0:
            return 0.0
        return sum(self[symbol] for symbol in set(symbols)) / self.total

    def most_common(self, n: Optional[int] = None) -> List[Tuple[str, int]]:
        """Symbols by decreasing count, ties broken by symbol"""
        ranked = sorted(self.counts.items(), key=lambda item: (-item[1], item[0]))
        return ranked if n is None else ranked[:n]

    def to_df(self) -> pd.DataFrame:
        """Convert counts to a pandas DataFrame

        Returns:
            pd.DataFrame: One row per symbol, sorted by symbol, with columns:
                - symbol: Observed symbol
                - count: Number of occurrences
                - frequency: count / total
        """
        symbols = self.symbols
        counts = [self.counts[symbol] for symbol in symbols]
        return pd.DataFrame({
            'symbol': symbols,
            'count': counts,
            'frequency': [count / self.total for count in counts] if self.total else [],
        })
