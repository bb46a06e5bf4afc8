"""
Symbol statistics module

Per-symbol occurrence counts over single sequences or whole collections,
computed in parallel with a commutative merge.
"""

from .letters import count_letters, count_letters_parallel, count_sections, merge_counts
from .symbol_counts import SymbolCounts

__all__ = [
    'count_letters',
    'count_letters_parallel',
    'count_sections',
    'merge_counts',
    'SymbolCounts'
]
