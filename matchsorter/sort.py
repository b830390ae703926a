"""Three-level ordering of ranked items: rank, key index, tiebreaker."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

from matchsorter.options import BaseSortFn, RankedItem
from matchsorter.ranking import compare_rankings


def default_base_sort(a: RankedItem, b: RankedItem) -> int:
    """Order by ``ranked_value`` code point by code point (no locale collation)."""
    if a.ranked_value < b.ranked_value:
        return -1
    if a.ranked_value > b.ranked_value:
        return 1
    return 0


def sort_ranked_values(
    a: RankedItem,
    b: RankedItem,
    base_sort: BaseSortFn = default_base_sort,
) -> int:
    """Compare two ranked items; negative means *a* sorts first.

    Higher rank wins, then lower ``key_index``. *base_sort* is only called
    when both are tied.
    """
    order = compare_rankings(b.rank, a.rank)
    if order:
        return order
    if a.key_index != b.key_index:
        return -1 if a.key_index < b.key_index else 1
    return base_sort(a, b)


def sort_ranked_items(
    items: Iterable[RankedItem],
    base_sort: BaseSortFn | None = None,
) -> list[RankedItem]:
    """Return *items* in match order. The sort is stable."""
    tiebreaker = base_sort or default_base_sort
    return sorted(items, key=cmp_to_key(lambda a, b: sort_ranked_values(a, b, tiebreaker)))
