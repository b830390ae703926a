"""Ranking string-like items directly, without key extractors."""

from __future__ import annotations

from collections import UserString
from typing import Any, Protocol, runtime_checkable

from matchsorter.errors import UnsupportedItemError
from matchsorter.ranking import Ranking, get_match_ranking


@runtime_checkable
class AsMatchStr(Protocol):
    """An object that can present itself as a single matchable string."""

    def as_match_str(self) -> str: ...


def as_match_str(item: Any) -> str:
    """Return the text of *item* used for matching in no-keys mode.

    Raises:
        UnsupportedItemError: If *item* is not a ``str``, ``UserString`` or
            :class:`AsMatchStr`.
    """
    if isinstance(item, str):
        return item
    if isinstance(item, UserString):
        return item.data
    if isinstance(item, AsMatchStr):
        return item.as_match_str()
    raise UnsupportedItemError(item)


def rank_item(item: Any, query: str, keep_diacritics: bool = False) -> Ranking:
    """Rank a string-like *item* against *query*."""
    return get_match_ranking(as_match_str(item), query, keep_diacritics)
