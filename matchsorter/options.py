"""Per-call options and the ranked-item record passed to sort callbacks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, field_validator

from matchsorter import config
from matchsorter.key import Key
from matchsorter.ranking import Ranking


@dataclass(frozen=True, slots=True)
class RankedItem:
    """An input item annotated with the ranking that let it through the filter."""

    item: Any
    index: int  # position in the input, used for stable ordering
    rank: Ranking
    ranked_value: str
    key_index: int
    key_threshold: Ranking | None = None


# cmp-style tiebreaker: negative puts a first, positive puts b first.
BaseSortFn = Callable[[RankedItem, RankedItem], int]
# Receives all filtered items and returns them in final order.
SorterFn = Callable[[list[RankedItem]], list[RankedItem]]


def _default_threshold() -> Ranking:
    return config.settings.default_threshold


def _default_keep_diacritics() -> bool:
    return config.settings.keep_diacritics


class MatchSorterOptions(BaseModel):
    """Options for a single :func:`~matchsorter.match_sorter` call.

    With no ``keys`` every item is ranked by its own text. ``threshold`` is
    the lowest tier kept; it defaults to ``Ranking.matches(1.0)`` so every
    fuzzy match passes. ``base_sort`` breaks ties left after rank and key
    index, ``sorter`` replaces the whole sort phase.
    """

    keys: list[Key] = Field(default_factory=list)
    threshold: Ranking = Field(default_factory=_default_threshold)
    keep_diacritics: bool = Field(default_factory=_default_keep_diacritics)
    base_sort: BaseSortFn | None = None
    sorter: SorterFn | None = None

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    @field_validator("threshold", mode="before")
    @classmethod
    def coerce_threshold(cls, value: Any) -> Any:
        """Allow tiers and tier names as thresholds."""
        return Ranking.coerce(value)

    def __repr__(self) -> str:
        return (
            f"MatchSorterOptions(keys=[{len(self.keys)} key(s)], "
            f"threshold={self.threshold!r}, "
            f"keep_diacritics={self.keep_diacritics}, "
            f"base_sort={'<fn>' if self.base_sort is not None else None}, "
            f"sorter={'<fn>' if self.sorter is not None else None})"
        )
