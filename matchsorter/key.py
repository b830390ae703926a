"""Key extractors and best-value selection for multi-field items."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, field_validator

from matchsorter.ranking import PreparedQuery, Ranking, Tier

if TYPE_CHECKING:
    from matchsorter.options import MatchSorterOptions


class Key(BaseModel):
    """Pulls matchable strings out of an item, with optional per-key limits.

    ``max_ranking`` caps every rank this key produces, ``min_ranking`` lifts
    any non-``NO_MATCH`` rank up to a floor, and ``threshold`` replaces the
    global threshold for items whose best value came from this key.
    """

    extractor: Callable[[Any], Any]
    threshold: Ranking | None = None
    min_ranking: Ranking = Ranking.NO_MATCH
    max_ranking: Ranking = Ranking.CASE_SENSITIVE_EQUAL

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    @field_validator("threshold", "min_ranking", "max_ranking", mode="before")
    @classmethod
    def coerce_ranking(cls, value: Any) -> Any:
        """Allow tiers and tier names wherever a ranking is expected."""
        if value is None:
            return None
        return Ranking.coerce(value)

    @classmethod
    def new(cls, extractor: Callable[[Any], list[str]]) -> Key:
        """Key whose *extractor* returns a list of values."""
        return cls(extractor=extractor)

    @classmethod
    def from_fn(cls, fn: Callable[[Any], str]) -> Key:
        """Key whose *fn* returns exactly one value."""
        return cls(extractor=lambda item: [fn(item)])

    @classmethod
    def from_fn_multi(cls, fn: Callable[[Any], Iterable[str]]) -> Key:
        """Key whose *fn* returns any iterable of values."""
        return cls(extractor=lambda item: list(fn(item)))

    def with_threshold(self, ranking: Ranking | Tier | str) -> Key:
        return self.model_copy(update={"threshold": Ranking.coerce(ranking)})

    def with_max_ranking(self, ranking: Ranking | Tier | str) -> Key:
        return self.model_copy(update={"max_ranking": Ranking.coerce(ranking)})

    def with_min_ranking(self, ranking: Ranking | Tier | str) -> Key:
        return self.model_copy(update={"min_ranking": Ranking.coerce(ranking)})

    def extract(self, item: Any) -> list[str]:
        """Run the extractor; ``None`` means no values, a bare string means one."""
        values = self.extractor(item)
        if values is None:
            return []
        if isinstance(values, str):
            return [values]
        return list(values)


@dataclass(frozen=True, slots=True)
class RankingInfo:
    """Best ranking found across all of an item's key values."""

    rank: Ranking
    ranked_value: str
    key_index: int
    key_threshold: Ranking | None = None


def get_item_values(item: Any, key: Key) -> list[str]:
    """Return the values *key* extracts from *item*."""
    return key.extract(item)


def rank_with_keys(item: Any, keys: Sequence[Key], query: PreparedQuery) -> RankingInfo:
    """Rank every value of every key and keep the best one.

    Values are numbered across all keys in declaration order (``key_index``).
    Only a strictly better rank replaces the current best, so ties keep the
    lowest ``key_index``.
    """
    best_rank = Ranking.NO_MATCH
    best_value = ""
    best_index = 0
    best_threshold: Ranking | None = None

    key_index = 0
    for key in keys:
        max_ranking = key.max_ranking
        min_ranking = key.min_ranking
        for value in key.extract(item):
            rank = query.rank(value)
            if rank > max_ranking:
                rank = max_ranking
            if rank < min_ranking and rank.tier is not Tier.NO_MATCH:
                rank = min_ranking

            if rank > best_rank:
                best_rank = rank
                best_value = value
                best_index = key_index
                best_threshold = key.threshold

            key_index += 1

    return RankingInfo(
        rank=best_rank,
        ranked_value=best_value,
        key_index=best_index,
        key_threshold=best_threshold,
    )


def get_highest_ranking(
    item: Any,
    keys: Sequence[Key],
    query: str,
    options: MatchSorterOptions,
) -> RankingInfo:
    """Rank *item* against *query* across *keys* using *options*' diacritics mode."""
    return rank_with_keys(item, keys, PreparedQuery(query, options.keep_diacritics))
