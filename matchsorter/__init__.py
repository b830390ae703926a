"""Fuzzy matching and ranking of in-memory items against a search query."""

from matchsorter.config import Settings, settings
from matchsorter.errors import MatchSorterError, UnknownRankingError, UnsupportedItemError
from matchsorter.key import Key, RankingInfo, get_highest_ranking, get_item_values
from matchsorter.pipeline import match_sorter, rank_items
from matchsorter.no_keys import AsMatchStr, as_match_str, rank_item
from matchsorter.options import BaseSortFn, MatchSorterOptions, RankedItem, SorterFn
from matchsorter.ranking import (
    PreparedQuery,
    Ranking,
    Tier,
    compare_rankings,
    get_acronym,
    get_closeness_ranking,
    get_match_ranking,
    prepare_value_for_comparison,
)
from matchsorter.sort import default_base_sort, sort_ranked_items, sort_ranked_values

__all__ = [
    "AsMatchStr",
    "BaseSortFn",
    "Key",
    "MatchSorterError",
    "MatchSorterOptions",
    "PreparedQuery",
    "RankedItem",
    "Ranking",
    "RankingInfo",
    "Settings",
    "SorterFn",
    "Tier",
    "UnknownRankingError",
    "UnsupportedItemError",
    "as_match_str",
    "compare_rankings",
    "default_base_sort",
    "get_acronym",
    "get_closeness_ranking",
    "get_highest_ranking",
    "get_item_values",
    "get_match_ranking",
    "match_sorter",
    "prepare_value_for_comparison",
    "rank_item",
    "rank_items",
    "settings",
    "sort_ranked_items",
    "sort_ranked_values",
]
