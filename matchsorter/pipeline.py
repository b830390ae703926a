"""Rank, filter and sort items against a query."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

from matchsorter.key import rank_with_keys
from matchsorter.no_keys import as_match_str
from matchsorter.options import MatchSorterOptions, RankedItem
from matchsorter.ranking import PreparedQuery
from matchsorter.sort import sort_ranked_items

logger = logging.getLogger(__name__)

T = TypeVar("T")


def rank_items(
    items: Sequence[T],
    query: str,
    options: MatchSorterOptions | None = None,
) -> list[RankedItem]:
    """Rank every item and keep those at or above their effective threshold.

    The effective threshold is the winning key's ``threshold`` when it has
    one, otherwise ``options.threshold``. Results keep input order.
    """
    if options is None:
        options = MatchSorterOptions()

    prepared = PreparedQuery(query, options.keep_diacritics)
    keys = options.keys
    ranked: list[RankedItem] = []

    for index, item in enumerate(items):
        if keys:
            info = rank_with_keys(item, keys, prepared)
            rank = info.rank
            ranked_value = info.ranked_value
            key_index = info.key_index
            key_threshold = info.key_threshold
        else:
            ranked_value = as_match_str(item)
            rank = prepared.rank(ranked_value)
            key_index = 0
            key_threshold = None

        threshold = options.threshold if key_threshold is None else key_threshold
        if rank >= threshold:
            ranked.append(
                RankedItem(
                    item=item,
                    index=index,
                    rank=rank,
                    ranked_value=ranked_value,
                    key_index=key_index,
                    key_threshold=key_threshold,
                ),
            )

    return ranked


def match_sorter(
    items: Sequence[T],
    query: str,
    options: MatchSorterOptions | None = None,
) -> list[T]:
    """Return the items matching *query*, best match first.

    Args:
        items: Candidates. Plain strings (or ``AsMatchStr`` objects) when
            ``options.keys`` is empty, anything the keys understand otherwise.
        query: The search text.
        options: Keys, threshold and sort overrides. Defaults apply when omitted.

    Returns:
        The original item objects that passed the threshold, in match order.
    """
    if options is None:
        options = MatchSorterOptions()

    ranked = rank_items(items, query, options)
    if options.sorter is not None:
        ordered = options.sorter(ranked)
    else:
        ordered = sort_ranked_items(ranked, options.base_sort)

    logger.debug(
        "match_sorter query=%r: %d of %d items passed threshold %r (custom sorter: %s)",
        query,
        len(ranked),
        len(items),
        options.threshold,
        options.sorter is not None,
    )
    return [ranked_item.item for ranked_item in ordered]
