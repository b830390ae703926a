"""Ranking tiers and the classifier that scores a candidate against a query."""

from __future__ import annotations

import re
import unicodedata
from enum import IntEnum
from typing import Any, ClassVar

from matchsorter.errors import UnknownRankingError

# Delimiters that start a new word for acronym extraction.
_ACRONYM_DELIMITERS = frozenset(" -")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class Tier(IntEnum):
    """Match-quality tiers, best first."""

    CASE_SENSITIVE_EQUAL = 7
    EQUAL = 6
    STARTS_WITH = 5
    WORD_STARTS_WITH = 4
    CONTAINS = 3
    ACRONYM = 2
    MATCHES = 1
    NO_MATCH = 0


class Ranking:
    """How well a candidate matched a query.

    Fixed tiers compare by tier value. Two ``MATCHES`` rankings compare by
    their sub-score, so ``Ranking.matches(2.0)`` still sorts below
    ``Ranking.ACRONYM``. Sub-scores are expected in ``(1.0, 2.0]`` but are
    not checked. Any comparison with a NaN sub-score is ``False``.
    """

    __slots__ = ("score", "tier")

    CASE_SENSITIVE_EQUAL: ClassVar[Ranking]
    EQUAL: ClassVar[Ranking]
    STARTS_WITH: ClassVar[Ranking]
    WORD_STARTS_WITH: ClassVar[Ranking]
    CONTAINS: ClassVar[Ranking]
    ACRONYM: ClassVar[Ranking]
    NO_MATCH: ClassVar[Ranking]

    tier: Tier
    score: float | None

    def __init__(self, tier: Tier, score: float | None = None) -> None:
        tier = Tier(tier)
        if tier is Tier.MATCHES:
            score = 1.0 if score is None else float(score)
        else:
            score = None
        object.__setattr__(self, "tier", tier)
        object.__setattr__(self, "score", score)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def matches(cls, score: float) -> Ranking:
        """Build a fuzzy ``MATCHES`` ranking with the given sub-score."""
        return cls(Tier.MATCHES, score)

    @classmethod
    def from_tier(cls, tier: Tier) -> Ranking:
        """Return the ranking for *tier*; ``MATCHES`` gets the lowest sub-score."""
        if tier is Tier.MATCHES:
            return cls.matches(1.0)
        return _FIXED_RANKINGS[tier]

    @classmethod
    def from_name(cls, name: str) -> Ranking:
        """Parse a tier name such as ``"starts_with"`` or ``"StartsWith"``.

        Matching is case-insensitive and treats ``-`` and spaces as ``_``.
        ``"matches"`` maps to ``Ranking.matches(1.0)``.

        Raises:
            UnknownRankingError: If *name* is not a tier name.
        """
        normalized = name.strip().replace("-", "_").replace(" ", "_")
        if "_" not in normalized and not normalized.isupper():
            normalized = _CAMEL_BOUNDARY.sub("_", normalized)
        normalized = normalized.upper()
        try:
            tier = Tier[normalized]
        except KeyError:
            raise UnknownRankingError(name) from None
        return cls.from_tier(tier)

    @classmethod
    def coerce(cls, value: Ranking | Tier | str) -> Ranking:
        """Accept a ranking, a tier, or a tier name and return a ranking."""
        if isinstance(value, Ranking):
            return value
        if isinstance(value, Tier):
            return cls.from_tier(value)
        if isinstance(value, str):
            return cls.from_name(value)
        raise UnknownRankingError(value)

    def _both_matches(self, other: Ranking) -> bool:
        return self.tier is Tier.MATCHES and other.tier is Tier.MATCHES

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ranking):
            return NotImplemented
        if self._both_matches(other):
            return self.score == other.score
        return self.tier == other.tier

    def __lt__(self, other: Ranking) -> bool:
        if not isinstance(other, Ranking):
            return NotImplemented
        if self._both_matches(other):
            return self.score < other.score  # type: ignore[operator]
        return self.tier < other.tier

    def __le__(self, other: Ranking) -> bool:
        if not isinstance(other, Ranking):
            return NotImplemented
        if self._both_matches(other):
            return self.score <= other.score  # type: ignore[operator]
        return self.tier <= other.tier

    def __gt__(self, other: Ranking) -> bool:
        if not isinstance(other, Ranking):
            return NotImplemented
        if self._both_matches(other):
            return self.score > other.score  # type: ignore[operator]
        return self.tier > other.tier

    def __ge__(self, other: Ranking) -> bool:
        if not isinstance(other, Ranking):
            return NotImplemented
        if self._both_matches(other):
            return self.score >= other.score  # type: ignore[operator]
        return self.tier >= other.tier

    def __hash__(self) -> int:
        return hash((self.tier, self.score))

    def __repr__(self) -> str:
        if self.tier is Tier.MATCHES:
            return f"Ranking.matches({self.score!r})"
        return f"Ranking.{self.tier.name}"

    def __reduce__(self) -> tuple[Any, ...]:
        return (Ranking, (self.tier, self.score))


_FIXED_RANKINGS: dict[Tier, Ranking] = {
    tier: Ranking(tier) for tier in Tier if tier is not Tier.MATCHES
}

Ranking.CASE_SENSITIVE_EQUAL = _FIXED_RANKINGS[Tier.CASE_SENSITIVE_EQUAL]
Ranking.EQUAL = _FIXED_RANKINGS[Tier.EQUAL]
Ranking.STARTS_WITH = _FIXED_RANKINGS[Tier.STARTS_WITH]
Ranking.WORD_STARTS_WITH = _FIXED_RANKINGS[Tier.WORD_STARTS_WITH]
Ranking.CONTAINS = _FIXED_RANKINGS[Tier.CONTAINS]
Ranking.ACRONYM = _FIXED_RANKINGS[Tier.ACRONYM]
Ranking.NO_MATCH = _FIXED_RANKINGS[Tier.NO_MATCH]


def compare_rankings(a: Ranking, b: Ranking) -> int:
    """Return ``1`` if *a* is better, ``-1`` if worse, ``0`` otherwise.

    Indeterminate comparisons (NaN sub-scores) resolve to ``0``.
    """
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


def prepare_value_for_comparison(value: str, keep_diacritics: bool) -> str:
    """Strip combining marks from *value* unless *keep_diacritics* is set.

    The input object itself is returned when nothing would change, so ASCII
    and mark-free text never allocates a new string.
    """
    if keep_diacritics or value.isascii():
        return value
    stripped = "".join(
        char
        for char in unicodedata.normalize("NFD", value)
        if not unicodedata.category(char).startswith("M")
    )
    if stripped == value:
        return value
    return stripped


def get_closeness_ranking(candidate: str, query: str) -> Ranking:
    """Greedy in-order fuzzy match of *query* characters inside *candidate*.

    Returns ``Ranking.matches(1 + 1 / spread)`` where spread is the distance
    between the first and last matched characters, ``Ranking.matches(2.0)``
    when the spread is zero, or ``NO_MATCH`` when a character is missing.
    Case-sensitive: lowercase both sides first for case-insensitive matching.
    """
    position = 0
    first_match: int | None = None
    last_match = 0

    for char in query:
        found = candidate.find(char, position)
        if found == -1:
            return Ranking.NO_MATCH
        if first_match is None:
            first_match = found
        last_match = found
        position = found + 1

    spread = last_match - (0 if first_match is None else first_match)
    if spread == 0:
        return Ranking.matches(2.0)
    return Ranking.matches(1.0 + 1.0 / spread)


def get_acronym(value: str) -> str:
    """Collect the first character plus every character after a space or hyphen.

    ``"north-west airlines"`` -> ``"nwa"``. Runs of delimiters collapse.
    """
    if not value:
        return ""

    previous = value[0]
    letters = [previous]
    for char in value[1:]:
        if previous in _ACRONYM_DELIMITERS and char not in _ACRONYM_DELIMITERS:
            letters.append(char)
        previous = char
    return "".join(letters)


def lowercase(value: str) -> str:
    """Lowercase *value* one character at a time, without context rules.

    ``str.lower()`` turns a word-final capital sigma into ``ς``; mapping each
    character on its own always gives ``σ``.
    """
    if value.isascii():
        return value.lower()
    return "".join(char.lower() for char in value)


class PreparedQuery:
    """A query normalized and lowercased once, ready to rank many candidates."""

    __slots__ = ("char_count", "keep_diacritics", "lower", "prepared")

    def __init__(self, query: str, keep_diacritics: bool = False) -> None:
        self.keep_diacritics = keep_diacritics
        self.prepared = prepare_value_for_comparison(query, keep_diacritics)
        self.lower = lowercase(self.prepared)
        self.char_count = len(self.lower)

    def rank(self, candidate: str) -> Ranking:
        """Classify *candidate* against this query into a ranking tier."""
        candidate = prepare_value_for_comparison(candidate, self.keep_diacritics)

        if self.char_count > len(candidate):
            return Ranking.NO_MATCH

        if candidate == self.prepared:
            return Ranking.CASE_SENSITIVE_EQUAL

        lowered = lowercase(candidate)
        query = self.lower

        found = lowered.find(query)
        if found == 0:
            if len(lowered) == len(query):
                return Ranking.EQUAL
            return Ranking.STARTS_WITH
        if found > 0:
            # Any non-overlapping occurrence right after a space is a word start.
            while found != -1:
                if lowered[found - 1] == " ":
                    return Ranking.WORD_STARTS_WITH
                found = lowered.find(query, found + len(query))
            return Ranking.CONTAINS

        # A single character that is not a substring cannot be an acronym or fuzzy match.
        if self.char_count == 1:
            return Ranking.NO_MATCH

        if query in get_acronym(lowered):
            return Ranking.ACRONYM

        return get_closeness_ranking(lowered, query)


def get_match_ranking(test_string: str, string_to_rank: str, keep_diacritics: bool = False) -> Ranking:
    """Rank how well *string_to_rank* (the query) matches *test_string*.

    For ranking many candidates against one query, build a
    :class:`PreparedQuery` once and call :meth:`PreparedQuery.rank` instead.
    """
    return PreparedQuery(string_to_rank, keep_diacritics).rank(test_string)
