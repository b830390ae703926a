"""Exceptions raised at the matchsorter API boundary."""


class MatchSorterError(Exception):
    """Base exception for matchsorter errors."""


class UnknownRankingError(MatchSorterError, ValueError):
    """A ranking tier name (or value) could not be resolved."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown ranking tier: {value!r}")


class UnsupportedItemError(MatchSorterError, TypeError):
    """An item has no string view and no keys were given to extract one."""

    def __init__(self, item: object) -> None:
        self.item = item
        super().__init__(
            f"Cannot rank {type(item).__name__!r} without keys: "
            "pass a str, a UserString, or an object with as_match_str()",
        )
