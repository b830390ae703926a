"""Library-wide defaults, read from ``MATCHSORTER_*`` environment variables."""

from pydantic import field_validator
from pydantic_settings import BaseSettings

from matchsorter.ranking import Ranking


class Settings(BaseSettings):
    """Default values for :class:`~matchsorter.options.MatchSorterOptions`."""

    keep_diacritics: bool = False
    threshold: str = "matches"

    model_config = {
        "env_prefix": "MATCHSORTER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("threshold")
    @classmethod
    def validate_threshold(cls, value: str) -> str:
        """Reject names that are not ranking tiers."""
        Ranking.from_name(value)
        return value

    @property
    def default_threshold(self) -> Ranking:
        return Ranking.from_name(self.threshold)


settings = Settings()
