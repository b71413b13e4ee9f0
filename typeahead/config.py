"""
Search configuration.

Values come from keyword arguments or, through SearchConfig.from_env(), from
environment variables (a .env file in the working directory is loaded first):

    TYPEAHEAD_MAX_RESULTS              results per query (default 10)
    TYPEAHEAD_MAX_CORRECTIONS          corrections shown per query (default 5)
    TYPEAHEAD_MIN_INCREMENTAL_LENGTH   shortest query with prefix discount (default 3)
    TYPEAHEAD_CASE_FOLDING             "lower" or "identity" (default "lower")
"""

import os
from dataclasses import dataclass
from typing import Callable, Optional

from dotenv import load_dotenv

from .distance import MIN_INCREMENTAL_LENGTH as DEFAULT_MIN_INCREMENTAL_LENGTH
from .errors import ConfigurationError
from .tokenizer import DEFAULT_FOLDING, FOLDING_POLICIES, get_folding

DEFAULT_MAX_RESULTS = 10
DEFAULT_MAX_CORRECTIONS = 5


@dataclass(frozen=True)
class SearchConfig:
    """Tuning knobs for IncrementalSearch."""
    max_result_count: int = DEFAULT_MAX_RESULTS
    max_correction_count: int = DEFAULT_MAX_CORRECTIONS
    min_incremental_length: int = DEFAULT_MIN_INCREMENTAL_LENGTH
    case_folding: str = DEFAULT_FOLDING

    def __post_init__(self):
        if self.max_result_count <= 0:
            raise ConfigurationError("max_result_count", self.max_result_count, "must be positive")
        if self.max_correction_count <= 0:
            raise ConfigurationError("max_correction_count", self.max_correction_count, "must be positive")
        if self.min_incremental_length < 0:
            raise ConfigurationError("min_incremental_length", self.min_incremental_length, "must not be negative")
        if self.case_folding not in FOLDING_POLICIES:
            raise ConfigurationError(
                "case_folding", self.case_folding, f"expected one of {sorted(FOLDING_POLICIES)}"
            )

    @property
    def fold(self) -> Callable[[str], str]:
        return get_folding(self.case_folding)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "SearchConfig":
        """
        Build a config from environment variables.

        Args:
            dotenv_path: Explicit .env file (default: search from the working directory)

        Returns:
            SearchConfig with defaults for unset variables
        """
        load_dotenv(dotenv_path)
        return cls(
            max_result_count=_int_env("TYPEAHEAD_MAX_RESULTS", DEFAULT_MAX_RESULTS),
            max_correction_count=_int_env("TYPEAHEAD_MAX_CORRECTIONS", DEFAULT_MAX_CORRECTIONS),
            min_incremental_length=_int_env("TYPEAHEAD_MIN_INCREMENTAL_LENGTH", DEFAULT_MIN_INCREMENTAL_LENGTH),
            case_folding=os.getenv("TYPEAHEAD_CASE_FOLDING", DEFAULT_FOLDING).strip().lower(),
        )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(name, raw, "expected an integer") from None
