"""
Spelling corrections ranked by (incremental) OSA distance.

Every vocabulary token is scored against the query with smart_distance() and
the best `max_count` tokens are kept in a list sorted by distance. Tokens with
equal distance stay in vocabulary order.

Usage:
    checker = SpellChecker.from_corpus(["first item", "second item"])
    checker.get_corrections("frist", max_count=3)
    # [Correction(distance=1, word='first'), ...]
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from .distance import MIN_INCREMENTAL_LENGTH, smart_distance
from .tokenizer import StringLike, as_text
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Correction:
    """Vocabulary word suggested for a query."""
    distance: int
    word: str


class SpellChecker:
    """Ranks vocabulary tokens as corrections for a query."""

    def __init__(self, vocabulary: Optional[Vocabulary] = None, min_incremental_length: int = MIN_INCREMENTAL_LENGTH):
        """
        Initialize spell checker.

        Args:
            vocabulary: Tokens to suggest from (empty when omitted)
            min_incremental_length: Shortest query that gets the prefix discount
        """
        self.vocabulary = vocabulary if vocabulary is not None else Vocabulary()
        self.min_incremental_length = min_incremental_length

    @classmethod
    def from_corpus(
        cls,
        corpus: Iterable[StringLike],
        fold: Callable[[str], str] = str.lower,
        min_incremental_length: int = MIN_INCREMENTAL_LENGTH,
        show_progress: bool = False,
    ) -> "SpellChecker":
        vocabulary = Vocabulary.from_corpus(corpus, fold=fold, show_progress=show_progress)
        return cls(vocabulary, min_incremental_length=min_incremental_length)

    def distance(self, word: StringLike, query: StringLike, incremental: bool = False) -> int:
        """Smart distance with this checker's prefix threshold."""
        return smart_distance(word, query, incremental, min_prefix_length=self.min_incremental_length)

    def get_corrections(self, query: StringLike, max_count: int, incremental: bool = False) -> List[Correction]:
        """
        Get correction suggestions for a query.

        With `incremental`, vocabulary characters past the end of the query are
        not charged, on the assumption that the user has not typed them yet.

        Args:
            query: Possibly misspelled text
            max_count: Maximum number of corrections to return
            incremental: Treat the query as an unfinished prefix

        Returns:
            At most max_count corrections, ascending by distance
        """
        query = as_text(query)
        corrections: List[Correction] = []

        if max_count <= 0:
            return corrections

        for word in self.vocabulary:
            distance = self.distance(word, query, incremental)

            if len(corrections) < max_count or corrections[-1].distance > distance:
                # insert after every correction that is at least as good
                position = next(
                    (index for index, c in enumerate(corrections) if c.distance > distance),
                    len(corrections),
                )
                corrections.insert(position, Correction(distance, word))
                del corrections[max_count:]

        logger.debug("Corrections for %r: %s", query, corrections)
        return corrections
