"""
Incremental search over a fixed corpus.

As the user types, every corpus entry is checked against the query and placed
in the first tier it qualifies for:

    1. the entry starts with the query
    2. the entry contains the query
    3. the entry contains one of the best incremental spelling corrections
       of the query (only corrections tied for the minimum distance)

Tiers are concatenated in that order, corpus order is kept inside a tier, and
the list is cut to `max_count`. All matching is case-insensitive; results are
returned in their original case.

Usage:
    search = IncrementalSearch(["first item", "second item", "third string"])

    search.search("fir")
    # ['first item']

    search.search("strng")
    # ['third string']

    result = search.autocomplete("itme")
    print(result.results, format_corrections(result.corrections), result.latency_ms)
"""

import logging
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import SearchConfig
from .spellcheck import Correction, SpellChecker
from .tokenizer import StringLike, as_text

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Point-in-time answer for one query."""
    query: str
    results: List[str]
    corrections: List[Correction]
    latency_ms: float = 0.0
    tier_sizes: Tuple[int, int, int] = (0, 0, 0)


class IncrementalSearch:
    """Type-ahead search with prefix, substring and corrected-substring tiers."""

    def __init__(self, corpus: Iterable[StringLike], config: Optional[SearchConfig] = None, show_progress: bool = False):
        """
        Initialize incremental search.

        Args:
            corpus: Entries to search, in display order
            config: Search settings (defaults when omitted)
            show_progress: Show a progress bar while building the vocabulary
        """
        self.config = config or SearchConfig()

        text = tuple(as_text(entry) for entry in corpus)
        self._text: Tuple[str, ...] = text
        self._text_lowercase: Tuple[str, ...] = tuple(entry.lower() for entry in text)

        self.spellcheck = SpellChecker.from_corpus(
            text,
            fold=self.config.fold,
            min_incremental_length=self.config.min_incremental_length,
            show_progress=show_progress,
        )
        logger.debug("Indexed %d entries, %d vocabulary tokens", len(text), len(self.spellcheck.vocabulary))

    @property
    def corpus(self) -> Sequence[str]:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def search(self, query: StringLike, max_count: Optional[int] = None) -> List[str]:
        """
        Find corpus entries for a (partial) query.

        Args:
            query: Text typed so far
            max_count: Maximum number of results (default: config.max_result_count)

        Returns:
            At most max_count original-case entries, best tier first
        """
        return self._search(as_text(query), self._max_count(max_count))[0]

    def get_corrections(self, query: StringLike) -> List[Correction]:
        """Top incremental corrections for display next to the results."""
        # fold the query the same way as the vocabulary tokens
        return self.spellcheck.get_corrections(
            self.config.fold(as_text(query)), self.config.max_correction_count, incremental=True
        )

    def autocomplete(self, query: StringLike, max_count: Optional[int] = None) -> SearchResult:
        """
        Run search() and get_corrections() for one keystroke.

        The vocabulary is ranked once; the same corrections feed the third
        tier and the returned snapshot.

        Args:
            query: Text typed so far
            max_count: Maximum number of results (default: config.max_result_count)

        Returns:
            SearchResult with results, corrections and elapsed time
        """
        query = as_text(query)
        start = time.perf_counter()

        corrections = self.get_corrections(query)
        results, tier_sizes = self._search(query, self._max_count(max_count), corrections=corrections)

        elapsed = (time.perf_counter() - start) * 1000
        return SearchResult(
            query=query,
            results=results,
            corrections=corrections,
            latency_ms=elapsed,
            tier_sizes=tier_sizes,
        )

    def _max_count(self, max_count: Optional[int]) -> int:
        return self.config.max_result_count if max_count is None else max_count

    @staticmethod
    def _best_correction_words(corrections: List[Correction]) -> List[str]:
        if not corrections:
            return []
        min_distance = corrections[0].distance
        return [c.word.lower() for c in corrections if c.distance == min_distance]

    def _search(
        self,
        query: str,
        max_count: int,
        corrections: Optional[List[Correction]] = None,
    ) -> Tuple[List[str], Tuple[int, int, int]]:
        results_start: List[str] = []
        results_contain: List[str] = []
        results_corrected: List[str] = []

        if max_count <= 0:
            return [], (0, 0, 0)

        if corrections is None:
            corrections = self.get_corrections(query)
        corrected_words = self._best_correction_words(corrections)

        query = query.lower()
        for text, lowercase_text in zip(self._text, self._text_lowercase):
            if len(results_start) >= max_count:
                break

            if lowercase_text.startswith(query):
                results_start.append(text)
            elif len(results_contain) < max_count and query in lowercase_text:
                results_contain.append(text)
            elif len(results_contain) < max_count and len(results_corrected) < max_count:
                if any(word in lowercase_text for word in corrected_words):
                    results_corrected.append(text)

        tier_sizes = (len(results_start), len(results_contain), len(results_corrected))
        logger.debug("Query %r tiers (start, contain, corrected): %s", query, tier_sizes)

        results = results_start + results_contain + results_corrected
        return results[:max_count], tier_sizes


def format_corrections(corrections: Iterable[Correction]) -> str:
    """
    Render corrections the way the interactive demo prints them.

    Examples:
        >>> format_corrections([Correction(0, "first"), Correction(1, "fist")])
        '{ 0: first; 1: fist; }'
    """
    body = "".join(f"{c.distance}: {c.word}; " for c in corrections)
    return "{ " + body + "}"
