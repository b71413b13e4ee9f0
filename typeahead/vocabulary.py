"""
Correction vocabulary.

The vocabulary is the sorted, duplicate-free set of tokens found in the
corpus. It is built once and never changes afterwards.

Usage:
    vocabulary = Vocabulary.from_corpus(["first item", "second item"])
    list(vocabulary)  # ['first', 'item', 'second']
"""

import logging
from bisect import bisect_left
from typing import Callable, Iterable, Iterator, Tuple

from tqdm import tqdm

from .tokenizer import TOKEN_PATTERN, StringLike, tokenize

logger = logging.getLogger(__name__)


class Vocabulary:
    """Immutable sorted set of corpus tokens."""

    __slots__ = ('_tokens',)

    def __init__(self, tokens: Iterable[str] = ()):
        # anything that is not a single alphanumeric token is dropped
        self._tokens: Tuple[str, ...] = tuple(sorted(set(t for t in tokens if TOKEN_PATTERN.fullmatch(t))))

    @classmethod
    def from_corpus(
        cls,
        corpus: Iterable[StringLike],
        fold: Callable[[str], str] = str.lower,
        show_progress: bool = False,
    ) -> "Vocabulary":
        """
        Tokenize every corpus entry and collect the distinct tokens.

        Args:
            corpus: Corpus entries
            fold: Case-folding function for tokens
            show_progress: Display a progress bar while tokenizing

        Returns:
            New Vocabulary
        """
        tokens = []
        for entry in tqdm(corpus, desc="Tokenizing corpus", unit="entry", disable=not show_progress):
            tokens.extend(tokenize(entry, fold))

        vocabulary = cls(tokens)
        logger.debug("Built vocabulary of %d tokens from %d token occurrences", len(vocabulary), len(tokens))
        return vocabulary

    @property
    def tokens(self) -> Tuple[str, ...]:
        return self._tokens

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __contains__(self, token) -> bool:
        if not isinstance(token, str):
            return False
        index = bisect_left(self._tokens, token)
        return index < len(self._tokens) and self._tokens[index] == token

    def __repr__(self) -> str:
        return f"Vocabulary({len(self._tokens)} tokens)"
