"""
Typeahead Package

Incremental search with spelling corrections over an in-memory corpus.

Main Components:
    - tokenizer: Case-folded alphanumeric tokens
    - vocabulary: Sorted, duplicate-free token set built from the corpus
    - distance: OSA edit distance, traceback and incremental distance
    - spellcheck: Ranked correction suggestions
    - search: Prefix, substring and corrected-substring result tiers

Quick Start:
    from typeahead import IncrementalSearch

    search = IncrementalSearch(["first item", "second item", "third string"])

    search.search("fir")            # ['first item']
    search.get_corrections("strng") # [Correction(distance=1, word='string'), ...]
"""

__version__ = "0.1.0"

from .config import SearchConfig
from .distance import EditOp, Alignment, compute_distance, osa_distance, smart_distance
from .errors import TypeaheadError, ConfigurationError, CorruptedTracebackError
from .search import IncrementalSearch, SearchResult, format_corrections
from .spellcheck import Correction, SpellChecker
from .tokenizer import tokenize
from .vocabulary import Vocabulary

__all__ = [
    "SearchConfig",
    "EditOp",
    "Alignment",
    "compute_distance",
    "osa_distance",
    "smart_distance",
    "TypeaheadError",
    "ConfigurationError",
    "CorruptedTracebackError",
    "IncrementalSearch",
    "SearchResult",
    "format_corrections",
    "Correction",
    "SpellChecker",
    "tokenize",
    "Vocabulary",
]
