"""Corpus file loading.

One entry per non-empty line. A file that cannot be read is reported and
treated as an empty corpus.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)


def load_corpus(path: Union[str, Path], encoding: str = "ascii") -> List[str]:
    entries: List[str] = []
    try:
        with open(path, "r", encoding=encoding, errors="replace") as f:
            for line in f:
                line = line.rstrip("\r\n")
                if line:
                    entries.append(line)
    except OSError as e:
        logger.warning("Could not read corpus %s (%s); using an empty corpus", path, e)
        return []

    logger.info("Loaded %d corpus entries from %s", len(entries), path)
    return entries
