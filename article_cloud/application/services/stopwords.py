from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Iterable, Optional

from loguru import logger

# Packaged English list; always present, so the default load cannot fail.
DEFAULT_STOPWORDS_PATH = Path(__file__).resolve().parent.parent / "data" / "stopwords_en.txt"


def parse_stopwords(lines: Iterable[str]) -> FrozenSet[str]:
    words = set()
    for line in lines:
        word = line.strip().lower()
        # skip blanks and comments
        if not word or word.startswith("#"):
            continue
        words.add(word)
    return frozenset(words)


def load_stopwords(path: Optional[Path | str] = None) -> FrozenSet[str]:
    """
    Load a stop-word set, one word per line.

    Raises:
        OSError if an explicit path cannot be read
    """
    source = Path(path) if path is not None else DEFAULT_STOPWORDS_PATH
    with source.open("r", encoding="utf-8") as fh:
        words = parse_stopwords(fh)
    logger.debug("Loaded {} stop words from {}", len(words), source)
    return words


@lru_cache
def get_default_stopwords() -> FrozenSet[str]:
    """Packaged list, read once per process."""
    return load_stopwords()
