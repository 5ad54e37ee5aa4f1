from __future__ import annotations
from typing import List, Protocol

from loguru import logger

from article_cloud.application.errors import TokenizerError


class Tokenizer(Protocol):
    def tokenize(self, text: str) -> List[str]: ...


class WordPunctTokenizerService:
    """
    Thin wrapper around nltk's WordPunctTokenizer.

    Splits on word/punctuation boundaries with a regex, so no model data has to
    be downloaded. "can't" comes out as ["can", "'", "t"].
    """

    def __init__(self):
        try:
            from nltk.tokenize import WordPunctTokenizer
        except ImportError as e:
            raise TokenizerError(f"nltk tokenizer unavailable: {e}") from e
        logger.debug("Using nltk WordPunctTokenizer")
        self._tokenizer = WordPunctTokenizer()

    def tokenize(self, text: str) -> List[str]:
        if not text:
            return []
        return self._tokenizer.tokenize(text)
