from __future__ import annotations
from dataclasses import dataclass
from typing import AbstractSet, List, Optional
import re

from article_cloud.application.services.tokenizer import Tokenizer, WordPunctTokenizerService

_ALPHA = re.compile(r"[a-z]+")


@dataclass
class NormalizerService:
    """
    Turns raw text into countable words:
    - tokenize (delegated to the tokenizer, no re-splitting here)
    - lowercase
    - keep purely alphabetic tokens
    - drop stop words (stored lowercase, so this runs after lowercasing)
    """

    tokenizer: Tokenizer
    stopwords: AbstractSet[str]

    def normalize(self, text: str) -> List[str]:
        if not text or not text.strip():
            return []

        words: list[str] = []
        for token in self.tokenizer.tokenize(text):
            word = token.lower()
            if not _ALPHA.fullmatch(word):
                continue
            if word in self.stopwords:
                continue
            words.append(word)
        return words


def normalize(
    text: str,
    stopwords: AbstractSet[str],
    tokenizer: Optional[Tokenizer] = None,
) -> List[str]:
    return NormalizerService(tokenizer or WordPunctTokenizerService(), stopwords).normalize(text)
