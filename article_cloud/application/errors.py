"""Exceptions raised by the word cloud pipeline.

Network and HTTP failures are left as ``httpx.HTTPError`` and an unreadable
stop-word file as ``OSError``; everything else derives from ``ArticleCloudError``.
"""


class ArticleCloudError(Exception):
    """Base class for pipeline failures."""


class ExtractionError(ArticleCloudError):
    """The fetched page produced no readable text."""

    def __init__(self, url: str, reason: str = "no text found in the content region"):
        self.url = url
        super().__init__(f"Could not extract text from {url}: {reason}")


class TokenizerError(ArticleCloudError):
    """The tokenizer could not be loaded or failed on its input."""


class RenderError(ArticleCloudError):
    """The word cloud could not be rendered, e.g. nothing left to draw."""
