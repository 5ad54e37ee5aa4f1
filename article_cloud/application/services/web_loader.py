from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import re

import httpx
import trafilatura
from bs4 import BeautifulSoup
from loguru import logger

from article_cloud.application.errors import ExtractionError


# elements that break words apart; inline markup (b, a, span, ...) does not
BLOCK_TAGS = [
    "address", "article", "aside", "blockquote", "br", "caption", "dd", "div", "dl", "dt",
    "figcaption", "figure", "footer", "h1", "h2", "h3", "h4", "h5", "h6", "header", "hr",
    "li", "main", "nav", "ol", "p", "pre", "section", "table", "td", "th", "tr", "ul",
]


def _collapse_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def _region_text(region) -> str:
    for tag in region.find_all(BLOCK_TAGS):
        tag.insert_before(" ")
        tag.insert_after(" ")
    return region.get_text()


@dataclass
class WebLoaderService:
    timeout_s: float = 25.0
    user_agent: str = "article-cloud/0.1 (+word cloud generator)"
    # CSS selector for the main-content region (Wikipedia's article body by default)
    content_selector: Optional[str] = "#bodyContent"
    # tests plug an httpx.MockTransport in here
    transport: Optional[httpx.BaseTransport] = None

    def fetch(self, url: str) -> str:
        """
        Fetch a URL and extract the text of its main-content region.

        Raises:
            httpx.HTTPError on network problems or error status codes
            ExtractionError if no text can be extracted
        """
        html = self.download(url)

        text = self.extract(html, url)
        if not text:
            raise ExtractionError(url)

        logger.debug("Extracted {} chars from url='{}'", len(text), url)
        return text

    def download(self, url: str) -> str:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }

        with httpx.Client(
            timeout=self.timeout_s,
            headers=headers,
            follow_redirects=True,
            transport=self.transport,
        ) as client:
            logger.info("Fetching url='{}'", url)
            resp = client.get(url)
            resp.raise_for_status()
            return resp.text

    def extract(self, html: str, url: Optional[str] = None) -> str:
        # 1) Selected content region, flattened like a browser's innerText
        if self.content_selector:
            soup = BeautifulSoup(html, "html.parser")
            for tag in soup(["script", "style", "noscript"]):
                tag.decompose()
            regions = soup.select(self.content_selector)
            text = _collapse_whitespace(" ".join(_region_text(r) for r in regions))
            if text:
                return text
            logger.debug("Selector '{}' matched no text, trying trafilatura", self.content_selector)

        # 2) Fallback: trafilatura main-text extraction
        extracted = trafilatura.extract(
            html,
            include_comments=False,
            include_tables=True,
            include_links=False,
            output_format="txt",
            url=url,
        )
        return _collapse_whitespace(extracted or "")
