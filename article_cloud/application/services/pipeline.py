from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Protocol

from loguru import logger

from article_cloud.application.settings import Settings
from article_cloud.application.services.aggregator import count_frequencies, top_words
from article_cloud.application.services.normalizer import NormalizerService
from article_cloud.application.services.renderer import RenderConfig, Renderer, WordCloudRenderer
from article_cloud.application.services.stopwords import get_default_stopwords, load_stopwords
from article_cloud.application.services.tokenizer import WordPunctTokenizerService
from article_cloud.application.services.web_loader import WebLoaderService


class Fetcher(Protocol):
    def fetch(self, url: str) -> str: ...


@dataclass(frozen=True)
class Analysis:
    url: str
    text_length: int
    word_count: int
    frequencies: Mapping[str, int]


@dataclass(frozen=True)
class PipelineResult(Analysis):
    output_path: Path = Path("wordcloud.png")


@dataclass
class CloudPipeline:
    """Fetch -> normalize -> count -> render, each stage finishing before the next."""

    settings: Settings
    fetcher: Fetcher
    normalizer: NormalizerService
    renderer: Renderer

    @classmethod
    def build(cls, settings: Settings) -> "CloudPipeline":
        fetcher = WebLoaderService(
            timeout_s=settings.fetch_timeout_s,
            user_agent=settings.user_agent,
            content_selector=settings.content_selector,
        )

        if settings.stopwords_path is not None:
            stopwords = load_stopwords(settings.stopwords_path)
        else:
            stopwords = get_default_stopwords()

        normalizer = NormalizerService(tokenizer=WordPunctTokenizerService(), stopwords=stopwords)
        return cls(settings=settings, fetcher=fetcher, normalizer=normalizer, renderer=WordCloudRenderer())

    def analyze(self, url: Optional[str] = None) -> Analysis:
        url = url or self.settings.source_url

        text = self.fetcher.fetch(url)
        logger.info("Scraped text length: {}", len(text))

        words = self.normalizer.normalize(text)
        logger.info("Number of words after processing: {}", len(words))

        frequencies = count_frequencies(words)
        logger.debug("Distinct words: {}, top: {}", len(frequencies), top_words(frequencies, 10))

        return Analysis(
            url=url,
            text_length=len(text),
            word_count=len(words),
            frequencies=MappingProxyType(frequencies),
        )

    def run(self, url: Optional[str] = None, output_path: Optional[Path] = None) -> PipelineResult:
        analysis = self.analyze(url)

        target = Path(output_path or self.settings.output_path)
        config = RenderConfig.from_settings(self.settings)
        written = self.renderer.render_to_file(analysis.frequencies, config, target)

        return PipelineResult(
            url=analysis.url,
            text_length=analysis.text_length,
            word_count=analysis.word_count,
            frequencies=analysis.frequencies,
            output_path=written,
        )
