from pathlib import Path

import pytest
from PIL import Image

from article_cloud.application.services.normalizer import NormalizerService
from article_cloud.application.services.pipeline import CloudPipeline
from article_cloud.application.services.tokenizer import WordPunctTokenizerService
from article_cloud.application.settings import Settings

ARTICLE = "The Cat sat on the MAT. Cats sat!"


class StubFetcher:
    def __init__(self, text=ARTICLE, error=None):
        self.text = text
        self.error = error
        self.urls = []

    def fetch(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.text


class StubRenderer:
    """Records what it was asked to draw instead of laying anything out."""

    def __init__(self):
        self.calls = []

    def render(self, frequencies, config):
        self.calls.append(dict(frequencies))
        return Image.new("RGB", (config.width, config.height))

    def render_to_file(self, frequencies, config, path):
        self.render(frequencies, config)
        return Path(path)


@pytest.fixture
def settings(tmp_path):
    return Settings(_env_file=None, source_url="https://example.org/cats", output_path=tmp_path / "cloud.png")


@pytest.fixture
def tokenizer():
    return WordPunctTokenizerService()


@pytest.fixture
def make_pipeline(settings, tokenizer):
    def _make(fetcher=None, renderer=None, stopwords=frozenset({"the", "on"})):
        return CloudPipeline(
            settings=settings,
            fetcher=fetcher or StubFetcher(),
            normalizer=NormalizerService(tokenizer=tokenizer, stopwords=stopwords),
            renderer=renderer or StubRenderer(),
        )

    return _make
