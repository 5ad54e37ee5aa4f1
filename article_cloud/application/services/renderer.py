from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Protocol, Sequence

import numpy as np
from loguru import logger
from PIL import Image
from wordcloud import WordCloud

from article_cloud.application.errors import RenderError
from article_cloud.application.settings import DEFAULT_PALETTE, Settings


@dataclass
class RenderConfig:
    width: int = 800
    height: int = 600
    padding: int = 2
    background_radius: Optional[int] = 300
    background_color: str = "black"
    palette: List[str] = field(default_factory=lambda: list(DEFAULT_PALETTE))
    min_font_size: int = 10
    max_font_size: int = 40
    random_state: Optional[int] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "RenderConfig":
        return cls(
            width=settings.canvas_width,
            height=settings.canvas_height,
            padding=settings.padding,
            background_radius=settings.background_radius,
            background_color=settings.background_color,
            palette=list(settings.palette),
            min_font_size=settings.min_font_size,
            max_font_size=settings.max_font_size,
            random_state=settings.random_state,
        )


class Renderer(Protocol):
    def render(self, frequencies: Mapping[str, int], config: RenderConfig) -> Image.Image: ...

    def render_to_file(self, frequencies: Mapping[str, int], config: RenderConfig, path: Path) -> Path: ...


def circle_mask(width: int, height: int, radius: int) -> np.ndarray:
    # wordcloud draws where the mask is 0 and leaves 255 blank
    yy, xx = np.ogrid[:height, :width]
    cy, cx = height / 2.0, width / 2.0
    outside = (xx - cx) ** 2 + (yy - cy) ** 2 > radius ** 2
    return (outside * 255).astype(np.uint8)


def palette_color_func(palette: Sequence[str]):
    colors = list(palette)

    def color_func(word, font_size, position, orientation, random_state=None, **kwargs):
        if random_state is None:
            return colors[0]
        return random_state.choice(colors)

    return color_func


class WordCloudRenderer:
    """Lays out and draws the cloud with the `wordcloud` package."""

    def build(self, frequencies: Mapping[str, int], config: RenderConfig) -> WordCloud:
        if not frequencies:
            raise RenderError("Nothing to render: the frequency map is empty")
        if config.background_radius is not None and config.background_radius <= 0:
            raise RenderError(f"background_radius must be positive, got {config.background_radius}")

        mask = None
        if config.background_radius is not None:
            mask = circle_mask(config.width, config.height, config.background_radius)

        cloud = WordCloud(
            width=config.width,
            height=config.height,
            margin=config.padding,
            mask=mask,
            background_color=config.background_color,
            color_func=palette_color_func(config.palette),
            min_font_size=config.min_font_size,
            max_font_size=config.max_font_size,
            relative_scaling=1.0,  # font size linear in frequency
            max_words=len(frequencies),
            random_state=config.random_state,
        )
        try:
            return cloud.generate_from_frequencies(dict(frequencies))
        except ValueError as e:
            raise RenderError(f"Word cloud layout failed: {e}") from e

    def render(self, frequencies: Mapping[str, int], config: RenderConfig) -> Image.Image:
        return self.build(frequencies, config).to_image()

    def render_to_file(self, frequencies: Mapping[str, int], config: RenderConfig, path: Path) -> Path:
        path = Path(path)
        image = self.render(frequencies, config)
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path)
        logger.info("Wrote {}x{} word cloud to {}", image.width, image.height, path)
        return path
