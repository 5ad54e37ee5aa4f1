from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Application settings using pydantic-settings for structured configuration

DEFAULT_PALETTE = ["#4055F1", "#408DF1", "#40AAF1", "#40C5F1", "#40D3F1", "#FFFFFF"]


class Settings(BaseSettings):
    # --- App ---
    app_name: str = "Article Word Cloud"
    app_env: str = "development"          # e.g., development / staging / production
    debug: bool = False

    # --- Source ---
    source_url: str = "https://en.wikipedia.org/wiki/Java_(programming_language)"
    # Wikipedia's main content lives in <div id="bodyContent">
    content_selector: str = "#bodyContent"
    fetch_timeout_s: float = 25.0
    user_agent: str = "article-cloud/0.1 (+word cloud generator)"

    # --- Text ---
    stopwords_path: Optional[Path] = None  # None -> packaged English list

    # --- Rendering ---
    output_path: Path = Path("wordcloud.png")
    canvas_width: int = 800
    canvas_height: int = 600
    padding: int = 2
    background_radius: Optional[int] = 300  # circle mask; None -> full canvas
    background_color: str = "black"
    palette: List[str] = DEFAULT_PALETTE
    min_font_size: int = 10
    max_font_size: int = 40
    random_state: Optional[int] = None

    # pydantic v2 / pydantic-settings configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _check_canvas(self) -> "Settings":
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError("canvas dimensions must be positive")
        if self.background_radius is not None and self.background_radius <= 0:
            raise ValueError("background_radius must be positive, or unset for a full canvas")
        if self.min_font_size > self.max_font_size:
            raise ValueError("min_font_size must not exceed max_font_size")
        if not self.palette:
            raise ValueError("palette needs at least one colour")
        return self


@lru_cache
def get_settings() -> Settings:
    """Cache settings so we don't re-parse .env on every call."""
    return Settings()
