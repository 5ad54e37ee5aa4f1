"""
Command-line entry point for the article word cloud generator.

`generate` runs the whole pipeline and writes the image; `top` stops after
counting and prints the most frequent words.
"""

from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from article_cloud.application.log_setup import setup_logging
from article_cloud.application.services.aggregator import top_words
from article_cloud.application.services.pipeline import CloudPipeline
from article_cloud.application.settings import Settings, get_settings

app = typer.Typer(
    name="article-cloud",
    help="Render a word cloud from the text of a web article",
    add_completion=False,
)
console = Console()


def _settings(**overrides) -> Settings:
    base = get_settings()
    changes = {k: v for k, v in overrides.items() if v is not None}
    if not changes:
        return base
    # re-validate so bad overrides fail the same way bad env values do
    return Settings.model_validate({**base.model_dump(), **changes})


@app.command()
def generate(
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Article to fetch"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Image file to write"),
    stopwords: Optional[Path] = typer.Option(None, "--stopwords", help="Stop-word file, one word per line"),
    width: Optional[int] = typer.Option(None, "--width", help="Canvas width in pixels"),
    height: Optional[int] = typer.Option(None, "--height", help="Canvas height in pixels"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for a repeatable layout"),
):
    """Fetch an article and write its word cloud."""
    setup_logging()
    try:
        settings = _settings(
            source_url=url,
            output_path=output,
            stopwords_path=stopwords,
            canvas_width=width,
            canvas_height=height,
            random_state=seed,
        )
        result = CloudPipeline.build(settings).run()
    except Exception:
        logger.exception("Word cloud generation failed")
        raise typer.Exit(code=1)

    console.print(f"Scraped text length: {result.text_length}")
    console.print(f"Number of words after processing: {result.word_count}")
    console.print(f"[green]Word cloud generated successfully as '{result.output_path}'.[/green]")


@app.command()
def top(
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Article to fetch"),
    limit: int = typer.Option(20, "--limit", "-n", help="How many words to list"),
    stopwords: Optional[Path] = typer.Option(None, "--stopwords", help="Stop-word file, one word per line"),
):
    """Show the most frequent words of an article without rendering."""
    setup_logging()
    try:
        settings = _settings(source_url=url, stopwords_path=stopwords)
        analysis = CloudPipeline.build(settings).analyze()
    except Exception:
        logger.exception("Word frequency analysis failed")
        raise typer.Exit(code=1)

    table = Table(title=f"Top words in {analysis.url}")
    table.add_column("Word", style="cyan")
    table.add_column("Count", justify="right")
    for word, count in top_words(analysis.frequencies, limit):
        table.add_row(word, str(count))
    console.print(table)
    console.print(f"{analysis.word_count} words, {len(analysis.frequencies)} distinct")


def main():
    app()


if __name__ == "__main__":
    main()
