from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, TypedDict

import typer
import yaml

from .config import ContentStudioConfig, load_config
from .models import GeneratedArticle
from .pipeline import generate_article
from .readability import analyze_text
from .seo import extract_seo
from .services import ContentServiceError, MockContentService
from .sources import SourceFetchError, WikipediaClient
from .storage import JsonFileStore, SavedArticles, SearchHistory, StorageError
from .tokenization import split_paragraphs

app = typer.Typer(help="Content Studio article generator CLI.", no_args_is_help=True)


@app.callback()
def configure_logging(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Generate word-budgeted articles and SEO metadata from source text."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(
            f"Unknown log level '{log_level}'.", param_hint="--log-level"
        )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def generate(
    topic: str = typer.Option(..., "--topic", "-t", help="Article topic."),
    input_path: Path | None = typer.Option(
        None,
        exists=True,
        readable=True,
        dir_okay=False,
        help="Read source paragraphs from a text file instead of Wikipedia.",
    ),
    output_path: Path | None = typer.Option(
        None, dir_okay=False, help="Write the markdown article to this file."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    min_words: int | None = typer.Option(
        None, "--min-words", help="Override target_min_words."
    ),
    max_words: int | None = typer.Option(
        None, "--max-words", help="Override target_max_words."
    ),
    store_path: Path | None = typer.Option(
        None, "--store-path", help="Override storage_path."
    ),
    save: bool = typer.Option(
        False, "--save/--no-save", help="Keep the article in saved articles."
    ),
) -> None:
    """Generate an article for a topic and emit a JSON summary."""
    cfg = load_config(config)
    _apply_overrides(cfg, min_words, max_words, store_path)
    if input_path is not None:
        paragraphs = split_paragraphs(input_path.read_text(encoding="utf-8"))
    else:
        try:
            paragraphs = WikipediaClient(cfg.wikipedia).fetch_paragraphs(topic)
        except SourceFetchError as exc:
            typer.echo(f"Failed to fetch source text: {exc}", err=True)
            raise typer.Exit(code=1) from exc

    try:
        article = generate_article(topic, paragraphs, cfg)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    store = JsonFileStore(cfg.storage_path)
    saved_id: str | None = None
    try:
        SearchHistory(store, max_items=cfg.history_limit).add(topic)
        if save:
            saved_id = SavedArticles(store).save(article.topic, article.content).id
    except StorageError as exc:
        typer.echo(f"Storage unavailable: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(article.content, encoding="utf-8")

    summary = _article_summary(article)
    summary["saved_id"] = saved_id
    typer.echo(json.dumps(summary, indent=2))


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    title: str | None = typer.Option(None, "--title", help="Title for SEO metadata."),
) -> None:
    """Report readability and SEO statistics for a text file."""
    text = input_path.read_text(encoding="utf-8")
    stats = analyze_text(text)
    seo = extract_seo(text, text, title or input_path.stem)
    typer.echo(
        json.dumps({"readability": asdict(stats), "seo": asdict(seo)}, indent=2)
    )


@app.command()
def summarize(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    voice_over: bool = typer.Option(
        False, "--voice-over/--no-voice-over", help="Also synthesize a voice-over."
    ),
    voice: str = typer.Option("default", "--voice", help="Voice used for narration."),
) -> None:
    """Summarize a text file through the content service."""
    cfg = load_config(config)
    service = MockContentService(
        cfg.services,
        max_sentences=cfg.summary_max_sentences,
        max_chars=cfg.summary_max_chars,
    )
    text = input_path.read_text(encoding="utf-8")
    try:
        summary = asyncio.run(service.summarize(text))
        payload: Dict[str, Any] = {"summary": summary}
        if voice_over:
            audio = asyncio.run(service.synthesize_voice(summary, voice=voice))
            payload["voice_over"] = asdict(audio)
    except ContentServiceError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(json.dumps(payload, indent=2))


@app.command()
def video(
    prompt: str = typer.Option(..., "--prompt", "-p", help="Video description."),
    aspect_ratio: str = typer.Option(
        "16:9", "--aspect-ratio", help="One of 16:9, 9:16 or 1:1."
    ),
    duration: int = typer.Option(4, "--duration", min=1, help="Length in seconds."),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Generate a video through the content service and emit the finished job."""
    cfg = load_config(config)
    service = MockContentService(cfg.services)
    try:
        job = asyncio.run(
            service.generate_video(prompt, aspect_ratio=aspect_ratio, duration=duration)
        )
    except ContentServiceError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(json.dumps(asdict(job), indent=2))


@app.command()
def saved(
    config: Path | None = typer.Option(None, "--config", "-c"),
    store_path: Path | None = typer.Option(None, "--store-path"),
    delete: str | None = typer.Option(None, "--delete", help="Delete article by id."),
) -> None:
    """List saved articles, or delete one."""
    cfg = load_config(config)
    _apply_overrides(cfg, None, None, store_path)
    articles = SavedArticles(JsonFileStore(cfg.storage_path))
    if delete is not None:
        if not articles.delete(delete):
            typer.echo(f"No saved article with id {delete}.", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Deleted {delete}")
        return
    listing: List[SavedArticlePayload] = [
        {"id": a.id, "title": a.title, "created_at": a.created_at}
        for a in articles.list()
    ]
    typer.echo(json.dumps({"articles": listing}, indent=2))


@app.command()
def history(
    config: Path | None = typer.Option(None, "--config", "-c"),
    store_path: Path | None = typer.Option(None, "--store-path"),
    clear: bool = typer.Option(False, "--clear", help="Forget all searches."),
) -> None:
    """Show or clear the search history."""
    cfg = load_config(config)
    _apply_overrides(cfg, None, None, store_path)
    searches = SearchHistory(JsonFileStore(cfg.storage_path), cfg.history_limit)
    if clear:
        searches.clear()
        typer.echo("Search history cleared.")
        return
    typer.echo(json.dumps({"history": searches.items()}, indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ContentStudioConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: ContentStudioConfig,
    min_words: int | None,
    max_words: int | None,
    store_path: Path | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if min_words is not None:
        config.target_min_words = min_words
    if max_words is not None:
        config.target_max_words = max_words
    if store_path is not None:
        config.storage_path = str(store_path)


class KeywordPayload(TypedDict):
    keyword: str
    count: int
    density: float


class SavedArticlePayload(TypedDict):
    id: str
    title: str
    created_at: str


class ArticleSummary(TypedDict, total=False):
    topic: str
    word_count: int
    body_word_count: int
    readability: float
    readability_band: str
    sections: List[str]
    description: str
    keywords: List[str]
    keyword_density: List[KeywordPayload]
    hashtags: List[str]
    captions: List[str]
    saved_id: str | None


def _article_summary(article: GeneratedArticle) -> ArticleSummary:
    """Create a JSON-serializable summary of a generated article."""
    return {
        "topic": article.topic,
        "word_count": article.word_count,
        "body_word_count": article.document.body_word_count,
        "readability": article.readability,
        "readability_band": article.readability_band,
        "sections": [section.title for section in article.document.all_sections()],
        "description": article.seo.description,
        "keywords": list(article.seo.keywords),
        "keyword_density": [
            {"keyword": s.keyword, "count": s.count, "density": s.density}
            for s in article.seo.keyword_density
        ],
        "hashtags": list(article.hashtags),
        "captions": list(article.captions),
    }


if __name__ == "__main__":
    main()
