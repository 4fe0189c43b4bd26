"""Minimal example: fetch Wikipedia text for a topic and build an article."""

from __future__ import annotations

import asyncio
import sys

from content_studio.config import load_config
from content_studio.pipeline import generate_article
from content_studio.services import MockContentService
from content_studio.sources import WikipediaClient


def main() -> None:
    topic = " ".join(sys.argv[1:]) or "Solar energy"
    config = load_config()
    config.services.delay_seconds = 0.5

    paragraphs = WikipediaClient(config.wikipedia).fetch_paragraphs(topic)
    article = generate_article(topic, paragraphs, config)

    print(article.content)
    print(f"\nWords: {article.word_count}")
    print(f"Readability: {article.readability} ({article.readability_band})")
    print("Keywords:", ", ".join(article.seo.keywords))
    print("Hashtags:", " ".join(article.hashtags))

    service = MockContentService(config.services)
    summary = asyncio.run(service.summarize(article.content))
    audio = asyncio.run(service.synthesize_voice(summary))
    print("\nSummary:\n", summary)
    print(f"Voice-over: {audio.url} (~{audio.duration_seconds}s)")


if __name__ == "__main__":
    main()
