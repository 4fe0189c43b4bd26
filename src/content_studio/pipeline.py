from __future__ import annotations

import logging
from typing import Sequence

from .config import ContentStudioConfig
from .models import GeneratedArticle
from .readability import readability_band, readability_score
from .reflow import reflow, render_markdown
from .seo import extract_seo
from .social import generate_captions, generate_hashtags
from .summarize import summarize_text
from .tokenization import count_words

logger = logging.getLogger(__name__)


def generate_article(
    topic: str,
    paragraphs: Sequence[str],
    config: ContentStudioConfig | None = None,
) -> GeneratedArticle:
    """Turn source paragraphs into a sectioned article plus its metadata."""
    cfg = config or ContentStudioConfig()
    topic = topic.strip()
    source_text = "\n\n".join(paragraphs)

    document = reflow(
        paragraphs,
        target_min_words=cfg.target_min_words,
        target_max_words=cfg.target_max_words,
        topic=topic,
    )
    content = render_markdown(document, title=topic)
    word_count = count_words(content)
    score = readability_score(content)
    seo = extract_seo(source_text, content, topic)
    summary = summarize_text(
        content,
        max_sentences=cfg.summary_max_sentences,
        max_chars=cfg.summary_max_chars,
    )
    hashtags = generate_hashtags(topic, seo.keywords, limit=cfg.hashtag_limit)
    captions = generate_captions(topic, summary, hashtags)

    logger.info(
        "Generated article topic=%s sections=%d body_words=%d readability=%.1f",
        topic,
        len(document.sections),
        document.body_word_count,
        score,
    )
    return GeneratedArticle(
        topic=topic,
        document=document,
        content=content,
        word_count=word_count,
        readability=score,
        readability_band=readability_band(score),
        seo=seo,
        hashtags=hashtags,
        captions=captions,
    )
