from __future__ import annotations

import math
from typing import List, Sequence

from .models import Section, SectionedDocument
from .tokenization import count_words, split_words

DEFAULT_MIN_WORDS = 1000
DEFAULT_MAX_WORDS = 1200
MAX_BODY_SECTIONS = 4
TRUNCATION_MARKER = "..."
INTRODUCTION_TITLE = "Introduction"
CONCLUSION_TITLE = "Conclusion"

SECTION_TITLE_TEMPLATES: tuple[str, ...] = (
    "Understanding {topic}",
    "The History of {topic}",
    "Key Features of {topic}",
    "Why {topic} Matters",
    "How {topic} Works",
    "The Impact of {topic}",
    "Common Questions About {topic}",
    "{topic} in Practice",
    "Recent Developments in {topic}",
    "The Future of {topic}",
)

CONCLUSION_TEMPLATE = (
    "In conclusion, {topic} is a subject with a rich background and lasting "
    "relevance. The sections above outline its origins, its defining "
    "characteristics and the ways it continues to shape the world today. "
    "Whether you are just starting to explore {topic} or revisiting it with "
    "fresh eyes, there is always more to learn."
)


def select_paragraphs(
    paragraphs: Sequence[str], target_min_words: int, target_max_words: int
) -> List[str]:
    """
    Pick paragraphs, in order, so the total word count lands within the budget.

    Whole paragraphs are taken while they fit under ``target_max_words``.
    When the minimum still has not been met, the following paragraphs fill
    the gap, the last one cut to a word prefix ending in ``...`` so the total
    lands exactly on ``target_min_words``.
    """
    if target_min_words < 0 or target_max_words < target_min_words:
        raise ValueError(
            f"Invalid word budget [{target_min_words}, {target_max_words}]."
        )

    adjusted: List[str] = []
    current = 0
    next_idx = 0

    while next_idx < len(paragraphs):
        word_count = count_words(paragraphs[next_idx])
        if current + word_count > target_max_words:
            break
        adjusted.append(paragraphs[next_idx])
        current += word_count
        next_idx += 1

    while current < target_min_words and next_idx < len(paragraphs):
        paragraph = paragraphs[next_idx]
        next_idx += 1
        word_count = count_words(paragraph)
        remaining = target_min_words - current
        if word_count <= remaining:
            adjusted.append(paragraph)
            current += word_count
            continue
        prefix = split_words(paragraph)[:remaining]
        adjusted.append(" ".join(prefix) + TRUNCATION_MARKER)
        current += len(prefix)

    return adjusted


def section_title(topic: str, section_index: int) -> str:
    template = SECTION_TITLE_TEMPLATES[section_index % len(SECTION_TITLE_TEMPLATES)]
    return template.format(topic=topic)


def build_sections(paragraphs: Sequence[str], topic: str) -> List[Section]:
    """
    Spread body paragraphs across ``min(MAX_BODY_SECTIONS, ceil(n / 2))`` titled sections.

    Each section takes ``ceil(n / section_count)`` paragraphs in order, so the
    last one may come out short or empty (nine paragraphs give 3, 3, 3, 0).
    """
    if not paragraphs:
        return []

    section_count = min(MAX_BODY_SECTIONS, math.ceil(len(paragraphs) / 2))
    per_section = math.ceil(len(paragraphs) / section_count)
    sections: List[Section] = []
    for index in range(section_count):
        start = index * per_section
        sections.append(
            Section(
                title=section_title(topic, index),
                paragraphs=list(paragraphs[start : start + per_section]),
            )
        )
    return sections


def build_conclusion(topic: str) -> Section:
    return Section(
        title=CONCLUSION_TITLE, paragraphs=[CONCLUSION_TEMPLATE.format(topic=topic)]
    )


def reflow(
    paragraphs: Sequence[str],
    target_min_words: int = DEFAULT_MIN_WORDS,
    target_max_words: int = DEFAULT_MAX_WORDS,
    topic: str = "",
) -> SectionedDocument:
    """Repartition source paragraphs into a word-budgeted, sectioned document."""
    adjusted = select_paragraphs(paragraphs, target_min_words, target_max_words)
    introduction = Section(title=INTRODUCTION_TITLE, paragraphs=adjusted[:1])
    return SectionedDocument(
        introduction=introduction,
        sections=build_sections(adjusted[1:], topic),
        conclusion=build_conclusion(topic),
    )


def render_markdown(document: SectionedDocument, title: str | None = None) -> str:
    """Serialize a document with ``## **Title**`` section markers."""
    blocks: List[str] = []
    if title:
        blocks.append(f"# {title}")
    for section in document.all_sections():
        blocks.append(f"## **{section.title}**")
        blocks.extend(section.paragraphs)
    return "\n\n".join(blocks)
