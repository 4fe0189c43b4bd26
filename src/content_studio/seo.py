from __future__ import annotations

from typing import Dict, List, Tuple

from .models import KeywordStat, SEOReport
from .readability import round_half_up
from .tokenization import clean_word, count_words, split_paragraphs, split_words

STOPWORDS = frozenset(
    {
        "the", "and", "of", "to", "a", "in", "for", "is", "on", "that", "by",
        "this", "with", "i", "you", "it", "not", "or", "be", "are", "from",
        "at", "as", "your",
    }
)
MIN_KEYWORD_LENGTH = 3
DESCRIPTION_MAX_CHARS = 160
KEYWORD_LIMIT = 10
DENSITY_LIMIT = 5


def build_description(*texts: str, max_chars: int = DESCRIPTION_MAX_CHARS) -> str:
    """Return the first non-heading paragraph found across texts, cut to max_chars."""
    for text in texts:
        for paragraph in split_paragraphs(text):
            if paragraph.startswith("#"):
                continue
            if len(paragraph) > max_chars:
                return paragraph[:max_chars] + "..."
            return paragraph
    return ""


def keyword_frequencies(text: str) -> List[Tuple[str, int]]:
    """
    Count candidate keywords in text, most frequent first.

    Words are lowercased and stripped of non-letters; short words and
    stopwords are skipped. Ties keep the order in which words first appear.
    """
    counts: Dict[str, int] = {}
    for word in split_words(text):
        cleaned = clean_word(word)
        if len(cleaned) < MIN_KEYWORD_LENGTH or cleaned in STOPWORDS:
            continue
        counts[cleaned] = counts.get(cleaned, 0) + 1
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)


def keyword_density(text: str, limit: int = DENSITY_LIMIT) -> List[KeywordStat]:
    total_words = count_words(text)
    if total_words == 0:
        return []
    return [
        KeywordStat(
            keyword=keyword,
            count=count,
            density=round_half_up(100 * count / total_words),
        )
        for keyword, count in keyword_frequencies(text)[:limit]
    ]


def extract_seo(source_text: str, full_content: str, title: str) -> SEOReport:
    """Build the description, keyword list and density table for an article."""
    frequencies = keyword_frequencies(source_text)
    return SEOReport(
        title=title,
        description=build_description(full_content, source_text),
        keywords=[keyword for keyword, _ in frequencies[:KEYWORD_LIMIT]],
        keyword_density=keyword_density(source_text),
    )
