from __future__ import annotations

VOCABULARY = (
    "solar",
    "panels",
    "convert",
    "sunlight",
    "into",
    "clean",
    "electricity",
    "for",
    "homes",
    "today",
)


def make_paragraph(n_words: int, vocabulary: tuple[str, ...] = VOCABULARY) -> str:
    """Build a paragraph of exactly n_words words, with a sentence every ten words."""
    words = [vocabulary[idx % len(vocabulary)] for idx in range(n_words)]
    for idx in range(9, n_words, 10):
        words[idx] += "."
    if words and not words[-1].endswith("."):
        words[-1] += "."
    return " ".join(words)


def make_paragraphs(count: int, n_words: int) -> list[str]:
    return [make_paragraph(n_words) for _ in range(count)]
