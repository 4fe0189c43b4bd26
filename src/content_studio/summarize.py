from __future__ import annotations

from .tokenization import SENTENCE_SPLIT_RE, split_paragraphs

DEFAULT_MAX_SENTENCES = 8
DEFAULT_MAX_CHARS = 600


def lead_sentence(paragraph: str) -> str:
    """Return the text before the first sentence terminator, closed with a period."""
    head = SENTENCE_SPLIT_RE.split(paragraph, maxsplit=1)[0].strip()
    return f"{head}." if head else ""


def summarize_text(
    text: str,
    max_sentences: int = DEFAULT_MAX_SENTENCES,
    max_chars: int = DEFAULT_MAX_CHARS,
) -> str:
    """
    Build an extractive summary from the lead sentence of each paragraph.

    Headings are skipped. At most ``max_sentences`` sentences are kept and the
    joined result is cut to ``max_chars`` characters, with ``...`` appended
    when anything was dropped.
    """
    sentences = []
    for paragraph in split_paragraphs(text):
        if paragraph.startswith("#"):
            continue
        sentence = lead_sentence(paragraph)
        if sentence:
            sentences.append(sentence)

    summary = " ".join(sentences[: max(0, max_sentences)])
    if len(summary) > max_chars:
        summary = summary[:max_chars] + "..."
    return summary
