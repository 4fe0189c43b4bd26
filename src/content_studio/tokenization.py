from __future__ import annotations

import re
from typing import List

WHITESPACE_RE = re.compile(r"\s+")
SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")
NON_ALPHA_RE = re.compile(r"[^a-z]")


def split_words(text: str) -> List[str]:
    """Split text on runs of whitespace, dropping empty tokens."""
    return [word for word in WHITESPACE_RE.split(text) if word]


def count_words(text: str) -> int:
    return len(split_words(text))


def split_sentences(text: str) -> List[str]:
    """
    Split text on runs of sentence-ending punctuation.

    Segments that are blank once stripped are dropped; the rest are returned
    untrimmed so callers can decide how to handle surrounding whitespace.
    """
    return [segment for segment in SENTENCE_SPLIT_RE.split(text) if segment.strip()]


def split_paragraphs(text: str) -> List[str]:
    """Split text on blank lines and return the non-empty, stripped blocks."""
    blocks = (block.strip() for block in PARAGRAPH_SPLIT_RE.split(text))
    return [block for block in blocks if block]


def clean_word(word: str) -> str:
    """Lowercase a word and strip every non-alphabetic character."""
    return NON_ALPHA_RE.sub("", word.lower())
