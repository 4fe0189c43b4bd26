from __future__ import annotations

import re

from .tokenization import clean_word, split_words

VOWEL_RUN_RE = re.compile(r"[aeiouy]{1,2}")
ALL_VOWELS_RE = re.compile(r"^[aeiouy]+$")
VOWELS = frozenset("aeiouy")


def count_word_syllables(word: str) -> int:
    """
    Estimate the syllables in a single word.

    Vowel groups of one or two letters each count as a syllable, then a
    silent trailing ``e`` and the ``es``/``ed`` endings are discounted.
    ``es`` is always discounted; ``ed`` only when the letter before it is a
    consonant (``jumped`` -> 1, ``played`` -> 2).
    """
    cleaned = clean_word(word)
    if len(cleaned) < 3 or ALL_VOWELS_RE.match(word.lower()):
        return 1

    count = len(VOWEL_RUN_RE.findall(cleaned)) or 1

    if cleaned.endswith("e") and not cleaned.endswith("le"):
        count -= 1
    if cleaned.endswith("es") or (
        cleaned.endswith("ed") and cleaned[-3] not in VOWELS
    ):
        count -= 1

    return max(1, count)


def count_syllables(text: str) -> int:
    """Sum syllable estimates over every whitespace-delimited word in text."""
    return sum(count_word_syllables(word) for word in split_words(text))
