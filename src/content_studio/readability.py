from __future__ import annotations

import math

from .models import ReadabilityStats
from .syllables import count_syllables
from .tokenization import SENTENCE_SPLIT_RE, count_words, split_sentences

# (upper bound, label) pairs; scores at or above the last bound are "Graduate".
READABILITY_BANDS: tuple[tuple[float, str], ...] = (
    (6.0, "Elementary school"),
    (8.0, "Middle school"),
    (10.0, "High school"),
    (12.0, "Early college"),
    (14.0, "College"),
)
GRADUATE_BAND = "Graduate"


def round_half_up(value: float, digits: int = 1) -> float:
    """Round halves toward positive infinity, e.g. 2.25 -> 2.3 and -2.25 -> -2.2."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def analyze_text(text: str) -> ReadabilityStats:
    """Collect the counts and ratios used by the grade-level formula."""
    words = count_words(text)
    # Text without any terminator has no complete sentence to measure.
    sentences = len(split_sentences(text)) if SENTENCE_SPLIT_RE.search(text) else 0
    syllables = count_syllables(text)
    if words == 0 or sentences == 0:
        return ReadabilityStats(
            words=words,
            sentences=sentences,
            syllables=syllables,
            avg_sentence_length=0.0,
            avg_syllables_per_word=0.0,
            score=0.0,
            band=readability_band(0.0),
        )

    asl = words / sentences
    asw = syllables / words
    score = round_half_up(0.39 * asl + 11.8 * asw - 15.59)
    return ReadabilityStats(
        words=words,
        sentences=sentences,
        syllables=syllables,
        avg_sentence_length=asl,
        avg_syllables_per_word=asw,
        score=score,
        band=readability_band(score),
    )


def readability_score(text: str) -> float:
    """Flesch-Kincaid style grade level rounded to one decimal (0.0 for empty text)."""
    return analyze_text(text).score


def readability_band(score: float) -> str:
    """Map a score to a reader level label for display."""
    for upper, label in READABILITY_BANDS:
        if score < upper:
            return label
    return GRADUATE_BAND
