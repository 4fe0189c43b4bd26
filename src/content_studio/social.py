from __future__ import annotations

import re
from typing import List, Sequence

HASHTAG_STRIP_RE = re.compile(r"[^0-9A-Za-z]+")
DEFAULT_HASHTAG_LIMIT = 8
CAPTION_TEASER_CHARS = 120


def to_hashtag(phrase: str) -> str:
    """Turn a phrase into a CamelCase hashtag ("machine learning" -> "#MachineLearning")."""
    parts = [part for part in HASHTAG_STRIP_RE.split(phrase) if part]
    if not parts:
        return ""
    return "#" + "".join(part[:1].upper() + part[1:] for part in parts)


def generate_hashtags(
    topic: str, keywords: Sequence[str], limit: int = DEFAULT_HASHTAG_LIMIT
) -> List[str]:
    """Topic hashtag first, then keyword hashtags, without case-insensitive repeats."""
    hashtags: List[str] = []
    seen: set[str] = set()
    for phrase in [topic, *keywords]:
        if len(hashtags) >= limit:
            break
        tag = to_hashtag(phrase)
        if not tag or tag.lower() in seen:
            continue
        seen.add(tag.lower())
        hashtags.append(tag)
    return hashtags


def _teaser(summary: str) -> str:
    if len(summary) <= CAPTION_TEASER_CHARS:
        return summary
    cut = summary[:CAPTION_TEASER_CHARS].rsplit(" ", 1)[0]
    return cut.rstrip(",;:") + "..."


def generate_captions(
    topic: str, summary: str, hashtags: Sequence[str]
) -> List[str]:
    """Return announcement, teaser and question captions for social posts."""
    tags = " ".join(hashtags[:3])
    captions = [
        f"New article: everything you need to know about {topic}.",
        _teaser(summary) if summary else f"A closer look at {topic}.",
        f"What surprised you most about {topic}? Let us know in the comments!",
    ]
    if tags:
        captions = [f"{caption} {tags}" for caption in captions]
    return captions
