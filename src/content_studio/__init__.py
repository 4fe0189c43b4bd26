"""
content_studio package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ContentStudioConfig, config_from_dict, config_from_yaml, load_config
from .pipeline import generate_article
from .readability import readability_score
from .reflow import reflow, render_markdown
from .seo import extract_seo
from .syllables import count_syllables
from .tokenization import count_words, split_sentences

__all__ = [
    "ContentStudioConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "generate_article",
    "readability_score",
    "reflow",
    "render_markdown",
    "extract_seo",
    "count_syllables",
    "count_words",
    "split_sentences",
]

__version__ = "0.1.0"
