from __future__ import annotations

from dataclasses import dataclass, field

from .tokenization import count_words


@dataclass(slots=True)
class Section:
    """A titled run of paragraphs inside a generated article."""

    title: str
    paragraphs: list[str] = field(default_factory=list)


@dataclass(slots=True)
class SectionedDocument:
    """Introduction, ordered body sections and a closing conclusion."""

    introduction: Section
    sections: list[Section]
    conclusion: Section

    def all_sections(self) -> list[Section]:
        return [self.introduction, *self.sections, self.conclusion]

    def body_paragraphs(self) -> list[str]:
        """Source-derived paragraphs in order (conclusion excluded)."""
        paragraphs = list(self.introduction.paragraphs)
        for section in self.sections:
            paragraphs.extend(section.paragraphs)
        return paragraphs

    @property
    def body_word_count(self) -> int:
        return sum(count_words(paragraph) for paragraph in self.body_paragraphs())


@dataclass(slots=True)
class KeywordStat:
    """Occurrence count and density (percent of total words) for a keyword."""

    keyword: str
    count: int
    density: float


@dataclass(slots=True)
class SEOReport:
    """SEO metadata derived from an article and its source text."""

    title: str
    description: str
    keywords: list[str]
    keyword_density: list[KeywordStat]


@dataclass(slots=True)
class ReadabilityStats:
    """Counts and ratios behind a readability score."""

    words: int
    sentences: int
    syllables: int
    avg_sentence_length: float
    avg_syllables_per_word: float
    score: float
    band: str


@dataclass(slots=True)
class GeneratedArticle:
    """Everything produced by a single article generation request."""

    topic: str
    document: SectionedDocument
    content: str
    word_count: int
    readability: float
    readability_band: str
    seo: SEOReport
    hashtags: list[str]
    captions: list[str]


@dataclass(slots=True)
class AudioRef:
    """Reference to a synthesized voice-over clip."""

    url: str
    voice: str
    duration_seconds: float


@dataclass(slots=True)
class VideoJob:
    """State of a video generation request."""

    id: str
    status: str
    url: str | None = None


@dataclass(slots=True)
class SavedArticle:
    """An article persisted in the key-value store."""

    id: str
    title: str
    content: str
    created_at: str
