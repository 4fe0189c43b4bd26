import pytest

from content_studio.seo import (
    STOPWORDS,
    build_description,
    extract_seo,
    keyword_density,
    keyword_frequencies,
)

SOURCE = (
    "Solar power is clean. Solar panels convert sunlight. "
    "Panels are cheap and solar is growing."
)


def test_stopword_set_matches_expected_size():
    assert len(STOPWORDS) == 24
    assert {"the", "and", "your"} <= STOPWORDS


def test_keyword_frequencies_orders_by_count_then_first_seen():
    assert keyword_frequencies(SOURCE) == [
        ("solar", 3),
        ("panels", 2),
        ("power", 1),
        ("clean", 1),
        ("convert", 1),
        ("sunlight", 1),
        ("cheap", 1),
        ("growing", 1),
    ]


def test_keyword_frequencies_skips_short_words():
    assert keyword_frequencies("AI is an ox at the zoo") == [("zoo", 1)]


def test_keyword_density_uses_total_word_count():
    stats = keyword_density(SOURCE)

    assert [s.keyword for s in stats] == ["solar", "panels", "power", "clean", "convert"]
    assert stats[0].count == 3
    assert stats[0].density == 20.0
    assert stats[1].density == 13.3
    assert stats[2].density == 6.7
    assert sum(s.density for s in stats) <= 100
    assert all(s.density >= 0 for s in stats)


def test_keyword_density_rounds_each_entry_independently():
    stats = keyword_density("alpha bravo charlie delta echo echo")

    assert [(s.keyword, s.density) for s in stats] == [
        ("echo", 33.3),
        ("alpha", 16.7),
        ("bravo", 16.7),
        ("charlie", 16.7),
        ("delta", 16.7),
    ]
    assert sum(s.count for s in stats) == 6
    # Half-up rounding per entry lets the total drift just past 100.
    assert sum(s.density for s in stats) == pytest.approx(100.1)


def test_description_skips_headings_and_truncates():
    content = "# Title\n\n## **Introduction**\n\nFirst real paragraph.\n\nSecond."
    assert build_description(content) == "First real paragraph."

    long_paragraph = "word " * 60
    description = build_description(long_paragraph)
    assert len(description) == 163
    assert description.endswith("...")


def test_extract_seo_report():
    content = "# Solar\n\n## **Introduction**\n\n" + SOURCE
    report = extract_seo(SOURCE, content, "Solar")

    assert report.title == "Solar"
    assert report.description == SOURCE
    assert report.keywords[:2] == ["solar", "panels"]
    assert len(report.keywords) == 8
    assert len(report.keyword_density) == 5


def test_extract_seo_limits_keywords_to_ten():
    text = " ".join(f"{word} {word}" for word in ["alpha", "bravo", "charlie", "delta",
                                                   "echo", "foxtrot", "golf", "hotel",
                                                   "india", "juliet", "kilo", "lima"])
    report = extract_seo(text, text, "NATO")
    assert report.keywords == [
        "alpha", "bravo", "charlie", "delta", "echo",
        "foxtrot", "golf", "hotel", "india", "juliet",
    ]


def test_extract_seo_empty_input():
    report = extract_seo("", "", "Empty")
    assert report.description == ""
    assert report.keywords == []
    assert report.keyword_density == []


def test_extract_seo_is_deterministic():
    first = extract_seo(SOURCE, SOURCE, "Solar")
    second = extract_seo(SOURCE, SOURCE, "Solar")
    assert first.keywords == second.keywords
    assert first.keyword_density == second.keyword_density
