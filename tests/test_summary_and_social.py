from content_studio.social import generate_captions, generate_hashtags, to_hashtag
from content_studio.summarize import lead_sentence, summarize_text


def test_summarize_takes_lead_sentences_and_skips_headings():
    text = "# Heading\n\nFirst sentence. More text.\n\nSecond para! Yes.\n\n\n"
    assert summarize_text(text) == "First sentence. Second para."


def test_summarize_caps_sentence_count():
    text = "\n\n".join(f"Sentence {idx}. tail." for idx in range(12))
    summary = summarize_text(text)
    assert summary.count(".") == 8
    assert summary.endswith("Sentence 7.")


def test_summarize_caps_length():
    text = "\n\n".join("word " * 40 + "end." for _ in range(5))
    summary = summarize_text(text, max_chars=100)
    assert len(summary) == 103
    assert summary.endswith("...")


def test_lead_sentence():
    assert lead_sentence("Hello there. Bye.") == "Hello there."
    assert lead_sentence("...") == ""


def test_to_hashtag():
    assert to_hashtag("machine learning") == "#MachineLearning"
    assert to_hashtag("C++ tips") == "#CTips"
    assert to_hashtag("!!!") == ""


def test_generate_hashtags_dedupes_and_limits():
    tags = generate_hashtags("Solar energy", ["solar", "energy", "panels", "Panels"])
    assert tags == ["#SolarEnergy", "#Solar", "#Energy", "#Panels"]

    limited = generate_hashtags("Bees", ["honey", "hive", "pollen"], limit=2)
    assert limited == ["#Bees", "#Honey"]


def test_generate_captions_mentions_topic_and_tags():
    captions = generate_captions(
        "Bees", "Bees make honey.", ["#Bees", "#Honey", "#Hive", "#Pollen"]
    )
    assert len(captions) == 3
    assert "Bees" in captions[0]
    assert captions[1].startswith("Bees make honey.")
    assert all(caption.endswith("#Bees #Honey #Hive") for caption in captions)
    assert "#Pollen" not in captions[0]


def test_generate_captions_without_summary_or_tags():
    captions = generate_captions("Bees", "", [])
    assert captions[1] == "A closer look at Bees."
