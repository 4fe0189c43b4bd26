from __future__ import annotations

from pathlib import Path

import pytest

from content_studio.config import (
    ContentStudioConfig,
    WikipediaSettings,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_defaults():
    cfg = load_config()
    assert cfg.target_min_words == 1000
    assert cfg.target_max_words == 1200
    assert cfg.wikipedia.endpoint == "https://en.wikipedia.org/w/api.php"
    assert cfg.services.require_api_key is False


def test_config_from_dict_builds_nested_blocks_and_ignores_unknown_keys():
    cfg = config_from_dict(
        {
            "target_min_words": 300,
            "unknown": True,
            "wikipedia": {"language": "de", "max_articles": 1, "bogus": 1},
            "services": {"delay_seconds": 0},
        }
    )
    assert cfg.target_min_words == 300
    assert cfg.wikipedia.endpoint == "https://de.wikipedia.org/w/api.php"
    assert cfg.wikipedia.max_articles == 1
    assert cfg.services.delay_seconds == 0
    assert config_from_dict(None) == ContentStudioConfig()


def test_config_from_dict_accepts_settings_objects():
    settings = WikipediaSettings(language="fr")
    assert config_from_dict({"wikipedia": settings}).wikipedia is settings


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "target_max_words: 900\nservices:\n  require_api_key: true\n", encoding="utf-8"
    )
    cfg = config_from_yaml(path)
    assert cfg.target_max_words == 900
    assert cfg.services.require_api_key is True

    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        config_from_yaml(path)


def test_to_dict_round_trips():
    cfg = ContentStudioConfig(hashtag_limit=4)
    assert config_from_dict(cfg.to_dict()) == cfg
