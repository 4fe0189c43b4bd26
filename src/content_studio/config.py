from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class WikipediaSettings:
    """Configuration block for the Wikipedia extract source."""

    api_url: str = "https://{language}.wikipedia.org/w/api.php"
    language: str = "en"
    max_articles: int = 3
    request_timeout: float = 15.0
    max_attempts: int = 3
    user_agent: str = "content-studio/0.1 (article generator)"

    @property
    def endpoint(self) -> str:
        return self.api_url.format(language=self.language)


@dataclass(slots=True)
class ServiceSettings:
    """Configuration block for the mocked summary/voice/video service."""

    delay_seconds: float = 2.0
    api_key: str | None = None
    api_key_env: str = "CONTENT_STUDIO_API_KEY"
    require_api_key: bool = False
    sample_audio_url: str = (
        "https://storage.googleapis.com/content-studio-samples/voice-over.mp3"
    )
    sample_video_url: str = (
        "https://storage.googleapis.com/gtv-videos-bucket/sample/BigBuckBunny.mp4"
    )


@dataclass(slots=True)
class ContentStudioConfig:
    """Configuration options for article generation and its collaborators."""

    target_min_words: int = 1000
    target_max_words: int = 1200
    summary_max_sentences: int = 8
    summary_max_chars: int = 600
    hashtag_limit: int = 8
    storage_path: str = ".content_studio/store.json"
    history_limit: int = 10
    wikipedia: WikipediaSettings = field(default_factory=WikipediaSettings)
    services: ServiceSettings = field(default_factory=ServiceSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


_NESTED_BLOCKS: dict[str, type] = {
    "wikipedia": WikipediaSettings,
    "services": ServiceSettings,
}


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(ContentStudioConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    for name, block_type in _NESTED_BLOCKS.items():
        if name not in data:
            continue
        value = data[name]
        if isinstance(value, block_type):
            kwargs[name] = value
        elif isinstance(value, Mapping):
            kwargs[name] = _build_block(block_type, value)
        else:
            kwargs.pop(name, None)
    return kwargs


def _build_block(block_type: type, data: Mapping[str, Any]) -> Any:
    block_allowed = {field.name for field in fields(block_type)}
    filtered = {key: data[key] for key in data if key in block_allowed}
    return block_type(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> ContentStudioConfig:
    """Build a ContentStudioConfig from a dictionary-like input."""
    if data is None:
        return ContentStudioConfig()
    return ContentStudioConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> ContentStudioConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ContentStudioConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ContentStudioConfig()
    return config_from_yaml(path)
