from __future__ import annotations

import json
import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from .models import SavedArticle

LOGGER = logging.getLogger(__name__)

SAVED_ARTICLES_KEY = "savedArticles"
SEARCH_HISTORY_KEY = "searchHistory"


class StorageError(RuntimeError):
    """Raised when the key-value store cannot be read or written."""


class KeyValueStore(ABC):
    """Minimal string key-value store (the browser local-storage contract)."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def remove(self, key: str) -> None:
        raise NotImplementedError


class InMemoryStore(KeyValueStore):
    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """Persist every key in a single JSON object on disk."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._write(data)

    def _load(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            parsed = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Unable to read store at {self._path}") from exc
        if not isinstance(parsed, dict):
            raise StorageError(f"Store at {self._path} must contain a JSON object.")
        return {str(key): str(value) for key, value in parsed.items()}

    def _write(self, data: Dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self._path.with_suffix(".tmp")
            tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError as exc:
            raise StorageError(f"Unable to write store at {self._path}") from exc


def _load_json_list(store: KeyValueStore, key: str) -> List[Any]:
    raw = store.get(key)
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StorageError(f"Stored value for '{key}' is not valid JSON.") from exc
    if not isinstance(value, list):
        raise StorageError(f"Stored value for '{key}' must be a JSON list.")
    return value


class SavedArticles:
    """Saved articles kept as a JSON list under a single store key."""

    def __init__(self, store: KeyValueStore, key: str = SAVED_ARTICLES_KEY) -> None:
        self._store = store
        self._key = key

    def list(self) -> List[SavedArticle]:
        return [
            SavedArticle(
                id=str(entry["id"]),
                title=str(entry.get("title", "")),
                content=str(entry.get("content", "")),
                created_at=str(entry.get("created_at", "")),
            )
            for entry in _load_json_list(self._store, self._key)
            if isinstance(entry, dict) and "id" in entry
        ]

    def save(self, title: str, content: str) -> SavedArticle:
        article = SavedArticle(
            id=uuid.uuid4().hex,
            title=title,
            content=content,
            created_at=datetime.now(timezone.utc).isoformat(timespec="seconds"),
        )
        articles = self.list()
        articles.append(article)
        self._persist(articles)
        LOGGER.info("Saved article '%s' (%s)", title, article.id)
        return article

    def delete(self, article_id: str) -> bool:
        """Remove an article by id; returns False when no such article exists."""
        articles = self.list()
        remaining = [article for article in articles if article.id != article_id]
        if len(remaining) == len(articles):
            return False
        self._persist(remaining)
        LOGGER.info("Deleted saved article %s", article_id)
        return True

    def _persist(self, articles: List[SavedArticle]) -> None:
        self._store.set(self._key, json.dumps([asdict(a) for a in articles]))


class SearchHistory:
    """Most-recent-first list of searched topics."""

    def __init__(
        self,
        store: KeyValueStore,
        max_items: int = 10,
        key: str = SEARCH_HISTORY_KEY,
    ) -> None:
        self._store = store
        self._max_items = max(1, max_items)
        self._key = key

    def items(self) -> List[str]:
        return [str(item) for item in _load_json_list(self._store, self._key)]

    def add(self, topic: str) -> List[str]:
        topic = topic.strip()
        if not topic:
            return self.items()
        history = [item for item in self.items() if item.lower() != topic.lower()]
        history.insert(0, topic)
        history = history[: self._max_items]
        self._store.set(self._key, json.dumps(history))
        return history

    def remove(self, index: int) -> List[str]:
        history = self.items()
        if 0 <= index < len(history):
            del history[index]
            self._store.set(self._key, json.dumps(history))
        return history

    def clear(self) -> None:
        self._store.remove(self._key)
