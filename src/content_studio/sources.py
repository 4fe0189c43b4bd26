from __future__ import annotations

import logging
import time
from typing import Any, Dict, List

import requests

from .config import WikipediaSettings

LOGGER = logging.getLogger(__name__)


class SourceFetchError(RuntimeError):
    """Raised when source text for a topic cannot be retrieved."""


def extract_to_paragraphs(extract: str) -> List[str]:
    """Split a plain-text Wikipedia extract into paragraphs, dropping headings."""
    paragraphs: List[str] = []
    for line in extract.splitlines():
        line = line.strip()
        if not line or line.startswith("=="):
            continue
        paragraphs.append(line)
    return paragraphs


class WikipediaClient:
    """Fetch plain-text article extracts from the MediaWiki action API."""

    def __init__(
        self,
        settings: WikipediaSettings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._settings = settings or WikipediaSettings()
        self._session = session or requests.Session()
        self._max_attempts = max(1, self._settings.max_attempts)

    @property
    def settings(self) -> WikipediaSettings:
        return self._settings

    def fetch_paragraphs(self, topic: str) -> List[str]:
        """Return paragraphs from the top search results for topic, in result order."""
        topic = topic.strip()
        if not topic:
            raise SourceFetchError("A topic is required to fetch source text.")

        titles = self.search_titles(topic)
        if not titles:
            raise SourceFetchError(f"No Wikipedia articles found for '{topic}'.")

        paragraphs: List[str] = []
        for title in titles:
            extract = self.fetch_extract(title)
            article_paragraphs = extract_to_paragraphs(extract)
            LOGGER.info(
                "Fetched %d paragraphs from Wikipedia article '%s'",
                len(article_paragraphs),
                title,
            )
            paragraphs.extend(article_paragraphs)

        if not paragraphs:
            raise SourceFetchError(f"Wikipedia returned no text for '{topic}'.")
        return paragraphs

    def search_titles(self, topic: str) -> List[str]:
        payload = self._request(
            {
                "action": "query",
                "list": "search",
                "srsearch": topic,
                "srlimit": self._settings.max_articles,
                "format": "json",
            }
        )
        results = _query_field(payload, "search", list)
        return [
            str(entry["title"])
            for entry in results
            if isinstance(entry, dict) and entry.get("title")
        ]

    def fetch_extract(self, title: str) -> str:
        payload = self._request(
            {
                "action": "query",
                "prop": "extracts",
                "explaintext": 1,
                "redirects": 1,
                "titles": title,
                "format": "json",
            }
        )
        pages = _query_field(payload, "pages", dict)
        for page in pages.values():
            if not isinstance(page, dict) or "missing" in page:
                continue
            extract = page.get("extract")
            if extract:
                return str(extract)
        LOGGER.warning("Wikipedia article '%s' has no extract.", title)
        return ""

    def _request(self, params: Dict[str, Any]) -> Dict[str, Any]:
        attempt = 0
        last_error: Exception | None = None
        while attempt < self._max_attempts:
            attempt += 1
            try:
                response = self._session.get(
                    self._settings.endpoint,
                    params=params,
                    headers={"User-Agent": self._settings.user_agent},
                    timeout=self._settings.request_timeout,
                )
                response.raise_for_status()
                payload = response.json()
                if not isinstance(payload, dict):
                    raise SourceFetchError(
                        "Wikipedia API returned an unexpected response body."
                    )
                error = payload.get("error")
                if error is not None:
                    info = (
                        error.get("info", "unknown error")
                        if isinstance(error, dict)
                        else error
                    )
                    raise SourceFetchError(f"Wikipedia API error: {info}")
                return payload
            except (requests.RequestException, ValueError) as exc:
                last_error = exc
                LOGGER.warning(
                    "Wikipedia request failed (attempt %s/%s): %s",
                    attempt,
                    self._max_attempts,
                    exc,
                )
                if attempt >= self._max_attempts:
                    break
                time.sleep(min(2 ** (attempt - 1), 5))
        raise SourceFetchError("Wikipedia request failed after retries.") from last_error


def _query_field(payload: Dict[str, Any], key: str, kind: type) -> Any:
    """Return ``payload["query"][key]`` when it has the expected type, else an empty one."""
    query = payload.get("query")
    if not isinstance(query, dict):
        return kind()
    value = query.get(key)
    return value if isinstance(value, kind) else kind()
