from __future__ import annotations

import asyncio
import logging
import os
import uuid
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Dict

from .config import ServiceSettings
from .models import AudioRef, VideoJob
from .summarize import DEFAULT_MAX_CHARS, DEFAULT_MAX_SENTENCES, summarize_text
from .tokenization import count_words

logger = logging.getLogger(__name__)

# Average narration pace used to estimate voice-over length.
WORDS_PER_MINUTE = 150
VIDEO_ASPECT_RATIOS = frozenset({"16:9", "9:16", "1:1"})


class ContentServiceError(RuntimeError):
    """Raised when a summary, voice-over or video request cannot be served."""


class ContentService(ABC):
    """Asynchronous AI-style services consumed by the orchestration layer."""

    @abstractmethod
    async def summarize(self, text: str) -> str:
        """Return a short summary of text."""
        raise NotImplementedError

    @abstractmethod
    async def synthesize_voice(self, text: str, voice: str = "default") -> AudioRef:
        """Return a reference to narrated audio for text."""
        raise NotImplementedError

    @abstractmethod
    async def generate_video(
        self, prompt: str, aspect_ratio: str = "16:9", duration: int = 4
    ) -> VideoJob:
        """Return the finished video job for prompt."""
        raise NotImplementedError

    @abstractmethod
    async def get_video_status(self, job_id: str) -> VideoJob:
        """Return the current state of a previously started video job."""
        raise NotImplementedError


class MockContentService(ContentService):
    """
    Deterministic stand-in for hosted AI services.

    Every call waits ``settings.delay_seconds`` to mimic network latency and
    then resolves to an extractive summary or a canned sample asset.
    """

    def __init__(
        self,
        settings: ServiceSettings | None = None,
        *,
        max_sentences: int = DEFAULT_MAX_SENTENCES,
        max_chars: int = DEFAULT_MAX_CHARS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._settings = settings or ServiceSettings()
        self._max_sentences = max_sentences
        self._max_chars = max_chars
        self._sleep = sleep
        self._jobs: Dict[str, VideoJob] = {}

    @property
    def settings(self) -> ServiceSettings:
        return self._settings

    async def summarize(self, text: str) -> str:
        self._check_access()
        if not text.strip():
            raise ContentServiceError("Cannot summarize empty text.")
        logger.info("Summarizing %d words", count_words(text))
        await self._sleep(self._settings.delay_seconds)
        summary = summarize_text(
            text, max_sentences=self._max_sentences, max_chars=self._max_chars
        )
        logger.debug("Summary ready (%d chars)", len(summary))
        return summary

    async def synthesize_voice(self, text: str, voice: str = "default") -> AudioRef:
        self._check_access()
        if not text.strip():
            raise ContentServiceError("Cannot synthesize voice for empty text.")
        logger.info("Synthesizing voice-over voice=%s", voice)
        await self._sleep(self._settings.delay_seconds)
        duration = round(count_words(text) * 60.0 / WORDS_PER_MINUTE, 1)
        return AudioRef(
            url=self._settings.sample_audio_url,
            voice=voice,
            duration_seconds=duration,
        )

    async def generate_video(
        self, prompt: str, aspect_ratio: str = "16:9", duration: int = 4
    ) -> VideoJob:
        self._check_access()
        if not prompt.strip():
            raise ContentServiceError("A prompt is required for video generation.")
        if aspect_ratio not in VIDEO_ASPECT_RATIOS:
            raise ContentServiceError(f"Unsupported aspect ratio '{aspect_ratio}'.")
        job = VideoJob(id=f"video-{uuid.uuid4().hex[:12]}", status="started")
        self._jobs[job.id] = job
        logger.info(
            "Video job %s started (aspect=%s duration=%ss)", job.id, aspect_ratio, duration
        )
        await self._sleep(self._settings.delay_seconds)
        job.status = "processing"
        logger.debug("Video job %s processing", job.id)
        await self._sleep(self._settings.delay_seconds)
        job.status = "completed"
        job.url = self._settings.sample_video_url
        logger.info("Video job %s completed", job.id)
        return job

    async def get_video_status(self, job_id: str) -> VideoJob:
        self._check_access()
        job = self._jobs.get(job_id)
        if job is None:
            raise ContentServiceError(f"Unknown video job '{job_id}'.")
        await self._sleep(self._settings.delay_seconds)
        return job

    def _check_access(self) -> None:
        if not self._settings.require_api_key:
            return
        if resolve_api_key(self._settings) is None:
            raise ContentServiceError(
                "API key is required. Set services.api_key or the "
                f"{self._settings.api_key_env} environment variable."
            )


class CallableContentService(ContentService):
    """Adapt plain functions into the ContentService interface."""

    def __init__(
        self,
        summarize: Callable[[str], str],
        synthesize_voice: Callable[[str, str], AudioRef] | None = None,
        generate_video: Callable[[str, str, int], VideoJob] | None = None,
        get_video_status: Callable[[str], VideoJob] | None = None,
    ) -> None:
        self._summarize = summarize
        self._synthesize_voice = synthesize_voice
        self._generate_video = generate_video
        self._get_video_status = get_video_status

    async def summarize(self, text: str) -> str:
        return self._summarize(text)

    async def synthesize_voice(self, text: str, voice: str = "default") -> AudioRef:
        if self._synthesize_voice is None:
            raise ContentServiceError("Voice synthesis is not configured.")
        return self._synthesize_voice(text, voice)

    async def generate_video(
        self, prompt: str, aspect_ratio: str = "16:9", duration: int = 4
    ) -> VideoJob:
        if self._generate_video is None:
            raise ContentServiceError("Video generation is not configured.")
        return self._generate_video(prompt, aspect_ratio, duration)

    async def get_video_status(self, job_id: str) -> VideoJob:
        if self._get_video_status is None:
            raise ContentServiceError("Video status lookup is not configured.")
        return self._get_video_status(job_id)


def resolve_api_key(settings: ServiceSettings) -> str | None:
    """Resolve the API key from explicit config or the configured environment variable."""
    if settings.api_key:
        return settings.api_key
    env_name = settings.api_key_env
    if env_name and os.environ.get(env_name):
        return os.environ[env_name]
    return None
