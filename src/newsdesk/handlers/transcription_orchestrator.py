"""Orchestration of the audio-to-transcript pipeline."""

import json
import re
import secrets
import time
from collections.abc import Callable
from datetime import datetime
from typing import NamedTuple
from urllib.parse import unquote, urlparse

from newsdesk.config import TranscriptionConfig
from newsdesk.domain.cache import Clock, utc_now
from newsdesk.domain.fallback_content import FallbackContentProvider
from newsdesk.domain.models import (
    Configuration,
    JobState,
    TranscriptionJob,
    TranscriptionOutcome,
)
from newsdesk.exceptions import (
    JobFailedError,
    JobSubmissionError,
    TranscriptDecodeError,
    TranscriptionTimeoutError,
    UploadError,
)
from newsdesk.handlers.config_resolver import ConfigResolver
from newsdesk.infrastructure.interfaces import (
    StorageClient,
    TranscriptionJobService,
    TranscriptionService,
)
from newsdesk.logging import setup_logging

logger = setup_logging(__name__)

AUDIO_PREFIX = "transcriptions/"
RESULTS_PREFIX = "transcriptions/results/"

JOB_SERVICE_NAME = "assemblyai-job"
DIRECT_SERVICE_NAME = "assemblyai-direct"
FALLBACK_SERVICE_NAME = "fallback"

_SAFE_EXTENSION = re.compile(r"[a-z0-9]+")


class TranscriptionBackends(NamedTuple):
    """Storage and job service bound to one resolved configuration."""

    storage: StorageClient
    jobs: TranscriptionJobService


BackendFactory = Callable[[Configuration], TranscriptionBackends]
Tier = Callable[[bytes, str, str | None], str]


def object_key_from_location(location: str, bucket_name: str) -> str:
    """
    Extracts the object key from a job output location.

    Accepts an http(s) URL (path-style, optionally prefixed with the bucket),
    an ``s3://bucket/key`` URI, or a bare key.
    """
    if location.startswith(("https://", "http://")):
        path = unquote(urlparse(location).path).lstrip("/")
        bucket_prefix = f"{bucket_name}/"
        if path.startswith(bucket_prefix):
            path = path[len(bucket_prefix):]
        return path
    if location.startswith("s3://"):
        _, _, key = location[len("s3://"):].partition("/")
        return key
    return location


def _extension(filename: str | None, content_type: str) -> str:
    if filename and "." in filename:
        candidate = filename.rsplit(".", 1)[1].lower()
        if _SAFE_EXTENSION.fullmatch(candidate):
            return candidate
    subtype = content_type.split("/", 1)[-1].split(";", 1)[0].strip().lower()
    if _SAFE_EXTENSION.fullmatch(subtype):
        return subtype
    return "webm"


class TranscriptionOrchestrator:
    """
    Turns an audio clip into a transcript.

    The live path uploads the audio, starts an asynchronous job and polls it
    to a terminal state. ``transcribe`` walks the live tiers in order (the
    job tier, then the optional direct transcription tier) and serves a
    deterministic canned transcript when all of them fail, so it never
    raises. ``submit``, ``start_job`` and ``poll`` raise typed errors for
    callers that need them.
    """

    def __init__(
        self,
        resolver: ConfigResolver,
        backend_factory: BackendFactory,
        fallback: FallbackContentProvider,
        settings: TranscriptionConfig,
        direct: TranscriptionService | None = None,
        clock: Clock = utc_now,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._resolver = resolver
        self._backend_factory = backend_factory
        self._fallback = fallback
        self._settings = settings
        self._clock = clock
        self._sleep = sleep
        self._bound: tuple[datetime, TranscriptionBackends] | None = None

        self._tiers: list[tuple[str, Tier]] = [(JOB_SERVICE_NAME, self._transcribe_via_job)]
        if direct is not None:
            self._tiers.append(
                (DIRECT_SERVICE_NAME, lambda audio, *_: direct.transcribe(audio))
            )

    def transcribe(
        self,
        audio_data: bytes,
        content_type: str = "audio/webm",
        filename: str | None = None,
    ) -> TranscriptionOutcome:
        """Returns a live transcript when possible, otherwise a canned one."""
        logger.info(
            "Transcription requested",
            extra={"size": len(audio_data), "content_type": content_type},
        )

        for service, tier in self._tiers:
            try:
                transcript = tier(audio_data, content_type, filename)
            except Exception as e:
                logger.warning(
                    "Transcription tier failed",
                    extra={
                        "service": service,
                        "error_type": type(e).__name__,
                        "error": str(e),
                    },
                )
                continue

            if not transcript.strip():
                logger.warning("Transcription tier returned no text", extra={"service": service})
                continue

            logger.info("Transcription completed", extra={"service": service})
            return TranscriptionOutcome(
                success=True, transcript=transcript, provenance="live", service=service
            )

        transcript = self._fallback.transcript_for(audio_data)
        logger.warning(
            "Serving fallback transcript", extra={"size": len(audio_data)}
        )
        return TranscriptionOutcome(
            success=True,
            transcript=transcript,
            provenance="fallback",
            service=FALLBACK_SERVICE_NAME,
        )

    def submit(
        self,
        audio_data: bytes,
        content_type: str = "audio/webm",
        filename: str | None = None,
    ) -> str:
        """
        Uploads audio under a collision-resistant key.

        Returns:
            The media key.

        Raises:
            UploadError: If the upload fails.
        """
        return self._submit(self._current_backends(), audio_data, content_type, filename)

    def start_job(self, media_key: str) -> TranscriptionJob:
        """
        Starts an asynchronous transcription job for uploaded audio.

        Raises:
            JobSubmissionError: If the job service does not accept the job.
        """
        return self._start_job(self._current_backends(), media_key)

    def poll(
        self,
        job_id: str,
        max_attempts: int | None = None,
        interval_ms: int | None = None,
    ) -> str:
        """
        Waits for a job to finish and returns its transcript.

        Raises:
            JobFailedError: If the job service reports failure.
            TranscriptionTimeoutError: If the job is still running after
                ``max_attempts`` status checks.
            TranscriptDecodeError: If the output object is unreadable.
        """
        job = TranscriptionJob(
            job_name=job_id,
            job_id=job_id,
            media_key="",
            output_key=f"{RESULTS_PREFIX}{job_id}.json",
            state=JobState.SUBMITTED,
        )
        return self._poll_job(self._current_backends(), job, max_attempts, interval_ms)

    def _current_backends(self) -> TranscriptionBackends:
        """Binds backends to the active configuration, rebuilding on change."""
        config = self._resolver.resolve()
        if self._bound is None or self._bound[0] != config.resolved_at:
            self._bound = (config.resolved_at, self._backend_factory(config))
        return self._bound[1]

    def _transcribe_via_job(
        self, audio_data: bytes, content_type: str, filename: str | None
    ) -> str:
        backends = self._current_backends()
        media_key = self._submit(backends, audio_data, content_type, filename)
        job = self._start_job(backends, media_key)
        return self._poll_job(backends, job, None, None)

    def _submit(
        self,
        backends: TranscriptionBackends,
        audio_data: bytes,
        content_type: str,
        filename: str | None,
    ) -> str:
        timestamp = int(self._clock().timestamp() * 1000)
        key = (
            f"{AUDIO_PREFIX}audio-{timestamp}_{secrets.token_hex(6)}"
            f".{_extension(filename, content_type)}"
        )
        try:
            backends.storage.put(key, audio_data, content_type)
        except UploadError:
            raise
        except Exception as e:
            raise UploadError(key, e) from e
        return key

    def _start_job(
        self, backends: TranscriptionBackends, media_key: str
    ) -> TranscriptionJob:
        timestamp = int(self._clock().timestamp() * 1000)
        job_name = f"transcription-{timestamp}-{secrets.token_hex(5)}"
        job = TranscriptionJob(
            job_name=job_name,
            media_key=media_key,
            output_key=f"{RESULTS_PREFIX}{job_name}.json",
        )

        try:
            media_location = backends.storage.location(media_key)
            ack = backends.jobs.submit(job_name, media_location, job.output_key)
        except JobSubmissionError:
            raise
        except Exception as e:
            raise JobSubmissionError(job_name, e) from e

        job.job_id = ack.job_id
        job.state = JobState.SUBMITTED
        logger.info(
            "Transcription job submitted",
            extra={"job_name": job_name, "job_id": job.job_id, "media_key": media_key},
        )
        return job

    def _poll_job(
        self,
        backends: TranscriptionBackends,
        job: TranscriptionJob,
        max_attempts: int | None,
        interval_ms: int | None,
    ) -> str:
        max_attempts = self._settings.max_attempts if max_attempts is None else max_attempts
        interval_ms = self._settings.poll_interval_ms if interval_ms is None else interval_ms

        for attempt in range(1, max_attempts + 1):
            job.state = JobState.POLLING
            job.attempts_used = attempt
            status = backends.jobs.get_status(job.job_id)

            if status.status == "COMPLETED":
                job.state = JobState.COMPLETED
                location = status.output_location or job.output_key
                logger.info(
                    "Transcription job completed",
                    extra={"job_id": job.job_id, "attempts": attempt},
                )
                return self._fetch_transcript(backends.storage, location)

            if status.status == "FAILED":
                job.state = JobState.FAILED
                job.failure_reason = status.failure_reason or "Unknown error"
                raise JobFailedError(job.job_id, job.failure_reason)

            logger.info(
                "Transcription job in progress",
                extra={"job_id": job.job_id, "attempt": attempt, "max_attempts": max_attempts},
            )
            self._sleep(interval_ms / 1000)

        job.state = JobState.TIMED_OUT
        raise TranscriptionTimeoutError(job.job_id, max_attempts)

    def _fetch_transcript(self, storage: StorageClient, location: str) -> str:
        key = object_key_from_location(location, storage.bucket_name)
        raw = storage.get(key)
        try:
            transcript = json.loads(raw)["results"]["transcripts"][0]["transcript"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise TranscriptDecodeError(key, e) from e

        if not isinstance(transcript, str):
            raise TranscriptDecodeError(key, TypeError("transcript is not a string"))
        return transcript
