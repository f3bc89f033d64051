"""Domain models for transcription and article generation."""

from datetime import datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field

ConfigSource = Literal["environment", "secret-store", "fallback"]
ArticleProvenance = Literal["strict", "recovered", "fallback"]
TranscriptProvenance = Literal["live", "fallback"]


class Configuration(BaseModel, frozen=True):
    """A fully populated configuration and the source it came from."""

    region: str
    access_key_id: str
    secret_access_key: str
    model_id: str
    model_api_key: str = ""
    bucket_name: str
    source: ConfigSource
    resolved_at: datetime


class CachedSecret(BaseModel, frozen=True):
    """A secret value together with the time it was fetched."""

    secret_name: str
    value: dict[str, Any]
    fetched_at: datetime


class JobState(str, Enum):
    """Lifecycle states of a transcription job."""

    CREATED = "created"
    SUBMITTED = "submitted"
    POLLING = "polling"
    COMPLETED = "completed"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


class TranscriptionJob(BaseModel):
    """Request-scoped record of one asynchronous transcription job."""

    job_name: str
    job_id: str = ""
    media_key: str
    output_key: str
    state: JobState = JobState.CREATED
    attempts_used: int = 0
    failure_reason: str | None = None


class JobAck(BaseModel, frozen=True):
    """Acknowledgement returned by the job service on submission."""

    job_id: str


class JobStatus(BaseModel, frozen=True):
    """Status report for a transcription job."""

    status: Literal["QUEUED", "IN_PROGRESS", "COMPLETED", "FAILED"]
    output_location: str | None = None
    failure_reason: str | None = None


class ParsedArticle(BaseModel, frozen=True):
    """Title and body extracted from model output."""

    title: str
    content: str = Field(min_length=1)
    provenance: ArticleProvenance


class TranscriptionOutcome(BaseModel, frozen=True):
    """Result of the audio-to-transcript pipeline."""

    success: bool
    transcript: str
    provenance: TranscriptProvenance
    service: str


class ArticleOutcome(BaseModel, frozen=True):
    """Result of the transcript-to-article pipeline."""

    success: bool
    title: str
    content: str
    provenance: ArticleProvenance
    category: str | None = None
