"""Request and response models for the newsdesk API."""

from datetime import datetime

from pydantic import BaseModel


class TranscribeResponse(BaseModel):
    """Transcript returned for an uploaded audio clip."""

    success: bool
    transcript: str
    service: str
    provenance: str


class ArticleRequest(BaseModel):
    """Transcript and optional notes to turn into an article."""

    transcript: str
    notes: str = ""


class ArticleResponse(BaseModel):
    """Generated article."""

    success: bool
    title: str
    content: str
    provenance: str


class ConfigSummaryResponse(BaseModel):
    """Active configuration without credentials."""

    source: str
    region: str
    has_credentials: bool
    model_id: str
    bucket_name: str
    resolved_at: datetime
