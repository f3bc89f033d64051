"""Infrastructure interface exports."""

from newsdesk.infrastructure.interfaces.job_service import TranscriptionJobService
from newsdesk.infrastructure.interfaces.llm_service import LLMService
from newsdesk.infrastructure.interfaces.secret_store import SecretStore
from newsdesk.infrastructure.interfaces.storage_client import StorageClient
from newsdesk.infrastructure.interfaces.transcription_service import (
    TranscriptionService,
)

__all__ = [
    "LLMService",
    "SecretStore",
    "StorageClient",
    "TranscriptionJobService",
    "TranscriptionService",
]
