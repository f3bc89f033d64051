"""Infrastructure layer exports."""

from newsdesk.infrastructure.assemblyai_jobs import AssemblyAIJobService
from newsdesk.infrastructure.assemblyai_transcriber import AssemblyAITranscriber
from newsdesk.infrastructure.gemini_llm import GeminiLLMService
from newsdesk.infrastructure.minio_storage import MinioStorageClient
from newsdesk.infrastructure.redis_secret_store import RedisSecretStore

__all__ = [
    "AssemblyAIJobService",
    "AssemblyAITranscriber",
    "GeminiLLMService",
    "MinioStorageClient",
    "RedisSecretStore",
]
