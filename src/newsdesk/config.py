"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel


def _flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if not value:
        return default
    return value.strip().lower() == "true"


class MinioConfig(BaseModel, frozen=True):
    """Object storage endpoint configuration."""

    endpoint: str
    secure: bool = False


class RedisConfig(BaseModel, frozen=True):
    """Redis connection configuration for the secret store."""

    host: str
    port: int = 6379


class CredentialsConfig(BaseModel, frozen=True):
    """Explicit credentials and identifiers supplied through the environment."""

    access_key_id: str = ""
    secret_access_key: str = ""
    region: str = "us-west-1"
    model_id: str = "gemini-2.5-flash-lite"
    model_api_key: str = ""
    bucket_name: str = "newsdesk-storage"


class ResolverConfig(BaseModel, frozen=True):
    """Configuration resolution and secret caching settings."""

    cache_ttl_seconds: int = 300
    allow_fallback: bool = True
    credentials_secret: str = "newsdesk/credentials"
    model_secret: str = "newsdesk/model-config"
    storage_secret: str = "newsdesk/storage-config"


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str
    base_url: str = "https://api.assemblyai.com"
    request_timeout_seconds: float = 30.0


class TranscriptionConfig(BaseModel, frozen=True):
    """Transcription job polling settings."""

    max_attempts: int = 30
    poll_interval_ms: int = 2000
    language_code: str = "en"
    direct_enabled: bool = False


class GeminiConfig(BaseModel, frozen=True):
    """Gemini generation settings."""

    system_prompt_path: Path = Path("prompts/article_system.txt")
    temperature: float = 0.7
    max_output_tokens: int = 2000


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    minio: MinioConfig
    redis: RedisConfig
    credentials: CredentialsConfig
    resolver: ResolverConfig
    assemblyai: AssemblyAIConfig
    transcription: TranscriptionConfig
    gemini: GeminiConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        minio=MinioConfig(
            endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            secure=_flag("MINIO_SECURE", False),
        ),
        redis=RedisConfig(
            host=os.getenv("REDIS_HOST", "redis"),
            port=int(os.getenv("REDIS_PORT", "6379")),
        ),
        credentials=CredentialsConfig(
            access_key_id=os.getenv("ACCESS_KEY_ID", ""),
            secret_access_key=os.getenv("SECRET_ACCESS_KEY", ""),
            region=os.getenv("REGION", "us-west-1"),
            model_id=os.getenv("MODEL_ID", "gemini-2.5-flash-lite"),
            model_api_key=os.getenv("GEMINI_API_KEY", ""),
            bucket_name=os.getenv("BUCKET_NAME", "newsdesk-storage"),
        ),
        resolver=ResolverConfig(
            cache_ttl_seconds=int(os.getenv("CONFIG_CACHE_TTL_SECONDS", "300")),
            allow_fallback=_flag("CONFIG_ALLOW_FALLBACK", True),
        ),
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            base_url=os.getenv("ASSEMBLYAI_BASE_URL", "https://api.assemblyai.com"),
        ),
        transcription=TranscriptionConfig(
            max_attempts=int(os.getenv("TRANSCRIBE_MAX_ATTEMPTS", "30")),
            poll_interval_ms=int(os.getenv("TRANSCRIBE_POLL_INTERVAL_MS", "2000")),
            language_code=os.getenv("TRANSCRIBE_LANGUAGE", "en"),
            direct_enabled=_flag("TRANSCRIBE_DIRECT_ENABLED", False),
        ),
        gemini=GeminiConfig(),
    )
