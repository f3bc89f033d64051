"""Dependency injection configuration for the newsdesk service."""

from functools import lru_cache
from pathlib import Path

import assemblyai as aai
import httpx
import redis
from google import genai
from minio import Minio

from newsdesk.config import AppConfig, load_config
from newsdesk.domain import Configuration, FallbackContentProvider, ResponseParser
from newsdesk.handlers import (
    ArticleGenerationFlow,
    ConfigResolver,
    TranscriptionBackends,
    TranscriptionOrchestrator,
)
from newsdesk.infrastructure import (
    AssemblyAIJobService,
    AssemblyAITranscriber,
    GeminiLLMService,
    MinioStorageClient,
    RedisSecretStore,
)
from newsdesk.infrastructure.interfaces import LLMService
from newsdesk.logging import setup_logging

logger = setup_logging(__name__)


@lru_cache
def get_config() -> AppConfig:
    """Returns the process-wide application configuration."""
    return load_config()


@lru_cache
def get_resolver() -> ConfigResolver:
    """Returns the long-lived configuration resolver and its caches."""
    config = get_config()
    redis_client = redis.Redis(
        host=config.redis.host,
        port=config.redis.port,
        decode_responses=True,
    )
    return ConfigResolver(
        RedisSecretStore(redis_client), config.credentials, config.resolver
    )


@lru_cache
def get_fallback_provider() -> FallbackContentProvider:
    return FallbackContentProvider()


@lru_cache
def _system_prompt() -> str:
    path = Path(__file__).parent / get_config().gemini.system_prompt_path
    return path.read_text(encoding="utf-8")


@lru_cache
def _assemblyai_http() -> httpx.Client:
    """Returns the process-wide AssemblyAI HTTP client."""
    config = get_config()
    return httpx.Client(
        base_url=config.assemblyai.base_url,
        headers={"authorization": config.assemblyai.api_key},
        timeout=config.assemblyai.request_timeout_seconds,
    )


@lru_cache
def _job_registry() -> dict[str, tuple[str, str]]:
    """Returns the job registry shared by every job service binding."""
    return {}


def _build_backends(resolved: Configuration) -> TranscriptionBackends:
    """Binds storage and the job service to a resolved configuration."""
    config = get_config()
    minio_client = Minio(
        endpoint=config.minio.endpoint,
        access_key=resolved.access_key_id,
        secret_key=resolved.secret_access_key,
        region=resolved.region,
        secure=config.minio.secure,
    )
    storage = MinioStorageClient(minio_client, resolved.bucket_name)

    jobs = AssemblyAIJobService(
        _assemblyai_http(),
        storage,
        config.transcription.language_code,
        registry=_job_registry(),
    )

    logger.info(
        "Transcription backends bound",
        extra={"source": resolved.source, "bucket_name": resolved.bucket_name},
    )
    return TranscriptionBackends(storage=storage, jobs=jobs)


def _build_llm(resolved: Configuration) -> LLMService:
    """Creates the Gemini client for a resolved configuration."""
    config = get_config()
    client = genai.Client(api_key=resolved.model_api_key)
    return GeminiLLMService(
        client,
        resolved.model_id,
        _system_prompt(),
        temperature=config.gemini.temperature,
        max_output_tokens=config.gemini.max_output_tokens,
    )


@lru_cache
def get_orchestrator() -> TranscriptionOrchestrator:
    """Returns the configured transcription orchestrator."""
    config = get_config()

    direct = None
    if config.transcription.direct_enabled:
        aai.settings.api_key = config.assemblyai.api_key
        aai_config = aai.TranscriptionConfig(
            language_code=config.transcription.language_code
        )
        direct = AssemblyAITranscriber(aai.Transcriber(config=aai_config))

    return TranscriptionOrchestrator(
        get_resolver(),
        _build_backends,
        get_fallback_provider(),
        config.transcription,
        direct=direct,
    )


@lru_cache
def get_article_flow() -> ArticleGenerationFlow:
    """Returns the configured article generation flow."""
    return ArticleGenerationFlow(
        get_resolver(),
        _build_llm,
        ResponseParser(),
        get_fallback_provider(),
    )
