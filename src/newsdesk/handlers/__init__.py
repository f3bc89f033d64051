"""Handler layer exports."""

from newsdesk.handlers.article_generation import ArticleGenerationFlow
from newsdesk.handlers.config_resolver import ConfigResolver
from newsdesk.handlers.transcription_orchestrator import (
    TranscriptionBackends,
    TranscriptionOrchestrator,
)

__all__ = [
    "ArticleGenerationFlow",
    "ConfigResolver",
    "TranscriptionBackends",
    "TranscriptionOrchestrator",
]
