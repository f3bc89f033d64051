"""Domain layer exports."""

from newsdesk.domain.cache import Cache, utc_now
from newsdesk.domain.fallback_content import (
    FallbackContentProvider,
    classify_by_keywords,
    select_deterministic,
)
from newsdesk.domain.models import (
    ArticleOutcome,
    CachedSecret,
    Configuration,
    JobAck,
    JobState,
    JobStatus,
    ParsedArticle,
    TranscriptionJob,
    TranscriptionOutcome,
)
from newsdesk.domain.response_parser import (
    HeuristicRecoveryParser,
    ResponseParser,
    StrictJSONParser,
    StructuredTextParser,
)

__all__ = [
    "ArticleOutcome",
    "Cache",
    "CachedSecret",
    "Configuration",
    "FallbackContentProvider",
    "HeuristicRecoveryParser",
    "JobAck",
    "JobState",
    "JobStatus",
    "ParsedArticle",
    "ResponseParser",
    "StrictJSONParser",
    "StructuredTextParser",
    "TranscriptionJob",
    "TranscriptionOutcome",
    "classify_by_keywords",
    "select_deterministic",
    "utc_now",
]
