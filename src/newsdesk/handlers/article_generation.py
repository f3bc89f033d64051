"""Orchestration of the transcript-to-article pipeline."""

from collections.abc import Callable
from datetime import datetime

from newsdesk.domain.fallback_content import FallbackContentProvider
from newsdesk.domain.models import ArticleOutcome, Configuration
from newsdesk.domain.response_parser import ResponseParser
from newsdesk.handlers.config_resolver import ConfigResolver
from newsdesk.infrastructure.interfaces import LLMService
from newsdesk.logging import setup_logging

logger = setup_logging(__name__)

LLMFactory = Callable[[Configuration], LLMService]

_NO_NOTES = "No additional notes provided."

ARTICLE_PROMPT = """Based on the following interview transcript and any additional notes, write a newspaper article for a local business publication.

INTERVIEW TRANSCRIPT:
{transcript}

ADDITIONAL NOTES:
{notes}

Write:
1. A compelling headline that captures the main story.
2. An article with a strong lead paragraph, supporting paragraphs with quotes and context from the interview, clear transitions, attribution, and a conclusion that ties the story together.

Respond with a single JSON object and nothing else, in exactly this shape:
{{
  "title": "The headline",
  "content": "The full article, with paragraphs separated by \\n\\n"
}}

Use double quotes for all strings, escape every quote inside the content as \\" and every newline as \\n."""


def build_article_prompt(transcript: str, notes: str = "") -> str:
    return ARTICLE_PROMPT.format(
        transcript=transcript.strip(), notes=notes.strip() or _NO_NOTES
    )


class ArticleGenerationFlow:
    """Generates an article from a transcript, degrading to canned content."""

    def __init__(
        self,
        resolver: ConfigResolver,
        llm_factory: LLMFactory,
        parser: ResponseParser,
        fallback: FallbackContentProvider,
    ):
        self._resolver = resolver
        self._llm_factory = llm_factory
        self._parser = parser
        self._fallback = fallback
        self._bound: tuple[datetime, LLMService] | None = None

    def generate_article(self, transcript: str, notes: str = "") -> ArticleOutcome:
        """
        Produces a title and article body for a transcript.

        The model output goes through strict parsing and then heuristic
        recovery. If the model cannot be reached at all, a canned article
        for the transcript's keyword category is returned instead. Never
        raises.

        Args:
            transcript: The interview transcript.
            notes: Optional editor notes.

        Returns:
            ArticleOutcome tagged with the provenance of its content.
        """
        try:
            llm = self._current_llm()
            raw_text = llm.complete(build_article_prompt(transcript, notes))
        except Exception as e:
            category, article = self._fallback.article_for(transcript, notes)
            logger.warning(
                "Article generation failed, serving fallback article",
                extra={
                    "category": category,
                    "error_type": type(e).__name__,
                    "error": str(e),
                },
            )
            return ArticleOutcome(
                success=True,
                title=article.title,
                content=article.content,
                provenance=article.provenance,
                category=category,
            )

        article = self._parser.parse(raw_text)
        logger.info("Article generated", extra={"provenance": article.provenance})
        return ArticleOutcome(
            success=True,
            title=article.title,
            content=article.content,
            provenance=article.provenance,
        )

    def _current_llm(self) -> LLMService:
        config = self._resolver.resolve()
        if self._bound is None or self._bound[0] != config.resolved_at:
            self._bound = (config.resolved_at, self._llm_factory(config))
        return self._bound[1]
