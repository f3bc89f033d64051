"""Deterministic selection of canned content for degraded responses."""

import re
from collections.abc import Iterable, Mapping, Sequence
from typing import TypeVar

from newsdesk.domain import fallback_corpus
from newsdesk.domain.models import ParsedArticle

T = TypeVar("T")

_WORD = re.compile(r"[a-z0-9']+")
_SENTENCE_END = re.compile(r"[.!?]+")


def select_deterministic(seed: int, corpus: Sequence[T]) -> T:
    """Returns ``corpus[seed % len(corpus)]``."""
    if not corpus:
        raise ValueError("Cannot select from an empty corpus")
    return corpus[seed % len(corpus)]


def classify_by_keywords(
    text: str,
    keyword_sets: Mapping[str, Iterable[str]],
    priority_order: Sequence[str],
    default: str = fallback_corpus.DEFAULT_CATEGORY,
) -> str:
    """
    Returns the first category whose keywords appear in ``text``.

    Args:
        text: Free text, tokenized into lower-case words.
        keyword_sets: Keywords per category.
        priority_order: Categories in the order they are tried.
        default: Category returned when nothing matches.
    """
    tokens = set(_WORD.findall(text.lower()))
    for category in priority_order:
        if tokens.intersection(keyword_sets.get(category, ())):
            return category
    return default


def count_sentences(text: str) -> int:
    return len([s for s in _SENTENCE_END.split(text) if s.strip()])


class FallbackContentProvider:
    """Serves canned transcripts and category-specific canned articles."""

    def __init__(
        self,
        transcripts: Sequence[str] = fallback_corpus.TRANSCRIPTS,
        keyword_sets: Mapping[str, Iterable[str]] = fallback_corpus.KEYWORD_SETS,
        priority_order: Sequence[str] = fallback_corpus.PRIORITY_ORDER,
        titles: Mapping[str, Sequence[str]] = fallback_corpus.TITLES,
        articles: Mapping[str, str] = fallback_corpus.ARTICLES,
    ):
        self._transcripts = transcripts
        self._keyword_sets = keyword_sets
        self._priority_order = priority_order
        self._titles = titles
        self._articles = articles

    @property
    def transcripts(self) -> Sequence[str]:
        return self._transcripts

    def transcript_for(self, audio_data: bytes) -> str:
        """Picks a canned transcript keyed by the audio payload size."""
        return select_deterministic(len(audio_data), self._transcripts)

    def classify(self, text: str) -> str:
        return classify_by_keywords(text, self._keyword_sets, self._priority_order)

    def article_for(self, transcript: str, notes: str = "") -> tuple[str, ParsedArticle]:
        """
        Builds a canned article matching the transcript's topic.

        Returns:
            Tuple of (category, article).
        """
        category = self.classify(transcript)
        default = fallback_corpus.DEFAULT_CATEGORY

        titles = self._titles.get(category) or self._titles[default]
        title = select_deterministic(count_sentences(transcript), titles)

        content = self._articles.get(category) or self._articles[default]
        if notes.strip():
            content = f"{content}\n\nAdditional Notes: {notes.strip()}"

        return category, ParsedArticle(title=title, content=content, provenance="fallback")
