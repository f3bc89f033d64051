"""Parsing of model output into a title and article body."""

import json
import re
from abc import ABC, abstractmethod

from newsdesk.domain.models import ParsedArticle
from newsdesk.logging import setup_logging

logger = setup_logging(__name__)

DEFAULT_TITLE = "Local Business Feature"
PLACEHOLDER_CONTENT = "Article content could not be extracted from the response."

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*\n?(.*?)\n?```$", re.DOTALL)

_TITLE_PATTERNS = [
    re.compile(r'"title"\s*:\s*"([^"]+)"', re.IGNORECASE),
    re.compile(r'title:\s*"([^"]+)"', re.IGNORECASE),
    re.compile(r"title:\s*(.+)", re.IGNORECASE),
    re.compile(r'"?headline"?\s*:\s*"?(.+)', re.IGNORECASE),
]
_CONTENT_INLINE = [
    re.compile(r'"content"\s*:\s*"((?:[^"\\]|\\.)*)"', re.IGNORECASE),
    re.compile(r'content:\s*"((?:[^"\\]|\\.)*)"', re.IGNORECASE),
]
_CONTENT_OPENING = re.compile(r'"?content"?\s*:\s*"?', re.IGNORECASE)


def _unescape(text: str) -> str:
    return text.replace('\\"', '"').replace("\\n", "\n")


def _strip_wrapping(text: str) -> str:
    return text.strip().rstrip(",").strip().strip("\"'").strip()


class StructuredTextParser(ABC):
    """Turns raw model text into a ParsedArticle, or None when it cannot."""

    @abstractmethod
    def parse(self, raw_text: str) -> ParsedArticle | None:
        pass


class StrictJSONParser(StructuredTextParser):
    """Accepts only a JSON object with exactly a title and a content string."""

    def parse(self, raw_text: str) -> ParsedArticle | None:
        text = (raw_text or "").strip()
        fenced = _CODE_FENCE.match(text)
        if fenced:
            text = fenced.group(1).strip()

        try:
            data = json.loads(text)
        except (json.JSONDecodeError, ValueError):
            return None

        if not isinstance(data, dict) or set(data) != {"title", "content"}:
            return None

        title, content = data["title"], data["content"]
        if not isinstance(title, str) or not isinstance(content, str):
            return None
        if not content.strip():
            return None

        return ParsedArticle(
            title=title.strip() or DEFAULT_TITLE,
            content=content.strip(),
            provenance="strict",
        )


class HeuristicRecoveryParser(StructuredTextParser):
    """
    Line-based extraction for output that is almost, but not quite, JSON.

    The title comes from the first line carrying a title or headline marker.
    The body comes from the content marker: either the quoted value on the
    same line, or that line's remainder plus the following lines up to the
    first closing brace. Without a content marker every non-title line is
    treated as body. Always returns an article with a non-empty body.
    """

    def parse(self, raw_text: str) -> ParsedArticle:
        lines = [line for line in (raw_text or "").split("\n") if line.strip()]

        title = self._extract_title(lines)
        content = self._extract_content(lines)

        return ParsedArticle(
            title=title or DEFAULT_TITLE,
            content=content or PLACEHOLDER_CONTENT,
            provenance="recovered",
        )

    def _extract_title(self, lines: list[str]) -> str:
        for line in lines:
            lowered = line.lower()
            if '"title"' not in lowered and "title:" not in lowered and "headline" not in lowered:
                continue
            for pattern in _TITLE_PATTERNS:
                match = pattern.search(line)
                if match:
                    return _strip_wrapping(match.group(1))
            return ""
        return ""

    def _extract_content(self, lines: list[str]) -> str:
        start = next(
            (
                i
                for i, line in enumerate(lines)
                if '"content"' in line.lower() or "content:" in line.lower()
            ),
            None,
        )

        if start is None:
            body = [line for line in lines if "title" not in line.lower()]
            return "\n".join(body).strip()

        for pattern in _CONTENT_INLINE:
            match = pattern.search(lines[start])
            if match:
                return _unescape(match.group(1)).strip()

        collected: list[str] = []
        opening = _CONTENT_OPENING.search(lines[start])
        remainder = lines[start][opening.end():] if opening else ""
        if remainder.strip():
            collected.append(remainder)

        for line in lines[start + 1:]:
            if "}" in line:
                before_brace = line.split("}")[0]
                if before_brace.strip():
                    collected.append(before_brace)
                break
            collected.append(line)

        return _unescape(_strip_wrapping("\n".join(collected)))


class ResponseParser:
    """Chains structured text parsers; the first one that yields wins."""

    def __init__(
        self,
        strict: StructuredTextParser | None = None,
        recovery: StructuredTextParser | None = None,
    ):
        self._strict = strict or StrictJSONParser()
        self._recovery = recovery or HeuristicRecoveryParser()

    def parse_strict(self, raw_text: str) -> ParsedArticle | None:
        return self._attempt(self._strict, raw_text)

    def parse_recover(self, raw_text: str) -> ParsedArticle:
        recovered = self._attempt(self._recovery, raw_text)
        if recovered is None:
            return ParsedArticle(
                title=DEFAULT_TITLE, content=PLACEHOLDER_CONTENT, provenance="recovered"
            )
        return recovered

    def parse(self, raw_text: str) -> ParsedArticle:
        """Returns the strict parse when possible, otherwise a recovered one."""
        parsed = self.parse_strict(raw_text)
        if parsed is not None:
            return parsed

        logger.warning(
            "Model output is not strict JSON, recovering heuristically",
            extra={"characters": len(raw_text or "")},
        )
        return self.parse_recover(raw_text)

    def _attempt(
        self, parser: StructuredTextParser, raw_text: str
    ) -> ParsedArticle | None:
        try:
            return parser.parse(raw_text)
        except Exception:
            logger.exception(
                "Parser raised unexpectedly",
                extra={"parser": type(parser).__name__},
            )
            return None
