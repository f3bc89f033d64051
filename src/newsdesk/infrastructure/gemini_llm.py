"""Gemini LLM service implementation."""

from google import genai

from newsdesk.exceptions import LLMServiceError
from newsdesk.infrastructure.interfaces import LLMService
from newsdesk.logging import setup_logging

logger = setup_logging(__name__)


class GeminiLLMService(LLMService):
    """LLM service implementation using Google Gemini."""

    def __init__(
        self,
        client: genai.Client,
        model_name: str,
        system_prompt: str,
        temperature: float = 0.7,
        max_output_tokens: int = 2000,
    ):
        self._client = client
        self._model_name = model_name
        self._system_prompt = system_prompt
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens

    def complete(self, prompt: str) -> str:
        """
        Sends a prompt to Gemini and returns the raw response text.

        The response is requested as JSON but returned unparsed; callers are
        expected to tolerate malformed output.

        Raises:
            LLMServiceError: If the Gemini API call fails or returns no text.
        """
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=prompt,
                config={
                    "response_mime_type": "application/json",
                    "system_instruction": self._system_prompt,
                    "temperature": self._temperature,
                    "max_output_tokens": self._max_output_tokens,
                },
            )
        except Exception as e:
            logger.exception("Gemini API call failed", extra={"model": self._model_name})
            raise LLMServiceError(f"Gemini completion failed: {e}", cause=e) from e

        if not response.text:
            raise LLMServiceError("Gemini returned empty response")

        logger.info(
            "LLM completion received",
            extra={"model": self._model_name, "characters": len(response.text)},
        )
        return response.text
