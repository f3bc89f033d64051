"""Abstract interface for LLM completion."""

from abc import ABC, abstractmethod


class LLMService(ABC):
    """Abstract base class for LLM backends."""

    @abstractmethod
    def complete(self, prompt: str) -> str:
        """
        Sends a prompt and returns the raw model text.

        Args:
            prompt: The full user prompt.

        Returns:
            The model output, unparsed.

        Raises:
            LLMServiceError: If the LLM call fails or returns nothing.
        """
