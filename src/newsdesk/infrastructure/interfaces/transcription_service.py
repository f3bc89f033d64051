"""Abstract interface for synchronous transcription."""

from abc import ABC, abstractmethod


class TranscriptionService(ABC):
    """Abstract base class for blocking audio transcription backends."""

    @abstractmethod
    def transcribe(self, audio_data: bytes) -> str:
        """
        Transcribes audio data and returns plain text.

        Args:
            audio_data: Raw audio file bytes.

        Returns:
            The transcript text.

        Raises:
            TranscriptionError: If transcription fails.
        """
