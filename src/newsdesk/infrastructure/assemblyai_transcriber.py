"""AssemblyAI implementation of the TranscriptionService interface."""

import tempfile

import assemblyai as aai

from newsdesk.exceptions import TranscriptionError
from newsdesk.infrastructure.interfaces import TranscriptionService
from newsdesk.logging import setup_logging

logger = setup_logging(__name__)


class AssemblyAITranscriber(TranscriptionService):
    """Transcribes audio in a single blocking AssemblyAI call."""

    def __init__(self, transcriber: aai.Transcriber, suffix: str = ".webm"):
        self._transcriber = transcriber
        self._suffix = suffix

    def transcribe(self, audio_data: bytes) -> str:
        """
        Transcribes audio data using AssemblyAI.

        Writes audio to a temp file (required by AssemblyAI SDK) and waits
        for the transcript text.
        """
        try:
            with tempfile.NamedTemporaryFile(suffix=self._suffix, delete=True) as temp_file:
                temp_file.write(audio_data)
                temp_file.flush()

                transcription = self._transcriber.transcribe(temp_file.name)

            if transcription.status == aai.TranscriptStatus.error:
                raise TranscriptionError(
                    f"AssemblyAI reported an error: {transcription.error}"
                )

            if not transcription.text:
                raise TranscriptionError("Transcription returned no text")

            logger.info(
                "Direct transcription successful",
                extra={"characters": len(transcription.text)},
            )
            return transcription.text

        except TranscriptionError:
            raise
        except Exception as e:
            logger.exception("AssemblyAI transcription failed")
            raise TranscriptionError("AssemblyAI transcription failed", e) from e
