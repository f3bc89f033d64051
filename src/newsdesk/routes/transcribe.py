"""Audio transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, UploadFile

from newsdesk.dependencies import get_orchestrator
from newsdesk.handlers import TranscriptionOrchestrator
from newsdesk.logging import setup_logging
from newsdesk.response_models import TranscribeResponse

logger = setup_logging(__name__)

router = APIRouter(tags=["transcription"])

OrchestratorDep = Annotated[TranscriptionOrchestrator, Depends(get_orchestrator)]


@router.post("/transcribe", response_model=TranscribeResponse)
def transcribe(audio: UploadFile, orchestrator: OrchestratorDep) -> TranscribeResponse:
    """
    Transcribes an uploaded audio clip.

    Always answers with a usable transcript; ``provenance`` and ``service``
    tell live output apart from the canned fallback.
    """
    content_type = audio.content_type or ""
    if not content_type.startswith("audio/"):
        raise HTTPException(status_code=422, detail="File must be an audio file")

    audio_data = audio.file.read()
    if not audio_data:
        raise HTTPException(status_code=400, detail="Audio file is empty")

    logger.info(
        "Received transcription request",
        extra={"file_name": audio.filename, "size": len(audio_data)},
    )

    outcome = orchestrator.transcribe(audio_data, content_type, audio.filename)
    return TranscribeResponse(
        success=outcome.success,
        transcript=outcome.transcript,
        service=outcome.service,
        provenance=outcome.provenance,
    )
