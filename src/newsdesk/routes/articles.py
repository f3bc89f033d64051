"""Article generation endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from newsdesk.dependencies import get_article_flow
from newsdesk.handlers import ArticleGenerationFlow
from newsdesk.logging import setup_logging
from newsdesk.response_models import ArticleRequest, ArticleResponse

logger = setup_logging(__name__)

router = APIRouter(prefix="/articles", tags=["articles"])

ArticleFlowDep = Annotated[ArticleGenerationFlow, Depends(get_article_flow)]


@router.post("/generate", response_model=ArticleResponse)
def generate_article(request: ArticleRequest, flow: ArticleFlowDep) -> ArticleResponse:
    """Turns a transcript and optional notes into a titled article."""
    if not request.transcript.strip():
        raise HTTPException(status_code=400, detail="Transcript is required")

    logger.info(
        "Received article generation request",
        extra={"transcript_length": len(request.transcript)},
    )

    outcome = flow.generate_article(request.transcript, request.notes)
    return ArticleResponse(
        success=outcome.success,
        title=outcome.title,
        content=outcome.content,
        provenance=outcome.provenance,
    )
