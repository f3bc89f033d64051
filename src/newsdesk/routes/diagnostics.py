"""Configuration diagnostics endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from newsdesk.dependencies import get_resolver
from newsdesk.exceptions import ConfigurationError
from newsdesk.handlers import ConfigResolver
from newsdesk.logging import setup_logging
from newsdesk.response_models import ConfigSummaryResponse

logger = setup_logging(__name__)

router = APIRouter(prefix="/diagnostics", tags=["diagnostics"])

ResolverDep = Annotated[ConfigResolver, Depends(get_resolver)]


@router.get("/config", response_model=ConfigSummaryResponse)
def config_summary(resolver: ResolverDep, strict: bool = False) -> ConfigSummaryResponse:
    """
    Reports where the active configuration came from.

    With ``strict`` set, placeholder (fallback) configuration is rejected.
    """
    try:
        resolver.resolve(strict=strict)
        return ConfigSummaryResponse(**resolver.summary())
    except ConfigurationError as e:
        logger.warning("Configuration check failed", extra={"reason": e.reason})
        raise HTTPException(status_code=503, detail=str(e))
