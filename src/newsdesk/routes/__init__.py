"""API routers."""

from newsdesk.routes.articles import router as articles_router
from newsdesk.routes.diagnostics import router as diagnostics_router
from newsdesk.routes.transcribe import router as transcribe_router

__all__ = ["articles_router", "diagnostics_router", "transcribe_router"]
