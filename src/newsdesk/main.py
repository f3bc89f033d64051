"""FastAPI application entry point."""

from ddtrace import patch_all
from fastapi import FastAPI

from newsdesk.routes import articles_router, diagnostics_router, transcribe_router

patch_all()

app = FastAPI(title="Newsdesk Orchestration Service")
app.include_router(transcribe_router)
app.include_router(articles_router)
app.include_router(diagnostics_router)
