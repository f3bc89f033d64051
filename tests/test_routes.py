import pytest
from conftest import FakeClock, FakeSecretStore
from fastapi import FastAPI
from fastapi.testclient import TestClient

from newsdesk.config import CredentialsConfig, ResolverConfig
from newsdesk.dependencies import get_article_flow, get_orchestrator, get_resolver
from newsdesk.handlers import ConfigResolver
from newsdesk.routes import articles_router, diagnostics_router, transcribe_router


@pytest.fixture
def app(orchestrator, article_flow, resolver) -> FastAPI:
    app = FastAPI()
    app.include_router(transcribe_router)
    app.include_router(articles_router)
    app.include_router(diagnostics_router)
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_article_flow] = lambda: article_flow
    app.dependency_overrides[get_resolver] = lambda: resolver
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


def test_transcribe_returns_live_transcript(client):
    response = client.post(
        "/transcribe", files={"audio": ("clip.webm", b"\x01" * 2048, "audio/webm")}
    )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "transcript": "hello world",
        "service": "assemblyai-job",
        "provenance": "live",
    }


def test_transcribe_rejects_non_audio(client):
    response = client.post(
        "/transcribe", files={"audio": ("notes.txt", b"hello", "text/plain")}
    )

    assert response.status_code == 422


def test_transcribe_rejects_empty_upload(client):
    response = client.post("/transcribe", files={"audio": ("clip.webm", b"", "audio/webm")})

    assert response.status_code == 400


def test_transcribe_requires_file(client):
    response = client.post("/transcribe")

    assert response.status_code == 422


def test_generate_article(client):
    response = client.post(
        "/articles/generate",
        json={"transcript": "The bakery hired ten people.", "notes": "Use first names."},
    )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "title": "Headline",
        "content": "Body text.",
        "provenance": "strict",
    }


def test_generate_article_rejects_blank_transcript(client):
    response = client.post("/articles/generate", json={"transcript": "   "})

    assert response.status_code == 400


def test_config_summary(client):
    response = client.get("/diagnostics/config")

    assert response.status_code == 200
    body = response.json()
    assert body["source"] == "environment"
    assert body["has_credentials"] is True
    assert body["bucket_name"] == "env-bucket"
    assert "env-secret" not in response.text


def test_strict_config_check_rejects_fallback(app, client):
    fallback_resolver = ConfigResolver(
        FakeSecretStore(error=True), CredentialsConfig(), ResolverConfig(), clock=FakeClock()
    )
    app.dependency_overrides[get_resolver] = lambda: fallback_resolver

    assert client.get("/diagnostics/config").json()["source"] == "fallback"
    assert client.get("/diagnostics/config", params={"strict": "true"}).status_code == 503
