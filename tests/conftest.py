import json
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from newsdesk.config import CredentialsConfig, ResolverConfig, TranscriptionConfig
from newsdesk.domain import FallbackContentProvider, JobAck, JobStatus, ResponseParser
from newsdesk.exceptions import SecretStoreError, StorageDownloadError
from newsdesk.handlers import (
    ArticleGenerationFlow,
    ConfigResolver,
    TranscriptionBackends,
    TranscriptionOrchestrator,
)
from newsdesk.infrastructure.interfaces import (
    LLMService,
    SecretStore,
    StorageClient,
    TranscriptionJobService,
)


class FakeClock:
    def __init__(self):
        self.now = datetime(2026, 1, 5, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class FakeSleep:
    def __init__(self, clock: FakeClock):
        self.clock = clock
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        self.clock.advance(seconds)


class InMemoryStorage(StorageClient):
    def __init__(self, bucket_name: str = "test-bucket", fail_put: Exception | None = None):
        self._bucket_name = bucket_name
        self.fail_put = fail_put
        self.objects: dict[str, bytes] = {}
        self.content_types: dict[str, str] = {}

    @property
    def bucket_name(self) -> str:
        return self._bucket_name

    def put(self, key: str, data: bytes, content_type: str) -> None:
        if self.fail_put is not None:
            raise self.fail_put
        self.objects[key] = data
        self.content_types[key] = content_type

    def get(self, key: str) -> bytes:
        if key not in self.objects:
            raise StorageDownloadError(key, KeyError(key))
        return self.objects[key]

    def location(self, key: str) -> str:
        return f"https://storage.test/{self._bucket_name}/{key}"


class FakeJobService(TranscriptionJobService):
    """Completes jobs after ``pending_polls`` in-progress reports."""

    def __init__(
        self,
        storage: InMemoryStorage,
        transcript: str = "hello world",
        pending_polls: int = 0,
        failure_reason: str | None = None,
        submit_error: Exception | None = None,
    ):
        self.storage = storage
        self.transcript = transcript
        self.pending_polls = pending_polls
        self.failure_reason = failure_reason
        self.submit_error = submit_error
        self.submissions: list[tuple[str, str, str]] = []
        self.status_calls = 0

    def submit(self, job_name: str, media_location: str, output_location: str) -> JobAck:
        if self.submit_error is not None:
            raise self.submit_error
        self.submissions.append((job_name, media_location, output_location))
        return JobAck(job_id=f"id-{job_name}")

    def get_status(self, job_id: str) -> JobStatus:
        self.status_calls += 1
        if self.status_calls <= self.pending_polls:
            return JobStatus(status="IN_PROGRESS")
        if self.failure_reason is not None:
            return JobStatus(status="FAILED", failure_reason=self.failure_reason)

        _, _, output_location = self.submissions[-1]
        envelope = {"results": {"transcripts": [{"transcript": self.transcript}]}}
        self.storage.put(output_location, json.dumps(envelope).encode(), "application/json")
        return JobStatus(
            status="COMPLETED",
            output_location=f"s3://{self.storage.bucket_name}/{output_location}",
        )


class FakeSecretStore(SecretStore):
    def __init__(self, secrets: dict[str, dict[str, Any]] | None = None, error: bool = False):
        self.secrets = secrets or {}
        self.error = error
        self.calls: list[str] = []

    def get(self, secret_name: str) -> dict[str, Any]:
        self.calls.append(secret_name)
        if self.error:
            raise SecretStoreError(secret_name, ConnectionError("unreachable"))
        if secret_name not in self.secrets:
            raise SecretStoreError(secret_name, KeyError(secret_name))
        return self.secrets[secret_name]


class FakeLLM(LLMService):
    def __init__(self, response: str = "", error: Exception | None = None):
        self.response = response
        self.error = error
        self.prompts: list[str] = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


ENV_CREDENTIALS = CredentialsConfig(
    access_key_id="env-access",
    secret_access_key="env-secret",
    region="us-east-2",
    model_id="gemini-test",
    model_api_key="env-model-key",
    bucket_name="env-bucket",
)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sleep(clock: FakeClock) -> FakeSleep:
    return FakeSleep(clock)


@pytest.fixture
def secret_store() -> FakeSecretStore:
    return FakeSecretStore()


@pytest.fixture
def resolver(secret_store: FakeSecretStore, clock: FakeClock) -> ConfigResolver:
    return ConfigResolver(secret_store, ENV_CREDENTIALS, ResolverConfig(), clock=clock)


@pytest.fixture
def fallback() -> FallbackContentProvider:
    return FallbackContentProvider()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def jobs(storage: InMemoryStorage) -> FakeJobService:
    return FakeJobService(storage)


@pytest.fixture
def transcription_settings() -> TranscriptionConfig:
    return TranscriptionConfig(max_attempts=5, poll_interval_ms=2000)


@pytest.fixture
def orchestrator(
    resolver: ConfigResolver,
    storage: InMemoryStorage,
    jobs: FakeJobService,
    fallback: FallbackContentProvider,
    transcription_settings: TranscriptionConfig,
    clock: FakeClock,
    sleep: FakeSleep,
) -> TranscriptionOrchestrator:
    return TranscriptionOrchestrator(
        resolver,
        lambda config: TranscriptionBackends(storage=storage, jobs=jobs),
        fallback,
        transcription_settings,
        clock=clock,
        sleep=sleep,
    )


@pytest.fixture
def llm() -> FakeLLM:
    return FakeLLM(response=json.dumps({"title": "Headline", "content": "Body text."}))


@pytest.fixture
def article_flow(
    resolver: ConfigResolver, llm: FakeLLM, fallback: FallbackContentProvider
) -> ArticleGenerationFlow:
    return ArticleGenerationFlow(resolver, lambda config: llm, ResponseParser(), fallback)
