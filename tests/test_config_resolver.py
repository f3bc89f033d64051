from datetime import datetime

import pytest
from conftest import ENV_CREDENTIALS, FakeClock, FakeSecretStore

from newsdesk.config import CredentialsConfig, ResolverConfig
from newsdesk.domain import Configuration
from newsdesk.exceptions import ConfigurationError
from newsdesk.handlers import ConfigResolver
from newsdesk.handlers.config_resolver import (
    FALLBACK_ACCESS_KEY_ID,
    ConfigProvider,
    StaticFallbackProvider,
)

NO_ENV = CredentialsConfig()

SECRETS = {
    "newsdesk/credentials": {
        "accessKeyId": "store-access",
        "secretAccessKey": "store-secret",
        "region": "eu-west-1",
    },
    "newsdesk/model-config": {"modelId": "gemini-store", "apiKey": "store-model-key"},
    "newsdesk/storage-config": {},
}


class CountingProvider(ConfigProvider):
    source = "environment"

    def __init__(self):
        self.calls = 0

    def try_resolve(self, resolved_at: datetime) -> Configuration:
        self.calls += 1
        return StaticFallbackProvider(ENV_CREDENTIALS).try_resolve(resolved_at).model_copy(
            update={"source": "environment"}
        )


def test_environment_wins_even_when_secret_store_is_down():
    store = FakeSecretStore(error=True)
    resolver = ConfigResolver(store, ENV_CREDENTIALS, ResolverConfig(), clock=FakeClock())

    config = resolver.resolve()

    assert config.source == "environment"
    assert config.access_key_id == "env-access"
    assert config.bucket_name == "env-bucket"
    assert store.calls == []


def test_secret_store_used_without_environment_credentials():
    resolver = ConfigResolver(
        FakeSecretStore(SECRETS), NO_ENV, ResolverConfig(), clock=FakeClock()
    )

    config = resolver.resolve()

    assert config.source == "secret-store"
    assert config.access_key_id == "store-access"
    assert config.region == "eu-west-1"
    assert config.model_id == "gemini-store"
    assert config.model_api_key == "store-model-key"
    assert config.bucket_name == NO_ENV.bucket_name


def test_unreachable_secret_store_falls_back_to_placeholders():
    resolver = ConfigResolver(
        FakeSecretStore(error=True), NO_ENV, ResolverConfig(), clock=FakeClock()
    )

    config = resolver.resolve()

    assert config.source == "fallback"
    assert config.access_key_id == FALLBACK_ACCESS_KEY_ID


def test_incomplete_secret_is_treated_as_absent():
    secrets = dict(SECRETS)
    secrets["newsdesk/credentials"] = {"accessKeyId": "only-half"}
    resolver = ConfigResolver(
        FakeSecretStore(secrets), NO_ENV, ResolverConfig(), clock=FakeClock()
    )

    assert resolver.resolve().source == "fallback"


def test_no_source_without_fallback_raises():
    resolver = ConfigResolver(
        FakeSecretStore(error=True),
        NO_ENV,
        ResolverConfig(allow_fallback=False),
        clock=FakeClock(),
    )

    with pytest.raises(ConfigurationError):
        resolver.resolve()


def test_strict_mode_rejects_fallback_configuration():
    resolver = ConfigResolver(
        FakeSecretStore(error=True), NO_ENV, ResolverConfig(), clock=FakeClock()
    )

    with pytest.raises(ConfigurationError):
        resolver.resolve(strict=True)


def test_strict_mode_accepts_environment_configuration(resolver):
    assert resolver.resolve(strict=True).source == "environment"


def test_resolution_is_cached_within_ttl():
    clock = FakeClock()
    provider = CountingProvider()
    resolver = ConfigResolver(
        FakeSecretStore(), NO_ENV, ResolverConfig(), clock=clock, providers=[provider]
    )

    first = resolver.resolve()
    clock.advance(299)
    second = resolver.resolve()

    assert first.resolved_at == second.resolved_at
    assert provider.calls == 1


def test_resolution_is_refreshed_after_ttl():
    clock = FakeClock()
    provider = CountingProvider()
    resolver = ConfigResolver(
        FakeSecretStore(), NO_ENV, ResolverConfig(), clock=clock, providers=[provider]
    )

    first = resolver.resolve()
    clock.advance(301)
    second = resolver.resolve()

    assert second.resolved_at > first.resolved_at
    assert provider.calls == 2


def test_get_secret_is_cached_until_ttl_expires():
    clock = FakeClock()
    store = FakeSecretStore(SECRETS)
    resolver = ConfigResolver(store, NO_ENV, ResolverConfig(), clock=clock)

    resolver.get_secret("newsdesk/credentials")
    resolver.get_secret("newsdesk/credentials")
    assert store.calls == ["newsdesk/credentials"]

    clock.advance(300)
    resolver.get_secret("newsdesk/credentials")
    assert store.calls == ["newsdesk/credentials", "newsdesk/credentials"]


def test_clear_cache_forces_refetch():
    clock = FakeClock()
    store = FakeSecretStore(SECRETS)
    resolver = ConfigResolver(store, NO_ENV, ResolverConfig(), clock=clock)

    first = resolver.resolve()
    fetches = len(store.calls)
    resolver.clear_cache()
    clock.advance(1)
    second = resolver.resolve()

    assert second.resolved_at != first.resolved_at
    assert len(store.calls) == 2 * fetches


def test_summary_hides_credentials(resolver):
    summary = resolver.summary()

    assert summary["source"] == "environment"
    assert summary["has_credentials"] is True
    assert "env-secret" not in str(summary)
