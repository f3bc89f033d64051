"""Resolution of credentials and model settings from prioritized sources."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from newsdesk.config import CredentialsConfig, ResolverConfig
from newsdesk.domain.cache import Cache, Clock, utc_now
from newsdesk.domain.models import CachedSecret, ConfigSource, Configuration
from newsdesk.exceptions import ConfigurationError
from newsdesk.infrastructure.interfaces import SecretStore
from newsdesk.logging import setup_logging

logger = setup_logging(__name__)

_ACTIVE_KEY = "active"

FALLBACK_ACCESS_KEY_ID = "fallback-access-key"
FALLBACK_SECRET_ACCESS_KEY = "fallback-secret-key"


class ConfigProvider(ABC):
    """A single configuration source."""

    source: ConfigSource

    @abstractmethod
    def try_resolve(self, resolved_at: datetime) -> Configuration:
        """
        Builds a complete configuration from this source.

        Raises:
            ConfigurationError: If the source is absent or incomplete.
        """


class EnvironmentProvider(ConfigProvider):
    """Uses an explicit credential pair supplied through the environment."""

    source: ConfigSource = "environment"

    def __init__(self, credentials: CredentialsConfig):
        self._credentials = credentials

    def try_resolve(self, resolved_at: datetime) -> Configuration:
        creds = self._credentials
        if not (creds.access_key_id and creds.secret_access_key):
            raise ConfigurationError("environment credential pair not set")

        return Configuration(
            region=creds.region,
            access_key_id=creds.access_key_id,
            secret_access_key=creds.secret_access_key,
            model_id=creds.model_id,
            model_api_key=creds.model_api_key,
            bucket_name=creds.bucket_name,
            source=self.source,
            resolved_at=resolved_at,
        )


class SecretStoreProvider(ConfigProvider):
    """Assembles configuration from the credentials, model and storage secrets."""

    source: ConfigSource = "secret-store"

    def __init__(
        self,
        get_secret: Callable[[str], dict[str, Any]],
        settings: ResolverConfig,
        defaults: CredentialsConfig,
    ):
        self._get_secret = get_secret
        self._settings = settings
        self._defaults = defaults

    def try_resolve(self, resolved_at: datetime) -> Configuration:
        credentials = self._get_secret(self._settings.credentials_secret)
        model = self._get_secret(self._settings.model_secret)
        storage = self._get_secret(self._settings.storage_secret)

        access_key_id = credentials.get("accessKeyId")
        secret_access_key = credentials.get("secretAccessKey")
        if not (access_key_id and secret_access_key):
            raise ConfigurationError(
                f"secret '{self._settings.credentials_secret}' lacks a credential pair"
            )

        return Configuration(
            region=credentials.get("region") or self._defaults.region,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            model_id=model.get("modelId") or self._defaults.model_id,
            model_api_key=model.get("apiKey") or "",
            bucket_name=storage.get("bucketName") or self._defaults.bucket_name,
            source=self.source,
            resolved_at=resolved_at,
        )


class StaticFallbackProvider(ConfigProvider):
    """Placeholder configuration for development; never fails."""

    source: ConfigSource = "fallback"

    def __init__(self, defaults: CredentialsConfig):
        self._defaults = defaults

    def try_resolve(self, resolved_at: datetime) -> Configuration:
        return Configuration(
            region=self._defaults.region,
            access_key_id=FALLBACK_ACCESS_KEY_ID,
            secret_access_key=FALLBACK_SECRET_ACCESS_KEY,
            model_id=self._defaults.model_id,
            model_api_key="",
            bucket_name=self._defaults.bucket_name,
            source=self.source,
            resolved_at=resolved_at,
        )


class ConfigResolver:
    """
    Resolves the active configuration and caches it, along with secrets.

    Providers are tried in list order: environment credentials, the secret
    store, then the static fallback (when enabled). A provider that raises
    is logged and skipped. Resolved configuration and individual secrets are
    cached for the configured TTL using the injected clock.
    """

    def __init__(
        self,
        secret_store: SecretStore,
        credentials: CredentialsConfig,
        settings: ResolverConfig,
        clock: Clock = utc_now,
        providers: list[ConfigProvider] | None = None,
    ):
        ttl = timedelta(seconds=settings.cache_ttl_seconds)
        self._secret_store = secret_store
        self._clock = clock
        self._config_cache: Cache[Configuration] = Cache(ttl, clock)
        self._secret_cache: Cache[CachedSecret] = Cache(ttl, clock)

        if providers is None:
            providers = [
                EnvironmentProvider(credentials),
                SecretStoreProvider(self.get_secret, settings, credentials),
            ]
            if settings.allow_fallback:
                providers.append(StaticFallbackProvider(credentials))
        self._providers = providers

    def resolve(self, strict: bool = False) -> Configuration:
        """
        Returns the active configuration.

        Args:
            strict: Reject fallback-sourced configuration.

        Raises:
            ConfigurationError: If no provider produced a configuration, or
                if ``strict`` is set and the configuration is a placeholder.
        """
        config = self._config_cache.get(_ACTIVE_KEY)
        if config is None:
            config = self._resolve_uncached()
            self._config_cache.set(_ACTIVE_KEY, config)

        if strict and config.source == "fallback":
            raise ConfigurationError(
                "fallback configuration is not valid for production use"
            )
        return config

    def get_secret(self, secret_name: str) -> dict[str, Any]:
        """
        Returns a secret, reading the store only when the cached copy expired.

        Raises:
            SecretStoreError: If the store cannot provide the secret.
        """
        cached = self._secret_cache.get(secret_name)
        if cached is not None:
            return cached.value

        value = self._secret_store.get(secret_name)
        self._secret_cache.set(
            secret_name,
            CachedSecret(secret_name=secret_name, value=value, fetched_at=self._clock()),
        )
        return value

    def clear_cache(self) -> None:
        """Drops the cached configuration and all cached secrets."""
        self._config_cache.clear()
        self._secret_cache.clear()
        logger.info("Configuration and secret caches cleared")

    def summary(self) -> dict[str, Any]:
        """Describes the active configuration without exposing credentials."""
        config = self.resolve()
        return {
            "source": config.source,
            "region": config.region,
            "has_credentials": bool(config.access_key_id and config.secret_access_key),
            "model_id": config.model_id,
            "bucket_name": config.bucket_name,
            "resolved_at": config.resolved_at,
        }

    def _resolve_uncached(self) -> Configuration:
        resolved_at = self._clock()
        for provider in self._providers:
            try:
                config = provider.try_resolve(resolved_at)
            except Exception as e:
                logger.warning(
                    "Configuration source unavailable",
                    extra={"source": provider.source, "error": str(e)},
                )
                continue

            logger.info("Configuration resolved", extra={"source": config.source})
            return config

        raise ConfigurationError("no configuration source produced a complete configuration")
