"""Redis secret store implementation."""

import json
from typing import Any

import redis

from newsdesk.exceptions import SecretStoreError
from newsdesk.infrastructure.interfaces import SecretStore
from newsdesk.logging import setup_logging

logger = setup_logging(__name__)


class RedisSecretStore(SecretStore):
    """Reads JSON secrets stored as string values in Redis."""

    def __init__(self, client: redis.Redis, key_prefix: str = "secrets:"):
        self._client = client
        self._key_prefix = key_prefix

    def get(self, secret_name: str) -> dict[str, Any]:
        """
        Retrieves and decodes a secret.

        Args:
            secret_name: Name of the secret, without the key prefix.

        Returns:
            The secret as a dictionary.

        Raises:
            SecretStoreError: If Redis fails, the key is missing, or the
                value is not a JSON object.
        """
        key = f"{self._key_prefix}{secret_name}"
        try:
            raw = self._client.get(key)
        except redis.RedisError as e:
            logger.exception("Redis secret read failed", extra={"secret_name": secret_name})
            raise SecretStoreError(secret_name, e) from e

        if raw is None:
            raise SecretStoreError(secret_name, KeyError(key))

        try:
            value = json.loads(raw)
        except json.JSONDecodeError as e:
            raise SecretStoreError(secret_name, e) from e

        if not isinstance(value, dict):
            raise SecretStoreError(
                secret_name, ValueError("Secret is not a JSON object")
            )

        logger.info("Secret retrieved", extra={"secret_name": secret_name})
        return value
