"""Abstract interface for secret lookups."""

from abc import ABC, abstractmethod
from typing import Any


class SecretStore(ABC):
    """Abstract base class for secret store backends."""

    @abstractmethod
    def get(self, secret_name: str) -> dict[str, Any]:
        """
        Reads a JSON secret.

        Args:
            secret_name: Name of the secret.

        Returns:
            The decoded secret.

        Raises:
            SecretStoreError: If the secret is missing, unreadable or not a
                JSON object.
        """
