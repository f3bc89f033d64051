"""Abstract interface for object storage operations."""

from abc import ABC, abstractmethod


class StorageClient(ABC):
    """Abstract base class for object storage backends."""

    @property
    @abstractmethod
    def bucket_name(self) -> str:
        """The bucket all keys of this client live in."""

    @abstractmethod
    def put(self, key: str, data: bytes, content_type: str) -> None:
        """
        Stores an object.

        Args:
            key: The destination object key.
            data: The object contents.
            content_type: MIME type of the object.

        Raises:
            UploadError: If the upload fails.
        """

    @abstractmethod
    def get(self, key: str) -> bytes:
        """
        Reads an object.

        Args:
            key: The object key.

        Returns:
            The object contents.

        Raises:
            StorageDownloadError: If the download fails.
        """

    @abstractmethod
    def location(self, key: str) -> str:
        """
        Returns a location for the object that an external service can read.

        Args:
            key: The object key.

        Returns:
            A URL or URI pointing at the object.

        Raises:
            StorageDownloadError: If no location can be produced.
        """
