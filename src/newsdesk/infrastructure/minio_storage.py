"""MinIO implementation of the StorageClient interface."""

import io
from datetime import timedelta

from minio import Minio

from newsdesk.exceptions import StorageDownloadError, UploadError
from newsdesk.infrastructure.interfaces import StorageClient
from newsdesk.logging import setup_logging

logger = setup_logging(__name__)


class MinioStorageClient(StorageClient):
    """Handles object storage operations using MinIO or any S3 endpoint."""

    def __init__(
        self,
        client: Minio,
        bucket_name: str,
        url_expiry: timedelta = timedelta(hours=1),
    ):
        self._client = client
        self._bucket_name = bucket_name
        self._url_expiry = url_expiry

    @property
    def bucket_name(self) -> str:
        return self._bucket_name

    def put(self, key: str, data: bytes, content_type: str) -> None:
        try:
            self._client.put_object(
                bucket_name=self._bucket_name,
                object_name=key,
                data=io.BytesIO(data),
                length=len(data),
                content_type=content_type,
            )
            logger.info(
                "Object uploaded",
                extra={
                    "bucket_name": self._bucket_name,
                    "object_name": key,
                    "size": len(data),
                },
            )
        except Exception as e:
            logger.exception(
                "Object upload failed",
                extra={"bucket_name": self._bucket_name, "object_name": key},
            )
            raise UploadError(key, e) from e

    def get(self, key: str) -> bytes:
        try:
            response = self._client.get_object(self._bucket_name, key)
            try:
                data = response.data
            finally:
                response.close()
                response.release_conn()
            logger.info(
                "Object downloaded",
                extra={"bucket_name": self._bucket_name, "object_name": key},
            )
            return data
        except Exception as e:
            logger.exception(
                "Object download failed",
                extra={"bucket_name": self._bucket_name, "object_name": key},
            )
            raise StorageDownloadError(key, e) from e

    def location(self, key: str) -> str:
        """Returns a presigned GET URL so the job service can fetch the audio."""
        try:
            return self._client.presigned_get_object(
                self._bucket_name, key, expires=self._url_expiry
            )
        except Exception as e:
            logger.exception(
                "Presigned URL generation failed",
                extra={"bucket_name": self._bucket_name, "object_name": key},
            )
            raise StorageDownloadError(key, e) from e
