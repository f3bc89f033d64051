"""Custom exceptions for the newsdesk orchestration layer."""


class ConfigurationError(Exception):
    """Raised when no usable configuration source is available."""

    def __init__(self, reason: str, cause: Exception | None = None):
        self.reason = reason
        self.cause = cause
        super().__init__(f"Configuration unavailable: {reason}")


class SecretStoreError(Exception):
    """Raised when a secret cannot be read from the secret store."""

    def __init__(self, secret_name: str, cause: Exception | None = None):
        self.secret_name = secret_name
        self.cause = cause
        super().__init__(f"Failed to read secret '{secret_name}'")


class UploadError(Exception):
    """Raised when uploading an object to storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to upload '{object_name}' to storage")


class StorageDownloadError(Exception):
    """Raised when downloading an object from storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to download '{object_name}' from storage")


class JobSubmissionError(Exception):
    """Raised when the job service does not accept a transcription job."""

    def __init__(self, job_name: str, cause: Exception | None = None):
        self.job_name = job_name
        self.cause = cause
        super().__init__(f"Failed to submit transcription job '{job_name}'")


class JobStatusError(Exception):
    """Raised when the status of a transcription job cannot be queried."""

    def __init__(self, job_id: str, cause: Exception | None = None):
        self.job_id = job_id
        self.cause = cause
        super().__init__(f"Failed to query status of transcription job '{job_id}'")


class JobFailedError(Exception):
    """Raised when the job service reports a failed transcription job."""

    def __init__(self, job_id: str, reason: str):
        self.job_id = job_id
        self.reason = reason
        super().__init__(f"Transcription job '{job_id}' failed: {reason}")


class TranscriptionTimeoutError(TimeoutError):
    """Raised when a job is still running after the polling budget is spent."""

    def __init__(self, job_id: str, attempts: int):
        self.job_id = job_id
        self.attempts = attempts
        super().__init__(
            f"Transcription job '{job_id}' did not finish after {attempts} attempts"
        )


class TranscriptDecodeError(Exception):
    """Raised when a job output object is not a readable transcript envelope."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to decode transcript output '{object_name}'")


class TranscriptionError(Exception):
    """Raised when direct audio transcription fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class LLMServiceError(Exception):
    """Raised when the model completion call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)
