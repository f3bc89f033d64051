"""Abstract interface for the asynchronous transcription job control plane."""

from abc import ABC, abstractmethod

from newsdesk.domain.models import JobAck, JobStatus


class TranscriptionJobService(ABC):
    """Abstract base class for asynchronous transcription backends."""

    @abstractmethod
    def submit(
        self, job_name: str, media_location: str, output_location: str
    ) -> JobAck:
        """
        Starts a transcription job.

        Args:
            job_name: Unique name for the job.
            media_location: Where the service can read the audio.
            output_location: Object key the transcript envelope is written to.

        Returns:
            JobAck carrying the identifier used for status queries.

        Raises:
            JobSubmissionError: If the job is not accepted.
        """

    @abstractmethod
    def get_status(self, job_id: str) -> JobStatus:
        """
        Queries the current status of a job.

        Args:
            job_id: Identifier returned by ``submit``.

        Returns:
            JobStatus with the output location on completion or the failure
            reason on failure.

        Raises:
            JobStatusError: If the status cannot be queried.
        """
