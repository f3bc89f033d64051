"""AssemblyAI implementation of the TranscriptionJobService interface."""

import json

import httpx

from newsdesk.domain.models import JobAck, JobStatus
from newsdesk.exceptions import JobStatusError, JobSubmissionError
from newsdesk.infrastructure.interfaces import StorageClient, TranscriptionJobService
from newsdesk.logging import setup_logging

logger = setup_logging(__name__)

_IN_PROGRESS = {"queued", "processing"}


class AssemblyAIJobService(TranscriptionJobService):
    """
    Runs asynchronous transcription jobs against the AssemblyAI REST API.

    AssemblyAI keeps results on its side, so when a job completes this
    service writes the transcript into object storage as the standard
    ``results.transcripts[0].transcript`` envelope at the output location
    given on submission.

    The registry mapping job ids to their name and output location may be
    shared between instances, so a job submitted through one instance can
    be completed through another bound to newer storage credentials.
    """

    def __init__(
        self,
        http: httpx.Client,
        storage: StorageClient,
        language_code: str = "en",
        registry: dict[str, tuple[str, str]] | None = None,
    ):
        self._http = http
        self._storage = storage
        self._language_code = language_code
        self._jobs = {} if registry is None else registry

    def submit(
        self, job_name: str, media_location: str, output_location: str
    ) -> JobAck:
        try:
            response = self._http.post(
                "/v2/transcript",
                json={
                    "audio_url": media_location,
                    "language_code": self._language_code,
                },
            )
            response.raise_for_status()
            job_id = response.json()["id"]
        except Exception as e:
            logger.exception(
                "AssemblyAI job submission failed", extra={"job_name": job_name}
            )
            raise JobSubmissionError(job_name, e) from e

        self._jobs[job_id] = (job_name, output_location)
        logger.info(
            "AssemblyAI job submitted",
            extra={"job_name": job_name, "job_id": job_id},
        )
        return JobAck(job_id=job_id)

    def get_status(self, job_id: str) -> JobStatus:
        try:
            response = self._http.get(f"/v2/transcript/{job_id}")
            response.raise_for_status()
            body = response.json()
        except Exception as e:
            logger.exception("AssemblyAI status query failed", extra={"job_id": job_id})
            raise JobStatusError(job_id, e) from e

        status = body.get("status")
        if status in _IN_PROGRESS:
            return JobStatus(status="IN_PROGRESS")
        if status == "error":
            self._jobs.pop(job_id, None)
            return JobStatus(
                status="FAILED", failure_reason=body.get("error") or "Unknown error"
            )
        if status != "completed":
            raise JobStatusError(job_id, ValueError(f"Unexpected status '{status}'"))

        output_location = self._write_output(job_id, body.get("text") or "")
        return JobStatus(status="COMPLETED", output_location=output_location)

    def _write_output(self, job_id: str, text: str) -> str:
        """Stores the finished transcript envelope and returns its key."""
        try:
            job_name, output_location = self._jobs.pop(job_id)
        except KeyError as e:
            raise JobStatusError(job_id, e) from e

        envelope = {
            "jobName": job_name,
            "status": "COMPLETED",
            "results": {"transcripts": [{"transcript": text}]},
        }
        try:
            self._storage.put(
                output_location,
                json.dumps(envelope).encode("utf-8"),
                "application/json",
            )
        except Exception as e:
            self._jobs[job_id] = (job_name, output_location)
            raise JobStatusError(job_id, e) from e
        return output_location
