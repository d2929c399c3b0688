"""D-ID implementation of the VideoGenerator interface."""

import base64
import time
from typing import Any, Callable

import httpx
from abe_common.logging import setup_logging

from config import DIDConfig
from domain.models import JobStatus, SynthesizedAudio, VideoJob
from exceptions import (
    ConfigurationError,
    VideoGenerationFailedError,
    VideoGenerationTimeoutError,
    VideoServiceError,
)

from .interfaces import VideoGenerator

logger = setup_logging()


class DIDVideoGenerator(VideoGenerator):
    """
    Creates talking-head videos through the D-ID talks API.

    A talk is submitted once, then its status is re-queried at a fixed
    interval until it is done, fails, or the poll ceiling is reached.
    Status queries are read-only, so repeating one is always safe.
    """

    def __init__(
        self,
        client: httpx.Client,
        config: DIDConfig,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._client = client
        self._config = config
        self._sleep = sleep

    def generate_from_text(self, text: str) -> str:
        script = {
            "type": "text",
            "input": text,
            "provider": {
                "type": self._config.voice_provider,
                "voice_id": self._config.voice_id,
            },
        }
        return self._generate(script)

    def generate_from_audio(self, audio: SynthesizedAudio) -> str:
        encoded = base64.b64encode(audio.payload).decode("ascii")
        script = {
            "type": "audio",
            "audio_url": f"data:{audio.media_type};base64,{encoded}",
        }
        return self._generate(script)

    def _generate(self, script: dict[str, Any]) -> str:
        if not self._config.api_key:
            raise ConfigurationError("D-ID API key")

        job = self._submit(script)
        return self._wait_for_result(job)

    def _submit(self, script: dict[str, Any]) -> VideoJob:
        """Creates the talk and returns its initial state."""
        payload = {"script": script, "source_url": self._config.source_url}
        response = self._request("POST", "/talks", json=payload)
        job = self._parse_job(self._json(response))
        logger.info(
            "D-ID talk created",
            extra={"job_id": job.job_id, "script_type": script["type"]},
        )
        return job

    def _wait_for_result(self, job: VideoJob) -> str:
        """
        Polls the talk until it reaches a terminal state.

        Raises:
            VideoGenerationFailedError: If the talk ends in error.
            VideoGenerationTimeoutError: If every poll reports it still pending.
            VideoServiceError: If a poll fails or a finished talk has no URL.
        """
        max_attempts = self._config.max_poll_attempts
        for attempt in range(1, max_attempts + 1):
            self._sleep(self._config.poll_interval_seconds)
            job = self._fetch_status(job.job_id)
            logger.info(
                "D-ID talk polled",
                extra={
                    "job_id": job.job_id,
                    "status": job.status.value,
                    "attempt": attempt,
                    "max_attempts": max_attempts,
                },
            )

            if job.status == JobStatus.DONE:
                if not job.result_url:
                    raise VideoServiceError("video URL not found in response")
                return job.result_url
            if job.status == JobStatus.ERROR:
                raise VideoGenerationFailedError(job.job_id, job.error_message)

        logger.error(
            "D-ID talk did not finish in time",
            extra={"job_id": job.job_id, "attempts": max_attempts},
        )
        raise VideoGenerationTimeoutError(job.job_id, max_attempts)

    def _fetch_status(self, job_id: str) -> VideoJob:
        response = self._request("GET", f"/talks/{job_id}")
        return self._parse_job(self._json(response), job_id)

    def _parse_job(self, data: dict[str, Any], job_id: str | None = None) -> VideoJob:
        """
        Normalizes a talk payload into a VideoJob.

        Finished talks report their URL either as `result.video_url` or as a
        top-level `result_url`; whichever is present becomes `result_url`.
        """
        resolved_id = data.get("id") or job_id
        if not resolved_id:
            raise VideoServiceError("talk id not found in response")

        result = data.get("result")
        if not isinstance(result, dict):
            result = {}
        result_url = result.get("video_url") or data.get("result_url")

        error = data.get("error")
        error_message = None
        if isinstance(error, dict):
            error_message = error.get("description") or error.get("kind")
        elif error:
            error_message = str(error)

        return VideoJob(
            job_id=resolved_id,
            status=JobStatus.from_provider(data.get("status")),
            result_url=result_url,
            error_message=error_message,
        )

    def _json(self, response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise VideoServiceError("malformed response", cause=e) from e
        if not isinstance(data, dict):
            raise VideoServiceError("malformed response")
        return data

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(
                method, path, headers=self._headers(), **kwargs
            )
        except httpx.HTTPError as e:
            logger.exception("D-ID request failed", extra={"path": path})
            raise VideoServiceError(str(e), cause=e) from e

        if response.is_error:
            logger.error(
                "D-ID returned an error",
                extra={"path": path, "status_code": response.status_code},
            )
            raise VideoServiceError(
                response.text,
                status_code=response.status_code,
                body=response.text,
            )
        return response

    def _headers(self) -> dict[str, str]:
        token = base64.b64encode(self._config.api_key.encode("utf-8")).decode("ascii")
        return {
            "Authorization": f"Basic {token}",
            "Accept": "application/json",
            "User-Agent": self._config.user_agent,
        }
