"""ElevenLabs implementation of the SpeechSynthesizer interface."""

import time
from typing import Callable

import httpx
from abe_common.logging import setup_logging
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from config import ElevenLabsConfig
from domain.models import SynthesizedAudio
from exceptions import ConfigurationError, RateLimitExceededError, SynthesisServiceError

from .interfaces import SpeechSynthesizer

logger = setup_logging()

SYSTEM_BUSY_SIGNATURE = "system_busy"


class _RateLimited(Exception):
    """One rate-limited attempt; retried until attempts run out."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(body)


def _log_backoff(retry_state: RetryCallState) -> None:
    logger.warning(
        "ElevenLabs rate limited, backing off",
        extra={
            "attempt": retry_state.attempt_number,
            "delay_seconds": retry_state.next_action.sleep,
        },
    )


class ElevenLabsSynthesizer(SpeechSynthesizer):
    """Synthesizes mp3 speech with a configured ElevenLabs voice."""

    def __init__(
        self,
        client: httpx.Client,
        config: ElevenLabsConfig,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._client = client
        self._config = config
        self._sleep = sleep

    def synthesize(self, text: str) -> SynthesizedAudio:
        """
        Requests speech for the text, retrying only while rate limited.

        Backoff doubles from the initial delay with no jitter; the last
        rate-limit response is surfaced once attempts are exhausted.
        """
        if not self._config.api_key:
            raise ConfigurationError("ElevenLabs API key")
        if not self._config.voice_id:
            raise ConfigurationError("ElevenLabs voice ID")

        retryer = Retrying(
            retry=retry_if_exception_type(_RateLimited),
            stop=stop_after_attempt(self._config.max_attempts),
            wait=wait_exponential(multiplier=self._config.initial_backoff_seconds),
            sleep=self._sleep,
            before_sleep=_log_backoff,
            reraise=True,
        )
        try:
            payload = retryer(self._request_speech, text)
        except _RateLimited as e:
            logger.error(
                "ElevenLabs retries exhausted",
                extra={"attempts": self._config.max_attempts},
            )
            raise RateLimitExceededError(
                self._config.max_attempts,
                status_code=e.status_code,
                body=e.body,
                cause=e,
            ) from e

        logger.info(
            "Speech synthesized",
            extra={"characters": len(text), "audio_bytes": len(payload)},
        )
        return SynthesizedAudio(payload=payload)

    def _request_speech(self, text: str) -> bytes:
        """Performs a single synthesis attempt."""
        body = {
            "text": text,
            "model_id": self._config.model_id,
            "voice_settings": {
                "stability": self._config.stability,
                "similarity_boost": self._config.similarity_boost,
                "style": self._config.style,
                "use_speaker_boost": self._config.use_speaker_boost,
            },
        }
        try:
            response = self._client.post(
                f"/text-to-speech/{self._config.voice_id}",
                headers={
                    "xi-api-key": self._config.api_key,
                    "Accept": "audio/mpeg",
                },
                json=body,
            )
        except httpx.HTTPError as e:
            logger.exception("ElevenLabs request failed")
            raise SynthesisServiceError(str(e), cause=e) from e

        if response.is_error:
            if self._is_rate_limited(response):
                raise _RateLimited(response.status_code, response.text)
            logger.error(
                "ElevenLabs returned an error",
                extra={"status_code": response.status_code},
            )
            raise SynthesisServiceError(
                response.text,
                status_code=response.status_code,
                body=response.text,
            )

        if not response.content:
            raise SynthesisServiceError("Empty audio response")
        return response.content

    def _is_rate_limited(self, response: httpx.Response) -> bool:
        return response.status_code == 429 or SYSTEM_BUSY_SIGNATURE in response.text
