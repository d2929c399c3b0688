"""OpenAI Whisper implementation of the TranscriptionService interface."""

import httpx
from abe_common.logging import setup_logging

from domain.models import Transcript
from exceptions import ConfigurationError, TranscriptionServiceError

from .interfaces import TranscriptionService

logger = setup_logging()


class WhisperTranscriber(TranscriptionService):
    """Handles audio transcription using the OpenAI transcription endpoint."""

    def __init__(self, client: httpx.Client, api_key: str, model: str = "whisper-1"):
        self._client = client
        self._api_key = api_key
        self._model = model

    def transcribe(self, audio_data: bytes, audio_format: str) -> Transcript:
        """
        Uploads the audio as a multipart file and returns the trimmed text.
        """
        if not self._api_key:
            raise ConfigurationError("OpenAI API key")

        files = {
            "file": (f"audio.{audio_format}", audio_data, f"audio/{audio_format}"),
        }
        try:
            response = self._client.post(
                "/audio/transcriptions",
                headers={"Authorization": f"Bearer {self._api_key}"},
                files=files,
                data={"model": self._model},
            )
        except httpx.HTTPError as e:
            logger.exception("Whisper request failed")
            raise TranscriptionServiceError(str(e), cause=e) from e

        if response.is_error:
            logger.error(
                "Whisper returned an error",
                extra={"status_code": response.status_code},
            )
            raise TranscriptionServiceError(
                response.text,
                status_code=response.status_code,
                body=response.text,
            )

        data = _parse_json(response)
        text = data.get("text")
        text = text.strip() if isinstance(text, str) else ""
        if not text:
            raise TranscriptionServiceError("Transcription returned no text")

        logger.info(
            "Audio transcription successful",
            extra={"audio_bytes": len(audio_data), "characters": len(text)},
        )
        return Transcript(text=text)


def _parse_json(response: httpx.Response) -> dict:
    try:
        data = response.json()
    except ValueError as e:
        raise TranscriptionServiceError("malformed response", cause=e) from e
    if not isinstance(data, dict):
        raise TranscriptionServiceError("malformed response")
    return data
