"""Handler that turns a recorded question into a persona video."""

import base64
import binascii

from abe_common.logging import setup_logging

from config import PipelineConfig, VideoScriptMode
from domain import InboundRequest, PipelineResult
from exceptions import AuthenticationError, ConfigurationError, ValidationError
from infrastructure.interfaces import (
    ResponseGenerator,
    SpeechSynthesizer,
    TranscriptionService,
    VideoGenerator,
)

logger = setup_logging()


class QuestionHandler:
    """Orchestrates transcription, persona reply, speech and video stages."""

    def __init__(
        self,
        access_password: str,
        transcription_service: TranscriptionService,
        response_generator: ResponseGenerator,
        video_generator: VideoGenerator,
        config: PipelineConfig,
        speech_synthesizer: SpeechSynthesizer | None = None,
    ):
        if config.video_mode == VideoScriptMode.AUDIO and speech_synthesizer is None:
            raise ValueError("Audio video mode requires a speech synthesizer")

        self._access_password = access_password
        self._transcription_service = transcription_service
        self._response_generator = response_generator
        self._video_generator = video_generator
        self._speech_synthesizer = speech_synthesizer
        self._config = config

    def process(self, request: InboundRequest) -> PipelineResult:
        """
        Runs the full pipeline for one caller request.

        Stages run strictly in order and the first failure aborts the run;
        no partial result is ever returned.

        Args:
            request: The caller's base64 audio and access password.

        Returns:
            PipelineResult with the transcription, reply and video URL.

        Raises:
            ConfigurationError: If the access password is not configured.
            AuthenticationError: If the caller's password does not match.
            ValidationError: If the audio is missing or not valid base64.
            Exception: Any stage error, propagated unchanged.
        """
        self.authenticate(request.access_password)
        audio_data = self._decode_audio(request.audio)

        logger.info("Transcribing audio", extra={"audio_bytes": len(audio_data)})
        transcript = self._transcription_service.transcribe(
            audio_data, self._config.audio_format
        )

        logger.info("Generating persona reply")
        reply = self._response_generator.generate(transcript.text)

        logger.info(
            "Generating video", extra={"video_mode": self._config.video_mode.value}
        )
        if self._config.video_mode == VideoScriptMode.AUDIO:
            audio = self._speech_synthesizer.synthesize(reply.text)
            video_url = self._video_generator.generate_from_audio(audio)
        else:
            video_url = self._video_generator.generate_from_text(reply.text)

        logger.info("Question answered", extra={"word_count": reply.word_count})

        return PipelineResult(
            transcription=transcript.text,
            response=reply.text,
            video_url=video_url,
        )

    def authenticate(self, access_password: str | None) -> None:
        """Plain equality gate; not a constant-time comparison."""
        if not self._access_password:
            raise ConfigurationError("Access password")
        if not access_password or access_password != self._access_password:
            logger.warning("Rejected request with invalid access password")
            raise AuthenticationError()

    def _decode_audio(self, audio: str) -> bytes:
        if not audio:
            raise ValidationError("Audio data is required")
        try:
            audio_data = base64.b64decode(audio, validate=True)
        except binascii.Error as e:
            raise ValidationError("Audio data must be base64 encoded") from e
        if not audio_data:
            raise ValidationError("Audio data is required")
        return audio_data
