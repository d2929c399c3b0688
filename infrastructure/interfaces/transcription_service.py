"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from domain.models import Transcript


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    def transcribe(self, audio_data: bytes, audio_format: str) -> Transcript:
        """
        Transcribes recorded audio into trimmed text.

        Args:
            audio_data: Raw audio file bytes.
            audio_format: Container hint such as "webm".

        Returns:
            Transcript with surrounding whitespace removed.

        Raises:
            ConfigurationError: If the service credential is missing.
            TranscriptionServiceError: If transcription fails.
        """
        pass
