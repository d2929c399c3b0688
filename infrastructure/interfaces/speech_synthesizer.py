"""Abstract interface for speech synthesis."""

from abc import ABC, abstractmethod

from domain.models import SynthesizedAudio


class SpeechSynthesizer(ABC):
    """Abstract base class for text-to-speech backends."""

    @abstractmethod
    def synthesize(self, text: str) -> SynthesizedAudio:
        """
        Converts reply text into mp3 speech.

        Raises:
            ConfigurationError: If the credential or voice id is missing.
            RateLimitExceededError: If every attempt was rate limited.
            SynthesisServiceError: If synthesis fails otherwise.
        """
        pass
