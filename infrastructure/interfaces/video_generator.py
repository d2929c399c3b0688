"""Abstract interface for talking-head video generation."""

from abc import ABC, abstractmethod

from domain.models import SynthesizedAudio


class VideoGenerator(ABC):
    """Abstract base class for talking-head video backends."""

    @abstractmethod
    def generate_from_text(self, text: str) -> str:
        """
        Animates the portrait speaking the text with the provider's voice.

        Returns:
            URL of the finished video.
        """
        pass

    @abstractmethod
    def generate_from_audio(self, audio: SynthesizedAudio) -> str:
        """
        Animates the portrait lip-synced to pre-synthesized audio.

        Returns:
            URL of the finished video.
        """
        pass
