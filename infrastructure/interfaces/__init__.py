"""Infrastructure interface exports."""

from .response_generator import ResponseGenerator
from .speech_synthesizer import SpeechSynthesizer
from .transcription_service import TranscriptionService
from .video_generator import VideoGenerator

__all__ = [
    "ResponseGenerator",
    "SpeechSynthesizer",
    "TranscriptionService",
    "VideoGenerator",
]
