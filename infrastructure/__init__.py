"""Infrastructure layer exports."""

from .did_video_generator import DIDVideoGenerator
from .elevenlabs_synthesizer import ElevenLabsSynthesizer
from .openai_persona_generator import OpenAIPersonaGenerator
from .whisper_transcriber import WhisperTranscriber

__all__ = [
    "DIDVideoGenerator",
    "ElevenLabsSynthesizer",
    "OpenAIPersonaGenerator",
    "WhisperTranscriber",
]
