"""Application configuration loaded from environment variables."""

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class VideoScriptMode(str, Enum):
    """How the reply reaches the video service."""

    TEXT = "text"
    AUDIO = "audio"


class OpenAIConfig(BaseModel, frozen=True):
    """OpenAI transcription and chat-completion configuration."""

    api_key: str
    base_url: str = "https://api.openai.com/v1"
    transcription_model: str = "whisper-1"
    chat_model: str = "gpt-4"
    max_tokens: int = 100
    temperature: float = 0.7
    timeout_seconds: float = 60.0


class ElevenLabsConfig(BaseModel, frozen=True):
    """ElevenLabs speech-synthesis configuration."""

    api_key: str
    voice_id: str
    base_url: str = "https://api.elevenlabs.io/v1"
    model_id: str = "eleven_monolingual_v1"
    stability: float = 0.5
    similarity_boost: float = 0.75
    style: float = 0.0
    use_speaker_boost: bool = True
    max_attempts: int = Field(default=3, ge=1)
    initial_backoff_seconds: float = 2.0
    timeout_seconds: float = 60.0


class DIDConfig(BaseModel, frozen=True):
    """D-ID talking-head video configuration."""

    api_key: str
    base_url: str = "https://api.d-id.com"
    source_url: str = "https://abe-mvp.vercel.app/lincoln.jpg"
    voice_provider: str = "amazon"
    voice_id: str = "Matthew"
    poll_interval_seconds: float = 5.0
    max_poll_attempts: int = Field(default=60, ge=1)
    user_agent: str = "Abe-Answers/1.0"
    timeout_seconds: float = 30.0


class PipelineConfig(BaseModel, frozen=True):
    """Per-deployment pipeline policy."""

    max_words: int = Field(default=45, ge=1)
    video_mode: VideoScriptMode = VideoScriptMode.TEXT
    audio_format: str = "webm"


class PersonaConfig(BaseModel, frozen=True):
    """Persona prompt configuration."""

    system_prompt_path: Path = Path("persona.txt")


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    access_password: str
    openai: OpenAIConfig
    elevenlabs: ElevenLabsConfig
    did: DIDConfig
    pipeline: PipelineConfig
    persona: PersonaConfig = PersonaConfig()
    cors_allow_origins: list[str] = []

    def missing_credentials(self) -> list[str]:
        """Lists the environment variables this deployment still needs."""
        required = {
            "ACCESS_PASSWORD": self.access_password,
            "OPENAI_API_KEY": self.openai.api_key,
            "DID_API_KEY": self.did.api_key,
        }
        if self.pipeline.video_mode == VideoScriptMode.AUDIO:
            required["ELEVENLABS_API_KEY"] = self.elevenlabs.api_key
            required["ELEVENLABS_VOICE_ID"] = self.elevenlabs.voice_id
        return [name for name, value in required.items() if not value]


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        access_password=os.getenv("ACCESS_PASSWORD", ""),
        openai=OpenAIConfig(
            api_key=os.getenv("OPENAI_API_KEY", ""),
            transcription_model=os.getenv("OPENAI_TRANSCRIPTION_MODEL", "whisper-1"),
            chat_model=os.getenv("OPENAI_CHAT_MODEL", "gpt-4"),
        ),
        elevenlabs=ElevenLabsConfig(
            api_key=os.getenv("ELEVENLABS_API_KEY", ""),
            voice_id=os.getenv("ELEVENLABS_VOICE_ID", ""),
        ),
        did=DIDConfig(
            api_key=os.getenv("DID_API_KEY", ""),
            source_url=os.getenv(
                "DID_SOURCE_URL", "https://abe-mvp.vercel.app/lincoln.jpg"
            ),
            voice_provider=os.getenv("DID_VOICE_PROVIDER", "amazon"),
            voice_id=os.getenv("DID_VOICE_ID", "Matthew"),
        ),
        pipeline=PipelineConfig(
            max_words=int(os.getenv("PERSONA_MAX_WORDS", "45")),
            video_mode=os.getenv("VIDEO_SCRIPT_MODE", "text"),
            audio_format=os.getenv("AUDIO_FORMAT", "webm"),
        ),
        cors_allow_origins=_split_origins(os.getenv("CORS_ALLOW_ORIGINS", "")),
    )
