"""Dependency injection configuration for the Abe Answers service."""

from pathlib import Path

import httpx
from abe_common.logging import setup_logging

from config import AppConfig, VideoScriptMode, load_config
from domain import ReplyPolicy
from handlers import QuestionHandler
from infrastructure import (
    DIDVideoGenerator,
    ElevenLabsSynthesizer,
    OpenAIPersonaGenerator,
    WhisperTranscriber,
)

logger = setup_logging()

_config = load_config()

_missing = _config.missing_credentials()
if _missing:
    logger.warning(
        "Credentials not configured; requests needing them will fail",
        extra={"missing": _missing},
    )

# OpenAI (transcription and chat completion)
_openai_client = httpx.Client(
    base_url=_config.openai.base_url,
    timeout=_config.openai.timeout_seconds,
)
_transcriber = WhisperTranscriber(
    _openai_client,
    _config.openai.api_key,
    _config.openai.transcription_model,
)

_prompt_path = Path(__file__).parent / _config.persona.system_prompt_path
_policy = ReplyPolicy(_config.pipeline.max_words)
_generator = OpenAIPersonaGenerator(
    _openai_client,
    _config.openai.api_key,
    _policy.render_prompt(_prompt_path.read_text(encoding="utf-8")),
    _policy,
    model=_config.openai.chat_model,
    max_tokens=_config.openai.max_tokens,
    temperature=_config.openai.temperature,
)

# ElevenLabs speech, only used when the video is driven by our own audio
_synthesizer = None
if _config.pipeline.video_mode == VideoScriptMode.AUDIO:
    _elevenlabs_client = httpx.Client(
        base_url=_config.elevenlabs.base_url,
        timeout=_config.elevenlabs.timeout_seconds,
    )
    _synthesizer = ElevenLabsSynthesizer(_elevenlabs_client, _config.elevenlabs)

# D-ID talking-head video
_did_client = httpx.Client(
    base_url=_config.did.base_url,
    timeout=_config.did.timeout_seconds,
)
_video_generator = DIDVideoGenerator(_did_client, _config.did)

_handler = QuestionHandler(
    access_password=_config.access_password,
    transcription_service=_transcriber,
    response_generator=_generator,
    video_generator=_video_generator,
    config=_config.pipeline,
    speech_synthesizer=_synthesizer,
)

logger.info(
    "Pipeline configured",
    extra={
        "video_mode": _config.pipeline.video_mode.value,
        "max_words": _config.pipeline.max_words,
    },
)


def get_config() -> AppConfig:
    """Returns the loaded application configuration."""
    return _config


def get_question_handler() -> QuestionHandler:
    """Returns the configured question handler."""
    return _handler
