"""Domain models for the question-to-video pipeline."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel


class InboundRequest(BaseModel, frozen=True):
    """A caller's recorded question and credential."""

    audio: str
    access_password: str | None = None


class Transcript(BaseModel, frozen=True):
    """Trimmed text recognized from the caller's audio."""

    text: str


class PersonaReply(BaseModel, frozen=True):
    """Reply written in the persona's voice, within the word cap."""

    text: str
    word_count: int


class SynthesizedAudio(BaseModel, frozen=True):
    """Speech audio produced for the reply; never returned to the caller."""

    payload: bytes
    encoding: Literal["mp3"] = "mp3"

    @property
    def media_type(self) -> str:
        return "audio/mpeg"


class JobStatus(str, Enum):
    """Normalized state of a talking-head video job."""

    PENDING = "pending"
    DONE = "done"
    ERROR = "error"

    @classmethod
    def from_provider(cls, raw: str | None) -> "JobStatus":
        """Maps a provider status onto pending, done or error."""
        if raw == "done":
            return cls.DONE
        if raw in ("error", "rejected"):
            return cls.ERROR
        return cls.PENDING


class VideoJob(BaseModel, frozen=True):
    """Snapshot of a video job as last reported by the video service."""

    job_id: str
    status: JobStatus
    result_url: str | None = None
    error_message: str | None = None


class PipelineResult(BaseModel, frozen=True):
    """Successful outcome of one pipeline run."""

    transcription: str
    response: str
    video_url: str
