"""Domain layer exports."""

from .models import (
    InboundRequest,
    JobStatus,
    PersonaReply,
    PipelineResult,
    SynthesizedAudio,
    Transcript,
    VideoJob,
)
from .reply_policy import ReplyPolicy, count_words

__all__ = [
    "InboundRequest",
    "JobStatus",
    "PersonaReply",
    "PipelineResult",
    "SynthesizedAudio",
    "Transcript",
    "VideoJob",
    "ReplyPolicy",
    "count_words",
]
