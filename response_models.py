"""Request and response models for the ask API."""

from pydantic import BaseModel, ConfigDict, Field


class AskRequest(BaseModel):
    """Body of an ask request."""

    audio: str | None = None


class AskResponse(BaseModel):
    """Response returned after the persona video is ready."""

    model_config = ConfigDict(populate_by_name=True)

    transcription: str
    response: str
    video_url: str = Field(alias="videoUrl")


class ErrorResponse(BaseModel):
    """Flat error envelope shared by every failure response."""

    error: str
    details: str | None = None
