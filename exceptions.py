"""Custom exceptions for the Abe Answers pipeline."""


class ConfigurationError(Exception):
    """Raised when a required credential or setting is not configured."""

    def __init__(self, setting_name: str):
        self.setting_name = setting_name
        super().__init__(f"{setting_name} not configured")


class AuthenticationError(Exception):
    """Raised when the caller's access password does not match."""

    def __init__(self):
        super().__init__("Unauthorized - Invalid password")


class ValidationError(Exception):
    """Raised when the inbound request is missing or has malformed input."""

    def __init__(self, message: str):
        super().__init__(message)


class UpstreamServiceError(Exception):
    """Raised when a third-party service returns a non-success response."""

    service_name = "Upstream"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
        cause: Exception | None = None,
    ):
        self.status_code = status_code
        self.body = body
        self.cause = cause
        super().__init__(f"{self.service_name} API error: {message}")


class TranscriptionServiceError(UpstreamServiceError):
    """Raised when the transcription service fails."""

    service_name = "Whisper"


class GenerationServiceError(UpstreamServiceError):
    """Raised when the chat-completion service fails."""

    service_name = "GPT"


class SynthesisServiceError(UpstreamServiceError):
    """Raised when the speech-synthesis service fails."""

    service_name = "ElevenLabs"


class RateLimitExceededError(SynthesisServiceError):
    """Raised when speech synthesis stays rate limited after every retry."""

    def __init__(
        self,
        attempts: int,
        status_code: int | None = None,
        body: str | None = None,
        cause: Exception | None = None,
    ):
        self.attempts = attempts
        super().__init__(
            f"rate limited after {attempts} attempts: {body}",
            status_code=status_code,
            body=body,
            cause=cause,
        )


class VideoServiceError(UpstreamServiceError):
    """Raised when the video-generation service fails or answers malformed."""

    service_name = "D-ID"


class EmptyGenerationError(Exception):
    """Raised when the chat-completion service returns no usable text."""

    def __init__(self):
        super().__init__("No response generated from GPT")


class ResponseTooLongError(Exception):
    """Raised when a persona reply exceeds the configured word cap."""

    def __init__(self, word_count: int, max_words: int):
        self.word_count = word_count
        self.max_words = max_words
        super().__init__(f"Response too long: {word_count} words (max {max_words})")


class VideoGenerationFailedError(Exception):
    """Raised when a video job reaches the error state."""

    def __init__(self, job_id: str, reason: str | None = None):
        self.job_id = job_id
        self.reason = reason
        message = f"D-ID video generation failed for talk '{job_id}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class VideoGenerationTimeoutError(Exception):
    """Raised when a video job is still pending after the last allowed poll."""

    def __init__(self, job_id: str, attempts: int):
        self.job_id = job_id
        self.attempts = attempts
        super().__init__(
            f"D-ID video generation timed out for talk '{job_id}' "
            f"after {attempts} status checks"
        )
