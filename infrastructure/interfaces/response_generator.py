"""Abstract interface for persona reply generation."""

from abc import ABC, abstractmethod

from domain.models import PersonaReply


class ResponseGenerator(ABC):
    """Abstract base class for persona reply backends."""

    @abstractmethod
    def generate(self, question: str) -> PersonaReply:
        """
        Writes the persona's reply to a transcribed question.

        Raises:
            ConfigurationError: If the service credential is missing.
            GenerationServiceError: If the completion call fails.
            EmptyGenerationError: If no reply text comes back.
            ResponseTooLongError: If the reply exceeds the word cap.
        """
        pass
