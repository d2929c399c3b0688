"""Handler layer exports."""

from .question_handler import QuestionHandler

__all__ = ["QuestionHandler"]
