"""Word-cap policy for persona replies."""

from exceptions import ResponseTooLongError

from .models import PersonaReply


def count_words(text: str) -> int:
    """Counts whitespace-separated words."""
    return len(text.split())


class ReplyPolicy:
    """Renders the persona prompt and gates replies on the word cap."""

    def __init__(self, max_words: int):
        self._max_words = max_words

    @property
    def max_words(self) -> int:
        return self._max_words

    def render_prompt(self, template: str) -> str:
        """
        Fills the persona prompt template with the configured cap.

        Args:
            template: Prompt text containing a `{max_words}` placeholder.

        Returns:
            The system instruction sent to the chat-completion service.
        """
        return template.format(max_words=self._max_words)

    def enforce(self, text: str) -> PersonaReply:
        """
        Checks a reply against the word cap without altering it.

        Raises:
            ResponseTooLongError: If the reply has more words than allowed.
        """
        word_count = count_words(text)
        if word_count > self._max_words:
            raise ResponseTooLongError(word_count, self._max_words)
        return PersonaReply(text=text, word_count=word_count)
