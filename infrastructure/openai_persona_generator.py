"""OpenAI chat-completion implementation of the ResponseGenerator interface."""

import httpx
from abe_common.logging import setup_logging

from domain.models import PersonaReply
from domain.reply_policy import ReplyPolicy
from exceptions import ConfigurationError, EmptyGenerationError, GenerationServiceError

from .interfaces import ResponseGenerator

logger = setup_logging()


class OpenAIPersonaGenerator(ResponseGenerator):
    """Writes persona replies with an OpenAI chat model."""

    def __init__(
        self,
        client: httpx.Client,
        api_key: str,
        system_prompt: str,
        policy: ReplyPolicy,
        model: str = "gpt-4",
        max_tokens: int = 100,
        temperature: float = 0.7,
    ):
        self._client = client
        self._api_key = api_key
        self._system_prompt = system_prompt
        self._policy = policy
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature

    def generate(self, question: str) -> PersonaReply:
        """
        Asks the chat model for the persona's answer to the question.

        The reply is trimmed and checked against the word cap; an over-long
        reply is rejected rather than shortened.
        """
        if not self._api_key:
            raise ConfigurationError("OpenAI API key")

        payload = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": self._system_prompt},
                {"role": "user", "content": question},
            ],
            "max_tokens": self._max_tokens,
            "temperature": self._temperature,
        }
        try:
            response = self._client.post(
                "/chat/completions",
                headers={"Authorization": f"Bearer {self._api_key}"},
                json=payload,
            )
        except httpx.HTTPError as e:
            logger.exception("Chat completion request failed")
            raise GenerationServiceError(str(e), cause=e) from e

        if response.is_error:
            logger.error(
                "Chat completion returned an error",
                extra={"status_code": response.status_code},
            )
            raise GenerationServiceError(
                response.text,
                status_code=response.status_code,
                body=response.text,
            )

        text = self._first_completion(_parse_json(response))
        if not text:
            raise EmptyGenerationError()

        reply = self._policy.enforce(text)
        logger.info(
            "Persona reply generated",
            extra={"word_count": reply.word_count, "max_words": self._policy.max_words},
        )
        return reply

    def _first_completion(self, data: dict) -> str:
        """Extracts the trimmed content of the first choice, if any."""
        choices = data.get("choices") or []
        if not isinstance(choices, list) or not choices:
            return ""
        first = choices[0] if isinstance(choices[0], dict) else {}
        message = first.get("message") or {}
        content = message.get("content") if isinstance(message, dict) else None
        return content.strip() if isinstance(content, str) else ""


def _parse_json(response: httpx.Response) -> dict:
    try:
        data = response.json()
    except ValueError as e:
        raise GenerationServiceError("malformed response", cause=e) from e
    if not isinstance(data, dict):
        raise GenerationServiceError("malformed response")
    return data
