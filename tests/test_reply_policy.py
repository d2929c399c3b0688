from pathlib import Path

import pytest

from domain import JobStatus, ReplyPolicy, count_words
from exceptions import ResponseTooLongError

PERSONA_PROMPT = Path(__file__).parent.parent / "persona.txt"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Liberty", 1),
        ("  The   Union\tmust\nendure ", 4),
        ("", 0),
    ],
)
def test_count_words_splits_on_whitespace(text, expected):
    assert count_words(text) == expected


def test_enforce_keeps_text_intact():
    reply = ReplyPolicy(10).enforce("With malice toward none, with charity for all.")

    assert reply.text == "With malice toward none, with charity for all."
    assert reply.word_count == 8


def test_enforce_rejects_over_cap():
    with pytest.raises(ResponseTooLongError):
        ReplyPolicy(3).enforce("Government of the people")


def test_persona_prompt_renders_cap():
    prompt = ReplyPolicy(25).render_prompt(PERSONA_PROMPT.read_text(encoding="utf-8"))

    assert "Abraham Lincoln" in prompt
    assert "25 words or fewer" in prompt
    assert "{max_words}" not in prompt


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("created", JobStatus.PENDING),
        ("started", JobStatus.PENDING),
        (None, JobStatus.PENDING),
        ("done", JobStatus.DONE),
        ("error", JobStatus.ERROR),
        ("rejected", JobStatus.ERROR),
    ],
)
def test_provider_status_normalization(raw, expected):
    assert JobStatus.from_provider(raw) == expected
