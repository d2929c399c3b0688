import httpx
import pytest

from exceptions import ConfigurationError, TranscriptionServiceError
from infrastructure.whisper_transcriber import WhisperTranscriber


def test_transcribe_returns_trimmed_text(make_client):
    client, transport = make_client([httpx.Response(200, json={"text": "  What is liberty?  "})])
    transcriber = WhisperTranscriber(client, "sk-test")

    transcript = transcriber.transcribe(b"audio-bytes", "webm")

    assert transcript.text == "What is liberty?"
    request = transport.requests[0]
    assert request.url.path == "/audio/transcriptions"
    assert request.headers["Authorization"] == "Bearer sk-test"
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="model"' in request.content
    assert b"whisper-1" in request.content
    assert b'filename="audio.webm"' in request.content
    assert b"Content-Type: audio/webm" in request.content
    assert b"audio-bytes" in request.content


def test_transcribe_error_carries_upstream_body(make_client):
    body = '{"error": {"message": "Invalid file format."}}'
    client, _ = make_client([httpx.Response(400, text=body)])
    transcriber = WhisperTranscriber(client, "sk-test")

    with pytest.raises(TranscriptionServiceError) as exc_info:
        transcriber.transcribe(b"audio-bytes", "webm")

    assert exc_info.value.status_code == 400
    assert exc_info.value.body == body
    assert "Invalid file format." in str(exc_info.value)


def test_transcribe_blank_text_is_an_error(make_client):
    client, _ = make_client([httpx.Response(200, json={"text": "   "})])
    transcriber = WhisperTranscriber(client, "sk-test")

    with pytest.raises(TranscriptionServiceError):
        transcriber.transcribe(b"audio-bytes", "webm")


def test_missing_api_key_fails_before_network(make_client):
    client, transport = make_client([])
    transcriber = WhisperTranscriber(client, "")

    with pytest.raises(ConfigurationError):
        transcriber.transcribe(b"audio-bytes", "webm")

    assert transport.requests == []


def test_transport_failure_is_wrapped():
    def _fail(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.Client(base_url="https://api.test", transport=httpx.MockTransport(_fail))
    transcriber = WhisperTranscriber(client, "sk-test")

    with pytest.raises(TranscriptionServiceError) as exc_info:
        transcriber.transcribe(b"audio-bytes", "webm")

    assert isinstance(exc_info.value.cause, httpx.ConnectError)


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>gateway</html>"),
        httpx.Response(200, json=["What is liberty?"]),
    ],
)
def test_malformed_success_body_is_a_service_error(make_client, response):
    client, _ = make_client([response])
    transcriber = WhisperTranscriber(client, "sk-test")

    with pytest.raises(TranscriptionServiceError, match="malformed response"):
        transcriber.transcribe(b"audio-bytes", "webm")
