"""Shared fixtures: httpx mock clients and in-memory pipeline stages."""

import base64
import json

import httpx
import pytest

from config import DIDConfig, ElevenLabsConfig, PipelineConfig
from domain.models import PersonaReply, SynthesizedAudio, Transcript
from handlers import QuestionHandler
from infrastructure.interfaces import (
    ResponseGenerator,
    SpeechSynthesizer,
    TranscriptionService,
    VideoGenerator,
)

ACCESS_PASSWORD = "four-score"
AUDIO_BYTES = b"\x1aE\xdf\xa3webm-bytes"
AUDIO_B64 = base64.b64encode(AUDIO_BYTES).decode("ascii")
VIDEO_URL = "https://d-id.example/talks/tlk_1/video.mp4"


class SleepRecorder:
    """Stands in for time.sleep and remembers every requested delay."""

    def __init__(self):
        self.delays = []

    def __call__(self, seconds):
        self.delays.append(seconds)


class RecordingTransport:
    """Replays queued httpx responses and keeps the requests it saw."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        return self._responses.pop(0)


def json_body(request: httpx.Request) -> dict:
    return json.loads(request.content)


@pytest.fixture
def make_client():
    """Builds an httpx.Client whose traffic is served by a RecordingTransport."""

    def _make(responses, base_url="https://api.test"):
        transport = RecordingTransport(responses)
        client = httpx.Client(base_url=base_url, transport=httpx.MockTransport(transport))
        return client, transport

    return _make


@pytest.fixture
def sleep():
    return SleepRecorder()


@pytest.fixture
def did_config():
    return DIDConfig(api_key="user:secret", base_url="https://api.d-id.test")


@pytest.fixture
def elevenlabs_config():
    return ElevenLabsConfig(
        api_key="xi-key",
        voice_id="voice-123",
        base_url="https://api.elevenlabs.test/v1",
    )


class FakeTranscriber(TranscriptionService):
    def __init__(self, calls, text="What is liberty?", error=None):
        self._calls = calls
        self._text = text
        self._error = error
        self.received = []

    def transcribe(self, audio_data, audio_format):
        self._calls.append("transcribe")
        self.received.append((audio_data, audio_format))
        if self._error:
            raise self._error
        return Transcript(text=self._text)


class FakeGenerator(ResponseGenerator):
    def __init__(self, calls, text="Liberty is the birthright of every man.", error=None):
        self._calls = calls
        self._text = text
        self._error = error
        self.questions = []

    def generate(self, question):
        self._calls.append("generate")
        self.questions.append(question)
        if self._error:
            raise self._error
        return PersonaReply(text=self._text, word_count=len(self._text.split()))


class FakeSynthesizer(SpeechSynthesizer):
    def __init__(self, calls, payload=b"ID3-mp3"):
        self._calls = calls
        self._payload = payload
        self.texts = []

    def synthesize(self, text):
        self._calls.append("synthesize")
        self.texts.append(text)
        return SynthesizedAudio(payload=self._payload)


class FakeVideoGenerator(VideoGenerator):
    def __init__(self, calls, url=VIDEO_URL, error=None):
        self._calls = calls
        self._url = url
        self._error = error
        self.texts = []
        self.audio = []

    def generate_from_text(self, text):
        self._calls.append("video_from_text")
        self.texts.append(text)
        if self._error:
            raise self._error
        return self._url

    def generate_from_audio(self, audio):
        self._calls.append("video_from_audio")
        self.audio.append(audio)
        if self._error:
            raise self._error
        return self._url


class FakePipeline:
    """Bundles fake stages with a shared call log."""

    def __init__(self, video_mode="text", transcriber_error=None,
                 generator_error=None, video_error=None):
        self.calls = []
        self.transcriber = FakeTranscriber(self.calls, error=transcriber_error)
        self.generator = FakeGenerator(self.calls, error=generator_error)
        self.synthesizer = FakeSynthesizer(self.calls)
        self.video = FakeVideoGenerator(self.calls, error=video_error)
        self.config = PipelineConfig(max_words=45, video_mode=video_mode)

    def handler(self, access_password=ACCESS_PASSWORD):
        return QuestionHandler(
            access_password=access_password,
            transcription_service=self.transcriber,
            response_generator=self.generator,
            video_generator=self.video,
            config=self.config,
            speech_synthesizer=self.synthesizer,
        )


@pytest.fixture
def pipeline():
    return FakePipeline()
