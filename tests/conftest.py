"""
Shared test fixtures for SeTeuk Master.
Zero network calls — the Gemini SDK is replaced by a recording fake and
background generation threads run inline.
"""
import base64
import json
from types import SimpleNamespace

import pytest

from seteuk.config import DEFAULT_LENGTH_OPTION, config
from seteuk.draft_state import DraftState
from seteuk.models import UploadedFile, SeTeukInput

SAMPLE_RESULT = {
    "analysis": {
        "keywords": ["탐구력", "의사소통", "공동체 의식"],
        "strengths": "기후 변화 자료를 근거로 논지를 구성함",
        "storyline": "동기 -> 과정 -> 결과 -> 확장",
    },
    "draft": "기후 변화를 주제로 한 토론에서 통계 자료를 분석하여 발표함.",
}


def b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


class FakeGenerativeModel:
    def __init__(self, owner, model, system_instruction=None):
        self.owner = owner
        self.model = model
        self.system_instruction = system_instruction

    def generate_content(self, contents, generation_config=None):
        self.owner.calls.append({
            "model": self.model,
            "system_instruction": self.system_instruction,
            "contents": contents,
            "generation_config": generation_config,
        })
        if self.owner.error is not None:
            raise self.owner.error
        return SimpleNamespace(
            text=self.owner.text,
            usage_metadata=SimpleNamespace(prompt_token_count=120, candidates_token_count=80),
        )


class FakeGenai:
    """Stands in for the google.generativeai module inside gemini_service."""

    def __init__(self):
        self.calls = []
        self.text = json.dumps(SAMPLE_RESULT, ensure_ascii=False)
        self.error = None
        self.configured_key = None

    def configure(self, api_key=None):
        self.configured_key = api_key

    def GenerativeModel(self, model, system_instruction=None):
        return FakeGenerativeModel(self, model, system_instruction)

    def GenerationConfig(self, **kwargs):
        return kwargs


class InlineThread:
    """Runs the target synchronously when started."""

    def __init__(self, target=None, args=(), kwargs=None, daemon=None):
        self._target = target
        self._args = args
        self._kwargs = kwargs or {}

    def start(self):
        self._target(*self._args, **self._kwargs)


@pytest.fixture
def fake_genai(monkeypatch):
    """Replace the Gemini SDK with a recording fake and configure a test key."""
    import seteuk.services.gemini_service as gs
    fake = FakeGenai()
    monkeypatch.setattr(gs, "genai", fake)
    monkeypatch.setattr(config, "gemini_api_key", "test-key")
    return fake


@pytest.fixture
def draft_state():
    return DraftState()


@pytest.fixture
def client(monkeypatch, draft_state):
    """Flask test client whose generation thread runs inline."""
    import seteuk.routes.seteuk_routes as routes
    from seteuk.app import create_app

    monkeypatch.setattr(routes, "threading", SimpleNamespace(Thread=InlineThread))
    app = create_app(draft_state)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def make_input():
    """Factory for SeTeukInput with empty defaults."""
    def _make(**kwargs):
        kwargs.setdefault("length_option", DEFAULT_LENGTH_OPTION)
        return SeTeukInput(**kwargs)
    return _make


@pytest.fixture
def text_file():
    return UploadedFile(data=b64("안녕"), mime_type="", name="notes.txt")


@pytest.fixture
def image_file():
    return UploadedFile(data=base64.b64encode(b"\x89PNG\r\n").decode("ascii"),
                        mime_type="image/png", name="poster.png")
