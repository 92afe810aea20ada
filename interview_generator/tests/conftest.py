"""Shared fixtures and fakes for tests."""

import os

# Settings are read once at import, so the environment is prepared first
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")
os.environ["VAPI_SECRET"] = ""

from dataclasses import dataclass, field
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from interview_generator.api.deps import get_interview_service, get_settings, get_token_verifier
from interview_generator.core.config import Settings
from interview_generator.main import app
from interview_generator.schemas.interview import InterviewRecord
from interview_generator.services.interview import InterviewService, VerifiedIdentity
from interview_generator.services.llm.responses import LLMResponse, classify_llm_response

TEST_COVER = "/covers/adobe.png"


class FakeLLM:
    """Returns a canned provider response, or raises a canned error."""

    def __init__(self, raw: Any = '["Q1", "Q2"]'):
        self.raw = raw
        self.prompts: list[str] = []

    async def generate_text(self, prompt: str) -> LLMResponse:
        self.prompts.append(prompt)
        if isinstance(self.raw, Exception):
            raise self.raw
        return classify_llm_response(self.raw)


@dataclass
class FakeStore:
    records: list[InterviewRecord] = field(default_factory=list)
    error: Optional[Exception] = None

    async def add(self, record: InterviewRecord) -> str:
        if self.error is not None:
            raise self.error
        self.records.append(record)
        return f"doc-{len(self.records)}"


class FakeVerifier:
    """Accepts tokens listed in ``valid_tokens`` (token -> uid)."""

    def __init__(self, valid_tokens: Optional[dict[str, str]] = None):
        self.valid_tokens = valid_tokens or {}
        self.seen: list[str] = []

    async def verify(self, id_token: str) -> Optional[VerifiedIdentity]:
        self.seen.append(id_token)
        uid = self.valid_tokens.get(id_token)
        return VerifiedIdentity(uid=uid) if uid else None


@dataclass
class Harness:
    client: TestClient
    llm: FakeLLM
    store: FakeStore
    verifier: FakeVerifier


@pytest.fixture
def make_harness():
    """Build a TestClient wired to fakes; call with the desired fake behaviour."""

    def factory(
        llm_output: Any = '["Q1", "Q2"]',
        vapi_secret: str = "",
        valid_tokens: Optional[dict[str, str]] = None,
        store_error: Optional[Exception] = None,
    ) -> Harness:
        llm = FakeLLM(llm_output)
        store = FakeStore(error=store_error)
        verifier = FakeVerifier(valid_tokens)
        service = InterviewService(llm=llm, store=store, cover_picker=lambda: TEST_COVER)
        config = Settings(VAPI_SECRET=vapi_secret, LOG_TO_FILE=False)

        app.dependency_overrides[get_settings] = lambda: config
        app.dependency_overrides[get_token_verifier] = lambda: verifier
        app.dependency_overrides[get_interview_service] = lambda: service

        client = TestClient(app, raise_server_exceptions=False)
        return Harness(client=client, llm=llm, store=store, verifier=verifier)

    yield factory

    app.dependency_overrides.clear()


@pytest.fixture
def harness(make_harness) -> Harness:
    return make_harness()
