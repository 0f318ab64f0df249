"""
Shared fixtures: an app wired to in-memory fakes for Gemini and the datastore.
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from main import create_app
from src.config.database import get_optional_engine
from src.config.settings import Settings
from src.services.gemini import DEFAULT_FALLBACK, get_gemini_client


class FakeGeminiClient:
    """Records every prompt; returns a canned reply or raises a canned error."""

    def __init__(self, reply: Optional[str] = "Generated reply", error: Exception = None):
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []
        self.payloads: List[Dict[str, Any]] = []

    @property
    def call_count(self) -> int:
        return len(self.prompts) + len(self.payloads)

    async def generate(self, prompt: str, fallback: str = DEFAULT_FALLBACK) -> str:
        self.prompts.append(prompt)
        return self._result(fallback)

    async def generate_from_payload(
        self, payload: Dict[str, Any], fallback: str = DEFAULT_FALLBACK
    ) -> str:
        self.payloads.append(payload)
        return self._result(fallback)

    def _result(self, fallback: str) -> str:
        if self.error is not None:
            raise self.error
        return self.reply or fallback


class FakeResult:
    def __init__(self, value):
        self.value = value

    def scalar_one(self):
        return self.value


class FakeConnection:
    def __init__(self, engine: "FakeEngine"):
        self.engine = engine

    async def execute(self, statement):
        self.engine.statements.append(str(statement))
        if self.engine.query_error is not None:
            raise self.engine.query_error
        return FakeResult(self.engine.now)


class FakeEngine:
    """Counts connection checkouts and returns, like a pool would."""

    def __init__(self, now: datetime = None, query_error: Exception = None,
                 connect_error: Exception = None):
        self.now = now or datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.query_error = query_error
        self.connect_error = connect_error
        self.acquired = 0
        self.released = 0
        self.statements: List[str] = []

    @asynccontextmanager
    async def connect(self):
        if self.connect_error is not None:
            raise self.connect_error
        self.acquired += 1
        try:
            yield FakeConnection(self)
        finally:
            self.released += 1


@pytest.fixture
def gemini() -> FakeGeminiClient:
    return FakeGeminiClient()


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def static_dir(tmp_path):
    (tmp_path / "index.html").write_text("<html><body>SanctoMind</body></html>")
    return tmp_path


@pytest.fixture
def app(gemini, engine, static_dir):
    app = create_app(Settings(static_dir=str(static_dir), gemini_api_key="test-key"))
    app.dependency_overrides[get_gemini_client] = lambda: gemini
    app.dependency_overrides[get_optional_engine] = lambda: engine
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
