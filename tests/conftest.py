"""Pytest configuration and shared fixtures.

Provides:
- A throwaway SQLite knowledge store per test
- An item factory writing straight to that store
- FakeConnector, a scripted stand-in for the generative model
"""

import pytest

from second_brain.core.llm_connector import LLMConnector, LLMResponse
from second_brain.storage.sqlite_store import SQLiteKnowledgeStore


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


class FakeConnector(LLMConnector):
    """Returns a canned reply, or raises ``error`` to simulate an outage."""

    def __init__(self, reply: str = "🧠 AI Answer:\nCanned answer.", error: Exception | None = None):
        super().__init__({"model_name": "fake-model", "provider": "fake"})
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []
        self.closed = False

    async def generate(self, messages, temperature=None, max_tokens=None, **kwargs):
        self.prompts.append(messages[-1].content)
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.reply, model_used=self.model_name)

    async def check_health(self):
        return self.error is None

    async def close(self):
        self.closed = True


@pytest.fixture
def fake_connector_cls():
    return FakeConnector


@pytest.fixture
def store(tmp_path):
    return SQLiteKnowledgeStore(db_path=str(tmp_path / "knowledge.db"))


@pytest.fixture
def make_item(store):
    """Create an item with sensible defaults; keyword arguments override them."""

    def _make(**overrides):
        doc = {
            "title": "Untitled",
            "content": "Nothing to see here.",
            "user_id": "alice",
            "is_public": False,
        }
        doc.update(overrides)
        return store.create(doc)

    return _make
