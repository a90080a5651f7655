"""Unit tests for the chat assistant service."""

from unittest.mock import MagicMock

import pytest

from second_brain.core.chat_service import (
    CONNECTION_TROUBLE_REPLY,
    EMPTY_REPLY,
    MODEL_UNAVAILABLE_REPLY,
    ChatService,
)
from second_brain.core.retriever import TwoStageRetriever
from second_brain.lib.errors import InvalidInputError, StorageError
from second_brain.models.chat import ChatMode


@pytest.fixture
def retriever(store):
    return TwoStageRetriever(store)


@pytest.fixture
def rag_note(make_item):
    return make_item(
        title="RAG Explained",
        content="Retrieval-Augmented Generation combines search and generation.",
        is_public=True,
    )


@pytest.mark.asyncio
async def test_dashboard_reply_uses_notes(retriever, rag_note, fake_connector_cls):
    connector = fake_connector_cls(reply="🧠 AI Answer:\nRAG mixes search in.\n\n📚 Sources:\n• RAG Explained")
    service = ChatService(retriever, connector=connector)

    reply = await service.ask("RAG", mode=ChatMode.DASHBOARD)

    assert reply.role == "assistant"
    assert reply.content == connector.reply
    assert reply.is_summarizing
    assert [source.title for source in reply.sources] == ["RAG Explained"]
    assert "[Source Note: RAG Explained]:" in connector.prompts[0]
    assert "User Question: RAG" in connector.prompts[0]


@pytest.mark.asyncio
async def test_dashboard_without_matches_uses_general_prompt(retriever, fake_connector_cls):
    connector = fake_connector_cls(reply="🧠 AI Answer:\nGeneral knowledge.")
    service = ChatService(retriever, connector=connector)

    reply = await service.ask("photosynthesis")

    assert reply.sources == []
    assert "Do NOT include a Sources section" in connector.prompts[0]


@pytest.mark.asyncio
async def test_landing_mode_skips_retrieval(fake_connector_cls):
    retriever = MagicMock()
    connector = fake_connector_cls(reply="A second brain stores what you learn.")
    service = ChatService(retriever, connector=connector)

    reply = await service.ask("What is this?", mode=ChatMode.LANDING)

    retriever.retrieve.assert_not_called()
    assert reply.content == "A second brain stores what you learn."
    assert not reply.is_summarizing
    assert reply.sources == []


@pytest.mark.asyncio
async def test_model_failure_returns_unavailable_reply(retriever, rag_note, fake_connector_cls):
    connector = fake_connector_cls(error=RuntimeError("connection refused"))
    service = ChatService(retriever, connector=connector)

    reply = await service.ask("RAG")

    assert reply.content == MODEL_UNAVAILABLE_REPLY
    assert not reply.is_summarizing


@pytest.mark.asyncio
async def test_missing_connector_returns_unavailable_reply(retriever):
    reply = await ChatService(retriever).ask("anything")

    assert reply.content == MODEL_UNAVAILABLE_REPLY


@pytest.mark.asyncio
async def test_store_failure_returns_trouble_reply(fake_connector_cls):
    retriever = MagicMock()
    retriever.retrieve.side_effect = StorageError("database is locked")
    connector = fake_connector_cls()
    service = ChatService(retriever, connector=connector)

    reply = await service.ask("RAG")

    assert reply.content == CONNECTION_TROUBLE_REPLY
    assert connector.prompts == []


@pytest.mark.asyncio
async def test_empty_model_reply_gets_placeholder(retriever, fake_connector_cls):
    service = ChatService(retriever, connector=fake_connector_cls(reply=""))

    reply = await service.ask("hello there")

    assert reply.content == EMPTY_REPLY
    assert not reply.is_summarizing


@pytest.mark.asyncio
@pytest.mark.parametrize("message", ["", "   ", None])
async def test_blank_message_rejected(retriever, fake_connector_cls, message):
    service = ChatService(retriever, connector=fake_connector_cls())

    with pytest.raises(InvalidInputError):
        await service.ask(message)


def test_build_prompt_for_landing_has_no_sources(retriever):
    prompt, sources = ChatService(retriever).build_prompt("hi", ChatMode.LANDING)

    assert "landing page" in prompt
    assert sources == []
