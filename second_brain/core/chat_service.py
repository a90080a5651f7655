"""Chat assistant: retrieval-augmented prompts for the external model."""

import logging

from second_brain.core.llm_connector import LLMConnector
from second_brain.core.retriever import TwoStageRetriever
from second_brain.core.synthesizer import AnswerSynthesizer, PromptBuilder, is_answer_shaped
from second_brain.lib.errors import InvalidInputError, ServiceUnavailableError
from second_brain.models.chat import ChatMessage, ChatMode
from second_brain.models.knowledge import SourceItem

logger = logging.getLogger(__name__)

MODEL_UNAVAILABLE_REPLY = "AI service currently unavailable."
CONNECTION_TROUBLE_REPLY = "Sorry, I'm having trouble connecting to my brain right now."
EMPTY_REPLY = "I couldn't process that request."


class ChatService:
    """Answers one chat message per call; holds no conversation state.

    Failures never propagate to the caller: every call completes with an
    assistant message, using a fixed fallback text when the store or the
    model lets us down. Nothing is retried.
    """

    def __init__(
        self,
        retriever: TwoStageRetriever,
        connector: LLMConnector | None = None,
        synthesizer: AnswerSynthesizer | None = None,
        prompts: PromptBuilder | None = None,
    ):
        self.retriever = retriever
        self.connector = connector
        self.synthesizer = synthesizer or AnswerSynthesizer()
        self.prompts = prompts or PromptBuilder()

    def _dashboard_prompt(
        self, message: str, user_id: str | None
    ) -> tuple[str, list[SourceItem]]:
        result = self.retriever.retrieve(message, user_id=user_id)
        sources = self.synthesizer.sources(result.items)
        if sources:
            return self.prompts.context_prompt(message, sources), sources
        return self.prompts.no_context_prompt(message), []

    def build_prompt(
        self, message: str, mode: ChatMode, user_id: str | None = None
    ) -> tuple[str, list[SourceItem]]:
        """Return the prompt for ``message`` and the notes embedded in it."""
        if mode == ChatMode.DASHBOARD:
            return self._dashboard_prompt(message, user_id)
        return self.prompts.landing_prompt(message), []

    async def ask(
        self,
        message: str,
        mode: ChatMode = ChatMode.DASHBOARD,
        user_id: str | None = None,
    ) -> ChatMessage:
        """Produce the assistant's reply to ``message``.

        Raises:
            InvalidInputError: If the message is empty
        """
        text = (message or "").strip()
        if not text:
            raise InvalidInputError("Message is required")

        try:
            prompt, sources = self.build_prompt(text, mode, user_id)
        except Exception as e:
            logger.error(f"Chat context lookup failed: {e}", exc_info=True)
            return ChatMessage(role="assistant", content=CONNECTION_TROUBLE_REPLY)

        if self.connector is None:
            logger.warning("Chat requested but no model connector is configured")
            return ChatMessage(role="assistant", content=MODEL_UNAVAILABLE_REPLY, sources=sources)

        try:
            reply = await self.connector.chat(prompt)
        except ServiceUnavailableError as e:
            logger.error(f"Model call failed: {e}")
            return ChatMessage(role="assistant", content=MODEL_UNAVAILABLE_REPLY, sources=sources)

        logger.info(
            f"Chat reply in {mode.value} mode: {len(reply)} chars, {len(sources)} source(s)"
        )
        return ChatMessage(
            role="assistant",
            content=reply or EMPTY_REPLY,
            is_summarizing=is_answer_shaped(reply),
            sources=sources,
        )
