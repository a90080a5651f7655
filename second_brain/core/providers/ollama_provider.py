"""Ollama provider for locally hosted models."""

import logging
from typing import Any

import httpx

from second_brain.core.llm_connector import LLMConnector, LLMResponse, Message

logger = logging.getLogger(__name__)


class OllamaProvider(LLMConnector):
    """Talks to an Ollama server over its HTTP chat API."""

    def __init__(
        self,
        model_config: dict[str, Any],
        base_url: str = "http://localhost:11434",
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize Ollama provider.

        Args:
            model_config: Model configuration dict
            base_url: Ollama server URL
            client: Optional pre-built HTTP client (tests pass a mock transport)
        """
        super().__init__(model_config)
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(timeout=self.timeout_seconds)

    async def generate(
        self,
        messages: list[Message],
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs,
    ) -> LLMResponse:
        payload = {
            "model": self.model_name,
            "messages": [{"role": msg.role, "content": msg.content} for msg in messages],
            "stream": False,
            "options": {
                "temperature": self.temperature if temperature is None else temperature,
            },
        }

        # Ollama calls the token limit num_predict
        if max_tokens:
            payload["options"]["num_predict"] = max_tokens

        try:
            response = await self.client.post(f"{self.base_url}/api/chat", json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Ollama HTTP error: {e.response.status_code} - {e.response.text}")
            raise

        data = response.json()

        # A reply without message.content is treated as empty text, not an error.
        message = data.get("message") or {}
        content = message.get("content") or ""

        return LLMResponse(
            content=content,
            model_used=self.model_name,
            finish_reason="stop" if data.get("done", False) else "length",
            metadata={
                "prompt_tokens": data.get("prompt_eval_count", 0),
                "completion_tokens": data.get("eval_count", 0),
            },
        )

    async def check_health(self) -> bool:
        try:
            response = await self.client.get(f"{self.base_url}/api/tags")
            response.raise_for_status()

            models = [m.get("name") for m in response.json().get("models", [])]
            if self.model_name not in models:
                logger.warning(f"Model {self.model_name} not found in Ollama")
                return False

            return True

        except Exception as e:
            logger.error(f"Ollama health check failed: {e}")
            return False

    async def close(self):
        await self.client.aclose()
