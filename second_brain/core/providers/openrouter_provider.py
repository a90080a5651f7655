"""OpenRouter provider for hosted models via the OpenAI-compatible API."""

import logging
from typing import Any

from openai import AsyncOpenAI

from second_brain.core.llm_connector import LLMConnector, LLMResponse, Message

logger = logging.getLogger(__name__)

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


class OpenRouterProvider(LLMConnector):
    """Hosted models through OpenRouter."""

    def __init__(self, model_config: dict[str, Any], api_key: str):
        """Initialize OpenRouter provider.

        Args:
            model_config: Model configuration dict
            api_key: OpenRouter API key
        """
        super().__init__(model_config)
        self.client = AsyncOpenAI(
            base_url=model_config.get("base_url") or OPENROUTER_BASE_URL,
            api_key=api_key,
            timeout=self.timeout_seconds,
            max_retries=0,
        )

    async def generate(
        self,
        messages: list[Message],
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs,
    ) -> LLMResponse:
        params = {
            "model": self.model_name,
            "messages": [{"role": msg.role, "content": msg.content} for msg in messages],
            "temperature": self.temperature if temperature is None else temperature,
        }
        if max_tokens:
            params["max_tokens"] = max_tokens
        params.update(kwargs)

        try:
            response = await self.client.chat.completions.create(**params)
        except Exception as e:
            logger.error(f"OpenRouter generation error: {e}")
            raise

        if not response.choices:
            logger.warning("OpenRouter returned no choices")
            return LLMResponse(content="", model_used=self.model_name, finish_reason="empty")

        choice = response.choices[0]
        usage = response.usage

        return LLMResponse(
            content=choice.message.content or "",
            model_used=self.model_name,
            finish_reason=choice.finish_reason or "stop",
            metadata={
                "prompt_tokens": usage.prompt_tokens if usage else 0,
                "completion_tokens": usage.completion_tokens if usage else 0,
                "model_id": response.model,
            },
        )

    async def check_health(self) -> bool:
        try:
            await self.client.models.list()
            return True
        except Exception as e:
            logger.error(f"OpenRouter health check failed: {e}")
            return False

    async def close(self):
        await self.client.close()
