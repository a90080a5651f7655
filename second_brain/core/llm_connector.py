"""Base connector for the external generative model."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from second_brain.lib.errors import ServiceUnavailableError

logger = logging.getLogger(__name__)


@dataclass
class Message:
    """Chat message format."""

    role: str  # "user", "assistant", "system"
    content: str


@dataclass
class LLMResponse:
    """Normalized model reply. ``content`` may be empty for malformed replies."""

    content: str
    model_used: str
    finish_reason: str = "stop"
    metadata: dict[str, Any] = field(default_factory=dict)


class LLMConnector(ABC):
    """Abstract base class for model providers."""

    def __init__(self, model_config: dict[str, Any]):
        """Initialize connector.

        Args:
            model_config: Provider settings; ``model_name`` is required,
                ``timeout_seconds`` and ``temperature`` are optional
        """
        self.model_config = model_config
        self.model_name = model_config.get("model_name")
        self.provider = model_config.get("provider")
        self.timeout_seconds = model_config.get("timeout_seconds", 60.0)
        self.temperature = model_config.get("temperature", 0.7)
        logger.info(f"Initialized {self.provider} connector for {self.model_name}")

    @abstractmethod
    async def generate(
        self,
        messages: list[Message],
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs,
    ) -> LLMResponse:
        """Generate a reply for ``messages``."""

    @abstractmethod
    async def check_health(self) -> bool:
        """Return True if the model is reachable."""

    async def close(self) -> None:
        """Release network resources."""

    async def chat(self, prompt: str) -> str:
        """Send a single-turn prompt and return the reply text verbatim.

        Raises:
            ServiceUnavailableError: If the provider fails for any reason
        """
        try:
            response = await self.generate([Message(role="user", content=prompt)])
        except ServiceUnavailableError:
            raise
        except Exception as e:
            logger.error(f"{self.provider} chat failed: {e}")
            raise ServiceUnavailableError(f"{self.provider} unavailable: {e}") from e

        return response.content or ""
