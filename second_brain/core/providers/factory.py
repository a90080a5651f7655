"""Build the configured model connector."""

import logging

from second_brain.api.config import APIConfig
from second_brain.core.llm_connector import LLMConnector
from second_brain.core.providers.ollama_provider import OllamaProvider
from second_brain.core.providers.openrouter_provider import OpenRouterProvider

logger = logging.getLogger(__name__)


def create_connector(config: APIConfig) -> LLMConnector | None:
    """Return a connector for ``llm.provider``, or None when chat is disabled.

    A missing OpenRouter key disables chat rather than failing startup; the
    chat endpoint then answers with its unavailable message.
    """
    provider = (config.get("llm.provider") or "none").lower()
    model_config = {
        "provider": provider,
        "model_name": config.get("llm.model"),
        "timeout_seconds": float(config.get("llm.timeout_seconds", 60)),
        "temperature": float(config.get("llm.temperature", 0.7)),
    }

    if provider == "ollama":
        return OllamaProvider(model_config, config.get("llm.base_url", "http://localhost:11434"))

    if provider == "openrouter":
        api_key = config.get_openrouter_api_key()
        if not api_key:
            logger.warning("llm.provider is openrouter but OPENROUTER_API_KEY is not set")
            return None
        return OpenRouterProvider(model_config, api_key)

    if provider != "none":
        logger.warning(f"Unknown llm.provider '{provider}', chat disabled")
    else:
        logger.info("No model provider configured, chat disabled")
    return None
