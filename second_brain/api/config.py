"""API configuration loader."""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "server": {
        "host": "0.0.0.0",
        "port": 8000,
        "workers": 1,
        "reload": False,
    },
    "cors": {
        "enabled": True,
        "allow_origins": ["*"],
        "allow_methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "allow_headers": ["Content-Type", "Authorization"],
    },
    "logging": {
        "level": "INFO",
        "structured": False,
        "log_requests": True,
        "file": None,
    },
    "storage": {
        "db_path": "data/second_brain.db",
    },
    "llm": {
        "provider": "none",
        "model": "llama3.2",
        "base_url": "http://localhost:11434",
        "timeout_seconds": 60,
        "temperature": 0.7,
    },
    "knowledge": {
        "default_user_id": "demo-user",
    },
    "retrieval": {
        "ranking": "insertion",
    },
}

# Environment variable -> dot path it overrides
ENV_OVERRIDES = {
    "SECOND_BRAIN_DB_PATH": "storage.db_path",
    "SECOND_BRAIN_LOG_LEVEL": "logging.level",
    "SECOND_BRAIN_LLM_PROVIDER": "llm.provider",
    "SECOND_BRAIN_LLM_MODEL": "llm.model",
    "OLLAMA_BASE_URL": "llm.base_url",
}


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class APIConfig:
    """Load and manage configuration from api.yaml plus environment overrides."""

    def __init__(self, config_path: str | None = None, overrides: dict[str, Any] | None = None):
        """Initialize configuration.

        Args:
            config_path: Path to api.yaml (default: $SECOND_BRAIN_CONFIG or config/api.yaml)
            overrides: Nested values applied last, mainly for tests
        """
        if config_path is None:
            config_path = os.getenv("SECOND_BRAIN_CONFIG", os.path.join("config", "api.yaml"))

        self.config_path = Path(config_path)
        self.config: dict[str, Any] = {}

        self._load_config()
        self._apply_env_overrides()
        if overrides:
            self.config = _merge(self.config, overrides)

    def _load_config(self):
        if not self.config_path.exists():
            logger.warning(f"Config file not found: {self.config_path}, using defaults")
            self.config = copy.deepcopy(DEFAULT_CONFIG)
            return

        try:
            with open(self.config_path) as f:
                loaded = yaml.safe_load(f) or {}
            self.config = _merge(DEFAULT_CONFIG, loaded)
            logger.info(f"Loaded API configuration from {self.config_path}")

        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load config: {e}")
            self.config = copy.deepcopy(DEFAULT_CONFIG)

    def _apply_env_overrides(self):
        for env_name, key in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                self.set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-separated key.

        Args:
            key: Dot-separated key path (e.g., "server.port")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self.config

        for k in key.split("."):
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        keys = key.split(".")
        target = self.config
        for k in keys[:-1]:
            target = target.setdefault(k, {})
        target[keys[-1]] = value

    def get_openrouter_api_key(self) -> str | None:
        return os.getenv("OPENROUTER_API_KEY")

    @property
    def default_user_id(self) -> str:
        return self.get("knowledge.default_user_id", "demo-user")

    @property
    def db_path(self) -> str:
        return self.get("storage.db_path", "data/second_brain.db")
