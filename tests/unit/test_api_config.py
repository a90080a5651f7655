"""Unit tests for configuration loading."""

import pytest

from second_brain.api.config import APIConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "SECOND_BRAIN_CONFIG",
        "SECOND_BRAIN_DB_PATH",
        "SECOND_BRAIN_LOG_LEVEL",
        "SECOND_BRAIN_LLM_PROVIDER",
        "SECOND_BRAIN_LLM_MODEL",
        "OLLAMA_BASE_URL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_missing_file_falls_back_to_defaults(tmp_path):
    config = APIConfig(config_path=str(tmp_path / "missing.yaml"))

    assert config.get("server.port") == 8000
    assert config.get("llm.provider") == "none"
    assert config.get("retrieval.ranking") == "insertion"
    assert config.default_user_id == "demo-user"


def test_yaml_values_merge_over_defaults(tmp_path):
    path = tmp_path / "api.yaml"
    path.write_text("server:\n  port: 9000\nknowledge:\n  default_user_id: tester\n")

    config = APIConfig(config_path=str(path))

    assert config.get("server.port") == 9000
    assert config.get("server.host") == "0.0.0.0"
    assert config.default_user_id == "tester"


def test_malformed_yaml_falls_back_to_defaults(tmp_path):
    path = tmp_path / "api.yaml"
    path.write_text("server: [unclosed\n")

    assert APIConfig(config_path=str(path)).get("server.port") == 8000


def test_environment_overrides_file(tmp_path, monkeypatch):
    monkeypatch.setenv("SECOND_BRAIN_DB_PATH", str(tmp_path / "env.db"))
    monkeypatch.setenv("SECOND_BRAIN_LLM_PROVIDER", "openrouter")

    config = APIConfig(config_path=str(tmp_path / "missing.yaml"))

    assert config.db_path == str(tmp_path / "env.db")
    assert config.get("llm.provider") == "openrouter"


def test_explicit_overrides_applied_last(tmp_path):
    config = APIConfig(
        config_path=str(tmp_path / "missing.yaml"),
        overrides={"logging": {"log_requests": False}},
    )

    assert config.get("logging.log_requests") is False
    assert config.get("logging.level") == "INFO"


def test_get_returns_default_for_unknown_keys(tmp_path):
    config = APIConfig(config_path=str(tmp_path / "missing.yaml"))

    assert config.get("nope.missing", "fallback") == "fallback"
    assert config.get("server.port.deeper", 1) == 1


def test_set_creates_nested_keys(tmp_path):
    config = APIConfig(config_path=str(tmp_path / "missing.yaml"))
    config.set("feature.flags.graph", True)

    assert config.get("feature.flags.graph") is True
