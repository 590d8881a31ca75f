import pytest

from tictactoe.config import DEFAULT_MODEL, Settings
from tictactoe.core.exceptions import ConfigurationError


def test_defaults_without_environment():
    settings = Settings.from_env({})
    assert settings.api_key is None
    assert not settings.suggestions_enabled
    assert settings.model == DEFAULT_MODEL
    assert settings.endpoint is None
    assert settings.temperature == 0.2
    assert settings.max_tokens == 10
    assert settings.suggestion_timeout == 5.0


def test_reads_environment():
    settings = Settings.from_env(
        {
            "OPENAI_API_KEY": "sk-generic",
            "TICTACTOE_LLM_MODEL": "gpt-4o-mini",
            "TICTACTOE_LLM_ENDPOINT": "https://llm.example.com/v1",
            "TICTACTOE_LLM_TEMPERATURE": "0.7",
            "TICTACTOE_LLM_MAX_TOKENS": "32",
            "TICTACTOE_SUGGESTION_TIMEOUT": "2.5",
        }
    )
    assert settings.api_key == "sk-generic"
    assert settings.suggestions_enabled
    assert settings.model == "gpt-4o-mini"
    assert settings.endpoint == "https://llm.example.com/v1"
    assert settings.temperature == 0.7
    assert settings.max_tokens == 32
    assert settings.suggestion_timeout == 2.5


def test_project_key_takes_precedence():
    settings = Settings.from_env({"OPENAI_API_KEY": "sk-generic", "TICTACTOE_OPENAI_API_KEY": "sk-project"})
    assert settings.api_key == "sk-project"


def test_blank_key_disables_suggestions():
    assert not Settings.from_env({"OPENAI_API_KEY": ""}).suggestions_enabled


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("TICTACTOE_OPENAI_API_KEY", "sk-env")
    assert Settings.from_env().api_key == "sk-env"


@pytest.mark.parametrize(
    "name,value",
    [
        ("TICTACTOE_SUGGESTION_TIMEOUT", "soon"),
        ("TICTACTOE_SUGGESTION_TIMEOUT", "0"),
        ("TICTACTOE_LLM_MAX_TOKENS", "1.5"),
        ("TICTACTOE_LLM_TEMPERATURE", "warm"),
    ],
)
def test_malformed_values_raise(name, value):
    with pytest.raises(ConfigurationError, match=name):
        Settings.from_env({name: value})
