import logging

import pytest

from tictactoe.agents.openai_llm_agent import LLMMoveSuggester, create_default_suggester, parse_move_response
from tictactoe.config import Settings
from tictactoe.core.models import Mark, Move
from tictactoe.llm.interfaces import LLMClientError

from .doubles import FakeLLMClient, board


@pytest.mark.parametrize(
    "response,expected",
    [
        ("Sure! [1, 2] is my move.", Move(1, 2)),
        ("[0,0]", Move(0, 0)),
        ("  [ 2 ,  1 ]  ", Move(2, 1)),
        ("first [1, 1] then [2, 2]", Move(1, 1)),
        ("[7, 9]", Move(7, 9)),
    ],
)
def test_parse_move_response_finds_first_array(response, expected):
    assert parse_move_response(response) == expected


@pytest.mark.parametrize("response", ["invalid", "", None, "[1]", "[a, b]", "row 1 col 2", "[-1, 2]"])
def test_parse_move_response_unparseable(response):
    assert parse_move_response(response) is None


@pytest.mark.asyncio
async def test_suggest_move_parses_service_response():
    client = FakeLLMClient(response="Sure! [1, 2] is my move.")
    suggester = LLMMoveSuggester(client)

    move = await suggester.suggest_move(board("X--", "---", "---"), Mark.O, timeout=1.0)

    assert move == Move(1, 2)
    messages = client.messages[0]
    assert messages[0]["role"] == "system"
    assert "X--\n---\n---" in messages[1]["content"]
    assert '"O"' in messages[1]["content"]


@pytest.mark.asyncio
async def test_suggest_move_does_not_validate_legality():
    suggester = LLMMoveSuggester(FakeLLMClient(response="[0, 0]"))
    assert await suggester.suggest_move(board("X--", "---", "---"), Mark.O, timeout=1.0) == Move(0, 0)


@pytest.mark.asyncio
async def test_suggest_move_unparseable_is_unavailable(caplog):
    suggester = LLMMoveSuggester(FakeLLMClient(response="invalid"))
    with caplog.at_level(logging.WARNING):
        assert await suggester.suggest_move(board("---", "---", "---"), Mark.O, timeout=1.0) is None
    assert "Could not parse" in caplog.text


@pytest.mark.asyncio
async def test_suggest_move_service_error_is_unavailable():
    suggester = LLMMoveSuggester(FakeLLMClient(error=LLMClientError("boom")))
    assert await suggester.suggest_move(board("---", "---", "---"), Mark.O, timeout=1.0) is None


@pytest.mark.asyncio
async def test_suggest_move_timeout_is_unavailable():
    suggester = LLMMoveSuggester(FakeLLMClient(response="[1, 1]", delay=5.0))
    assert await suggester.suggest_move(board("---", "---", "---"), Mark.O, timeout=0.05) is None


def test_build_prompt_uses_configured_formatter():
    suggester = LLMMoveSuggester(FakeLLMClient(), formatter="natural")
    prompt = suggester.build_prompt(board("X--", "---", "---"), Mark.O)
    assert "X at: (0,0)" in prompt


@pytest.mark.parametrize(
    "formatter,legend,board_text",
    [
        ("dash", "'-'=empty", "X--\n---\n---"),
        ("standard", "'.'=empty", "0  X  .  . "),
        ("json", "null=empty", '[["X", null, null]'),
        ("natural", "unlisted cells are empty", "X at: (0,0)"),
    ],
)
def test_build_prompt_legend_matches_formatter(formatter, legend, board_text):
    suggester = LLMMoveSuggester(FakeLLMClient(), formatter=formatter)
    prompt = suggester.build_prompt(board("X--", "---", "---"), Mark.O)
    assert f"(X=opponent, O=you, {legend})" in prompt
    assert board_text in prompt
    if formatter != "dash":
        assert "'-'=empty" not in prompt


def test_output_instruction_stated_once():
    suggester = LLMMoveSuggester(FakeLLMClient())
    prompt = suggester.build_prompt(board("---", "---", "---"), Mark.O)
    assert "[row, col]" in suggester.system_prompt
    assert "[row, col]" not in prompt


def test_create_default_suggester_without_key_is_none():
    assert create_default_suggester(Settings(api_key=None)) is None


def test_create_default_suggester_with_key():
    suggester = create_default_suggester(Settings(api_key="sk-test", model="gpt-4o-mini"))
    assert isinstance(suggester, LLMMoveSuggester)
    assert suggester.llm_client.model == "gpt-4o-mini"
    assert suggester.llm_client.max_tokens == 10
