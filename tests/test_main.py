"""Tests for the command-line entry point."""

from pathlib import Path
from unittest.mock import AsyncMock

from langchain_core.messages import AIMessage

import main
from toolchat.agents import ConversationResult, ConversationState


def test_parser_options():
    args = main.build_parser().parse_args(
        ["list files", "--max-rounds", "5", "--tools", "read_file,list_directory"]
    )
    assert args.query == "list files"
    assert args.max_rounds == 5
    assert args.tools == "read_file,list_directory"


def test_missing_api_key_is_config_error(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main.main(["hello"]) == main.EXIT_CONFIG_ERROR


def test_bad_workdir_is_config_error(tmp_path: Path):
    assert main.main(["hello", "--workdir", str(tmp_path / "nope")]) == 1


def test_runs_agent_and_prints_answer(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    from toolchat.agents import ToolAgent

    result = ConversationResult(
        status=ConversationState.DONE,
        content="all done",
        messages=[AIMessage(content="all done")],
    )
    monkeypatch.setattr(ToolAgent, "process", AsyncMock(return_value=result))

    code = main.main(["hello", "--tools", "read_file"])

    assert code == main.EXIT_OK
    assert "all done" in capsys.readouterr().out


def test_exhausted_run_has_distinct_exit_code(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    from toolchat.agents import ToolAgent

    result = ConversationResult(status=ConversationState.EXHAUSTED, content="")
    monkeypatch.setattr(ToolAgent, "process", AsyncMock(return_value=result))

    assert main.main(["hello", "--max-rounds", "1"]) == main.EXIT_EXHAUSTED


def test_malformed_round_limit_is_config_error(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("MAX_TOOL_ROUNDS", "many")

    assert main.main(["hello"]) == main.EXIT_CONFIG_ERROR


def test_negative_max_rounds_is_config_error(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    assert main.main(["hello", "--max-rounds", "-1"]) == main.EXIT_CONFIG_ERROR
