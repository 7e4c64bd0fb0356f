"""Tests for src/read_agent/main.py: collaborators patched, no network."""

from __future__ import annotations

import sys
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from read_agent.errors import ResponseFormatError
from read_agent.main import main


@pytest.fixture
def env(tmp_path, monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-test")
    monkeypatch.delenv("OPENROUTER_BASE_URL", raising=False)
    monkeypatch.delenv("AGENT_MODEL", raising=False)
    monkeypatch.delenv("AGENT_MAX_ITERATIONS", raising=False)
    monkeypatch.setattr("read_agent.config._DEFAULT_CONFIG_PATH", tmp_path / "noexist.toml")
    return monkeypatch


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> None:
    monkeypatch.setattr(sys, "argv", ["read-agent", *argv])
    main()


class TestMain:
    def test_prints_answer(self, env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        with (
            patch("read_agent.providers.get_provider", return_value=MagicMock()),
            patch("read_agent.loop.run_conversation", new=AsyncMock(return_value="4")) as run,
        ):
            _run(env, "-p", "What is 2+2?")

        assert capsys.readouterr().out == "4\n"
        assert run.call_args.kwargs["prompt"] == "What is 2+2?"

    def test_empty_content_prints_nothing(
        self, env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with (
            patch("read_agent.providers.get_provider", return_value=MagicMock()),
            patch("read_agent.loop.run_conversation", new=AsyncMock(return_value=None)),
        ):
            _run(env, "--prompt", "anything")

        assert capsys.readouterr().out == ""

    def test_missing_api_key_exits_before_network(
        self, env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        env.delenv("OPENROUTER_API_KEY")
        with (
            patch("read_agent.providers.get_provider") as get_provider,
            pytest.raises(SystemExit) as excinfo,
        ):
            _run(env, "-p", "hi")

        assert excinfo.value.code == 1
        get_provider.assert_not_called()
        assert "OPENROUTER_API_KEY is not set" in capsys.readouterr().err

    def test_api_error_exits_nonzero(
        self, env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        failing = AsyncMock(side_effect=ResponseFormatError("Response contained no choices"))
        with (
            patch("read_agent.providers.get_provider", return_value=MagicMock()),
            patch("read_agent.loop.run_conversation", new=failing),
            pytest.raises(SystemExit) as excinfo,
        ):
            _run(env, "-p", "hi")

        assert excinfo.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "no choices" in captured.err

    def test_prompt_is_required(self, env: pytest.MonkeyPatch) -> None:
        with pytest.raises(SystemExit) as excinfo:
            _run(env)
        assert excinfo.value.code == 2

    def test_blank_prompt_rejected(self, env: pytest.MonkeyPatch) -> None:
        with pytest.raises(SystemExit) as excinfo:
            _run(env, "-p", "   ")
        assert excinfo.value.code == 2
