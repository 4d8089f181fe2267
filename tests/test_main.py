"""
Tests for the CLI main module.
"""

import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from click.testing import CliRunner

from say_hello.health.probe import CommandProber, ProbeOutcome, ProbeResult
from say_hello.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    return str(tmp_path / "config.yaml")


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch("say_hello.main.configure_logging") as mock_configure:
        yield mock_configure


def mock_prober(result):
    prober = MagicMock(spec=CommandProber)
    prober.probe = AsyncMock(return_value=result)
    return prober


def test_help(runner):
    result = runner.invoke(cli, ["-h"])

    assert result.exit_code == 0
    assert "serve" in result.output
    assert "health-check" in result.output


def test_health_check_success(runner, config_file):
    prober = mock_prober(ProbeResult(outcome=ProbeOutcome.SUCCESS, output="hi", strategy="direct"))

    with patch("say_hello.main.create_prober", return_value=prober):
        result = runner.invoke(cli, ["--config", config_file, "health-check"])

    assert result.exit_code == 0
    assert "Health check successful!" in result.output
    assert "Gemini response:" in result.output
    assert "strategy: direct" in result.output


def test_health_check_failure_exit_code(runner, config_file):
    prober = mock_prober(ProbeResult.failed("Could not run 'gemini'."))

    with patch("say_hello.main.create_prober", return_value=prober):
        result = runner.invoke(cli, ["--config", config_file, "health-check"])

    assert result.exit_code == 1
    assert "Health check failed!" in result.output
    assert "Could not run 'gemini'." in result.output


def test_tools_command_lists_tools(runner, config_file):
    result = runner.invoke(cli, ["--config", config_file, "tools"])

    assert result.exit_code == 0
    assert "hello" in result.output
    assert "health_check" in result.output


def test_serve_runs_stdio_server(runner, config_file):
    with patch("say_hello.main.anyio.run") as mock_run:
        result = runner.invoke(cli, ["--config", config_file, "serve"])

    assert result.exit_code == 0
    mock_run.assert_called_once()
    serve_func, server = mock_run.call_args.args
    assert server.info.name == "Say Hello"


def test_serve_debug_flag_raises_log_level(runner, config_file, quiet_logging):
    with patch("say_hello.main.anyio.run"):
        result = runner.invoke(cli, ["--config", config_file, "serve", "--debug"])

    assert result.exit_code == 0
    quiet_logging.assert_called_with("DEBUG")


def test_config_log_level_is_applied(runner, config_file, quiet_logging):
    with patch.dict(os.environ, {"LOG_LEVEL": "error"}), patch("say_hello.main.anyio.run"):
        runner.invoke(cli, ["--config", config_file, "serve"])

    quiet_logging.assert_called_with("ERROR")
