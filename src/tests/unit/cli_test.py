# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 aic
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, see <https://www.gnu.org/licenses/>.
#  */
# -----------------------------------------------------------------------------

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from aic.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """Run every invocation away from real config, logging and signal handlers."""
    monkeypatch.chdir(tmp_path)
    for var in ("AIC_AI_PROVIDER", "AIC_PROVIDER", "AIC_API_KEY", "AIC_MODEL", "AIC_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    with (
        patch("aic.cli.setup_logger"),
        patch("aic.cli.setup_signal_handlers"),
        patch("aic.cli.ConfigLoader.load_toml", return_value={}),
    ):
        yield


@pytest.fixture
def git_repo():
    with patch("aic.context.SubprocessGitInterface") as mock_interface:
        mock_interface.return_value.run_git_text.return_value = "true\n"
        yield mock_interface.return_value


def test_explain_without_target_is_usage_error(git_repo):
    result = runner.invoke(app, ["explain"])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "`explain` expects SHA-1 or --diff to be present" in result.output


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.startswith("aic version")


def test_outside_git_repository(git_repo):
    git_repo.run_git_text.return_value = None

    result = runner.invoke(app, ["draft"])

    assert result.exit_code == 1
    assert "Not a git repository: ." in result.output


def test_invalid_provider(git_repo):
    result = runner.invoke(app, ["--provider", "mistral", "draft"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_ollama_requires_model(git_repo):
    result = runner.invoke(app, ["-p", "ollama", "categorize"])

    assert result.exit_code == 1
    assert "Missing Model for Ollama, use --model or AIC_MODEL env variable" in result.output


def test_env_selects_provider(git_repo, monkeypatch):
    monkeypatch.setenv("AIC_AI_PROVIDER", "openai")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    result = runner.invoke(app, ["draft"])

    assert result.exit_code == 1
    assert "Missing API key for OpenAI" in result.output


def test_batch_rejects_default_provider(git_repo):
    result = runner.invoke(app, ["batch"])

    assert result.exit_code == 1
    assert "Batch command is not available with Phind provider" in result.output
