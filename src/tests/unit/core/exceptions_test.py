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

import pytest
import typer

from aic.core.exceptions import (
    AICError,
    BackendUnreachableError,
    CommandError,
    ConfigurationError,
    GitCommitError,
    GitDiffError,
    GitError,
    MissingApiKeyError,
    MissingModelError,
    NoCompletionError,
    ProviderError,
    handle_aic_exception,
    ollama_unreachable,
)
from aic.core.ui.theme import set_theme

# -----------------------------------------------------------------------------
# Messages
# -----------------------------------------------------------------------------


def test_aic_error_keeps_message_and_details():
    error = AICError("Something failed", "more context")
    assert error.message == "Something failed"
    assert error.details == "more context"
    assert str(error) == "Something failed"


def test_command_error_appends_hint():
    error = CommandError("Failed to pick a commit", "`list` command requires fzf")
    assert error.message == "Failed to pick a commit (hint: `list` command requires fzf)"
    assert CommandError("plain").message == "plain"


def test_git_errors():
    assert GitCommitError("abc123").message == "Commit 'abc123' not found"
    assert GitDiffError(staged=True).message == "diff (staged) is empty"
    assert GitDiffError(staged=False).message == "diff is empty"
    assert isinstance(GitDiffError(True), GitError)


def test_configuration_errors():
    assert (
        MissingApiKeyError("OpenAI").message
        == "Missing API key for OpenAI, use --api-key or AIC_API_KEY env variable"
    )
    assert (
        MissingModelError("Ollama").message
        == "Missing Model for Ollama, use --model or AIC_MODEL env variable"
    )
    assert isinstance(MissingModelError("Ollama"), ConfigurationError)


def test_provider_errors():
    error = ProviderError("Invalid API key", 401)
    assert error.status_code == 401
    assert NoCompletionError().message == "No completion choice available"

    unreachable = ollama_unreachable("http://localhost:11434")
    assert isinstance(unreachable, BackendUnreachableError)
    assert "http://localhost:11434" in unreachable.message


# -----------------------------------------------------------------------------
# handle_aic_exception
# -----------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def plain_theme():
    set_theme("mono")
    yield
    set_theme("classic")


def test_handler_maps_aic_error_to_exit_1(capsys):
    with pytest.raises(typer.Exit) as exc_info:
        with handle_aic_exception():
            raise GitDiffError(staged=True)

    assert exc_info.value.exit_code == 1
    assert "Error: diff (staged) is empty" in capsys.readouterr().err


def test_handler_maps_unexpected_error_to_exit_1(capsys):
    with pytest.raises(typer.Exit) as exc_info:
        with handle_aic_exception():
            raise RuntimeError("boom")

    assert exc_info.value.exit_code == 1
    assert "Unexpected error: boom" in capsys.readouterr().err


def test_handler_passes_typer_exit_through():
    with pytest.raises(typer.Exit) as exc_info:
        with handle_aic_exception():
            raise typer.Exit(0)

    assert exc_info.value.exit_code == 0
