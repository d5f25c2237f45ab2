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

"""
Custom exception hierarchy for the aic CLI application.

Every error the tool knows how to explain to the user derives from
AICError. Anything reaching the CLI entry outside of this family is
reported as an unexpected error. Both paths exit with status 1.
"""

import contextlib

import click
import typer
from loguru import logger

from aic.core.ui.theme import themed


class AICError(Exception):
    """
    Base exception for all aic-related errors.

    All aic-specific exceptions should inherit from this class
    to enable consistent error handling throughout the application.
    """

    def __init__(self, message: str, details: str | None = None):
        """
        Initialize an AICError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class CommandError(AICError):
    """
    Usage errors.

    Raised when a command is invoked with an invalid combination of
    arguments, or when an external helper the command needs fails.
    """

    def __init__(self, message: str, hint: str | None = None):
        self.hint = hint
        super().__init__(f"{message} (hint: {hint})" if hint else message)


class GitError(AICError):
    """
    Errors related to git operations.

    Raised when git commands fail or when git repository
    state is invalid for the requested operation.
    """

    pass


class GitCommitError(GitError):
    """Raised when a commit reference cannot be resolved or has no diff."""

    def __init__(self, sha: str):
        self.sha = sha
        super().__init__(f"Commit '{sha}' not found")


class GitDiffError(GitError):
    """Raised when the working tree (or index) diff is empty."""

    def __init__(self, staged: bool):
        self.staged = staged
        super().__init__(f"diff{' (staged)' if staged else ''} is empty")


class ConfigurationError(AICError):
    """
    Configuration-related errors.

    Raised when configuration files are invalid, missing,
    or contain incompatible settings.
    """

    pass


class MissingApiKeyError(ConfigurationError):
    def __init__(self, provider: str):
        super().__init__(
            f"Missing API key for {provider}, use --api-key or AIC_API_KEY env variable"
        )


class MissingModelError(ConfigurationError):
    def __init__(self, provider: str):
        super().__init__(
            f"Missing Model for {provider}, use --model or AIC_MODEL env variable"
        )


class ProviderError(AICError):
    """
    AI provider errors.

    Raised when a provider answers with a non-success status or with a
    body that does not contain a completion.
    """

    def __init__(
        self, message: str, status_code: int | None = None, details: str | None = None
    ):
        self.status_code = status_code
        super().__init__(message, details)


class NoCompletionError(ProviderError):
    """Raised when a successful response carries no completion text."""

    def __init__(self, message: str = "No completion choice available"):
        super().__init__(message)


class BackendUnreachableError(ProviderError):
    """Raised when a local backend refuses the connection (not running)."""

    pass


class ResponseFormatError(AICError):
    """Raised when a structured AI response stays malformed after all retries."""

    pass


# Convenience functions for creating common errors
def git_not_found() -> GitError:
    """Create a GitError for when git is not available."""
    return GitError(
        "Git is not installed or not in PATH",
        "Please install git and ensure it's available in your PATH environment variable",
    )


def not_git_repository(path: str = ".") -> GitError:
    """Create a GitError for when not in a git repository."""
    return GitError(
        f"Not a git repository: {path}",
        "Run 'git init' to initialize a git repository or navigate to an existing repository",
    )


def ollama_unreachable(base_url: str) -> BackendUnreachableError:
    return BackendUnreachableError(
        f"Could not connect to Ollama at {base_url}. Is it running? (start it with: ollama serve)"
    )


@contextlib.contextmanager
def handle_aic_exception():
    """
    Map errors escaping a command to a printed message and exit status 1.

    typer/click control flow (Exit, Abort, usage errors) passes through
    untouched so --help and friends keep working.
    """
    try:
        yield
    except (typer.Exit, click.exceptions.Exit, click.ClickException, click.Abort):
        raise
    except AICError as e:
        if e.details:
            logger.debug(f"{type(e).__name__} details: {e.details}")
        typer.echo(f"{themed('error', 'Error:')} {e.message}", err=True)
        raise typer.Exit(1) from e
    except Exception as e:
        logger.opt(exception=e).debug("Unexpected error")
        typer.echo(f"{themed('error', 'Unexpected error:')} {e}", err=True)
        raise typer.Exit(1) from e
