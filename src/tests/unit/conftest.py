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

from pathlib import Path
from unittest.mock import Mock

import pytest

from aic.context import GlobalConfig, GlobalContext
from aic.core.git_commands.git_commands import GitCommands
from aic.core.git_interface.interface import GitInterface
from aic.core.llm.factory import AICProvider
from aic.core.llm.providers.base import ProviderAdapter, ProviderConfig


class DummyGit(GitInterface):
    """
    Answers git invocations from a table keyed by the argument tuple.

    A value may be a string, None (command failed) or a callable producing
    either, which lets a test change answers as state evolves.
    """

    def __init__(self, responses: dict | None = None, default: str | None = ""):
        self.responses = responses or {}
        self.default = default
        self.calls: list[list[str]] = []
        self.timeouts: list[float | None] = []

    def run_git_text(self, args, timeout=None):
        self.calls.append(list(args))
        self.timeouts.append(timeout)
        answer = self.responses.get(tuple(args), self.default)
        if callable(answer):
            return answer()
        return answer


class ScriptedAdapter(ProviderAdapter):
    """Returns queued completions in order and records every prompt it saw."""

    name = "scripted"

    def __init__(self, completions: list[str | Exception]):
        super().__init__(Mock(), ProviderConfig(model="scripted", api_base_url=""))
        self.completions = list(completions)
        self.prompts = []

    def complete(self, prompt, stream=False):
        self.prompts.append(prompt)
        result = self.completions.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def dummy_git():
    return DummyGit


@pytest.fixture
def scripted_provider():
    def make(completions, provider_type="openai"):
        adapter = ScriptedAdapter(completions)
        return AICProvider(adapter, provider_type), adapter

    return make


@pytest.fixture
def make_context(scripted_provider):
    def make(
        git_responses=None,
        completions=(),
        provider_type="openai",
        **config,
    ):
        git = DummyGit(git_responses)
        provider, adapter = scripted_provider(list(completions), provider_type)
        context = GlobalContext(
            repo_path=Path("."),
            config=GlobalConfig(provider=provider_type, **config),
            provider=provider,
            git_interface=git,
            git_commands=GitCommands(git),
        )
        return context, git, adapter

    return make


@pytest.fixture(autouse=True)
def quiet_ui(monkeypatch):
    """Keep mdcat and the clipboard out of command tests."""
    monkeypatch.setattr("aic.commands.explain.print_with_mdcat", Mock())
    copy = Mock(return_value=True)
    monkeypatch.setattr("aic.commands.draft.copy_to_clipboard", copy)
    return copy
