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

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from aic.constants import (
    CATEGORIZE_MAX_ATTEMPTS,
    CATEGORIZE_RETRY_DELAY,
    DEFAULT_PROVIDER,
)
from aic.core.git_commands.git_commands import GitCommands
from aic.core.git_interface.interface import GitInterface
from aic.core.git_interface.SubprocessGitInterface import (
    SubprocessGitInterface,
)
from aic.core.llm import AICProvider, ProviderType


class GlobalConfig(BaseModel):
    provider: ProviderType = Field(
        default=DEFAULT_PROVIDER,
        description="AI provider (openai, claude, groq, ollama, phind)",
    )
    api_key: str | None = Field(
        default=None, description="API key for the selected provider"
    )
    model: str | None = Field(
        default=None, description="Model name, required for ollama"
    )
    debug: bool = Field(default=False, description="Enable debug logging output")
    max_tokens: int | None = Field(
        default=None, gt=0, description="Upper bound on tokens in a completion"
    )
    categorize_max_attempts: int = Field(
        default=CATEGORIZE_MAX_ATTEMPTS,
        ge=1,
        description="How many times to ask for a well formed categorization",
    )
    categorize_retry_delay: float = Field(
        default=CATEGORIZE_RETRY_DELAY,
        ge=0.0,
        description="Seconds to wait between categorization attempts",
    )
    theme: Literal["classic", "ocean", "mono"] = Field(
        default="classic", description="Colour theme for terminal output"
    )


@dataclass(frozen=True)
class GlobalContext:
    repo_path: Path
    config: GlobalConfig
    provider: AICProvider
    git_interface: GitInterface
    git_commands: GitCommands

    @classmethod
    def from_global_config(cls, config: GlobalConfig, repo_path: Path):
        provider = AICProvider.create(
            config.provider, config.api_key, config.model, config.max_tokens
        )

        git_interface = SubprocessGitInterface(repo_path)
        git_commands = GitCommands(git_interface)

        return GlobalContext(repo_path, config, provider, git_interface, git_commands)

    def close(self) -> None:
        self.provider.close()


@dataclass(frozen=True)
class ExplainContext:
    sha: str | None = None
    diff: bool = False
    staged: bool = False
    query: str | None = None


@dataclass(frozen=True)
class DraftContext:
    context: str | None = None


@dataclass(frozen=True)
class CategorizeContext:
    staged: bool = False
