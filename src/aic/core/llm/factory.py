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

"""Provider selection and the task-level facade every command goes through."""

import os
from typing import Literal, get_args

import httpx
from loguru import logger

from aic.constants import HTTP_TIMEOUT_SECONDS, PROVIDER_KEY_ENV_VARS
from aic.core.data.models import FileChange
from aic.core.exceptions import (
    ConfigurationError,
    MissingApiKeyError,
    MissingModelError,
)
from aic.core.git_entity.entity import GitEntity
from aic.core.llm.prompts import (
    build_categorize_prompt,
    build_draft_prompt,
    build_explain_prompt,
)
from aic.core.llm.providers.base import ProviderAdapter
from aic.core.llm.providers.claude import ClaudeAdapter
from aic.core.llm.providers.groq import GroqAdapter
from aic.core.llm.providers.ollama import OllamaAdapter
from aic.core.llm.providers.openai import OpenAIAdapter
from aic.core.llm.providers.phind import PhindAdapter
from aic.core.logging.utils import truncate_for_log

ProviderType = Literal["openai", "claude", "groq", "ollama", "phind"]
PROVIDER_TYPES: tuple[str, ...] = get_args(ProviderType)

# display names used in configuration error messages
_DISPLAY_NAMES = {
    "openai": "OpenAI",
    "claude": "Claude",
    "groq": "Groq",
    "ollama": "Ollama",
    "phind": "Phind",
}


def _resolve_api_key(provider_type: str, api_key: str | None) -> str:
    if api_key:
        return api_key

    env_var = PROVIDER_KEY_ENV_VARS.get(provider_type)
    if env_var and os.getenv(env_var):
        logger.debug(f"Using API key from {env_var}")
        return os.environ[env_var]

    raise MissingApiKeyError(_DISPLAY_NAMES[provider_type])


def create_adapter(
    provider_type: str,
    client: httpx.Client,
    api_key: str | None = None,
    model: str | None = None,
    max_tokens: int | None = None,
) -> ProviderAdapter:
    """
    Build the adapter for `provider_type`, failing fast on missing credentials.

    Raises:
        MissingApiKeyError: openai, claude or groq without a key
        MissingModelError: ollama without a model
        ConfigurationError: unknown provider identifier
    """
    match provider_type:
        case "openai":
            key = _resolve_api_key(provider_type, api_key)
            return OpenAIAdapter.create(client, key, model, max_tokens)
        case "claude":
            key = _resolve_api_key(provider_type, api_key)
            return ClaudeAdapter.create(client, key, model, max_tokens)
        case "groq":
            key = _resolve_api_key(provider_type, api_key)
            return GroqAdapter.create(client, key, model, max_tokens)
        case "ollama":
            if not model:
                raise MissingModelError(_DISPLAY_NAMES[provider_type])
            return OllamaAdapter.create(client, model, max_tokens)
        case "phind":
            return PhindAdapter.create(client, model)
        case _:
            raise ConfigurationError(
                f"Unknown provider type: {provider_type}. "
                f"Supported providers: {', '.join(PROVIDER_TYPES)}"
            )


class AICProvider:
    """
    The single seam for AI calls. Each operation builds its prompt and hands
    it to the adapter bound at construction.
    """

    def __init__(self, adapter: ProviderAdapter, provider_type: str):
        self._adapter = adapter
        self._provider_type = provider_type

    @classmethod
    def create(
        cls,
        provider_type: str,
        api_key: str | None = None,
        model: str | None = None,
        max_tokens: int | None = None,
        client: httpx.Client | None = None,
    ) -> "AICProvider":
        if client is None:
            client = httpx.Client(timeout=HTTP_TIMEOUT_SECONDS)
        adapter = create_adapter(provider_type, client, api_key, model, max_tokens)
        logger.debug(
            f"Using provider={provider_type} model={adapter.config.model}"
        )
        return cls(adapter, provider_type)

    @property
    def provider_type(self) -> str:
        return self._provider_type

    @property
    def model(self) -> str:
        return self._adapter.config.model

    def close(self) -> None:
        self._adapter.client.close()

    def explain(
        self, entity: GitEntity, query: str | None = None, stream: bool = False
    ) -> str:
        prompt = build_explain_prompt(entity, query)
        return self._complete("explain", prompt, stream)

    def draft(self, entity: GitEntity, context: str | None = None) -> str:
        prompt = build_draft_prompt(entity, context)
        return self._complete("draft", prompt, False)

    def categorize_files(self, changes: list[FileChange]) -> str:
        prompt = build_categorize_prompt(changes)
        return self._complete("categorize", prompt, False)

    def _complete(self, task: str, prompt, stream: bool) -> str:
        logger.debug(f"Requesting {task} completion from {self._provider_type}")
        result = self._adapter.complete(prompt, stream)
        logger.debug(f"Raw {task} response: {truncate_for_log(result)}")
        return result
