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

from unittest.mock import Mock

import httpx
import pytest

from aic.core.exceptions import ConfigurationError, MissingApiKeyError, MissingModelError
from aic.core.git_commands.git_commands import GitCommands
from aic.core.git_entity.diff import GitDiff
from aic.core.git_entity.entity import DiffEntity
from aic.core.llm.factory import PROVIDER_TYPES, AICProvider, create_adapter
from aic.core.llm.providers.claude import ClaudeAdapter
from aic.core.llm.providers.ollama import OllamaAdapter
from aic.core.llm.providers.openai import OpenAIAdapter
from aic.core.llm.providers.phind import PhindAdapter


@pytest.fixture
def client():
    return Mock(spec=httpx.Client)


@pytest.fixture(autouse=True)
def no_provider_keys(monkeypatch):
    for var in ("OPENAI_API_KEY", "ANTHROPIC_API_KEY", "GROQ_API_KEY", "OLLAMA_BASE_URL"):
        monkeypatch.delenv(var, raising=False)


def test_provider_types():
    assert PROVIDER_TYPES == ("openai", "claude", "groq", "ollama", "phind")


@pytest.mark.parametrize(
    ("provider_type", "display"),
    [("openai", "OpenAI"), ("claude", "Claude"), ("groq", "Groq")],
)
def test_keyed_providers_require_api_key(client, provider_type, display):
    with pytest.raises(MissingApiKeyError, match=f"Missing API key for {display}"):
        create_adapter(provider_type, client)


def test_api_key_falls_back_to_provider_env_var(client, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-env")

    adapter = create_adapter("claude", client)

    assert isinstance(adapter, ClaudeAdapter)
    assert adapter.config.api_key == "sk-ant-env"


def test_explicit_api_key_wins_over_env(client, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")

    adapter = create_adapter("openai", client, api_key="sk-flag", model="gpt-4o")

    assert isinstance(adapter, OpenAIAdapter)
    assert adapter.config.api_key == "sk-flag"
    assert adapter.config.model == "gpt-4o"


def test_ollama_requires_model(client):
    with pytest.raises(MissingModelError, match="Missing Model for Ollama"):
        create_adapter("ollama", client)


def test_ollama_with_model(client):
    adapter = create_adapter("ollama", client, model="llama3", max_tokens=256)

    assert isinstance(adapter, OllamaAdapter)
    assert adapter.config.api_base_url == "http://localhost:11434/api/generate"
    assert adapter.config.max_tokens == 256


def test_phind_needs_nothing(client):
    adapter = create_adapter("phind", client)

    assert isinstance(adapter, PhindAdapter)
    assert adapter.config.model == "Phind-70B"


def test_unknown_provider(client):
    with pytest.raises(ConfigurationError, match="Unknown provider type: mistral"):
        create_adapter("mistral", client)


def test_facade_exposes_provider_type_and_model(client):
    provider = AICProvider.create("phind", client=client)

    assert provider.provider_type == "phind"
    assert provider.model == "Phind-70B"

    provider.close()
    client.close.assert_called_once()


def test_facade_explain_delegates_to_adapter(scripted_provider, dummy_git):
    provider, adapter = scripted_provider(["An answer"])
    entity = DiffEntity(GitDiff(GitCommands(dummy_git({("diff",): "+x\n"}))))

    assert provider.explain(entity, "What changed?") == "An answer"
    assert "Question: What changed?" in adapter.prompts[0].user_prompt
