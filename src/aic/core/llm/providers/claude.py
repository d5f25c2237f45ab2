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

from typing import Any

import httpx

from aic.core.llm.prompts import Prompt
from aic.core.llm.providers.base import (
    ProviderAdapter,
    ProviderConfig,
    json_body,
    raise_for_status,
    require_content,
)

CLAUDE_API_URL = "https://api.anthropic.com/v1/messages"
CLAUDE_API_VERSION = "2023-06-01"
CLAUDE_DEFAULT_MODEL = "claude-3-sonnet-20240229"
# the messages API requires max_tokens on every request
CLAUDE_DEFAULT_MAX_TOKENS = 4096


def _first_text_block(data: Any) -> Any:
    if not isinstance(data, dict):
        return None
    content = data.get("content")
    if not isinstance(content, list) or not content or not isinstance(content[0], dict):
        return None
    return content[0].get("text")


class ClaudeAdapter(ProviderAdapter):
    name = "claude"

    @classmethod
    def create(
        cls,
        client: httpx.Client,
        api_key: str,
        model: str | None = None,
        max_tokens: int | None = None,
    ) -> "ClaudeAdapter":
        return cls(
            client,
            ProviderConfig(
                model=model or CLAUDE_DEFAULT_MODEL,
                api_base_url=CLAUDE_API_URL,
                api_key=api_key,
                max_tokens=max_tokens or CLAUDE_DEFAULT_MAX_TOKENS,
            ),
        )

    def complete(self, prompt: Prompt, stream: bool = False) -> str:
        payload = {
            "model": self.config.model,
            "max_tokens": self.config.max_tokens,
            "system": prompt.system_prompt,
            "messages": [{"role": "user", "content": prompt.user_prompt}],
        }

        response = self._post(
            payload,
            headers={
                "x-api-key": self.config.api_key,
                "anthropic-version": CLAUDE_API_VERSION,
                "Content-Type": "application/json",
            },
        )
        raise_for_status(response)

        return require_content(_first_text_block(json_body(response)))
