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

import httpx

from aic.core.llm.prompts import Prompt
from aic.core.llm.providers.base import (
    ProviderAdapter,
    ProviderConfig,
    chat_messages,
    first_choice_content,
    json_body,
    raise_for_status,
    require_content,
)

OPENAI_API_URL = "https://api.openai.com/v1/chat/completions"
OPENAI_DEFAULT_MODEL = "gpt-4-turbo-preview"


class OpenAIAdapter(ProviderAdapter):
    name = "openai"

    @classmethod
    def create(
        cls,
        client: httpx.Client,
        api_key: str,
        model: str | None = None,
        max_tokens: int | None = None,
    ) -> "OpenAIAdapter":
        return cls(
            client,
            ProviderConfig(
                model=model or OPENAI_DEFAULT_MODEL,
                api_base_url=OPENAI_API_URL,
                api_key=api_key,
                max_tokens=max_tokens,
            ),
        )

    def complete(self, prompt: Prompt, stream: bool = False) -> str:
        payload = {"model": self.config.model, "messages": chat_messages(prompt)}
        if self.config.max_tokens:
            payload["max_tokens"] = self.config.max_tokens

        response = self._post(
            payload,
            headers={
                "Authorization": f"Bearer {self.config.api_key}",
                "Content-Type": "application/json",
            },
        )
        raise_for_status(response)

        return require_content(first_choice_content(json_body(response)))
