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

import json
from collections.abc import Iterable, Iterator

import httpx
from loguru import logger

from aic.core.exceptions import ProviderError
from aic.core.llm.prompts import Prompt
from aic.core.llm.providers.base import (
    ProviderAdapter,
    ProviderConfig,
    raise_for_status,
    require_content,
    text_error_message,
)

PHIND_API_URL = "https://https.extension.phind.com/agent/"
PHIND_DEFAULT_MODEL = "Phind-70B"

_DATA_PREFIX = "data: "


def parse_event_line(line: str) -> str | None:
    """Delta text carried by one server-sent-event line, if any."""
    if not line.startswith(_DATA_PREFIX):
        return None
    try:
        data = json.loads(line[len(_DATA_PREFIX) :])
        return data["choices"][0]["delta"]["content"]
    except (json.JSONDecodeError, KeyError, IndexError, TypeError):
        return None


def iter_delta_fragments(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        content = parse_event_line(line)
        if isinstance(content, str):
            yield content


class PhindAdapter(ProviderAdapter):
    """
    Phind's VS Code extension endpoint. It needs no key and always answers
    with an event stream; the adapter consumes it fully and returns the
    concatenated text. Only the user prompt is sent.
    """

    name = "phind"

    @classmethod
    def create(cls, client: httpx.Client, model: str | None = None) -> "PhindAdapter":
        return cls(
            client,
            ProviderConfig(model=model or PHIND_DEFAULT_MODEL, api_base_url=PHIND_API_URL),
        )

    def complete(self, prompt: Prompt, stream: bool = False) -> str:
        payload = {
            "additional_extension_context": "",
            "allow_magic_buttons": True,
            "is_vscode_extension": True,
            "message_history": [{"content": prompt.user_prompt, "role": "user"}],
            "requested_model": self.config.model,
            "user_input": prompt.user_prompt,
        }
        headers = {
            "Content-Type": "application/json",
            "User-Agent": "",
            "Accept": "*/*",
            "Accept-Encoding": "Identity",
        }

        logger.debug(
            f"POST {self.config.api_base_url} provider={self.name} model={self.config.model} (stream)"
        )
        try:
            with self.client.stream(
                "POST", self.config.api_base_url, json=payload, headers=headers
            ) as response:
                if not response.is_success:
                    response.read()
                    raise_for_status(response, text_error_message)

                text = "".join(iter_delta_fragments(response.iter_lines()))
        except httpx.HTTPError as e:
            raise ProviderError(f"Request to {self.name} failed: {e}") from e

        return require_content(text)
