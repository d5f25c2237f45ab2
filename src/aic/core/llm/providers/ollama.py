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
import os
from collections.abc import Iterable, Iterator

import httpx
from loguru import logger

from aic.constants import DEFAULT_OLLAMA_BASE_URL
from aic.core.exceptions import ProviderError, ollama_unreachable
from aic.core.llm.prompts import Prompt
from aic.core.llm.providers.base import (
    ProviderAdapter,
    ProviderConfig,
    json_body,
    raise_for_status,
    require_content,
    text_error_message,
)


def iter_response_fragments(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield the `response` text of each newline-delimited JSON chunk.

    Lines that are blank or not JSON (a chunk cut mid-object) are skipped.
    """
    for line in lines:
        if not line.strip():
            continue
        try:
            chunk = json.loads(line)
        except json.JSONDecodeError:
            logger.debug(f"Skipping partial ollama chunk: {line!r}")
            continue
        if isinstance(chunk, dict) and chunk.get("response"):
            yield chunk["response"]


class OllamaAdapter(ProviderAdapter):
    """Local Ollama server, /api/generate endpoint."""

    name = "ollama"

    @classmethod
    def create(
        cls,
        client: httpx.Client,
        model: str,
        max_tokens: int | None = None,
        base_url: str | None = None,
    ) -> "OllamaAdapter":
        base_url = base_url or os.getenv("OLLAMA_BASE_URL", DEFAULT_OLLAMA_BASE_URL)
        return cls(
            client,
            ProviderConfig(
                model=model,
                api_base_url=base_url.rstrip("/") + "/api/generate",
                max_tokens=max_tokens,
            ),
        )

    def complete(self, prompt: Prompt, stream: bool = False) -> str:
        payload = {
            "model": self.config.model,
            "prompt": f"{prompt.system_prompt}\n\n{prompt.user_prompt}",
            "stream": stream,
        }
        if self.config.max_tokens:
            payload["options"] = {"num_predict": self.config.max_tokens}

        try:
            if stream:
                return self._complete_streaming(payload)

            logger.debug(
                f"POST {self.config.api_base_url} provider={self.name} model={self.config.model}"
            )
            response = self.client.post(
                self.config.api_base_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.ConnectError as e:
            raise ollama_unreachable(self._server_url) from e
        except httpx.HTTPError as e:
            raise ProviderError(f"Request to {self.name} failed: {e}") from e

        raise_for_status(response, text_error_message)

        data = json_body(response)
        return require_content(data.get("response") if isinstance(data, dict) else None)

    def _complete_streaming(self, payload: dict) -> str:
        logger.debug(
            f"POST {self.config.api_base_url} provider={self.name} model={self.config.model} (stream)"
        )
        with self.client.stream(
            "POST",
            self.config.api_base_url,
            json=payload,
            headers={"Content-Type": "application/json"},
        ) as response:
            if not response.is_success:
                response.read()
                raise_for_status(response, text_error_message)

            text = "".join(iter_response_fragments(response.iter_lines()))

        return require_content(text)

    @property
    def _server_url(self) -> str:
        return self.config.api_base_url.removesuffix("/api/generate")
