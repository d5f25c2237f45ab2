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

"""Shared plumbing for the provider adapters."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx
from loguru import logger

from aic.core.exceptions import NoCompletionError, ProviderError
from aic.core.llm.prompts import Prompt
from aic.core.logging.utils import truncate_for_log


@dataclass(frozen=True)
class ProviderConfig:
    model: str
    api_base_url: str
    api_key: str | None = None
    max_tokens: int | None = None


class ProviderAdapter(ABC):
    """Translates a Prompt into one backend's HTTP request and back into text."""

    name: str = "provider"

    def __init__(self, client: httpx.Client, config: ProviderConfig):
        self.client = client
        self.config = config

    @abstractmethod
    def complete(self, prompt: Prompt, stream: bool = False) -> str:
        """Return the completion text. Never returns an empty string."""

    def _post(self, payload: dict[str, Any], headers: dict[str, str]) -> httpx.Response:
        logger.debug(
            f"POST {self.config.api_base_url} provider={self.name} model={self.config.model}"
        )
        try:
            response = self.client.post(
                self.config.api_base_url, json=payload, headers=headers
            )
        except httpx.HTTPError as e:
            raise ProviderError(f"Request to {self.name} failed: {e}") from e

        logger.debug(f"{self.name} responded with status {response.status_code}")
        return response


def json_error_message(response: httpx.Response) -> str:
    """Pull `error.message` out of an error body, whatever shape the body has."""
    try:
        body = response.json()
    except ValueError:
        return "Unknown error"

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        if isinstance(error, str) and error:
            return error
    return "Unknown error"


def text_error_message(response: httpx.Response) -> str:
    return response.text or "Unknown error"


def raise_for_status(
    response: httpx.Response,
    error_message: Callable[[httpx.Response], str] = json_error_message,
) -> None:
    if not response.is_success:
        raise ProviderError(
            error_message(response),
            response.status_code,
            truncate_for_log(response.text),
        )


def json_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        logger.debug(f"Response body is not JSON: {truncate_for_log(response.text)}")
        raise NoCompletionError() from e


def require_content(content: Any) -> str:
    if not isinstance(content, str) or not content:
        raise NoCompletionError()
    return content


def chat_messages(prompt: Prompt) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": prompt.system_prompt},
        {"role": "user", "content": prompt.user_prompt},
    ]


def first_choice_content(data: Any) -> Any:
    """`choices[0].message.content` of a chat-completions body, or None."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message")
    if not isinstance(message, dict):
        return None
    return message.get("content")
