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
import re
import time
from collections.abc import Callable

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from aic.constants import CATEGORIZE_MAX_ATTEMPTS, CATEGORIZE_RETRY_DELAY
from aic.core.data.models import ChangeGroup, FileChange, FileStatus
from aic.core.exceptions import ResponseFormatError
from aic.core.llm.factory import AICProvider
from aic.core.ui.theme import themed

_FENCE_OPEN_RE = re.compile(r"```json\s*")
_FENCE_CLOSE_RE = re.compile(r"```\s*$")
_JSON_KEYWORD_RE = re.compile(r"^json\s*")
_JSON_ARRAY_RE = re.compile(r"\[\s*\{[\s\S]*\}\s*\]")

_groups_adapter = TypeAdapter(list[ChangeGroup])


class MalformedGroupingError(ValueError):
    """The response could not be turned into a list of ChangeGroup."""


def parse_change_groups(response: str) -> list[ChangeGroup]:
    """
    Extract and validate the JSON array of groups from a raw completion.

    Tolerates code fences, a leading `json` keyword and chatter around the
    array.

    Raises:
        MalformedGroupingError: no array found, invalid JSON, or a schema mismatch
    """
    cleaned = _FENCE_OPEN_RE.sub("", response)
    cleaned = _FENCE_CLOSE_RE.sub("", cleaned)
    cleaned = _JSON_KEYWORD_RE.sub("", cleaned).strip()

    match = _JSON_ARRAY_RE.search(cleaned)
    if not match:
        raise MalformedGroupingError("No JSON array found in response")

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise MalformedGroupingError(f"Invalid JSON: {e}") from e

    try:
        return _groups_adapter.validate_python(parsed)
    except ValidationError as e:
        raise MalformedGroupingError(f"Invalid response format: {e}") from e


def categorize_with_retry(
    provider: AICProvider,
    changes: list[FileChange],
    max_attempts: int = CATEGORIZE_MAX_ATTEMPTS,
    retry_delay: float = CATEGORIZE_RETRY_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> list[ChangeGroup]:
    """
    Ask the provider to group `changes`, retrying malformed answers.

    Only parse/validation failures are retried, with a flat `retry_delay`
    between attempts. Provider errors propagate on the first occurrence.

    Raises:
        ResponseFormatError: every one of `max_attempts` answers was malformed
    """
    for attempt in range(1, max_attempts + 1):
        if attempt > 1:
            logger.debug(f"Retry attempt {attempt} of {max_attempts}")

        response = provider.categorize_files(changes)

        try:
            groups = parse_change_groups(response)
        except MalformedGroupingError as e:
            logger.debug(f"Attempt {attempt} failed: {e}")
            if attempt < max_attempts:
                sleep(retry_delay)
            continue

        logger.debug(f"Categorized {len(changes)} files into {len(groups)} groups")
        return groups

    raise ResponseFormatError(
        "Failed to get proper response format after maximum retries. Please try again."
    )


_STATUS_GLYPHS = {
    FileStatus.ADDED: ("+ ", "file_added"),
    FileStatus.DELETED: ("- ", "file_deleted"),
    FileStatus.RENAMED: ("~ ", "file_renamed"),
    FileStatus.MODIFIED: ("• ", "file_modified"),
}


def status_glyph(status: FileStatus) -> str:
    return _STATUS_GLYPHS[status][0]


def format_groups(groups: list[ChangeGroup], color: bool = True) -> str:
    """Render groups as `category:` headers with indented, glyph-prefixed files."""

    def paint(key: str, text: str) -> str:
        return themed(key, text) if color else text

    lines = ["Suggested file categorization:"]
    for group in groups:
        lines.append("")
        lines.append(paint("category", f"{group.category}:"))
        for file in group.files:
            glyph, key = _STATUS_GLYPHS[file.status]
            lines.append(f"  {paint(key, glyph)}{file.path}")
    return "\n".join(lines)
