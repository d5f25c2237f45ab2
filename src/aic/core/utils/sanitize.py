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

"""Utilities for sanitizing LLM outputs."""

import re

_MARKDOWN_CHARS_RE = re.compile(r"[*_#`]")
_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_llm_text(text: str) -> str:
    """
    Sanitizes text output from LLMs by removing problematic characters.

    LLMs occasionally produce control characters like null bytes (\\x00)
    which break subprocess arguments, e.g. when the text is passed on to
    `git commit -m`.

    Args:
        text: Raw text from LLM output.

    Returns:
        Sanitized text with problematic characters removed.
    """
    if not text:
        return text

    return text.replace("\x00", "").strip()


def clean_commit_message(message: str) -> str:
    """
    Reduce a drafted commit message to a single plain line.

    Keeps the first line that is neither blank nor a code fence, strips
    markdown emphasis/heading/code characters and collapses runs of
    whitespace.
    """
    message = sanitize_llm_text(message)
    if not message:
        return message

    first_line = next(
        (
            line.strip()
            for line in message.splitlines()
            if line.strip() and not line.strip().startswith("```")
        ),
        "",
    )
    first_line = _MARKDOWN_CHARS_RE.sub("", first_line)
    return _WHITESPACE_RE.sub(" ", first_line).strip()
