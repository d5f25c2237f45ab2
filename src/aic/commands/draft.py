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

import typer
from loguru import logger

from aic.context import DraftContext, GlobalContext
from aic.core.exceptions import NoCompletionError, handle_aic_exception
from aic.core.git_entity.diff import GitDiff
from aic.core.git_entity.entity import DiffEntity
from aic.core.ui.clipboard import copy_to_clipboard
from aic.core.ui.spinner import Spinner
from aic.core.utils.sanitize import clean_commit_message

EMPTY_MESSAGE_ERROR = "Backend returned no usable commit message"


def run_draft(global_context: GlobalContext, draft_context: DraftContext) -> str:
    # an empty staged diff fails here, before any provider call
    entity = DiffEntity(GitDiff(global_context.git_commands, staged=True))

    spinner = Spinner("Generating commit message...").start()
    try:
        message = clean_commit_message(
            global_context.provider.draft(entity, draft_context.context)
        )
        if not message:
            raise NoCompletionError(EMPTY_MESSAGE_ERROR)
    except Exception:
        spinner.fail("Failed to generate commit message")
        raise

    logger.debug(f"Drafted commit message: {message!r}")

    copy_to_clipboard(message)
    spinner.succeed("Done - Commit message copied to clipboard")

    typer.echo(f"\n{message}")
    return message


def main(
    ctx: typer.Context,
    context: str | None = typer.Option(
        None, "--context", "-c", help="Describe the intent behind the changes."
    ),
) -> None:
    """Draft a conventional commit message for the staged changes."""
    with handle_aic_exception():
        run_draft(ctx.obj, DraftContext(context=context))
