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

import time
from collections.abc import Callable

import typer
from loguru import logger

from aic.commands.draft import EMPTY_MESSAGE_ERROR
from aic.context import GlobalContext
from aic.core.categorizer.categorizer import categorize_with_retry
from aic.core.data.models import ChangeGroup
from aic.core.exceptions import CommandError, NoCompletionError, handle_aic_exception
from aic.core.git_entity.diff import GitDiff
from aic.core.git_entity.entity import DiffEntity
from aic.core.ui.spinner import Spinner
from aic.core.ui.theme import themed
from aic.core.utils.sanitize import clean_commit_message


def commit_group(
    global_context: GlobalContext, group: ChangeGroup, processed: set[str]
) -> bool:
    """
    Stage the not yet processed files of `group` and commit them.

    Returns False when every file was already handled by an earlier group.
    """
    unprocessed = [file for file in group.files if file.path not in processed]
    if not unprocessed:
        logger.debug(f"Skipping {group.category}: files already processed")
        return False

    git_commands = global_context.git_commands
    with Spinner(f"Processing {group.category}") as spinner:
        try:
            for file in unprocessed:
                spinner.update(f"Staging {file.path}")
                git_commands.stage_file(file.path)
                processed.add(file.path)

            spinner.update("Generating commit message")
            entity = DiffEntity(GitDiff(git_commands, staged=True))
            context = (
                f"Category: {group.category}\n"
                f"Files: {', '.join(file.path for file in unprocessed)}"
            )
            message = clean_commit_message(
                global_context.provider.draft(entity, context)
            )
            if not message:
                raise NoCompletionError(EMPTY_MESSAGE_ERROR)

            spinner.update("Creating commit")
            git_commands.commit(message)
        except Exception:
            spinner.fail(f"Failed to process {group.category}")
            raise

        spinner.succeed(f"Committed changes in {group.category}: {message}")
    return True


def run_batch(
    global_context: GlobalContext, sleep: Callable[[float], None] = time.sleep
) -> int:
    """Split every pending change into categorized commits. Returns the commit count."""
    if global_context.provider.provider_type == "phind":
        raise CommandError(
            "Batch command is not available with Phind provider due to API limitations",
            "choose another provider with --provider",
        )

    config = global_context.config
    with Spinner("Analyzing changes") as spinner:
        changes = global_context.git_commands.get_status_changes()
        if not changes:
            spinner.fail("No changes found")
            return 0

        logger.debug(f"Found changes: {[c.model_dump(mode='json') for c in changes]}")

        spinner.update("Categorizing changes with AI")
        try:
            groups = categorize_with_retry(
                global_context.provider,
                changes,
                max_attempts=config.categorize_max_attempts,
                retry_delay=config.categorize_retry_delay,
                sleep=sleep,
            )
        except Exception:
            spinner.fail("Failed to process changes")
            raise
        spinner.succeed(f"Found {len(groups)} groups of changes")

    processed: set[str] = set()
    committed = 0
    for group in groups:
        if commit_group(global_context, group, processed):
            committed += 1

    typer.echo(themed("success", "\nAll changes have been committed successfully!"))
    return committed


def main(ctx: typer.Context) -> None:
    """Group pending changes by purpose and commit each group."""
    with handle_aic_exception():
        run_batch(ctx.obj)
