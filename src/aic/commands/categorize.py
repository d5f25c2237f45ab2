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

from aic.context import CategorizeContext, GlobalContext
from aic.core.categorizer.categorizer import categorize_with_retry, format_groups
from aic.core.data.models import ChangeGroup
from aic.core.exceptions import handle_aic_exception
from aic.core.ui.spinner import Spinner


def run_categorize(
    global_context: GlobalContext,
    categorize_context: CategorizeContext,
    sleep: Callable[[float], None] = time.sleep,
    color: bool = True,
) -> list[ChangeGroup]:
    config = global_context.config
    with Spinner("Analyzing changes") as spinner:
        changes = global_context.git_commands.get_changed_files(
            categorize_context.staged
        )
        if not changes:
            spinner.fail("No changes found")
            return []

        spinner.update("Categorizing changes")
        try:
            groups = categorize_with_retry(
                global_context.provider,
                changes,
                max_attempts=config.categorize_max_attempts,
                retry_delay=config.categorize_retry_delay,
                sleep=sleep,
            )
        except Exception:
            spinner.fail("Failed to categorize changes")
            raise
        spinner.succeed("Changes categorized")

    typer.echo(f"\n{format_groups(groups, color=color)}")
    return groups


def main(
    ctx: typer.Context,
    staged: bool = typer.Option(
        False, "--staged", "-s", help="Categorize staged changes instead."
    ),
) -> None:
    """Suggest how the changed files group into logical changes."""
    with handle_aic_exception():
        run_categorize(ctx.obj, CategorizeContext(staged=staged))
