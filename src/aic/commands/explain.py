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

from aic.context import ExplainContext, GlobalContext
from aic.core.exceptions import CommandError, handle_aic_exception
from aic.core.git_commands.git_commands import GitCommands
from aic.core.git_entity.commit import create_git_commit
from aic.core.git_entity.diff import GitDiff
from aic.core.git_entity.entity import (
    CommitEntity,
    DiffEntity,
    GitEntity,
    format_static_details,
)
from aic.core.logging.utils import time_block
from aic.core.ui.markdown import print_with_mdcat
from aic.core.ui.spinner import Spinner

EXPLAIN_USAGE = "`explain` expects SHA-1 or --diff to be present"


def resolve_entity(git_commands: GitCommands, explain_context: ExplainContext) -> GitEntity:
    # exactly one of a commit reference or --diff selects what to explain
    if bool(explain_context.sha) == explain_context.diff:
        raise CommandError(EXPLAIN_USAGE)

    if explain_context.sha:
        return CommitEntity(create_git_commit(git_commands, explain_context.sha))
    return DiffEntity(GitDiff(git_commands, staged=explain_context.staged))


def explain_entity(
    global_context: GlobalContext, entity: GitEntity, query: str | None = None
) -> str:
    print_with_mdcat(format_static_details(entity))
    if query:
        print_with_mdcat(f"`query`: {query}")

    spinner = Spinner("Generating answer" if query else "Generating summary").start()
    try:
        with time_block("explain"):
            result = global_context.provider.explain(entity, query, stream=True)
    except Exception:
        spinner.fail("Failed to generate explanation")
        raise
    spinner.succeed("Analysis complete")

    typer.echo(f"\n{result}")
    return result


def run_explain(global_context: GlobalContext, explain_context: ExplainContext) -> str:
    logger.debug(f"Explain command started: {explain_context}")
    entity = resolve_entity(global_context.git_commands, explain_context)
    return explain_entity(global_context, entity, explain_context.query)


def main(
    ctx: typer.Context,
    sha: str | None = typer.Argument(None, help="Commit to explain (any commit-ish)."),
    diff: bool = typer.Option(
        False, "--diff", "-d", help="Explain the working tree diff instead of a commit."
    ),
    staged: bool = typer.Option(
        False, "--staged", "-s", help="With --diff, explain the staged changes."
    ),
    query: str | None = typer.Option(
        None, "--query", "-q", help="Ask a specific question about the changes."
    ),
) -> None:
    """Explain a commit or the current diff."""
    with handle_aic_exception():
        run_explain(
            ctx.obj, ExplainContext(sha=sha, diff=diff, staged=staged, query=query)
        )
