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

from aic.commands.explain import explain_entity
from aic.context import GlobalContext
from aic.core.exceptions import handle_aic_exception
from aic.core.git_entity.commit import create_git_commit
from aic.core.git_entity.entity import CommitEntity
from aic.core.ui.picker import get_sha_from_fzf


def run_list(global_context: GlobalContext) -> str:
    sha = get_sha_from_fzf(global_context.repo_path)
    commit = create_git_commit(global_context.git_commands, sha)
    return explain_entity(global_context, CommitEntity(commit))


def main(ctx: typer.Context) -> None:
    """Pick a commit with fzf and explain it."""
    with handle_aic_exception():
        run_list(ctx.obj)
