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

from dataclasses import dataclass
from typing import Literal

from aic.core.git_entity.commit import GitCommit
from aic.core.git_entity.diff import GitDiff


@dataclass(frozen=True)
class CommitEntity:
    data: GitCommit
    kind: Literal["commit"] = "commit"


@dataclass(frozen=True)
class DiffEntity:
    data: GitDiff
    kind: Literal["diff"] = "diff"


GitEntity = CommitEntity | DiffEntity


def format_static_details(entity: GitEntity) -> str:
    """Markdown header shown above an explanation."""
    if isinstance(entity, CommitEntity):
        commit = entity.data
        return (
            "# Entity: Commit\n"
            f"`commit {commit.hash}` | {commit.author} <{commit.email}> | {commit.date.isoformat()}\n"
            "\n"
            f"{commit.message}\n"
            "-----\n"
        )

    return f"# Entity: Diff{' (staged)' if entity.data.staged else ''}\n"
