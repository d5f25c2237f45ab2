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

from aic.core.exceptions import GitDiffError, GitError
from aic.core.git_commands.git_commands import GitCommands


class GitDiff:
    """Working tree or staged diff, read once at construction. Never empty."""

    __slots__ = ("_staged", "_diff")

    def __init__(self, git_commands: GitCommands, staged: bool = False):
        diff = git_commands.get_working_diff(staged)
        if diff is None:
            raise GitError(f"Failed to get git diff{' (staged)' if staged else ''}")
        if not diff:
            raise GitDiffError(staged)

        self._staged = staged
        self._diff = diff

    @property
    def staged(self) -> bool:
        return self._staged

    @property
    def diff(self) -> str:
        return self._diff
