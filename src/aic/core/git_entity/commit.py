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

from datetime import datetime

from loguru import logger

from aic.core.exceptions import GitCommitError
from aic.core.git_commands.git_commands import GitCommands


class GitCommit:
    """
    A resolved commit. Metadata is read up front, the diff is loaded from
    git on first access and kept for the lifetime of the instance.
    """

    def __init__(
        self,
        git_commands: GitCommands,
        hash: str,
        author: str,
        email: str,
        date: datetime,
        message: str,
        parent_hashes: tuple[str, ...] = (),
    ):
        self._git_commands = git_commands
        self.hash = hash
        self.author = author
        self.email = email
        self.date = date
        self.message = message
        self.parent_hashes = parent_hashes
        self._diff: str | None = None

    @property
    def diff(self) -> str:
        # write-once: loaded on first access, never reassigned afterwards
        if self._diff is None:
            self._diff = self._load_diff()
        return self._diff

    def _load_diff(self) -> str:
        logger.debug(f"Loading diff for commit {self.hash}")
        output = self._git_commands.get_commit_diff(self.hash)
        if not output:
            raise GitCommitError(self.hash)
        return output

    def __str__(self) -> str:
        return (
            f"Commit {self.hash}\n"
            f"Author: {self.author} <{self.email}>\n"
            f"Date: {self.date.isoformat()}\n\n"
            f"{self.message}"
        )


def create_git_commit(git_commands: GitCommands, sha: str) -> GitCommit:
    """Resolve `sha` (any commit-ish) into a GitCommit, or raise GitCommitError."""
    if git_commands.object_type(sha) != "commit":
        raise GitCommitError(sha)

    metadata = git_commands.get_commit_metadata(sha)
    if metadata is None:
        raise GitCommitError(sha)

    return GitCommit(
        git_commands,
        hash=metadata.hash,
        author=metadata.author,
        email=metadata.email,
        date=metadata.date,
        message=metadata.message,
        parent_hashes=metadata.parent_hashes,
    )
