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
from datetime import datetime

from loguru import logger

from aic.constants import GIT_ADD_TIMEOUT, GIT_COMMIT_TIMEOUT
from aic.core.data.models import FileChange, FileStatus
from aic.core.exceptions import GitError
from aic.core.git_interface.interface import GitInterface

# fields of `git log -n 1` separated by NUL, message last since it may span lines
_COMMIT_FORMAT = "%H%x00%an%x00%ae%x00%cI%x00%P%x00%B"


@dataclass(frozen=True)
class CommitMetadata:
    hash: str
    author: str
    email: str
    date: datetime
    parent_hashes: tuple[str, ...]
    message: str


class GitCommands:
    def __init__(self, git: GitInterface):
        self.git = git

    # -------------------------------
    # Repository state
    # -------------------------------

    def is_git_repo(self) -> bool:
        out = self.git.run_git_text(["rev-parse", "--is-inside-work-tree"])
        return out is not None and out.strip() == "true"

    # -------------------------------
    # Commits
    # -------------------------------

    def object_type(self, ref: str) -> str | None:
        out = self.git.run_git_text(["cat-file", "-t", ref])
        return out.strip() if out is not None else None

    def get_commit_metadata(self, ref: str) -> CommitMetadata | None:
        full_hash = self.git.run_git_text(["rev-parse", "--verify", f"{ref}^{{commit}}"])
        if not full_hash:
            return None

        out = self.git.run_git_text(
            ["log", "-n", "1", f"--format={_COMMIT_FORMAT}", full_hash.strip()]
        )
        if not out:
            return None

        parts = out.split("\x00", 5)
        if len(parts) != 6:
            logger.debug(f"Unexpected git log output for {ref}: {out!r}")
            return None

        commit_hash, author, email, date, parents, message = parts
        return CommitMetadata(
            hash=commit_hash.strip(),
            author=author.strip(),
            email=email.strip(),
            date=datetime.fromisoformat(date.strip()),
            parent_hashes=tuple(parents.split()),
            message=message.strip(),
        )

    def get_commit_diff(self, commit_hash: str) -> str | None:
        return self.git.run_git_text(
            [
                "diff-tree",
                "-p",
                "--binary",
                "--no-color",
                "--compact-summary",
                "--root",
                commit_hash,
            ]
        )

    # -------------------------------
    # Working tree
    # -------------------------------

    def get_working_diff(self, staged: bool) -> str | None:
        args = ["diff", "--staged"] if staged else ["diff"]
        return self.git.run_git_text(args)

    def get_changed_files(self, staged: bool) -> list[FileChange]:
        """Files changed between index and worktree (or HEAD and index if staged)."""
        args = ["diff", "--staged"] if staged else ["diff"]
        out = self.git.run_git_text([*args, "--name-status", "-z"])
        if out is None:
            raise GitError("Failed to list changed files")
        return self._parse_name_status(out)

    def get_status_changes(self) -> list[FileChange]:
        """Every pending change (staged, unstaged and untracked) from git status."""
        out = self.git.run_git_text(["status", "--porcelain", "-z"])
        if out is None:
            raise GitError("Failed to read git status")
        return self._parse_porcelain(out)

    def stage_file(self, path: str) -> None:
        if self.git.run_git_text(["add", "--", path], timeout=GIT_ADD_TIMEOUT) is None:
            raise GitError(f"Git operation failed: could not stage {path}")

    def commit(self, message: str) -> None:
        out = self.git.run_git_text(
            ["commit", "--no-gpg-sign", "-m", message], timeout=GIT_COMMIT_TIMEOUT
        )
        if out is None:
            raise GitError(
                "Git operation failed: could not create commit",
                "If commit hooks or signing prompt for input, run the commit manually",
            )

    # -------------------------------
    # Parsing
    # -------------------------------

    @staticmethod
    def _status_from_code(code: str) -> FileStatus:
        if "A" in code:
            return FileStatus.ADDED
        if "D" in code:
            return FileStatus.DELETED
        if "R" in code:
            return FileStatus.RENAMED
        return FileStatus.MODIFIED

    # Both parsers read `-z` output: paths are NUL-terminated and never quoted.

    @classmethod
    def _parse_porcelain(cls, output: str) -> list[FileChange]:
        changes = []
        records = iter(output.split("\x00"))
        for record in records:
            if len(record) < 4:
                continue
            code, path = record[:2], record[3:]
            # renames and copies are followed by a record holding the old path
            if "R" in code or "C" in code:
                next(records, None)
            changes.append(FileChange(path=path, status=cls._status_from_code(code.strip())))
        return changes

    @classmethod
    def _parse_name_status(cls, output: str) -> list[FileChange]:
        changes = []
        fields = iter(output.split("\x00"))
        for code in fields:
            if not code:
                continue
            path = next(fields, None)
            if path is None:
                break
            # renames and copies list old and new path, keep the new one
            if code[0] in "RC":
                path = next(fields, path)
            changes.append(FileChange(path=path, status=cls._status_from_code(code[:1])))
        return changes
