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

import pytest

from aic.core.exceptions import GitCommitError, GitDiffError, GitError
from aic.core.git_commands.git_commands import GitCommands
from aic.core.git_entity.commit import GitCommit, create_git_commit
from aic.core.git_entity.diff import GitDiff
from aic.core.git_entity.entity import CommitEntity, DiffEntity, format_static_details

DIFF_TREE = ("diff-tree", "-p", "--binary", "--no-color", "--compact-summary", "--root")
LOG_FORMAT = "--format=%H%x00%an%x00%ae%x00%cI%x00%P%x00%B"


def make_commit(git, hash="abc123"):
    return GitCommit(
        GitCommands(git),
        hash=hash,
        author="Ada",
        email="ada@example.com",
        date=datetime(2024, 1, 2, 3, 4, 5),
        message="Add greeting",
    )


# -----------------------------------------------------------------------------
# GitDiff
# -----------------------------------------------------------------------------


def test_diff_reads_once(dummy_git):
    git = dummy_git({("diff", "--staged"): "+line\n"})

    diff = GitDiff(GitCommands(git), staged=True)

    assert diff.diff == "+line\n"
    assert diff.staged is True
    assert git.calls == [["diff", "--staged"]]


@pytest.mark.parametrize(
    ("staged", "message"),
    [(True, "diff (staged) is empty"), (False, "diff is empty")],
)
def test_empty_diff_raises(dummy_git, staged, message):
    with pytest.raises(GitDiffError) as exc_info:
        GitDiff(GitCommands(dummy_git({})), staged=staged)

    assert exc_info.value.message == message


def test_failed_diff_raises_git_error(dummy_git):
    with pytest.raises(GitError, match="Failed to get git diff"):
        GitDiff(GitCommands(dummy_git(default=None)))


# -----------------------------------------------------------------------------
# GitCommit
# -----------------------------------------------------------------------------


def test_commit_diff_is_lazy_and_cached(dummy_git):
    git = dummy_git({(*DIFF_TREE, "abc123"): "diff body"})
    commit = make_commit(git)

    assert git.calls == []
    assert commit.diff == "diff body"
    assert commit.diff == "diff body"
    assert git.calls == [[*DIFF_TREE, "abc123"]]


def test_commit_with_empty_diff_raises(dummy_git):
    commit = make_commit(dummy_git({}))

    with pytest.raises(GitCommitError, match="Commit 'abc123' not found"):
        commit.diff


def test_create_git_commit_rejects_non_commits(dummy_git):
    git = dummy_git({("cat-file", "-t", "HEAD^{tree}"): "tree\n"})

    with pytest.raises(GitCommitError):
        create_git_commit(GitCommands(git), "HEAD^{tree}")


def test_create_git_commit_unknown_sha(dummy_git):
    with pytest.raises(GitCommitError, match="Commit 'deadbeef' not found"):
        create_git_commit(GitCommands(dummy_git(default=None)), "deadbeef")


def test_create_git_commit(dummy_git):
    full = "c" * 40
    git = dummy_git(
        {
            ("cat-file", "-t", "HEAD"): "commit\n",
            ("rev-parse", "--verify", "HEAD^{commit}"): full,
            ("log", "-n", "1", LOG_FORMAT, full): (
                f"{full}\x00Ada\x00a@b.c\x002024-01-02T03:04:05+00:00\x00\x00Root commit\n"
            ),
        }
    )

    commit = create_git_commit(GitCommands(git), "HEAD")

    assert commit.hash == full
    assert commit.parent_hashes == ()
    assert commit.message == "Root commit"


# -----------------------------------------------------------------------------
# Static details
# -----------------------------------------------------------------------------


def test_format_static_details(dummy_git):
    commit_details = format_static_details(CommitEntity(make_commit(dummy_git())))
    assert commit_details.startswith(
        "# Entity: Commit\n`commit abc123` | Ada <ada@example.com> | 2024-01-02T03:04:05\n"
    )
    assert "Add greeting\n-----\n" in commit_details

    staged = GitDiff(GitCommands(dummy_git({("diff", "--staged"): "+x"})), staged=True)
    assert format_static_details(DiffEntity(staged)) == "# Entity: Diff (staged)\n"
