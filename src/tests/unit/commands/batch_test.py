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

import json
from unittest.mock import Mock

import pytest

from aic.commands.batch import run_batch
from aic.core.exceptions import CommandError, GitError, NoCompletionError

STATUS = " M src/a.py\x00 M src/b.py\x00?? docs/c.md\x00"


def groups_json(*groups):
    return json.dumps(
        [
            {
                "category": category,
                "files": [{"path": path, "status": "modified"} for path in paths],
            }
            for category, paths in groups
        ]
    )


def git_adds(git):
    return [call[2] for call in git.calls if call[:2] == ["add", "--"]]


def git_commits(git):
    return [call[3] for call in git.calls if call[0] == "commit"]


def test_rejects_phind_before_touching_git(make_context):
    context, git, adapter = make_context(provider_type="phind")

    with pytest.raises(CommandError, match="not available with Phind"):
        run_batch(context)

    assert git.calls == []
    assert adapter.prompts == []


def test_no_changes(make_context):
    context, git, adapter = make_context(git_responses={("status", "--porcelain", "-z"): ""})

    assert run_batch(context) == 0
    assert adapter.prompts == []
    assert git_commits(git) == []


def test_commits_each_group_and_never_restages(make_context):
    categorization = groups_json(
        ("core", ["src/a.py", "src/b.py"]),
        ("docs", ["src/b.py", "docs/c.md"]),
        ("again", ["src/a.py"]),
    )
    context, git, adapter = make_context(
        git_responses={
            ("status", "--porcelain", "-z"): STATUS,
            ("diff", "--staged"): "+change\n",
        },
        completions=[categorization, "feat(core): update a and b", "**docs: add c**"],
    )

    assert run_batch(context, sleep=Mock()) == 2

    assert git_adds(git) == ["src/a.py", "src/b.py", "docs/c.md"]
    assert git_commits(git) == ["feat(core): update a and b", "docs: add c"]

    # categorize + one draft per committed group
    assert len(adapter.prompts) == 3
    core_prompt, docs_prompt = (p.user_prompt for p in adapter.prompts[1:])
    assert "Intent context: Category: core\nFiles: src/a.py, src/b.py" in core_prompt
    assert "Intent context: Category: docs\nFiles: docs/c.md" in docs_prompt


def test_git_failure_aborts_remaining_groups(make_context):
    categorization = groups_json(
        ("one", ["src/a.py"]), ("two", ["src/b.py"]), ("three", ["docs/c.md"])
    )
    context, git, adapter = make_context(
        git_responses={
            ("status", "--porcelain", "-z"): STATUS,
            ("diff", "--staged"): "+change\n",
            ("commit", "--no-gpg-sign", "-m", "fix: two"): None,
        },
        completions=[categorization, "fix: one", "fix: two", "fix: three"],
    )

    with pytest.raises(GitError, match="could not create commit"):
        run_batch(context, sleep=Mock())

    # the first commit is kept, the third group is never started
    assert git_commits(git) == ["fix: one", "fix: two"]
    assert git_adds(git) == ["src/a.py", "src/b.py"]
    assert len(adapter.prompts) == 3


def test_uses_configured_retry_policy(make_context):
    context, git, adapter = make_context(
        git_responses={("status", "--porcelain", "-z"): STATUS},
        completions=["garbage", "garbage"],
        categorize_max_attempts=2,
        categorize_retry_delay=0.5,
    )
    sleep = Mock()

    with pytest.raises(Exception, match="maximum retries"):
        run_batch(context, sleep=sleep)

    assert len(adapter.prompts) == 2
    sleep.assert_called_once_with(0.5)
    assert git_adds(git) == []


def test_unusable_message_stops_before_commit(make_context):
    context, git, _ = make_context(
        git_responses={
            ("status", "--porcelain", "-z"): STATUS,
            ("diff", "--staged"): "+change\n",
        },
        completions=[groups_json(("core", ["src/a.py"])), "```"],
    )

    with pytest.raises(NoCompletionError):
        run_batch(context, sleep=Mock())

    assert git_adds(git) == ["src/a.py"]
    assert git_commits(git) == []


def test_non_ascii_path_is_staged_unescaped(make_context):
    context, git, _ = make_context(
        git_responses={
            ("status", "--porcelain", "-z"): "?? café.txt\x00",
            ("diff", "--staged"): "+bonjour\n",
        },
        completions=[groups_json(("docs", ["café.txt"])), "docs: add café notes"],
    )

    assert run_batch(context, sleep=Mock()) == 1
    assert git_adds(git) == ["café.txt"]
