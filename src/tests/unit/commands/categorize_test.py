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

from aic.commands.categorize import run_categorize
from aic.context import CategorizeContext

NAME_STATUS = (
    "M\x00README.md\x00A\x00src/api/users.py\x00D\x00src/legacy.py\x00"
    "R087\x00src/old.py\x00src/core.py\x00"
)

RESPONSE = json.dumps(
    [
        {"category": "documentation", "files": [{"path": "README.md", "status": "modified"}]},
        {
            "category": "api-endpoints",
            "files": [
                {"path": "src/api/users.py", "status": "added"},
                {"path": "src/legacy.py", "status": "deleted"},
                {"path": "src/core.py", "status": "renamed"},
            ],
        },
    ]
)


def test_prints_grouped_files(make_context, capsys):
    context, git, adapter = make_context(
        git_responses={("diff", "--name-status", "-z"): NAME_STATUS},
        completions=[f"```json\n{RESPONSE}\n```"],
    )

    groups = run_categorize(context, CategorizeContext(), sleep=Mock(), color=False)

    assert [g.category for g in groups] == ["documentation", "api-endpoints"]
    assert capsys.readouterr().out == (
        "\nSuggested file categorization:\n"
        "\n"
        "documentation:\n"
        "  • README.md\n"
        "\n"
        "api-endpoints:\n"
        "  + src/api/users.py\n"
        "  - src/legacy.py\n"
        "  ~ src/core.py\n"
    )
    assert '"path": "src/core.py"' in adapter.prompts[0].user_prompt


def test_staged_reads_index(make_context):
    context, git, _ = make_context(
        git_responses={("diff", "--staged", "--name-status", "-z"): "M\x00README.md\x00"},
        completions=[RESPONSE],
    )

    run_categorize(context, CategorizeContext(staged=True), sleep=Mock(), color=False)

    assert git.calls == [["diff", "--staged", "--name-status", "-z"]]


def test_no_changes_skips_provider(make_context, capsys):
    context, _, adapter = make_context(git_responses={("diff", "--name-status", "-z"): ""})

    assert run_categorize(context, CategorizeContext()) == []
    assert adapter.prompts == []
    assert capsys.readouterr().out == ""
