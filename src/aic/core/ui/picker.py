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

import shlex
import shutil
import subprocess
from pathlib import Path

from loguru import logger

from aic.core.exceptions import CommandError

_LOG_FORMAT = "%C(yellow)%h%C(reset) %C(green)%ad%C(reset) %s %C(blue)<%an>%C(reset)"
_FZF_ARGS = "fzf --ansi --reverse --bind='enter:become(echo {1})' --wrap"

FZF_HINT = "`list` command requires fzf"


def picker_command() -> str:
    git_log = (
        "git log --color=always --date=short "
        f"--format={shlex.quote(_LOG_FORMAT)}"
    )
    return f"{git_log} | {_FZF_ARGS}"


def get_sha_from_fzf(repo_path: Path | str = ".") -> str:
    """Let the user pick a commit interactively, returning its abbreviated hash."""
    if shutil.which("fzf") is None:
        raise CommandError("fzf was not found on PATH", FZF_HINT)

    cmd = picker_command()
    logger.debug(f"Running picker: {cmd}")
    try:
        result = subprocess.run(
            ["sh", "-c", cmd],
            cwd=str(repo_path),
            stdout=subprocess.PIPE,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        # fzf exits 130 on Esc or Ctrl-C
        if e.returncode == 130:
            raise CommandError("Commit selection cancelled") from e
        hint = FZF_HINT if e.returncode == 127 else None
        raise CommandError(f"Failed to pick a commit: {e}", hint) from e
    except OSError as e:
        raise CommandError(f"Failed to pick a commit: {e}") from e

    sha = result.stdout.strip()
    if not sha:
        raise CommandError("No commit selected")
    return sha
