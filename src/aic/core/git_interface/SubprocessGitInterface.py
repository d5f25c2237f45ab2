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

import os
import subprocess
from pathlib import Path

from loguru import logger

from aic.constants import GIT_CONFIG_ARGS, GIT_ENV
from aic.core.exceptions import git_not_found
from aic.core.git_interface.interface import GitInterface
from aic.core.logging.utils import truncate_for_log


class SubprocessGitInterface(GitInterface):
    def __init__(self, repo_path: str | Path = ".") -> None:
        self.repo_path = Path(repo_path)
        self._env = {**os.environ, **GIT_ENV}

    def run_git_text(
        self,
        args: list[str],
        timeout: float | None = None,
    ) -> str | None:
        cmd = ["git", *GIT_CONFIG_ARGS, *args]
        logger.debug(f"Running git command: git {' '.join(args)} cwd={self.repo_path}")
        try:
            result = subprocess.run(
                cmd,
                text=True,
                encoding="utf-8",
                errors="replace",
                capture_output=True,
                check=True,
                env=self._env,
                cwd=str(self.repo_path),
                timeout=timeout,
            )
        except FileNotFoundError as e:
            raise git_not_found() from e
        except subprocess.CalledProcessError as e:
            logger.debug(
                f"Git command failed: git {' '.join(args)} code={e.returncode} stderr={truncate_for_log(e.stderr)}"
            )
            return None
        except subprocess.TimeoutExpired:
            logger.debug(f"Git command timed out after {timeout}s: git {' '.join(args)}")
            return None

        if result.stderr:
            logger.debug(f"git stderr: {truncate_for_log(result.stderr)}")
        return result.stdout
