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

import subprocess

from loguru import logger


def print_with_mdcat(text: str) -> None:
    """Render markdown through mdcat, falling back to plain output."""
    try:
        subprocess.run(["mdcat"], input=text, text=True, encoding="utf-8", check=True)
        return
    except FileNotFoundError:
        logger.debug("mdcat not found, printing plain text")
    except subprocess.CalledProcessError as e:
        logger.debug(f"mdcat failed with code {e.returncode}, printing plain text")

    print(text)
