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
import sys

from loguru import logger


def clipboard_command(platform: str = sys.platform) -> list[str]:
    if platform.startswith("win"):
        return ["clip"]
    if platform == "darwin":
        return ["pbcopy"]
    return ["xclip", "-selection", "clipboard"]


def copy_to_clipboard(text: str, platform: str = sys.platform) -> bool:
    """
    Put `text` on the system clipboard.

    Failure is not fatal: it is logged as a warning and False is returned.
    """
    cmd = clipboard_command(platform)
    try:
        subprocess.run(cmd, input=text, text=True, check=True, capture_output=True)
    except (OSError, subprocess.CalledProcessError) as e:
        logger.warning(f"Failed to copy to clipboard with {cmd[0]}: {e}")
        return False
    return True
