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

"""
Logging setup for aic commands.

Console output goes through a rich console on stderr so it never mixes
with the text a command prints for the user (explanations, commit
messages). Every run also writes a DEBUG level log file.
"""

from datetime import datetime
from pathlib import Path

from loguru import logger
from rich.console import Console

from aic.constants import APP_NAME, LOG_DIR

_console = Console(stderr=True)


def _console_sink(message) -> None:
    text = message.record["message"].rstrip("\n")
    _console.print(text)


def setup_logger(command_name: str, debug: bool = False) -> Path | None:
    """
    Configure loguru sinks for a command.

    Args:
        command_name: Name of the command being executed
        debug: Show DEBUG records on the console

    Returns:
        Path to the log file, or None if the log directory is not writable
    """
    # Clear existing sinks to avoid duplicates
    logger.remove()

    console_level = "DEBUG" if debug else "INFO"
    logger.add(_console_sink, level=console_level, format="{message}", catch=True)

    logfile = None
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        logfile = LOG_DIR / f"{APP_NAME}_{timestamp}.log"
        logger.add(
            logfile,
            level="DEBUG",
            format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>",
            rotation="10 MB",
            retention="14 days",
            compression="gz",
            catch=True,
        )
    except OSError as e:
        logger.warning(f"Could not create log file in {LOG_DIR}: {e}")

    logger.bind(command=command_name, logfile=str(logfile)).debug(
        "Logger initialized"
    )

    return logfile


def get_log_directory() -> Path:
    """Get the directory where log files are stored."""
    return LOG_DIR
