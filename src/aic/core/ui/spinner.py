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

from rich.console import Console

from aic.core.ui.theme import themed

_console = Console(stderr=True)


class Spinner:
    """
    Progress indicator on stderr for the single long wait of a command.

    Use as a context manager, or call start() and finish with succeed() or fail().
    The spinner is stopped automatically if the block raises.
    """

    def __init__(self, text: str, console: Console | None = None):
        self.text = text
        self._console = console or _console
        self._status = None

    def __enter__(self) -> "Spinner":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def start(self) -> "Spinner":
        if self._status is None:
            self._status = self._console.status(self.text)
            self._status.start()
        return self

    def update(self, text: str) -> None:
        self.text = text
        if self._status is not None:
            self._status.update(text)

    def stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def succeed(self, text: str | None = None) -> None:
        self.stop()
        self._console.print(
            f"{themed('success', '✓')} {text or self.text}", markup=False, highlight=False
        )

    def fail(self, text: str | None = None) -> None:
        self.stop()
        self._console.print(
            f"{themed('error', '✗')} {text or self.text}", markup=False, highlight=False
        )
