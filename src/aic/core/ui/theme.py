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

from colorama import Fore, Style


@dataclass(frozen=True)
class Theme:
    name: str
    styles: dict[str, str]
    reset: str

    def apply(self, key: str, text: str) -> str:
        prefix = self.styles.get(key, "")
        if not prefix:
            return text
        return f"{prefix}{text}{self.reset}"


def _build_themes() -> dict[str, Theme]:
    reset = Style.RESET_ALL
    return {
        "classic": Theme(
            name="classic",
            reset=reset,
            styles={
                "error": Fore.RED + Style.BRIGHT,
                "success": Fore.GREEN + Style.BRIGHT,
                "category": Fore.CYAN + Style.BRIGHT,
                "file_added": Fore.GREEN,
                "file_deleted": Fore.RED,
                "file_renamed": Fore.BLUE,
                "file_modified": Fore.YELLOW,
            },
        ),
        "ocean": Theme(
            name="ocean",
            reset=reset,
            styles={
                "error": Fore.RED + Style.BRIGHT,
                "success": Fore.GREEN + Style.BRIGHT,
                "category": Fore.BLUE + Style.BRIGHT,
                "file_added": Fore.GREEN,
                "file_deleted": Fore.RED,
                "file_renamed": Fore.CYAN,
                "file_modified": Fore.WHITE + Style.BRIGHT,
            },
        ),
        "mono": Theme(
            name="mono",
            reset="",
            styles={},
        ),
    }


_THEMES = _build_themes()
_current_theme: Theme = _THEMES["classic"]


def set_theme(name: str) -> None:
    global _current_theme
    _current_theme = _THEMES.get(name, _THEMES["classic"])


def get_theme() -> Theme:
    return _current_theme


def available_themes() -> list[str]:
    return sorted(_THEMES.keys())


def themed(key: str, text: str) -> str:
    return _current_theme.apply(key, text)
