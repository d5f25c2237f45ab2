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

import sys
from pathlib import Path

import typer
from colorama import init
from dotenv import load_dotenv
from loguru import logger

from aic.commands import batch, categorize, draft, explain, list_commits
from aic.constants import APP_NAME
from aic.context import GlobalConfig, GlobalContext
from aic.core.config.config_loader import ConfigLoader
from aic.core.exceptions import handle_aic_exception, not_git_repository
from aic.core.logging.logging import setup_logger
from aic.core.ui.theme import set_theme
from aic.runtimeutil import (
    ensure_utf8_output,
    get_log_dir_callback,
    setup_signal_handlers,
    version_callback,
)

# Initialize colorama (colored output in terminal)
init(autoreset=True)

# main cli app
app = typer.Typer(
    help=f"{APP_NAME}: Explain commits and diffs, draft commit messages with AI",
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    add_completion=False,
)

# Main cli commands
app.command(name="explain")(explain.main)
app.command(name="list")(list_commits.main)
app.command(name="draft")(draft.main)
app.command(name="batch")(batch.main)
app.command(name="categorize")(categorize.main)


def load_global_config(custom_config_path: str | None, **input_args):
    # input args are the "runtime overrides" for configs
    config_args = {key: item for key, item in input_args.items() if item is not None}

    return ConfigLoader.get_full_config(
        GlobalConfig,
        config_args,
        custom_config_path=Path(custom_config_path)
        if custom_config_path is not None
        else None,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_dir: bool = typer.Option(
        False,
        "--log-dir",
        callback=get_log_dir_callback,
        is_eager=True,
        help="Show log path (where logs for aic live) and exit",
    ),
    provider: str | None = typer.Option(
        None,
        "--provider",
        "-p",
        help="AI provider: openai, claude, groq, ollama or phind (default: phind)",
    ),
    api_key: str | None = typer.Option(
        None, "--api-key", "-k", help="API key for the selected provider"
    ),
    model: str | None = typer.Option(
        None, "--model", "-m", help="Model to use, required for ollama"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    max_tokens: int | None = typer.Option(
        None, "--max-tokens", help="Upper bound on tokens in a completion"
    ),
    repo_path: str = typer.Option(
        ".",
        "--repo",
        help="Path to the git repository to operate on.",
    ),
    custom_config: str | None = typer.Option(
        None,
        "--custom-config",
        help="Path to a custom config file",
    ),
) -> None:
    """
    Global setup callback. Initialize global context/config used by commands
    """
    with handle_aic_exception():
        if ctx.invoked_subcommand is None:
            print(ctx.get_help())
            raise typer.Exit()

        # skip --help in subcommands
        if any(arg in ctx.help_option_names for arg in sys.argv):
            return

        config, used_config_sources, _ = load_global_config(
            custom_config,
            provider=provider,
            api_key=api_key,
            model=model,
            # an unset flag must not shadow lower priority sources
            debug=debug or None,
            max_tokens=max_tokens,
        )

        setup_logger(ctx.invoked_subcommand, debug=config.debug)
        set_theme(config.theme)

        logger.debug(f"Used {used_config_sources} to build global context.")
        global_context = GlobalContext.from_global_config(config, Path(repo_path))
        ctx.call_on_close(global_context.close)

        # fail immediately if we arent in a valid git repo as we expect one
        if not global_context.git_commands.is_git_repo():
            raise not_git_repository(repo_path)

        setup_signal_handlers(global_context)

        ctx.obj = global_context


def run_app():
    """Run the application with global exception handling."""
    # force stdout to be utf8
    ensure_utf8_output()
    # load any .env files (config values possibly set through env)
    load_dotenv()
    # launch cli
    app(prog_name=APP_NAME)


if __name__ == "__main__":
    run_app()
