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
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel, ValidationError

from aic.constants import (
    ENV_ALIASES,
    ENV_APP_PREFIX,
    GLOBAL_CONFIG_FILE,
    LOCAL_CONFIG_FILE,
)
from aic.core.exceptions import ConfigurationError


class ConfigLoader:
    """Loads and merges configuration from every source into one model."""

    @staticmethod
    def get_full_config(
        config_model: type[BaseModel],
        input_args: dict,
        custom_config_path: Path | None = None,
        local_config_path: Path = LOCAL_CONFIG_FILE,
        global_config_path: Path = GLOBAL_CONFIG_FILE,
        env_app_prefix: str = ENV_APP_PREFIX,
        environ: Mapping[str, str] | None = None,
    ):
        """
        Merge configuration with priority: input args, custom config, local
        config, environment variables, global config.

        Returns the built model, the names of the sources that contributed,
        and whether any field fell back to its default.
        """
        source_names = [
            "Input Args",
            "Local Config",
            "Environment Variables",
            "Global Config",
        ]
        sources = [
            input_args,
            ConfigLoader.load_toml(local_config_path),
            ConfigLoader.load_env(env_app_prefix, environ),
            ConfigLoader.load_toml(global_config_path),
        ]

        if custom_config_path is not None:
            if not custom_config_path.exists():
                raise ConfigurationError(
                    f"Custom config file not found: {custom_config_path}"
                )
            sources.insert(1, ConfigLoader.load_toml(custom_config_path))
            source_names.insert(1, "Custom Config")

        for name, source in zip(source_names, sources, strict=True):
            logger.debug(f"{name=} {ConfigLoader._redact(source)}")

        built_model, used_indexes, used_defaults = ConfigLoader.build(
            config_model, sources
        )

        return built_model, [source_names[i] for i in used_indexes], used_defaults

    @staticmethod
    def load_toml(path: Path) -> dict[str, Any]:
        """Read a TOML file, returning an empty dict when it is absent or invalid."""
        if not path.exists():
            logger.debug(f"{path} does not exist")
            return {}

        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except (tomllib.TOMLDecodeError, OSError) as e:
            logger.warning(f"Failed to load {path}: {e}")
            return {}

    @staticmethod
    def load_env(
        app_prefix: str, environ: Mapping[str, str] | None = None
    ) -> dict[str, str]:
        """Collect AIC_* variables, lowercased and stripped of the prefix."""
        environ = os.environ if environ is None else environ

        data = {}
        for k, v in environ.items():
            if k.upper().startswith(app_prefix.upper()):
                key_clean = k[len(app_prefix) :].lower()
                data[ENV_ALIASES.get(key_clean, key_clean)] = v

        return data

    @staticmethod
    def build(config_model: type[BaseModel], sources: list[dict]):
        """Take each field from the highest priority source that sets it."""
        remaining_keys = set(config_model.model_fields.keys())

        final_data = {}
        used_indices = []

        for i, d in enumerate(sources):
            if not remaining_keys:
                break

            contributions = d.keys() & remaining_keys
            if contributions:
                used_indices.append(i)
                for key in contributions:
                    final_data[key] = d[key]
                remaining_keys -= contributions

        try:
            model = config_model.model_validate(final_data)
        except ValidationError as e:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigurationError(f"Invalid configuration: {errors}") from e

        return model, used_indices, bool(remaining_keys)

    @staticmethod
    def _redact(source: dict) -> dict:
        return {k: ("***" if k == "api_key" and v else v) for k, v in source.items()}
