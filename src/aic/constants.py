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

from pathlib import Path

from platformdirs import user_config_dir, user_log_path

APP_NAME = "aic"
ENV_APP_PREFIX = APP_NAME.upper() + "_"
LOG_DIR = Path(user_log_path(appname=APP_NAME))

CONFIG_FILENAME = "aicconfig.toml"

GLOBAL_CONFIG_FILE = Path(user_config_dir(APP_NAME)) / CONFIG_FILENAME
LOCAL_CONFIG_FILE = Path(CONFIG_FILENAME)

# env var names that do not follow the AIC_<field> convention
ENV_ALIASES = {"ai_provider": "provider"}

DEFAULT_PROVIDER = "phind"

# providers that read a key from their own env var when --api-key is absent
PROVIDER_KEY_ENV_VARS = {
    "openai": "OPENAI_API_KEY",
    "claude": "ANTHROPIC_API_KEY",
    "groq": "GROQ_API_KEY",
}

DEFAULT_OLLAMA_BASE_URL = "http://localhost:11434"

HTTP_TIMEOUT_SECONDS = 120.0

# categorization retry policy: flat delay, no backoff
CATEGORIZE_MAX_ATTEMPTS = 3
CATEGORIZE_RETRY_DELAY = 1.0

# subprocess timeouts for the batch flow
GIT_ADD_TIMEOUT = 10.0
GIT_COMMIT_TIMEOUT = 15.0

# normalizes line endings and silences hints so output is stable to parse
GIT_CONFIG_ARGS = [
    "-c",
    "core.autocrlf=false",
    "-c",
    "core.safecrlf=false",
    "-c",
    "core.eol=lf",
    "-c",
    "advice.statusHints=false",
    "-c",
    "advice.statusUoption=false",
    "-c",
    "core.fileMode=false",
]

GIT_ENV = {
    "GIT_TERMINAL_PROMPT": "0",
    "GIT_ASKPASS": "echo",
}
