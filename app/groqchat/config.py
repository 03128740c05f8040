"""
Purpose: Build the one AppConfig for a session from an explicit environment mapping.
The caller (console layer) decides where the mapping comes from (os.environ after
python-dotenv has run), so nothing in the core performs ambient lookups.
"""

from __future__ import annotations
from typing import Mapping, Optional

from .errors import ConfigError
from .models import AppConfig

API_KEY_VAR = "API_KEY"
MODEL_VAR = "MODEL"

DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
# Groq retires model ids regularly; override with MODEL or --model.
DEFAULT_MODEL = "llama-3.3-70b-versatile"
EXIT_COMMAND = "exit_chat"

MISSING_KEY_MESSAGE = (
    f"Please set the {API_KEY_VAR} environment variable to your Groq API key, "
    "from here: https://console.groq.com/keys."
)


def load_config(
    environ: Mapping[str, str],
    *,
    model: Optional[str] = None,
    base_url: str = DEFAULT_BASE_URL,
) -> AppConfig:
    """
    Resolve credential and model.
    Precedence for the model: explicit argument, then MODEL, then DEFAULT_MODEL.
    Raises ConfigError when the credential is missing or blank.
    """
    api_key = (environ.get(API_KEY_VAR) or "").strip()
    if not api_key:
        raise ConfigError(MISSING_KEY_MESSAGE)

    chosen = (model or "").strip() or (environ.get(MODEL_VAR) or "").strip()
    defaulted = not chosen

    return AppConfig(
        api_key=api_key,
        model=chosen or DEFAULT_MODEL,
        base_url=base_url,
        exit_command=EXIT_COMMAND,
        model_defaulted=defaulted,
    )
