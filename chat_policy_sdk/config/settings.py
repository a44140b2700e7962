"""Environment-driven settings for the policy resolver."""

import os
import logging
from typing import Optional

from .constants import (
    DEFAULT_LANG,
    IMAGE_TIMEOUT_ENV_VAR,
    LANG_ENV_VAR,
    MODELS_FILE_ENV_VAR,
    REQUEST_TIMEOUT_ENV_VAR,
    REQUEST_TIMEOUT_MS,
    REQUEST_TIMEOUT_MS_FOR_IMAGE_GENERATION,
    REQUEST_TIMEOUT_MS_FOR_THINKING,
    THINKING_TIMEOUT_ENV_VAR,
)
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


def get_lang() -> str:
    """Return the active UI locale (e.g. "cn", "en")."""
    lang = os.getenv(LANG_ENV_VAR, "").strip().lower()
    return lang or DEFAULT_LANG


def get_models_file() -> Optional[str]:
    """Return the registry file path configured in the environment, if any."""
    path = os.getenv(MODELS_FILE_ENV_VAR, "").strip()
    return path or None


def _read_timeout(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{env_var} must be an integer number of milliseconds, got {raw!r}")

    if value <= 0:
        raise ConfigurationError(f"{env_var} must be positive, got {value}")

    if value != default:
        logger.info(f"Using {env_var}={value} instead of default {default}")
    return value


def get_request_timeout_ms() -> int:
    return _read_timeout(REQUEST_TIMEOUT_ENV_VAR, REQUEST_TIMEOUT_MS)


def get_thinking_timeout_ms() -> int:
    return _read_timeout(THINKING_TIMEOUT_ENV_VAR, REQUEST_TIMEOUT_MS_FOR_THINKING)


def get_image_generation_timeout_ms() -> int:
    return _read_timeout(IMAGE_TIMEOUT_ENV_VAR, REQUEST_TIMEOUT_MS_FOR_IMAGE_GENERATION)
