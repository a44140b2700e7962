"""Configuration module for the chat policy SDK."""

from .models import DEFAULT_MODELS, DEFAULT_MODEL
from .settings import (
    get_lang,
    get_models_file,
    get_request_timeout_ms,
    get_thinking_timeout_ms,
    get_image_generation_timeout_ms,
)

# Import all constants
from .constants import *

__all__ = [
    "DEFAULT_MODELS",
    "DEFAULT_MODEL",
    "get_lang",
    "get_models_file",
    "get_request_timeout_ms",
    "get_thinking_timeout_ms",
    "get_image_generation_timeout_ms",
]
