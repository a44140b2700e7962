"""
Timeout budget selection.

Maps a model identifier to one of three request timeout budgets. The values
are read from configuration; enforcing them is the transport layer's job.
"""

from enum import Enum

from ...config.settings import (
    get_image_generation_timeout_ms,
    get_request_timeout_ms,
    get_thinking_timeout_ms,
)

IMAGE_GENERATION_PREFIXES = ("gemini-2.0-flash-exp",)

THINKING_PREFIXES = ("dall-e", "dalle", "o1", "o3")
THINKING_MARKERS = ("deepseek-r", "-thinking")


class TimeoutBudget(str, Enum):
    """Named request timeout budgets."""
    STANDARD = "standard"
    THINKING = "thinking"
    IMAGE_GENERATION = "image_generation"

    @property
    def milliseconds(self) -> int:
        if self is TimeoutBudget.THINKING:
            return get_thinking_timeout_ms()
        if self is TimeoutBudget.IMAGE_GENERATION:
            return get_image_generation_timeout_ms()
        return get_request_timeout_ms()


def get_timeout_budget_by_model(model: str) -> TimeoutBudget:
    """Pick the budget for a model; matching is case-insensitive and the first rule wins."""
    model = model.lower()
    if model.startswith(IMAGE_GENERATION_PREFIXES):
        return TimeoutBudget.IMAGE_GENERATION
    if model.startswith(THINKING_PREFIXES) or any(marker in model for marker in THINKING_MARKERS):
        return TimeoutBudget.THINKING
    return TimeoutBudget.STANDARD


def get_timeout_ms_by_model(model: str) -> int:
    return get_timeout_budget_by_model(model).milliseconds
