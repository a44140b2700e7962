"""Capability classification layer.

This layer handles:
- Fixed capability rule tables
- Named matching strategies (keyword, allowlist, registry lookup)
- Capability predicates over model identifiers
"""

from .classifier import (
    CapabilityClassifier,
    get_capabilities_for_model,
    is_claude_thinking_model,
    is_dalle3,
    is_function_call_model,
    is_image_generation_model,
    is_support_rag_model,
    is_vision_model,
)
from .models import ModelCapabilities

__all__ = [
    "CapabilityClassifier",
    "ModelCapabilities",
    "get_capabilities_for_model",
    # Predicates
    "is_vision_model",
    "is_dalle3",
    "is_support_rag_model",
    "is_function_call_model",
    "is_claude_thinking_model",
    "is_image_generation_model",
]
