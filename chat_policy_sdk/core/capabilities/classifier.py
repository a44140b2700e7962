"""
Capability classifier.

Evaluates the rule tables in ``rules`` against a model identifier using the
strategies in ``matchers``. The registry is injected; module-level helpers
fall back to the process-wide default registry.

Order of checks matters where rules exclude each other: the vision check
short-circuits retrieval-augmentation support, and DALL-E 3 short-circuits
function calling.
"""

from typing import Optional

from ..registry import ModelRegistry, get_default_registry
from . import rules
from .matchers import contains_any, contains_registry_name, contains_without, equals_any, in_registry
from .models import ModelCapabilities


class CapabilityClassifier:
    """Answers capability questions about model identifiers."""

    def __init__(self, registry: ModelRegistry):
        self.registry = registry

    def is_dalle3(self, model: str) -> bool:
        return model == rules.DALLE3_MODEL

    def is_vision_model(self, model: str) -> bool:
        """Vision keyword, non-preview gpt-4-turbo, DALL-E 3, or any Google model name."""
        return (
            contains_any(model, rules.VISION_KEYWORDS)
            or contains_without(model, rules.GPT4_TURBO_MARKER, rules.PREVIEW_MARKER)
            or self.is_dalle3(model)
            or any(
                contains_registry_name(model, self.registry, provider_id)
                for provider_id in rules.VISION_REGISTRY_PROVIDERS
            )
        )

    def is_support_rag_model(self, model: str) -> bool:
        if equals_any(model, rules.RAG_SPECIAL_MODELS):
            return True
        if self.is_vision_model(model):
            return False
        return in_registry(model, self.registry, rules.RAG_REGISTRY_PROVIDER)

    def is_function_call_model(self, model: str) -> bool:
        if self.is_dalle3(model):
            return False
        if equals_any(model, rules.FUNCTION_CALL_SPECIAL_MODELS):
            return True
        return in_registry(
            model,
            self.registry,
            rules.FUNCTION_CALL_REGISTRY_PROVIDER,
            excluded_substring=rules.FUNCTION_CALL_EXCLUDED_SUBSTRING
        )

    def is_claude_thinking_model(self, model: str) -> bool:
        return equals_any(model, rules.CLAUDE_THINKING_MODELS)

    def is_image_generation_model(self, model: str) -> bool:
        return equals_any(model, rules.IMAGE_GENERATION_MODELS)

    def classify(self, model: str) -> ModelCapabilities:
        """Compute every capability flag for ``model``."""
        return ModelCapabilities(
            model=model,
            vision=self.is_vision_model(model),
            function_call=self.is_function_call_model(model),
            rag=self.is_support_rag_model(model),
            claude_thinking=self.is_claude_thinking_model(model),
            image_generation=self.is_image_generation_model(model),
            dalle3=self.is_dalle3(model),
        )


def _classifier(registry: Optional[ModelRegistry]) -> CapabilityClassifier:
    return CapabilityClassifier(registry if registry is not None else get_default_registry())


def is_vision_model(model: str, registry: Optional[ModelRegistry] = None) -> bool:
    return _classifier(registry).is_vision_model(model)


def is_dalle3(model: str) -> bool:
    return model == rules.DALLE3_MODEL


def is_support_rag_model(model: str, registry: Optional[ModelRegistry] = None) -> bool:
    return _classifier(registry).is_support_rag_model(model)


def is_function_call_model(model: str, registry: Optional[ModelRegistry] = None) -> bool:
    return _classifier(registry).is_function_call_model(model)


def is_claude_thinking_model(model: str) -> bool:
    return equals_any(model, rules.CLAUDE_THINKING_MODELS)


def is_image_generation_model(model: str) -> bool:
    return equals_any(model, rules.IMAGE_GENERATION_MODELS)


def get_capabilities_for_model(model: str, registry: Optional[ModelRegistry] = None) -> ModelCapabilities:
    """Return the capability snapshot for a model id.

    Args:
        model: The model identifier to classify
        registry: Registry to cross-reference; the default registry if omitted

    Returns:
        ModelCapabilities for the model. Unknown models get all flags False.
    """
    return _classifier(registry).classify(model)
