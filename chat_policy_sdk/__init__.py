"""
Chat Policy SDK - model capability and request policy resolver.

This package decides how a chat request must be shaped before dispatch:
- Capability classification (vision, function calling, RAG, thinking, image generation)
- Timeout budget selection
- Plugin visibility per provider/model
- Message text extraction and web search prompt composition
- Version comparison for client updates
"""

__version__ = "0.1.0"

from .core.capabilities import (
    CapabilityClassifier,
    ModelCapabilities,
    get_capabilities_for_model,
    is_claude_thinking_model,
    is_dalle3,
    is_function_call_model,
    is_image_generation_model,
    is_support_rag_model,
    is_vision_model,
)
from .core.content import (
    get_message_images,
    get_message_text_content,
    get_message_text_content_without_thinking,
    get_text_content,
    get_web_reference_message_text_content,
    trim_topic,
)
from .core.policy import (
    RequestPlan,
    TimeoutBudget,
    get_operation_id,
    get_timeout_ms_by_model,
    plan_request,
    show_plugins,
)
from .core.registry import ModelRegistry, get_default_registry
from .core.versioning import semver_compare
from .errors import ConfigurationError, PolicyError, RegistryError
from .models import ContentPart, ModelDescriptor, RequestMessage, ServiceProvider, WebSearchReferences

__all__ = [
    # Registry
    "ModelRegistry",
    "get_default_registry",

    # Capabilities
    "CapabilityClassifier",
    "ModelCapabilities",
    "get_capabilities_for_model",
    "is_vision_model",
    "is_dalle3",
    "is_support_rag_model",
    "is_function_call_model",
    "is_claude_thinking_model",
    "is_image_generation_model",

    # Content
    "get_text_content",
    "get_message_text_content",
    "get_message_text_content_without_thinking",
    "get_message_images",
    "get_web_reference_message_text_content",
    "trim_topic",

    # Policy
    "TimeoutBudget",
    "get_timeout_ms_by_model",
    "show_plugins",
    "get_operation_id",
    "RequestPlan",
    "plan_request",

    # Versioning
    "semver_compare",

    # Models
    "ServiceProvider",
    "ModelDescriptor",
    "RequestMessage",
    "ContentPart",
    "WebSearchReferences",

    # Errors
    "PolicyError",
    "RegistryError",
    "ConfigurationError",
]
