"""Data models for the chat policy SDK."""

from .provider import ServiceProvider, ProviderInfo, ModelDescriptor
from .messages import (
    MessageRole,
    ImageUrl,
    ContentPart,
    MessageContent,
    WebSearchResult,
    WebSearchReferences,
    RequestMessage,
)

__all__ = [
    # Registry models
    "ServiceProvider",
    "ProviderInfo",
    "ModelDescriptor",

    # Message models
    "MessageRole",
    "ImageUrl",
    "ContentPart",
    "MessageContent",
    "WebSearchResult",
    "WebSearchReferences",
    "RequestMessage",
]
