"""
Plugin visibility gate and plugin operation naming.
"""

from typing import Any, Dict, Union

from ...models.provider import ServiceProvider

# Providers whose models all support plugins
PLUGIN_PROVIDERS = (
    ServiceProvider.OPENAI,
    ServiceProvider.AZURE,
    ServiceProvider.MOONSHOT,
    ServiceProvider.CHATGLM,
)

# Providers that support plugins except for models containing the marker
PLUGIN_EXCLUDED_MARKERS = {
    ServiceProvider.ANTHROPIC: "claude-2",
    ServiceProvider.GOOGLE: "vision",
}


def show_plugins(provider: Union[ServiceProvider, str, None], model: str) -> bool:
    """
    Decide whether plugin affordances are shown for a provider/model pair.

    Args:
        provider: ServiceProvider member or its value (e.g. "Anthropic")
        model: Model identifier

    Returns:
        False for unknown providers
    """
    if provider in PLUGIN_PROVIDERS:
        return True

    for gated_provider, marker in PLUGIN_EXCLUDED_MARKERS.items():
        if provider == gated_provider:
            return marker not in model

    return False


def get_operation_id(operation: Dict[str, Any]) -> str:
    """
    Stable id for a plugin OpenAPI operation.

    Uses ``operationId`` when present, otherwise the upper-cased method
    followed by the path with "/" replaced by "_".
    """
    operation_id = operation.get("operationId")
    if operation_id:
        return operation_id
    return f"{str(operation.get('method', '')).upper()}{str(operation.get('path', '')).replace('/', '_')}"
