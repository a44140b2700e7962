"""
Request planning.

Bundles the request-path decisions for one message and target model: the
text payload, which images to attach, the timeout budget and the capability
set the transport layer uses to shape the request.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from ...models.messages import RequestMessage
from ...models.provider import ServiceProvider
from ...observability.logging import PolicyLogger
from ..capabilities import ModelCapabilities, get_capabilities_for_model
from ..content import get_message_images, get_message_text_content, get_web_reference_message_text_content
from ..registry import ModelRegistry
from .timeouts import TimeoutBudget, get_timeout_budget_by_model

logger = PolicyLogger("planner")


class RequestPlan(BaseModel):
    """How a chat request must be shaped before dispatch."""
    model: str
    provider: Optional[ServiceProvider] = None
    text: str = Field(..., description="Prompt text sent to the backend")
    images: List[str] = Field(default_factory=list, description="Image urls to attach")
    timeout_ms: int
    timeout_budget: TimeoutBudget
    capabilities: ModelCapabilities

    @property
    def enable_tools(self) -> bool:
        return self.capabilities.function_call

    @property
    def use_rag(self) -> bool:
        return self.capabilities.rag


def plan_request(
    message: RequestMessage,
    model: str,
    provider: Union[ServiceProvider, str, None] = None,
    registry: Optional[ModelRegistry] = None,
    lang: Optional[str] = None,
    use_web_search: bool = True
) -> RequestPlan:
    """
    Decide the request shape for sending ``message`` to ``model``.

    Args:
        message: Message to send
        model: Target model identifier
        provider: Provider member, its value, or its registry id; unknown values are dropped
        registry: Registry for capability cross-references; default registry if omitted
        lang: Locale for the web search template; configured locale if omitted
        use_web_search: Compose the web search prompt when the message carries results

    Returns:
        RequestPlan with text, images, timeout and capabilities
    """
    if isinstance(provider, str) and not isinstance(provider, ServiceProvider):
        provider = ServiceProvider.from_id(provider)

    with logger.track("plan_request", model=model, provider=provider.value if provider else None) as ctx:
        capabilities = get_capabilities_for_model(model, registry)

        if use_web_search:
            text = get_web_reference_message_text_content(message, lang=lang)
        else:
            text = get_message_text_content(message)

        images = get_message_images(message) if capabilities.vision else []

        budget = get_timeout_budget_by_model(model)
        ctx['budget'] = budget.value
        ctx['images'] = len(images)

        return RequestPlan(
            model=model,
            provider=provider,
            text=text,
            images=images,
            timeout_ms=budget.milliseconds,
            timeout_budget=budget,
            capabilities=capabilities,
        )
