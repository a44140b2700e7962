"""FastAPI HTTP endpoints for the chat policy SDK.

This module exposes the resolver's decisions over REST so UI code can query
them. Mount ``router`` on any FastAPI application.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..core.capabilities import get_capabilities_for_model
from ..core.content import get_web_reference_message_text_content
from ..core.policy import RequestPlan, get_timeout_budget_by_model, plan_request, show_plugins
from ..core.registry import get_default_registry
from ..core.versioning import semver_compare
from ..errors import PolicyError
from ..models.messages import RequestMessage
from ..models.provider import ServiceProvider


router = APIRouter()


class RequestPlanBody(BaseModel):
    message: RequestMessage
    model: str
    provider: Optional[str] = None
    lang: Optional[str] = None


class WebSearchPromptBody(BaseModel):
    message: RequestMessage
    lang: Optional[str] = None


@router.get("/models")
async def list_models(provider: Optional[str] = None):
    """Return registry descriptors, optionally for one provider id."""
    try:
        registry = get_default_registry()
    except PolicyError as e:
        raise HTTPException(status_code=500, detail=str(e))

    descriptors = registry.for_provider(provider) if provider else list(registry)
    return [d.model_dump(by_alias=True) for d in descriptors]


@router.get("/capabilities")
async def model_capabilities(model: str, provider: Optional[str] = None):
    """Capability flags, timeout budget and plugin gate for a model."""
    try:
        capabilities = get_capabilities_for_model(model)
        budget = get_timeout_budget_by_model(model)
        timeout_ms = budget.milliseconds
    except PolicyError as e:
        raise HTTPException(status_code=500, detail=str(e))

    service_provider = ServiceProvider.from_id(provider)
    return {
        "model": model,
        "provider": service_provider.value if service_provider else None,
        "capabilities": capabilities.model_dump(),
        "timeout_budget": budget.value,
        "timeout_ms": timeout_ms,
        "show_plugins": show_plugins(service_provider, model),
    }


@router.post("/request-plan", response_model=RequestPlan)
async def request_plan(body: RequestPlanBody):
    """Plan how a message must be shaped for a target model."""
    try:
        return plan_request(body.message, body.model, provider=body.provider, lang=body.lang)
    except PolicyError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/web-search-prompt")
async def web_search_prompt(body: WebSearchPromptBody):
    """Compose the web search prompt for a message."""
    return {"prompt": get_web_reference_message_text_content(body.message, lang=body.lang)}


@router.get("/versions/compare")
async def compare_versions(a: str, b: str):
    """Compare two version strings."""
    result = semver_compare(a, b)
    return {"a": a, "b": b, "result": result, "newer": result > 0}
