"""Request policy layer.

This layer handles:
- Timeout budget selection per model
- Plugin visibility per provider/model
- Request planning for the transport layer
"""

from .planner import RequestPlan, plan_request
from .plugins import get_operation_id, show_plugins
from .timeouts import TimeoutBudget, get_timeout_budget_by_model, get_timeout_ms_by_model

__all__ = [
    "TimeoutBudget",
    "get_timeout_budget_by_model",
    "get_timeout_ms_by_model",
    "show_plugins",
    "get_operation_id",
    "RequestPlan",
    "plan_request",
]
