"""Model registry layer.

Holds the read-only list of known models grouped by provider and the
process-wide default instance.
"""

from .registry import ModelRegistry, get_default_registry, reset_default_registry

__all__ = ["ModelRegistry", "get_default_registry", "reset_default_registry"]
