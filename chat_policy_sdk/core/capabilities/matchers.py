"""
Matching strategies used by the capability classifier.

Three strategies cover every rule:
- keyword containment (coarse, catches name variants)
- exact allowlists (precise, for known exceptions)
- registry cross-reference (covers a whole provider family)
"""

from typing import Iterable, Optional

from ..registry import ModelRegistry


def contains_any(model: str, keywords: Iterable[str]) -> bool:
    """True if any keyword is a substring of ``model``."""
    return any(keyword in model for keyword in keywords)


def equals_any(model: str, names: Iterable[str]) -> bool:
    """True if ``model`` equals one of ``names`` exactly."""
    return any(model == name for name in names)


def contains_without(model: str, marker: str, excluded: str) -> bool:
    """True if ``model`` contains ``marker`` but not ``excluded``."""
    return marker in model and excluded not in model


def contains_registry_name(model: str, registry: ModelRegistry, provider_id: str) -> bool:
    """True if the name of any ``provider_id`` registry entry is a substring of ``model``."""
    return contains_any(model, registry.names_for_provider(provider_id))


def in_registry(
    model: str,
    registry: ModelRegistry,
    provider_id: str,
    excluded_substring: Optional[str] = None
) -> bool:
    """
    True if ``model`` exactly names a ``provider_id`` registry entry.

    Entries whose name contains ``excluded_substring`` are skipped.
    """
    for name in registry.names_for_provider(provider_id):
        if excluded_substring is not None and excluded_substring in name:
            continue
        if name == model:
            return True
    return False
