"""Exceptions raised at the configuration boundary of the policy resolver.

Predicates, extractors and gates never raise; only loading configuration
(registry files, environment overrides) can fail.
"""

from typing import Optional


class PolicyError(Exception):
    """Base class for chat policy SDK errors."""
    pass


class RegistryError(PolicyError):
    """A model registry source could not be read or validated."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class ConfigurationError(PolicyError):
    """An environment setting holds an invalid value."""
    pass
