"""Version comparison used by the client update workflow."""

from .semver import is_newer_version, natural_compare, semver_compare

__all__ = ["semver_compare", "natural_compare", "is_newer_version"]
