import json
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import ValidationError

from ...config.models import DEFAULT_MODELS
from ...config.settings import get_models_file
from ...errors import RegistryError
from ...models.provider import ModelDescriptor, ServiceProvider
from ...observability.logging import PolicyLogger

logger = PolicyLogger("registry")


class ModelRegistry:
    """Read-only, ordered collection of model descriptors.

    The classifier consults a registry to answer "does this provider offer
    this model" questions. Instances are immutable once built.
    """

    def __init__(self, descriptors: Iterable[ModelDescriptor] = ()):
        self._descriptors: Tuple[ModelDescriptor, ...] = tuple(descriptors)

    @classmethod
    def from_raw(cls, raw_models: List[Dict[str, Any]], source: Optional[str] = None) -> "ModelRegistry":
        """Build a registry from raw descriptor dicts.

        Raises:
            RegistryError: If an entry fails validation
        """
        descriptors = []
        for index, raw in enumerate(raw_models):
            try:
                descriptor = ModelDescriptor.model_validate(raw)
            except ValidationError as e:
                raise RegistryError(f"Invalid model entry #{index}: {e}", source=source) from e

            if descriptor.service_provider is None:
                logger.warning(
                    "Unknown provider id; capability checks will not match it",
                    model=descriptor.name,
                    provider=descriptor.provider.id,
                    source=source
                )
            descriptors.append(descriptor)
        return cls(descriptors)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ModelRegistry":
        """Load a registry from a JSON file holding a list of descriptors.

        Raises:
            RegistryError: If the file is missing, unparseable or invalid
        """
        source = str(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RegistryError(f"Failed to load model registry from {source}: {e}", source=source) from e

        if not isinstance(raw, list):
            raise RegistryError(f"Model registry in {source} must be a JSON list", source=source)

        registry = cls.from_raw(raw, source=source)
        logger.info(f"Loaded {len(registry)} models", source=source)
        return registry

    @property
    def descriptors(self) -> Tuple[ModelDescriptor, ...]:
        return self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self):
        return iter(self._descriptors)

    def __contains__(self, name: object) -> bool:
        return any(d.name == name for d in self._descriptors)

    def for_provider(self, provider_id: str) -> List[ModelDescriptor]:
        """Descriptors whose provider id equals ``provider_id``, in registry order."""
        return [d for d in self._descriptors if d.provider.id == provider_id]

    def names_for_provider(self, provider_id: str) -> List[str]:
        return [d.name for d in self.for_provider(provider_id)]

    def has_model(self, name: str, provider_id: Optional[str] = None) -> bool:
        """Exact-name lookup, optionally restricted to one provider id."""
        for d in self._descriptors:
            if d.name == name and (provider_id is None or d.provider.id == provider_id):
                return True
        return False

    def find(self, name: str) -> Optional[ModelDescriptor]:
        """First descriptor with this exact name, or None."""
        for d in self._descriptors:
            if d.name == name:
                return d
        return None

    def providers(self) -> List[ServiceProvider]:
        """Known providers present in the registry, in first-seen order."""
        seen: List[ServiceProvider] = []
        for d in self._descriptors:
            provider = d.service_provider
            if provider is not None and provider not in seen:
                seen.append(provider)
        return seen


_default_registry: Optional[ModelRegistry] = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> ModelRegistry:
    """Process-wide registry, built once from CHAT_POLICY_MODELS_FILE or the built-in table."""
    global _default_registry
    registry = _default_registry
    if registry is not None:
        return registry

    with _default_registry_lock:
        if _default_registry is None:
            models_file = get_models_file()
            if models_file:
                _default_registry = ModelRegistry.from_file(models_file)
            else:
                _default_registry = ModelRegistry.from_raw(DEFAULT_MODELS, source="builtin")
        return _default_registry


def reset_default_registry() -> None:
    """Drop the cached default registry so the next lookup rebuilds it."""
    global _default_registry
    with _default_registry_lock:
        _default_registry = None
