# web_i18n/adapters/registry/__init__.py
"""
Service Registry Adapters.

Implementations of IServiceRegistry queried by the ServiceLocator:
- InMemoryServiceRegistry: collaborators wired by the container at startup.
- EntryPointServiceRegistry: collaborators contributed by installed plugins.
"""

from typing import Any, Mapping

from web_i18n.shared.config import ServiceRegistryBackend

from .entry_points import EntryPointServiceRegistry
from .in_memory import InMemoryServiceRegistry


def build_service_registry(backend: str, entry_point_group: str, defaults: Mapping[str, Any]):
    """Builds the registry selected by SERVICE_REGISTRY_BACKEND."""
    static_registry = InMemoryServiceRegistry(defaults)
    if backend == ServiceRegistryBackend.ENTRY_POINTS:
        return EntryPointServiceRegistry(entry_point_group, fallback=static_registry)
    return static_registry


__all__ = [
    "EntryPointServiceRegistry",
    "InMemoryServiceRegistry",
    "build_service_registry",
]
