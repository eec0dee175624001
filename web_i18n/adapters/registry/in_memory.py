# web_i18n/adapters/registry/in_memory.py
from threading import Lock
from typing import Any, Dict, List, Mapping, Optional, Union

import structlog

from web_i18n.core.ports.service_registry import IServiceRegistry
from web_i18n.shared.service_locator import CapabilityKind, kind_key

logger = structlog.get_logger()


class InMemoryServiceRegistry(IServiceRegistry):
    """
    Registry holding the implementations wired at process startup.
    Several implementations may be registered per kind; the first one wins.
    """

    def __init__(self, services: Optional[Mapping[Union[CapabilityKind, str], Any]] = None):
        self._lock = Lock()
        self._services: Dict[str, List[Any]] = {}
        for kind, implementation in (services or {}).items():
            self.register(kind, implementation)

    def register(self, kind: Union[CapabilityKind, str], implementation: Any) -> None:
        key = kind_key(kind)
        with self._lock:
            self._services.setdefault(key, []).append(implementation)
        logger.debug("service_registered", kind=key, implementation=type(implementation).__name__)

    def unregister(self, kind: Union[CapabilityKind, str], implementation: Any = None) -> None:
        """Removes one implementation, or every implementation of the kind."""
        key = kind_key(kind)
        with self._lock:
            if implementation is None:
                self._services.pop(key, None)
                return
            registered = self._services.get(key, [])
            self._services[key] = [s for s in registered if s is not implementation]

    def lookup(self, kind: str) -> List[Any]:
        with self._lock:
            return list(self._services.get(kind_key(kind), []))
