# web_i18n/shared/service_locator.py
import time
from dataclasses import dataclass, field
from enum import Enum
from threading import Lock
from typing import Any, Callable, Dict, Optional, Union

import structlog

from web_i18n.core.ports.language_installer import ILanguageInstaller
from web_i18n.core.ports.project_operations import IProjectOperations
from web_i18n.core.ports.service_registry import IServiceRegistry
from web_i18n.core.ports.type_location import ITypeLocationService

logger = structlog.get_logger()


class CapabilityKind(str, Enum):
    """Categories of collaborators the command resolves at runtime."""
    PROJECT_OPERATIONS = "project_operations"
    TYPE_LOCATION = "type_location"
    LANGUAGE_INSTALLER = "language_installer"


class ResolutionState(str, Enum):
    UNRESOLVED = "unresolved"  # Never queried
    RESOLVED = "resolved"      # Handle cached for the process lifetime
    FAILED = "failed"          # Last query found nothing; retried on next call


def kind_key(kind: Union[CapabilityKind, str]) -> str:
    """Normalizes a capability kind to its registry key."""
    if isinstance(kind, Enum):
        return str(kind.value)
    return str(kind)


@dataclass
class ServiceSlot:
    """Cache slot for one capability kind."""
    state: ResolutionState = ResolutionState.UNRESOLVED
    handle: Any = None
    failed_at: float = 0.0
    lock: Lock = field(default_factory=Lock, repr=False)


class ServiceLocator:
    """
    Resolves collaborators from the host's service registry on first use.

    - A resolved handle is cached and returned without querying again.
    - A failed lookup is logged and reported as None (unavailable). It is only
      remembered for `failure_ttl` seconds, so later calls retry.
    - Each kind has its own lock: concurrent first calls trigger a single
      registry query and all observe the same handle.
    """

    def __init__(
        self,
        registry: IServiceRegistry,
        failure_ttl: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.registry = registry
        self.failure_ttl = failure_ttl or 0.0
        self._clock = clock
        self._slots: Dict[str, ServiceSlot] = {}
        self._slots_lock = Lock()

    # --- Generic resolution ---

    def resolve(self, kind: Union[CapabilityKind, str]) -> Optional[Any]:
        """
        Returns the active implementation of the kind, or None if it
        cannot be resolved right now. Never raises.
        """
        key = kind_key(kind)
        slot = self._get_slot(key)

        if slot.state is ResolutionState.RESOLVED:
            return slot.handle

        with slot.lock:
            # Another thread may have won the race while we waited
            if slot.state is ResolutionState.RESOLVED:
                return slot.handle

            if slot.state is ResolutionState.FAILED and self._failure_is_fresh(slot):
                return None

            handle = self._query_registry(key)
            if handle is None:
                slot.state = ResolutionState.FAILED
                slot.failed_at = self._clock()
                return None

            slot.handle = handle
            slot.state = ResolutionState.RESOLVED
            return handle

    def state_of(self, kind: Union[CapabilityKind, str]) -> ResolutionState:
        return self._get_slot(kind_key(kind)).state

    def reset(self) -> None:
        """Forgets every cached handle (process teardown, tests)."""
        with self._slots_lock:
            self._slots.clear()

    # --- Typed accessors ---

    def get_project_operations(self) -> Optional[IProjectOperations]:
        return self.resolve(CapabilityKind.PROJECT_OPERATIONS)

    def get_type_location_service(self) -> Optional[ITypeLocationService]:
        return self.resolve(CapabilityKind.TYPE_LOCATION)

    def get_language_installer(self) -> Optional[ILanguageInstaller]:
        return self.resolve(CapabilityKind.LANGUAGE_INSTALLER)

    # --- Internals ---

    def _get_slot(self, key: str) -> ServiceSlot:
        with self._slots_lock:
            slot = self._slots.get(key)
            if slot is None:
                slot = ServiceSlot()
                self._slots[key] = slot
            return slot

    def _failure_is_fresh(self, slot: ServiceSlot) -> bool:
        if self.failure_ttl <= 0:
            return False
        return (self._clock() - slot.failed_at) < self.failure_ttl

    def _query_registry(self, key: str) -> Optional[Any]:
        try:
            handles = self.registry.lookup(key)
        except Exception as e:
            logger.warning("service_lookup_failed", kind=key, error=str(e))
            return None

        if not handles:
            logger.warning("service_not_registered", kind=key)
            return None

        if len(handles) > 1:
            logger.debug("service_multiple_candidates", kind=key, count=len(handles))

        handle = handles[0]
        logger.debug("service_resolved", kind=key, implementation=type(handle).__name__)
        return handle
