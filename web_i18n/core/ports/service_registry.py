# web_i18n/core/ports/service_registry.py
from typing import Any, List, Protocol


class IServiceRegistry(Protocol):
    """
    Port for the host's service registry.

    The registry knows which implementations are active for each capability
    kind (e.g. 'language_installer'). It is queried by the ServiceLocator only.
    """

    def lookup(self, kind: str) -> List[Any]:
        """
        Returns every active implementation registered for the kind,
        in preference order. An empty list means none is registered.

        Raises:
            ServiceRegistryError: If the registry itself cannot be queried.
        """
        ...
