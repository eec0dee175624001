# web_i18n/adapters/registry/entry_points.py
from importlib.metadata import EntryPoint, entry_points
from typing import Any, List, Optional

import structlog

from web_i18n.core.domain.exceptions import ServiceRegistryError
from web_i18n.core.ports.service_registry import IServiceRegistry
from web_i18n.shared.service_locator import kind_key

logger = structlog.get_logger()


class EntryPointServiceRegistry(IServiceRegistry):
    """
    Registry backed by installed plugins.

    Plugins advertise implementations in their packaging metadata:

        [project.entry-points."web_i18n.services"]
        language_installer = "my_plugin.installer:BundleInstaller"

    The entry point name is the capability kind. The loaded object is called
    without arguments to build the implementation. Implementations registered
    in `fallback` come after the discovered ones. A plugin that fails to load
    is logged and skipped.
    """

    def __init__(self, group: str, fallback: Optional[IServiceRegistry] = None):
        self.group = group
        self.fallback = fallback

    def lookup(self, kind: str) -> List[Any]:
        key = kind_key(kind)
        discovered = []
        for entry_point in self._entry_points(key):
            try:
                discovered.append(self._instantiate(key, entry_point))
            except ServiceRegistryError as e:
                # Skip the broken plugin; the others and the fallback still apply
                logger.warning("service_plugin_skipped", kind=key, plugin=entry_point.value, error=e.message)
        if self.fallback is not None:
            discovered.extend(self.fallback.lookup(key))
        return discovered

    def _entry_points(self, key: str) -> List[EntryPoint]:
        try:
            return list(entry_points(group=self.group, name=key))
        except Exception as e:
            raise ServiceRegistryError(key, f"cannot read entry points of '{self.group}': {e}") from e

    def _instantiate(self, key: str, entry_point: EntryPoint) -> Any:
        try:
            factory = entry_point.load()
            implementation = factory() if callable(factory) else factory
        except Exception as e:
            raise ServiceRegistryError(key, f"plugin '{entry_point.value}' failed to load: {e}") from e

        logger.debug("service_discovered", kind=key, plugin=entry_point.value)
        return implementation
