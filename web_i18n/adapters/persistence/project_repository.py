# web_i18n/adapters/persistence/project_repository.py
from typing import List, Optional, Set

import structlog

from web_i18n.core.domain.exceptions import ProjectManifestError
from web_i18n.core.domain.models import ModuleFeatureName, ModuleReference
from web_i18n.core.ports.project_operations import IProjectOperations
from web_i18n.core.ports.type_location import ITypeLocationService

from .project_manifest import ProjectManifest, ProjectManifestStore

logger = structlog.get_logger()


def _load_or_none(store: ProjectManifestStore) -> Optional[ProjectManifest]:
    """No manifest, or an unreadable one, means no open project."""
    if not store.exists():
        return None
    try:
        return store.load()
    except ProjectManifestError as e:
        logger.warning("project_unavailable", path=str(store.path), error=e.message)
        return None


class ManifestProjectOperations(IProjectOperations):
    """
    Concrete implementation of IProjectOperations backed by project.json.
    With no readable manifest on disk there is no open project: lookups return nothing.
    """

    def __init__(self, store: ProjectManifestStore):
        self.store = store

    def _manifest(self) -> Optional[ProjectManifest]:
        return _load_or_none(self.store)

    def get_focused_module(self) -> Optional[ModuleReference]:
        manifest = self._manifest()
        if manifest is None:
            return None

        entry = manifest.find(manifest.focused_module)
        if entry is None:
            logger.warning("focused_module_missing", module=manifest.focused_module)
            return None
        return entry.to_reference()

    def get_module(self, name: str) -> Optional[ModuleReference]:
        manifest = self._manifest()
        if manifest is None:
            return None
        entry = manifest.find(name)
        return entry.to_reference() if entry else None

    def get_modules(self) -> List[ModuleReference]:
        manifest = self._manifest()
        if manifest is None:
            return []
        return [entry.to_reference() for entry in manifest.modules]


class ManifestTypeLocationService(ITypeLocationService):
    """Answers module-feature questions from the feature tags of project.json."""

    def __init__(self, store: ProjectManifestStore):
        self.store = store

    def get_modules(self, feature: ModuleFeatureName) -> Set[ModuleReference]:
        manifest = _load_or_none(self.store)
        if manifest is None:
            return set()
        return {
            entry.to_reference()
            for entry in manifest.modules
            if feature in entry.features
        }

    def get_module_names(self, feature: ModuleFeatureName) -> Set[str]:
        return {module.name for module in self.get_modules(feature)}

    def has_module_feature(self, module: Optional[ModuleReference], feature: ModuleFeatureName) -> bool:
        if module is None:
            return False
        return module.has_feature(feature)
