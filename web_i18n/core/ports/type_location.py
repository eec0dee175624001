# web_i18n/core/ports/type_location.py
from typing import Optional, Protocol, Set

from web_i18n.core.domain.models import ModuleFeatureName, ModuleReference


class ITypeLocationService(Protocol):
    """
    Port for module-feature lookups.
    Answers which modules of the project carry a given feature tag.
    """

    def get_modules(self, feature: ModuleFeatureName) -> Set[ModuleReference]:
        """Returns the modules tagged with the given feature."""
        ...

    def get_module_names(self, feature: ModuleFeatureName) -> Set[str]:
        """Returns the names of the modules tagged with the given feature."""
        ...

    def has_module_feature(self, module: Optional[ModuleReference], feature: ModuleFeatureName) -> bool:
        """
        Checks a single module for a feature tag.
        An unknown module (None) never carries any feature.
        """
        ...
