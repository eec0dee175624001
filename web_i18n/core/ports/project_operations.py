# web_i18n/core/ports/project_operations.py
from typing import List, Optional, Protocol

from web_i18n.core.domain.models import ModuleReference


class IProjectOperations(Protocol):
    """
    Port for querying the active multi-module project.
    Implementations could read a manifest file, a Maven reactor or an IDE model.
    """

    def get_focused_module(self) -> Optional[ModuleReference]:
        """
        Returns the module currently targeted by commands when no explicit
        module is given, or None if no project is open.
        """
        ...

    def get_module(self, name: str) -> Optional[ModuleReference]:
        """
        Looks up a module by name.

        Args:
            name: The module name ('' designates the root module).

        Returns:
            The ModuleReference if found, None otherwise.
        """
        ...

    def get_modules(self) -> List[ModuleReference]:
        """Returns every module of the project, root first."""
        ...
