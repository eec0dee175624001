# web_i18n/core/ports/language_installer.py
from typing import Optional, Protocol

from web_i18n.core.domain.models import InstallOutcome, LanguageSelection, ModuleReference


class ILanguageInstaller(Protocol):
    """
    Port for the operation that installs a display language into the project.

    Writing the message bundles, registering them in the web layer and
    switching the default locale all happen behind this port.
    """

    def is_install_language_command_available(self) -> bool:
        """Returns True if the project is initialised and web capable."""
        ...

    def install_language(
        self,
        selection: LanguageSelection,
        use_as_default: bool,
        module: Optional[ModuleReference],
    ) -> InstallOutcome:
        """
        Installs the selected language.

        Args:
            selection: The validated language to install.
            use_as_default: Whether the language becomes the project default.
            module: The application module that receives the bundle.

        Returns:
            The completion signal of the installation.
        """
        ...
