# web_i18n/core/use_cases/install_language.py
from typing import Optional

import structlog

from web_i18n.core.domain.context import ShellContext
from web_i18n.core.domain.exceptions import ServiceUnavailableError
from web_i18n.core.domain.models import (
    InstallLanguageRequest,
    InstallOutcome,
    LanguageSelection,
    ModuleFeatureName,
    ModuleReference,
)
from web_i18n.shared.service_locator import CapabilityKind, ServiceLocator
from web_i18n.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

COMMAND_NAME = "web mvc language"
INVALID_LANGUAGE_NOTICE = "ERROR: You should provide a valid language code."


class InstallLanguageCommand:
    """
    Use Case: Installs a new display language in the generated project views,
    optionally making it the project default.

    Besides the execution itself, this class answers the questions the shell
    asks while it renders the command:
    1. Is the command available at all?
    2. Should the --module option be shown?
    3. Must --module be supplied?

    Collaborators are resolved through the ServiceLocator on every call.
    """

    def __init__(self, locator: ServiceLocator):
        self.locator = locator

    # --- Availability ---

    def is_install_language_available(self) -> bool:
        installer = self.locator.get_language_installer()
        if installer is None:
            return False
        return bool(installer.is_install_language_command_available())

    # --- --module indicators ---

    def is_module_visible(self, context: Optional[ShellContext] = None) -> bool:
        """
        --module is visible only if more than one module carries the
        APPLICATION feature. With zero or one there is nothing to choose.
        """
        type_location = self.locator.get_type_location_service()
        if type_location is None:
            return False
        return len(type_location.get_module_names(ModuleFeatureName.APPLICATION)) > 1

    def is_module_required(self, context: Optional[ShellContext] = None) -> bool:
        """
        --module is mandatory if it is visible and the focused module is not
        an APPLICATION module.
        """
        if not self.is_module_visible(context):
            return False

        focused = self._focused_module()
        type_location = self.locator.get_type_location_service()
        if type_location is not None and type_location.has_module_feature(
            focused, ModuleFeatureName.APPLICATION
        ):
            return False
        return True

    def default_module(self) -> Optional[ModuleReference]:
        """
        Module used when --module is omitted: the focused module if it is an
        application module, else the unique application module, else the
        focused module.
        """
        focused = self._focused_module()
        type_location = self.locator.get_type_location_service()
        if type_location is None:
            return focused

        if type_location.has_module_feature(focused, ModuleFeatureName.APPLICATION):
            return focused

        applications = type_location.get_modules(ModuleFeatureName.APPLICATION)
        if len(applications) == 1:
            return next(iter(applications))
        return focused

    # --- Execution ---

    def language(
        self,
        selection: Optional[LanguageSelection],
        use_as_default: bool = False,
        module: Optional[ModuleReference] = None,
    ) -> Optional[InstallOutcome]:
        """
        Executes the command.

        Args:
            selection: The converted --code value; None if it was missing or unsupported.
            use_as_default: Value of --useAsDefault.
            module: Value of --module; None selects the default module.

        Returns:
            Whatever the installer reports, or None if no valid language was given.

        Raises:
            ServiceUnavailableError: If no language installer can be resolved.
        """
        with tracer.start_as_current_span("use_case.install_language") as span:
            if selection is None:
                logger.info("install_language_rejected", notice=INVALID_LANGUAGE_NOTICE)
                return None

            span.set_attribute("app.lang_code", selection.code)
            span.set_attribute("app.use_as_default", use_as_default)

            installer = self.locator.get_language_installer()
            if installer is None:
                logger.error("install_language_unavailable", lang=selection.code)
                raise ServiceUnavailableError(CapabilityKind.LANGUAGE_INSTALLER.value)

            request = InstallLanguageRequest(
                selection=selection,
                use_as_default=use_as_default,
                module=module if module is not None else self.default_module(),
            )
            module_name = request.module.display_name if request.module else None
            logger.info(
                "install_language_requested",
                lang=selection.code,
                use_as_default=request.use_as_default,
                module=module_name,
            )

            return installer.install_language(request.selection, request.use_as_default, request.module)

    # --- Helpers ---

    def _focused_module(self) -> Optional[ModuleReference]:
        project_operations = self.locator.get_project_operations()
        if project_operations is None:
            return None
        return project_operations.get_focused_module()
