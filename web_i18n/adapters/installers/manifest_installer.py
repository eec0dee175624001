# web_i18n/adapters/installers/manifest_installer.py
from typing import Optional

import structlog

from web_i18n.core.domain.exceptions import ProjectManifestError
from web_i18n.core.domain.models import (
    InstallOutcome,
    InstallStatus,
    LanguageSelection,
    ModuleFeatureName,
    ModuleReference,
)
from web_i18n.core.ports.language_installer import ILanguageInstaller
from web_i18n.adapters.persistence.project_manifest import ProjectManifestStore

logger = structlog.get_logger()


class ManifestLanguageInstaller(ILanguageInstaller):
    """
    Records installed display languages in project.json.

    Each module entry keeps the list of languages it ships and its default
    language. Bundle generation is left to the project's own build.
    """

    def __init__(self, store: ProjectManifestStore):
        self.store = store

    def is_install_language_command_available(self) -> bool:
        """Available once a project exists and at least one module is web-mvc."""
        if not self.store.exists():
            return False
        try:
            manifest = self.store.load()
        except ProjectManifestError:
            return False
        return any(ModuleFeatureName.WEB_MVC in entry.features for entry in manifest.modules)

    def install_language(
        self,
        selection: LanguageSelection,
        use_as_default: bool,
        module: Optional[ModuleReference],
    ) -> InstallOutcome:
        code = selection.code
        if module is None:
            return self._failed(code, None, use_as_default, "No target module could be determined.")

        try:
            manifest = self.store.load()
        except ProjectManifestError as e:
            return self._failed(code, module.name, use_as_default, e.message)

        entry = manifest.find(module.name)
        if entry is None:
            return self._failed(code, module.name, use_as_default, f"Module '{module.display_name}' not found.")

        already_installed = code in entry.languages
        default_unchanged = not use_as_default or entry.default_language == code
        if already_installed and default_unchanged:
            logger.info("language_already_installed", lang=code, module=module.display_name)
            return InstallOutcome(
                status=InstallStatus.ALREADY_INSTALLED,
                lang_code=code,
                module_name=module.name,
                use_as_default=use_as_default,
                message=f"Language '{code}' is already installed in {module.display_name}.",
            )

        if not already_installed:
            entry.languages.append(code)
        if use_as_default:
            entry.default_language = code

        try:
            self.store.save(manifest)
        except ProjectManifestError as e:
            return self._failed(code, module.name, use_as_default, e.message)

        logger.info("language_installed", lang=code, module=module.display_name, default=use_as_default)
        return InstallOutcome(
            status=InstallStatus.INSTALLED,
            lang_code=code,
            module_name=module.name,
            use_as_default=use_as_default,
            message=f"{selection.language.display_name} installed in {module.display_name}.",
            details={"languages": list(entry.languages), "default_language": entry.default_language},
        )

    def _failed(self, code: str, module_name: Optional[str], use_as_default: bool, reason: str) -> InstallOutcome:
        logger.error("language_install_failed", lang=code, module=module_name, reason=reason)
        return InstallOutcome(
            status=InstallStatus.FAILED,
            lang_code=code,
            module_name=module_name,
            use_as_default=use_as_default,
            message=reason,
        )
