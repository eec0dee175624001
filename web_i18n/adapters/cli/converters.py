# web_i18n/adapters/cli/converters.py
from typing import Optional

import structlog

from web_i18n.core.domain.exceptions import ModuleLookupError, UnsupportedLanguageError
from web_i18n.core.domain.models import (
    LanguageSelection,
    ModuleFeatureName,
    ModuleReference,
    SupportedLanguage,
)
from web_i18n.core.use_cases.install_language import InstallLanguageCommand

logger = structlog.get_logger()

CURRENT_MODULE = "."

_TRUE_VALUES = {"true", "yes", "1", "on"}
_FALSE_VALUES = {"false", "no", "0", "off"}


def parse_bool(value: Optional[str]) -> bool:
    if value is None:
        return False
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Expected true or false, got '{value}'.")


class LanguageConverter:
    """
    Converts --code into a LanguageSelection.

    An unsupported code becomes None, which the command reports as an invalid
    language. In strict mode it raises instead.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def __call__(self, value: Optional[str]) -> Optional[LanguageSelection]:
        if value is None:
            return None

        language = SupportedLanguage.from_code(value)
        if language is None:
            logger.warning("unsupported_language_code", code=value)
            if self.strict:
                raise UnsupportedLanguageError(value)
            return None
        return LanguageSelection(language=language)


class ModuleConverter:
    """
    Converts --module into a ModuleReference.

    '.' (or no value) stands for the default module. An explicit name must be
    an application module or the focused module.
    """

    def __init__(self, command: InstallLanguageCommand):
        self.command = command

    def __call__(self, value: Optional[str]) -> Optional[ModuleReference]:
        if value is None or value == CURRENT_MODULE:
            return self.command.default_module()

        project_operations = self.command.locator.get_project_operations()
        module = project_operations.get_module(value) if project_operations else None
        if module is None:
            raise ModuleLookupError(value)

        if module.has_feature(ModuleFeatureName.APPLICATION):
            return module

        focused = project_operations.get_focused_module()
        if focused is not None and focused.name == module.name:
            return module
        raise ModuleLookupError(value, "is not an application module")
