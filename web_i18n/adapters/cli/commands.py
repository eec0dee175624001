# web_i18n/adapters/cli/commands.py
import sys
from typing import Any, Dict, Optional

from web_i18n.core.domain.models import InstallOutcome, InstallStatus
from web_i18n.core.use_cases.install_language import (
    COMMAND_NAME,
    INVALID_LANGUAGE_NOTICE,
    InstallLanguageCommand,
)

from .converters import CURRENT_MODULE, LanguageConverter, ModuleConverter, parse_bool
from .descriptor import CommandDescriptor, CommandRegistry, OptionDescriptor


def present_install_outcome(outcome: Optional[InstallOutcome], arguments: Optional[Dict[str, Any]] = None) -> int:
    """
    Prints the installer's report. A missing language is a no-op, not a failure.

    The notice is decided from the converted --code value; the installer may
    legitimately report nothing (None) after a successful install.
    """
    if arguments is not None and arguments.get("selection") is None:
        print(INVALID_LANGUAGE_NOTICE, file=sys.stderr)
        return 0

    if outcome is None:
        print("✅ Language installation finished.")
        return 0

    if outcome.status == InstallStatus.FAILED:
        print(f"❌ {outcome.message or 'Language installation failed.'}", file=sys.stderr)
        return 1

    icon = "✅" if outcome.status == InstallStatus.INSTALLED else "ℹ️ "
    print(f"{icon} {outcome.message or outcome.status.value}")
    if outcome.use_as_default:
        print(f"   Default language: {outcome.lang_code}")
    return 0


def build_install_language_descriptor(command: InstallLanguageCommand) -> CommandDescriptor:
    return CommandDescriptor(
        name=COMMAND_NAME,
        help=(
            "Installs new language in generated project views. Also, could be used "
            "to specify the default language of the project."
        ),
        handler=command.language,
        availability_indicator=command.is_install_language_available,
        presenter=present_install_outcome,
        options=(
            OptionDescriptor(
                key="code",
                param="selection",
                mandatory=True,
                converter=LanguageConverter(),
                help="The language code for the desired bundle: en (English, default) or es (Spanish).",
            ),
            OptionDescriptor(
                key="useAsDefault",
                param="use_as_default",
                is_flag=True,
                specified_default="true",
                unspecified_default="false",
                converter=parse_bool,
                help="Use the selected language as the application default. Default: false.",
            ),
            OptionDescriptor(
                key="module",
                mandatory=True,
                unspecified_default=CURRENT_MODULE,
                converter=ModuleConverter(command),
                visibility_indicator=command.is_module_visible,
                mandatory_indicator=command.is_module_required,
                help=(
                    "The application module where to install the language support. "
                    "Default: the unique or focused application module."
                ),
            ),
        ),
    )


def build_command_registry(command: InstallLanguageCommand) -> CommandRegistry:
    registry = CommandRegistry()
    registry.register(build_install_language_descriptor(command))
    return registry
