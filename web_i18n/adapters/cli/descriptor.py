# web_i18n/adapters/cli/descriptor.py
"""
Command descriptors.

A command is described once, as data: its options, and for each option the
functions deciding whether it is shown and whether it must be supplied.
The renderer turns a descriptor into a parser for the current ShellContext.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from web_i18n.core.domain.context import ShellContext

Indicator = Callable[[ShellContext], bool]


@dataclass(frozen=True)
class OptionDescriptor:
    key: str
    help: str = ""
    mandatory: bool = False
    is_flag: bool = False
    # Value used when the option is typed without a value (flags)
    specified_default: Optional[str] = None
    # Value used when the option is omitted or hidden
    unspecified_default: Optional[str] = None
    converter: Optional[Callable[[Optional[str]], Any]] = None
    visibility_indicator: Optional[Indicator] = None
    mandatory_indicator: Optional[Indicator] = None
    # Handler keyword receiving the converted value (defaults to key)
    param: Optional[str] = None

    @property
    def dest(self) -> str:
        return self.param or self.key

    def is_visible(self, context: ShellContext) -> bool:
        if self.visibility_indicator is None:
            return True
        return bool(self.visibility_indicator(context))

    def is_mandatory(self, context: ShellContext) -> bool:
        """Hidden options are never mandatory."""
        if not self.is_visible(context):
            return False
        if self.mandatory_indicator is None:
            return self.mandatory
        return bool(self.mandatory_indicator(context))

    def convert(self, raw: Optional[str]) -> Any:
        if self.converter is None:
            return raw
        return self.converter(raw)


@dataclass(frozen=True)
class CommandDescriptor:
    name: str
    handler: Callable[..., Any]
    options: Tuple[OptionDescriptor, ...] = ()
    help: str = ""
    availability_indicator: Optional[Callable[[], bool]] = None
    # Turns the handler result and the converted arguments into an exit code (and prints it)
    presenter: Optional[Callable[[Any, Dict[str, Any]], int]] = None

    def is_available(self) -> bool:
        if self.availability_indicator is None:
            return True
        return bool(self.availability_indicator())

    def option(self, key: str) -> Optional[OptionDescriptor]:
        for option in self.options:
            if option.key == key:
                return option
        return None

    def present(self, result: Any, arguments: Optional[Dict[str, Any]] = None) -> int:
        if self.presenter is None:
            return 0
        return self.presenter(result, arguments or {})


@dataclass
class CommandRegistry:
    """Commands registered once at startup, looked up by name."""
    _commands: Dict[str, CommandDescriptor] = field(default_factory=dict)

    def register(self, descriptor: CommandDescriptor) -> None:
        if descriptor.name in self._commands:
            raise ValueError(f"Command '{descriptor.name}' is already registered.")
        self._commands[descriptor.name] = descriptor

    def get(self, name: str) -> CommandDescriptor:
        try:
            return self._commands[name]
        except KeyError:
            raise KeyError(f"Unknown command '{name}'.") from None

    def names(self) -> List[str]:
        return sorted(self._commands)

    def available(self) -> List[CommandDescriptor]:
        return [self._commands[name] for name in self.names() if self._commands[name].is_available()]
