# web_i18n/adapters/cli/__init__.py
"""
CLI Adapter (Primary / Driving).

Turns command descriptors into argparse parsers, converts the raw option
values into domain objects and dispatches to the use cases.
"""

from .descriptor import CommandDescriptor, CommandRegistry, OptionDescriptor
from .renderer import render_parser, run_command

__all__ = [
    "CommandDescriptor",
    "CommandRegistry",
    "OptionDescriptor",
    "render_parser",
    "run_command",
]
