# web_i18n/adapters/cli/renderer.py
import argparse
import sys
from typing import Any, Dict, List, Optional, Sequence

import structlog

from web_i18n.core.domain.context import ShellContext
from web_i18n.core.domain.exceptions import DomainError

from .descriptor import CommandDescriptor

logger = structlog.get_logger()


def scan_parameters(argv: Sequence[str]) -> Dict[str, str]:
    """
    Collects the '--key value' pairs typed so far, without validating them.
    Flags given without a value are recorded with an empty string.
    """
    parameters: Dict[str, str] = {}
    tokens = list(argv)
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token.startswith("--") and len(token) > 2:
            key, sep, value = token[2:].partition("=")
            if not sep and i + 1 < len(tokens) and not tokens[i + 1].startswith("--"):
                value = tokens[i + 1]
                i += 1
            parameters[key] = value
        i += 1
    return parameters


def render_parser(descriptor: CommandDescriptor, context: ShellContext) -> argparse.ArgumentParser:
    """
    Builds the parser for one command as it looks in the given context:
    hidden options are left out, mandatory ones are required.
    """
    parser = argparse.ArgumentParser(prog=descriptor.name, description=descriptor.help)

    for option in descriptor.options:
        if not option.is_visible(context):
            continue

        flag = f"--{option.key}"
        if option.is_flag:
            parser.add_argument(
                flag,
                dest=option.dest,
                nargs="?",
                const=option.specified_default,
                default=option.unspecified_default,
                help=option.help,
            )
        else:
            parser.add_argument(
                flag,
                dest=option.dest,
                required=option.is_mandatory(context),
                default=option.unspecified_default,
                help=option.help,
            )

    return parser


def convert_arguments(
    descriptor: CommandDescriptor, context: ShellContext, parsed: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Runs each option's converter. Hidden options receive their unspecified
    default, so the handler always gets every keyword.
    """
    arguments: Dict[str, Any] = {}
    for option in descriptor.options:
        if option.is_visible(context):
            raw = parsed.get(option.dest, option.unspecified_default)
        else:
            raw = option.unspecified_default
        arguments[option.dest] = option.convert(raw)
    return arguments


def run_command(descriptor: CommandDescriptor, argv: Optional[List[str]] = None) -> int:
    """
    Renders, parses and executes a command.

    Returns:
        The process exit code. Parse errors exit through argparse (code 2).
    """
    argv = list(sys.argv[1:] if argv is None else argv)

    if not descriptor.is_available():
        print(f"❌ Command '{descriptor.name}' is not available in the current project.", file=sys.stderr)
        return 1

    context = ShellContext(command=descriptor.name, parameters=scan_parameters(argv))
    parser = render_parser(descriptor, context)
    args = parser.parse_args(argv)

    try:
        arguments = convert_arguments(descriptor, context, vars(args))
    except DomainError as e:
        parser.error(e.message)
    except ValueError as e:
        parser.error(str(e))

    logger.debug("command_dispatch", command=descriptor.name, options=sorted(arguments))

    try:
        result = descriptor.handler(**arguments)
    except DomainError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return 1

    return descriptor.present(result, arguments)
