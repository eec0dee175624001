# web_i18n/adapters/cli/main.py
"""
Command line entry point.

Usage:
    web-i18n --code es
    web-i18n --code es --useAsDefault
    web-i18n --code es --module application   # only with several application modules
"""

import sys
from typing import List, Optional

import structlog

from web_i18n.core.use_cases.install_language import COMMAND_NAME
from web_i18n.shared.config import settings
from web_i18n.shared.container import container
from web_i18n.shared.logging_config import configure_logging
from web_i18n.shared.telemetry import setup_telemetry

from .commands import build_command_registry
from .renderer import run_command

logger = structlog.get_logger()


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    setup_telemetry(settings.OTEL_SERVICE_NAME)

    # Composition (Wiring)
    registry = build_command_registry(container.install_language_command())
    descriptor = registry.get(COMMAND_NAME)

    logger.debug("cli_started", command=COMMAND_NAME, project_root=settings.PROJECT_ROOT)

    try:
        return run_command(descriptor, argv)
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by the user.", file=sys.stderr)
        return 130


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
