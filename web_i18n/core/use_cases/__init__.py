# web_i18n/core/use_cases/__init__.py
"""
Core Use Cases (Application Logic).

This package contains the "Interactors" of the system. Each use case
represents a specific command (e.g., "Install Display Language") and is
responsible for:
1. Deciding the command shape (availability, option visibility/mandatory).
2. Validating the converted arguments.
3. Delegating the work to the Ports exactly once.
"""

from .install_language import InstallLanguageCommand

__all__ = [
    "InstallLanguageCommand",
]
