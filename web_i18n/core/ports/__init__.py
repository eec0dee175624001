# web_i18n/core/ports/__init__.py
"""
Core Ports (Interfaces).

This package defines the Protocols that the Infrastructure Adapters must
implement. These interfaces let the command logic talk to the project model,
the language installer and the host's service registry without knowing the
implementation details.
"""

from .language_installer import ILanguageInstaller
from .project_operations import IProjectOperations
from .service_registry import IServiceRegistry
from .type_location import ITypeLocationService

__all__ = [
    "ILanguageInstaller",
    "IProjectOperations",
    "IServiceRegistry",
    "ITypeLocationService",
]
