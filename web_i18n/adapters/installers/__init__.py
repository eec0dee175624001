"""
Language Installer Adapters.

Concrete implementations of ILanguageInstaller.
"""

from .manifest_installer import ManifestLanguageInstaller

__all__ = [
    "ManifestLanguageInstaller",
]
