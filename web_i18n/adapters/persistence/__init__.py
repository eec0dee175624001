# web_i18n/adapters/persistence/__init__.py
"""
Persistence Adapters.

This package implements the project-model ports on top of the project
manifest (project.json) stored at the project root.

Components:
- ProjectManifestStore: Reads/writes the manifest.
- ManifestProjectOperations: IProjectOperations over the manifest.
- ManifestTypeLocationService: ITypeLocationService over the manifest.
"""

from .project_manifest import ModuleEntry, ProjectManifest, ProjectManifestStore
from .project_repository import ManifestProjectOperations, ManifestTypeLocationService

__all__ = [
    "ModuleEntry",
    "ProjectManifest",
    "ProjectManifestStore",
    "ManifestProjectOperations",
    "ManifestTypeLocationService",
]
