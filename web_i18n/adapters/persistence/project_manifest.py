# web_i18n/adapters/persistence/project_manifest.py
import json
import os
from pathlib import Path
from typing import List, Optional

import structlog
from pydantic import BaseModel, Field, ValidationError

from web_i18n.core.domain.exceptions import ProjectManifestError
from web_i18n.core.domain.models import ModuleFeatureName, ModuleReference, SupportedLanguage

logger = structlog.get_logger()

# --- Manifest Schema ---

class ModuleEntry(BaseModel):
    """
    One module as described in project.json.

    Example:
        {"name": "application", "path": "application",
         "features": ["application", "web-mvc"], "languages": ["en"]}
    """
    name: str = ""
    path: str = "."
    features: List[ModuleFeatureName] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=lambda: [SupportedLanguage.ENGLISH.value])
    default_language: Optional[str] = None

    def to_reference(self) -> ModuleReference:
        return ModuleReference(name=self.name, path=self.path, features=frozenset(self.features))


class ProjectManifest(BaseModel):
    """Topology of a generated multi-module project."""
    name: str
    focused_module: str = ""
    modules: List[ModuleEntry] = Field(default_factory=list)

    def find(self, name: str) -> Optional[ModuleEntry]:
        for entry in self.modules:
            if entry.name == name:
                return entry
        return None

# --- Store ---

class ProjectManifestStore:
    """
    Reads and writes the project manifest on the local file system.
    The file is re-read on every call so edits made between commands are seen.
    """

    def __init__(self, project_root: str, manifest_name: str = "project.json"):
        self.path = Path(project_root) / manifest_name

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> ProjectManifest:
        if not self.exists():
            raise ProjectManifestError(str(self.path), "file not found")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return ProjectManifest.model_validate(data)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("manifest_read_failed", path=str(self.path), error=str(e))
            raise ProjectManifestError(str(self.path), str(e)) from e
        except ValidationError as e:
            logger.error("manifest_invalid", path=str(self.path), errors=e.error_count())
            raise ProjectManifestError(str(self.path), str(e)) from e

    def save(self, manifest: ProjectManifest) -> None:
        """Writes to a temporary file and renames it over the manifest."""
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(json.dumps(manifest.model_dump(mode="json"), indent=2, ensure_ascii=False))
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error("manifest_write_failed", path=str(self.path), error=str(e))
            raise ProjectManifestError(str(self.path), f"could not save: {e}") from e

        logger.debug("manifest_saved", path=str(self.path))
