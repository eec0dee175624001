# web_i18n/core/domain/models.py
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field

# --- Enums ---

class SupportedLanguage(str, Enum):
    """Display languages that can be installed into a generated project."""
    ENGLISH = "en"  # Default bundle of every generated project
    SPANISH = "es"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_code(cls, code: str) -> Optional["SupportedLanguage"]:
        """Returns the matching language, or None for unsupported codes."""
        normalized = (code or "").strip().lower()
        for language in cls:
            if language.value == normalized:
                return language
        return None


_DISPLAY_NAMES = {
    SupportedLanguage.ENGLISH: "English",
    SupportedLanguage.SPANISH: "Spanish",
}


class ModuleFeatureName(str, Enum):
    """Feature tags a module of a multi-module project can carry."""
    APPLICATION = "application"  # Runnable entry point (e.g. @SpringBootApplication)
    WEB_MVC = "web-mvc"
    DTO = "dto"
    MODEL = "model"
    REPOSITORY = "repository"
    SERVICE_API = "service-api"
    SERVICE_IMPL = "service-impl"


class InstallStatus(str, Enum):
    """Result reported by a language installer."""
    INSTALLED = "installed"
    ALREADY_INSTALLED = "already_installed"
    FAILED = "failed"

# --- Value Objects ---

class LanguageSelection(BaseModel):
    """
    A validated display language chosen by the user.
    Only built by the language converter, never from an unsupported code.
    """
    model_config = ConfigDict(frozen=True)

    language: SupportedLanguage

    @property
    def code(self) -> str:
        return self.language.value

    def __str__(self) -> str:
        return self.code


class ModuleReference(BaseModel):
    """
    One buildable module of a multi-module project.
    The root module of the project uses the empty name.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="Module name; '' for the root module")
    path: str = Field(".", description="Module directory relative to the project root")
    features: FrozenSet[ModuleFeatureName] = Field(default_factory=frozenset)

    def has_feature(self, feature: ModuleFeatureName) -> bool:
        return feature in self.features

    @property
    def display_name(self) -> str:
        return self.name or "<root>"

# --- Command Models ---

class InstallLanguageRequest(BaseModel):
    """
    One invocation of the install command.
    Lives for the duration of a single execution call.
    """
    model_config = ConfigDict(frozen=True)

    selection: LanguageSelection
    use_as_default: bool = False
    module: Optional[ModuleReference] = None


class InstallOutcome(BaseModel):
    """
    Completion signal returned by the installer.
    The command passes it through without interpreting it.
    """
    status: InstallStatus
    lang_code: str
    module_name: Optional[str] = None
    use_as_default: bool = False
    message: Optional[str] = None
    details: Dict[str, Any] = Field(default_factory=dict)
