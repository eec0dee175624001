import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum
from typing import Optional

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class ServiceRegistryBackend(str, Enum):
    STATIC = "static"              # Collaborators wired by the container
    ENTRY_POINTS = "entry_points"  # Plugins discovered via importlib.metadata

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "web-i18n"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"
    OTEL_SERVICE_NAME: str = "web-i18n"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    # --- Project ---
    PROJECT_ROOT: str = "."
    PROJECT_MANIFEST: str = "project.json"

    # --- Service Resolution ---
    SERVICE_REGISTRY_BACKEND: ServiceRegistryBackend = ServiceRegistryBackend.STATIC
    SERVICE_ENTRY_POINT_GROUP: str = "web_i18n.services"
    # Seconds a failed lookup is remembered before retrying (0 = retry every call)
    SERVICE_LOOKUP_RETRY_SEC: float = 0.0

    # --- Dynamic Path Resolution ---

    @property
    def MANIFEST_PATH(self) -> str:
        """Absolute location of the project manifest."""
        return os.path.join(os.path.abspath(self.PROJECT_ROOT), self.PROJECT_MANIFEST)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
