# web_i18n/shared/container.py
from dependency_injector import containers, providers

from web_i18n.shared.config import settings
from web_i18n.shared.service_locator import CapabilityKind, ServiceLocator
from web_i18n.adapters.persistence.project_manifest import ProjectManifestStore
from web_i18n.adapters.persistence.project_repository import (
    ManifestProjectOperations,
    ManifestTypeLocationService,
)
from web_i18n.adapters.installers.manifest_installer import ManifestLanguageInstaller
from web_i18n.adapters.registry import build_service_registry

from web_i18n.core.use_cases.install_language import InstallLanguageCommand

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    """

    # 1. Configuration
    # We load settings directly, but wrapping them allows overriding in tests.
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Infrastructure Adapters)

    # Persistence (Singleton: One access point to project.json)
    manifest_store = providers.Singleton(
        ProjectManifestStore,
        project_root=config.PROJECT_ROOT,
        manifest_name=config.PROJECT_MANIFEST,
    )

    project_operations = providers.Singleton(
        ManifestProjectOperations,
        store=manifest_store,
    )

    type_location_service = providers.Singleton(
        ManifestTypeLocationService,
        store=manifest_store,
    )

    language_installer = providers.Singleton(
        ManifestLanguageInstaller,
        store=manifest_store,
    )

    # 3. Service Resolution
    # The registry holds the adapters above; with the 'entry_points' backend,
    # installed plugins are preferred over them.
    service_registry = providers.Singleton(
        build_service_registry,
        backend=config.SERVICE_REGISTRY_BACKEND,
        entry_point_group=config.SERVICE_ENTRY_POINT_GROUP,
        defaults=providers.Dict({
            CapabilityKind.PROJECT_OPERATIONS.value: project_operations,
            CapabilityKind.TYPE_LOCATION.value: type_location_service,
            CapabilityKind.LANGUAGE_INSTALLER.value: language_installer,
        }),
    )

    # Singleton: the handle cache lives as long as the process
    service_locator = providers.Singleton(
        ServiceLocator,
        registry=service_registry,
        failure_ttl=config.SERVICE_LOOKUP_RETRY_SEC,
    )

    # 4. Use Cases (Application Logic)

    install_language_command = providers.Factory(
        InstallLanguageCommand,
        locator=service_locator,
    )

# Instantiate the container for global access (e.g. by the CLI)
container = Container()
