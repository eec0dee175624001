# tests/conftest.py
import json

import pytest
from unittest.mock import MagicMock

from web_i18n.shared.container import Container
from web_i18n.shared.service_locator import CapabilityKind, ServiceLocator
from web_i18n.adapters.registry.in_memory import InMemoryServiceRegistry
from web_i18n.core.domain.models import (
    InstallOutcome,
    InstallStatus,
    ModuleFeatureName,
    ModuleReference,
)
from web_i18n.core.ports.language_installer import ILanguageInstaller
from web_i18n.core.ports.project_operations import IProjectOperations
from web_i18n.core.ports.type_location import ITypeLocationService

APP = ModuleFeatureName.APPLICATION
WEB = ModuleFeatureName.WEB_MVC


def make_module(name: str, *features: ModuleFeatureName) -> ModuleReference:
    return ModuleReference(name=name, path=name or ".", features=frozenset(features))


@pytest.fixture
def root_module():
    return make_module("")

@pytest.fixture(scope="function")
def mock_project_operations(root_module):
    """Returns a mock Project Operations service focused on the root module."""
    project = MagicMock(spec=IProjectOperations)
    project.get_focused_module.return_value = root_module
    project.get_module.return_value = None
    project.get_modules.return_value = [root_module]
    return project

@pytest.fixture(scope="function")
def mock_type_location():
    """Returns a mock Type Location service with no application modules."""
    type_location = MagicMock(spec=ITypeLocationService)
    type_location.get_modules.return_value = set()
    type_location.get_module_names.return_value = set()
    type_location.has_module_feature.side_effect = (
        lambda module, feature: module is not None and module.has_feature(feature)
    )
    return type_location

@pytest.fixture(scope="function")
def mock_installer():
    """Returns a mock Language Installer that reports success."""
    installer = MagicMock(spec=ILanguageInstaller)
    installer.is_install_language_command_available.return_value = True
    installer.install_language.return_value = InstallOutcome(
        status=InstallStatus.INSTALLED, lang_code="es", module_name="app"
    )
    return installer

@pytest.fixture
def topology(mock_project_operations, mock_type_location):
    """
    Configures the mocks with a set of modules and a focused module.

    Usage:
        topology([make_module("web", APP), make_module("api", APP)], focused=None)
    """
    def configure(modules, focused=None):
        applications = {m for m in modules if m.has_feature(APP)}
        mock_type_location.get_modules.return_value = applications
        mock_type_location.get_module_names.return_value = {m.name for m in applications}
        mock_project_operations.get_focused_module.return_value = focused
        mock_project_operations.get_modules.return_value = list(modules)
        mock_project_operations.get_module.side_effect = (
            lambda name: next((m for m in modules if m.name == name), None)
        )
    return configure

@pytest.fixture
def service_registry(mock_project_operations, mock_type_location, mock_installer):
    return InMemoryServiceRegistry({
        CapabilityKind.PROJECT_OPERATIONS: mock_project_operations,
        CapabilityKind.TYPE_LOCATION: mock_type_location,
        CapabilityKind.LANGUAGE_INSTALLER: mock_installer,
    })

@pytest.fixture
def locator(service_registry):
    return ServiceLocator(registry=service_registry)

@pytest.fixture(scope="function")
def container(service_registry):
    """
    Sets up the Dependency Injection Container for testing.
    It overrides the service registry with one holding the mocks defined above.
    """
    container = Container()
    container.service_registry.override(service_registry)

    yield container

    # Clean up overrides after test
    container.reset_override()
    container.reset_singletons()

@pytest.fixture
def write_manifest(tmp_path):
    """Writes a project.json into tmp_path and returns its path."""
    def write(data, name="project.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return write

@pytest.fixture
def multi_module_manifest():
    """Two application modules (web, api) plus a model module, focus on the root."""
    return {
        "name": "petclinic",
        "focused_module": "",
        "modules": [
            {"name": "", "path": ".", "features": []},
            {"name": "model", "path": "model", "features": ["model"]},
            {"name": "web", "path": "web", "features": ["application", "web-mvc"], "languages": ["en"]},
            {"name": "api", "path": "api", "features": ["application", "web-mvc"], "languages": ["en"]},
        ],
    }

@pytest.fixture
def single_module_manifest():
    """One application module 'app' with web-mvc, focus on the root."""
    return {
        "name": "petclinic",
        "focused_module": "",
        "modules": [
            {"name": "", "path": ".", "features": []},
            {"name": "app", "path": "app", "features": ["application", "web-mvc"], "languages": ["en"]},
        ],
    }
