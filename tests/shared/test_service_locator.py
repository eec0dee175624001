# tests/shared/test_service_locator.py
import threading
import time
from unittest.mock import MagicMock

import pytest
from structlog.testing import capture_logs

from web_i18n.core.domain.exceptions import ServiceRegistryError
from web_i18n.core.ports.service_registry import IServiceRegistry
from web_i18n.shared.service_locator import (
    CapabilityKind,
    ResolutionState,
    ServiceLocator,
    kind_key,
)

INSTALLER = CapabilityKind.LANGUAGE_INSTALLER


@pytest.fixture
def registry():
    registry = MagicMock(spec=IServiceRegistry)
    registry.lookup.return_value = []
    return registry


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


class TestResolve:

    def test_first_handle_is_cached(self, registry):
        first, second = object(), object()
        registry.lookup.return_value = [first, second]
        locator = ServiceLocator(registry)

        assert locator.resolve(INSTALLER) is first
        assert locator.resolve(INSTALLER) is first

        registry.lookup.assert_called_once_with("language_installer")
        assert locator.state_of(INSTALLER) is ResolutionState.RESOLVED

    def test_kinds_are_cached_independently(self, registry):
        registry.lookup.side_effect = lambda kind: [f"impl-{kind}"]
        locator = ServiceLocator(registry)

        assert locator.get_language_installer() == "impl-language_installer"
        assert locator.get_project_operations() == "impl-project_operations"
        assert locator.get_type_location_service() == "impl-type_location"
        assert registry.lookup.call_count == 3

    def test_string_and_enum_kinds_share_a_slot(self, registry):
        registry.lookup.return_value = ["installer"]
        locator = ServiceLocator(registry)

        locator.resolve("language_installer")
        locator.resolve(INSTALLER)

        assert registry.lookup.call_count == 1

    def test_nothing_registered_is_unavailable(self, registry):
        locator = ServiceLocator(registry)

        with capture_logs() as logs:
            assert locator.resolve(INSTALLER) is None

        assert locator.state_of(INSTALLER) is ResolutionState.FAILED
        assert any(e["event"] == "service_not_registered" and e["log_level"] == "warning" for e in logs)

    def test_registry_error_is_logged_not_raised(self, registry):
        registry.lookup.side_effect = ServiceRegistryError("language_installer", "bad filter")
        locator = ServiceLocator(registry)

        with capture_logs() as logs:
            assert locator.resolve(INSTALLER) is None

        assert any(e["event"] == "service_lookup_failed" for e in logs)

    def test_unexpected_registry_crash_is_contained(self, registry):
        registry.lookup.side_effect = RuntimeError("registry offline")
        locator = ServiceLocator(registry)

        assert locator.resolve(INSTALLER) is None

    def test_failure_is_retried_on_next_call(self, registry):
        """
        Scenario: the registry fails once and then recovers.
        Expected: the second call resolves; unavailability is not cached.
        """
        installer = object()
        registry.lookup.side_effect = [ServiceRegistryError("language_installer", "down"), [installer]]
        locator = ServiceLocator(registry)

        assert locator.resolve(INSTALLER) is None
        assert locator.resolve(INSTALLER) is installer
        assert locator.resolve(INSTALLER) is installer
        assert registry.lookup.call_count == 2

    def test_reset_forgets_handles(self, registry):
        registry.lookup.return_value = ["installer"]
        locator = ServiceLocator(registry)
        locator.resolve(INSTALLER)

        locator.reset()

        assert locator.state_of(INSTALLER) is ResolutionState.UNRESOLVED
        locator.resolve(INSTALLER)
        assert registry.lookup.call_count == 2


class TestFailureWindow:

    def test_failure_remembered_within_window(self, registry):
        clock = FakeClock()
        locator = ServiceLocator(registry, failure_ttl=5.0, clock=clock)

        assert locator.resolve(INSTALLER) is None
        registry.lookup.return_value = ["installer"]

        clock.now += 4.0
        assert locator.resolve(INSTALLER) is None
        assert registry.lookup.call_count == 1

        clock.now += 2.0
        assert locator.resolve(INSTALLER) == "installer"
        assert registry.lookup.call_count == 2

    def test_zero_window_always_retries(self, registry):
        locator = ServiceLocator(registry, failure_ttl=0)

        locator.resolve(INSTALLER)
        locator.resolve(INSTALLER)

        assert registry.lookup.call_count == 2


class TestConcurrency:

    def test_concurrent_first_resolution_queries_once(self, registry):
        calls = []

        def slow_lookup(kind):
            calls.append(kind)
            time.sleep(0.05)
            return [object()]

        registry.lookup.side_effect = slow_lookup
        locator = ServiceLocator(registry)
        barrier = threading.Barrier(8)
        results = []

        def worker():
            barrier.wait()
            results.append(locator.resolve(INSTALLER))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert len(results) == 8
        assert all(r is results[0] for r in results)


def test_kind_key():
    assert kind_key(CapabilityKind.TYPE_LOCATION) == "type_location"
    assert kind_key("custom") == "custom"
