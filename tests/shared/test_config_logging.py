# tests/shared/test_config_logging.py
import os

import structlog
from opentelemetry.sdk.trace import TracerProvider

from web_i18n.shared import telemetry
from web_i18n.shared.config import ServiceRegistryBackend, Settings
from web_i18n.shared.logging_config import add_open_telemetry_spans, configure_logging


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SERVICE_REGISTRY_BACKEND", raising=False)
        monkeypatch.delenv("SERVICE_LOOKUP_RETRY_SEC", raising=False)
        settings = Settings(_env_file=None)

        assert settings.PROJECT_MANIFEST == "project.json"
        assert settings.SERVICE_REGISTRY_BACKEND is ServiceRegistryBackend.STATIC
        assert settings.SERVICE_LOOKUP_RETRY_SEC == 0.0

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PROJECT_ROOT", str(tmp_path))
        monkeypatch.setenv("SERVICE_REGISTRY_BACKEND", "entry_points")
        monkeypatch.setenv("SERVICE_LOOKUP_RETRY_SEC", "1.5")

        settings = Settings(_env_file=None)

        assert settings.SERVICE_REGISTRY_BACKEND is ServiceRegistryBackend.ENTRY_POINTS
        assert settings.SERVICE_LOOKUP_RETRY_SEC == 1.5
        assert settings.MANIFEST_PATH == os.path.join(str(tmp_path), "project.json")


class TestLogging:

    def test_span_ids_are_empty_outside_a_trace(self):
        event = add_open_telemetry_spans(None, "info", {"event": "x"})

        assert event["trace_id"] is None
        assert event["span_id"] is None

    def test_span_ids_are_injected_inside_a_trace(self):
        tracer = TracerProvider().get_tracer(__name__)

        with tracer.start_as_current_span("use_case.install_language") as span:
            event = add_open_telemetry_spans(None, "info", {"event": "x"})
            expected = format(span.get_span_context().trace_id, "032x")

        assert event["trace_id"] == expected
        assert len(event["span_id"]) == 16

    def test_configure_logging_accepts_both_formats(self):
        try:
            for log_format in ("json", "console"):
                configure_logging(log_format=log_format, log_level="warning")
                assert structlog.is_configured()
        finally:
            structlog.reset_defaults()


class TestTelemetry:

    def test_disabled_without_endpoint(self, monkeypatch):
        monkeypatch.setattr(telemetry.settings, "OTEL_EXPORTER_OTLP_ENDPOINT", None)

        assert telemetry.setup_telemetry("web-i18n") is False

    def test_enabled_with_endpoint(self, monkeypatch):
        installed = []
        monkeypatch.setattr(telemetry.settings, "OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4318")
        monkeypatch.setattr(telemetry.settings, "DEBUG", True)
        monkeypatch.setattr(telemetry.trace, "set_tracer_provider", installed.append)

        assert telemetry.setup_telemetry("web-i18n-test") is True

        provider = installed[0]
        try:
            assert isinstance(provider, TracerProvider)
            assert provider.resource.attributes["service.name"] == "web-i18n-test"
        finally:
            provider.shutdown()
