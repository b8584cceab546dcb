"""Unit tests for logging and tracing helpers."""

import json
import logging
from unittest.mock import MagicMock, patch

import pytest
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.trace import StatusCode
from pythonjsonlogger import jsonlogger

from menu_catalog.observability import ObservabilitySettings, configure_logging, traced
from menu_catalog.observability.config import build_providers, setup_observability
from menu_catalog.services.menu_service import AddDishResult


@pytest.mark.unit
class TestTracedDecorator:
    """Test suite for the traced decorator."""

    @pytest.fixture
    def mock_span(self) -> MagicMock:
        """Patch the tracer so spans can be inspected."""
        span = MagicMock()
        tracer = MagicMock()
        tracer.start_as_current_span.return_value.__enter__.return_value = span
        with patch("menu_catalog.observability.decorators.trace.get_tracer", return_value=tracer):
            yield span

    def test_boolean_outcome(self, mock_span: MagicMock) -> None:
        """Test that a False return is recorded as an outcome, not an error."""

        @traced("menu.delete_dish")
        def delete_dish(item_id: str) -> bool:
            return False

        assert delete_dish("missing") is False
        mock_span.set_attribute.assert_any_call("menu.outcome", False)
        mock_span.set_status.assert_not_called()

    def test_rejected_result_outcome(self, mock_span: MagicMock) -> None:
        """Test that a rejected result records its message."""

        @traced()
        def add_dish() -> AddDishResult:
            return AddDishResult(success=False, error_message="Please enter a dish name")

        add_dish()

        mock_span.set_attribute.assert_any_call("menu.outcome", False)
        mock_span.set_attribute.assert_any_call("menu.rejection", "Please enter a dish name")

    def test_records_and_reraises_exceptions(self, mock_span: MagicMock) -> None:
        """Test that errors are recorded on the span and propagate."""

        @traced()
        def boom() -> None:
            raise RuntimeError("kaboom")

        with pytest.raises(RuntimeError):
            boom()

        mock_span.record_exception.assert_called_once()
        status = mock_span.set_status.call_args.args[0]
        assert status.status_code == StatusCode.ERROR
        assert status.description == "RuntimeError: kaboom"

    def test_default_span_name_and_metadata(self) -> None:
        """Test the qualified-name default and functools.wraps metadata."""
        tracer = MagicMock()

        @traced()
        def named() -> None:
            """Docstring."""

        with patch("menu_catalog.observability.decorators.trace.get_tracer", return_value=tracer):
            named()

        assert tracer.start_as_current_span.call_args.args[0] == named.__qualname__
        assert named.__name__ == "named"
        assert named.__doc__ == "Docstring."


@pytest.mark.unit
class TestProviders:
    """Test suite for telemetry provider setup."""

    def test_test_environment_has_no_exporters(self) -> None:
        """Test that nothing ships off-process in tests."""
        settings = ObservabilitySettings(service_name="menu-test", environment="test")

        with patch("menu_catalog.observability.config.OTLPSpanExporter") as mock_span_exporter, patch(
            "menu_catalog.observability.config.OTLPMetricExporter"
        ) as mock_metric_exporter:
            tracer_provider, _ = build_providers(settings)

        assert settings.exporters_enabled is False
        assert tracer_provider.resource.attributes["service.name"] == "menu-test"
        mock_span_exporter.assert_not_called()
        mock_metric_exporter.assert_not_called()

    def test_exporters_use_configured_endpoint(self) -> None:
        """Test that exporting providers target the collector."""
        settings = ObservabilitySettings(otlp_endpoint="http://collector:4318/")

        with patch("menu_catalog.observability.config.OTLPSpanExporter") as mock_span_exporter, patch(
            "menu_catalog.observability.config.OTLPMetricExporter"
        ) as mock_metric_exporter, patch(
            "menu_catalog.observability.config.PeriodicExportingMetricReader"
        ), patch("menu_catalog.observability.config.BatchSpanProcessor", spec=BatchSpanProcessor):
            build_providers(settings)

        mock_span_exporter.assert_called_once_with(endpoint="http://collector:4318/v1/traces")
        mock_metric_exporter.assert_called_once_with(endpoint="http://collector:4318/v1/metrics")

    def test_setup_installs_providers_once(self) -> None:
        """Test that a second setup reuses the installed providers."""
        settings = ObservabilitySettings(environment="test")

        with (
            patch("menu_catalog.observability.config._installed_resource", None),
            patch("menu_catalog.observability.config.trace.set_tracer_provider") as mock_tracer,
            patch("menu_catalog.observability.config.metrics.set_meter_provider"),
        ):
            assert setup_observability(settings=settings) is True
            assert setup_observability(settings=settings) is False

        mock_tracer.assert_called_once()


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        """Put the root logger back the way it was."""
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_installs_single_json_handler(self) -> None:
        """Test one JSON-formatted handler at the requested level, even when called twice."""
        configure_logging("WARNING")
        configure_logging("warning")

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)

    def test_records_carry_service_name(self) -> None:
        """Test that each JSON line is tagged with the service."""
        configure_logging("INFO", service_name="menu-test")
        formatter = logging.getLogger().handlers[0].formatter
        record = logging.LogRecord("menu", logging.INFO, __file__, 1, "hello", None, None)

        payload = json.loads(formatter.format(record))

        assert payload["service"] == "menu-test"
        assert payload["message"] == "hello"

    def test_unknown_level_falls_back_to_info(self) -> None:
        """Test that a misspelled level does not break logging."""
        configure_logging("LOUD")

        assert logging.getLogger().level == logging.INFO
