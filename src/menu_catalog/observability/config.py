"""Logging and OpenTelemetry setup for the menu catalog.

Settings are resolved once by the application factory and passed in, so the
helpers here never read the environment themselves. Telemetry providers are
process-global in OpenTelemetry, so they are installed at most once per
process however many applications get built (tests build many).
"""

import logging
from dataclasses import dataclass
from typing import Any

from opentelemetry import metrics, trace
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import MetricReader, PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from pythonjsonlogger import jsonlogger

logger = logging.getLogger(__name__)

SERVICE_NAME = "menu-catalog"

# Resource of the providers installed by this process, None until installed
_installed_resource: Resource | None = None


@dataclass(frozen=True)
class ObservabilitySettings:
    """Telemetry settings for one process.

    Attributes:
        service_name: Reported as ``service.name`` on spans, metrics and logs
        environment: Deployment environment; "test" ships nothing off-process
        otlp_endpoint: Base URL of the OTLP/HTTP collector
        export_interval_millis: How often metrics are pushed to the collector
    """

    service_name: str = SERVICE_NAME
    environment: str = "development"
    otlp_endpoint: str = "http://localhost:4318"
    export_interval_millis: int = 60000

    @property
    def exporters_enabled(self) -> bool:
        return self.environment != "test"


def build_providers(settings: ObservabilitySettings) -> tuple[TracerProvider, MeterProvider]:
    """Build tracer and meter providers sharing one service resource.

    Without exporters the providers still record spans and measurements in
    process, which is what the test suite relies on.

    Args:
        settings: Telemetry settings

    Returns:
        tuple: The tracer provider and the meter provider
    """
    resource = Resource.create(
        {
            "service.name": settings.service_name,
            "deployment.environment": settings.environment,
        }
    )

    tracer_provider = TracerProvider(resource=resource)
    readers: list[MetricReader] = []

    if settings.exporters_enabled:
        endpoint = settings.otlp_endpoint.rstrip("/")
        tracer_provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{endpoint}/v1/traces"))
        )
        readers.append(
            PeriodicExportingMetricReader(
                OTLPMetricExporter(endpoint=f"{endpoint}/v1/metrics"),
                export_interval_millis=settings.export_interval_millis,
            )
        )

    return tracer_provider, MeterProvider(resource=resource, metric_readers=readers)


def setup_observability(app: Any = None, settings: ObservabilitySettings | None = None) -> bool:
    """Install telemetry providers once and instrument the app.

    Args:
        app: Optional FastAPI application to instrument
        settings: Telemetry settings (defaults apply when omitted)

    Returns:
        bool: True if providers were installed by this call, False if already present
    """
    global _installed_resource

    settings = settings or ObservabilitySettings()
    installed_now = False

    if _installed_resource is None:
        tracer_provider, meter_provider = build_providers(settings)
        trace.set_tracer_provider(tracer_provider)
        metrics.set_meter_provider(meter_provider)
        _installed_resource = tracer_provider.resource
        installed_now = True

        if settings.exporters_enabled:
            logger.info(f"Telemetry exporting to {settings.otlp_endpoint}")
        else:
            logger.info(f"Telemetry recorded in process only ({settings.environment})")
    else:
        logger.debug("Telemetry providers already installed, reusing them")

    if app is not None:
        FastAPIInstrumentor.instrument_app(app)
        logger.info("FastAPI application instrumented")

    return installed_now


def configure_logging(log_level: str = "INFO", service_name: str = SERVICE_NAME) -> None:
    """Send JSON log lines, tagged with the service name, to stderr.

    Replaces any handlers already on the root logger, so calling it again
    changes the level without duplicating output.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown names mean INFO
        service_name: Added to every record as the ``service`` field
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler()
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            timestamp=True,
            static_fields={"service": service_name},
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(level)

    logger.info(f"JSON logging at {logging.getLevelName(level)} level")
