"""OpenTelemetry instrumentation and observability utilities."""

from menu_catalog.observability.config import (
    ObservabilitySettings,
    configure_logging,
    setup_observability,
)
from menu_catalog.observability.decorators import traced

__all__ = ["ObservabilitySettings", "setup_observability", "configure_logging", "traced"]
