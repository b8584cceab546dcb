"""Main application entry point for the menu catalog service.

This module provides the FastAPI application factory and configuration
for running the service locally.
"""

import logging
import os

from fastapi import FastAPI

from menu_catalog.handlers.api_handler import create_app
from menu_catalog.models.seed_data import INITIAL_DISHES
from menu_catalog.observability import (
    ObservabilitySettings,
    configure_logging,
    setup_observability,
)
from menu_catalog.observability.config import SERVICE_NAME
from menu_catalog.observability.metrics import record_catalog_seeded
from menu_catalog.repositories.catalog_store import CatalogStore
from menu_catalog.services.menu_service import MenuService

logger = logging.getLogger(__name__)


def create_catalog_store() -> CatalogStore:
    """Create the catalog store, seeded with sample dishes unless disabled.

    Returns:
        CatalogStore owned by the application for its whole lifetime
    """
    if os.getenv("SEED_SAMPLE_DISHES", "true").lower() == "true":
        store = CatalogStore(seed_items=INITIAL_DISHES)
        logger.info(f"Catalog seeded with {len(store)} sample dishes")
    else:
        store = CatalogStore()
        logger.info("Catalog started empty")

    record_catalog_seeded(len(store))
    return store


def get_observability_settings() -> ObservabilitySettings:
    """Resolve telemetry settings from the environment.

    Returns:
        ObservabilitySettings for this process
    """
    return ObservabilitySettings(
        service_name=os.getenv("OTEL_SERVICE_NAME", SERVICE_NAME),
        environment=os.getenv("ENVIRONMENT", "development"),
        otlp_endpoint=os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4318"),
    )


def create_application() -> FastAPI:
    """Create and configure the FastAPI application with all dependencies.

    This factory function:
    1. Resolves telemetry settings and configures logging
    2. Creates the catalog store
    3. Creates the menu service
    4. Creates the FastAPI app
    5. Sets up observability

    Returns:
        Configured FastAPI application instance
    """
    settings = get_observability_settings()
    configure_logging(os.getenv("LOG_LEVEL", "INFO"), service_name=settings.service_name)

    logger.info("Initializing menu catalog service...")

    catalog_store = create_catalog_store()

    currency_symbol = os.getenv("CURRENCY_SYMBOL", "R")
    menu_service = MenuService(catalog_store=catalog_store, currency_symbol=currency_symbol)

    app = create_app(menu_service=menu_service)
    setup_observability(app, settings)

    logger.info("Menu catalog service initialized successfully")

    return app


# Create the FastAPI application instance (only when not in test mode)
# This prevents the app from being created during test collection
if os.getenv("ENVIRONMENT") != "test":  # noqa: SIM108
    app = create_application()
else:
    # Create a placeholder app for test imports
    app = FastAPI()


if __name__ == "__main__":
    """Run the application with uvicorn when executed directly."""
    import uvicorn

    port = int(os.getenv("PORT", "8001"))
    host = os.getenv("HOST", "0.0.0.0")

    logger.info(f"Starting development server on {host}:{port}")
    logger.info(f"API documentation available at http://{host}:{port}/docs")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
