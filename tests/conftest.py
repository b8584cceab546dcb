"""Shared pytest fixtures and configuration for all tests."""

import os

# Keep src/main.py from building the real application at import time
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402

from menu_catalog.models.menu_models import MenuItem  # noqa: E402
from menu_catalog.models.seed_data import INITIAL_DISHES  # noqa: E402
from menu_catalog.repositories.catalog_store import CatalogStore  # noqa: E402
from menu_catalog.services.menu_service import MenuService  # noqa: E402


@pytest.fixture
def seed_records() -> list[dict]:
    """Fixture providing the sample dishes as raw records."""
    return [dict(record) for record in INITIAL_DISHES]


@pytest.fixture
def seed_items(seed_records: list[dict]) -> list[MenuItem]:
    """Fixture providing the sample dishes: Breakfast@85, Lunch@75, Dinner@225."""
    return [MenuItem.model_validate(record) for record in seed_records]


@pytest.fixture
def seeded_store(seed_records: list[dict]) -> CatalogStore:
    """Fixture providing a store pre-populated with the sample dishes."""
    return CatalogStore(seed_items=seed_records)


@pytest.fixture
def empty_store() -> CatalogStore:
    """Fixture providing an empty store."""
    return CatalogStore()


@pytest.fixture
def menu_service(seeded_store: CatalogStore) -> MenuService:
    """Fixture providing a MenuService over the seeded store."""
    return MenuService(catalog_store=seeded_store)


@pytest.fixture
def valid_form() -> dict:
    """Fixture providing a valid add-dish form submission."""
    return {
        "name": "Soup",
        "description": "Tomato soup",
        "course": "Lunch",
        "price": "45",
        "image_url": "",
    }
