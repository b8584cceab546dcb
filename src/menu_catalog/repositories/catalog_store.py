"""In-memory catalog store for menu dishes.

The store owns the authoritative, insertion-ordered collection of dishes.
Following the repository convention used across the service, expected
failures are reported with simple return values (None/False) rather than
raised exceptions.
"""

import itertools
import logging
import threading
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from menu_catalog.models.menu_models import MenuItem

logger = logging.getLogger(__name__)


class CatalogStore:
    """Ordered, uniquely keyed collection of menu items.

    Snapshots returned by ``list`` are tuples of frozen models, so they stay
    unchanged when the store is mutated afterwards.
    """

    def __init__(self, seed_items: Iterable[MenuItem | Mapping[str, Any]] | None = None) -> None:
        """Initialize the store, optionally pre-populated.

        Args:
            seed_items: MenuItem instances or MenuItem-shaped mappings, kept in the given order
        """
        self._lock = threading.Lock()
        self._items: dict[str, MenuItem] = {}
        # Every id this store has ever held or issued; ids are never reused.
        self._issued_ids: set[str] = set()
        self._counter = itertools.count(1)

        for record in seed_items or []:
            item = record if isinstance(record, MenuItem) else MenuItem.model_validate(record)
            if item.id in self._issued_ids:
                logger.warning(f"Skipping seed item with duplicate id {item.id}")
                continue
            self._items[item.id] = item
            self._issued_ids.add(item.id)

        logger.debug(f"Catalog store initialized with {len(self._items)} items")

    def __len__(self) -> int:
        return len(self._items)

    def create(
        self,
        name: str,
        description: str,
        course: str,
        price: Decimal | float | int | str,
        image: str | None = None,
    ) -> MenuItem:
        """Create a dish and append it to the end of the catalog.

        Args:
            name: Dish name
            description: Dish description
            course: Course label
            price: Dish price
            image: Optional image URL

        Returns:
            MenuItem: The created item

        Raises:
            pydantic.ValidationError: If a field cannot form a MenuItem at all
                (e.g., a negative price). Form-level rules such as a non-empty
                name are not checked here.
        """
        with self._lock:
            item_id = self._next_id()
            item = MenuItem(
                id=item_id,
                name=name,
                description=description,
                course=course,
                price=price,
                image=image,
            )
            self._items[item_id] = item
            self._issued_ids.add(item_id)

        logger.info(f"Created menu item {item_id} in course {course}")
        return item

    def delete(self, item_id: str) -> bool:
        """Delete a dish by id.

        Args:
            item_id: Identifier of the dish to remove

        Returns:
            bool: True if an item was removed, False if no item had that id
        """
        with self._lock:
            removed = self._items.pop(item_id, None)

        if removed is None:
            logger.info(f"Menu item {item_id} not found, nothing deleted")
            return False

        logger.info(f"Deleted menu item {item_id}")
        return True

    def get(self, item_id: str) -> MenuItem | None:
        """Retrieve a dish by id.

        Args:
            item_id: Dish identifier

        Returns:
            MenuItem if found, None otherwise
        """
        with self._lock:
            return self._items.get(item_id)

    def list(self) -> tuple[MenuItem, ...]:
        """Return an immutable snapshot of the catalog in insertion order."""
        with self._lock:
            return tuple(self._items.values())

    def _next_id(self) -> str:
        # Caller holds the lock. Seeded ids may occupy counter values.
        while True:
            candidate = str(next(self._counter))
            if candidate not in self._issued_ids:
                return candidate
