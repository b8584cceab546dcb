"""Menu service coordinating the catalog store and the screens that use it."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import ValidationError

from menu_catalog.models.forms import AddDishForm
from menu_catalog.models.menu_models import ALL_COURSES, FILTER_OPTIONS, MenuItem
from menu_catalog.models.view_models import (
    CourseStatCard,
    DishCard,
    FilterOption,
    FilterView,
    HomeView,
)
from menu_catalog.observability import metrics, traced
from menu_catalog.repositories.catalog_store import CatalogStore
from menu_catalog.services import view_engine

logger = logging.getLogger(__name__)

DISH_ADDED_MESSAGE = "Dish added to menu!"
HOME_EMPTY_MESSAGE = "No dishes added yet"
FILTER_EMPTY_ALL_MESSAGE = "No menu items have been added yet"

_CENTS = Decimal("0.01")


@dataclass
class AddDishResult:
    """Result of an add-dish submission.

    Attributes:
        success: Whether the dish was added
        item: The created item, None if the form was rejected
        error_message: First validation failure, None on success
        message: Confirmation text shown after a successful add
    """

    success: bool
    item: MenuItem | None = None
    error_message: str | None = None
    message: str | None = None


class MenuService:
    """Service backing the home, add-dish and filter screens.

    This service validates user input before it reaches the catalog store
    (the store itself accepts whatever it is given), forwards mutations to
    the store, and assembles read-only views from store snapshots.
    """

    def __init__(self, catalog_store: CatalogStore, currency_symbol: str = "R") -> None:
        """Initialize the MenuService.

        Args:
            catalog_store: Store holding the menu
            currency_symbol: Prefix used when formatting prices for display
        """
        self.catalog_store = catalog_store
        self.currency_symbol = currency_symbol

    @traced("menu.add_dish")
    def add_dish(self, form_data: AddDishForm | Mapping[str, Any]) -> AddDishResult:
        """Validate an add-dish form and create the dish.

        Args:
            form_data: Form model or raw mapping of form fields

        Returns:
            AddDishResult describing the outcome
        """
        try:
            form = (
                form_data
                if isinstance(form_data, AddDishForm)
                else AddDishForm.model_validate(form_data)
            )
        except ValidationError as e:
            logger.warning(f"Malformed add-dish form: {e}")
            metrics.record_validation_failure("malformed")
            return AddDishResult(success=False, error_message="Invalid form submission")

        error_message = form.first_error()
        if error_message is not None:
            logger.info(f"Add-dish form rejected: {error_message}")
            metrics.record_validation_failure(error_message)
            return AddDishResult(success=False, error_message=error_message)

        item = self.catalog_store.create(
            name=form.name,
            description=form.description,
            course=form.course,
            price=form.parsed_price,
            image=form.image,
        )
        metrics.record_dish_created(item.course)

        return AddDishResult(success=True, item=item, message=DISH_ADDED_MESSAGE)

    @traced("menu.delete_dish")
    def delete_dish(self, item_id: str) -> bool:
        """Delete a dish. Confirmation is the caller's concern.

        Args:
            item_id: The dish to delete

        Returns:
            True if a dish was removed, False if it was already gone
        """
        deleted = self.catalog_store.delete(item_id)
        if deleted:
            metrics.record_dish_deleted()
        return deleted

    def delete_prompt(self, item_id: str) -> str | None:
        """Confirmation text to show before deleting a dish.

        Args:
            item_id: The dish about to be deleted

        Returns:
            Prompt text, or None if the dish does not exist
        """
        item = self.catalog_store.get(item_id)
        if item is None:
            return None
        return f'Are you sure you want to delete "{item.name}"?'

    def get_dish(self, item_id: str) -> MenuItem | None:
        return self.catalog_store.get(item_id)

    def list_dishes(self) -> tuple[MenuItem, ...]:
        return self.catalog_store.list()

    def home_view(self) -> HomeView:
        """Build the home screen view from the current snapshot."""
        items = self.catalog_store.list()

        return HomeView(
            total_items=len(items),
            course_stats=[
                CourseStatCard(stat=stat, average_label=self.format_price(stat.average_price))
                for stat in view_engine.course_stats(items)
            ],
            items=self._dish_cards(items),
            empty_message=None if items else HOME_EMPTY_MESSAGE,
        )

    def filter_view(self, selected: str = ALL_COURSES) -> FilterView:
        """Build the filter screen view for a course selection.

        Args:
            selected: Course to show, or "All"

        Returns:
            FilterView with selector buttons, matching dishes and summary text
        """
        items = self.catalog_store.list()
        filtered = view_engine.filter_by_course(items, selected)

        options = [
            FilterOption(
                course=course,
                count=(
                    len(items)
                    if course == ALL_COURSES
                    else view_engine.count_in_course(items, course)
                ),
                selected=course == selected,
            )
            for course in FILTER_OPTIONS
        ]

        noun = "item" if len(filtered) == 1 else "items"
        summary = f"Showing {len(filtered)} {noun}"
        if selected != ALL_COURSES:
            summary += f" in {selected}"

        empty_message = None
        if not filtered:
            empty_message = (
                FILTER_EMPTY_ALL_MESSAGE
                if selected == ALL_COURSES
                else f"No dishes in {selected} course"
            )

        return FilterView(
            selected=selected,
            options=options,
            items=self._dish_cards(filtered),
            summary=summary,
            empty_message=empty_message,
        )

    def format_price(self, value: Decimal) -> str:
        """Format a price to two decimals with the currency prefix (e.g., 'R85.00')."""
        return f"{self.currency_symbol}{Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)}"

    def _dish_cards(self, items: Sequence[MenuItem]) -> list[DishCard]:
        return [
            DishCard(
                item=item,
                price_label=self.format_price(item.price),
                has_image=bool(item.image),
            )
            for item in items
        ]
