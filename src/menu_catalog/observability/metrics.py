"""Custom metrics for the menu catalog."""

from opentelemetry import metrics

from menu_catalog.observability.config import SERVICE_NAME

meter = metrics.get_meter(SERVICE_NAME)

dishes_created_counter = meter.create_counter(
    name="menu_dishes_created_total",
    description="Total number of dishes added to the menu by course",
    unit="1",
)

dishes_deleted_counter = meter.create_counter(
    name="menu_dishes_deleted_total",
    description="Total number of dishes removed from the menu",
    unit="1",
)

validation_failure_counter = meter.create_counter(
    name="menu_dish_validation_failures_total",
    description="Total number of rejected add-dish submissions by reason",
    unit="1",
)

# Current number of dishes in the catalog
catalog_size = meter.create_up_down_counter(
    name="menu_catalog_size",
    description="Current number of dishes in the catalog",
    unit="1",
)


def record_dish_created(course: str) -> None:
    """Record a dish being added.

    Args:
        course: Course the dish was added to
    """
    dishes_created_counter.add(1, {"course": course})
    catalog_size.add(1)


def record_dish_deleted() -> None:
    """Record a dish being removed."""
    dishes_deleted_counter.add(1)
    catalog_size.add(-1)


def record_validation_failure(reason: str) -> None:
    """Record a rejected add-dish submission.

    Args:
        reason: Validation message shown to the user
    """
    validation_failure_counter.add(1, {"reason": reason})


def record_catalog_seeded(item_count: int) -> None:
    """Record the initial catalog size.

    Args:
        item_count: Number of dishes the catalog started with
    """
    catalog_size.add(item_count)
