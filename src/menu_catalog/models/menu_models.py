"""Menu data models.

These models represent dishes held by the catalog store and the statistics
derived from them. Both are immutable once built, so a snapshot handed to a
caller can never be changed behind the store's back.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

# Courses offered by the add-dish form. The model itself accepts any label.
COURSES: tuple[str, ...] = ("Breakfast", "Lunch", "Dinner")

# Filter selector meaning "every course".
ALL_COURSES = "All"

FILTER_OPTIONS: tuple[str, ...] = (ALL_COURSES, *COURSES)


class MenuItem(BaseModel):
    """A single dish on the menu."""

    # Seed data may use integer ids; they are stored as strings
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str = Field(..., description="Unique identifier assigned by the catalog store")
    name: str = Field(..., description="Dish name")
    description: str = Field(default="", description="Dish description")
    course: str = Field(..., description="Course label (e.g., 'Breakfast', 'Lunch')")
    price: Decimal = Field(..., description="Dish price in the base currency unit", ge=0)
    image: str | None = Field(None, description="Image URL, None when the dish has no image")


class CourseStat(BaseModel):
    """Per-course aggregate computed from a catalog snapshot."""

    model_config = ConfigDict(frozen=True)

    course: str = Field(..., description="Course label")
    count: int = Field(..., description="Number of dishes in the course", ge=0)
    average_price: Decimal = Field(..., description="Mean price of dishes in the course")
