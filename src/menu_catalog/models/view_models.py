"""View models assembled for the home and filter screens.

These carry catalog data together with the display strings the screens
render, so presentation code never has to re-derive them.
"""

from pydantic import BaseModel, Field

from menu_catalog.models.menu_models import CourseStat, MenuItem


class DishCard(BaseModel):
    """A dish as shown in a menu list."""

    item: MenuItem
    price_label: str = Field(..., description="Price formatted to two decimals")
    has_image: bool = Field(..., description="Whether an image should be rendered")


class CourseStatCard(BaseModel):
    """A course statistic as shown on the home screen."""

    stat: CourseStat
    average_label: str = Field(..., description="Average price formatted to two decimals")


class HomeView(BaseModel):
    """Everything the home screen renders."""

    total_items: int = Field(..., ge=0)
    course_stats: list[CourseStatCard] = Field(default_factory=list)
    items: list[DishCard] = Field(default_factory=list)
    empty_message: str | None = Field(None, description="Shown instead of the list when empty")


class FilterOption(BaseModel):
    """A course selector button on the filter screen."""

    course: str
    count: int = Field(..., ge=0)
    selected: bool = False


class FilterView(BaseModel):
    """Everything the filter screen renders for one selection."""

    selected: str
    options: list[FilterOption] = Field(default_factory=list)
    items: list[DishCard] = Field(default_factory=list)
    summary: str
    empty_message: str | None = Field(None, description="Shown instead of the list when empty")
