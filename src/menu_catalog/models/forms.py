"""Add-dish form model.

The form carries raw, unvalidated input exactly as a user typed it. The
catalog store performs no validation of its own, so callers run
``first_error`` before handing the parsed values to the store.
"""

import re
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from menu_catalog.models.menu_models import COURSES

NAME_REQUIRED = "Please enter a dish name"
DESCRIPTION_REQUIRED = "Please enter a description"
INVALID_PRICE = "Please enter a valid price"
INVALID_COURSE = "Please select a valid course"

# Optional sign, digits with an optional fraction, optional exponent
_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class AddDishForm(BaseModel):
    """Raw add-dish form input."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(default="", description="Dish name as typed")
    description: str = Field(default="", description="Description as typed")
    course: str = Field(default=COURSES[0], description="Selected course")
    price: str = Field(default="", description="Price as typed")
    image_url: str = Field(default="", description="Optional image URL as typed")

    @property
    def parsed_price(self) -> Decimal | None:
        """Parse the typed price from its leading number.

        Like a browser's ``parseFloat``, trailing text after the number is
        ignored, so ``"12abc"`` reads as 12 and ``"abc"`` is not a price.
        Infinite values are rejected.

        Returns:
            Decimal price if it is a finite number greater than zero, None otherwise
        """
        match = _LEADING_NUMBER.match(self.price)
        if match is None:
            return None

        value = Decimal(match.group(0).strip())
        if value <= 0:
            return None
        return value

    @property
    def image(self) -> str | None:
        """Stripped image URL, or None when the field was left blank."""
        return self.image_url.strip() or None

    def first_error(self) -> str | None:
        """Return the first validation failure in form order, or None if valid."""
        if not self.name.strip():
            return NAME_REQUIRED
        if not self.description.strip():
            return DESCRIPTION_REQUIRED
        if self.parsed_price is None:
            return INVALID_PRICE
        if self.course not in COURSES:
            return INVALID_COURSE
        return None
