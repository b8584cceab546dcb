"""Derived views over a catalog snapshot.

Every function here is a pure function of its arguments: no hidden state, no
side effects, and an empty collection always yields the zero result (empty
sequence, zero count, zero average) instead of an error.
"""

from collections.abc import Iterable
from decimal import Decimal

from menu_catalog.models.menu_models import ALL_COURSES, CourseStat, MenuItem


def unique_courses(items: Iterable[MenuItem]) -> tuple[str, ...]:
    """Distinct course names present in the items.

    Args:
        items: Catalog snapshot

    Returns:
        tuple: Each course exactly once, in discovery order
    """
    # dict preserves first-insertion order, giving a deterministic result
    return tuple(dict.fromkeys(item.course for item in items))


def count_in_course(items: Iterable[MenuItem], course: str) -> int:
    """Number of items whose course equals ``course``."""
    return sum(1 for item in items if item.course == course)


def average_price(items: Iterable[MenuItem], course: str) -> Decimal:
    """Mean price of the items in a course.

    Args:
        items: Catalog snapshot
        course: Course to average over

    Returns:
        Decimal: Arithmetic mean, or Decimal("0") when no item matches
    """
    total = Decimal("0")
    count = 0
    for item in items:
        if item.course == course:
            total += item.price
            count += 1

    if count == 0:
        return Decimal("0")
    return total / count


def course_stats(items: Iterable[MenuItem]) -> list[CourseStat]:
    """Count and average price for every course, in discovery order."""
    snapshot = list(items)
    return [
        CourseStat(
            course=course,
            count=count_in_course(snapshot, course),
            average_price=average_price(snapshot, course),
        )
        for course in unique_courses(snapshot)
    ]


def filter_by_course(items: Iterable[MenuItem], selector: str) -> list[MenuItem]:
    """Items belonging to the selected course.

    Args:
        items: Catalog snapshot
        selector: Course name, or ALL_COURSES to keep every item

    Returns:
        list: Matching items in their original relative order (possibly empty)
    """
    if selector == ALL_COURSES:
        return list(items)
    return [item for item in items if item.course == selector]
