"""A restaurant with a waitlist, breakfasts and appetizers."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum

_waitlist_positions = itertools.count(1)


def add_to_waitlist() -> int:
    """Add a party to the waitlist and return its position."""
    return next(_waitlist_positions)


@dataclass
class Breakfast:
    """A breakfast: the toast is the guest's choice, the fruit is the kitchen's."""

    toast: str
    _seasonal_fruit: str = field(default="peaches", repr=False)

    @property
    def seasonal_fruit(self) -> str:
        """The fruit chosen by the kitchen."""
        return self._seasonal_fruit

    @classmethod
    def summer(cls, toast: str) -> Breakfast:
        """A summer breakfast with the given toast and peaches."""
        return cls(toast=toast, _seasonal_fruit="peaches")


class Appetizer(Enum):
    """The appetizers on the menu."""

    SOUP = "soup"
    SALAD = "salad"


def eat_at_restaurant() -> Breakfast:
    """Join the waitlist, order a summer breakfast with wheat toast, and return it."""
    add_to_waitlist()
    add_to_waitlist()

    meal = Breakfast.summer("rye")
    meal.toast = "wheat"
    print(f"I'd like {meal.toast} toast")
    return meal