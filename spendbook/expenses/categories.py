"""Mini README: The fixed, closed set of spending categories."""

from __future__ import annotations

from enum import Enum
from typing import List

from ..errors import InvalidCategory


class Category(str, Enum):
    """Enumerate the supported expense categories."""

    FOOD = "food"
    TRANSPORT = "transport"
    ENTERTAINMENT = "entertainment"
    UTILITIES = "utilities"
    HEALTHCARE = "healthcare"
    SHOPPING = "shopping"
    OTHER = "other"

    @classmethod
    def from_str(cls, value: object) -> "Category":
        """Coerce arbitrary casing into a valid category."""

        if isinstance(value, cls):
            return value
        try:
            normalised = value.strip().lower()  # type: ignore[union-attr]
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise InvalidCategory(
                f"Category must be one of {', '.join(category_labels())}; got {value!r}"
            ) from error


def category_labels() -> List[str]:
    """Return category labels in declaration order."""

    return [category.value for category in Category]
