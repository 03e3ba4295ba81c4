"""Mini README: Field checks applied before an expense enters the ledger.

Structure:
    * validate - raise the first failing check, amount then category then
      description.
    * validated_fields - same checks, returning the normalised values.

Both functions are pure. Strings such as ``"10"`` are not coerced: an amount
must already be a real number, and booleans do not count as numbers.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Tuple

from ..errors import InvalidAmount, InvalidDescription
from .categories import Category


def _check_amount(amount: object) -> float:
    if isinstance(amount, bool) or not isinstance(amount, Real):
        raise InvalidAmount(f"Amount must be a number; got {amount!r}")
    value = float(amount)
    if not math.isfinite(value):
        raise InvalidAmount(f"Amount must be finite; got {amount!r}")
    if value <= 0:
        raise InvalidAmount("Amount must be greater than 0")
    return value


def _check_description(description: object) -> str:
    if not isinstance(description, str):
        raise InvalidDescription(
            f"Description must be a string; got {type(description).__name__}"
        )
    return description


def validated_fields(
    amount: object, category: object, description: object
) -> Tuple[float, Category, str]:
    """Validate the candidate fields and return them normalised."""

    checked_amount = _check_amount(amount)
    checked_category = Category.from_str(category)
    checked_description = _check_description(description)
    return checked_amount, checked_category, checked_description


def validate(amount: object, category: object, description: object) -> None:
    """Raise a ``ValidationError`` subclass if the fields are unacceptable."""

    validated_fields(amount, category, description)
