"""Mini README: Expense record stored by the ledger.

Structure:
    * Expense - frozen dataclass; the ledger swaps in a new instance when an
      expense is edited, so records handed to callers never change underneath
      them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict

from .categories import Category


@dataclass(frozen=True, slots=True)
class Expense:
    """A single admitted spending event."""

    expense_id: int
    amount: float
    category: Category
    description: str
    created_at: datetime

    def as_dict(self) -> Dict[str, object]:
        """Export the expense with serialisable values."""

        return {
            "id": self.expense_id,
            "amount": self.amount,
            "category": self.category.value,
            "description": self.description,
            "created_at": self.created_at.isoformat(),
        }
