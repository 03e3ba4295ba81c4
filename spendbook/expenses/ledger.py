"""Mini README: In-memory expense ledger.

Structure:
    * EDITABLE_FIELDS - the fields ``ExpenseLedger.edit`` may override.
    * ExpenseLedger - owns the insertion-ordered records and the id counter.

The ledger is a plain object built by the caller; nothing here is a module
level singleton, so tests can run as many independent ledgers as they like.
Identifiers come from a counter that only moves forward, which means a
removed id is never handed out again. Rejected requests raise the typed
errors from :mod:`spendbook.errors` and leave the records untouched.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional

from ..errors import ExpenseError, NotFound, UnsupportedField
from ..logging_utils import get_logger
from .categories import Category
from .models import Expense
from .validation import validated_fields

LOGGER = get_logger(__name__)

EDITABLE_FIELDS = frozenset({"amount", "category", "description"})

Clock = Callable[[], datetime]


class ExpenseLedger:
    """Manage the ordered collection of admitted expenses."""

    def __init__(
        self,
        expenses: Optional[Iterable[Expense]] = None,
        *,
        clock: Optional[Clock] = None,
    ) -> None:
        self._expenses: Dict[int, Expense] = {}
        self._sequence = 0
        self._clock: Clock = clock or datetime.now
        for expense in expenses or ():
            self._register(expense)
        LOGGER.debug("Expense ledger initialised with %s expenses", len(self._expenses))

    def __len__(self) -> int:
        return len(self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(self.all())

    def __contains__(self, expense_id: object) -> bool:
        return self.find_by_id(expense_id) is not None

    def _next_id(self) -> int:
        self._sequence += 1
        return self._sequence

    def _register(self, expense: Expense) -> None:
        """Store a pre-built expense ensuring identifiers remain unique."""

        if isinstance(expense.expense_id, bool) or not isinstance(expense.expense_id, int):
            raise ValueError(f"Expense identifiers must be integers; got {expense.expense_id!r}")
        if expense.expense_id < 1:
            raise ValueError(f"Expense identifiers must be positive; got {expense.expense_id}")
        if expense.expense_id in self._expenses:
            raise ValueError(f"Expense {expense.expense_id} already exists.")
        amount, category, description = validated_fields(
            expense.amount, expense.category, expense.description
        )
        self._expenses[expense.expense_id] = replace(
            expense, amount=amount, category=category, description=description
        )
        self._sequence = max(self._sequence, expense.expense_id)

    def add(self, amount: object, category: object, description: object = "") -> int:
        """Validate and append a new expense, returning its identifier."""

        try:
            checked_amount, checked_category, checked_description = validated_fields(
                amount, category, description
            )
        except ExpenseError as error:
            LOGGER.warning("Rejected expense (%s): %s", error.kind.value, error)
            raise
        expense = Expense(
            expense_id=self._next_id(),
            amount=checked_amount,
            category=checked_category,
            description=checked_description,
            created_at=self._clock(),
        )
        self._expenses[expense.expense_id] = expense
        LOGGER.info(
            "Expense added successfully. ID: %s (%s %.2f)",
            expense.expense_id,
            expense.category.value,
            expense.amount,
        )
        return expense.expense_id

    def remove(self, expense_id: int) -> bool:
        """Delete an expense; remaining identifiers are left as they are."""

        expense = self.find_by_id(expense_id)
        if expense is None:
            LOGGER.warning("Cannot remove expense %s: not found", expense_id)
            raise NotFound(expense_id)
        del self._expenses[expense.expense_id]
        LOGGER.info("Expense with ID %s removed successfully", expense_id)
        return True

    def edit(self, expense_id: int, fields: Mapping[str, object]) -> Expense:
        """Replace an expense with a copy carrying the overrides, or change nothing."""

        expense = self.get(expense_id)
        unsupported = sorted(set(fields) - EDITABLE_FIELDS)
        if unsupported:
            LOGGER.warning("Rejected edit of expense %s: fields %s", expense_id, unsupported)
            raise UnsupportedField(
                f"Override of field(s) {', '.join(unsupported)} is not supported."
            )

        merged = {
            "amount": expense.amount,
            "category": expense.category,
            "description": expense.description,
        }
        merged.update(fields)
        try:
            amount, category, description = validated_fields(
                merged["amount"], merged["category"], merged["description"]
            )
        except ExpenseError as error:
            LOGGER.warning("Rejected edit of expense %s (%s): %s", expense_id, error.kind.value, error)
            raise

        updated = replace(expense, amount=amount, category=category, description=description)
        self._expenses[updated.expense_id] = updated
        LOGGER.info("Expense %s updated: %s", expense_id, ", ".join(sorted(fields)) or "no changes")
        return updated

    def find_by_id(self, expense_id: object) -> Optional[Expense]:
        """Return the expense with ``expense_id`` or ``None``."""

        if isinstance(expense_id, bool) or not isinstance(expense_id, int):
            return None
        return self._expenses.get(expense_id)

    def get(self, expense_id: int) -> Expense:
        """Retrieve an expense, raising ``NotFound`` when missing."""

        expense = self.find_by_id(expense_id)
        if expense is None:
            raise NotFound(expense_id)
        return expense

    def filter_by_category(self, category: object) -> List[Expense]:
        """Return the expenses of one category in insertion order."""

        wanted = Category.from_str(category)
        return [expense for expense in self._expenses.values() if expense.category is wanted]

    def all(self) -> List[Expense]:
        """Return every expense in insertion order."""

        return list(self._expenses.values())
