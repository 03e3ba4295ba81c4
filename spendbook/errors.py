"""Mini README: Error taxonomy shared by the validator, ledger and aggregator.

Every failure is an ``ExpenseError`` tagged with an ``ErrorKind`` so callers
can branch on ``error.kind`` instead of parsing messages. The classes also
inherit from the closest builtin (``ValueError`` or ``LookupError``) so plain
``except ValueError`` handlers keep working.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Programmatic identifier attached to every expense error."""

    INVALID_AMOUNT = "invalid_amount"
    INVALID_CATEGORY = "invalid_category"
    INVALID_DESCRIPTION = "invalid_description"
    UNSUPPORTED_FIELD = "unsupported_field"
    NOT_FOUND = "not_found"
    EMPTY_LEDGER = "empty_ledger"


class ExpenseError(Exception):
    """Base class for recoverable expense tracking failures."""

    kind: ErrorKind

    def __str__(self) -> str:
        return self.args[0] if self.args else self.kind.value


class ValidationError(ExpenseError, ValueError):
    """Raised when candidate expense fields are not acceptable."""


class InvalidAmount(ValidationError):
    """Amount is non-numeric, non-finite, or not strictly positive."""

    kind = ErrorKind.INVALID_AMOUNT


class InvalidCategory(ValidationError):
    """Category is not a member of the fixed category set."""

    kind = ErrorKind.INVALID_CATEGORY


class InvalidDescription(ValidationError):
    """Description is not text."""

    kind = ErrorKind.INVALID_DESCRIPTION


class UnsupportedField(ExpenseError, ValueError):
    """An edit tried to change a field that is not editable."""

    kind = ErrorKind.UNSUPPORTED_FIELD


class NotFound(ExpenseError, LookupError):
    """No expense with the requested identifier exists."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, expense_id: object) -> None:
        super().__init__(f"Expense with ID {expense_id} not found.")
        self.expense_id = expense_id


class EmptyLedger(ExpenseError, ValueError):
    """An aggregate that needs at least one record was given none."""

    kind = ErrorKind.EMPTY_LEDGER

    def __init__(self, message: str = "No expenses recorded.") -> None:
        super().__init__(message)


__all__ = [
    "EmptyLedger",
    "ErrorKind",
    "ExpenseError",
    "InvalidAmount",
    "InvalidCategory",
    "InvalidDescription",
    "NotFound",
    "UnsupportedField",
    "ValidationError",
]
