"""Mini README: Plain-text presenter for the expense tracker.

Structure:
    * format_currency - two-decimal amount with a configurable symbol.
    * render_expense / render_expenses - one line per record.
    * render_category_view - records of one category plus their total.
    * render_report - multi-line summary of a ``Report``.
    * render_error / render_outcome - human readable results of requests.

Functions return strings and never print, so the CLI decides where output
goes and tests can compare text directly.
"""

from __future__ import annotations

from typing import Iterable, List

from ..commands import Outcome, QueryKind, QueryRequest, RemoveRequest
from ..errors import ErrorKind, ExpenseError
from ..expenses import Category, Expense, Report, category_labels, total

RULE = "=" * 32
NO_EXPENSES = "No expenses found. Please add some."


def format_currency(amount: float, symbol: str = "$") -> str:
    """Render ``amount`` with two decimals, e.g. ``$10.00``."""

    return f"{symbol}{float(amount):.2f}"


def render_expense(expense: Expense, symbol: str = "$") -> str:
    return (
        f"ID: {expense.expense_id} | {format_currency(expense.amount, symbol)} | "
        f"{expense.category.value} | {expense.description} | "
        f"{expense.created_at.date().isoformat()}"
    )


def render_expenses(expenses: Iterable[Expense], symbol: str = "$") -> str:
    """Render records in the order given, or the empty-ledger notice."""

    lines = [render_expense(expense, symbol) for expense in expenses]
    return "\n".join(lines) if lines else NO_EXPENSES


def render_category_view(
    category: Category, expenses: Iterable[Expense], symbol: str = "$"
) -> str:
    records = list(expenses)
    if not records:
        return f"No expenses found for category: {category.value}"
    lines = [render_expense(expense, symbol) for expense in records]
    lines.append(f"Total for {category.value}: {format_currency(total(records), symbol)}")
    return "\n".join(lines)


def _plural(count: int) -> str:
    return "expense" if count == 1 else "expenses"


def render_report(report: Report, symbol: str = "$") -> str:
    """Render a report in the classic monthly summary layout."""

    lines: List[str] = [f"EXPENSE REPORT - {report.period_label}", RULE]
    for category, summary in report.categories.items():
        lines.append(
            f"{category.value}: {format_currency(summary.total, symbol)} "
            f"({summary.count} {_plural(summary.count)})"
        )
    lines.append(RULE)
    lines.append(
        f"TOTAL: {format_currency(report.total, symbol)} ({report.count} {_plural(report.count)})"
    )
    lines.append(f"AVERAGE: {format_currency(report.average, symbol)} per expense")
    if report.top_category is not None:
        top_label, top_total = report.top_category
        lines.append(f"TOP CATEGORY: {top_label.value} ({format_currency(top_total, symbol)})")
    return "\n".join(lines)


def render_error(error: ExpenseError) -> str:
    """Translate a typed error into the message shown to the user."""

    if error.kind is ErrorKind.INVALID_CATEGORY:
        return f"Category must be one of {', '.join(category_labels())}"
    if error.kind is ErrorKind.EMPTY_LEDGER:
        return NO_EXPENSES
    return str(error)


def render_outcome(outcome: Outcome, symbol: str = "$") -> str:
    """Render whatever value an executed request produced.

    Category queries and removals use the request carried on the outcome so
    the text can name the category or the removed id.
    """

    if outcome.error is not None:
        return render_error(outcome.error)
    value = outcome.value
    request = outcome.request
    if isinstance(request, QueryRequest) and request.category:
        category = Category.from_str(request.category)
        kind = QueryKind(request.kind)
        if kind is QueryKind.BY_CATEGORY:
            return render_category_view(category, value, symbol)
        if kind is QueryKind.TOTAL:
            return f"Total for {category.value}: {format_currency(value, symbol)}"
    if isinstance(request, RemoveRequest):
        return f"Expense with ID {request.expense_id} removed successfully!"
    if isinstance(value, Report):
        return render_report(value, symbol)
    if isinstance(value, Expense):
        return render_expense(value, symbol)
    if isinstance(value, list):
        return render_expenses(value, symbol)
    if isinstance(value, bool):
        return "Expense removed successfully!"
    if isinstance(value, int):
        return f"Expense added successfully. ID: {value}"
    if isinstance(value, float):
        return f"Total: {format_currency(value, symbol)}"
    return str(value)
