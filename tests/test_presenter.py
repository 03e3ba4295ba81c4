"""Mini README: Tests for the plain-text presenter.

Structure:
    * currency formatting and single-record lines.
    * empty-state notices for listings and category views.
    * the monthly report layout.
    * outcome rendering that depends on the originating request.
"""

from __future__ import annotations

from datetime import datetime

from spendbook.commands import (
    AddRequest,
    Outcome,
    QueryKind,
    QueryRequest,
    RemoveRequest,
    execute,
)
from spendbook.errors import EmptyLedger, InvalidCategory
from spendbook.expenses import Category, ExpenseLedger, build_report
from spendbook.interface import (
    format_currency,
    render_category_view,
    render_error,
    render_expenses,
    render_outcome,
    render_report,
)


def test_format_currency() -> None:
    assert format_currency(10) == "$10.00"
    assert format_currency(25.5, "€") == "€25.50"


def test_render_expenses(scenario_ledger: ExpenseLedger) -> None:
    lines = render_expenses(scenario_ledger.all()).splitlines()

    assert lines[0] == "ID: 1 | $10.00 | food | lunch | 2024-05-17"
    assert len(lines) == 3
    assert render_expenses([]) == "No expenses found. Please add some."


def test_render_category_view(scenario_ledger: ExpenseLedger) -> None:
    food = render_category_view(Category.FOOD, scenario_ledger.filter_by_category("food"))
    empty = render_category_view(Category.OTHER, [])

    assert food.splitlines()[-1] == "Total for food: $15.00"
    assert empty == "No expenses found for category: other"


def test_render_report(scenario_ledger: ExpenseLedger) -> None:
    report = build_report(scenario_ledger.all(), now=datetime(2024, 5, 31))

    assert render_report(report).splitlines() == [
        "EXPENSE REPORT - May 2024",
        "=" * 32,
        "food: $15.00 (2 expenses)",
        "transport: $25.50 (1 expense)",
        "=" * 32,
        "TOTAL: $40.50 (3 expenses)",
        "AVERAGE: $13.50 per expense",
        "TOP CATEGORY: transport ($25.50)",
    ]


def test_render_errors_and_outcomes(ledger: ExpenseLedger) -> None:
    assert render_error(EmptyLedger()) == "No expenses found. Please add some."
    assert render_error(InvalidCategory("bad")).startswith("Category must be one of food, ")
    assert render_outcome(execute(ledger, AddRequest(2.0, "food", "tea"))) == (
        "Expense added successfully. ID: 1"
    )
    assert render_outcome(execute(ledger, QueryRequest(QueryKind.TOTAL))) == "Total: $2.00"
    assert render_outcome(Outcome(value=True)) == "Expense removed successfully!"


def test_render_outcome_for_category_queries(scenario_ledger: ExpenseLedger) -> None:
    """Category queries name the category and finish with its total."""

    food = render_outcome(execute(scenario_ledger, QueryRequest(QueryKind.BY_CATEGORY, "food")))
    other = render_outcome(execute(scenario_ledger, QueryRequest(QueryKind.BY_CATEGORY, "other")))
    food_total = render_outcome(execute(scenario_ledger, QueryRequest(QueryKind.TOTAL, "food")))

    assert food.splitlines() == [
        "ID: 1 | $10.00 | food | lunch | 2024-05-17",
        "ID: 3 | $5.00 | food | coffee | 2024-05-17",
        "Total for food: $15.00",
    ]
    assert other == "No expenses found for category: other"
    assert food_total == "Total for food: $15.00"


def test_render_outcome_for_removal_names_id(scenario_ledger: ExpenseLedger) -> None:
    removed = render_outcome(execute(scenario_ledger, RemoveRequest(2)))
    missing = render_outcome(execute(scenario_ledger, RemoveRequest(2)))

    assert removed == "Expense with ID 2 removed successfully!"
    assert missing == "Expense with ID 2 not found."
