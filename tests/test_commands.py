"""Mini README: Tests for the request dispatcher.

Structure:
    * successful requests return their payload in ``Outcome.value``.
    * failures are captured with their ``ErrorKind`` and leave the ledger as is.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from spendbook.commands import (
    AddRequest,
    EditRequest,
    QueryKind,
    QueryRequest,
    RemoveRequest,
    execute,
)
from spendbook.errors import ErrorKind, NotFound
from spendbook.expenses import ExpenseLedger, Report


def test_add_and_query_all(ledger: ExpenseLedger) -> None:
    outcome = execute(ledger, AddRequest(4.5, "food", "bagel"))

    assert outcome.ok
    assert outcome.value == 1
    listing = execute(ledger, QueryRequest(QueryKind.ALL))
    assert [expense.description for expense in listing.value] == ["bagel"]


def test_failed_add_is_captured(ledger: ExpenseLedger) -> None:
    outcome = execute(ledger, AddRequest(-2, "food", "refund"))

    assert not outcome.ok
    assert outcome.error.kind is ErrorKind.INVALID_AMOUNT
    assert len(ledger) == 0


def test_remove_and_edit_not_found(scenario_ledger: ExpenseLedger) -> None:
    removed = execute(scenario_ledger, RemoveRequest(3))
    again = execute(scenario_ledger, RemoveRequest(3))
    edited = execute(scenario_ledger, EditRequest(3, {"amount": 1.0}))

    assert removed.value is True
    assert again.error.kind is ErrorKind.NOT_FOUND
    assert edited.error.kind is ErrorKind.NOT_FOUND
    with pytest.raises(NotFound):
        again.unwrap()


def test_edit_returns_updated_record(scenario_ledger: ExpenseLedger) -> None:
    outcome = execute(scenario_ledger, EditRequest(2, {"description": "bus"}))

    assert outcome.unwrap().description == "bus"


def test_total_queries(scenario_ledger: ExpenseLedger) -> None:
    overall = execute(scenario_ledger, QueryRequest(QueryKind.TOTAL))
    food = execute(scenario_ledger, QueryRequest(QueryKind.TOTAL, "food"))
    unknown = execute(scenario_ledger, QueryRequest(QueryKind.BY_CATEGORY, "rent"))

    assert overall.value == pytest.approx(40.50)
    assert food.value == pytest.approx(15.0)
    assert unknown.error.kind is ErrorKind.INVALID_CATEGORY


def test_by_category_without_matches_is_success(scenario_ledger: ExpenseLedger) -> None:
    outcome = execute(scenario_ledger, QueryRequest(QueryKind.BY_CATEGORY, "healthcare"))

    assert outcome.ok
    assert outcome.value == []


def test_report_query(scenario_ledger: ExpenseLedger) -> None:
    outcome = execute(
        scenario_ledger, QueryRequest(QueryKind.REPORT), now=datetime(2024, 7, 1)
    )
    empty = execute(ExpenseLedger(), QueryRequest(QueryKind.REPORT))

    assert isinstance(outcome.value, Report)
    assert outcome.value.period_label == "July 2024"
    assert empty.error.kind is ErrorKind.EMPTY_LEDGER


def test_outcome_keeps_its_request(ledger: ExpenseLedger) -> None:
    request = QueryRequest(QueryKind.BY_CATEGORY, "food")

    assert execute(ledger, request).request is request
    assert execute(ledger, RemoveRequest(1)).request == RemoveRequest(1)
