"""Mini README: Shared fixtures for the Spendbook test-suite.

Structure:
    * fixed_now - the timestamp every test ledger stamps on new expenses.
    * fixed_clock - deterministic timestamp source for ledgers.
    * ledger - empty ledger using the fixed clock.
    * scenario_ledger - ledger holding lunch, taxi and coffee expenses.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from spendbook.expenses import ExpenseLedger

FIXED_NOW = datetime(2024, 5, 17, 12, 30)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def fixed_clock(fixed_now: datetime):
    return lambda: fixed_now


@pytest.fixture
def ledger(fixed_clock) -> ExpenseLedger:
    return ExpenseLedger(clock=fixed_clock)


@pytest.fixture
def scenario_ledger(ledger: ExpenseLedger) -> ExpenseLedger:
    ledger.add(10.00, "food", "lunch")
    ledger.add(25.50, "transport", "taxi")
    ledger.add(5.00, "food", "coffee")
    return ledger
