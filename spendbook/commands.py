"""Mini README: Request objects and a single dispatcher for the ledger.

Structure:
    * AddRequest / RemoveRequest / EditRequest / QueryRequest - frozen request
      shapes accepted by ``execute``.
    * QueryKind - the read-only queries a ``QueryRequest`` can ask for.
    * Outcome - success value or the typed error that stopped the request,
      together with the request that produced it.
    * execute - route a request to the ledger or aggregation helpers.

Front ends build a request, call ``execute`` and branch on ``Outcome.ok`` or
``Outcome.error.kind``. Failures never escape ``execute`` as exceptions unless
the caller opts in through ``Outcome.unwrap``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .errors import ExpenseError
from .expenses import ExpenseLedger, build_report, total, total_by_category
from .expenses.aggregation import DEFAULT_PERIOD_FORMAT
from .logging_utils import get_logger

LOGGER = get_logger(__name__)


class QueryKind(str, Enum):
    """Enumerate the supported read-only queries."""

    ALL = "all"
    BY_CATEGORY = "by_category"
    TOTAL = "total"
    REPORT = "report"


@dataclass(frozen=True)
class AddRequest:
    amount: object
    category: object
    description: object = ""


@dataclass(frozen=True)
class RemoveRequest:
    expense_id: int


@dataclass(frozen=True)
class EditRequest:
    expense_id: int
    fields: Mapping[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class QueryRequest:
    """Read-only request; ``category`` narrows ``BY_CATEGORY`` and ``TOTAL``."""

    kind: QueryKind
    category: Optional[str] = None


Request = Union[AddRequest, RemoveRequest, EditRequest, QueryRequest]


@dataclass(frozen=True)
class Outcome:
    """Result of executing a request, kept alongside the request itself."""

    value: Any = None
    error: Optional[ExpenseError] = None
    request: Optional[Request] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, re-raising the captured error on failure."""

        if self.error is not None:
            raise self.error
        return self.value


def _query(
    ledger: ExpenseLedger,
    request: QueryRequest,
    now: Optional[datetime],
    period_format: str,
) -> Any:
    kind = QueryKind(request.kind)
    if kind is QueryKind.ALL:
        return ledger.all()
    if kind is QueryKind.BY_CATEGORY:
        return ledger.filter_by_category(request.category)
    if kind is QueryKind.TOTAL:
        if request.category:
            return total_by_category(ledger.all(), request.category)
        return total(ledger.all())
    return build_report(ledger.all(), now=now, period_format=period_format)


_HANDLERS: Dict[type, Callable[..., Any]] = {
    AddRequest: lambda ledger, request: ledger.add(
        request.amount, request.category, request.description
    ),
    RemoveRequest: lambda ledger, request: ledger.remove(request.expense_id),
    EditRequest: lambda ledger, request: ledger.edit(request.expense_id, request.fields),
}


def execute(
    ledger: ExpenseLedger,
    request: Request,
    *,
    now: Optional[datetime] = None,
    period_format: str = DEFAULT_PERIOD_FORMAT,
) -> Outcome:
    """Run ``request`` against ``ledger`` and capture the result."""

    try:
        if isinstance(request, QueryRequest):
            value = _query(ledger, request, now, period_format)
        else:
            handler = _HANDLERS.get(type(request))
            if handler is None:
                raise TypeError(f"Unsupported request type: {type(request).__name__}")
            value = handler(ledger, request)
    except ExpenseError as error:
        LOGGER.debug("%s failed with %s", type(request).__name__, error.kind.value)
        return Outcome(error=error, request=request)
    return Outcome(value=value, request=request)
