"""Mini README: Derived views over a snapshot of ledger records.

Structure:
    * CategorySummary - running total and count for one category.
    * Report - composite summary produced by ``build_report``.
    * total / total_by_category / group_by_category / average / top_category -
      pure helpers that accept any iterable of expenses.

Nothing is cached. Each helper materialises its input into a tuple first so
generators and ledger objects can be passed directly and are read once.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, Optional, Tuple

from ..errors import EmptyLedger
from ..logging_utils import get_logger
from .categories import Category
from .models import Expense

LOGGER = get_logger(__name__)

DEFAULT_PERIOD_FORMAT = "%B %Y"


@dataclass(slots=True)
class CategorySummary:
    """Total amount and number of expenses observed for a category."""

    total: float = 0.0
    count: int = 0


@dataclass(slots=True)
class Report:
    """Snapshot summary of spending at generation time."""

    period_label: str
    generated_at: datetime
    categories: Dict[Category, CategorySummary]
    total: float
    count: int
    average: float
    top_category: Optional[Tuple[Category, float]]

    def as_dict(self) -> Dict[str, object]:
        """Export the report with serialisable values."""

        top = None
        if self.top_category is not None:
            top = {"category": self.top_category[0].value, "total": self.top_category[1]}
        return {
            "period_label": self.period_label,
            "generated_at": self.generated_at.isoformat(),
            "categories": {
                category.value: {"total": summary.total, "count": summary.count}
                for category, summary in self.categories.items()
            },
            "total": self.total,
            "count": self.count,
            "average": self.average,
            "top_category": top,
        }


def total(records: Iterable[Expense]) -> float:
    """Sum of amounts; ``0.0`` when there are no records."""

    return sum((expense.amount for expense in records), 0.0)


def total_by_category(records: Iterable[Expense], category: object) -> float:
    """Sum of amounts for a single category; ``0.0`` when none match."""

    wanted = Category.from_str(category)
    return total(expense for expense in records if expense.category is wanted)


def group_by_category(records: Iterable[Expense]) -> Dict[Category, CategorySummary]:
    """Summarise observed categories in first-seen order."""

    groups: Dict[Category, CategorySummary] = {}
    for expense in records:
        summary = groups.setdefault(expense.category, CategorySummary())
        summary.total += expense.amount
        summary.count += 1
    return groups


def average(records: Iterable[Expense]) -> float:
    """Mean amount per expense; raises ``EmptyLedger`` without records."""

    snapshot = tuple(records)
    if not snapshot:
        raise EmptyLedger("Cannot average an empty set of expenses.")
    return total(snapshot) / len(snapshot)


def _top_of(groups: Dict[Category, CategorySummary]) -> Optional[Tuple[Category, float]]:
    best: Optional[Category] = None
    best_total = 0.0
    for category, summary in groups.items():
        if summary.total > best_total:
            best, best_total = category, summary.total
    if best is None:
        return None
    return best, best_total


def top_category(records: Iterable[Expense]) -> Optional[Tuple[Category, float]]:
    """Category with the largest total; earliest seen wins ties."""

    return _top_of(group_by_category(records))


def build_report(
    records: Iterable[Expense],
    *,
    now: Optional[datetime] = None,
    period_format: str = DEFAULT_PERIOD_FORMAT,
) -> Report:
    """Compose totals, average and top category into a ``Report``.

    The period label reflects the wall clock when the report is generated,
    not the dates of the expenses it covers.
    """

    snapshot = tuple(records)
    if not snapshot:
        raise EmptyLedger("No expenses to report.")
    generated_at = now or datetime.now()
    groups = group_by_category(snapshot)
    grand_total = total(snapshot)
    report = Report(
        period_label=generated_at.strftime(period_format),
        generated_at=generated_at,
        categories=groups,
        total=grand_total,
        count=len(snapshot),
        average=grand_total / len(snapshot),
        top_category=_top_of(groups),
    )
    LOGGER.debug(
        "Built report for %s: %s expenses across %s categories",
        report.period_label,
        report.count,
        len(groups),
    )
    return report
