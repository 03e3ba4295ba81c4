"""Mini README: Expense bookkeeping core.

This package groups the category set, the expense record, field validation,
the in-memory ledger and the aggregation helpers used for totals and reports.
Everything here is synchronous and free of I/O; rendering lives in
:mod:`spendbook.interface`.
"""

from .aggregation import (
    CategorySummary,
    Report,
    average,
    build_report,
    group_by_category,
    top_category,
    total,
    total_by_category,
)
from .categories import Category, category_labels
from .ledger import EDITABLE_FIELDS, ExpenseLedger
from .models import Expense
from .validation import validate, validated_fields

__all__ = [
    "Category",
    "CategorySummary",
    "EDITABLE_FIELDS",
    "Expense",
    "ExpenseLedger",
    "Report",
    "average",
    "build_report",
    "category_labels",
    "group_by_category",
    "top_category",
    "total",
    "total_by_category",
    "validate",
    "validated_fields",
]
