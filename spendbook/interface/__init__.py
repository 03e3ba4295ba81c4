"""Mini README: Text rendering for expenses, reports and errors.

The core package returns numbers, timestamps and typed errors; this package
turns them into the lines shown by the command line tool.
"""

from .presenter import (
    format_currency,
    render_category_view,
    render_error,
    render_expense,
    render_expenses,
    render_outcome,
    render_report,
)

__all__ = [
    "format_currency",
    "render_category_view",
    "render_error",
    "render_expense",
    "render_expenses",
    "render_outcome",
    "render_report",
]
