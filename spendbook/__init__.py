"""Mini README: Core package initializer for the Spendbook expense tracker.

The package records spending events in an in-memory ledger and derives
totals, per-category summaries and reports from it. The heavy lifting lives
in :mod:`spendbook.expenses`; this module only re-exports the logging helper
so scripts can obtain configured loggers without knowing the layout.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
