"""High-level orchestration for the spending report."""

from __future__ import annotations

import sys
from contextlib import closing

from .aggregation import SpendingTotals, aggregate_rows
from .csv_reader import read_rows
from .dataset import (
    CATEGORY_REPORT_HEADING,
    REPORT_RULE,
    STATE_REPORT_HEADING,
    TOP_STATES_LIMIT,
)
from .ranking import descending_text, top_entries_text


def load_totals(path: str) -> SpendingTotals:
    """Read the CSV once and accumulate state and category totals."""
    with closing(read_rows(path)) as rows:
        totals = aggregate_rows(rows)
    print(f"[OK] Loaded: {path}  rows={totals.rows}", file=sys.stderr)
    return totals


def render_section(heading: str, body: str) -> str:
    """Heading, dashed rule, body lines, then one blank line."""
    return f"{heading}\n{REPORT_RULE}\n{body}\n"


def build_report(totals: SpendingTotals) -> str:
    """Both report sections: top states first, then every category."""
    states = render_section(STATE_REPORT_HEADING, top_entries_text(totals.state_totals, TOP_STATES_LIMIT))
    categories = render_section(CATEGORY_REPORT_HEADING, descending_text(totals.category_totals))
    return states + categories


def run_pipeline(path: str) -> str:
    """
    Complete report pipeline (entry point).

    Nothing is printed to stdout until the whole file has been read, so an
    I/O failure leaves no partial report.

    Returns:
        The report text that was printed
    """
    totals = load_totals(path)
    print(
        f"[INFO] states={len(totals.state_totals)} categories={len(totals.category_totals)}",
        file=sys.stderr,
    )
    report = build_report(totals)
    sys.stdout.write(report)
    return report


__all__ = [
    "load_totals",
    "build_report",
    "run_pipeline",
]
