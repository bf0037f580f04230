"""Accumulate state and category spending totals from dataset rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from .dataset import (
    CATEGORY_COLUMN,
    GROUP_COLUMN,
    LAST_YEAR,
    STATE_COLUMN,
    STATE_GROUP,
    YEAR_COLUMNS,
    year_column,
)


@dataclass
class SpendingTotals:
    """Per-state totals over 2000-2009 and per-category totals for 2009."""

    state_totals: Dict[str, float] = field(default_factory=dict)
    category_totals: Dict[str, float] = field(default_factory=dict)
    rows: int = 0


def parse_amount(value: str) -> float:
    """
    Parse a spending field as a base-10 float.

    Surrounding whitespace, exponents and NaN/Infinity spellings are accepted.
    Digit-group underscores ("1_000") are not a valid amount.

    Raises:
        ValueError: If the field is not a number
    """
    if "_" in value:
        raise ValueError(f"could not convert string to float: {value!r}")
    return float(value)


def row_state_total(fields: Sequence[str]) -> float:
    """Sum the ten yearly spending columns of one row, 2000 first."""
    total = 0.0
    for column in YEAR_COLUMNS.values():
        total += parse_amount(fields[column])
    return total


def accumulate_row(totals: SpendingTotals, fields: Sequence[str]) -> None:
    """
    Add one row into the running totals.

    State rows (group field exactly "State") add their 2000-2009 sum under the
    state name. Every row adds its 2009 value under its category.

    Raises:
        IndexError: If the row is too short to hold the 2009 column
        ValueError: If a spending field is not a number
    """
    category = fields[CATEGORY_COLUMN]

    if fields[GROUP_COLUMN] == STATE_GROUP:
        state = fields[STATE_COLUMN]
        totals.state_totals[state] = totals.state_totals.get(state, 0.0) + row_state_total(fields)

    latest = parse_amount(fields[year_column(LAST_YEAR)])
    totals.category_totals[category] = totals.category_totals.get(category, 0.0) + latest
    totals.rows += 1


def aggregate_rows(rows: Iterable[List[str]]) -> SpendingTotals:
    """Fold every row into a fresh SpendingTotals."""
    totals = SpendingTotals()
    for fields in rows:
        accumulate_row(totals, fields)
    return totals


__all__ = [
    "SpendingTotals",
    "parse_amount",
    "row_state_total",
    "accumulate_row",
    "aggregate_rows",
]
