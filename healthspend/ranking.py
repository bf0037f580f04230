"""Ranking and text rendering of spending totals."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Mapping, Optional

import pandas as pd

_THOUSANDTHS = Decimal("0.001")


def format_currency(value: float) -> str:
    """
    Render an amount with comma-grouped thousands and exactly 3 decimals.

    Rounds half-up from the shortest decimal form of the float, so 1.0005
    renders as 1.001 and 1000.0 as 1,000.000.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    rounded = Decimal(repr(float(value))).quantize(_THOUSANDTHS, rounding=ROUND_HALF_UP)
    return format(rounded, ",.3f")


def rank_by_value(totals: Mapping[str, float], limit: Optional[int] = None) -> pd.DataFrame:
    """
    Order a name -> amount mapping by amount, largest first.

    Equal amounts are ordered by name ascending, so the ranking is the same for
    a given input regardless of insertion order.

    Args:
        totals: Mapping of name to amount
        limit: Keep at most this many entries (None = all)

    Returns:
        DataFrame with columns rank (1-based), name, amount
    """
    ranked = (
        pd.DataFrame(list(totals.items()), columns=["name", "amount"])
        .sort_values(["amount", "name"], ascending=[False, True])
        .reset_index(drop=True)
    )
    if limit is not None:
        ranked = ranked.head(limit)
    ranked.insert(0, "rank", range(1, len(ranked) + 1))
    return ranked


def format_ranking(ranked: pd.DataFrame) -> str:
    """Render ranked rows as '<n>. <name> ($<amount>)' lines, each newline-terminated."""
    lines: List[str] = [
        f"{rank}. {name} (${format_currency(amount)})\n"
        for rank, name, amount in ranked[["rank", "name", "amount"]].itertuples(index=False)
    ]
    return "".join(lines)


def top_entries_text(totals: Mapping[str, float], limit: int) -> str:
    """Numbered lines for the `limit` largest entries (fewer if the mapping is short)."""
    return format_ranking(rank_by_value(totals, limit=limit))


def descending_text(totals: Mapping[str, float]) -> str:
    """Numbered lines for every entry, largest first."""
    return format_ranking(rank_by_value(totals))


__all__ = [
    "format_currency",
    "rank_by_value",
    "format_ranking",
    "top_entries_text",
    "descending_text",
]
