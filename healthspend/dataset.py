"""Layout of the healthcare spending per capita dataset and report constants."""

from __future__ import annotations

from typing import Dict

# Filename read from the working directory when no path is provided
DEFAULT_CSV_FILENAME = "Healthcare_Spending_Per_Capita.csv"

# Zero-based column positions after splitting a data line
CATEGORY_COLUMN = 1
GROUP_COLUMN = 2
STATE_COLUMN = 5

# Yearly per-capita spending, one column per year (2000 -> 15 ... 2009 -> 24)
FIRST_YEAR = 2000
LAST_YEAR = 2009
FIRST_YEAR_COLUMN = 15

YEAR_COLUMNS: Dict[int, int] = {
    year: FIRST_YEAR_COLUMN + (year - FIRST_YEAR) for year in range(FIRST_YEAR, LAST_YEAR + 1)
}

# Only rows whose group field is exactly this literal count towards state totals
STATE_GROUP = "State"

TOP_STATES_LIMIT = 10

STATE_REPORT_HEADING = (
    "Top 10 states with the highest total healthcare spending per capita (from years 2000 - 2009)"
)
CATEGORY_REPORT_HEADING = (
    "Healthcare services from the highest total healthcare spending per capita to the lowest (in year 2009)"
)
REPORT_RULE = "-" * 79


def year_column(year: int) -> int:
    """
    Column index holding spending for a given year.

    Raises:
        KeyError: If the year is outside 2000-2009
    """
    try:
        return YEAR_COLUMNS[year]
    except KeyError:
        raise KeyError(f"No spending column for year {year} (expected {FIRST_YEAR}-{LAST_YEAR}).") from None


__all__ = [
    "DEFAULT_CSV_FILENAME",
    "FIRST_YEAR",
    "LAST_YEAR",
    "FIRST_YEAR_COLUMN",
    "CATEGORY_COLUMN",
    "GROUP_COLUMN",
    "STATE_COLUMN",
    "YEAR_COLUMNS",
    "STATE_GROUP",
    "TOP_STATES_LIMIT",
    "STATE_REPORT_HEADING",
    "CATEGORY_REPORT_HEADING",
    "REPORT_RULE",
    "year_column",
]
