"""Shared fixtures: small CSV files shaped like the spending dataset."""

from __future__ import annotations

from typing import Callable, List, Sequence

import pytest

HEADER = ",".join(
    ["Code", "Item", "Group", "Region_Number", "Region_Name", "State_Name"]
    + [f"Y{year}" for year in range(1991, 2010)]
    + ["Average_Annual_Percent_Growth"]
)


def make_line(
    category: str,
    group: str,
    state: str,
    yearly: Sequence[float],
    *,
    early: float = 1.0,
) -> str:
    """Build one 26-field data line; `yearly` fills the 2000-2009 columns."""
    assert len(yearly) == 10
    fields: List[str] = ["1", category, group, "5", "Great Lakes", state]
    fields += [repr(early)] * 9  # 1991-1999
    fields += [repr(float(v)) for v in yearly]
    fields.append("5.5")
    return ",".join(fields)


@pytest.fixture()
def write_csv(tmp_path) -> Callable[..., str]:
    """Write header + given data lines to a temp file and return its path."""

    def _write(lines: Sequence[str], name: str = "spending.csv") -> str:
        path = tmp_path / name
        path.write_text("\n".join([HEADER, *lines]) + "\n", encoding="utf-8")
        return str(path)

    return _write
