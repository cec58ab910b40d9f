"""Tabular and JSON export of chart views.

The rendering layer consumes either the JSON form of a `ChartView` (missing
points become `null`) or a year-indexed table, one column per series.
"""
from __future__ import annotations

from pathlib import Path
from typing import List
import logging

import pandas as pd

from econ_indicators.data_models.chart_view import ChartView

logger = logging.getLogger(__name__)


MISSING_PLACEHOLDER = "—"


def chart_view_to_frame(view: ChartView) -> pd.DataFrame:
    """One row per year, one column per series label. Missing points stay NaN."""
    data = {s.label: s.values for s in view.series}
    df = pd.DataFrame(data, index=pd.Index(view.years, name="year"))
    return df


def chart_view_to_json(view: ChartView) -> str:
    return view.model_dump_json(indent=2)


def render_table(view: ChartView) -> str:
    """Plain-text table with a heading; missing points shown as a dash, never 0."""
    df = chart_view_to_frame(view)
    lines: List[str] = [view.heading]
    lines.extend(view.notes)
    lines.append(df.to_string(na_rep=MISSING_PLACEHOLDER))
    return "\n".join(lines)


def write_chart_view(view: ChartView, output_path: Path | str, fmt: str = "json") -> Path:
    """Write `view` to `output_path` as `json`, `csv` or `table`."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "json":
        content = chart_view_to_json(view)
    elif fmt == "csv":
        content = chart_view_to_frame(view).to_csv()
    elif fmt == "table":
        content = render_table(view) + "\n"
    else:
        raise ValueError(f"Unsupported export format: {fmt}")

    with open(path, "w", encoding="utf-8") as f:
        f.write(content)

    logger.info("Wrote %s view of %s (%s) to %s", fmt, view.chart_id, view.mode, path)
    return path
