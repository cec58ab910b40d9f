"""Chart view models.

A `ChartView` is everything the rendering layer needs for one chart in one
display mode: the year labels, the plotted series and per-axis metadata.
Missing points stay NaN here and serialize to JSON `null`.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class GdpMode(str, Enum):
    """Currency basis of the GDP charts."""

    NOMINAL = "nominal"
    PPP = "ppp"


class DollarMode(str, Enum):
    """Nominal USD or inflation-adjusted (real) USD."""

    NOMINAL = "nominal"
    REAL = "real"


class AxisSpec(BaseModel):
    axis_id: str
    title: str
    unit_suffix: Optional[str] = None
    reverse: bool = False
    suggested_min: Optional[float] = None
    suggested_max: Optional[float] = None


class ChartSeries(BaseModel):
    label: str
    axis_id: str
    values: List[float]


class ChartView(BaseModel):
    """One chart, projected to one mode."""

    chart_id: str
    mode: str
    heading: str
    years: List[int]

    series: List[ChartSeries]
    axes: List[AxisSpec]

    # Year the constant / real series are expressed in, if any
    base_year: Optional[int] = None
    notes: List[str] = Field(default_factory=list)
    source: Optional[str] = None
    source_url: Optional[str] = None

    def series_by_label(self, label: str) -> ChartSeries:
        for s in self.series:
            if s.label == label:
                return s
        raise KeyError(label)


class ChartInfo(BaseModel):
    """Catalogue entry for one chart page."""

    chart_id: str
    title: str
    description: str
    modes: List[str]
    default_mode: str
