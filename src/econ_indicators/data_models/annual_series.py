"""Annual series model.

One ordered run of yearly observations, positionally aligned to a range of
consecutive calendar years starting at `start_year`.
"""
from __future__ import annotations

import math
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, field_validator


MISSING = float("nan")


class SeriesKind(str, Enum):
    """What the numbers in an `AnnualSeries` measure."""

    NOMINAL_CURRENCY = "nominal_currency"
    PPP_CURRENCY = "ppp_currency"
    CPI_INDEX = "cpi_index"
    RANKING = "ranking"
    PERCENT_OF_WORLD = "percent_of_world"
    RATIO = "ratio"


class AnnualSeries(BaseModel):
    """A yearly series such as GDP per capita or a CPI table.

    `values[i]` belongs to year `start_year + i`. Absent observations
    (future-year placeholders) are stored as NaN, never as zero.
    """

    name: str
    kind: SeriesKind
    start_year: int
    values: List[float]

    unit: Optional[str] = None
    source: Optional[str] = None

    @field_validator("values", mode="before")
    @classmethod
    def _absent_to_nan(cls, v):
        return [MISSING if x is None else x for x in v]

    @property
    def years(self) -> List[int]:
        return list(range(self.start_year, self.start_year + len(self.values)))

    @property
    def end_year(self) -> int:
        return self.start_year + len(self.values) - 1

    def __len__(self) -> int:
        return len(self.values)

    def missing_count(self) -> int:
        return sum(1 for v in self.values if not math.isfinite(v))
