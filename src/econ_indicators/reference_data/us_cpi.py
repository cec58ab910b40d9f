"""US CPI-U annual averages used to deflate USD series.

CPI-U (1982-84 = 100) from BLS. 2025 and 2026 are ~2% projections so the
real-dollar comparison stays stable at the end of the range.
"""
from __future__ import annotations

from econ_indicators.data_models.annual_series import AnnualSeries, SeriesKind


CPI_START_YEAR = 2002

CPI_U_ANNUAL = (
    179.9, 184.0, 188.9, 195.3, 201.6, 207.3, 215.3, 214.5, 218.1, 224.9, 229.6,
    232.96, 236.74, 237.02, 240.01, 245.12, 251.11, 255.66, 258.81, 270.97,
    292.66, 305.36, 318.13, 324.49, 330.99,
)

CPI_SOURCE = "BLS CPI-U annual averages (2025-2026 projected)"


def us_cpi_series() -> AnnualSeries:
    return AnnualSeries(
        name="US CPI-U",
        kind=SeriesKind.CPI_INDEX,
        start_year=CPI_START_YEAR,
        values=list(CPI_U_ANNUAL),
        unit="1982-84=100",
        source=CPI_SOURCE,
    )
