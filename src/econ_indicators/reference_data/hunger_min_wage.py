"""Türkiye hunger line and minimum wage in USD, 2002-2026.

The hunger line is tabulated directly. The minimum wage is only known as a
multiple of the hunger line, except for 2026 where the net minimum wage
(653 USD) is reported directly.
"""
from __future__ import annotations

from econ_indicators.data_models.annual_series import AnnualSeries, SeriesKind


HUNGER_START_YEAR = 2002

HUNGER_SOURCE = "bilbilgilen.com"
HUNGER_SOURCE_URL = "https://www.bilbilgilen.com/Turkiye/yillara-gore-yoksulluk-siniri-dolar-karsiliklari-ile.html"

# 2026 hunger line and net minimum wage in TRY
HUNGER_2026_TRY = 30126
MINIMUM_WAGE_2026_TRY = 28075

MINIMUM_WAGE_2026_USD = 653.0

HUNGER_USD = (
    212.06, 242.09, 338.84, 386.16, 410.92, 444.4, 594.08, 478.3, 545.66, 559.69,
    508.45, 563.44, 505.12, 535.1, 490.99, 417.82, 428.17, 376.13, 372.41, 359.84,
    315.75, 470.95, 495.68, 627.79, 700.7,
)

HUNGER_OVER_MIN_WAGE = (
    1.88, 1.77, 1.49, 1.49, 1.46, 1.5, 1.38, 1.35, 1.36, 1.32, 1.3, 1.25, 1.23,
    1.26, 1.11, 1.05, 1.0, 0.99, 0.95, 0.94, 1.0, 1.04, 0.89, 1.0,
    HUNGER_2026_TRY / MINIMUM_WAGE_2026_TRY,
)


def hunger_usd_series() -> AnnualSeries:
    return AnnualSeries(
        name="Hunger line",
        kind=SeriesKind.NOMINAL_CURRENCY,
        start_year=HUNGER_START_YEAR,
        values=list(HUNGER_USD),
        unit="$",
        source=HUNGER_SOURCE,
    )


def hunger_over_min_wage_series() -> AnnualSeries:
    return AnnualSeries(
        name="Hunger line / minimum wage",
        kind=SeriesKind.RATIO,
        start_year=HUNGER_START_YEAR,
        values=list(HUNGER_OVER_MIN_WAGE),
        source=HUNGER_SOURCE,
    )
