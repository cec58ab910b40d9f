"""Türkiye GDP per capita world ranking and percent of world average, 2002-2024.

World Bank data via StatisticsTimes.com. A lower rank is better.
"""
from __future__ import annotations

from econ_indicators.data_models.annual_series import AnnualSeries, SeriesKind
from econ_indicators.reference_data.gdp_per_capita import GDP_SOURCE


RANKING_START_YEAR = 2002

NOMINAL_RANKING = (
    91, 83, 77, 77, 79, 78, 76, 81, 80, 81, 84, 81, 84, 81, 81, 83, 93, 96, 90,
    92, 92, 87, 83,
)

PPP_RANKING = (
    81, 81, 79, 77, 75, 75, 76, 78, 76, 72, 71, 67, 67, 62, 63, 63, 66, 67, 61,
    62, 60, 59, 59,
)

NOMINAL_PERCENT_WORLD = (
    64.9, 76.0, 87.8, 101, 102, 113, 116, 103, 112, 108, 111, 118, 112, 109, 108,
    100, 85.6, 82.6, 80.4, 80.6, 85.2, 101, 117,
)

PPP_PERCENT_WORLD = (
    106, 105, 112, 116, 123, 127, 131, 126, 135, 144, 146, 153, 160, 169, 170,
    173, 166, 160, 163, 162, 182, 186, 185,
)


def ranking_series(ppp: bool = False) -> AnnualSeries:
    values = PPP_RANKING if ppp else NOMINAL_RANKING
    return AnnualSeries(
        name="World ranking, PPP" if ppp else "World ranking, nominal",
        kind=SeriesKind.RANKING,
        start_year=RANKING_START_YEAR,
        values=[float(v) for v in values],
        source=GDP_SOURCE,
    )


def percent_of_world_series(ppp: bool = False) -> AnnualSeries:
    values = PPP_PERCENT_WORLD if ppp else NOMINAL_PERCENT_WORLD
    return AnnualSeries(
        name="Percent of world, PPP" if ppp else "Percent of world, nominal",
        kind=SeriesKind.PERCENT_OF_WORLD,
        start_year=RANKING_START_YEAR,
        values=[float(v) for v in values],
        unit="%",
        source=GDP_SOURCE,
    )
