"""Türkiye GDP per capita, 2002-2024.

World Bank data via StatisticsTimes.com. "Current" is in current prices,
"constant" in prices of a fixed base year (2015 for nominal USD, 2021 for
PPP international dollars).
"""
from __future__ import annotations

from econ_indicators.data_models.annual_series import AnnualSeries, SeriesKind


GDP_START_YEAR = 2002

GDP_SOURCE = "StatisticsTimes.com (World Bank)"
GDP_SOURCE_URL = "https://statisticstimes.com/economy/country/turkey-gdp-per-capita.php"

NOMINAL_CONSTANT_BASE_YEAR = 2015
PPP_CONSTANT_BASE_YEAR = 2021

NOMINAL_CURRENT = (
    3591, 4650, 5980, 7332, 7990, 9767, 10913, 9077, 10699, 11374, 11777, 12636,
    12209, 11065, 10984, 10756, 9684, 9395, 8798, 9982, 10898, 13375, 15893,
)

NOMINAL_CONSTANT = (
    6212, 6496, 7062, 7623, 8079, 8478, 8448, 7925, 8473, 9266, 9588, 10269,
    10598, 11065, 11280, 12006, 12255, 12238, 12339, 13671, 14274, 14933, 15395,
)

PPP_CURRENT = (
    9154, 9475, 10761, 11803, 13558, 14952, 16142, 15552, 17468, 19717, 20739,
    22475, 24193, 25897, 26731, 28354, 28640, 29016, 29209, 32106, 39919, 43196,
    45123,
)

PPP_CONSTANT = (
    14588, 15256, 16584, 17903, 18972, 19909, 19840, 18612, 19897, 21760, 22518,
    24117, 24889, 25985, 26490, 28195, 28780, 28741, 28977, 32106, 33521, 35069,
    36154,
)


def _series(name: str, kind: SeriesKind, values, unit: str) -> AnnualSeries:
    return AnnualSeries(
        name=name,
        kind=kind,
        start_year=GDP_START_YEAR,
        values=[float(v) for v in values],
        unit=unit,
        source=GDP_SOURCE,
    )


def nominal_current_series() -> AnnualSeries:
    return _series("GDP per capita, nominal current", SeriesKind.NOMINAL_CURRENCY, NOMINAL_CURRENT, "$")


def nominal_constant_series() -> AnnualSeries:
    return _series("GDP per capita, nominal constant", SeriesKind.NOMINAL_CURRENCY, NOMINAL_CONSTANT, "$")


def ppp_current_series() -> AnnualSeries:
    return _series("GDP per capita, PPP current", SeriesKind.PPP_CURRENCY, PPP_CURRENT, "Int. $")


def ppp_constant_series() -> AnnualSeries:
    return _series("GDP per capita, PPP constant", SeriesKind.PPP_CURRENCY, PPP_CONSTANT, "Int. $")
