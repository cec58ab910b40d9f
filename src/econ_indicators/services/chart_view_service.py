"""Chart view assembly.

Builds a `ChartView` for each chart page in a given display mode. Mode
selection is a pure projection over precomputed series; the reference
tables are never modified.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar
import logging
import math

from econ_indicators.data_models.annual_series import AnnualSeries
from econ_indicators.data_models.chart_view import (
    AxisSpec,
    ChartInfo,
    ChartSeries,
    ChartView,
    DollarMode,
    GdpMode,
)
from econ_indicators.errors import UnknownModeError
from econ_indicators.reference_data import gdp_per_capita, gdp_ranking, hunger_min_wage
from econ_indicators.reference_data.us_cpi import us_cpi_series
from econ_indicators.services.series_derivation_service import (
    adjust_series_for_inflation,
    apply_override,
    check_aligned,
    derive_companion_series,
    derive_ratio_series,
    resolve_base_index,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


GDP_PER_CAPITA_CHART = "gdp-per-capita"
GDP_RANKING_CHART = "gdp-ranking"
HUNGER_MIN_WAGE_CHART = "aclik-siniri"

CPI_BASE_YEAR = 2024

# Axis padding around the plotted data range
GDP_AXIS_PADDING = 2000.0
RANK_AXIS_PADDING = 5.0
PERCENT_AXIS_PADDING = 20.0
RATIO_AXIS_RANGE = (0.8, 2.0)

_GDP_HEADING_MODE = {GdpMode.NOMINAL: "Nominal", GdpMode.PPP: "SGP (PPP)"}
_GDP_CURRENCY = {GdpMode.NOMINAL: "$", GdpMode.PPP: "Int. $"}


def select_for_mode(mode, options: Mapping[Any, T]) -> T:
    """Return the option registered for `mode`.

    Pure lookup: the same mode always yields the same object.
    """
    by_value = {getattr(k, "value", k): v for k, v in options.items()}
    key = getattr(mode, "value", mode)
    if key not in by_value:
        raise UnknownModeError(f"Unknown mode {mode!r}; expected one of {list(by_value)}")
    return by_value[key]


def _coerce_mode(mode_cls, mode):
    try:
        return mode_cls(getattr(mode, "value", mode))
    except ValueError:
        raise UnknownModeError(f"Unknown mode {mode!r}; expected one of {[m.value for m in mode_cls]}")


def _finite(values: List[float]) -> List[float]:
    return [v for v in values if math.isfinite(v)]


def _padded_range(
    series: List[AnnualSeries], padding: float, floor: Optional[float] = None
) -> tuple[Optional[float], Optional[float]]:
    finite = [v for s in series for v in _finite(s.values)]
    if not finite:
        return None, None
    low = min(finite) - padding
    if floor is not None:
        low = max(floor, low)
    return low, max(finite) + padding


def _chart_series(label: str, axis_id: str, series: AnnualSeries) -> ChartSeries:
    return ChartSeries(label=label, axis_id=axis_id, values=list(series.values))


# ---------------------------------------------------------------------------
# GDP per capita
# ---------------------------------------------------------------------------


def build_gdp_per_capita_view(mode: GdpMode = GdpMode.NOMINAL) -> ChartView:
    """Current vs constant GDP per capita, in nominal USD or PPP Int. $."""
    mode = _coerce_mode(GdpMode, mode)
    current = select_for_mode(mode, {
        GdpMode.NOMINAL: gdp_per_capita.nominal_current_series,
        GdpMode.PPP: gdp_per_capita.ppp_current_series,
    })()
    constant = select_for_mode(mode, {
        GdpMode.NOMINAL: gdp_per_capita.nominal_constant_series,
        GdpMode.PPP: gdp_per_capita.ppp_constant_series,
    })()
    check_aligned(current, constant)

    currency = _GDP_CURRENCY[mode]
    base_year = select_for_mode(mode, {
        GdpMode.NOMINAL: gdp_per_capita.NOMINAL_CONSTANT_BASE_YEAR,
        GdpMode.PPP: gdp_per_capita.PPP_CONSTANT_BASE_YEAR,
    })
    low, high = _padded_range([current, constant], GDP_AXIS_PADDING, floor=0.0)

    return ChartView(
        chart_id=GDP_PER_CAPITA_CHART,
        mode=mode.value,
        heading=f"Turkiye - Kisi Basi GSYiH ({_GDP_HEADING_MODE[mode]}, {current.start_year}-{current.end_year})",
        years=current.years,
        series=[
            _chart_series(f"Current ({currency})", "y", current),
            _chart_series(f"Constant ({currency})", "y", constant),
        ],
        axes=[
            AxisSpec(
                axis_id="y",
                title=f"Kisi Basi GSYiH ({currency})",
                unit_suffix=currency,
                suggested_min=low,
                suggested_max=high,
            ),
        ],
        base_year=base_year,
        notes=[f"Current: Cari fiyatlarla. Constant: Sabit fiyatlarla ({base_year} baz yili)."],
        source=gdp_per_capita.GDP_SOURCE,
        source_url=gdp_per_capita.GDP_SOURCE_URL,
    )


# ---------------------------------------------------------------------------
# GDP per capita world ranking
# ---------------------------------------------------------------------------


def build_gdp_ranking_view(mode: GdpMode = GdpMode.NOMINAL) -> ChartView:
    """World ranking (reversed axis) and percent of world average."""
    mode = _coerce_mode(GdpMode, mode)
    is_ppp = mode == GdpMode.PPP
    ranking = gdp_ranking.ranking_series(ppp=is_ppp)
    percent = gdp_ranking.percent_of_world_series(ppp=is_ppp)
    check_aligned(ranking, percent)

    heading_mode = _GDP_HEADING_MODE[mode]
    rank_low, rank_high = _padded_range([ranking], RANK_AXIS_PADDING)
    pct_low, pct_high = _padded_range([percent], PERCENT_AXIS_PADDING, floor=0.0)

    return ChartView(
        chart_id=GDP_RANKING_CHART,
        mode=mode.value,
        heading=f"Turkiye - Kisi Basi GSYiH Siralamasi ({heading_mode}, {ranking.start_year}-{ranking.end_year})",
        years=ranking.years,
        series=[
            _chart_series(f"Dunya Siralamasi ({heading_mode})", "yRanking", ranking),
            _chart_series(f"Dunya % ({heading_mode})", "yPercent", percent),
        ],
        axes=[
            # Lower rank is better, so the rank axis is drawn upside down
            AxisSpec(
                axis_id="yRanking",
                title="Siralama (Dusuk = Daha Iyi)",
                reverse=True,
                suggested_min=rank_low,
                suggested_max=rank_high,
            ),
            AxisSpec(
                axis_id="yPercent",
                title="Dunya Ortalamasi %",
                unit_suffix="%",
                suggested_min=pct_low,
                suggested_max=pct_high,
            ),
        ],
        notes=["Siralama sol eksende (ters cevirilmis), Dunya % sag eksende. 100% = Dunya ortalamasi."],
        source=gdp_per_capita.GDP_SOURCE,
        source_url=gdp_per_capita.GDP_SOURCE_URL,
    )


# ---------------------------------------------------------------------------
# Hunger line vs minimum wage
# ---------------------------------------------------------------------------


class HungerMinWageSeries:
    """All series behind the hunger-line chart, derived once from the tables."""

    def __init__(self, base_year: int = CPI_BASE_YEAR, minimum_wage_override: Optional[float] = hunger_min_wage.MINIMUM_WAGE_2026_USD):
        hunger = hunger_min_wage.hunger_usd_series()
        multiple = hunger_min_wage.hunger_over_min_wage_series()
        cpi = us_cpi_series()
        check_aligned(hunger, multiple, cpi)

        min_wage = derive_companion_series(hunger, multiple, name="Minimum wage")
        # Reported figure beats the derived quotient; ratio below uses it
        if minimum_wage_override is not None:
            min_wage = apply_override(min_wage, minimum_wage_override, position=-1)

        base_index = resolve_base_index(cpi.years, base_year)

        self.base_year = cpi.years[base_index]
        self.hunger = hunger
        self.min_wage = min_wage
        self.ratio = derive_ratio_series(hunger, min_wage, name="Hunger line / minimum wage")
        self.hunger_real = adjust_series_for_inflation(hunger, cpi, base_index, name="Hunger line (real)")
        self.min_wage_real = adjust_series_for_inflation(min_wage, cpi, base_index, name="Minimum wage (real)")
        logger.info("Derived hunger/minimum wage series for %d-%d (base year %d)",
                    hunger.start_year, hunger.end_year, self.base_year)


def build_hunger_min_wage_view(
    mode: DollarMode = DollarMode.NOMINAL,
    derived: Optional[HungerMinWageSeries] = None,
) -> ChartView:
    """Hunger line and minimum wage in nominal or real USD, plus their ratio.

    The ratio is the same in both modes; only the USD series switch.
    """
    mode = _coerce_mode(DollarMode, mode)
    d = derived or HungerMinWageSeries()
    base_year = d.base_year

    hunger_series = select_for_mode(mode, {DollarMode.NOMINAL: d.hunger, DollarMode.REAL: d.hunger_real})
    min_wage_series = select_for_mode(mode, {DollarMode.NOMINAL: d.min_wage, DollarMode.REAL: d.min_wage_real})
    suffix = select_for_mode(mode, {DollarMode.NOMINAL: "$", DollarMode.REAL: f"{base_year} $"})
    axis_title = select_for_mode(mode, {DollarMode.NOMINAL: "USD ($)", DollarMode.REAL: f"USD ({base_year} $)"})
    heading_mode = select_for_mode(mode, {DollarMode.NOMINAL: "Nominal USD", DollarMode.REAL: f"Reel USD ({base_year})"})
    mode_line = select_for_mode(mode, {
        DollarMode.NOMINAL: "Seriler cari USD cinsindendir.",
        DollarMode.REAL: f"Seriler {base_year} yılı ABD CPI ortalamasına göre enflasyondan arındırılmıştır.",
    })
    last_multiple = hunger_min_wage.HUNGER_OVER_MIN_WAGE[-1]

    return ChartView(
        chart_id=HUNGER_MIN_WAGE_CHART,
        mode=mode.value,
        heading=f"Türkiye — Açlık Sınırı vs Asgari Ücret ({heading_mode}) + Oran",
        years=d.hunger.years,
        series=[
            _chart_series(f"Açlık Sınırı ({suffix})", "yUSD", hunger_series),
            _chart_series(f"Asgari Ücret ({suffix})", "yUSD", min_wage_series),
            _chart_series("Oran: Açlık / Asgari", "yRatio", d.ratio),
        ],
        axes=[
            AxisSpec(axis_id="yUSD", title=axis_title, unit_suffix=suffix),
            AxisSpec(
                axis_id="yRatio",
                title="Oran (Açlık / Asgari)",
                suggested_min=RATIO_AXIS_RANGE[0],
                suggested_max=RATIO_AXIS_RANGE[1],
            ),
        ],
        base_year=base_year if mode == DollarMode.REAL else None,
        notes=[
            f"Oran çizgisi sağ eksendedir (Açlık/Asgari). {d.hunger.end_year} oran ≈ {last_multiple:.2f}.",
            mode_line,
        ],
        source=hunger_min_wage.HUNGER_SOURCE,
        source_url=hunger_min_wage.HUNGER_SOURCE_URL,
    )


# ---------------------------------------------------------------------------
# Catalogue and dispatch
# ---------------------------------------------------------------------------


CHARTS: List[ChartInfo] = [
    ChartInfo(
        chart_id=HUNGER_MIN_WAGE_CHART,
        title="Aclik Siniri vs Asgari Ucret",
        description="Turkiye'nin aclik siniri ve asgari ucret karsilastirmasi (USD cinsinden)",
        modes=[m.value for m in DollarMode],
        default_mode=DollarMode.NOMINAL.value,
    ),
    ChartInfo(
        chart_id=GDP_PER_CAPITA_CHART,
        title="Kisi Basi GSYiH",
        description="Turkiye'nin kisi basi GSYiH degerleri (Nominal ve PPP, Current ve Constant)",
        modes=[m.value for m in GdpMode],
        default_mode=GdpMode.NOMINAL.value,
    ),
    ChartInfo(
        chart_id=GDP_RANKING_CHART,
        title="Kisi Basi GSYiH Siralamasi",
        description="Turkiye'nin kisi basi GSYiH dunya siralamasi ve dunya ortalamasina orani",
        modes=[m.value for m in GdpMode],
        default_mode=GdpMode.NOMINAL.value,
    ),
]

_BUILDERS: Dict[str, Callable[[str], ChartView]] = {
    GDP_PER_CAPITA_CHART: build_gdp_per_capita_view,
    GDP_RANKING_CHART: build_gdp_ranking_view,
    HUNGER_MIN_WAGE_CHART: build_hunger_min_wage_view,
}


def list_charts() -> List[ChartInfo]:
    return list(CHARTS)


def get_chart_info(chart_id: str) -> ChartInfo:
    for info in CHARTS:
        if info.chart_id == chart_id:
            return info
    raise UnknownModeError(f"Unknown chart id {chart_id!r}; expected one of {sorted(_BUILDERS)}")


def build_chart_view(chart_id: str, mode: Optional[str] = None) -> ChartView:
    """Build the view for `chart_id` in `mode` (the chart's default if None)."""
    info = get_chart_info(chart_id)
    mode = getattr(mode, "value", mode) or info.default_mode
    if mode not in info.modes:
        raise UnknownModeError(f"Chart {chart_id!r} has no mode {mode!r}; expected one of {info.modes}")
    return _BUILDERS[chart_id](mode)


class ChartSession:
    """Active display mode of one chart.

    Two states, switched only by `select`. Selecting the active mode again
    returns the current view unchanged.
    """

    def __init__(self, chart_id: str, mode: Optional[str] = None):
        self.chart_id = chart_id
        self._view = build_chart_view(chart_id, mode)

    @property
    def mode(self) -> str:
        return self._view.mode

    @property
    def view(self) -> ChartView:
        return self._view

    def select(self, mode: str) -> ChartView:
        mode = getattr(mode, "value", mode)
        if mode == self._view.mode:
            return self._view
        self._view = build_chart_view(self.chart_id, mode)
        logger.info("Chart %s switched to mode %s", self.chart_id, mode)
        return self._view
