"""Series derivation.

Pure functions that turn raw annual tables into the series actually plotted:
inflation adjustment against a CPI table, companion series derived from a
per-year multiplier, ratio series, and single-point overrides.

Every function returns a new `AnnualSeries`; inputs are never modified.
A bad point (non-finite input, zero denominator) becomes NaN at that
position only. Misaligned inputs raise `SeriesAlignmentError`.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal
from typing import List, Optional, Sequence
import logging
import math
import numbers

import numpy as np

from econ_indicators.data_models.annual_series import MISSING, AnnualSeries, SeriesKind
from econ_indicators.errors import PositionError, SeriesAlignmentError

logger = logging.getLogger(__name__)


CURRENCY_DIGITS = 2
RATIO_DIGITS = 3

# Wide enough to quantize any finite double at cent precision
_ROUNDING_CONTEXT = Context(prec=400)


def is_finite_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value)


def round_half_away(value: float, digits: int) -> float:
    """Round to `digits` decimals, halves away from zero.

    The exact binary value of the float is rounded, so 1.005 (stored as
    1.00499999...) rounds down to 1.0. Non-finite input returns NaN.
    """
    if not is_finite_number(value):
        return MISSING
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_UP, context=_ROUNDING_CONTEXT))


def _to_array(values: Sequence[Optional[float]]) -> np.ndarray:
    return np.array([np.nan if v is None else v for v in values], dtype=float)


def _safe_divide(num: np.ndarray, den: np.ndarray) -> np.ndarray:
    with np.errstate(divide="ignore", invalid="ignore"):
        out = num / den
    out[~np.isfinite(out)] = np.nan
    return out


def _round_all(values: np.ndarray, digits: int) -> List[float]:
    return [round_half_away(float(v), digits) for v in values]


def check_aligned(*series: AnnualSeries) -> None:
    """Raise `SeriesAlignmentError` unless all series share one year range."""
    if not series:
        return
    first = series[0]
    for s in series[1:]:
        if len(s) != len(first) or s.start_year != first.start_year:
            raise SeriesAlignmentError(
                f"Series '{s.name}' ({s.start_year}-{s.end_year}) is not aligned with "
                f"'{first.name}' ({first.start_year}-{first.end_year})"
            )


def _normalise_position(series: AnnualSeries, position: int) -> int:
    n = len(series)
    idx = position + n if position < 0 else position
    if idx < 0 or idx >= n:
        raise PositionError(f"Position {position} is outside series '{series.name}' of length {n}")
    return idx


def _log_missing(result: AnnualSeries, operation: str) -> None:
    missing = result.missing_count()
    if missing:
        logger.warning("%s for '%s': %d of %d points missing", operation, result.name, missing, len(result))


def resolve_base_index(years: Sequence[int], base_year: int) -> int:
    """Position of `base_year` in `years`, or the last position if absent."""
    years = list(years)
    if not years:
        raise PositionError("Cannot resolve a base year in an empty year range")
    if base_year in years:
        return years.index(base_year)
    logger.warning(
        "Base year %d outside %d-%d; using last year %d as base",
        base_year, years[0], years[-1], years[-1],
    )
    return len(years) - 1


def adjust_series_for_inflation(
    series: AnnualSeries,
    cpi: AnnualSeries,
    base_index: int,
    name: Optional[str] = None,
) -> AnnualSeries:
    """Re-express a nominal series in the currency value of one base year.

        adjusted[i] = round2(value[i] * cpi[base_index] / cpi[i])

    The multiplier is exactly 1 at `base_index`, so the anchor year keeps
    its (rounded) nominal value.
    """
    check_aligned(series, cpi)
    base_pos = _normalise_position(cpi, base_index)

    values = _to_array(series.values)
    index = _to_array(cpi.values)
    base = index[base_pos]

    base_missing = not np.isfinite(base)
    if base_missing:
        logger.warning("CPI value at base position %d is missing; whole series is missing", base_pos)
        adjusted = np.full(len(values), np.nan)
    else:
        multiplier = _safe_divide(np.full(len(index), base), index)
        adjusted = values * multiplier

    result = series.model_copy(
        update={
            "name": name or f"{series.name} (real, {series.start_year + base_pos})",
            "values": _round_all(adjusted, CURRENCY_DIGITS),
        }
    )
    if not base_missing:
        _log_missing(result, "Inflation adjustment")
    return result


def derive_companion_series(
    primary: AnnualSeries,
    multiplier: AnnualSeries,
    name: str,
    kind: Optional[SeriesKind] = None,
) -> AnnualSeries:
    """Companion series from a per-year multiple: `B[i] = round2(A[i] / k[i])`.

    E.g. the minimum wage from the hunger line and "hunger line is k times
    the minimum wage".
    """
    check_aligned(primary, multiplier)
    derived = _safe_divide(_to_array(primary.values), _to_array(multiplier.values))
    result = AnnualSeries(
        name=name,
        kind=kind or primary.kind,
        start_year=primary.start_year,
        values=_round_all(derived, CURRENCY_DIGITS),
        unit=primary.unit,
        source=primary.source,
    )
    _log_missing(result, "Companion derivation")
    return result


def derive_ratio_series(numerator: AnnualSeries, denominator: AnnualSeries, name: str) -> AnnualSeries:
    """`R[i] = round3(A[i] / B[i])`, NaN wherever the quotient is not finite."""
    check_aligned(numerator, denominator)
    ratio = _safe_divide(_to_array(numerator.values), _to_array(denominator.values))
    result = AnnualSeries(
        name=name,
        kind=SeriesKind.RATIO,
        start_year=numerator.start_year,
        values=_round_all(ratio, RATIO_DIGITS),
        source=numerator.source,
    )
    _log_missing(result, "Ratio derivation")
    return result


def apply_override(series: AnnualSeries, value: float, position: int = -1) -> AnnualSeries:
    """Copy of `series` with a literal authoritative value at one position.

    The value is used verbatim, without rounding, whatever the general
    formula produced there.
    """
    idx = _normalise_position(series, position)
    values = list(series.values)
    values[idx] = float(value)
    logger.debug("Override '%s' at %d: %s -> %s", series.name, series.start_year + idx, series.values[idx], value)
    return series.model_copy(update={"values": values})
