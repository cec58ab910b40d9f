import logging
import math

import numpy as np
import pytest

from econ_indicators.data_models.annual_series import AnnualSeries, SeriesKind
from econ_indicators.errors import PositionError, SeriesAlignmentError
from econ_indicators.reference_data.hunger_min_wage import hunger_usd_series
from econ_indicators.reference_data.us_cpi import us_cpi_series
from econ_indicators.services.series_derivation_service import (
    adjust_series_for_inflation,
    apply_override,
    derive_companion_series,
    derive_ratio_series,
    resolve_base_index,
    round_half_away,
)


def _series(values, kind=SeriesKind.NOMINAL_CURRENCY, start_year=2000, name="s") -> AnnualSeries:
    return AnnualSeries(name=name, kind=kind, start_year=start_year, values=values)


def _cpi(values, start_year=2000) -> AnnualSeries:
    return _series(values, kind=SeriesKind.CPI_INDEX, start_year=start_year, name="cpi")


def test_round_half_away_from_zero():
    assert round_half_away(0.125, 2) == 0.13
    assert round_half_away(-0.125, 2) == -0.13
    assert round_half_away(2.5, 0) == 3.0
    assert round_half_away(-2.5, 0) == -3.0
    # 2.675 is stored slightly below the half
    assert round_half_away(2.675, 2) == 2.67
    assert math.isnan(round_half_away(float("inf"), 2))
    assert math.isnan(round_half_away(float("nan"), 2))


def test_inflation_adjustment_simple():
    adjusted = adjust_series_for_inflation(_series([100, 100]), _cpi([100, 200]), base_index=0)
    assert adjusted.values == [100.0, 50.0]


def test_inflation_adjustment_preserves_length_and_inputs():
    value = _series([10.0, 20.0, 30.0])
    cpi = _cpi([90.0, 100.0, 110.0])
    adjusted = adjust_series_for_inflation(value, cpi, base_index=1)

    assert len(adjusted) == len(value) == len(cpi)
    assert adjusted.start_year == value.start_year
    assert value.values == [10.0, 20.0, 30.0]
    assert adjusted is not value


def test_inflation_adjustment_is_idempotent():
    hunger = hunger_usd_series()
    cpi = us_cpi_series()
    base = resolve_base_index(cpi.years, 2024)

    first = adjust_series_for_inflation(hunger, cpi, base)
    second = adjust_series_for_inflation(hunger, cpi, base)
    np.testing.assert_array_equal(first.values, second.values)


def test_inflation_adjustment_anchor_keeps_nominal_value():
    hunger = hunger_usd_series()
    cpi = us_cpi_series()
    base = resolve_base_index(cpi.years, 2024)

    adjusted = adjust_series_for_inflation(hunger, cpi, base)
    assert adjusted.values[base] == round_half_away(hunger.values[base], 2)
    assert adjusted.values[base] == 495.68


def test_inflation_adjustment_missing_points_stay_local():
    value = _series([10.0, 10.0, 10.0, 10.0, None])
    cpi = _cpi([100.0, 0.0, None, 200.0, 100.0])
    adjusted = adjust_series_for_inflation(value, cpi, base_index=0)

    assert adjusted.values[0] == 10.0
    assert math.isnan(adjusted.values[1])
    assert math.isnan(adjusted.values[2])
    assert adjusted.values[3] == 5.0
    assert math.isnan(adjusted.values[4])


def test_inflation_adjustment_missing_base_gives_all_missing():
    adjusted = adjust_series_for_inflation(_series([10.0, 20.0]), _cpi([None, 100.0]), base_index=0)
    assert all(math.isnan(v) for v in adjusted.values)


def test_inflation_adjustment_rejects_misaligned_series():
    with pytest.raises(SeriesAlignmentError):
        adjust_series_for_inflation(_series([1.0, 2.0]), _cpi([1.0, 2.0, 3.0]), base_index=0)
    with pytest.raises(SeriesAlignmentError):
        adjust_series_for_inflation(_series([1.0, 2.0]), _cpi([1.0, 2.0], start_year=1999), base_index=0)


def test_inflation_adjustment_rejects_base_outside_range():
    with pytest.raises(PositionError):
        adjust_series_for_inflation(_series([1.0, 2.0]), _cpi([1.0, 2.0]), base_index=5)


def test_resolve_base_index():
    years = list(range(2002, 2027))
    assert resolve_base_index(years, 2024) == 22
    assert resolve_base_index(years, 2030) == len(years) - 1
    with pytest.raises(PositionError):
        resolve_base_index([], 2024)


def test_companion_and_ratio_scenario():
    a = _series([212.06])
    k = _series([1.88], kind=SeriesKind.RATIO)

    b = derive_companion_series(a, k, name="b")
    r = derive_ratio_series(a, b, name="r")

    assert b.values == [112.80]
    assert r.values == [1.880]
    assert r.kind == SeriesKind.RATIO


def test_companion_zero_or_missing_denominator():
    a = _series([100.0, 100.0, None, 100.0])
    k = _series([2.0, 0.0, 1.0, None], kind=SeriesKind.RATIO)
    b = derive_companion_series(a, k, name="b")

    assert b.values[0] == 50.0
    assert all(math.isnan(v) for v in b.values[1:])


def test_ratio_consistency_on_reference_data():
    hunger = hunger_usd_series()
    min_wage = _series([v / 1.5 for v in hunger.values], start_year=hunger.start_year)
    ratio = derive_ratio_series(hunger, min_wage, name="r")

    for h, m, r in zip(hunger.values, min_wage.values, ratio.values):
        if math.isfinite(h) and math.isfinite(m) and m != 0:
            assert r == round_half_away(h / m, 3)


def test_override_applied_after_derivation_and_before_ratio():
    a = _series([100.0, 700.70])
    k = _series([2.0, 1.073], kind=SeriesKind.RATIO)

    derived = derive_companion_series(a, k, name="b")
    assert derived.values[-1] != 653.0

    b = apply_override(derived, 653.0)
    r = derive_ratio_series(a, b, name="r")

    assert b.values == [50.0, 653.0]
    assert r.values[-1] == 1.073
    assert derived.values[-1] != 653.0  # original untouched


def test_override_value_is_used_verbatim():
    b = apply_override(_series([1.0, 2.0, 3.0]), 123.456789, position=1)
    assert b.values == [1.0, 123.456789, 3.0]


def test_override_position_outside_series():
    with pytest.raises(PositionError):
        apply_override(_series([1.0]), 2.0, position=3)


def test_round_half_away_handles_huge_and_numpy_values():
    assert round_half_away(1e27, 2) == 1e27
    assert round_half_away(-1.7e308, 2) == -1.7e308
    assert round_half_away(np.int64(5), 2) == 5.0
    assert round_half_away(np.float64(0.125), 2) == 0.13


def test_huge_point_does_not_abort_series():
    adjusted = adjust_series_for_inflation(_series([1e27, 10.0]), _cpi([100.0, 100.0]), base_index=0)
    assert adjusted.values == [1e27, 10.0]

    ratio = derive_ratio_series(_series([1e26, 1.0]), _series([1.0, 1.0]), name="r")
    assert ratio.values == [1e26, 1.0]

    b = derive_companion_series(_series([1e30, 9.0]), _series([1.0, 2.0], kind=SeriesKind.RATIO), name="b")
    assert b.values == [1e30, 4.5]


def test_ratio_zero_or_missing_denominator():
    a = _series([1.0, 1.0, 1.0, 1.0])
    b = _series([2.0, 0.0, None, 4.0])
    r = derive_ratio_series(a, b, name="r")

    assert r.values[0] == 0.5
    assert math.isnan(r.values[1])
    assert math.isnan(r.values[2])
    assert r.values[3] == 0.25


def test_companion_and_ratio_are_idempotent():
    hunger = hunger_usd_series()
    multiple = _series([1.5] * (len(hunger) - 1) + [None], kind=SeriesKind.RATIO, start_year=hunger.start_year)

    b1 = derive_companion_series(hunger, multiple, name="b")
    b2 = derive_companion_series(hunger, multiple, name="b")
    np.testing.assert_array_equal(b1.values, b2.values)

    r1 = derive_ratio_series(hunger, b1, name="r")
    r2 = derive_ratio_series(hunger, b2, name="r")
    np.testing.assert_array_equal(r1.values, r2.values)


def test_override_replaces_missing_derived_point():
    a = _series([212.06, 700.70])
    k = _series([1.88, None], kind=SeriesKind.RATIO)

    derived = derive_companion_series(a, k, name="b")
    assert math.isnan(derived.values[-1])

    b = apply_override(derived, 653.0)
    r = derive_ratio_series(a, b, name="r")

    assert b.values == [112.80, 653.0]
    assert r.values == [1.880, 1.073]


def test_missing_base_cpi_logs_one_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="econ_indicators.services.series_derivation_service"):
        adjust_series_for_inflation(_series([10.0, 20.0]), _cpi([None, 100.0]), base_index=0)

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "base position" in warnings[0].getMessage()
