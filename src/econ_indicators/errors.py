"""Exceptions raised for structural misuse of the series services.

A single bad data point never raises: it becomes a NaN in the derived
series. These errors cover inputs that cannot be derived at all.
"""


class EconIndicatorsError(ValueError):
    """Base class for all econ_indicators errors."""

    pass


class SeriesAlignmentError(EconIndicatorsError):
    """
    Raised when series that must share a year range do not.

    Covers:
    - different lengths
    - different start years
    """

    pass


class PositionError(EconIndicatorsError):
    """Raised when a base or override position lies outside the series."""

    pass


class UnknownModeError(EconIndicatorsError):
    """Raised for a mode or chart id that has no registered view."""

    pass
