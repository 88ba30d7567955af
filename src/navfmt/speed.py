"""Speed unit conversion and simple (unbanded) speed formatting."""

from enum import Enum

from babel.numbers import format_decimal
from babel.units import format_unit

from .locales import LocaleInfo, coerce_locale
from .rounding import round_half_away_from_zero
from .units import UnitSystem


class SpeedUnit(str, Enum):
    """Units a speed value can carry."""

    METERS_PER_SECOND = "m/s"
    MILES_PER_HOUR = "mph"
    KILOMETERS_PER_HOUR = "km/h"
    KNOTS = "knots"


# Conversion constants (relative to 1 m/s)
METERS_PER_SECOND_TO_MILES_PER_HOUR = 2.23694
METERS_PER_SECOND_TO_KILOMETERS_PER_HOUR = 3.6
METERS_PER_SECOND_TO_KNOTS = 1.94384

PER_METER_PER_SECOND: dict[SpeedUnit, float] = {
    SpeedUnit.METERS_PER_SECOND: 1.0,
    SpeedUnit.MILES_PER_HOUR: METERS_PER_SECOND_TO_MILES_PER_HOUR,
    SpeedUnit.KILOMETERS_PER_HOUR: METERS_PER_SECOND_TO_KILOMETERS_PER_HOUR,
    SpeedUnit.KNOTS: METERS_PER_SECOND_TO_KNOTS,
}

CLDR_SPEED_UNITS: dict[SpeedUnit, str] = {
    SpeedUnit.METERS_PER_SECOND: "speed-meter-per-second",
    SpeedUnit.MILES_PER_HOUR: "speed-mile-per-hour",
    SpeedUnit.KILOMETERS_PER_HOUR: "speed-kilometer-per-hour",
    SpeedUnit.KNOTS: "speed-knot",
}


def convert_speed(value: float, from_unit: SpeedUnit, to_unit: SpeedUnit) -> float:
    """
    Convert a speed between units.

    Pure linear conversion through meters per second; no rounding is applied.

    Args:
        value: Speed in ``from_unit``
        from_unit: Unit of ``value``
        to_unit: Target unit

    Returns:
        Speed in ``to_unit``

    Examples:
        >>> convert_speed(10.0, SpeedUnit.METERS_PER_SECOND, SpeedUnit.KILOMETERS_PER_HOUR)
        36.0
    """
    if from_unit == to_unit:
        return value
    meters_per_second = value / PER_METER_PER_SECOND[from_unit]
    return meters_per_second * PER_METER_PER_SECOND[to_unit]


def speed_unit_for(system: UnitSystem) -> SpeedUnit:
    """Road speed unit conventionally used alongside a distance unit system."""
    if system is UnitSystem.METRIC:
        return SpeedUnit.KILOMETERS_PER_HOUR
    return SpeedUnit.MILES_PER_HOUR


class SpeedFormatter:
    """Formats a speed value with no fractional digits, e.g. for a speed limit sign."""

    def __init__(self, locale: LocaleInfo | str | None = None) -> None:
        self.locale = coerce_locale(locale)

    def formatted_value(
        self,
        value: float,
        unit: SpeedUnit,
        converted: SpeedUnit | None = None,
    ) -> str:
        """Number only, e.g. ``"50"``."""
        speed = round_half_away_from_zero(convert_speed(value, unit, converted or unit))
        return format_decimal(speed, format="#,##0", locale=self.locale.to_babel())

    def formatted(
        self,
        value: float,
        unit: SpeedUnit,
        converted: SpeedUnit | None = None,
    ) -> str:
        """Number and unit label, e.g. ``"50 km/h"`` or ``"30 mph"``."""
        target = converted or unit
        speed = round_half_away_from_zero(convert_speed(value, unit, target))
        return format_unit(
            speed,
            CLDR_SPEED_UNITS[target],
            length="short",
            format="#,##0",
            locale=self.locale.to_babel(),
        )
