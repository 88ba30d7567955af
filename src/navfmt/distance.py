"""Magnitude-banded, locale-aware distance formatting.

Distances are rounded to "human friendly" increments that depend on both the
display unit and the magnitude of the converted value, then rendered with the
locale's number symbols and CLDR short unit pattern:

    >>> format_distance(260.0, UnitSystem.IMPERIAL_FEET, "en-US")
    '900 ft'
    >>> format_distance(8_145.0, UnitSystem.METRIC, "de-DE")
    '8,1 km'
"""

import math

from babel.units import format_unit

from .locales import LocaleInfo, coerce_locale
from .rounding import round_to_nearest, sanitize_magnitude
from .units import DistanceUnit, UnitSystem, resolve_for_locale

TENTH = 0.1

# (upper bound exclusive, increment) per display unit, evaluated on the
# converted, unrounded value. The last band of every table is unbounded.
MAGNITUDE_BANDS: dict[DistanceUnit, tuple[tuple[float, float], ...]] = {
    DistanceUnit.METERS: (
        (10, 5),
        (100, 10),
        (math.inf, 100),
    ),
    DistanceUnit.KILOMETERS: (
        (10, TENTH),
        (math.inf, 1),
    ),
    DistanceUnit.FEET: (
        (50, 5),
        (100, 10),
        (500, 50),
        (math.inf, 100),
    ),
    DistanceUnit.YARDS: (
        (10, 5),
        (math.inf, 10),
    ),
    DistanceUnit.MILES: (
        (10, TENTH),
        (math.inf, 1),
    ),
}

INTEGER_PATTERN = "#,##0"
TENTH_PATTERN = "#,##0.#"


def select_display_unit(meters: float, system: UnitSystem) -> DistanceUnit:
    """Pick the short unit up to the system's threshold and the long unit above it."""
    if meters > system.large_unit_threshold_meters:
        return system.long_unit
    return system.short_unit


def increment_for(value: float, unit: DistanceUnit) -> float:
    """Rounding increment of the band containing ``value``."""
    for upper_bound, increment in MAGNITUDE_BANDS[unit]:
        if value < upper_bound:
            return increment
    # Only reachable for NaN, which sanitize_magnitude already removed
    return MAGNITUDE_BANDS[unit][-1][1]


def round_distance(meters: float, system: UnitSystem) -> tuple[float, DistanceUnit, float]:
    """
    Convert and round a distance without rendering it.

    Args:
        meters: Raw distance in meters
        system: Unit system to display in

    Returns:
        Tuple of (rounded value, display unit, increment used)
    """
    meters = sanitize_magnitude(meters)
    unit = select_display_unit(meters, system)
    # Drop conversion noise so 1.25 mi stays a tie instead of 1.2499999999999998
    converted = round(unit.from_meters(meters), 9)
    increment = increment_for(converted, unit)
    return round_to_nearest(converted, increment), unit, increment


def format_distance(
    meters: float,
    system: UnitSystem,
    locale: LocaleInfo | str | None = None,
) -> str:
    """
    Format a distance in meters as a short, localized string.

    Args:
        meters: Raw distance in meters (negative values are clamped to 0)
        system: Unit system to display in
        locale: Locale (or locale tag) providing number symbols and unit labels

    Returns:
        Formatted string like "900 ft", "1.1 mi" or "1.000 km"
    """
    value, unit, increment = round_distance(meters, system)
    pattern = TENTH_PATTERN if increment < 1 else INTEGER_PATTERN
    return format_unit(
        value,
        unit.cldr_id,
        length="short",
        format=pattern,
        locale=coerce_locale(locale).to_babel(),
    )


class DistanceFormatter:
    """Distance formatter bound to a locale and an optional unit system override.

    When no override is given, the unit system follows the locale's region
    (e.g. ``en-US`` -> feet/miles, ``en-GB`` -> yards/miles, else metric).
    """

    def __init__(
        self,
        locale: LocaleInfo | str | None = None,
        unit_system: UnitSystem | None = None,
    ) -> None:
        self.locale = coerce_locale(locale)
        self.unit_system_override = unit_system

    @property
    def unit_system(self) -> UnitSystem:
        return resolve_for_locale(self.locale, self.unit_system_override)

    def format(self, meters: float) -> str:
        """Format a distance, given in meters, for display."""
        return format_distance(meters, self.unit_system, self.locale)
