"""Distance units, unit systems and region-based unit system resolution."""

import logging
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .locales import LocaleInfo

logger = logging.getLogger(__name__)


class DistanceUnit(str, Enum):
    """Units a distance can be displayed in."""

    METERS = "meters"
    KILOMETERS = "kilometers"
    FEET = "feet"
    YARDS = "yards"
    MILES = "miles"

    @property
    def meters_per_unit(self) -> float:
        """Length of one unit expressed in meters."""
        return METERS_PER_UNIT[self]

    @property
    def cldr_id(self) -> str:
        """CLDR measurement unit id used to look up localized labels."""
        return CLDR_LENGTH_UNITS[self]

    def from_meters(self, meters: float) -> float:
        """Convert a meter value into this unit."""
        return meters / self.meters_per_unit


class UnitSystem(str, Enum):
    """Coherent set of short/long distance units."""

    METRIC = "metric"  # meters + kilometers
    IMPERIAL_FEET = "imperial"  # feet + miles (US)
    IMPERIAL_YARDS = "imperial_yards"  # yards + miles (UK)

    @property
    def short_unit(self) -> DistanceUnit:
        return short_and_long_units(self)[0]

    @property
    def long_unit(self) -> DistanceUnit:
        return short_and_long_units(self)[1]

    @property
    def large_unit_threshold_meters(self) -> float:
        return threshold_for_large_unit(self)


# Conversion constants
METERS_PER_MILE = 1609.344
FEET_PER_METER = 3.28084
YARDS_PER_METER = 1.093613

METERS_PER_UNIT: dict[DistanceUnit, float] = {
    DistanceUnit.METERS: 1.0,
    DistanceUnit.KILOMETERS: 1000.0,
    DistanceUnit.FEET: 1 / FEET_PER_METER,
    DistanceUnit.YARDS: 1 / YARDS_PER_METER,
    DistanceUnit.MILES: METERS_PER_MILE,
}

CLDR_LENGTH_UNITS: dict[DistanceUnit, str] = {
    DistanceUnit.METERS: "length-meter",
    DistanceUnit.KILOMETERS: "length-kilometer",
    DistanceUnit.FEET: "length-foot",
    DistanceUnit.YARDS: "length-yard",
    DistanceUnit.MILES: "length-mile",
}

# (short unit, long unit, raw meters above which the long unit is used)
UNIT_SYSTEMS: dict[UnitSystem, tuple[DistanceUnit, DistanceUnit, float]] = {
    UnitSystem.METRIC: (DistanceUnit.METERS, DistanceUnit.KILOMETERS, 1000.0),
    # 289 m is just under 950 ft, where feet would round up to 1,000
    UnitSystem.IMPERIAL_FEET: (DistanceUnit.FEET, DistanceUnit.MILES, 289.0),
    # 300 m is roughly 0.2 mi
    UnitSystem.IMPERIAL_YARDS: (DistanceUnit.YARDS, DistanceUnit.MILES, 300.0),
}

# Regions that do not default to metric, keyed by ISO 3166 alpha-2 and alpha-3
REGION_UNIT_SYSTEMS: dict[str, UnitSystem] = {
    "US": UnitSystem.IMPERIAL_FEET,
    "USA": UnitSystem.IMPERIAL_FEET,
    "LR": UnitSystem.IMPERIAL_FEET,
    "LBR": UnitSystem.IMPERIAL_FEET,
    "MM": UnitSystem.IMPERIAL_FEET,
    "MMR": UnitSystem.IMPERIAL_FEET,
    "GB": UnitSystem.IMPERIAL_YARDS,
    "GBR": UnitSystem.IMPERIAL_YARDS,
}


def resolve_unit_system(region: str | None) -> UnitSystem:
    """
    Resolve the unit system used in a region.

    Args:
        region: ISO 3166 region code (alpha-2 or alpha-3), case-insensitive

    Returns:
        Imperial (feet) for US-like regions, imperial (yards) for the UK,
        metric for everything else including unknown or missing regions
    """
    if not region:
        logger.debug("No region given, defaulting to metric")
        return UnitSystem.METRIC

    code = region.strip().upper()
    if code in REGION_UNIT_SYSTEMS:
        return REGION_UNIT_SYSTEMS[code]

    if not code.isalpha() or len(code) not in (2, 3):
        logger.debug(f"Unrecognised region code {region!r}, defaulting to metric")
    return UnitSystem.METRIC


def resolve_for_locale(locale: "LocaleInfo", override: UnitSystem | None = None) -> UnitSystem:
    """Pick the unit system for a locale, honouring an explicit override first."""
    if override is not None:
        return override
    return resolve_unit_system(locale.region)


def threshold_for_large_unit(system: UnitSystem) -> float:
    """Raw meter value above which the long unit is preferred."""
    return UNIT_SYSTEMS[system][2]


def short_and_long_units(system: UnitSystem) -> tuple[DistanceUnit, DistanceUnit]:
    """Short and long distance units of a unit system (e.g. feet and miles)."""
    short_unit, long_unit, _ = UNIT_SYSTEMS[system]
    return short_unit, long_unit
