"""Duration formatting into an ordered set of day/hour/minute/second components."""

from collections.abc import Sequence
from enum import Enum

from babel.units import format_unit

from .locales import LocaleInfo, coerce_locale
from .rounding import sanitize_magnitude


class DurationUnit(str, Enum):
    """Units a duration can be broken down into."""

    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"

    @property
    def seconds(self) -> int:
        """Number of seconds in one unit."""
        return SECONDS_PER_UNIT[self]

    @property
    def cldr_id(self) -> str:
        return f"duration-{self.value[:-1]}"


class DurationStyle(str, Enum):
    """Short ("23h") or long ("23 hours") unit labels."""

    SHORT = "short"
    LONG = "long"


SECONDS_PER_UNIT: dict[DurationUnit, int] = {
    DurationUnit.DAYS: 24 * 60 * 60,
    DurationUnit.HOURS: 60 * 60,
    DurationUnit.MINUTES: 60,
    DurationUnit.SECONDS: 1,
}

# CLDR "narrow" is the abbreviated form without a space ("1h", "5m")
CLDR_LENGTHS: dict[DurationStyle, str] = {
    DurationStyle.SHORT: "narrow",
    DurationStyle.LONG: "long",
}

DEFAULT_DURATION_UNITS: tuple[DurationUnit, ...] = (DurationUnit.HOURS, DurationUnit.MINUTES)


def validate_duration_units(units: Sequence[DurationUnit]) -> tuple[DurationUnit, ...]:
    """
    Check that a unit list is usable for decomposition.

    Args:
        units: Units, largest first

    Returns:
        The units as a tuple

    Raises:
        ValueError: If the list is empty, has duplicates or is not ordered
            from largest to smallest
    """
    units = tuple(DurationUnit(unit) for unit in units)
    if not units:
        raise ValueError("At least one duration unit is required")
    if len(set(units)) != len(units):
        raise ValueError(f"Duplicate duration units: {[unit.value for unit in units]}")
    if any(a.seconds <= b.seconds for a, b in zip(units, units[1:])):
        raise ValueError(
            f"Duration units must be ordered largest to smallest, got {[unit.value for unit in units]}"
        )
    return units


def decompose_duration(
    total_seconds: float,
    units: Sequence[DurationUnit] = DEFAULT_DURATION_UNITS,
) -> list[tuple[DurationUnit, int]]:
    """
    Split a duration into whole components, one per unit.

    Fractional seconds are truncated; the smallest unit absorbs whatever
    remains after the larger units are taken out.

    Args:
        total_seconds: Duration in seconds (negative values are clamped to 0)
        units: Units to split into, largest first

    Returns:
        List of (unit, value) pairs in unit order
    """
    remainder = int(sanitize_magnitude(total_seconds, kind="duration"))
    components: list[tuple[DurationUnit, int]] = []
    for unit in units:
        value = remainder // unit.seconds
        remainder -= value * unit.seconds
        components.append((unit, value))
    return components


def format_duration(
    total_seconds: float,
    units: Sequence[DurationUnit] = DEFAULT_DURATION_UNITS,
    style: DurationStyle = DurationStyle.SHORT,
    locale: LocaleInfo | str | None = None,
    show_leading_zero: bool = False,
) -> str:
    """
    Format a duration in seconds to a human-readable string.

    Zero components are dropped, except that the result is never empty
    (``"0m"``) and, with ``show_leading_zero``, the first unit is always
    shown (``"0h 5m"``).

    Args:
        total_seconds: Duration in seconds
        units: Units to render, largest first
        style: Short ("1h 5m") or long ("1 hour 5 minutes") labels
        locale: Locale providing unit labels and plural rules
        show_leading_zero: Render the first unit even when it is zero

    Returns:
        Formatted string like "23h 59m" or "25 hours 1 minute"
    """
    units = validate_duration_units(units)
    components = decompose_duration(total_seconds, units)

    visible = [
        (unit, value)
        for index, (unit, value) in enumerate(components)
        if value > 0 or (show_leading_zero and index == 0)
    ]
    if not visible:
        visible = [components[-1]]

    babel_locale = coerce_locale(locale).to_babel()
    length = CLDR_LENGTHS[DurationStyle(style)]
    return " ".join(
        format_unit(value, unit.cldr_id, length=length, format="0", locale=babel_locale)
        for unit, value in visible
    )


class DurationFormatter:
    """Duration formatter bound to a unit list, style and locale."""

    def __init__(
        self,
        units: Sequence[DurationUnit] = DEFAULT_DURATION_UNITS,
        style: DurationStyle = DurationStyle.SHORT,
        locale: LocaleInfo | str | None = None,
        show_leading_zero: bool = False,
    ) -> None:
        self.units = validate_duration_units(units)
        self.style = DurationStyle(style)
        self.locale = coerce_locale(locale)
        self.show_leading_zero = show_leading_zero

    def format(self, total_seconds: float) -> str:
        """Format a duration in seconds into a human-readable string."""
        return format_duration(
            total_seconds,
            self.units,
            self.style,
            self.locale,
            self.show_leading_zero,
        )
