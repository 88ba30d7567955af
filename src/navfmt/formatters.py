"""Formatter collection built from a single FormatterConfig.

UI layers (banner views, notification builders, CarPlay estimate builders)
hold one collection per screen instead of configuring formatters one by one.
"""

from .distance import DistanceFormatter
from .duration import DurationFormatter
from .models import FormatterConfig, MaxSpeed, TripProgress
from .speed import SpeedFormatter, SpeedUnit, speed_unit_for


class FormatterCollection:
    """Distance, duration and speed formatters sharing one configuration."""

    def __init__(self, config: FormatterConfig | None = None) -> None:
        self.config = config or FormatterConfig()
        self.distance = DistanceFormatter(self.config.locale, self.config.unit_system)
        self.duration = DurationFormatter(
            self.config.duration_units,
            self.config.duration_style,
            self.config.locale,
            self.config.show_leading_zero,
        )
        self.speed = SpeedFormatter(self.config.locale)

    @property
    def speed_unit(self) -> SpeedUnit:
        """Speed unit matching the configured distance unit system."""
        return speed_unit_for(self.config.resolved_unit_system)

    def format_speed(self, meters_per_second: float) -> str:
        """Format a raw m/s speed in the unit system's road speed unit."""
        return self.speed.formatted(
            meters_per_second, SpeedUnit.METERS_PER_SECOND, converted=self.speed_unit
        )

    def format_max_speed(self, max_speed: MaxSpeed) -> str | None:
        """
        Format a speed limit for display.

        Returns:
            "50 km/h"-style string, "No limit" for unlimited roads, or None
            when the limit is unknown
        """
        if max_speed.kind == "unknown":
            return None
        if max_speed.kind == "no_limit":
            return "No limit"
        assert max_speed.value is not None and max_speed.unit is not None
        return self.speed.formatted(max_speed.value, max_speed.unit, converted=self.speed_unit)

    def format_trip_progress(self, progress: TripProgress) -> dict[str, str]:
        """Format every field of a trip progress update."""
        return {
            "distance_to_next_maneuver": self.distance.format(progress.distance_to_next_maneuver),
            "distance_remaining": self.distance.format(progress.distance_remaining),
            "duration_remaining": self.duration.format(progress.duration_remaining),
        }
