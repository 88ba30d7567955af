"""Pydantic value objects passed between callers and the formatters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .duration import DEFAULT_DURATION_UNITS, DurationStyle, DurationUnit, validate_duration_units
from .locales import LocaleInfo
from .speed import SpeedUnit, convert_speed
from .units import UnitSystem, resolve_for_locale

# Unit system selection as exposed to callers; "auto" follows the locale
UnitSystemChoice = Literal["auto", "metric", "imperial", "imperial_yards"]
MaxSpeedKind = Literal["no_limit", "unknown", "speed"]

# Units OSRM uses for maxspeed annotations
OSRM_SPEED_UNITS: frozenset[SpeedUnit] = frozenset(
    {SpeedUnit.KILOMETERS_PER_HOUR, SpeedUnit.MILES_PER_HOUR, SpeedUnit.KNOTS}
)


def parse_unit_system(choice: str | UnitSystem | None) -> UnitSystem | None:
    """Map a unit system choice to an override (``None`` for auto)."""
    if choice is None or isinstance(choice, UnitSystem):
        return choice
    choice = choice.strip().lower()
    if choice in ("", "auto"):
        return None
    return UnitSystem(choice)


class FormatterConfig(BaseModel):
    """Immutable formatting configuration held by a UI layer for a screen's lifetime."""

    model_config = ConfigDict(frozen=True)

    locale: LocaleInfo = Field(default_factory=LocaleInfo)
    unit_system: UnitSystem | None = None
    duration_units: tuple[DurationUnit, ...] = DEFAULT_DURATION_UNITS
    duration_style: DurationStyle = DurationStyle.SHORT
    show_leading_zero: bool = False

    @field_validator("locale", mode="before")
    @classmethod
    def coerce_locale(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return LocaleInfo.parse(value)
        return value

    @field_validator("unit_system", mode="before")
    @classmethod
    def coerce_unit_system(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return parse_unit_system(value)
        return value

    @field_validator("duration_units", mode="before")
    @classmethod
    def split_duration_units(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [part.strip().lower() for part in value.split(",") if part.strip()]
        return value

    @field_validator("duration_units")
    @classmethod
    def check_duration_units(cls, value: tuple[DurationUnit, ...]) -> tuple[DurationUnit, ...]:
        return validate_duration_units(value)

    @property
    def resolved_unit_system(self) -> UnitSystem:
        """The override if set, otherwise the unit system of the locale's region."""
        return resolve_for_locale(self.locale, self.unit_system)

    def with_overrides(self, **changes: Any) -> FormatterConfig:
        """A copy with the given fields replaced; ``None`` values are ignored.

        Unlike ``model_copy`` the result is validated again.
        """
        values = self.model_dump()
        values.update({key: value for key, value in changes.items() if value is not None})
        return FormatterConfig(**values)


class MaxSpeed(BaseModel):
    """OSRM-style ``maxspeed`` annotation.

    See https://wiki.openstreetmap.org/wiki/Key:maxspeed. The wire format is
    one of ``{"none": true}``, ``{"unknown": true}`` or
    ``{"speed": 50, "unit": "km/h"}``.
    """

    model_config = ConfigDict(frozen=True)

    kind: MaxSpeedKind
    value: float | None = None
    unit: SpeedUnit | None = None

    @model_validator(mode="after")
    def check_value(self) -> MaxSpeed:
        if self.kind == "speed" and (self.value is None or self.unit is None):
            raise ValueError("A speed limit needs both a value and a unit")
        if self.kind != "speed" and (self.value is not None or self.unit is not None):
            raise ValueError(f"A {self.kind!r} speed limit has no value or unit")
        return self

    @classmethod
    def no_limit(cls) -> MaxSpeed:
        return cls(kind="no_limit")

    @classmethod
    def unknown(cls) -> MaxSpeed:
        return cls(kind="unknown")

    @classmethod
    def speed(cls, value: float, unit: SpeedUnit) -> MaxSpeed:
        return cls(kind="speed", value=value, unit=unit)

    @classmethod
    def from_osrm(cls, data: Mapping[str, Any]) -> MaxSpeed:
        """
        Decode an OSRM ``maxspeed`` entry.

        Raises:
            ValueError: If the entry matches none of the known shapes or uses a
                unit other than km/h, mph or knots
        """
        if data.get("none") is True:
            return cls.no_limit()
        if data.get("unknown") is True:
            return cls.unknown()
        if data.get("speed") is not None and data.get("unit") is not None:
            unit = SpeedUnit(data["unit"])
            if unit not in OSRM_SPEED_UNITS:
                raise ValueError(f"Unsupported maxspeed unit: {unit.value!r}")
            return cls.speed(float(data["speed"]), unit)
        raise ValueError(f"Invalid maxspeed entry: {dict(data)!r}")

    def to_osrm(self) -> dict[str, Any]:
        """Encode back to the OSRM wire shape."""
        if self.kind == "no_limit":
            return {"none": True}
        if self.kind == "unknown":
            return {"unknown": True}
        assert self.unit is not None
        return {"speed": self.value, "unit": self.unit.value}

    def to_speed(self, unit: SpeedUnit) -> float | None:
        """The limit in ``unit``: ``inf`` when unlimited, ``None`` when unknown."""
        if self.kind == "no_limit":
            return float("inf")
        if self.kind == "unknown":
            return None
        assert self.value is not None and self.unit is not None
        return convert_speed(self.value, self.unit, unit)


class TripProgress(BaseModel):
    """Raw progress values reported by the navigation engine (SI units)."""

    model_config = ConfigDict(frozen=True)

    distance_to_next_maneuver: float
    distance_remaining: float
    duration_remaining: float
