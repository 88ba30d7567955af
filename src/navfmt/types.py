"""Type definitions for structured JSON responses.

This module defines TypedDict classes for the structured JSON responses
returned by the MCP tools.
"""

from typing import Any, NotRequired, TypedDict


# Basic value types with formatting
class FormattedDistance(TypedDict):
    """Distance with raw, rounded and formatted values."""

    meters: float
    value: float
    unit: str
    formatted: str


class FormattedDuration(TypedDict):
    """Duration with raw, decomposed and formatted values."""

    seconds: float
    components: dict[str, int]
    formatted: str


class FormattedSpeed(TypedDict):
    """Speed with raw, converted and formatted values."""

    value: float
    unit: str
    converted: float
    converted_unit: str
    formatted: str


class FormattedMaxSpeed(TypedDict):
    """Speed limit with its wire form and display string."""

    osrm: dict[str, Any]
    kind: str
    converted: float | None
    converted_unit: str
    formatted: str | None


class UnitSystemInfo(TypedDict):
    """Resolved unit system details."""

    region: str | None
    unit_system: str
    short_unit: str
    long_unit: str
    threshold_meters: float
    speed_unit: str


# Response structure types
class ErrorDetail(TypedDict):
    """Error payload."""

    message: str
    type: str
    timestamp: str
    suggestions: NotRequired[list[str]]


class ErrorResponse(TypedDict):
    """Error response envelope."""

    error: ErrorDetail
