"""Response builder utilities for structured JSON output.

This module provides utilities for building consistent, structured JSON responses
across all MCP tools. All tools return JSON with a standard structure:

{
    "data": {...},           # Main data payload
    "metadata": {...}        # Locale, unit system, timestamp
}
"""

import json
from datetime import datetime
from enum import Enum
from typing import Any, cast

from .distance import round_distance
from .duration import decompose_duration
from .formatters import FormatterCollection
from .models import MaxSpeed
from .speed import SpeedUnit, convert_speed
from .types import (
    ErrorResponse,
    FormattedDistance,
    FormattedDuration,
    FormattedMaxSpeed,
    FormattedSpeed,
)


def _to_jsonable(obj: Any) -> Any:
    """Recursively convert enums and datetimes to JSON friendly values."""
    if isinstance(obj, Enum):
        return obj.value
    elif isinstance(obj, datetime):
        return obj.isoformat()
    elif isinstance(obj, dict):
        return {str(k): _to_jsonable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [_to_jsonable(item) for item in obj]
    return obj


class ResponseBuilder:
    """Builder for standardized JSON responses."""

    @staticmethod
    def build_response(
        data: dict[str, Any],
        metadata: dict[str, Any] | None = None,
        query_type: str | None = None,
    ) -> str:
        """Build standardized JSON response.

        Args:
            data: Main data payload
            metadata: Optional metadata (will be enriched with timestamp)
            query_type: Optional query type for metadata

        Returns:
            JSON string with structure:
            {
                "data": {...},
                "metadata": {
                    "formatted_at": "ISO timestamp",
                    "query_type": "...",
                    ...
                }
            }
        """
        response: dict[str, Any] = {"data": _to_jsonable(data)}

        meta = cast(dict[str, Any], _to_jsonable(metadata or {}))
        meta["formatted_at"] = datetime.now().isoformat()
        if query_type:
            meta["query_type"] = query_type

        response["metadata"] = meta

        return json.dumps(response, indent=2, ensure_ascii=False)

    @staticmethod
    def build_error_response(
        error_message: str,
        error_type: str = "error",
        suggestions: list[str] | None = None,
    ) -> str:
        """Build standardized error response.

        Args:
            error_message: Human-readable error message
            error_type: Type of error (e.g., "validation")
            suggestions: Optional list of suggestions to resolve the error

        Returns:
            JSON string with error structure
        """
        response: ErrorResponse = {
            "error": {
                "message": error_message,
                "type": error_type,
                "timestamp": datetime.now().isoformat(),
            }
        }

        if suggestions:
            response["error"]["suggestions"] = suggestions

        return json.dumps(response, indent=2, ensure_ascii=False)

    @staticmethod
    def build_metadata(formatters: FormatterCollection) -> dict[str, Any]:
        """Metadata describing the configuration a response was formatted with."""
        return {
            "locale": formatters.config.locale.identifier,
            "unit_system": formatters.config.resolved_unit_system.value,
        }

    @staticmethod
    def format_distance(meters: float, formatters: FormatterCollection) -> FormattedDistance:
        """Format a distance with raw, rounded and formatted values."""
        value, unit, _ = round_distance(meters, formatters.distance.unit_system)
        return {
            "meters": meters,
            "value": value,
            "unit": unit.value,
            "formatted": formatters.distance.format(meters),
        }

    @staticmethod
    def format_duration(seconds: float, formatters: FormatterCollection) -> FormattedDuration:
        """Format a duration with its per-unit breakdown."""
        components = decompose_duration(seconds, formatters.duration.units)
        return {
            "seconds": seconds,
            "components": {unit.value: value for unit, value in components},
            "formatted": formatters.duration.format(seconds),
        }

    @staticmethod
    def format_speed(
        value: float,
        unit: SpeedUnit,
        converted_unit: SpeedUnit,
        formatters: FormatterCollection,
    ) -> FormattedSpeed:
        """Format a speed converted into another unit."""
        return {
            "value": value,
            "unit": unit.value,
            "converted": convert_speed(value, unit, converted_unit),
            "converted_unit": converted_unit.value,
            "formatted": formatters.speed.formatted(value, unit, converted=converted_unit),
        }

    @staticmethod
    def format_max_speed(
        max_speed: MaxSpeed, formatters: FormatterCollection
    ) -> FormattedMaxSpeed:
        """Format a speed limit in the configured road speed unit."""
        speed_unit = formatters.speed_unit
        # JSON has no infinity; an unlimited road has no converted value
        converted = max_speed.to_speed(speed_unit) if max_speed.kind == "speed" else None
        return {
            "osrm": max_speed.to_osrm(),
            "kind": max_speed.kind,
            "converted": converted,
            "converted_unit": speed_unit.value,
            "formatted": formatters.format_max_speed(max_speed),
        }
