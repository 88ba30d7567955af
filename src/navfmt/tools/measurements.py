"""Distance, duration and trip progress tools for the navfmt MCP server.

This module provides the formatting tools a navigation UI calls for every
progress update, with structured JSON output.
"""

from typing import Annotated, Literal

from fastmcp import Context

from ..duration import DurationUnit
from ..middleware import formatters_from_context
from ..models import TripProgress, UnitSystemChoice
from ..response_builder import ResponseBuilder


async def format_distance(
    meters: Annotated[float, "Distance in meters"],
    locale: Annotated[str | None, "Locale tag such as 'de-DE' (defaults to the server locale)"] = None,
    unit_system: Annotated[
        UnitSystemChoice | None,
        "Unit system: 'auto' (follow the locale), 'metric', 'imperial' or 'imperial_yards'",
    ] = None,
    ctx: Context | None = None,
) -> str:
    """Format a distance the way turn-by-turn banners show it.

    The value is rounded to a magnitude-dependent increment (e.g. 260 m becomes
    "900 ft", 8,145 m becomes "8.1 km") and labelled in the locale's language.

    Returns: JSON string with structure:
    {
        "data": {
            "distance": {
                "meters": 260.0,
                "value": 900.0,
                "unit": "feet",
                "formatted": "900 ft"
            }
        },
        "metadata": {
            "formatted_at": "ISO timestamp",
            "query_type": "distance",
            "locale": "en_US",
            "unit_system": "imperial"
        }
    }

    Examples:
        - Server defaults: format_distance(meters=1500)
        - German metric: format_distance(meters=8145, locale="de-DE")
        - Force yards: format_distance(meters=275, unit_system="imperial_yards")
    """
    try:
        formatters = formatters_from_context(ctx, locale=locale, unit_system=unit_system)
    except ValueError as e:
        return ResponseBuilder.build_error_response(
            str(e),
            error_type="validation",
            suggestions=["Use a locale tag like 'en-US' and a known unit system"],
        )

    data = {"distance": ResponseBuilder.format_distance(meters, formatters)}
    return ResponseBuilder.build_response(
        data,
        metadata=ResponseBuilder.build_metadata(formatters),
        query_type="distance",
    )


async def format_duration(
    seconds: Annotated[float, "Duration in seconds"],
    units: Annotated[
        list[DurationUnit] | None,
        "Units to render, largest first (default: hours and minutes)",
    ] = None,
    style: Annotated[
        Literal["short", "long"] | None,
        "Label style: 'short' (1h 5m) or 'long' (1 hour 5 minutes)",
    ] = None,
    locale: Annotated[str | None, "Locale tag such as 'fr-FR'"] = None,
    show_leading_zero: Annotated[
        bool | None, "Always render the first unit, even when zero (0h 5m)"
    ] = None,
    ctx: Context | None = None,
) -> str:
    """Format a duration into day/hour/minute/second components.

    Zero components are omitted unless show_leading_zero is set, and the
    output is never empty.

    Returns: JSON string with structure:
    {
        "data": {
            "duration": {
                "seconds": 90060.0,
                "components": {"hours": 25, "minutes": 1},
                "formatted": "25h 1m"
            }
        },
        "metadata": {...}
    }

    Examples:
        - Default units: format_duration(seconds=90060)
        - Long labels: format_duration(seconds=90060, style="long")
        - Seconds only: format_duration(seconds=5999, units=["seconds"])
    """
    try:
        formatters = formatters_from_context(
            ctx,
            locale=locale,
            duration_units=units,
            duration_style=style,
            show_leading_zero=show_leading_zero,
        )
    except ValueError as e:
        return ResponseBuilder.build_error_response(
            str(e),
            error_type="validation",
            suggestions=[
                "Units must be distinct and ordered largest to smallest, "
                "e.g. ['days', 'hours', 'minutes']"
            ],
        )

    data = {"duration": ResponseBuilder.format_duration(seconds, formatters)}
    metadata = ResponseBuilder.build_metadata(formatters)
    metadata["duration_units"] = [unit.value for unit in formatters.duration.units]
    metadata["duration_style"] = formatters.duration.style.value
    return ResponseBuilder.build_response(data, metadata=metadata, query_type="duration")


async def format_trip_progress(
    distance_to_next_maneuver: Annotated[float, "Distance to the next maneuver in meters"],
    distance_remaining: Annotated[float, "Distance to the destination in meters"],
    duration_remaining: Annotated[float, "Time to the destination in seconds"],
    locale: Annotated[str | None, "Locale tag such as 'en-GB'"] = None,
    unit_system: Annotated[
        UnitSystemChoice | None,
        "Unit system: 'auto', 'metric', 'imperial' or 'imperial_yards'",
    ] = None,
    ctx: Context | None = None,
) -> str:
    """Format a full trip progress update in one call.

    Returns: JSON string with structure:
    {
        "data": {
            "next_maneuver": {"meters": ..., "value": ..., "unit": "...", "formatted": "..."},
            "remaining": {
                "distance": {...},
                "duration": {...}
            },
            "summary": "12 mi · 25h 1m"
        },
        "metadata": {...}
    }
    """
    try:
        formatters = formatters_from_context(ctx, locale=locale, unit_system=unit_system)
        progress = TripProgress(
            distance_to_next_maneuver=distance_to_next_maneuver,
            distance_remaining=distance_remaining,
            duration_remaining=duration_remaining,
        )
    except ValueError as e:
        return ResponseBuilder.build_error_response(str(e), error_type="validation")

    formatted = formatters.format_trip_progress(progress)
    data = {
        "next_maneuver": ResponseBuilder.format_distance(
            progress.distance_to_next_maneuver, formatters
        ),
        "remaining": {
            "distance": ResponseBuilder.format_distance(progress.distance_remaining, formatters),
            "duration": ResponseBuilder.format_duration(progress.duration_remaining, formatters),
        },
        "summary": f"{formatted['distance_remaining']} · {formatted['duration_remaining']}",
    }
    return ResponseBuilder.build_response(
        data,
        metadata=ResponseBuilder.build_metadata(formatters),
        query_type="trip_progress",
    )
