"""Speed tools for the navfmt MCP server."""

from typing import Annotated, Any

from fastmcp import Context

from ..middleware import formatters_from_context
from ..models import MaxSpeed, UnitSystemChoice
from ..response_builder import ResponseBuilder
from ..speed import SpeedUnit


async def convert_speed(
    value: Annotated[float, "Speed value in from_unit"],
    from_unit: Annotated[SpeedUnit, "Unit of the value: 'm/s', 'mph', 'km/h' or 'knots'"],
    to_unit: Annotated[SpeedUnit, "Target unit: 'm/s', 'mph', 'km/h' or 'knots'"],
    locale: Annotated[str | None, "Locale tag used for the formatted string"] = None,
    ctx: Context | None = None,
) -> str:
    """Convert a speed between units.

    The converted value is exact; only the formatted string is rounded to a
    whole number.

    Returns: JSON string with structure:
    {
        "data": {
            "speed": {
                "value": 10.0,
                "unit": "m/s",
                "converted": 36.0,
                "converted_unit": "km/h",
                "formatted": "36 km/h"
            }
        },
        "metadata": {...}
    }

    Examples:
        - m/s to km/h: convert_speed(value=10, from_unit="m/s", to_unit="km/h")
        - km/h to mph: convert_speed(value=100, from_unit="km/h", to_unit="mph")
    """
    try:
        formatters = formatters_from_context(ctx, locale=locale)
    except ValueError as e:
        return ResponseBuilder.build_error_response(str(e), error_type="validation")

    data = {"speed": ResponseBuilder.format_speed(value, from_unit, to_unit, formatters)}
    return ResponseBuilder.build_response(
        data,
        metadata={"locale": formatters.config.locale.identifier},
        query_type="speed",
    )


async def format_max_speed(
    max_speed: Annotated[
        dict[str, Any],
        "OSRM maxspeed entry: {'speed': 50, 'unit': 'km/h'}, {'none': true} or {'unknown': true}",
    ],
    locale: Annotated[str | None, "Locale tag such as 'en-US'"] = None,
    unit_system: Annotated[
        UnitSystemChoice | None,
        "Unit system deciding the display unit: metric shows km/h, imperial shows mph",
    ] = None,
    ctx: Context | None = None,
) -> str:
    """Format a road speed limit from an OSRM route annotation.

    Limits are shown in the unit system's road speed unit. Unlimited roads are
    formatted as "No limit"; unknown limits have no formatted value.

    Returns: JSON string with structure:
    {
        "data": {
            "max_speed": {
                "osrm": {"speed": 50, "unit": "km/h"},
                "kind": "speed",
                "converted": 31.07,
                "converted_unit": "mph",
                "formatted": "31 mph"
            }
        },
        "metadata": {...}
    }
    """
    try:
        formatters = formatters_from_context(ctx, locale=locale, unit_system=unit_system)
        limit = MaxSpeed.from_osrm(max_speed)
    except ValueError as e:
        return ResponseBuilder.build_error_response(
            str(e),
            error_type="validation",
            suggestions=[
                "Pass {'speed': <number>, 'unit': 'km/h' | 'mph' | 'knots'}, "
                "{'none': true} or {'unknown': true}"
            ],
        )

    data = {"max_speed": ResponseBuilder.format_max_speed(limit, formatters)}
    return ResponseBuilder.build_response(
        data,
        metadata=ResponseBuilder.build_metadata(formatters),
        query_type="max_speed",
    )
