"""Unit system lookup tool for the navfmt MCP server."""

from typing import Annotated

from ..response_builder import ResponseBuilder
from ..speed import speed_unit_for
from ..types import UnitSystemInfo
from ..units import resolve_unit_system as resolve_region_unit_system


async def resolve_unit_system(
    region: Annotated[str | None, "ISO 3166 region code such as 'US', 'GB' or 'DEU'"] = None,
) -> str:
    """Look up the distance unit system a region uses.

    US, Liberia and Myanmar use feet and miles, the UK uses yards and miles,
    every other (or unknown) region is metric.

    Returns: JSON string with structure:
    {
        "data": {
            "region": "GB",
            "unit_system": "imperial_yards",
            "short_unit": "yards",
            "long_unit": "miles",
            "threshold_meters": 300.0,
            "speed_unit": "mph"
        },
        "metadata": {...}
    }
    """
    system = resolve_region_unit_system(region)
    info: UnitSystemInfo = {
        "region": region.strip().upper() if region else None,
        "unit_system": system.value,
        "short_unit": system.short_unit.value,
        "long_unit": system.long_unit.value,
        "threshold_meters": system.large_unit_threshold_meters,
        "speed_unit": speed_unit_for(system).value,
    }
    return ResponseBuilder.build_response(dict(info), query_type="unit_system")
