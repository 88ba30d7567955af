"""Tests for the distance, duration and trip progress tools."""

import json

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from tests.helpers import call_tool_json, get_text_content


class TestFormatDistance:
    """Test format_distance tool."""

    async def test_server_defaults(self, mcp):
        """Test formatting with the server's en-US defaults."""
        async with Client(mcp) as client:
            data = await call_tool_json(client, "format_distance", {"meters": 260})

        distance = data["data"]["distance"]
        assert distance["meters"] == 260
        assert distance["value"] == 900
        assert distance["unit"] == "feet"
        assert distance["formatted"] == "900 ft"

        metadata = data["metadata"]
        assert metadata["locale"] == "en_US"
        assert metadata["unit_system"] == "imperial"
        assert metadata["query_type"] == "distance"
        assert "formatted_at" in metadata

    async def test_locale_override(self, mcp):
        """Test that a locale argument changes symbols and unit system."""
        async with Client(mcp) as client:
            data = await call_tool_json(
                client, "format_distance", {"meters": 8145, "locale": "de-DE"}
            )

        assert data["data"]["distance"]["formatted"] == "8,1 km"
        assert data["metadata"]["unit_system"] == "metric"

    async def test_unit_system_override(self, mcp):
        """Test that an explicit unit system wins over the locale."""
        async with Client(mcp) as client:
            data = await call_tool_json(
                client, "format_distance", {"meters": 275, "unit_system": "imperial_yards"}
            )

        assert data["data"]["distance"]["formatted"] == "300 yd"
        assert data["metadata"]["unit_system"] == "imperial_yards"

    async def test_auto_unit_system_follows_locale(self, mcp):
        """Test that 'auto' picks the unit system from the locale."""
        async with Client(mcp) as client:
            data = await call_tool_json(
                client,
                "format_distance",
                {"meters": 20, "locale": "en-GB", "unit_system": "auto"},
            )

        assert data["data"]["distance"]["formatted"] == "20 yd"

    async def test_invalid_unit_system(self, mcp):
        """Test that an unknown unit system is rejected by argument validation."""
        async with Client(mcp) as client:
            with pytest.raises(ToolError):
                await client.call_tool(
                    "format_distance", {"meters": 100, "unit_system": "furlongs"}
                )

    async def test_tie_rounds_up(self, mcp):
        """Test that 1,150 m rounds to 1.2 km with a clean JSON value."""
        async with Client(mcp) as client:
            data = await call_tool_json(
                client, "format_distance", {"meters": 1150, "unit_system": "metric"}
            )

        assert data["data"]["distance"]["value"] == 1.2
        assert data["data"]["distance"]["formatted"] == "1.2 km"


class TestFormatDuration:
    """Test format_duration tool."""

    async def test_defaults(self, mcp):
        """Test hours and minutes in short style."""
        async with Client(mcp) as client:
            data = await call_tool_json(client, "format_duration", {"seconds": 90060})

        duration = data["data"]["duration"]
        assert duration["seconds"] == 90060
        assert duration["components"] == {"hours": 25, "minutes": 1}
        assert duration["formatted"] == "25h 1m"
        assert data["metadata"]["duration_units"] == ["hours", "minutes"]
        assert data["metadata"]["duration_style"] == "short"

    async def test_long_style(self, mcp):
        """Test long labels."""
        async with Client(mcp) as client:
            data = await call_tool_json(
                client, "format_duration", {"seconds": 90060, "style": "long"}
            )

        assert data["data"]["duration"]["formatted"] == "25 hours 1 minute"

    async def test_seconds_only(self, mcp):
        """Test a single seconds unit."""
        async with Client(mcp) as client:
            data = await call_tool_json(
                client, "format_duration", {"seconds": 5999, "units": ["seconds"]}
            )

        assert data["data"]["duration"]["formatted"] == "5999s"
        assert data["data"]["duration"]["components"] == {"seconds": 5999}

    async def test_show_leading_zero(self, mcp):
        """Test forcing the first unit to render."""
        async with Client(mcp) as client:
            data = await call_tool_json(
                client, "format_duration", {"seconds": 300, "show_leading_zero": True}
            )

        assert data["data"]["duration"]["formatted"] == "0h 5m"

    async def test_invalid_unit_order(self, mcp):
        """Test that a mis-ordered unit list returns a validation error."""
        async with Client(mcp) as client:
            result = await client.call_tool(
                "format_duration", {"seconds": 60, "units": ["minutes", "hours"]}
            )

            assert result.is_error is False
            data = json.loads(get_text_content(result))

        assert "error" in data
        assert data["error"]["type"] == "validation"
        assert "largest to smallest" in data["error"]["message"]
        assert data["error"]["suggestions"]


class TestFormatTripProgress:
    """Test format_trip_progress tool."""

    async def test_trip_progress(self, mcp):
        """Test a full progress update in the server's unit system."""
        async with Client(mcp) as client:
            data = await call_tool_json(
                client,
                "format_trip_progress",
                {
                    "distance_to_next_maneuver": 260,
                    "distance_remaining": 19_312,
                    "duration_remaining": 90_060,
                },
            )

        assert data["data"]["next_maneuver"]["formatted"] == "900 ft"
        assert data["data"]["remaining"]["distance"]["formatted"] == "12 mi"
        assert data["data"]["remaining"]["duration"]["formatted"] == "25h 1m"
        assert data["data"]["summary"] == "12 mi · 25h 1m"
        assert data["metadata"]["query_type"] == "trip_progress"

    async def test_trip_progress_metric(self, mcp):
        """Test a progress update with a German locale."""
        async with Client(mcp) as client:
            data = await call_tool_json(
                client,
                "format_trip_progress",
                {
                    "distance_to_next_maneuver": 43,
                    "distance_remaining": 8_145,
                    "duration_remaining": 300,
                    "locale": "de-DE",
                },
            )

        assert data["data"]["next_maneuver"]["formatted"] == "40 m"
        assert data["data"]["remaining"]["distance"]["formatted"] == "8,1 km"
        assert data["data"]["summary"].startswith("8,1 km · ")
