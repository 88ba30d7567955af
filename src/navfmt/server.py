"""navfmt MCP Server - Main entry point."""

import argparse
import logging

from fastmcp import Context, FastMCP

from .config import FormattingSettings, load_settings
from .middleware import FormatterConfigMiddleware

logger = logging.getLogger(__name__)


def create_server(settings: FormattingSettings | None = None) -> FastMCP:
    """Create and configure the FastMCP server.

    Args:
        settings: Formatting defaults; loaded from the environment when omitted

    Returns:
        Configured FastMCP instance

    Raises:
        pydantic.ValidationError: If the settings describe an invalid configuration
    """
    settings = settings or load_settings()
    config = settings.to_formatter_config()
    logger.info(
        f"Formatting defaults: locale={config.locale}, "
        f"unit_system={config.resolved_unit_system.value}"
    )

    mcp = FastMCP("navfmt")

    # Every request sees the same immutable default configuration
    mcp.add_middleware(FormatterConfigMiddleware(config))

    # Import and register tools
    from .tools.measurements import format_distance, format_duration, format_trip_progress
    from .tools.speed import convert_speed, format_max_speed
    from .tools.units import resolve_unit_system

    for tool in (
        format_distance,
        format_duration,
        format_trip_progress,
        convert_speed,
        format_max_speed,
        resolve_unit_system,
    ):
        mcp.tool(
            annotations={
                "readOnlyHint": True,
                "idempotentHint": True,
                "openWorldHint": False,
            }
        )(tool)

    # MCP Resources - Provide ongoing context
    @mcp.resource(
        "navfmt://config",
        annotations={
            "readOnlyHint": True,
        },
    )
    async def formatter_config_resource(ctx: Context) -> str:  # type: ignore[reportUnusedFunction]
        """Default locale, unit system and duration settings used by every tool."""
        from .response_builder import ResponseBuilder

        active = ctx.get_state("config") or config
        data = {
            "locale": active.locale.identifier,
            "unit_system": active.unit_system.value if active.unit_system else "auto",
            "resolved_unit_system": active.resolved_unit_system.value,
            "duration_units": [unit.value for unit in active.duration_units],
            "duration_style": active.duration_style.value,
            "show_leading_zero": active.show_leading_zero,
        }
        return ResponseBuilder.build_response(data, metadata={"type": "formatter_config"})

    # MCP Prompts - Templates for common queries
    @mcp.prompt()
    async def describe_trip_progress(  # type: ignore[reportUnusedFunction]
        distance_to_next_maneuver: float,
        distance_remaining: float,
        duration_remaining: float,
    ) -> str:
        """Describe the current trip progress for a driver.

        Args:
            distance_to_next_maneuver: Meters to the next turn
            distance_remaining: Meters to the destination
            duration_remaining: Seconds to the destination
        """
        return f"""Describe my current trip progress in one or two short sentences.

Use format_trip_progress with distance_to_next_maneuver={distance_to_next_maneuver},
distance_remaining={distance_remaining} and duration_remaining={duration_remaining}.

Then:
1. Say how far away the next maneuver is, using the formatted distance as-is
2. Give the remaining distance and time to the destination
3. Keep the wording suitable for reading aloud while driving"""

    return mcp


def main():
    """Main entry point for the navfmt MCP server."""
    parser = argparse.ArgumentParser(description="navfmt MCP Server")
    parser.add_argument(
        "--transport",
        type=str,
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode: stdio (default) or http",
    )
    args = parser.parse_args()

    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    mcp = create_server(settings)

    if args.transport == "http":
        mcp.run(transport="streamable-http", host=settings.host, port=settings.port)
    else:
        # Stdio mode (default)
        mcp.run()


if __name__ == "__main__":
    main()
