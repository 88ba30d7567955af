"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture
def settings():
    """Provide formatting settings that ignore the developer's environment and .env file."""
    from navfmt.config import FormattingSettings

    return FormattingSettings(
        _env_file=None,
        locale="en-US",
        unit_system="auto",
        duration_units="hours,minutes",
        duration_style="short",
        show_leading_zero=False,
    )


@pytest.fixture
def formatter_config(settings):
    """Provide the FormatterConfig built from the test settings."""
    return settings.to_formatter_config()


@pytest.fixture
def mcp(settings):
    """Provide an MCP server configured with the test settings."""
    from navfmt.server import create_server

    return create_server(settings)
