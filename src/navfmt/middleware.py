"""Middleware for the navfmt MCP server.

This module provides middleware components that run before tool execution.
"""

from collections.abc import Callable
from typing import Any

from fastmcp import Context
from fastmcp.server.middleware import Middleware, MiddlewareContext

from .formatters import FormatterCollection
from .models import FormatterConfig


class FormatterConfigMiddleware(Middleware):
    """Middleware that injects the server's default FormatterConfig.

    This middleware:
    1. Receives the configuration built from settings at initialization
    2. Injects it into the context state for tools to access via ctx.get_state("config")

    The configuration is immutable, so one instance is shared by every request.
    """

    def __init__(self, config: FormatterConfig) -> None:
        self.config = config

    async def on_call_tool(self, context: MiddlewareContext, call_next: Callable[..., Any]):
        """Inject the default configuration before every tool call."""
        if context.fastmcp_context:
            context.fastmcp_context.set_state("config", self.config)

        return await call_next(context)

    async def on_read_resource(self, context: MiddlewareContext, call_next: Callable[..., Any]):
        """Inject the default configuration before every resource read."""
        if context.fastmcp_context:
            context.fastmcp_context.set_state("config", self.config)

        return await call_next(context)


def formatters_from_context(ctx: Context | None, **overrides: Any) -> FormatterCollection:
    """Build formatters from the injected configuration plus per-call overrides.

    Overrides that are ``None`` keep the server default.

    Raises:
        ValueError: If an override is invalid (unknown unit system, bad units list)
    """
    config: FormatterConfig | None = ctx.get_state("config") if ctx else None
    config = config or FormatterConfig()
    if any(value is not None for value in overrides.values()):
        config = config.with_overrides(**overrides)
    return FormatterCollection(config)
