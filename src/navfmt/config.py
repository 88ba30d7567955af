"""Default formatting configuration loaded from environment variables."""

from typing import Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import FormatterConfig, UnitSystemChoice


class FormattingSettings(BaseSettings):
    """Formatting defaults from environment variables (``NAVFMT_*``) or ``.env``.

    These are the defaults MCP tool calls fall back to when a caller does not
    pass its own locale or unit system.
    """

    model_config = SettingsConfigDict(
        env_prefix="NAVFMT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    locale: str = Field(default="en-US", description="BCP-47 locale tag, e.g. de-DE")
    unit_system: UnitSystemChoice = Field(
        default="auto",
        description="auto (follow the locale's region), metric, imperial or imperial_yards",
    )
    duration_units: str = Field(
        default="hours,minutes",
        description="Comma-separated duration units, largest first",
    )
    duration_style: Literal["short", "long"] = "short"
    show_leading_zero: bool = False

    log_level: str = Field(default="INFO", description="Logging level")
    host: str = "127.0.0.1"
    port: int = 8000

    @field_validator("unit_system", "duration_style", mode="before")
    @classmethod
    def lowercase(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def to_formatter_config(self) -> FormatterConfig:
        """Build the immutable formatter configuration these settings describe.

        Raises:
            pydantic.ValidationError: If the duration units are invalid
        """
        return FormatterConfig(
            locale=self.locale,
            unit_system=self.unit_system,
            duration_units=self.duration_units,
            duration_style=self.duration_style,
            show_leading_zero=self.show_leading_zero,
        )


def load_settings() -> FormattingSettings:
    """Load settings from the environment and the ``.env`` file."""
    load_dotenv()
    return FormattingSettings()
