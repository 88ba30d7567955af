"""Locale parsing on top of Babel's CLDR data."""

from __future__ import annotations

import logging
from functools import lru_cache

from babel import Locale, UnknownLocaleError
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


class LocaleInfo(BaseModel):
    """A resolved locale: language plus optional script and region.

    Callers resolve the platform locale once and pass this value in; the
    formatters never query the operating system.
    """

    model_config = ConfigDict(frozen=True)

    language: str = DEFAULT_LANGUAGE
    script: str | None = None
    region: str | None = None

    @classmethod
    def parse(cls, tag: str | None) -> LocaleInfo:
        """Parse a BCP-47 (``de-DE``) or POSIX (``de_DE.UTF-8``) locale tag.

        Unknown or malformed tags fall back to the bare language, then to
        English, rather than failing.
        """
        if not tag or not tag.strip():
            return cls()

        identifier = tag.strip().split(".")[0].replace("-", "_")
        locale = _load(identifier)
        if locale is None:
            locale = _load(identifier.split("_")[0])
            if locale is None:
                logger.warning(f"Unknown locale {tag!r}, falling back to {DEFAULT_LANGUAGE}")
                return cls()
            logger.warning(f"Unknown locale {tag!r}, using language {locale.language!r} only")

        return cls(language=locale.language, script=locale.script, region=locale.territory)

    @property
    def identifier(self) -> str:
        """Babel/POSIX style identifier, e.g. ``de_DE``."""
        return "_".join(part for part in (self.language, self.script, self.region) if part)

    def to_babel(self) -> Locale:
        """The Babel ``Locale`` carrying this locale's CLDR data."""
        return _babel_locale(self.identifier)

    def __str__(self) -> str:
        return self.identifier


def coerce_locale(locale: LocaleInfo | str | None) -> LocaleInfo:
    """Accept either a parsed locale or a raw tag."""
    if isinstance(locale, LocaleInfo):
        return locale
    return LocaleInfo.parse(locale)


def _load(identifier: str) -> Locale | None:
    try:
        return Locale.parse(identifier)
    except (UnknownLocaleError, ValueError, TypeError):
        return None


@lru_cache(maxsize=64)
def _babel_locale(identifier: str) -> Locale:
    # LocaleInfo can be built directly, so the identifier may lack CLDR data
    locale = _load(identifier) or _load(identifier.split("_")[0])
    if locale is None:
        logger.warning(f"No CLDR data for {identifier!r}, using {DEFAULT_LANGUAGE}")
        locale = Locale.parse(DEFAULT_LANGUAGE)
    return locale
