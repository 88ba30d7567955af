"""Rounding helpers shared by the distance formatter."""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal

logger = logging.getLogger(__name__)


class InvalidIncrementError(ValueError):
    """Raised when rounding is attempted with a non-positive increment."""


def round_half_away_from_zero(value: float) -> float:
    """Round to the nearest integer, sending exact halves away from zero.

    Python's built-in ``round`` uses banker's rounding, which would turn 8.5
    into 8 and break the "850 m -> 900 m" style expectations.
    """
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def round_to_nearest(value: float, increment: float) -> float:
    """
    Round a value to the nearest multiple of an increment.

    Args:
        value: Value to round
        increment: Positive step to round to (e.g. 5, 10, 0.1)

    Returns:
        The nearest multiple of ``increment``

    Raises:
        InvalidIncrementError: If ``increment`` is not positive and assertions
            are enabled. With ``python -O`` the value is returned unchanged.

    Examples:
        >>> round_to_nearest(0.5, 1)
        1.0
        >>> round_to_nearest(280.0, 100)
        300.0
    """
    if not increment > 0:
        if __debug__:
            raise InvalidIncrementError(f"Increment must be positive, got {increment}")
        logger.error(f"Ignoring rounding with non-positive increment {increment}")
        return value

    if not math.isfinite(value):
        return value

    # Decimal keeps ties such as 1.15 / 0.1 exact; float division does not
    step = Decimal(repr(float(increment)))
    steps = (Decimal(repr(float(value))) / step).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return float(steps * step)


def sanitize_magnitude(value: float, kind: str = "distance") -> float:
    """Clamp negative or non-finite magnitudes to zero.

    Negative remaining distances/durations can show up briefly while the
    navigation engine changes state; they are never meaningful for display.
    """
    if not math.isfinite(value):
        logger.warning(f"Non-finite {kind} {value!r}, formatting as 0")
        return 0.0
    if value < 0:
        logger.debug(f"Negative {kind} {value}, clamping to 0")
        return 0.0
    return float(value)
