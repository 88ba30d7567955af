"""Tests for rounding helpers."""

import math
import os
import subprocess
import sys
from pathlib import Path

import pytest

from navfmt.rounding import (
    InvalidIncrementError,
    round_half_away_from_zero,
    round_to_nearest,
    sanitize_magnitude,
)

SRC_DIR = str(Path(__file__).resolve().parents[1] / "src")


class TestRoundHalfAwayFromZero:
    """Test round_half_away_from_zero."""

    def test_halves_round_away_from_zero(self):
        """Test that exact halves do not use banker's rounding."""
        assert round_half_away_from_zero(0.5) == 1
        assert round_half_away_from_zero(2.5) == 3
        assert round_half_away_from_zero(8.5) == 9
        assert round_half_away_from_zero(-2.5) == -3

    def test_non_halves(self):
        """Test ordinary rounding."""
        assert round_half_away_from_zero(2.49) == 2
        assert round_half_away_from_zero(2.51) == 3
        assert round_half_away_from_zero(-2.49) == -2

    def test_non_finite_passthrough(self):
        """Test that infinity is returned unchanged."""
        assert round_half_away_from_zero(math.inf) == math.inf


class TestRoundToNearest:
    """Test round_to_nearest."""

    def test_examples(self):
        """Test the documented examples."""
        assert round_to_nearest(0.5, 1) == 1
        assert round_to_nearest(3, 5) == 5
        assert round_to_nearest(280, 100) == 300
        assert round_to_nearest(250, 100) == 300
        assert round_to_nearest(249, 100) == 200

    def test_tenths(self):
        """Test rounding to a fractional increment."""
        assert round_to_nearest(8.145, 0.1) == pytest.approx(8.1)
        assert round_to_nearest(0.96, 0.1) == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "value, expected", [(1.15, 1.2), (2.15, 2.2), (4.35, 4.4), (8.15, 8.2), (-1.15, -1.2)]
    )
    def test_tenth_ties_round_away_from_zero(self, value, expected):
        """Test that decimal ties are not lost to binary representation error."""
        assert round_to_nearest(value, 0.1) == expected

    @pytest.mark.parametrize("value", [0, 3, 7.4, 12.5, 99.9, 1234.5])
    @pytest.mark.parametrize("increment", [1, 5, 10, 100])
    def test_result_is_multiple_and_idempotent(self, value, increment):
        """Test that the result is a multiple of the increment and rounding again is a no-op."""
        rounded = round_to_nearest(value, increment)

        assert rounded % increment == 0
        assert abs(rounded - value) <= increment / 2
        assert round_to_nearest(rounded, increment) == rounded

    @pytest.mark.parametrize("increment", [0, -1, math.nan])
    def test_invalid_increment_raises(self, increment):
        """Test that non-positive increments are rejected."""
        with pytest.raises(InvalidIncrementError):
            round_to_nearest(10, increment)

    def test_invalid_increment_is_value_error(self):
        """Test that callers can catch the error as a ValueError."""
        with pytest.raises(ValueError):
            round_to_nearest(10, 0)

    def test_invalid_increment_passes_through_when_optimized(self):
        """Test that python -O returns the value unrounded and logs an error."""
        code = (
            "import logging\n"
            "logging.basicConfig(level=logging.ERROR)\n"
            "from navfmt.rounding import round_to_nearest\n"
            "print(round_to_nearest(10, 0))\n"
        )
        pythonpath = os.pathsep.join(filter(None, [SRC_DIR, os.environ.get("PYTHONPATH")]))
        env = {**os.environ, "PYTHONPATH": pythonpath}

        result = subprocess.run(
            [sys.executable, "-O", "-c", code],
            capture_output=True,
            text=True,
            env=env,
            check=True,
        )

        assert result.stdout.strip() == "10"
        assert "Ignoring rounding with non-positive increment 0" in result.stderr


class TestSanitizeMagnitude:
    """Test sanitize_magnitude."""

    def test_positive_unchanged(self):
        """Test that positive values pass through as floats."""
        assert sanitize_magnitude(12) == 12.0
        assert isinstance(sanitize_magnitude(12), float)

    def test_negative_clamped(self):
        """Test that negative values clamp to zero."""
        assert sanitize_magnitude(-5) == 0.0

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_clamped(self, value, caplog):
        """Test that non-finite values clamp to zero with a warning."""
        assert sanitize_magnitude(value, kind="duration") == 0.0
        assert "Non-finite duration" in caplog.text
