"""Position fixes and their CSV representation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GPSFix:
    """A single position reading."""

    latitude: float = 0.0
    longitude: float = 0.0
    is_invalid: bool = False


def _format_number(value: float) -> str:
    # Six significant digits, the default rendering of a stream.
    return f"{value:g}"


def gps_fix_to_csv(fix: GPSFix, delim: str = ",") -> str:
    """Render latitude and longitude separated by delim."""
    return f"{_format_number(fix.latitude)}{delim}{_format_number(fix.longitude)}"


class DummyGPS:
    """Position source used when no receiver is available."""

    def get_fix(self) -> GPSFix:
        """Return a fix that is always marked invalid."""
        return GPSFix(is_invalid=True)