from __future__ import annotations

import math

COORDINATE_SCALE = 10_000_000
DEGREE_PRECISION = 7


def decode_coordinate(raw: str) -> float:
    """Convert a 10^7-scaled integer string into decimal degrees."""

    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"coordinate is not a finite number: {raw!r}")
    return value / COORDINATE_SCALE


def encode_coordinate(value: float) -> str:
    return str(int(round(value * COORDINATE_SCALE)))


def format_degrees(value: float) -> str:
    text = f"{value:.{DEGREE_PRECISION}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text
