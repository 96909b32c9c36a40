"""Unit conversion helpers for WordprocessingML style measurements."""
from __future__ import annotations

TWIPS_PER_POINT = 20
HALF_POINTS_PER_POINT = 2
# w:spacing/@w:line is expressed in 240ths of a line when lineRule is "auto".
LINE_SPACING_UNIT = 240


def twips_to_points(value: float) -> float:
    """Convert twips (1/20th of a point) to points."""
    return value / TWIPS_PER_POINT


def half_points_to_points(value: float) -> float:
    """Convert the half-point sizes used by w:sz into points."""
    return value / HALF_POINTS_PER_POINT


def line_units_to_multiplier(value: float) -> float:
    """Convert an auto line spacing value into a line-height multiplier."""
    return value / LINE_SPACING_UNIT
