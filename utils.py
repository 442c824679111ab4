# utils.py
import math
from fractions import Fraction
from typing import Tuple, Union

import numpy as np

from constants import GEOMETRY_TOLERANCE, FULL_CIRCLE_DEGREES

AngleLike = Union[Fraction, int, float, str]


def round_down_to_power_of_two(n: int) -> int:
    """Largest power of two not exceeding n. Zero rounds to 1."""
    if n < 0:
        raise ValueError(f"Cannot round negative value {n} to a power of two.")
    if n == 0:
        return 1
    return 1 << (n.bit_length() - 1)


def to_fraction(angle: AngleLike) -> Fraction:
    """Converts an angle (Fraction, int, float or 'p/q' string) to an exact Fraction."""
    if isinstance(angle, bool):
        raise TypeError(f"Angle must be a number, got {angle!r}")
    return Fraction(angle)


def angle_to_radians(angle_deg: Fraction) -> float:
    """Converts an exact angle in degrees to float radians."""
    return float(angle_deg) * math.pi / (FULL_CIRCLE_DEGREES / 2)


def polar_to_cartesian(radius: float, angle_deg: Fraction) -> Tuple[float, float]:
    """Maps a polar point (angle in exact degrees) to (x, y), snapping near-zero noise to 0."""
    theta = angle_to_radians(angle_deg)
    x = radius * math.cos(theta)
    y = radius * math.sin(theta)
    return (
        0.0 if abs(x) < GEOMETRY_TOLERANCE else x,
        0.0 if abs(y) < GEOMETRY_TOLERANCE else y,
    )


def arc_points(
    radius: float, start_deg: Fraction, sweep_deg: Fraction, num_segments: int
) -> np.ndarray:
    """Returns num_segments + 1 Cartesian points along an arc of increasing angle."""
    start = angle_to_radians(start_deg)
    sweep = angle_to_radians(sweep_deg)
    thetas = np.linspace(start, start + sweep, num_segments + 1)
    points = np.column_stack((radius * np.cos(thetas), radius * np.sin(thetas)))
    points[np.abs(points) < GEOMETRY_TOLERANCE] = 0.0
    return points
