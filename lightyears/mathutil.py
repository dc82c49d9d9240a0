"""Angle conversions and direction vectors."""

from __future__ import annotations

import math

from pygame.math import Vector2

__all__ = ["PI", "rotation_to_vector", "degrees_to_radians", "radians_to_degrees"]

PI = 3.1415926535


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * (PI / 180.0)


def radians_to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * (180.0 / PI)


def rotation_to_vector(rotation: float) -> Vector2:
    """Return the unit vector pointing along a rotation given in degrees."""
    radians = degrees_to_radians(rotation)
    return Vector2(math.cos(radians), math.sin(radians))