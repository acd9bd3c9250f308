# structures.py

from dataclasses import dataclass

from vecmath.vector3 import Vector3


@dataclass(slots=True)
class AxisAngle:
    """A rotation of ``angle`` radians about ``axis``."""
    axis: Vector3
    angle: float


@dataclass(slots=True, frozen=True)
class FieldOfView:
    """Half-angles, in degrees, from the view direction to each frustum plane."""
    up_degrees: float
    down_degrees: float
    left_degrees: float
    right_degrees: float
