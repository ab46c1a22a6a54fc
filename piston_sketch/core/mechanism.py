# -*- coding: utf-8 -*-
"""Slider-crank kinematics.

The crankshaft turns about the world origin. The cylinder is a ray given by an
origin point and a direction of any (non-zero) length, and the piston slides on
that ray. The connecting rod joins the crankpin to the piston, so the piston
sits where a circle of rod length around the crankpin cuts the cylinder axis.

Substituting ``O + t*d`` into ``|P - C|^2 = L^2`` gives a quadratic in ``t``.
Of the two intersections the larger root is used. No check is made that the
root lies on the positive side of the ray, so some extreme layouts put the
piston behind the cylinder origin; :func:`cylinder_parameter` lets callers
detect that.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from .geometry import EPSILON, Vec2, is_zero, normalize, polar


@dataclass
class EngineParams:
    """Mechanism dimensions plus the current crank angle (mm / rad)."""

    crank_radius: float = 50.0
    crank_angle: float = 0.0
    rod_length: float = 70.0
    cylinder_origin: Vec2 = (0.0, 0.0)
    cylinder_direction: Vec2 = (0.0, 20.0)

    def copy(self) -> "EngineParams":
        return replace(self)

    def crankpin(self) -> Vec2:
        return polar(self.crank_radius, self.crank_angle)

    def axis(self) -> Vec2:
        return normalize(*self.cylinder_direction)


@dataclass(frozen=True)
class PistonPosition:
    is_valid: bool = False
    value: Vec2 = (0.0, 0.0)

    @classmethod
    def invalid(cls) -> "PistonPosition":
        return cls(False, (0.0, 0.0))

    @classmethod
    def valid(cls, position: Vec2) -> "PistonPosition":
        return cls(True, (float(position[0]), float(position[1])))


def piston_position(r: float, L: float, origin: Vec2, direction: Vec2, alpha: float) -> PistonPosition:
    dx, dy = normalize(direction[0], direction[1])
    lx, ly = origin
    ca, sa = math.cos(alpha), math.sin(alpha)

    a = dx * dx + dy * dy
    b = 2 * (lx * dx + ly * dy - r * dx * ca - r * dy * sa)
    c = lx * lx + ly * ly - 2 * r * lx * ca - 2 * r * ly * sa - L * L + r * r

    discriminant = b * b - 4 * a * c
    divisor = 2 * a

    if is_zero(divisor):
        return PistonPosition.invalid()
    # Strict: a tangent rod (discriminant == 0) still reaches.
    if discriminant < 0:
        return PistonPosition.invalid()
    t = (-b + math.sqrt(discriminant)) / divisor
    return PistonPosition.valid((lx + dx * t, ly + dy * t))


def solve_piston_position(params: EngineParams) -> PistonPosition:
    return piston_position(
        params.crank_radius,
        params.rod_length,
        params.cylinder_origin,
        params.cylinder_direction,
        params.crank_angle,
    )


def cylinder_parameter(params: EngineParams, point: Vec2) -> float:
    """Signed distance of ``point`` from the cylinder origin along the axis."""
    dx, dy = params.axis()
    ox, oy = params.cylinder_origin
    return (point[0] - ox) * dx + (point[1] - oy) * dy


__all__ = [
    "EPSILON",
    "EngineParams",
    "PistonPosition",
    "piston_position",
    "solve_piston_position",
    "cylinder_parameter",
]
