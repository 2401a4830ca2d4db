"""Kinematic circular orbits around the canvas center."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .collisions import FrameCoord
from .config import SIM_CFG, SimCfg

if TYPE_CHECKING:  # pragma: no cover
    from .model import Body


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* between *lo* and *hi*."""

    return max(lo, min(hi, value))


@dataclass
class OrbitState:
    """Orbit component attached to a planet.

    ``orbit_radius`` never changes after :func:`init_orbit`; only ``angle``
    moves, one sawtooth step per frame.
    """

    center: tuple[float, float]
    orbit_radius: float
    angle: float
    clockwise: bool
    speed: float


def initial_angle(
    x: float,
    y: float,
    center: tuple[float, float],
    orbit_radius: float,
    cfg: SimCfg = SIM_CFG,
) -> float:
    """Phase angle of ``(x, y)`` on its orbit, in ``[-pi, pi]``.

    The angle is the same for both directions of travel. A body spawned on
    the center itself gets angle 0.
    """

    cx, cy = center
    if orbit_radius < cfg.min_orbit_radius:
        return 0.0
    angle = math.acos(clamp((x - cx) / orbit_radius, -1.0, 1.0))
    if y < cy:
        angle = -angle
    return angle


def init_orbit(
    body: Body,
    speed: float,
    clockwise: bool,
    *,
    center: tuple[float, float] | None = None,
    cfg: SimCfg = SIM_CFG,
) -> OrbitState:
    """Fix the orbit of ``body`` from its spawn position and attach it."""

    if center is None:
        center = cfg.center
    orbit_radius = math.hypot(body.x - center[0], body.y - center[1])
    orbit = OrbitState(
        center=center,
        orbit_radius=orbit_radius,
        angle=initial_angle(body.x, body.y, center, orbit_radius, cfg),
        clockwise=clockwise,
        speed=float(speed),
    )
    body.orbit = orbit
    return orbit


def next_angle(orbit: OrbitState, cfg: SimCfg = SIM_CFG) -> float:
    """Sawtooth progression: step until the limit, then jump to the other end."""

    step = cfg.angle_step * orbit.speed
    if orbit.clockwise:
        if orbit.angle < cfg.angle_limit:
            return orbit.angle + step
        return -cfg.angle_limit
    if orbit.angle > -cfg.angle_limit:
        return orbit.angle - step
    return cfg.angle_limit


def advance(body: Body, cfg: SimCfg = SIM_CFG) -> FrameCoord:
    """Place ``body`` at its current angle, then move the angle one frame on.

    Bodies without an orbit (the sun) stay where they are.
    """

    orbit = body.orbit
    if orbit is None:
        return body.coords()
    cx, cy = orbit.center
    body.x = cx + orbit.orbit_radius * math.cos(orbit.angle)
    body.y = cy + orbit.orbit_radius * math.sin(orbit.angle)
    orbit.angle = next_angle(orbit, cfg)
    return body.coords()


__all__ = ["OrbitState", "advance", "clamp", "init_orbit", "initial_angle", "next_angle"]
