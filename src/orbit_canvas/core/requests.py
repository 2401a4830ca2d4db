"""Validation of planet creation input coming from the UI."""
from __future__ import annotations

import math
from dataclasses import dataclass

import pygame

from .config import FORM_CFG, ROTATIONS, FormCfg


class InvalidRequestError(ValueError):
    """Raised when form input cannot become a planet."""


@dataclass(frozen=True)
class PlanetRequest:
    mass: float
    x: float
    y: float
    speed: float
    clockwise: bool
    color: str


def is_valid_color(color: object) -> bool:
    if not isinstance(color, str) or not color:
        return False
    try:
        pygame.Color(color)
    except ValueError:
        return False
    return True


def _positive_number(value: object, label: str) -> float:
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidRequestError(f"{label} must be a number") from exc
    if not math.isfinite(number) or number <= 0.0:
        raise InvalidRequestError(f"{label} must be positive")
    return number


def parse_planet_request(
    mass: object,
    speed: object,
    rotation: str,
    color: str,
    spawn: tuple[float, float] | None,
    cfg: FormCfg = FORM_CFG,
) -> PlanetRequest:
    """Turn raw form values into a :class:`PlanetRequest`.

    ``speed`` is the raw form value and is divided by ``cfg.speed_scale``.
    """

    if spawn is None:
        raise InvalidRequestError("click on the canvas to place the planet first")
    mass_value = _positive_number(mass, "mass")
    speed_value = _positive_number(speed, "speed") / cfg.speed_scale
    if rotation not in ROTATIONS:
        raise InvalidRequestError(f"unknown rotation {rotation!r}")
    if not is_valid_color(color):
        raise InvalidRequestError(f"unknown color {color!r}")
    return PlanetRequest(
        mass=mass_value,
        x=float(spawn[0]),
        y=float(spawn[1]),
        speed=speed_value,
        clockwise=rotation == "clockwise",
        color=color,
    )


__all__ = ["InvalidRequestError", "PlanetRequest", "is_valid_color", "parse_planet_request"]
