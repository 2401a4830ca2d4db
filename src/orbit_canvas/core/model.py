"""Data models for the orbit canvas simulation state."""
from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

import pygame

from orbit_canvas.render.draw import draw_body

from .collisions import FrameCoord
from .config import RENDER_CFG, SIM_CFG, RenderCfg, SimCfg
from .explosion import ExplosionEffect

if TYPE_CHECKING:  # pragma: no cover
    from .orbit import OrbitState


SUN = "sun"
PLANET = "planet"

_BODY_IDS = itertools.count(1)


class Drawable(Protocol):
    x: float
    y: float
    radius: float
    color: str

    def draw(self, surface: pygame.Surface, render_cfg: RenderCfg = RENDER_CFG) -> None:
        ...


@dataclass(eq=False)
class Body:
    """Circular body drawn on the canvas.

    ``radius`` is fixed from ``mass`` at construction. Planets carry an
    ``orbit`` component; the sun has none and never moves.
    """

    mass: float
    x: float
    y: float
    color: str
    kind: str = PLANET
    orbit: OrbitState | None = None
    radius: float = field(init=False)
    body_id: int = field(init=False, default_factory=lambda: next(_BODY_IDS))

    def __post_init__(self) -> None:
        self.radius = float(self.mass)

    @property
    def is_sun(self) -> bool:
        return self.kind == SUN

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y

    def coords(self) -> FrameCoord:
        return FrameCoord(self.x, self.y, self.radius)

    def draw(self, surface: pygame.Surface, render_cfg: RenderCfg = RENDER_CFG) -> None:
        draw_body(
            surface,
            self.position,
            self.radius,
            color=self.color,
            outline_color=render_cfg.outline_color,
            outline_width=render_cfg.outline_width,
        )


def create_body(
    mass: float,
    x: float,
    y: float,
    color: str,
    *,
    kind: str = PLANET,
    cfg: SimCfg = SIM_CFG,
) -> Body:
    return Body(max(float(mass), cfg.min_radius), float(x), float(y), color, kind=kind)


def create_sun(cfg: SimCfg = SIM_CFG) -> Body:
    cx, cy = cfg.center
    return create_body(cfg.sun_mass, cx, cy, cfg.sun_color, kind=SUN, cfg=cfg)


@dataclass
class SimulationState:
    """Everything one frame step reads and mutates."""

    bodies: list[Body] = field(default_factory=list)
    coords: list[FrameCoord] = field(default_factory=list)
    explosion: ExplosionEffect = field(default_factory=ExplosionEffect)
    spawn_point: tuple[float, float] | None = None
    frame: int = 0

    @property
    def planets(self) -> list[Body]:
        return [body for body in self.bodies if not body.is_sun]


__all__ = [
    "Body",
    "Drawable",
    "PLANET",
    "SUN",
    "SimulationState",
    "create_body",
    "create_sun",
]
