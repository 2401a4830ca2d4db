"""Fading, growing circle shown where a collision happened."""
from __future__ import annotations

from dataclasses import dataclass

import pygame

from orbit_canvas.render.draw import draw_explosion

from .config import RENDER_CFG, SIM_CFG, RenderCfg, SimCfg


@dataclass
class ExplosionEffect:
    """Single explosion slot; a new collision overwrites the running one."""

    active: bool = False
    center: tuple[float, float] = (0.0, 0.0)
    alpha: float = 1.0
    radius: float = SIM_CFG.explosion_initial_radius
    frames: int = 0

    def trigger(self, point: tuple[float, float], cfg: SimCfg = SIM_CFG) -> None:
        self.active = True
        self.center = (float(point[0]), float(point[1]))
        self.alpha = 1.0
        self.radius = cfg.explosion_initial_radius
        self.frames = 0

    def step(self, cfg: SimCfg = SIM_CFG) -> bool:
        """Fade and grow by one frame. Returns whether the effect is still active."""

        if not self.active:
            return False
        # Rounded so repeated subtraction lands on 0.1 exactly instead of just under it.
        self.alpha = round(self.alpha - cfg.explosion_alpha_decay, 6)
        self.radius += cfg.explosion_growth
        self.frames += 1
        if self.alpha < cfg.explosion_alpha_threshold:
            self.active = False
        return self.active

    def draw(self, surface: pygame.Surface, render_cfg: RenderCfg = RENDER_CFG) -> None:
        if not self.active:
            return
        draw_explosion(
            surface,
            self.center,
            self.radius,
            self.alpha,
            color=render_cfg.explosion_color,
            outline_color=render_cfg.outline_color,
        )


__all__ = ["ExplosionEffect"]
