"""Per-frame simulation step and the operations that feed it."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import pygame

from orbit_canvas.render.draw import draw_background

from .collisions import apply_removals, detect
from .config import RENDER_CFG, SIM_CFG, RenderCfg, SimCfg
from .logging_utils import RunLogger
from .model import Body, Drawable, SimulationState, create_body, create_sun
from .orbit import advance, init_orbit
from .requests import PlanetRequest

if TYPE_CHECKING:  # pragma: no cover
    from orbit_canvas.data.presets import Preset


def new_state(
    cfg: SimCfg = SIM_CFG,
    *,
    frame: int = 0,
    logger: RunLogger | None = None,
) -> SimulationState:
    """Fresh simulation holding only the sun.

    ``frame`` continues the counter of a previous state so a session log
    keeps one increasing frame column across resets.
    """

    state = SimulationState(bodies=[create_sun(cfg)], frame=frame)
    if logger is not None:
        logger.log_event(state.frame, "reset")
    return state


def arm_spawn(state: SimulationState, x: float, y: float) -> None:
    state.spawn_point = (float(x), float(y))


def add_planet(
    state: SimulationState,
    request: PlanetRequest,
    *,
    cfg: SimCfg = SIM_CFG,
    logger: RunLogger | None = None,
) -> Body:
    """Append a planet and fix its orbit from the spawn position."""

    planet = create_body(request.mass, request.x, request.y, request.color, cfg=cfg)
    state.bodies.append(planet)
    orbit = init_orbit(planet, request.speed, request.clockwise, cfg=cfg)
    state.spawn_point = None
    if logger is not None:
        direction = "clockwise" if request.clockwise else "counterclockwise"
        logger.log_event(
            state.frame,
            "spawn",
            planet.position,
            f"id={planet.body_id};mass={planet.mass:g};speed={request.speed:g};{direction};"
            f"orbit_radius={orbit.orbit_radius:.3f}",
        )
    return planet


def add_planets(
    state: SimulationState,
    requests: Iterable[PlanetRequest],
    *,
    cfg: SimCfg = SIM_CFG,
    logger: RunLogger | None = None,
) -> list[Body]:
    return [add_planet(state, request, cfg=cfg, logger=logger) for request in requests]


def load_preset(
    preset: Preset,
    *,
    cfg: SimCfg = SIM_CFG,
    frame: int = 0,
    logger: RunLogger | None = None,
) -> SimulationState:
    """Fresh state with the sun and the planets of ``preset``."""

    state = new_state(cfg, frame=frame)
    if logger is not None:
        logger.log_event(state.frame, "preset", details=preset.key)
    add_planets(state, preset.requests(), cfg=cfg, logger=logger)
    return state


def draw_all(
    surface: pygame.Surface,
    drawables: Iterable[Drawable],
    render_cfg: RenderCfg = RENDER_CFG,
) -> None:
    for drawable in drawables:
        drawable.draw(surface, render_cfg)


def step(
    state: SimulationState,
    surface: pygame.Surface,
    *,
    cfg: SimCfg = SIM_CFG,
    render_cfg: RenderCfg = RENDER_CFG,
    logger: RunLogger | None = None,
) -> SimulationState:
    """Run one frame: move, draw, collide, remove, explode.

    Scheduling the next frame is left to the caller's loop.
    """

    draw_background(surface, render_cfg.background_color)

    state.coords = [advance(body, cfg) for body in state.bodies]
    draw_all(surface, state.bodies, render_cfg)

    result = detect(state.coords, cfg)
    removed = apply_removals(state, result)

    if result.collided:
        state.explosion.trigger(result.point, cfg)
        if logger is not None:
            i, j = result.pair
            logger.log_event(state.frame, "collision", result.point, f"pair={i}:{j}")
            for body in removed:
                logger.log_event(
                    state.frame, "removal", body.position, f"kind={body.kind};id={body.body_id}"
                )

    explosion = state.explosion
    if explosion.active:
        explosion.draw(surface, render_cfg)
        if not explosion.step(cfg) and logger is not None:
            logger.log_event(state.frame, "explosion_end", explosion.center)

    if logger is not None:
        logger.log_ts(
            [
                state.frame,
                len(state.bodies),
                explosion.alpha if explosion.active else 0.0,
                explosion.radius if explosion.active else 0.0,
            ]
        )
    state.frame += 1
    return state


__all__ = ["add_planet", "add_planets", "arm_spawn", "draw_all", "load_preset", "new_state", "step"]
