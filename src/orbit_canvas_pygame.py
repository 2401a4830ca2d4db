# src/orbit_canvas_pygame.py
"""Interactive orbit canvas: click to place planets, watch them orbit and collide."""
from __future__ import annotations

import argparse
from datetime import datetime

import pygame
from pygame.locals import DOUBLEBUF

from orbit_canvas.core.config import FORM_CFG, RENDER_CFG, SIM_CFG
from orbit_canvas.core.logging_utils import RunLogger
from orbit_canvas.core.simulation import add_planet, arm_spawn, load_preset, new_state, step
from orbit_canvas.data.presets import PRESET_DISPLAY_ORDER, PRESETS, get_preset
from orbit_canvas.render import FontBook, draw_spawn_marker, get_text_surface
from orbit_canvas.render.ui import PlanetForm


PRESET_KEYS = {
    pygame.K_1 + index: key for index, key in enumerate(PRESET_DISPLAY_ORDER[:9])
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Click on the canvas to add orbiting planets.")
    parser.add_argument("--fps", type=int, default=RENDER_CFG.fps, help="frame rate cap")
    parser.add_argument(
        "--log",
        action="store_true",
        help="record frames and events under data/runs/",
    )
    parser.add_argument("--log-dir", default="data/runs", help="root directory for run logs")
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default=None,
        help="planet system to start with",
    )
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")
    return args


def _set_display_mode_with_vsync(size: tuple[int, int], flags: int = 0) -> pygame.Surface:
    """Create the display surface with double buffering and vsync when available."""

    flags |= DOUBLEBUF
    try:
        return pygame.display.set_mode(size, flags, vsync=1)
    except pygame.error as err:
        # Some platforms reject the vsync request.
        try:
            return pygame.display.set_mode(size, flags)
        except pygame.error:
            raise err


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    pygame.init()
    pygame.display.set_caption(RENDER_CFG.caption)
    screen = _set_display_mode_with_vsync((SIM_CFG.width, SIM_CFG.height))
    clock = pygame.time.Clock()
    fonts = FontBook()
    font = fonts.get(16)
    font_hud = fonts.get(14)

    logger: RunLogger | None = None
    if args.log:
        logger = RunLogger(args.log_dir)
        logger.write_meta(
            {
                "started": datetime.now().isoformat(timespec="seconds"),
                "width": SIM_CFG.width,
                "height": SIM_CFG.height,
                "sun_mass": SIM_CFG.sun_mass,
                "angle_step": SIM_CFG.angle_step,
                "speed_scale": FORM_CFG.speed_scale,
                "fps": args.fps,
                "preset": args.preset,
            }
        )

    if args.preset:
        state = load_preset(get_preset(args.preset), logger=logger)
    else:
        state = new_state()
    form = PlanetForm((SIM_CFG.width - PlanetForm.WIDTH - 20, 20))

    running = True
    try:
        while running:
            for event in pygame.event.get():
                request = None
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if form.visible:
                        request = form.handle_event(event, state.spawn_point)
                        if not form.visible:
                            state.spawn_point = None
                    elif event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        state = new_state(frame=state.frame, logger=logger)
                    elif event.key in PRESET_KEYS:
                        state = load_preset(
                            get_preset(PRESET_KEYS[event.key]), frame=state.frame, logger=logger
                        )
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if form.contains(event.pos):
                        request = form.handle_event(event, state.spawn_point)
                        if not form.visible:
                            state.spawn_point = None
                    else:
                        arm_spawn(state, *event.pos)
                        form.show()
                if request is not None:
                    add_planet(state, request, logger=logger)

            step(state, screen, logger=logger)

            if form.visible and state.spawn_point is not None:
                draw_spawn_marker(
                    screen,
                    state.spawn_point,
                    color=RENDER_CFG.spawn_marker_color,
                    radius=RENDER_CFG.spawn_marker_radius,
                )
            form.draw(screen, font)

            hud_text = (
                f"Planets: {len(state.planets)}   FPS: {clock.get_fps():.1f}   "
                "[click] place  [1-4] presets  [R] reset  [Esc] quit"
            )
            hud = get_text_surface(font_hud, hud_text, RENDER_CFG.hud_text_color)
            screen.blit(hud, hud.get_rect(bottomleft=(10, SIM_CFG.height - 10)))

            pygame.display.flip()
            clock.tick(args.fps)
    finally:
        if logger is not None:
            logger.close()
        pygame.quit()


if __name__ == "__main__":
    main()
