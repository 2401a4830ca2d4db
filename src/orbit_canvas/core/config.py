"""Configuration dataclasses for the orbit canvas."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SimCfg:
    width: int = 1000
    height: int = 650
    sun_mass: float = 50.0
    sun_color: str = "yellow"
    sun_index: int = 0
    angle_step: float = 0.02
    # sawtooth bound, kept at 3.1415 rather than math.pi
    angle_limit: float = 3.1415
    explosion_initial_radius: float = 30.0
    explosion_alpha_decay: float = 0.01
    explosion_growth: float = 0.5
    explosion_alpha_threshold: float = 0.1
    min_radius: float = 0.5
    min_orbit_radius: float = 1e-9

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2


@dataclass(frozen=True)
class RenderCfg:
    fps: int = 60
    caption: str = "Orbit Canvas"
    background_color: tuple[int, int, int] = (33, 33, 33)
    outline_color: tuple[int, int, int] = (0, 0, 0)
    outline_width: int = 1
    explosion_color: tuple[int, int, int] = (255, 0, 0)
    spawn_marker_color: tuple[int, int, int] = (180, 198, 228)
    spawn_marker_radius: int = 6
    panel_color: tuple[int, int, int, int] = (12, 18, 30, 220)
    panel_text_color: tuple[int, int, int] = (234, 241, 255)
    panel_error_color: tuple[int, int, int] = (255, 140, 120)
    button_color: tuple[int, int, int, int] = (8, 32, 64, int(255 * 0.78))
    button_hover_color: tuple[int, int, int, int] = (18, 52, 94, int(255 * 0.88))
    button_text_color: tuple[int, int, int] = (234, 241, 255)
    button_border_color: tuple[int, int, int, int] = (88, 140, 255, int(255 * 0.55))
    button_radius: int = 10
    hud_text_color: tuple[int, int, int] = (140, 180, 220)


@dataclass(frozen=True)
class FormCfg:
    default_mass: float = 10.0
    default_speed: float = 50.0
    speed_scale: float = 100.0
    default_rotation: str = "clockwise"
    default_color: str = "#ffffff"
    mass_step: float = 1.0
    speed_step: float = 5.0
    palette: tuple[str, ...] = field(
        default_factory=lambda: (
            "#ffffff",
            "#4dabf7",
            "#94d82d",
            "#ffa94d",
            "#9775fa",
            "#ff6b6b",
        )
    )


ROTATIONS: tuple[str, str] = ("clockwise", "counterclockwise")

SIM_CFG = SimCfg()
RENDER_CFG = RenderCfg()
FORM_CFG = FormCfg()


__all__ = ["FORM_CFG", "FormCfg", "RENDER_CFG", "ROTATIONS", "RenderCfg", "SIM_CFG", "SimCfg"]
