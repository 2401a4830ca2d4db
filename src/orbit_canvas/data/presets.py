"""Preset planet systems that can be loaded instead of clicking planets in."""
from __future__ import annotations

from dataclasses import dataclass

from orbit_canvas.core.config import FORM_CFG, FormCfg
from orbit_canvas.core.requests import PlanetRequest, parse_planet_request


@dataclass(frozen=True)
class PlanetSpec:
    x: float
    y: float
    mass: float = 10.0
    speed: float = 50.0
    rotation: str = "clockwise"
    color: str = "#ffffff"


@dataclass(frozen=True)
class Preset:
    key: str
    name: str
    description: str
    planets: tuple[PlanetSpec, ...] = ()

    def requests(self, cfg: FormCfg = FORM_CFG) -> list[PlanetRequest]:
        return [
            parse_planet_request(
                spec.mass, spec.speed, spec.rotation, spec.color, (spec.x, spec.y), cfg
            )
            for spec in self.planets
        ]


PRESET_DEFINITIONS: tuple[Preset, ...] = (
    Preset(
        key="empty",
        name="Empty",
        description="Only the sun.",
    ),
    Preset(
        key="inner_ring",
        name="Inner ring",
        description="Three planets on separate orbits that never touch.",
        planets=(
            PlanetSpec(650.0, 325.0, mass=8.0, speed=60.0, color="#4dabf7"),
            PlanetSpec(500.0, 100.0, mass=10.0, speed=40.0, color="#94d82d"),
            PlanetSpec(150.0, 325.0, mass=12.0, speed=25.0, color="#ffa94d"),
        ),
    ),
    Preset(
        key="crossing",
        name="Crossing",
        description="Two planets sharing one orbit in opposite directions.",
        planets=(
            PlanetSpec(700.0, 325.0, rotation="clockwise", color="#9775fa"),
            PlanetSpec(300.0, 325.0, rotation="counterclockwise", color="#ff6b6b"),
        ),
    ),
    Preset(
        key="sun_grazer",
        name="Sun grazer",
        description="A planet spawned inside the sun's reach.",
        planets=(PlanetSpec(555.0, 325.0, color="#ffffff"),),
    ),
)

PRESETS: dict[str, Preset] = {preset.key: preset for preset in PRESET_DEFINITIONS}
PRESET_DISPLAY_ORDER: list[str] = [preset.key for preset in PRESET_DEFINITIONS]
DEFAULT_PRESET_KEY = PRESET_DISPLAY_ORDER[0]


def get_preset(key: str) -> Preset:
    try:
        return PRESETS[key]
    except KeyError:
        raise ValueError(f"unknown preset {key!r}; choose from {', '.join(PRESETS)}") from None


__all__ = [
    "DEFAULT_PRESET_KEY",
    "PRESETS",
    "PRESET_DEFINITIONS",
    "PRESET_DISPLAY_ORDER",
    "PlanetSpec",
    "Preset",
    "get_preset",
]
