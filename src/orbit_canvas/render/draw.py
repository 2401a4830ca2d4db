from __future__ import annotations

import math

import pygame

from .assets import Color


def _clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


def draw_background(surface: pygame.Surface, color: tuple[int, int, int]) -> None:
    surface.fill(color)


def draw_body(
    surface: pygame.Surface,
    position: tuple[float, float],
    radius: float,
    *,
    color: str | Color,
    outline_color: tuple[int, int, int],
    outline_width: int = 1,
) -> None:
    if radius <= 0:
        return
    pygame.draw.circle(surface, pygame.Color(color), position, radius)
    if outline_width > 0:
        pygame.draw.circle(surface, outline_color, position, radius, outline_width)


def draw_explosion(
    surface: pygame.Surface,
    center: tuple[float, float],
    radius: float,
    alpha: float,
    *,
    color: tuple[int, int, int],
    outline_color: tuple[int, int, int],
) -> None:
    if radius <= 0 or alpha <= 0.0:
        return
    half = int(math.ceil(radius)) + 1
    glow_surface = pygame.Surface((half * 2, half * 2), pygame.SRCALPHA)
    fill_alpha = int(round(255 * _clamp(alpha, 0.0, 1.0)))
    pygame.draw.circle(glow_surface, (*color, fill_alpha), (half, half), radius)
    pygame.draw.circle(glow_surface, (*outline_color, 255), (half, half), radius, 1)
    glow_rect = glow_surface.get_rect(center=(round(center[0]), round(center[1])))
    surface.blit(glow_surface, glow_rect)


def draw_spawn_marker(
    surface: pygame.Surface,
    position: tuple[float, float],
    *,
    color: tuple[int, int, int],
    radius: int,
) -> None:
    x, y = round(position[0]), round(position[1])
    pygame.draw.circle(surface, color, (x, y), radius, 1)
    pygame.draw.line(surface, color, (x - radius - 4, y), (x + radius + 4, y), 1)
    pygame.draw.line(surface, color, (x, y - radius - 4), (x, y + radius + 4), 1)
