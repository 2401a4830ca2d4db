from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

import pygame

from orbit_canvas.core.config import FORM_CFG, RENDER_CFG, ROTATIONS, FormCfg, RenderCfg
from orbit_canvas.core.requests import InvalidRequestError, PlanetRequest, parse_planet_request

from .assets import Color, get_text_surface


@dataclass(frozen=True)
class ButtonVisualStyle:
    base_color: Color
    hover_color: Color
    text_color: tuple[int, int, int]
    radius: int
    border_color: Color | None = None
    border_width: int = 0

    @classmethod
    def from_render_cfg(cls, render_cfg: RenderCfg = RENDER_CFG) -> "ButtonVisualStyle":
        return cls(
            base_color=render_cfg.button_color,
            hover_color=render_cfg.button_hover_color,
            text_color=render_cfg.button_text_color,
            radius=render_cfg.button_radius,
            border_color=render_cfg.button_border_color,
            border_width=1,
        )


class Button:
    """Rectangular button with hover feedback and a click callback."""

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        callback: Callable[[], None],
        *,
        style: ButtonVisualStyle,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self._callback = callback
        self._style = style

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        mouse_pos: tuple[int, int] | None = None,
    ) -> None:
        if mouse_pos is None:
            mouse_pos = pygame.mouse.get_pos()
        style = self._style
        color = style.hover_color if self.rect.collidepoint(mouse_pos) else style.base_color
        button_surface = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        pygame.draw.rect(button_surface, color, button_surface.get_rect(), border_radius=style.radius)
        if style.border_color is not None and style.border_width > 0:
            pygame.draw.rect(
                button_surface,
                style.border_color,
                button_surface.get_rect(),
                style.border_width,
                border_radius=style.radius,
            )
        surface.blit(button_surface, self.rect.topleft)
        text_surf = get_text_surface(font, self.text, style.text_color)
        surface.blit(text_surf, text_surf.get_rect(center=self.rect.center))

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self._callback()
                return True
        return False


def _format_number(value: float) -> str:
    return f"{value:g}"


class PlanetForm:
    """Side panel collecting mass, speed, rotation and color for a new planet.

    Hidden until a canvas click arms a spawn point. A successful submit
    returns a validated request, resets every field to its default and
    hides the panel again.
    """

    WIDTH = 230
    ROW_HEIGHT = 30
    FIELDS = ("mass", "speed")

    def __init__(
        self,
        origin: tuple[int, int],
        *,
        cfg: FormCfg = FORM_CFG,
        render_cfg: RenderCfg = RENDER_CFG,
    ) -> None:
        self._cfg = cfg
        self._render_cfg = render_cfg
        self.origin = origin
        self.visible = False
        self.error: str | None = None
        self.focus = "mass"
        self._submit_requested = False
        self._cancel_requested = False
        self.reset()
        self.rect = pygame.Rect(origin[0], origin[1], self.WIDTH, self.ROW_HEIGHT * 7 + 16)
        self._buttons = self._build_buttons()

    def reset(self) -> None:
        self.mass_text = _format_number(self._cfg.default_mass)
        self.speed_text = _format_number(self._cfg.default_speed)
        self.rotation = self._cfg.default_rotation
        self.color = self._cfg.default_color

    def show(self) -> None:
        self.visible = True
        self.error = None

    def hide(self) -> None:
        self.visible = False
        self.error = None

    def contains(self, pos: tuple[int, int]) -> bool:
        return self.visible and self.rect.collidepoint(pos)

    def _row_rect(self, row: int, x_offset: int, width: int) -> tuple[int, int, int, int]:
        x = self.origin[0] + x_offset
        y = self.origin[1] + 8 + row * self.ROW_HEIGHT
        return (x, y, width, self.ROW_HEIGHT - 6)

    def _build_buttons(self) -> list[Button]:
        style = ButtonVisualStyle.from_render_cfg(self._render_cfg)
        return [
            Button(self._row_rect(0, 150, 32), "-", lambda: self.nudge("mass", -1), style=style),
            Button(self._row_rect(0, 188, 32), "+", lambda: self.nudge("mass", 1), style=style),
            Button(self._row_rect(1, 150, 32), "-", lambda: self.nudge("speed", -1), style=style),
            Button(self._row_rect(1, 188, 32), "+", lambda: self.nudge("speed", 1), style=style),
            Button(self._row_rect(2, 150, 70), "flip", self.toggle_rotation, style=style),
            Button(self._row_rect(3, 150, 70), "next", self.cycle_color, style=style),
            Button(self._row_rect(5, 10, 100), "Add", self._request_submit, style=style),
            Button(self._row_rect(5, 120, 100), "Cancel", self._request_cancel, style=style),
        ]

    def _request_submit(self) -> None:
        self._submit_requested = True

    def _request_cancel(self) -> None:
        self._cancel_requested = True

    def _field_text(self, name: str) -> str:
        return self.mass_text if name == "mass" else self.speed_text

    def _set_field_text(self, name: str, text: str) -> None:
        if name == "mass":
            self.mass_text = text
        else:
            self.speed_text = text

    def nudge(self, name: str, direction: int) -> None:
        if name == "mass":
            step, default = self._cfg.mass_step, self._cfg.default_mass
        else:
            step, default = self._cfg.speed_step, self._cfg.default_speed
        try:
            value = float(self._field_text(name))
        except ValueError:
            value = default
        self._set_field_text(name, _format_number(max(step, value + direction * step)))
        self.focus = name

    def toggle_rotation(self) -> None:
        index = ROTATIONS.index(self.rotation) if self.rotation in ROTATIONS else 0
        self.rotation = ROTATIONS[(index + 1) % len(ROTATIONS)]

    def cycle_color(self) -> None:
        palette = self._cfg.palette
        index = palette.index(self.color) if self.color in palette else -1
        self.color = palette[(index + 1) % len(palette)]

    def type_text(self, text: str) -> None:
        allowed = "".join(ch for ch in text if ch.isdigit() or ch in ".-")
        if allowed:
            self._set_field_text(self.focus, self._field_text(self.focus) + allowed)

    def backspace(self) -> None:
        self._set_field_text(self.focus, self._field_text(self.focus)[:-1])

    def cycle_focus(self) -> None:
        index = self.FIELDS.index(self.focus)
        self.focus = self.FIELDS[(index + 1) % len(self.FIELDS)]

    def submit(self, spawn: tuple[float, float] | None) -> PlanetRequest | None:
        try:
            request = parse_planet_request(
                self.mass_text, self.speed_text, self.rotation, self.color, spawn, self._cfg
            )
        except InvalidRequestError as exc:
            self.error = str(exc)
            return None
        self.reset()
        self.hide()
        return request

    def handle_event(
        self,
        event: pygame.event.Event,
        spawn: tuple[float, float] | None,
    ) -> PlanetRequest | None:
        """Route a mouse or key event; returns a request when one was submitted."""

        if not self.visible:
            return None
        if event.type == pygame.MOUSEBUTTONDOWN:
            for button in self._buttons:
                if button.handle_event(event):
                    break
        elif event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self._submit_requested = True
            elif event.key == pygame.K_ESCAPE:
                self._cancel_requested = True
            elif event.key == pygame.K_TAB:
                self.cycle_focus()
            elif event.key == pygame.K_BACKSPACE:
                self.backspace()
            elif event.key == pygame.K_UP:
                self.nudge(self.focus, 1)
            elif event.key == pygame.K_DOWN:
                self.nudge(self.focus, -1)
            elif event.key == pygame.K_SPACE:
                self.toggle_rotation()
            elif event.key == pygame.K_c:
                self.cycle_color()
            elif event.unicode:
                self.type_text(event.unicode)

        if self._cancel_requested:
            self._cancel_requested = False
            self._submit_requested = False
            self.reset()
            self.hide()
            return None
        if self._submit_requested:
            self._submit_requested = False
            return self.submit(spawn)
        return None

    def rows(self) -> Sequence[tuple[str, tuple[int, int, int]]]:
        text_color = self._render_cfg.panel_text_color
        marker = {name: ">" if self.focus == name else " " for name in self.FIELDS}
        lines = [
            (f"{marker['mass']}Mass   {self.mass_text}", text_color),
            (f"{marker['speed']}Speed  {self.speed_text}", text_color),
            (f" {self.rotation}", text_color),
            (f" Color  {self.color}", text_color),
        ]
        if self.error:
            lines.append((f" {self.error}", self._render_cfg.panel_error_color))
        return lines

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        if not self.visible:
            return
        panel = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        pygame.draw.rect(panel, self._render_cfg.panel_color, panel.get_rect(), border_radius=12)
        surface.blit(panel, self.rect.topleft)
        for row, (text, color) in enumerate(self.rows()):
            # the error line goes below the Add/Cancel row
            draw_row = row if row < 4 else 6
            x, y, _, height = self._row_rect(draw_row, 10, 0)
            text_surf = get_text_surface(font, text, color)
            surface.blit(text_surf, text_surf.get_rect(midleft=(x, y + height // 2)))
        swatch = pygame.Rect(self._row_rect(4, 10, self.WIDTH - 20))
        pygame.draw.rect(surface, pygame.Color(self.color), swatch, border_radius=6)
        mouse_pos = pygame.mouse.get_pos()
        for button in self._buttons:
            button.draw(surface, font, mouse_pos)


__all__ = ["Button", "ButtonVisualStyle", "PlanetForm"]
