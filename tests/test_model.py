import pygame

from orbit_canvas.core.config import SIM_CFG
from orbit_canvas.core.model import PLANET, SUN, create_body, create_sun


def test_radius_equals_mass():
    body = create_body(12.5, 10, 20, "#ffffff")
    assert body.radius == body.mass == 12.5
    assert body.kind == PLANET
    assert body.orbit is None


def test_degenerate_mass_is_floored():
    body = create_body(0, 10, 20, "#ffffff")
    assert body.mass == SIM_CFG.min_radius
    assert body.radius == body.mass


def test_sun_sits_at_center():
    sun = create_sun()
    assert sun.kind == SUN
    assert sun.is_sun
    assert sun.position == SIM_CFG.center
    assert sun.radius == 50.0
    assert sun.color == "yellow"


def test_bodies_compare_by_identity():
    assert create_body(10, 1, 1, "red") != create_body(10, 1, 1, "red")


def test_draw_fills_with_body_color(surface):
    create_sun().draw(surface)
    assert surface.get_at((500, 325)) == pygame.Color("yellow")
    assert surface.get_at((10, 10)) == pygame.Color(0, 0, 0)


def test_draw_accepts_hex_colors(surface):
    create_body(10, 100, 100, "#4dabf7").draw(surface)
    assert surface.get_at((100, 100)) == pygame.Color("#4dabf7")


def test_body_ids_are_unique():
    first = create_body(10, 1, 1, "red")
    second = create_body(10, 1, 1, "red")
    assert first.body_id != second.body_id
