import pygame
import pytest

from orbit_canvas.core.config import FORM_CFG
from orbit_canvas.render.ui import PlanetForm


@pytest.fixture
def form():
    panel = PlanetForm((750, 20))
    panel.show()
    return panel


def key_event(key, unicode=""):
    return pygame.event.Event(pygame.KEYDOWN, key=key, unicode=unicode, mod=0)


def click_event(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def test_starts_hidden_with_defaults():
    panel = PlanetForm((750, 20))
    assert not panel.visible
    assert panel.mass_text == "10"
    assert panel.speed_text == "50"
    assert panel.rotation == "clockwise"
    assert panel.color == "#ffffff"


def test_submit_returns_request_then_resets_and_hides(form):
    form.nudge("mass", 1)
    form.toggle_rotation()
    form.cycle_color()
    request = form.submit((700, 325))

    assert request.mass == 11.0
    assert request.speed == 0.5
    assert request.clockwise is False
    assert request.color == FORM_CFG.palette[1]
    assert not form.visible
    assert form.mass_text == "10"
    assert form.rotation == "clockwise"
    assert form.color == "#ffffff"


def test_invalid_input_keeps_form_open_with_error(form):
    form.mass_text = ""
    assert form.submit((700, 325)) is None
    assert form.visible
    assert "mass" in form.error


def test_typing_edits_focused_field(form):
    form.backspace()
    form.backspace()
    form.type_text("2x5")
    assert form.mass_text == "25"
    form.cycle_focus()
    assert form.focus == "speed"
    form.type_text("0")
    assert form.speed_text == "500"


def test_nudge_never_goes_below_one_step(form):
    for _ in range(20):
        form.nudge("mass", -1)
    assert form.mass_text == "1"


def test_enter_key_submits(form):
    request = form.handle_event(key_event(pygame.K_RETURN, "\r"), (700, 325))
    assert request is not None
    assert request.mass == 10.0
    assert not form.visible


def test_escape_key_cancels(form):
    form.type_text("5")
    assert form.handle_event(key_event(pygame.K_ESCAPE), (700, 325)) is None
    assert not form.visible
    assert form.mass_text == "10"


def test_add_button_click_submits(form):
    add_button = next(button for button in form._buttons if button.text == "Add")
    assert form.contains(add_button.rect.center)
    request = form.handle_event(click_event(add_button.rect.center), (700, 325))
    assert request is not None
    assert not form.visible


def test_plus_button_click_nudges_mass(form):
    plus = next(button for button in form._buttons if button.text == "+")
    form.handle_event(click_event(plus.rect.center), (700, 325))
    assert form.mass_text == "11"
    assert form.visible


def test_hidden_form_ignores_events():
    panel = PlanetForm((750, 20))
    assert panel.handle_event(key_event(pygame.K_RETURN, "\r"), (700, 325)) is None
    assert not panel.contains((800, 50))
