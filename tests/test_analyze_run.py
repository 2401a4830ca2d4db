import sys

import pytest

import analyze_run
from orbit_canvas.core.logging_utils import RunLogger
from orbit_canvas.core.simulation import load_preset, step
from orbit_canvas.data.presets import get_preset


@pytest.fixture
def recorded_run(tmp_path, surface):
    with RunLogger(tmp_path, run_id="crossing") as logger:
        logger.write_meta({"width": 1000, "height": 650})
        state = load_preset(get_preset("crossing"), logger=logger)
        for _ in range(200):
            step(state, surface, logger=logger)
    return tmp_path / "crossing"


def test_load_and_summarize(recorded_run):
    ts = analyze_run.load_timeseries(recorded_run / analyze_run.TIMESERIES_FILENAME)
    events = analyze_run.load_events(recorded_run / analyze_run.EVENTS_FILENAME)

    assert ts["frame"].size == 200
    assert ts["bodies"][0] == 3
    assert ts["bodies"][-1] == 1

    summary = analyze_run.summarize_events(events)
    assert summary["spawn"] == 2
    assert summary["collision"] == 1
    assert summary["removal"] == 2
    assert summary["preset"] == 1

    points = analyze_run.collision_points(events)
    assert points.shape == (1, 2)

    lifetime = analyze_run.mean_planet_lifetime(events)
    collision_frame = next(event["frame"] for event in events if event["type"] == "collision")
    assert lifetime == pytest.approx(collision_frame)


def test_lifetime_without_removals():
    events = [{"frame": 0, "type": "spawn", "x": 1.0, "y": 2.0, "details": ""}]
    assert analyze_run.mean_planet_lifetime(events) is None


def test_main_writes_figures(recorded_run, monkeypatch, capsys):
    monkeypatch.setattr(
        sys,
        "argv",
        ["analyze_run", "--runs-root", str(recorded_run.parent)],
    )
    analyze_run.main()
    assert (recorded_run / "figs" / "bodies.png").exists()
    assert (recorded_run / "figs" / "collisions.png").exists()
    assert "Run: crossing" in capsys.readouterr().out


def test_lifetime_ignores_planets_still_alive():
    events = [
        {"frame": 0, "type": "spawn", "x": 1.0, "y": 2.0, "details": "id=1;mass=10;clockwise"},
        {"frame": 10, "type": "spawn", "x": 3.0, "y": 4.0, "details": "id=2;mass=10;clockwise"},
        {"frame": 30, "type": "removal", "x": 3.0, "y": 4.0, "details": "kind=planet;id=2"},
    ]
    assert analyze_run.mean_planet_lifetime(events) == pytest.approx(20.0)


def test_lifetime_skips_sun_removals():
    events = [
        {"frame": 0, "type": "spawn", "x": 1.0, "y": 2.0, "details": "id=5"},
        {"frame": 7, "type": "removal", "x": 500.0, "y": 325.0, "details": "kind=sun;id=5"},
    ]
    assert analyze_run.mean_planet_lifetime(events) is None


def test_parse_details():
    assert analyze_run.parse_details("id=3;mass=10;clockwise") == {"id": "3", "mass": "10"}
    assert analyze_run.parse_details("") == {}
