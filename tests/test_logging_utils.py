import json

from orbit_canvas.core.logging_utils import RunLogger


def test_creates_run_directory_and_marker(tmp_path):
    logger = RunLogger(tmp_path, run_id="demo")
    logger.close()
    assert (tmp_path / "demo").is_dir()
    assert (tmp_path / "last_run.txt").read_text(encoding="utf-8") == "demo"


def test_existing_run_id_gets_suffix(tmp_path):
    RunLogger(tmp_path, run_id="demo").close()
    second = RunLogger(tmp_path, run_id="demo")
    second.close()
    assert second.run_id == "demo_01"
    assert (tmp_path / "last_run.txt").read_text(encoding="utf-8") == "demo_01"


def test_rows_are_buffered_until_close(tmp_path):
    logger = RunLogger(tmp_path, run_id="buf", timeseries_flush_threshold=10)
    logger.log_ts([3, 2, 0.5, 31.0])
    assert logger.timeseries_path.read_text().splitlines() == [
        "frame,bodies,explosion_alpha,explosion_radius"
    ]
    logger.close()
    assert logger.timeseries_path.read_text().splitlines()[1] == "3,2,0.5,31"


def test_event_rows(tmp_path):
    with RunLogger(tmp_path, run_id="ev") as logger:
        logger.log_event(4, "collision", (555.0, 325.0), "pair=0:1")
        logger.log_event(5, "preset", details="a,b")
    lines = logger.events_path.read_text().splitlines()
    assert lines[0] == "frame,type,x,y,details"
    assert lines[1] == "4,collision,555,325,pair=0:1"
    assert lines[2] == "5,preset,,,a;b"


def test_write_meta(tmp_path):
    with RunLogger(tmp_path, run_id="meta") as logger:
        logger.write_meta({"fps": 60, "width": 1000})
    assert json.loads(logger.meta_path.read_text(encoding="utf-8")) == {"fps": 60, "width": 1000}
