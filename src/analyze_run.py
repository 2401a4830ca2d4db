"""Analyze a recorded orbit canvas session and generate figures."""
from __future__ import annotations

import argparse
import csv
import json
from pathlib import Path
from typing import Dict, List

import numpy as np

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt


TIMESERIES_FILENAME = "timeseries.csv"
EVENTS_FILENAME = "events.csv"
META_FILENAME = "meta.json"
FIGS_SUBDIR = "figs"
EVENT_TYPES = ("spawn", "collision", "removal", "explosion_end", "preset", "reset")
CANVAS_SIZE = (1000, 650)


def load_timeseries(path: Path) -> Dict[str, np.ndarray]:
    with path.open("r", newline="") as fh:
        reader = csv.DictReader(fh)
        columns: Dict[str, List[float]] = {name: [] for name in reader.fieldnames or []}
        for row in reader:
            for key, value in row.items():
                if key is None:
                    continue
                columns.setdefault(key, []).append(float(value))
    return {key: np.asarray(values) for key, values in columns.items()}


def _optional_float(value: str | None) -> float | None:
    if value is None or value == "":
        return None
    return float(value)


def load_events(path: Path) -> List[dict]:
    with path.open("r", newline="") as fh:
        reader = csv.DictReader(fh)
        events: List[dict] = []
        for row in reader:
            if not row or not row.get("type"):
                continue
            events.append(
                {
                    "frame": int(row["frame"]),
                    "type": row["type"],
                    "x": _optional_float(row.get("x")),
                    "y": _optional_float(row.get("y")),
                    "details": row.get("details") or "",
                }
            )
    return events


def ensure_fig_dir(run_dir: Path) -> Path:
    fig_dir = run_dir / FIGS_SUBDIR
    fig_dir.mkdir(parents=True, exist_ok=True)
    return fig_dir


def summarize_events(events: List[dict]) -> Dict[str, int]:
    summary: Dict[str, int] = {event_type: 0 for event_type in EVENT_TYPES}
    for event in events:
        if event["type"] in summary:
            summary[event["type"]] += 1
    return summary


def collision_points(events: List[dict]) -> np.ndarray:
    points = [
        (event["x"], event["y"])
        for event in events
        if event["type"] == "collision" and event["x"] is not None and event["y"] is not None
    ]
    return np.asarray(points, dtype=float).reshape(-1, 2)


def parse_details(details: str) -> Dict[str, str]:
    """Split ``key=value;key=value`` details, skipping bare tokens."""

    fields: Dict[str, str] = {}
    for token in details.split(";"):
        key, sep, value = token.partition("=")
        if sep:
            fields[key] = value
    return fields


def mean_planet_lifetime(events: List[dict]) -> float | None:
    """Average frames between spawn and removal, over planets that were removed."""

    spawned: Dict[str, int] = {}
    lifetimes: List[int] = []
    for event in events:
        fields = parse_details(event["details"])
        body_id = fields.get("id")
        if body_id is None:
            continue
        if event["type"] == "spawn":
            spawned[body_id] = event["frame"]
        elif event["type"] == "removal" and fields.get("kind") == "planet":
            if body_id in spawned:
                lifetimes.append(event["frame"] - spawned.pop(body_id))
    if not lifetimes:
        return None
    return float(np.mean(lifetimes))


def plot_bodies(fig_dir: Path, ts: Dict[str, np.ndarray], events: List[dict]) -> None:
    fig, ax = plt.subplots(figsize=(7, 4))
    ax.step(ts["frame"], ts["bodies"], where="post", color="#4dabf7")
    labelled = False
    for event in events:
        if event["type"] == "collision":
            ax.axvline(
                event["frame"],
                color="#d9480f",
                linestyle="--",
                alpha=0.5,
                label=None if labelled else "Collision",
            )
            labelled = True
    if labelled:
        ax.legend()
    ax.set_xlabel("frame")
    ax.set_ylabel("live bodies")
    ax.set_title("Live bodies over time")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(fig_dir / "bodies.png", dpi=150)
    plt.close(fig)


def plot_collisions(fig_dir: Path, points: np.ndarray, meta: dict) -> None:
    width = meta.get("width", CANVAS_SIZE[0])
    height = meta.get("height", CANVAS_SIZE[1])
    fig, ax = plt.subplots(figsize=(7, 7 * height / width))
    ax.scatter([width / 2], [height / 2], color="#ffd43b", s=120, label="Sun")
    if len(points):
        ax.scatter(points[:, 0], points[:, 1], color="#ff6b6b", s=30, label="Collision")
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect("equal", "box")
    ax.set_title("Collision points")
    ax.legend()
    fig.tight_layout()
    fig.savefig(fig_dir / "collisions.png", dpi=150)
    plt.close(fig)


def print_summary(
    run_dir: Path,
    frames: int,
    event_summary: Dict[str, int],
    lifetime: float | None,
) -> None:
    print(f"Run: {run_dir.name}")
    print(f" Frames recorded: {frames}")
    print(" Events:" + ",".join(f" {etype}: {count}" for etype, count in event_summary.items()))
    if lifetime is not None:
        print(f" Mean planet lifetime: {lifetime:.1f} frames")
    else:
        print(" Mean planet lifetime: no planet was removed")


def main() -> None:
    parser = argparse.ArgumentParser(description="Analyze a logged session and create figures.")
    parser.add_argument("run_dir", nargs="?", help="path to a specific run directory")
    parser.add_argument("--runs-root", default="data/runs", help="where runs are stored")
    args = parser.parse_args()

    base_runs_dir = Path(args.runs_root)
    if args.run_dir:
        run_path = Path(args.run_dir)
        if not run_path.is_dir():
            run_path = base_runs_dir / args.run_dir
    else:
        last_run_file = base_runs_dir / "last_run.txt"
        if not last_run_file.exists():
            parser.error("no run given and last_run.txt is missing")
        run_path = base_runs_dir / last_run_file.read_text(encoding="utf-8").strip()

    if not run_path.is_dir():
        parser.error(f"run directory not found: {run_path}")

    meta_path = run_path / META_FILENAME
    ts_path = run_path / TIMESERIES_FILENAME
    ev_path = run_path / EVENTS_FILENAME
    if not ts_path.exists() or not ev_path.exists():
        parser.error("run directory is missing timeseries.csv or events.csv")

    meta: dict = {}
    if meta_path.exists():
        with meta_path.open("r", encoding="utf-8") as fh:
            meta = json.load(fh)

    ts = load_timeseries(ts_path)
    if not ts or not ts.get("frame", np.array([])).size:
        parser.error("timeseries.csv is empty, nothing to analyze")
    events = load_events(ev_path)

    fig_dir = ensure_fig_dir(run_path)
    plot_bodies(fig_dir, ts, events)
    plot_collisions(fig_dir, collision_points(events), meta)

    print_summary(run_path, int(ts["frame"].size), summarize_events(events), mean_planet_lifetime(events))


if __name__ == "__main__":
    main()
