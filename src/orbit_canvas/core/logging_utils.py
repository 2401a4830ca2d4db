"""Run logging for the orbit canvas: buffered CSV files per session."""
from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence


class _CsvChannel:
    """One CSV file with a header row and a write buffer."""

    def __init__(self, path: Path, header: Sequence[str], flush_threshold: int) -> None:
        self.path = path
        self._fh = path.open("w", newline="")
        self._fh.write(",".join(header) + "\n")
        self._fh.flush()
        self._buffer: list[str] = []
        self._threshold = max(1, flush_threshold)

    def append(self, row: str) -> None:
        self._buffer.append(row)
        if len(self._buffer) >= self._threshold:
            self.flush()

    def flush(self) -> None:
        if self._buffer:
            self._fh.write("\n".join(self._buffer) + "\n")
            self._fh.flush()
            self._buffer.clear()

    def close(self) -> None:
        self.flush()
        self._fh.close()


class RunLogger:
    """Stores per-frame counts and simulation events of one session."""

    TIMESERIES_HEADER = ["frame", "bodies", "explosion_alpha", "explosion_radius"]
    EVENTS_HEADER = ["frame", "type", "x", "y", "details"]

    def __init__(
        self,
        root_dir: str | Path = "data/runs",
        run_id: Optional[str] = None,
        *,
        timeseries_flush_threshold: int = 200,
        events_flush_threshold: int = 20,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

        base = run_id or f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_run"
        candidate = base
        suffix = 1
        while (self.root_dir / candidate).exists():
            candidate = f"{base}_{suffix:02d}"
            suffix += 1

        self.run_id = candidate
        self.run_dir = self.root_dir / self.run_id
        self.run_dir.mkdir(parents=True, exist_ok=False)
        self.meta_path = self.run_dir / "meta.json"

        self._timeseries = _CsvChannel(
            self.run_dir / "timeseries.csv", self.TIMESERIES_HEADER, timeseries_flush_threshold
        )
        self._events = _CsvChannel(
            self.run_dir / "events.csv", self.EVENTS_HEADER, events_flush_threshold
        )
        (self.root_dir / "last_run.txt").write_text(self.run_id, encoding="utf-8")

    @property
    def timeseries_path(self) -> Path:
        return self._timeseries.path

    @property
    def events_path(self) -> Path:
        return self._events.path

    def write_meta(self, meta: dict) -> None:
        with self.meta_path.open("w", encoding="utf-8") as fh:
            json.dump(meta, fh, indent=2, sort_keys=True)

    def log_ts(self, values: Sequence[float]) -> None:
        self._timeseries.append(",".join(self._format(v) for v in values))

    def log_event(
        self,
        frame: int,
        event_type: str,
        point: tuple[float, float] | None = None,
        details: str = "",
    ) -> None:
        x, y = point if point is not None else ("", "")
        row = [frame, event_type, x, y, details.replace(",", ";")]
        self._events.append(",".join(self._format(v) for v in row))

    def close(self) -> None:
        self._timeseries.close()
        self._events.close()

    @staticmethod
    def _format(value: object) -> str:
        if isinstance(value, float):
            return f"{value:.10g}"
        return str(value)

    def __enter__(self) -> "RunLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None


__all__ = ["RunLogger"]
