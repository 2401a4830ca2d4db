"""Pairwise overlap detection for the bodies of one frame.

Pairs are visited as ordered ``(i, j)`` tuples in row-major order, so every
unordered pair is seen twice and the earliest hit always has ``i < j``. Only
that first hit is acted on; any remaining overlaps are picked up again on
the next frame.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple, Sequence

import numpy as np

from .config import SIM_CFG, SimCfg

if TYPE_CHECKING:  # pragma: no cover
    from .model import Body, SimulationState


class FrameCoord(NamedTuple):
    x: float
    y: float
    r: float


@dataclass(frozen=True)
class CollisionResult:
    collided: bool = False
    point: tuple[float, float] | None = None
    pair: tuple[int, int] | None = None
    removals: tuple[int, ...] = ()


NO_COLLISION = CollisionResult()


def bodies_collide(a: FrameCoord, b: FrameCoord) -> bool:
    """Touching counts: ``r_a + r_b >= distance``."""

    return a.r + b.r >= math.hypot(a.x - b.x, a.y - b.y)


def overlap_matrix(coords: Sequence[FrameCoord]) -> np.ndarray:
    """Boolean ``n x n`` matrix, ``True`` where bodies ``i`` and ``j`` overlap."""

    arr = np.asarray(coords, dtype=float).reshape(-1, 3)
    dx = arr[:, 0, None] - arr[None, :, 0]
    dy = arr[:, 1, None] - arr[None, :, 1]
    distance = np.hypot(dx, dy)
    mask = (arr[:, 2, None] + arr[None, :, 2]) >= distance
    np.fill_diagonal(mask, False)
    return mask


def removal_indices(i: int, j: int, cfg: SimCfg = SIM_CFG) -> tuple[int, ...]:
    """Indices to delete for the colliding pair ``(i, j)``, highest first.

    Only ``i`` is checked against the sun's index, so the sun survives a hit
    as first member and would not as second member.
    """

    if i == cfg.sun_index:
        return (j,)
    return tuple(sorted((i, j), reverse=True))


def detect(coords: Sequence[FrameCoord], cfg: SimCfg = SIM_CFG) -> CollisionResult:
    if len(coords) < 2:
        return NO_COLLISION
    hits = np.argwhere(overlap_matrix(coords))
    if not len(hits):
        return NO_COLLISION
    i, j = (int(idx) for idx in hits[0])
    return CollisionResult(
        collided=True,
        point=(float(coords[j].x), float(coords[j].y)),
        pair=(i, j),
        removals=removal_indices(i, j, cfg),
    )


def apply_removals(state: SimulationState, result: CollisionResult) -> list[Body]:
    """Drop the colliding bodies from the live collection and the frame cache."""

    removed: list[Body] = []
    for idx in sorted(result.removals, reverse=True):
        removed.append(state.bodies.pop(idx))
        if idx < len(state.coords):
            del state.coords[idx]
    return removed


__all__ = [
    "CollisionResult",
    "FrameCoord",
    "NO_COLLISION",
    "apply_removals",
    "bodies_collide",
    "detect",
    "overlap_matrix",
    "removal_indices",
]
