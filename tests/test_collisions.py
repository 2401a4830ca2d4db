import numpy as np

from orbit_canvas.core.collisions import (
    NO_COLLISION,
    FrameCoord,
    apply_removals,
    bodies_collide,
    detect,
    overlap_matrix,
    removal_indices,
)
from orbit_canvas.core.model import SimulationState, create_body, create_sun


def test_touching_counts_as_collision():
    assert bodies_collide(FrameCoord(0, 0, 2), FrameCoord(3, 4, 3))
    assert not bodies_collide(FrameCoord(0, 0, 2), FrameCoord(3, 4, 2.9))


def test_overlap_matrix_is_symmetric_without_self_hits():
    coords = [FrameCoord(0, 0, 2), FrameCoord(3, 4, 3), FrameCoord(100, 100, 1)]
    mask = overlap_matrix(coords)
    assert not mask.diagonal().any()
    assert np.array_equal(mask, mask.T)
    assert mask[0, 1] and not mask[0, 2]


def test_no_collision_for_single_or_separate_bodies():
    assert detect([FrameCoord(500, 325, 50)]) is NO_COLLISION
    assert detect([FrameCoord(500, 325, 50), FrameCoord(800, 325, 10)]) is NO_COLLISION


def test_sun_overlap_removes_only_the_planet():
    coords = [FrameCoord(500, 325, 50), FrameCoord(555, 325, 10), FrameCoord(800, 325, 10)]
    result = detect(coords)
    assert result.collided
    assert result.pair == (0, 1)
    assert result.removals == (1,)
    assert result.point == (555.0, 325.0)

    state = SimulationState(
        bodies=[create_sun(), create_body(10, 555, 325, "red"), create_body(10, 800, 325, "blue")],
        coords=list(coords),
    )
    survivors = [state.bodies[0], state.bodies[2]]
    removed = apply_removals(state, result)
    assert [body.color for body in removed] == ["red"]
    assert state.bodies == survivors
    assert state.coords == [coords[0], coords[2]]


def test_two_planets_are_both_removed():
    coords = [FrameCoord(500, 325, 50), FrameCoord(700, 325, 10), FrameCoord(715, 325, 10)]
    result = detect(coords)
    assert result.pair == (1, 2)
    assert result.removals == (2, 1)
    assert result.point == (715.0, 325.0)

    state = SimulationState(
        bodies=[create_sun(), create_body(10, 700, 325, "red"), create_body(10, 715, 325, "blue")],
        coords=list(coords),
    )
    apply_removals(state, result)
    assert len(state.bodies) == 1
    assert state.bodies[0].is_sun
    assert state.coords == [coords[0]]


def test_only_first_pair_is_removed_per_frame():
    coords = [
        FrameCoord(500, 325, 50),
        FrameCoord(700, 325, 10),
        FrameCoord(710, 325, 10),
        FrameCoord(200, 325, 10),
        FrameCoord(205, 325, 10),
    ]
    result = detect(coords)
    assert result.pair == (1, 2)
    assert result.removals == (2, 1)


def test_first_hit_prefers_lower_first_index():
    coords = [FrameCoord(500, 325, 50), FrameCoord(700, 325, 10), FrameCoord(540, 325, 10)]
    result = detect(coords)
    assert result.pair == (0, 2)
    assert result.removals == (2,)


def test_sun_as_second_member_would_be_removed():
    assert removal_indices(1, 0) == (1, 0)
    assert removal_indices(0, 3) == (3,)
