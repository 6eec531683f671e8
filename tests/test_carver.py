"""Tests for the random-walk tunnel carver."""

import random

import pytest

from random_walker.worldgen.carver import allowed_directions, carve, pick_length, pick_start
from random_walker.worldgen.errors import GenerationFailedError, InvalidArgumentError
from random_walker.worldgen.grid import Direction


def _carve_seeded(seed, dimension=10, tunnels=12, length=4):
    return carve(dimension, tunnels, length, random.Random(seed))


def test_scripted_five_by_five_scenario(scripted_rng):
    # start (2,2); right x3 stops at the edge after 2, down x3 stops after 2, left x2
    rng = scripted_rng(values=[0.5, 0.5, 0.99, 0.99, 0.5], picks=[3, 1, 0])

    grid = carve(5, 3, 3, rng)

    assert grid.start == (2, 2)
    assert [t.direction for t in grid.tunnels] == [Direction.RIGHT, Direction.DOWN, Direction.LEFT]
    assert [t.length for t in grid.tunnels] == [2, 2, 2]
    assert sorted(grid.open_cells()) == [(2, 2), (2, 3), (2, 4), (3, 4), (4, 3), (4, 4)]
    assert 3 <= grid.count_open() <= 9


def test_blocked_tunnels_do_not_use_budget(scripted_rng):
    # start (0,0): up and left are blocked, then down succeeds
    rng = scripted_rng(values=[0.0, 0.0, 0.5, 0.5, 0.5], picks=[0, 2, 1])

    grid = carve(5, 1, 1, rng)

    assert len(grid.tunnels) == 1
    assert grid.tunnels[0].direction is Direction.DOWN
    assert list(grid.open_cells()) == [(0, 0)]


def test_gives_up_after_max_attempts(scripted_rng):
    rng = scripted_rng(values=[0.0, 0.0, 0.5, 0.5], picks=[0, 2])

    with pytest.raises(GenerationFailedError):
        carve(5, 1, 1, rng, max_attempts=2)


def test_single_cell_grid_fails_instead_of_looping():
    with pytest.raises(GenerationFailedError):
        carve(1, 1, 1, random.Random(0), max_attempts=50)


@pytest.mark.parametrize("seed", range(40))
def test_walk_invariants(seed):
    dimension, tunnels, length = 10, 12, 4
    grid = _carve_seeded(seed, dimension, tunnels, length)

    for row, col in grid.open_cells():
        assert 0 <= row < dimension and 0 <= col < dimension

    assert len(grid.tunnels) == tunnels
    for tunnel in grid.tunnels:
        assert 1 <= tunnel.length <= length
        assert tunnel.cells[0] == tunnel.start
        for (r0, c0), (r1, c1) in zip(tunnel.cells, tunnel.cells[1:]):
            assert (r1 - r0, c1 - c0) == tunnel.direction.value

    for prev, cur in zip(grid.tunnels, grid.tunnels[1:]):
        assert cur.direction is not prev.direction
        assert cur.direction is not prev.direction.opposite


def test_same_seed_same_map():
    a = _carve_seeded(123)
    b = _carve_seeded(123)

    assert a == b
    assert a.rows() == b.rows()
    assert [t.to_dict() for t in a.tunnels] == [t.to_dict() for t in b.tunnels]


def test_different_seeds_usually_differ():
    maps = {tuple(map(tuple, _carve_seeded(s).rows())) for s in range(10)}
    assert len(maps) > 1


@pytest.mark.parametrize("bad", [0, -3, 2.5, "5", None, True])
def test_rejects_bad_dimension(bad):
    with pytest.raises(InvalidArgumentError):
        carve(bad, 3, 3, random.Random(0))


@pytest.mark.parametrize("kwargs", [
    {"max_tunnels": 0},
    {"max_length": -1},
    {"max_attempts": 0},
])
def test_rejects_bad_budgets(kwargs):
    params = {"dimension": 5, "max_tunnels": 3, "max_length": 3, "rng": random.Random(0)}
    params.update(kwargs)
    with pytest.raises(ValueError):
        carve(**params)


def test_start_is_clamped_into_single_cell_grid(scripted_rng):
    assert pick_start(1, scripted_rng(values=[0.99, 0.99], picks=[])) == (0, 0)


def test_length_never_zero(scripted_rng):
    assert pick_length(5, scripted_rng(values=[0.0], picks=[])) == 1
    assert pick_length(5, scripted_rng(values=[0.999999], picks=[])) == 5


def test_allowed_directions_are_perpendicular():
    assert allowed_directions(None) == [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]
    assert allowed_directions(Direction.UP) == [Direction.LEFT, Direction.RIGHT]
    assert allowed_directions(Direction.RIGHT) == [Direction.UP, Direction.DOWN]
