from __future__ import annotations

import random

from conftest import SequenceRandom

from pyrunner.domain.game_state import Obstacle
from pyrunner.domain.scoring import min_gap
from pyrunner.domain.spawner import move_obstacles, next_gap, spawn_obstacle, tick_spawner


def test_spawn_at_right_edge_resting_on_ground(config):
    o = spawn_obstacle(SequenceRandom(0.0, 0.0), config)

    assert o.x == config.field_width + 10
    assert (o.w, o.h) == (20.0, 30.0)
    assert o.y + o.h == config.ground_y


def test_spawn_dimensions_stay_in_range(config):
    rng = random.Random(11)
    for _ in range(500):
        o = spawn_obstacle(rng, config)
        assert 20 <= o.w < 45
        assert 30 <= o.h < 65


def test_min_gap_shrinks_with_score_and_floors_at_35(config):
    assert min_gap(0, config) == 90
    assert min_gap(199, config) == 90
    assert min_gap(200, config) == 89
    assert min_gap(11_000, config) == 35
    assert min_gap(50_000, config) == 35


def test_next_gap_between_min_gap_and_140(config):
    assert next_gap(0, SequenceRandom(0.5), config) == 115.0
    assert next_gap(0, SequenceRandom(0.0), config) == 90.0

    rng = random.Random(5)
    for score in range(0, 30_000, 250):
        gap = next_gap(score, rng, config)
        assert min_gap(score, config) <= gap < 140


def test_timer_counts_down_without_spawning(config):
    rng = SequenceRandom(0.5)

    result = tick_spawner((), 5.0, 0, rng, config)

    assert result.obstacles == ()
    assert result.spawn_timer == 4.0
    assert rng.calls == 0


def test_timer_expiry_spawns_one_and_rearms(config):
    existing = (Obstacle(x=300.0, y=200.0, w=30.0, h=40.0),)
    rng = SequenceRandom(0.0, 0.0, 0.5)

    result = tick_spawner(existing, 1.0, 0, rng, config)

    assert len(result.obstacles) == 2
    assert result.obstacles[0] == existing[0]
    assert result.obstacles[1].x == config.field_width + 10
    assert result.spawn_timer == 115.0
    assert rng.calls == 3


def test_move_left_and_drop_past_margin_in_order(config):
    obstacles = (
        Obstacle(x=-34.0, y=0.0, w=20.0, h=30.0),  # ends at -20 after moving
        Obstacle(x=-30.0, y=0.0, w=20.0, h=30.0),
        Obstacle(x=100.0, y=0.0, w=20.0, h=30.0),
    )

    moved = move_obstacles(obstacles, 6, config)

    assert [o.x for o in moved] == [-36.0, 94.0]
    assert all(o.w == 20.0 and o.h == 30.0 for o in moved)
