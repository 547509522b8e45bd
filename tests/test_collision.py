from dataclasses import replace

import pytest

from jumpboi.game.collision import collided
from jumpboi.game.entities import Actor, Obstacle


def make_pair(dx: float, dy: float, height: float = 0.0):
    actor = Actor(x=20.0, y=24.0)
    obstacle = Obstacle(x=actor.x - dx, height=height, y=actor.y - dy)
    return actor, obstacle


def test_same_spot_with_tall_obstacle_collides():
    actor = Actor(x=20.0, y=24.0)
    obstacle = Obstacle(x=20.0, height=10.0, y=24.0)
    assert collided(actor, obstacle)


@pytest.mark.parametrize("dx", [3.0, -3.0])
def test_horizontal_boundary_is_not_a_hit(dx):
    actor, obstacle = make_pair(dx, 0.0)
    assert not collided(actor, obstacle)


@pytest.mark.parametrize("dx", [2.5, -2.5, 0.0])
def test_inside_horizontal_band_is_a_hit(dx):
    actor, obstacle = make_pair(dx, 0.0)
    assert collided(actor, obstacle)


def test_lower_vertical_boundary_is_not_a_hit():
    actor, obstacle = make_pair(0.0, -2.0)
    assert not collided(actor, obstacle)
    actor, obstacle = make_pair(0.0, -1.5)
    assert collided(actor, obstacle)


def test_upper_bound_grows_with_height():
    actor, obstacle = make_pair(0.0, 2.0, height=0.0)
    assert not collided(actor, obstacle)

    actor, obstacle = make_pair(0.0, 2.0, height=5.0)
    assert collided(actor, obstacle)

    actor, obstacle = make_pair(0.0, 7.0, height=5.0)
    assert not collided(actor, obstacle)

    actor, obstacle = make_pair(0.0, 6.5, height=5.0)
    assert collided(actor, obstacle)


def test_collision_check_leaves_state_untouched():
    actor = Actor(x=20.0, y=26.0, velocity_y=1.5, grounded=False)
    obstacle = Obstacle(x=21.0, height=4.0)
    actor_before = replace(actor)
    obstacle_before = replace(obstacle)

    collided(actor, obstacle)

    assert actor == actor_before
    assert obstacle == obstacle_before


def test_tolerances_are_configurable():
    actor, obstacle = make_pair(4.0, 0.0)
    assert not collided(actor, obstacle)
    assert collided(actor, obstacle, half_width=5.0)
