import pytest

from jumpboi.game.clock import SimulationClock
from jumpboi.game.entities import GROUND_Y, Actor, Obstacle, World


@pytest.fixture
def clock(quiet_rng, settings):
    return SimulationClock(quiet_rng, settings)


def test_tick_counter_increments(clock):
    world = World()
    report = clock.advance(world)
    assert world.tick_count == 1
    assert report.tick == 1
    assert report.spawned is None
    assert not report.collided


def test_obstacle_passes_and_scores(clock):
    world = World(obstacles=[Obstacle(x=1.0, height=3.0)])

    first = clock.advance(world)
    assert world.obstacles[0].x == 0.0
    assert first.passed == 0
    assert world.score == 0

    second = clock.advance(world)
    assert world.obstacles == []
    assert second.passed == 1
    assert world.score == 1


def test_ramp_on_cadence(clock):
    world = World(tick_count=99)
    report = clock.advance(world)
    assert report.ramped
    assert world.difficulty == pytest.approx(1.03)
    assert world.score == 1

    report = clock.advance(world)
    assert not report.ramped
    assert world.score == 1


def test_gravity_applies_before_integration(clock):
    world = World(actor=Actor(y=30.0, velocity_y=0.5, grounded=False))
    clock.advance(world)
    assert world.actor.velocity_y == pytest.approx(0.41)
    assert world.actor.y == pytest.approx(30.41)


def test_full_jump_never_dips_below_ground(clock, settings):
    world = World()
    world.actor.jump(settings.physics.jump_impulse)

    airborne_ticks = 0
    for _ in range(200):
        clock.advance(world)
        assert world.actor.y >= GROUND_Y
        if world.actor.grounded:
            break
        airborne_ticks += 1

    assert world.actor.grounded
    assert world.actor.y == GROUND_Y
    assert world.actor.velocity_y == 0.0
    # 2.8 / 0.09 ticks up, roughly as many down
    assert 50 < airborne_ticks < 70


def test_colliding_obstacle_holds_still_others_move(clock):
    hit = Obstacle(x=20.0, height=10.0)
    far = Obstacle(x=100.0, height=3.0)
    world = World(obstacles=[hit, far])

    report = clock.advance(world)

    assert report.collided
    assert hit.x == 20.0
    assert far.x == 99.0


def test_collision_uses_position_before_integration(clock):
    # Airborne actor rises out of range this tick, but was in range before moving
    world = World(
        actor=Actor(y=25.0, velocity_y=5.0, grounded=False),
        obstacles=[Obstacle(x=20.0, height=0.0)],
    )
    report = clock.advance(world)
    assert report.collided
    assert world.actor.y > 25.0 + 2.0


def test_difficulty_scales_obstacle_speed(clock):
    world = World(obstacles=[Obstacle(x=100.0, height=2.0)], difficulty=2.0)
    clock.advance(world)
    assert world.obstacles[0].x == 98.0


def test_spawned_obstacle_moves_on_its_first_tick(make_rng, settings):
    clock = SimulationClock(make_rng([0.95, 0.5, 0.0]), settings)
    world = World(tick_count=14)

    report = clock.advance(world)

    assert report.spawned is not None
    assert report.spawned.x == settings.playfield.width
    assert report.spawned.height == 12.0
    assert len(world.obstacles) == 1
    assert world.obstacles[0].x == settings.playfield.width - 1


def test_grounded_actor_stays_put(clock):
    world = World()
    for _ in range(10):
        clock.advance(world)
    assert world.actor == Actor()
