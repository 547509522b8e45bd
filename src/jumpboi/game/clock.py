"""Fixed-tick simulation step.

One call to :meth:`SimulationClock.advance` moves a :class:`World` forward
by exactly one tick. The order of the stages is fixed so a seeded run
always replays the same trajectory:

    1. count the tick
    2. spawn gate
    3. difficulty ramp (plus one survival point)
    4. ground clamp, then gravity
    5. collision test and obstacle movement
    6. prune exited obstacles (one point each)
    7. integrate the actor

Collisions are tested against the actor's position from before stage 7.
An obstacle that hits the actor stays where it is; the others still move,
prune and score on that same tick. Freezing the world afterwards is the
session's job.
"""

import logging

from jumpboi.config.settings import Settings
from jumpboi.game.collision import collided
from jumpboi.game.entities import TickReport, World
from jumpboi.game.random_source import RandomSource
from jumpboi.game.spawner import ObstacleSpawner

logger = logging.getLogger(__name__)


class SimulationClock:
    def __init__(self, rng: RandomSource, settings: Settings) -> None:
        self._physics = settings.physics
        self._difficulty = settings.difficulty
        self._spawner = ObstacleSpawner(
            rng, settings.spawn, settings.physics, settings.playfield
        )

    def advance(self, world: World) -> TickReport:
        world.tick_count += 1
        tick = world.tick_count

        spawned = self._spawner.maybe_spawn(tick, world.difficulty)
        spawned_view = None
        if spawned is not None:
            world.obstacles.append(spawned)
            spawned_view = spawned.view()  # at the spawn point, before it moves

        ramped = self._ramp(world)

        actor = world.actor
        ground_y = self._physics.ground_y
        actor.clamp_to_ground(ground_y)
        actor.apply_gravity(self._physics.gravity)

        hit = False
        for obstacle in world.obstacles:
            if collided(actor, obstacle):
                hit = True
            else:
                obstacle.advance(world.difficulty)

        passed = self._prune(world)

        actor.integrate(ground_y)

        return TickReport(
            tick=tick,
            spawned=spawned_view,
            passed=passed,
            ramped=ramped,
            collided=hit,
        )

    def _ramp(self, world: World) -> bool:
        if world.tick_count % self._difficulty.ramp_interval_ticks != 0:
            return False
        world.difficulty += self._difficulty.ramp_step
        world.score += 1
        logger.debug(
            f"Difficulty ramp at tick {world.tick_count}: x{world.difficulty:.2f}"
        )
        return True

    @staticmethod
    def _prune(world: World) -> int:
        kept = [o for o in world.obstacles if not o.has_exited]
        passed = len(world.obstacles) - len(kept)
        world.obstacles = kept
        world.score += passed
        return passed

