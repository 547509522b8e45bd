"""Procedural obstacle spawning.

Every ``interval_ticks`` ticks one draw decides whether an obstacle
appears. The gate compares against ``threshold / difficulty``, so spawns
get more frequent as difficulty climbs. A spawn consumes two further
draws, height first, then color.
"""

import logging
import math
from typing import Optional

from jumpboi.config.settings import FieldSettings, PhysicsSettings, SpawnSettings
from jumpboi.game.entities import PALETTE, Obstacle
from jumpboi.game.random_source import RandomSource, draw

logger = logging.getLogger(__name__)


class ObstacleSpawner:
    def __init__(
        self,
        rng: RandomSource,
        spawn: SpawnSettings,
        physics: PhysicsSettings,
        playfield: FieldSettings,
    ) -> None:
        self._rng = rng
        self._spawn = spawn
        self._ground_y = physics.ground_y
        self._start_x = playfield.width

    def is_eligible(self, tick_count: int) -> bool:
        return tick_count % self._spawn.interval_ticks == 0

    def maybe_spawn(self, tick_count: int, difficulty: float) -> Optional[Obstacle]:
        """Run the spawn gate for this tick; return the new obstacle, if any."""
        if not self.is_eligible(tick_count):
            return None

        gate = draw(self._rng)
        if gate <= self._spawn.threshold / difficulty:
            return None

        height = _round_half_up(draw(self._rng) * self._spawn.max_height)
        color = PALETTE[min(int(draw(self._rng) * len(PALETTE)), len(PALETTE) - 1)]

        obstacle = Obstacle(
            x=self._start_x,
            height=height,
            color=color,
            velocity=self._spawn.obstacle_velocity,
            y=self._ground_y,
        )
        logger.debug(
            f"Spawned obstacle at tick {tick_count}: height={height:.0f} color={color.name}"
        )
        return obstacle


def _round_half_up(value: float) -> float:
    # round() is banker's rounding; heights round half away from zero
    return float(math.floor(value + 0.5))
