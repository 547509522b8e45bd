"""GameSession: the single owner of a run's state.

The external driver talks to the game only through ``handle_input`` and
``tick`` and reads everything else back from the accessors or from
``snapshot()``. Calls must be serialized by the driver; nothing here locks.
"""

from enum import Enum, auto
from typing import Optional, Tuple
import logging

from jumpboi.config.settings import Settings
from jumpboi.core.state import GameState, StateListener, StateMachine
from jumpboi.game.clock import SimulationClock
from jumpboi.game.entities import Actor, ObstacleView, SessionSnapshot, TickReport, World
from jumpboi.game.random_source import RandomSource, default_random_source

logger = logging.getLogger(__name__)


class Command(Enum):
    """Inputs the core understands. Quitting is the driver's business."""
    JUMP = auto()
    RESET = auto()
    NOOP = auto()


class GameSession:
    """
    Owns the world, the simulation clock and the run state machine.

    Lifecycle:
        RUNNING --collision--> GAME_OVER --reset--> RUNNING
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or Settings()
        self._rng = rng if rng is not None else default_random_source(self._settings.seed)
        self._clock = SimulationClock(self._rng, self._settings)
        self._machine = StateMachine(GameState.RUNNING)
        self._world = self._new_world()
        self._last_report: Optional[TickReport] = None

    def _new_world(self) -> World:
        return World(
            actor=Actor(
                x=self._settings.playfield.actor_x,
                y=self._settings.physics.ground_y,
            )
        )

    # Mutation surface

    def handle_input(self, command: Command) -> None:
        if command is Command.JUMP:
            if self.game_over:
                return
            if self._world.actor.jump(self._settings.physics.jump_impulse):
                logger.debug(f"Jump at tick {self._world.tick_count}")
        elif command is Command.RESET:
            if self.game_over:
                self.reset()

    def tick(self) -> None:
        """Advance one fixed step. No-op once the run is over."""
        if self.game_over:
            return

        report = self._clock.advance(self._world)
        self._last_report = report

        if report.collided:
            logger.info(
                f"Game over at tick {report.tick}: score={self._world.score}"
            )
            self._machine.transition(GameState.GAME_OVER)

    def reset(self) -> None:
        """Discard all run state and start over."""
        self._world = self._new_world()
        self._last_report = None
        if self._machine.is_game_over:
            self._machine.transition(GameState.RUNNING)
        logger.info("Session reset")

    def add_state_listener(self, callback: StateListener) -> None:
        self._machine.add_listener(callback)

    # Read-only accessors

    @property
    def state(self) -> GameState:
        return self._machine.state

    @property
    def game_over(self) -> bool:
        return self._machine.is_game_over

    @property
    def actor(self) -> Actor:
        """The live actor. Treat as read-only."""
        return self._world.actor

    @property
    def obstacles(self) -> Tuple[ObstacleView, ...]:
        return tuple(o.view() for o in self._world.obstacles)

    @property
    def score(self) -> int:
        return self._world.score

    @property
    def difficulty(self) -> float:
        return self._world.difficulty

    @property
    def tick_count(self) -> int:
        return self._world.tick_count

    @property
    def last_report(self) -> Optional[TickReport]:
        return self._last_report

    @property
    def settings(self) -> Settings:
        return self._settings

    def snapshot(self) -> SessionSnapshot:
        actor = self._world.actor
        return SessionSnapshot(
            actor_x=actor.x,
            actor_y=actor.y,
            actor_velocity_y=actor.velocity_y,
            grounded=actor.grounded,
            obstacles=self.obstacles,
            tick_count=self._world.tick_count,
            difficulty=self._world.difficulty,
            score=self._world.score,
            game_over=self.game_over,
        )
