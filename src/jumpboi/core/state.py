"""
State machine for a JUMP BOI run.

States:
    RUNNING: The simulation advances every tick
    GAME_OVER: The actor hit an obstacle; only a reset has effect
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Session lifecycle states."""
    RUNNING = auto()
    GAME_OVER = auto()


StateListener = Callable[[GameState, GameState], None]


class StateMachine:
    """
    Manages the run lifecycle and its transitions.

    There is exactly one way into GAME_OVER (a collision) and exactly
    one way back out (a reset), so the table holds two entries.
    """

    VALID_TRANSITIONS: list[tuple[GameState, GameState]] = [
        (GameState.RUNNING, GameState.GAME_OVER),   # Collision
        (GameState.GAME_OVER, GameState.RUNNING),   # Reset
    ]

    def __init__(self, initial_state: GameState = GameState.RUNNING) -> None:
        self._state = initial_state
        self._listeners: list[StateListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"StateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> GameState:
        """Get current state."""
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == GameState.RUNNING

    @property
    def is_game_over(self) -> bool:
        return self._state == GameState.GAME_OVER

    def can_transition(self, to_state: GameState) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: GameState) -> bool:
        """
        Attempt to transition to a new state.

        Args:
            to_state: Target state

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state

        logger.info(f"State transition: {old_state.name} -> {to_state.name}")

        for listener in list(self._listeners):
            try:
                listener(old_state, to_state)
            except Exception as e:
                logger.error(f"Error in state listener: {e}")

        return True

    def add_listener(self, callback: StateListener) -> None:
        """Add a state change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: StateListener) -> None:
        """Remove a state change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)
