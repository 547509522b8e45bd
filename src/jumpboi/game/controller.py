"""Glue between the event bus, the fixed tick cadence and a GameSession.

Front ends only emit events and ask for frames; everything that touches
the session goes through here.
"""

import logging
from typing import Callable, List

from jumpboi.config.settings import DisplaySettings
from jumpboi.core.events import Event, EventBus, EventType
from jumpboi.core.state import GameState
from jumpboi.game.session import Command, GameSession
from jumpboi.graphics.primitives import Buffer
from jumpboi.graphics.renderer import SceneRenderer, format_hud

logger = logging.getLogger(__name__)

MAX_FRAME_DELTA = 0.1  # seconds


class GameController:
    """Runs a session off bus events.

    TICK events carry wall-clock deltas; the controller turns them into a
    whole number of fixed simulation steps, capped per frame.
    """

    def __init__(
        self,
        session: GameSession,
        event_bus: EventBus,
        renderer: SceneRenderer,
        display: DisplaySettings,
    ) -> None:
        self.session = session
        self.event_bus = event_bus
        self.renderer = renderer

        self._tick_seconds = display.tick_ms / 1000.0
        self._max_steps = display.max_steps_per_frame
        self._accum = 0.0
        self._best_score = 0
        self._unsubscribers: List[Callable[[], None]] = []

        session.add_state_listener(self._on_state_change)

    def attach(self) -> None:
        """Subscribe to input and tick events."""
        self._unsubscribers = [
            self.event_bus.subscribe(EventType.JUMP, self._on_jump),
            self.event_bus.subscribe(EventType.RESET, self._on_reset),
            self.event_bus.subscribe(EventType.TICK, self._on_tick),
        ]

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    @property
    def best_score(self) -> int:
        """Best score since process start, including the current run."""
        return max(self._best_score, self.session.score)

    def update(self, delta: float) -> int:
        """Feed elapsed wall time; returns the number of ticks simulated."""
        self._accum += min(max(delta, 0.0), MAX_FRAME_DELTA)

        steps = 0
        while self._accum >= self._tick_seconds and steps < self._max_steps:
            self.session.tick()
            self._accum -= self._tick_seconds
            steps += 1

        if steps == self._max_steps:
            # Drop the backlog rather than spiral
            self._accum = min(self._accum, self._tick_seconds)
        return steps

    def render(self, buffer: Buffer) -> None:
        self.renderer.render(self.session.snapshot(), buffer)

    def hud_lines(self) -> List[str]:
        return format_hud(self.session.snapshot(), self.best_score)

    def _on_jump(self, event: Event) -> None:
        self.session.handle_input(Command.JUMP)

    def _on_reset(self, event: Event) -> None:
        self.session.handle_input(Command.RESET)

    def _on_tick(self, event: Event) -> None:
        self.update(event.data.get("delta", self._tick_seconds))

    def _on_state_change(self, old: GameState, new: GameState) -> None:
        if new == GameState.GAME_OVER:
            score = self.session.score
            self._best_score = max(self._best_score, score)
            self.event_bus.emit(Event(
                EventType.GAME_OVER,
                data={"score": score, "tick": self.session.tick_count},
                source="session",
            ))
        elif new == GameState.RUNNING:
            self._accum = 0.0
            self.event_bus.emit(Event(EventType.GAME_RESET, source="session"))
