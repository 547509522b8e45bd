"""Shared fixtures: scripted randomness, clean settings, sessions."""

import os
from typing import Sequence

import pytest

from jumpboi.config.settings import Settings
from jumpboi.core.events import EventBus
from jumpboi.game.controller import GameController
from jumpboi.game.session import GameSession
from jumpboi.graphics.renderer import SceneRenderer


class ScriptedRandom:
    """Replays a fixed list of draws, cycling when it runs out."""

    def __init__(self, values: Sequence[float]) -> None:
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self._values[self.calls % len(self._values)]
        self.calls += 1
        return value


@pytest.fixture
def settings(monkeypatch) -> Settings:
    for name in list(os.environ):
        if name.startswith("JUMPBOI_"):
            monkeypatch.delenv(name)
    return Settings(_env_file=None)


@pytest.fixture
def make_rng():
    return ScriptedRandom


@pytest.fixture
def quiet_rng() -> ScriptedRandom:
    """Never passes the spawn gate."""
    return ScriptedRandom([0.0])


@pytest.fixture
def session(quiet_rng, settings) -> GameSession:
    return GameSession(rng=quiet_rng, settings=settings)


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def controller(session, bus, settings) -> GameController:
    ctrl = GameController(
        session=session,
        event_bus=bus,
        renderer=SceneRenderer(settings.playfield),
        display=settings.display,
    )
    ctrl.attach()
    return ctrl
