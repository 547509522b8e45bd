"""Deterministic game simulation: actor, obstacles, collision, tick loop."""

from .collision import collided
from .entities import Actor, Obstacle, ObstacleColor, SessionSnapshot, TickReport, World
from .random_source import RandomDrawError, RandomSource, default_random_source
from .session import Command, GameSession

__all__ = [
    "Actor",
    "Command",
    "GameSession",
    "Obstacle",
    "ObstacleColor",
    "RandomDrawError",
    "RandomSource",
    "SessionSnapshot",
    "TickReport",
    "World",
    "collided",
    "default_random_source",
]
