"""Actor, obstacles and the mutable world they live in."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

Color = Tuple[int, int, int]

GROUND_Y = 24.0
ACTOR_X = 20.0


class ObstacleColor(Enum):
    """Obstacle palette, drawn uniformly at spawn."""
    RED = (220, 50, 50)
    YELLOW = (255, 200, 0)
    MAGENTA = (200, 60, 200)
    CYAN = (60, 200, 220)
    BLUE = (40, 60, 220)

    @property
    def rgb(self) -> Color:
        return self.value


PALETTE: Tuple[ObstacleColor, ...] = tuple(ObstacleColor)


@dataclass
class Actor:
    """The player body. Only y moves; x is pinned at the spawn column."""
    x: float = ACTOR_X
    y: float = GROUND_Y
    velocity_y: float = 0.0
    grounded: bool = True

    def jump(self, impulse: float) -> bool:
        """Launch from the ground. Returns True if the jump was taken."""
        if not self.grounded:
            return False
        self.velocity_y = impulse
        self.grounded = False
        return True

    def apply_gravity(self, gravity: float) -> None:
        if not self.grounded:
            self.velocity_y -= gravity

    def clamp_to_ground(self, ground_y: float) -> bool:
        """Pin to the ground if below it. Returns True if a clamp happened."""
        if self.y < ground_y:
            self.y = ground_y
            self.velocity_y = 0.0
            self.grounded = True
            return True
        return False

    def integrate(self, ground_y: float) -> None:
        self.y += self.velocity_y
        self.clamp_to_ground(ground_y)


@dataclass
class Obstacle:
    """A ground-anchored hazard scrolling right to left."""
    x: float
    height: float
    color: ObstacleColor = ObstacleColor.RED
    velocity: float = 1.0
    y: float = GROUND_Y

    def __post_init__(self) -> None:
        if self.height < 0:
            raise ValueError("height must be >= 0")
        if self.velocity <= 0:
            raise ValueError("velocity must be > 0")

    def advance(self, difficulty: float) -> None:
        self.x -= self.velocity * difficulty

    @property
    def has_exited(self) -> bool:
        return self.x < 0.0

    def view(self) -> "ObstacleView":
        return ObstacleView(x=self.x, y=self.y, height=self.height, color=self.color)


@dataclass
class World:
    """Everything a tick mutates, owned by a GameSession."""
    actor: Actor = field(default_factory=Actor)
    obstacles: List[Obstacle] = field(default_factory=list)
    tick_count: int = 0
    difficulty: float = 1.0
    score: int = 0


@dataclass(frozen=True)
class ObstacleView:
    """Read-only obstacle data for rendering."""
    x: float
    y: float
    height: float
    color: ObstacleColor


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable picture of a session, comparable for equality."""
    actor_x: float
    actor_y: float
    actor_velocity_y: float
    grounded: bool
    obstacles: Tuple[ObstacleView, ...]
    tick_count: int
    difficulty: float
    score: int
    game_over: bool


@dataclass(frozen=True)
class TickReport:
    """What happened during one tick."""
    tick: int
    spawned: Optional[ObstacleView] = None
    passed: int = 0
    ramped: bool = False
    collided: bool = False
