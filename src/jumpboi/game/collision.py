"""Actor versus obstacle overlap test."""

from jumpboi.game.entities import Actor, Obstacle

HALF_WIDTH = 3.0
VERTICAL_TOLERANCE = 2.0


def collided(
    actor: Actor,
    obstacle: Obstacle,
    *,
    half_width: float = HALF_WIDTH,
    vertical_tolerance: float = VERTICAL_TOLERANCE,
) -> bool:
    """True iff the actor overlaps the obstacle's lethal zone.

    The zone is asymmetric: it reaches ``vertical_tolerance`` below the
    obstacle's base but ``vertical_tolerance + height`` above it. Bounds are
    strict, so touching an edge exactly is not a hit.
    """
    dx = actor.x - obstacle.x
    dy = actor.y - obstacle.y
    return (
        -half_width < dx < half_width
        and -vertical_tolerance < dy < vertical_tolerance + obstacle.height
    )
