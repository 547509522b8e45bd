"""Scene renderer: draws a session snapshot onto an RGB buffer.

World coordinates have y growing upward from the bottom of the playfield;
buffer rows grow downward. The renderer is the only place that knows
about that flip.
"""

from typing import List, Tuple
import logging

from jumpboi.config.settings import FieldSettings
from jumpboi.game.entities import SessionSnapshot
from jumpboi.graphics.primitives import Buffer, Color, clear, fill_rect, hline

logger = logging.getLogger(__name__)

TITLE = " Jump Boi "

BACKGROUND: Color = (0, 0, 0)
GROUND_COLOR: Color = (255, 255, 255)
ACTOR_COLOR: Color = (50, 220, 50)

ACTOR_SIZE = 2.0
OBSTACLE_WIDTH = 2.0


class SceneRenderer:
    """Maps the playfield onto buffers of any size."""

    def __init__(self, playfield: FieldSettings) -> None:
        self._field = playfield

    def render(self, snapshot: SessionSnapshot, buffer: Buffer) -> None:
        clear(buffer, BACKGROUND)

        h, w = buffer.shape[:2]
        if h == 0 or w == 0:
            return

        ground_row = self._row(self._field.ground_line_y, h)
        hline(buffer, ground_row, GROUND_COLOR)

        for obstacle in snapshot.obstacles:
            x, width = self._span_x(obstacle.x, OBSTACLE_WIDTH, w)
            y, height = self._span_y(obstacle.y, max(obstacle.height, 1.0), h)
            fill_rect(buffer, x, y, width, height, obstacle.color.rgb)

        x, width = self._span_x(snapshot.actor_x, ACTOR_SIZE, w)
        y, height = self._span_y(snapshot.actor_y, ACTOR_SIZE, h)
        fill_rect(buffer, x, y, width, height, ACTOR_COLOR)

    def _col(self, x: float, w: int) -> int:
        return int(x * w / self._field.width)

    def _row(self, y: float, h: int) -> int:
        return h - 1 - int(y * h / self._field.height)

    def _span_x(self, x: float, size: float, w: int) -> Tuple[int, int]:
        left = self._col(x, w)
        right = self._col(x + size, w)
        return left, max(1, right - left)

    def _span_y(self, y: float, size: float, h: int) -> Tuple[int, int]:
        # Rows covered: (row of the top edge, row of the base], never empty
        bottom = self._row(y, h)
        start = min(self._row(y + size, h) + 1, bottom)
        return start, bottom - start + 1


def format_hud(snapshot: SessionSnapshot, best_score: int) -> List[str]:
    """HUD text lines shown under the playfield."""
    stats = (
        f"Score: {snapshot.score}  Best: {best_score}  "
        f"Speed: x{snapshot.difficulty:.2f}"
    )
    if snapshot.game_over:
        status = "you die - press r to restart"
    else:
        status = f"Existing Enemies: {len(snapshot.obstacles)}"
    return [stats, status]
