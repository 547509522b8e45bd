"""
Curses-backed displays.

The playfield is a numpy RGB buffer with one pixel per terminal cell.
On ``show()`` every pixel is snapped to the nearest of the eight basic
terminal colors and non-black cells are painted as full blocks.
"""

import curses
import logging

import numpy as np
from numpy.typing import NDArray

from jumpboi.hardware.base import Display, TextDisplay

logger = logging.getLogger(__name__)

BLOCK = "█"

# Approximate RGB of the basic curses colors, indexed like curses.COLOR_*
TERMINAL_PALETTE = np.array([
    (0, 0, 0),        # COLOR_BLACK
    (205, 0, 0),      # COLOR_RED
    (0, 205, 0),      # COLOR_GREEN
    (205, 205, 0),    # COLOR_YELLOW
    (0, 0, 238),      # COLOR_BLUE
    (205, 0, 205),    # COLOR_MAGENTA
    (0, 205, 205),    # COLOR_CYAN
    (229, 229, 229),  # COLOR_WHITE
], dtype=np.int32)


def quantize(buffer: NDArray[np.uint8], palette: NDArray[np.int32] = TERMINAL_PALETTE) -> NDArray[np.intp]:
    """Index of the nearest palette color for every pixel.

    Returns:
        Array of shape (height, width) with values in [0, len(palette))
    """
    pixels = buffer.astype(np.int32)[:, :, np.newaxis, :]
    dist_sq = ((pixels - palette[np.newaxis, np.newaxis, :, :]) ** 2).sum(axis=-1)
    return dist_sq.argmin(axis=-1)


def init_color_pairs() -> bool:
    """One color pair per palette entry, pair n+1 for color n, on the default background.

    Returns False, without touching the terminal, if it has no color support.
    """
    if not curses.has_colors():
        logger.info("Terminal has no color support, drawing monochrome")
        return False
    curses.start_color()
    try:
        curses.use_default_colors()
        background = -1
    except curses.error:
        background = curses.COLOR_BLACK
    for index in range(len(TERMINAL_PALETTE)):
        curses.init_pair(index + 1, index, background)
    return True


class CursesDisplay(Display):
    """
    Playfield window drawn inside a titled border.

    ``top``/``left`` locate the border's corner; the pixel area starts one
    cell in.
    """

    def __init__(
        self,
        screen: "curses.window",
        width: int,
        height: int,
        top: int = 0,
        left: int = 0,
        title: str = "",
        color: bool = True,
    ) -> None:
        self._screen = screen
        self._width = width
        self._height = height
        self._top = top
        self._left = left
        self._title = title
        self._color = color
        self._buffer = np.zeros((height, width, 3), dtype=np.uint8)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_buffer(self, buffer: NDArray[np.uint8]) -> None:
        if buffer.shape == self._buffer.shape:
            np.copyto(self._buffer, buffer)
        else:
            resized = np.zeros_like(self._buffer)
            h = min(buffer.shape[0], self._height)
            w = min(buffer.shape[1], self._width)
            resized[:h, :w] = buffer[:h, :w]
            np.copyto(self._buffer, resized)

    def clear(self, r: int = 0, g: int = 0, b: int = 0) -> None:
        self._buffer.fill(0)
        if r or g or b:
            self._buffer[:, :] = [r, g, b]

    def get_buffer(self) -> NDArray[np.uint8]:
        return self._buffer.copy()

    def show(self) -> None:
        self._draw_border()

        indices = quantize(self._buffer)
        rows, cols = np.nonzero(indices)
        for y, x in zip(rows.tolist(), cols.tolist()):
            pair = curses.color_pair(int(indices[y, x]) + 1) if self._color else curses.A_NORMAL
            self._screen.addstr(self._top + 1 + y, self._left + 1 + x, BLOCK, pair)

    def _draw_border(self) -> None:
        top, left = self._top, self._left
        bottom = top + self._height + 1
        right = left + self._width + 1

        horizontal = "─" * self._width
        self._screen.addstr(top, left, "┌" + horizontal + "┐")
        self._screen.addstr(bottom, left, "└" + horizontal + "┘")
        for row in range(top + 1, bottom):
            self._screen.addstr(row, left, "│")
            self._screen.addstr(row, right, "│")

        if self._title:
            self._screen.addstr(top, left + 1, self._title[: self._width])


class CursesStatusLine(TextDisplay):
    """A few rows of plain text below the playfield."""

    def __init__(self, screen: "curses.window", cols: int, rows: int, top: int, left: int = 0) -> None:
        self._screen = screen
        self._cols = cols
        self._rows = rows
        self._top = top
        self._left = left

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def rows(self) -> int:
        return self._rows

    def write(self, text: str, row: int = 0, col: int = 0) -> None:
        if not 0 <= row < self._rows or not 0 <= col < self._cols:
            return
        visible = text[: self._cols - col]
        self._screen.addstr(self._top + row, self._left + col, visible.ljust(self._cols - col))

    def clear(self) -> None:
        self.write_lines([])
