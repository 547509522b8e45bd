"""Frame buffer helpers.

Buffers are numpy arrays of shape (height, width, 3), dtype uint8, row 0
at the top. Everything here clips silently at the buffer edges.
"""

from typing import Optional, Tuple
import numpy as np
from numpy.typing import NDArray

Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


def new_buffer(width: int, height: int) -> Buffer:
    return np.zeros((height, width, 3), dtype=np.uint8)


def clear(buffer: Buffer, color: Color = (0, 0, 0)) -> None:
    buffer[:, :] = color


def fill_rect(buffer: Buffer, x: int, y: int, width: int, height: int, color: Color) -> None:
    """Fill the cells [x, x + width) x [y, y + height), clipped to the buffer."""
    h, w = buffer.shape[:2]
    left, right = max(x, 0), min(x + width, w)
    top, bottom = max(y, 0), min(y + height, h)
    if left < right and top < bottom:
        buffer[top:bottom, left:right] = color


def hline(
    buffer: Buffer,
    row: int,
    color: Color,
    start: int = 0,
    end: Optional[int] = None,
) -> None:
    """Horizontal line across ``row`` from ``start`` up to (not including) ``end``."""
    if not 0 <= row < buffer.shape[0]:
        return
    stop = buffer.shape[1] if end is None else end
    fill_rect(buffer, start, row, stop - start, 1, color)
