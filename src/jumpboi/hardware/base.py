"""
Output and input contracts for the front ends.

The controller renders into plain numpy buffers; a front end only has to
supply something that can put such a buffer on screen, a few lines of
status text, and a way to poll keys.
"""

from abc import ABC, abstractmethod
from typing import Optional
import numpy as np
from numpy.typing import NDArray


class Display(ABC):
    """A pixel surface of fixed size (terminal cells count as pixels)."""

    @property
    @abstractmethod
    def width(self) -> int:
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        ...

    @abstractmethod
    def set_buffer(self, buffer: NDArray[np.uint8]) -> None:
        """Copy in a (height, width, 3) RGB frame."""
        ...

    @abstractmethod
    def clear(self, r: int = 0, g: int = 0, b: int = 0) -> None:
        ...

    @abstractmethod
    def show(self) -> None:
        """Make the current frame visible."""
        ...

    @abstractmethod
    def get_buffer(self) -> NDArray[np.uint8]:
        """Copy of the current frame."""
        ...

    def present(self, buffer: NDArray[np.uint8]) -> None:
        self.set_buffer(buffer)
        self.show()


class TextDisplay(ABC):
    """Fixed grid of text rows, used for the HUD."""

    @property
    @abstractmethod
    def cols(self) -> int:
        ...

    @property
    @abstractmethod
    def rows(self) -> int:
        ...

    @abstractmethod
    def write(self, text: str, row: int = 0, col: int = 0) -> None:
        """Write ``text`` at (row, col); anything past the edge is cut off."""
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    def write_lines(self, lines: list[str]) -> None:
        """Replace the whole grid with ``lines``, one per row."""
        for row in range(self.rows):
            self.write(lines[row] if row < len(lines) else "", row)


class KeySource(ABC):
    """Polled keyboard."""

    @abstractmethod
    def read_key(self, timeout: float) -> Optional[str]:
        """
        Wait up to ``timeout`` seconds for one key press.

        Returns:
            A key name ("up", "space", "esc", or the lowercase character),
            or None if nothing arrived in time
        """
        ...
