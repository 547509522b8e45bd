"""Non-blocking keyboard polling through curses."""

import curses
from typing import Optional

from jumpboi.hardware.base import KeySource

_SPECIAL_KEYS = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_RESIZE: "resize",
    27: "esc",
    ord(" "): "space",
    ord("\n"): "enter",
}


def key_name(code: int) -> Optional[str]:
    """Name for a curses key code, or None for keys we never bind."""
    if code in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[code]
    if 32 < code < 127:
        return chr(code).lower()
    return None


class CursesKeyboard(KeySource):
    def __init__(self, screen: "curses.window") -> None:
        self._screen = screen

    def read_key(self, timeout: float) -> Optional[str]:
        self._screen.timeout(max(0, int(timeout * 1000)))
        code = self._screen.getch()
        if code == -1:
            return None
        return key_name(code)
