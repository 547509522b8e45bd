"""
Terminal runner for JUMP BOI.

Owns the curses screen for the lifetime of a run: puts the terminal into
cbreak mode on the alternate screen, polls keys with a timeout bounded by
the next tick deadline, emits TICK on a fixed cadence and draws one frame
per loop iteration. The terminal is always restored on the way out.
"""

import asyncio
import curses
import logging
import time
from typing import Optional

from jumpboi.config.settings import Settings
from jumpboi.core.events import Event, EventBus, EventType, event_for_key, tick_event
from jumpboi.game.controller import GameController
from jumpboi.graphics.primitives import new_buffer
from jumpboi.graphics.renderer import TITLE
from jumpboi.terminal.display import CursesDisplay, CursesStatusLine, init_color_pairs
from jumpboi.terminal.keyboard import CursesKeyboard

logger = logging.getLogger(__name__)

HUD_ROWS = 2
MIN_COLS = 40
MIN_ROWS = 12


class TerminalError(RuntimeError):
    """Raised when the terminal cannot host the game."""


class TerminalRunner:
    """
    Terminal front end.

    Keyboard Mapping:
        UP / W / SPACE: Jump
        R: Restart after game over
        Q / ESC: Quit
    """

    def __init__(
        self,
        settings: Settings,
        event_bus: EventBus,
        controller: GameController,
    ) -> None:
        self.settings = settings
        self.event_bus = event_bus
        self.controller = controller

        self._screen: Optional["curses.window"] = None
        self._keyboard: Optional[CursesKeyboard] = None
        self._display: Optional[CursesDisplay] = None
        self._status: Optional[CursesStatusLine] = None
        self._size: tuple[int, int] = (0, 0)
        self._running = False
        self._color = False
        self._frame_count = 0

        self.event_bus.subscribe(EventType.QUIT, self._on_quit)

    def _init_terminal(self) -> None:
        """Enter cbreak mode and set up colors."""
        try:
            screen = curses.initscr()
        except curses.error as e:
            raise TerminalError(f"Failed to initialize terminal: {e}") from e

        self._screen = screen
        try:
            curses.noecho()
            curses.cbreak()
            screen.keypad(True)
            self._color = init_color_pairs()
        except curses.error as e:
            self._restore_terminal()
            raise TerminalError(f"Failed to configure terminal: {e}") from e

        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")

        rows, cols = screen.getmaxyx()
        if rows < MIN_ROWS or cols < MIN_COLS:
            self._restore_terminal()
            raise TerminalError(
                f"Terminal is {cols}x{rows}, need at least {MIN_COLS}x{MIN_ROWS}"
            )

        self._keyboard = CursesKeyboard(screen)
        self._layout(rows, cols)
        logger.info(f"Terminal initialized: {cols}x{rows}")

    def _restore_terminal(self) -> None:
        if self._screen is None:
            return
        try:
            self._screen.keypad(False)
            curses.nocbreak()
            curses.echo()
        finally:
            curses.endwin()
            self._screen = None
        logger.info("Terminal restored")

    def _layout(self, rows: int, cols: int) -> None:
        """Size the playfield to the screen: border around it, HUD below."""
        assert self._screen is not None
        width = cols - 3
        height = rows - 2 - HUD_ROWS
        self._display = CursesDisplay(
            self._screen, width=width, height=height, title=TITLE,
            color=self._color,
        )
        self._status = CursesStatusLine(
            self._screen, cols=cols - 1, rows=HUD_ROWS, top=height + 2
        )
        self._size = (rows, cols)

    async def run(self) -> None:
        """Main terminal loop."""
        self._init_terminal()
        self._running = True
        logger.info("Terminal runner started")

        tick_rate = self.settings.tick_seconds
        last_tick = time.monotonic()

        try:
            while self._running:
                self._render()

                timeout = max(0.0, tick_rate - (time.monotonic() - last_tick))
                key = self._keyboard.read_key(timeout) if self._keyboard else None
                if key is not None:
                    self._handle_key(key)

                now = time.monotonic()
                elapsed = now - last_tick
                if elapsed >= tick_rate:
                    self.event_bus.emit(tick_event(elapsed, self._frame_count))
                    last_tick = now
                    self._frame_count += 1

                await self.event_bus.process_queue()

                # Yield to other tasks
                await asyncio.sleep(0)
        finally:
            self._restore_terminal()

        logger.info(f"Terminal runner stopped after {self._frame_count} ticks")

    def stop(self) -> None:
        self._running = False

    def _handle_key(self, key: str) -> None:
        if key == "resize":
            self._check_resize()
            return

        event = event_for_key(key, source="terminal")
        if event is not None:
            self.event_bus.emit(event)

    def _check_resize(self) -> None:
        assert self._screen is not None
        rows, cols = self._screen.getmaxyx()
        if (rows, cols) != self._size:
            self._screen.clear()
            self._size = (rows, cols)
            if rows >= MIN_ROWS and cols >= MIN_COLS:
                self._layout(rows, cols)
            logger.debug(f"Terminal resized to {cols}x{rows}")

    def _render(self) -> None:
        screen = self._screen
        if screen is None or self._display is None or self._status is None:
            return

        rows, cols = self._size
        screen.erase()
        if rows < MIN_ROWS or cols < MIN_COLS:
            screen.addstr(0, 0, "terminal too small"[: max(0, cols - 1)])
            screen.refresh()
            return

        buffer = new_buffer(self._display.width, self._display.height)
        self.controller.render(buffer)
        self._display.present(buffer)
        self._status.write_lines(self.controller.hud_lines())

        screen.refresh()

    def _on_quit(self, event: Event) -> None:
        logger.info(f"Quit requested via {event.source}")
        self.stop()
