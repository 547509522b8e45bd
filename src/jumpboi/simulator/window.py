"""
Desktop window front end using pygame.

Renders the same frame buffer as the terminal front end, scaled up, with
the HUD drawn underneath.
"""

import asyncio
import logging
from typing import Optional

import numpy as np
import pygame

from jumpboi.config.settings import Settings
from jumpboi.core.events import Event, EventBus, EventType, event_for_key, tick_event
from jumpboi.game.controller import GameController
from jumpboi.graphics.primitives import new_buffer
from jumpboi.graphics.renderer import TITLE
from jumpboi.hardware.base import Display

logger = logging.getLogger(__name__)

HUD_HEIGHT = 48
BG_COLOR = (20, 20, 30)
TEXT_COLOR = (200, 200, 220)
BORDER_COLOR = (40, 40, 50)


class SurfaceDisplay(Display):
    """Numpy buffer presented as a pygame surface."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._buffer = np.zeros((height, width, 3), dtype=np.uint8)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_buffer(self, buffer: np.ndarray) -> None:
        np.copyto(self._buffer, buffer)

    def clear(self, r: int = 0, g: int = 0, b: int = 0) -> None:
        self._buffer[:, :] = [r, g, b]

    def show(self) -> None:
        # Presentation happens in render()
        pass

    def get_buffer(self) -> np.ndarray:
        return self._buffer.copy()

    def render(self, size: tuple[int, int]) -> pygame.Surface:
        """Render buffer to a pygame surface of the given size."""
        surface = pygame.surfarray.make_surface(self._buffer.swapaxes(0, 1))
        return pygame.transform.scale(surface, size)


class SimulatorWindow:
    """
    Pygame window front end.

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

        playfield = settings.playfield
        self.display = SurfaceDisplay(int(playfield.width), int(playfield.height))

        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._font: Optional[pygame.font.Font] = None
        self._running = False
        self._frame_count = 0

        self.event_bus.subscribe(EventType.QUIT, self._on_quit)

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        cfg = self.settings.display
        pygame.init()
        pygame.display.set_caption(TITLE.strip())
        self._screen = pygame.display.set_mode(
            (cfg.window_width, cfg.window_height + HUD_HEIGHT),
            pygame.DOUBLEBUF,
        )
        self._clock = pygame.time.Clock()
        pygame.font.init()
        self._font = pygame.font.SysFont(None, 22)
        logger.info(f"Pygame initialized: {cfg.window_width}x{cfg.window_height}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                name = pygame.key.name(event.key)
                if name == "escape":
                    name = "esc"
                bus_event = event_for_key(name, source="window")
                if bus_event is not None:
                    self.event_bus.emit(bus_event)

    def _render(self) -> None:
        if self._screen is None:
            return

        cfg = self.settings.display
        self._screen.fill(BG_COLOR)

        buffer = new_buffer(self.display.width, self.display.height)
        self.controller.render(buffer)
        self.display.present(buffer)
        self._screen.blit(self.display.render((cfg.window_width, cfg.window_height)), (0, 0))
        pygame.draw.line(
            self._screen, BORDER_COLOR,
            (0, cfg.window_height), (cfg.window_width, cfg.window_height), 2,
        )

        if self._font:
            for row, line in enumerate(self.controller.hud_lines()):
                text = self._font.render(line, True, TEXT_COLOR)
                self._screen.blit(text, (10, cfg.window_height + 6 + row * 20))

        pygame.display.flip()

    async def run(self) -> None:
        """Main window loop."""
        self._init_pygame()
        self._running = True

        logger.info("Window started")

        try:
            while self._running:
                self._handle_events()

                if self._clock:
                    delta = self._clock.get_time() / 1000.0
                    self.event_bus.emit(tick_event(delta, self._frame_count))

                await self.event_bus.process_queue()

                self._render()

                if self._clock:
                    self._clock.tick(self.settings.display.window_fps)

                self._frame_count += 1

                # Yield to other tasks
                await asyncio.sleep(0)
        finally:
            pygame.quit()
            logger.info("Window stopped")

    def stop(self) -> None:
        self._running = False

    def _on_quit(self, event: Event) -> None:
        logger.info(f"Quit requested via {event.source}")
        self.stop()
