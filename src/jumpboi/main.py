"""
Main entry point for JUMP BOI.

Loads settings, configures logging and launches the selected front end
(curses terminal by default, pygame window on request).
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from jumpboi.config.settings import Settings, get_settings
from jumpboi.core.events import EventBus
from jumpboi.game.controller import GameController
from jumpboi.game.session import GameSession
from jumpboi.graphics.renderer import SceneRenderer


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure logging.

    Curses owns the screen in terminal mode, so logs go to a file there.
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        filename=str(log_file) if log_file else None,
    )


def build_controller(settings: Settings, event_bus: EventBus) -> GameController:
    """Wire a fresh session to the bus."""
    session = GameSession(settings=settings)
    controller = GameController(
        session=session,
        event_bus=event_bus,
        renderer=SceneRenderer(settings.playfield),
        display=settings.display,
    )
    controller.attach()
    return controller


async def run_terminal(settings: Settings) -> None:
    """Run the curses front end."""
    from jumpboi.terminal.runner import TerminalRunner

    event_bus = EventBus()
    controller = build_controller(settings, event_bus)
    runner = TerminalRunner(settings=settings, event_bus=event_bus, controller=controller)
    await runner.run()


async def run_window(settings: Settings) -> None:
    """Run the pygame window front end."""
    from jumpboi.simulator.window import SimulatorWindow

    event_bus = EventBus()
    controller = build_controller(settings, event_bus)
    window = SimulatorWindow(settings=settings, event_bus=event_bus, controller=controller)
    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv
    from pydantic import ValidationError

    # Load environment variables
    load_dotenv()

    try:
        settings = get_settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.ERROR)
        logging.getLogger(__name__).error(f"Invalid configuration: {e}")
        sys.exit(1)

    log_file = settings.log_file if settings.is_terminal else None
    setup_logging(settings.debug, log_file)

    logger = logging.getLogger(__name__)
    logger.info("JUMP BOI starting...")

    try:
        if settings.is_terminal:
            logger.info("Running in terminal mode")
            asyncio.run(run_terminal(settings))
        else:
            logger.info("Running in window mode")
            asyncio.run(run_window(settings))

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("JUMP BOI stopped")


if __name__ == "__main__":
    main()
