"""
Event bus for JUMP BOI.

Front ends publish key presses and frame ticks here; the game controller
and the front ends themselves subscribe. Key names are translated into
events by the shared ``KEY_BINDINGS`` table so every front end agrees on
the controls.
"""

from collections import defaultdict, deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Awaitable, Callable, Deque, Dict, List, Optional, Union
import asyncio
import inspect
import logging
import time

logger = logging.getLogger(__name__)


class EventType(Enum):
    # Input
    JUMP = auto()
    RESET = auto()
    QUIT = auto()

    # Session
    GAME_OVER = auto()   # data: score, tick
    GAME_RESET = auto()

    # Driver
    TICK = auto()        # data: delta (seconds), frame


@dataclass
class Event:
    """A published event. ``source`` names the publisher ("terminal", "session", ...)."""
    type: EventType
    data: Dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.monotonic)


Handler = Callable[[Event], Union[None, Awaitable[None]]]
Unsubscribe = Callable[[], None]


class EventBus:
    """
    Publish/subscribe hub.

    ``emit`` delivers at once to plain-function handlers. Events put on the
    queue with ``queue_event`` are delivered by ``process_queue``, which also
    awaits coroutine handlers. A failing handler is logged and skipped.
    """

    def __init__(self, history_limit: int = 100) -> None:
        self._by_type: Dict[EventType, List[Handler]] = defaultdict(list)
        self._catch_all: List[Handler] = []
        self._pending: "asyncio.Queue[Event]" = asyncio.Queue()
        self._history: Deque[Event] = deque(maxlen=history_limit)

    def subscribe(self, event_type: EventType, handler: Handler) -> Unsubscribe:
        """Register ``handler`` for one event type; call the result to undo."""
        return self._register(self._by_type[event_type], handler, event_type.name)

    def subscribe_all(self, handler: Handler) -> Unsubscribe:
        return self._register(self._catch_all, handler, "*")

    @staticmethod
    def _register(handlers: List[Handler], handler: Handler, label: str) -> Unsubscribe:
        handlers.append(handler)
        logger.debug(f"Handler subscribed to {label}")

        def unsubscribe() -> None:
            if handler in handlers:
                handlers.remove(handler)
                logger.debug(f"Handler unsubscribed from {label}")

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Deliver now. Coroutine handlers are skipped on this path."""
        self._history.append(event)
        for handler in self._handlers_for(event):
            if inspect.iscoroutinefunction(handler):
                continue
            self._call(handler, event)

    def queue_event(self, event: Event) -> None:
        self._pending.put_nowait(event)

    async def process_queue(self) -> None:
        """Drain the queue, awaiting coroutine handlers together per event."""
        while not self._pending.empty():
            event = self._pending.get_nowait()
            self._history.append(event)

            coroutines = []
            for handler in self._handlers_for(event):
                if inspect.iscoroutinefunction(handler):
                    coroutines.append(handler(event))
                else:
                    self._call(handler, event)

            if coroutines:
                results = await asyncio.gather(*coroutines, return_exceptions=True)
                for result in results:
                    if isinstance(result, Exception):
                        logger.error(f"Error in async handler for {event.type.name}: {result}")

            self._pending.task_done()

    def get_history(self, event_type: Optional[EventType] = None, limit: int = 10) -> List[Event]:
        """Most recent events, oldest first, optionally of one type."""
        events = [e for e in self._history if event_type is None or e.type == event_type]
        return events[-limit:]

    def clear_history(self) -> None:
        self._history.clear()

    def _handlers_for(self, event: Event) -> List[Handler]:
        # Copy, so handlers may unsubscribe while being called
        return [*self._by_type.get(event.type, ()), *self._catch_all]

    @staticmethod
    def _call(handler: Handler, event: Event) -> None:
        try:
            handler(event)
        except Exception as e:
            logger.error(f"Error in handler for {event.type.name}: {e}")


# Shared by every front end. Keys not listed are ignored.
KEY_BINDINGS: Dict[str, EventType] = {
    "up": EventType.JUMP,
    "w": EventType.JUMP,
    "space": EventType.JUMP,
    "r": EventType.RESET,
    "q": EventType.QUIT,
    "esc": EventType.QUIT,
}


def event_for_key(key: str, source: str = "keyboard") -> Optional[Event]:
    """Input event for a key name, or None if the key is unbound."""
    event_type = KEY_BINDINGS.get(key.lower())
    if event_type is None:
        return None
    return Event(event_type, data={"key": key}, source=source)


def tick_event(delta: float, frame: int) -> Event:
    return Event(EventType.TICK, data={"delta": delta, "frame": frame})
