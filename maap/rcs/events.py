from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger("maap")

Handler = Callable[..., Any]


class EventDispatcher:
    """Maps event names to handlers, called in registration order.

    Handler exceptions are not caught here; they propagate to whoever called
    ``emit`` and stop the remaining handlers for that event.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = defaultdict(list)

    def on(self, event: str, handler: Handler) -> Handler:
        self._handlers[event].append(handler)
        return handler

    def once(self, event: str, handler: Handler) -> Handler:
        def wrapper(*args: Any) -> Any:
            self.off(event, wrapper)
            return handler(*args)

        wrapper.listener = handler  # type: ignore[attr-defined]
        self._handlers[event].append(wrapper)
        return handler

    def off(self, event: str, handler: Handler) -> None:
        handlers = self._handlers.get(event, [])
        for registered in handlers:
            if registered is handler or getattr(registered, "listener", None) is handler:
                handlers.remove(registered)
                break
        if not handlers:
            self._handlers.pop(event, None)

    def listeners(self, event: str) -> list[Handler]:
        return [getattr(h, "listener", h) for h in self._handlers.get(event, [])]

    def emit(self, event: str, *args: Any) -> bool:
        handlers = list(self._handlers.get(event, []))
        if not handlers:
            logger.info("No handler registered for event=%s", event)
            return False

        for handler in handlers:
            handler(*args)
        return True
