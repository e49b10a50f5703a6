"""Event bus local to one selector instance."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class EventType(str, Enum):
    """Events published by a selector."""

    UPDATE = "update"  # Selection changed (no payload)


EventCallback = Callable[..., Any]


def _coerce(event: "EventType | str") -> EventType:
    # raises ValueError for unknown names
    return event if isinstance(event, EventType) else EventType(event)


@dataclass
class EventBus:
    """Registry of subscribers per event.

    Subscribers are called synchronously, in registration order. Exceptions
    raised by a subscriber propagate to whoever published the event.
    """

    handlers: dict[EventType, list[EventCallback]] = field(default_factory=dict)

    def subscribe(self, event: EventType | str, callback: EventCallback) -> None:
        """Add a subscriber. Registering the same callback twice keeps both."""
        event = _coerce(event)
        self.handlers.setdefault(event, []).append(callback)
        logger.debug(f"Subscribed {callback!r} to {event.value}")

    def unsubscribe(
        self, event: EventType | str, callback: EventCallback | None = None
    ) -> None:
        """Remove the first matching subscriber, or all of them if no callback is given."""
        event = _coerce(event)
        if callback is None:
            self.handlers[event] = []
            return
        handlers = self.handlers.get(event)
        if not handlers:
            return
        for i, handler in enumerate(handlers):
            if handler == callback:
                del handlers[i]
                break

    def publish(self, event: EventType | str, *args, **kwargs) -> None:
        """Call each subscriber of ``event`` with the given arguments."""
        event = _coerce(event)
        handlers = self.handlers.get(event)
        if not handlers:
            return
        for handler in list(handlers):
            handler(*args, **kwargs)

    def clear(self) -> None:
        """Drop every subscription."""
        self.handlers = {}
