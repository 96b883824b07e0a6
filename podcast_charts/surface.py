from __future__ import annotations

from typing import Callable, Protocol

from .events import GESTURE_EVENT_TYPES, InputEvent


EventListener = Callable[[InputEvent], None]


class InteractionSurface(Protocol):
    """Anything gesture callbacks can be bound to: an SVG node proxy, a canvas, or a headless layer."""

    def add_listener(self, event_type: str, listener: EventListener) -> None:
        ...

    def remove_listener(self, event_type: str, listener: EventListener) -> None:
        ...


class InteractionLayer:
    """Headless interaction overlay that dispatches events to registered listeners in order."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[EventListener]] = {}

    def add_listener(self, event_type: str, listener: EventListener) -> None:
        if event_type not in GESTURE_EVENT_TYPES:
            raise ValueError(f"unsupported event type: {event_type}")
        bucket = self._listeners.setdefault(event_type, [])
        if listener not in bucket:
            bucket.append(listener)

    def remove_listener(self, event_type: str, listener: EventListener) -> None:
        bucket = self._listeners.get(event_type)
        if not bucket:
            return
        if listener in bucket:
            bucket.remove(listener)

    def listener_count(self, event_type: str | None = None) -> int:
        if event_type is not None:
            return len(self._listeners.get(event_type, ()))
        return sum(len(bucket) for bucket in self._listeners.values())

    def dispatch(self, event: InputEvent) -> int:
        listeners = tuple(self._listeners.get(event.event_type, ()))
        for listener in listeners:
            listener(event)
        return len(listeners)
