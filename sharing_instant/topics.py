"""Typed events received on a topic channel and the buffer that keeps them."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

MAX_EVENTS = 50
"""Number of recent events a topic buffer keeps."""

UNKNOWN_PEER = "unknown"


@dataclass(frozen=True)
class TopicEvent(Generic[T]):
    """One event from a peer: sender, payload and monotonic receive time."""

    peer_id: str
    data: T
    received_at: float = field(default_factory=time.monotonic)


class TopicEventBuffer(Generic[T]):
    """Ring buffer of the most recent topic events, oldest dropped first."""

    def __init__(self, capacity: int = MAX_EVENTS) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError("capacity must be an integer")
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._events: deque[TopicEvent[T]] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        """Maximum number of events kept."""
        return self._events.maxlen or 0

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self):
        return iter(list(self._events))

    def push(self, event: TopicEvent[T]) -> list[TopicEvent[T]]:
        """Append an event and return a snapshot of the buffer."""
        self._events.append(event)
        return self.events()

    def events(self) -> list[TopicEvent[T]]:
        """Snapshot of the buffered events, oldest first."""
        return list(self._events)

    def latest_event(self) -> TopicEvent[T] | None:
        """The most recent event, or ``None`` when empty."""
        return self._events[-1] if self._events else None


def parse_topic_message(
    message: Any, decode: Callable[[Any], T]
) -> TopicEvent[T] | None:
    """Turn a raw topic message into a typed event.

    The message is either ``{"peer_id": ..., "data": ...}`` or the raw
    payload itself. The sender defaults to ``"unknown"``. Returns ``None``
    when ``decode`` rejects the payload with ``ValueError``, ``TypeError``
    or ``KeyError``.
    """
    peer_id = UNKNOWN_PEER
    payload = message
    if isinstance(message, dict):
        candidate = message.get("peer_id")
        if isinstance(candidate, str):
            peer_id = candidate
        if "data" in message:
            payload = message["data"]
    try:
        data = decode(payload)
    except (ValueError, TypeError, KeyError):
        return None
    return TopicEvent(peer_id=peer_id, data=data)


__all__ = [
    "MAX_EVENTS",
    "UNKNOWN_PEER",
    "TopicEvent",
    "TopicEventBuffer",
    "parse_topic_message",
]