from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from jumpboard.constants import MESSAGE_DURATION
from jumpboard.events.bus import (
    EVENT_ADVISORY_DISMISS,
    EVENT_ADVISORY_SHOWN,
    EVENT_TICK,
    EventBus,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScheduledClear:
    """Pending auto-clear of the advisory message."""

    remaining: float
    message: str


class MessageTimerSystem:
    """Clears advisory messages after a fixed display time.

    Each new message cancels the pending clear and starts a fresh countdown.
    Time advances through EVENT_TICK, so tests drive it without a real clock.
    """

    def __init__(self, event_bus: EventBus, *, duration: float = MESSAGE_DURATION) -> None:
        self.event_bus = event_bus
        self.duration = max(0.0, float(duration))
        self._pending: ScheduledClear | None = None
        self.event_bus.subscribe(EVENT_ADVISORY_SHOWN, self._on_advisory_shown)
        self.event_bus.subscribe(EVENT_TICK, self._on_tick)

    @property
    def pending(self) -> ScheduledClear | None:
        return self._pending

    def schedule(self, message: str) -> None:
        self._pending = ScheduledClear(remaining=self.duration, message=message)

    def cancel(self) -> None:
        if self._pending is not None:
            logger.debug("Cancelled pending advisory clear")
        self._pending = None

    def _on_advisory_shown(self, sender: Any, **payload: Any) -> None:
        message = payload.get("message")
        if not message:
            return
        self.schedule(str(message))

    def _on_tick(self, sender: Any, **payload: Any) -> None:
        if self._pending is None:
            return
        try:
            dt = float(payload.get("dt", 0.0))
        except (TypeError, ValueError):
            return
        if dt <= 0.0:
            return
        self._pending.remaining -= dt
        if self._pending.remaining > 0.0:
            return
        self._pending = None
        self.event_bus.emit(EVENT_ADVISORY_DISMISS, reason="timeout")
