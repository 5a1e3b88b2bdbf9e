"""ToastQueue: ordered, self-expiring user notifications.

Each pushed message gets its own id and its own timer. Expiry removes the
toast with that id only, so duplicate texts leave in the order they came in.
"""
from __future__ import annotations
import itertools
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from cocktail.events.clock import Clock, TimerHandle
from cocktail.events.Event_Bus import EventBus, TOAST_PUSHED, TOAST_EXPIRED
from cocktail.utilities.config import TOAST_DELAY_SECONDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Toast:
    toast_id: int
    message: str
    expires_at: float

    def to_dict(self):
        return {"id": self.toast_id, "message": self.message, "expires_at": self.expires_at}


class ToastQueue:
    def __init__(self, clock: Clock, delay: float = TOAST_DELAY_SECONDS, bus: Optional[EventBus] = None):
        self._clock = clock
        self._delay = delay
        self._bus = bus
        self._ids = itertools.count(1)
        self._toasts: List[Toast] = []
        self._timers: Dict[int, TimerHandle] = {}

    def push(self, message: str) -> int:
        '''
        Appends a toast and schedules its removal after the configured delay.
        Returns the toast id.
        '''
        toast = Toast(next(self._ids), message, self._clock.now() + self._delay)
        self._toasts.append(toast)
        self._timers[toast.toast_id] = self._clock.call_later(self._delay, lambda: self._expire(toast.toast_id))
        logger.debug("Toast #%s pushed: %s", toast.toast_id, message)
        if self._bus:
            self._bus.publish(TOAST_PUSHED, toast)
        return toast.toast_id

    def _expire(self, toast_id: int):
        self._timers.pop(toast_id, None)
        for idx, toast in enumerate(self._toasts):
            if toast.toast_id == toast_id:
                del self._toasts[idx]
                if self._bus:
                    self._bus.publish(TOAST_EXPIRED, toast)
                return

    def clear(self):
        '''Drops every toast and cancels the pending timers (teardown only).'''
        for handle in self._timers.values():
            handle.cancel()
        self._timers.clear()
        self._toasts.clear()

    def messages(self) -> List[str]:
        return [t.message for t in self._toasts]

    def toasts(self) -> List[Toast]:
        return list(self._toasts)

    def __len__(self) -> int:
        return len(self._toasts)

    def __str__(self) -> str:
        return f"ToastQueue({self.messages()})"

    __repr__ = __str__
