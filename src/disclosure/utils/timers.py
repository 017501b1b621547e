from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Protocol, Tuple

from disclosure.events.bus import EVENT_TICK, EventBus


@dataclass(frozen=True, slots=True)
class PendingTimer:
    """Opaque handle for one deferred callback."""

    timer_id: int
    due_ms: float


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> PendingTimer: ...

    def cancel(self, handle: PendingTimer) -> bool: ...


class TickScheduler:
    """Cancellable deferred callbacks on a millisecond clock advanced by ticks.

    Time only moves through :meth:`advance` (or ``EVENT_TICK`` when an event bus
    is supplied), so tests drive it deterministically. Callbacks never run
    inside :meth:`call_later`, even with a zero delay; they run on the next
    advance whose target reaches their due time. Callbacks scheduled while an
    advance is running wait for the following advance.
    """

    def __init__(self, event_bus: EventBus | None = None) -> None:
        self._now: float = 0.0
        self._next_id: int = 1
        self._timers: Dict[int, Tuple[PendingTimer, Callable[[], None]]] = {}
        if event_bus is not None:
            event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def now_ms(self) -> float:
        return self._now

    @property
    def pending_count(self) -> int:
        return len(self._timers)

    def is_pending(self, handle: PendingTimer) -> bool:
        return handle.timer_id in self._timers

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> PendingTimer:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}")
        handle = PendingTimer(timer_id=self._next_id, due_ms=self._now + delay_ms)
        self._next_id += 1
        self._timers[handle.timer_id] = (handle, callback)
        return handle

    def cancel(self, handle: PendingTimer) -> bool:
        return self._timers.pop(handle.timer_id, None) is not None

    def advance(self, ms: float) -> None:
        if ms < 0:
            raise ValueError(f"cannot advance by a negative amount: {ms}")
        target = self._now + ms
        eligible_below = self._next_id
        while True:
            due = [
                entry
                for entry in self._timers.values()
                if entry[0].timer_id < eligible_below and entry[0].due_ms <= target
            ]
            if not due:
                break
            handle, callback = min(due, key=lambda entry: (entry[0].due_ms, entry[0].timer_id))
            del self._timers[handle.timer_id]
            if handle.due_ms > self._now:
                self._now = handle.due_ms
            callback()
        self._now = target

    def on_tick(self, sender: Any, **payload: Any) -> None:
        dt = payload.get("dt", 1 / 60)
        try:
            dt_val = float(dt)
        except (TypeError, ValueError):
            dt_val = 1 / 60
        if dt_val < 0:
            return
        self.advance(dt_val * 1000.0)

    def clear(self) -> None:
        self._timers.clear()
