from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from disclosure.components.disclosure_state import DisclosureEvent, DisclosureState
from disclosure.components.placement import AnchorRect, OverlayCoordinate
from disclosure.components.tooltip_config import TooltipConfig
from disclosure.events.bus import (
    EventBus,
    EVENT_ESCAPE,
    EVENT_FOCUS_GAINED,
    EVENT_FOCUS_LOST,
    EVENT_POINTER_ENTER,
    EVENT_POINTER_LEAVE,
    EVENT_TRIGGER_UNMOUNT,
)
from disclosure.ui.placement import compute_overlay_position
from disclosure.utils.timers import PendingTimer, Scheduler

LOGGER = logging.getLogger("disclosure.controller")

MeasureFn = Callable[[], Optional[AnchorRect]]
RenderFn = Callable[[OverlayCoordinate], None]
RemoveFn = Callable[[], None]

_BUS_EVENTS: Dict[str, DisclosureEvent] = {
    EVENT_POINTER_ENTER: DisclosureEvent.POINTER_ENTER,
    EVENT_POINTER_LEAVE: DisclosureEvent.POINTER_LEAVE,
    EVENT_FOCUS_GAINED: DisclosureEvent.FOCUS,
    EVENT_FOCUS_LOST: DisclosureEvent.BLUR,
    EVENT_ESCAPE: DisclosureEvent.ESCAPE,
    EVENT_TRIGGER_UNMOUNT: DisclosureEvent.UNMOUNT,
}


class DisclosureController:
    """Owns the Hidden/Pending/Visible machine for one trigger/overlay pair.

    Only showing is delayed. Every scheduled show captures the current
    generation token; invalidating a pending show bumps the token, so a timer
    callback that still runs afterwards compares tokens and does nothing.
    The trigger is measured when the timer fires, never when it is scheduled.

    When ``event_bus`` and ``trigger_entity`` are given the controller listens
    for that trigger's interaction events itself; :meth:`destroy` detaches them.
    """

    def __init__(
        self,
        config: TooltipConfig,
        measure: MeasureFn,
        scheduler: Scheduler,
        render: RenderFn,
        remove: RemoveFn,
        *,
        event_bus: EventBus | None = None,
        trigger_entity: int | None = None,
    ) -> None:
        self.config = config
        self.trigger_entity = trigger_entity
        self._measure = measure
        self._scheduler = scheduler
        self._render = render
        self._remove = remove
        self._state = DisclosureState.HIDDEN
        self._generation = 0
        self._timer: PendingTimer | None = None
        self._destroyed = False
        self._event_bus = event_bus
        self._listeners: List[Tuple[str, Callable[..., None]]] = []
        # Keys absent from the table are no-ops, which covers re-entrant enters
        # and every event while disabled-hidden.
        self._transitions: Dict[Tuple[DisclosureState, DisclosureEvent], Callable[[], None]] = {
            (DisclosureState.HIDDEN, DisclosureEvent.POINTER_ENTER): self._schedule_show,
            (DisclosureState.HIDDEN, DisclosureEvent.FOCUS): self._schedule_show,
            (DisclosureState.PENDING, DisclosureEvent.POINTER_LEAVE): self._cancel_pending,
            (DisclosureState.PENDING, DisclosureEvent.BLUR): self._cancel_pending,
            (DisclosureState.PENDING, DisclosureEvent.ESCAPE): self._cancel_pending,
            (DisclosureState.VISIBLE, DisclosureEvent.POINTER_LEAVE): self._hide,
            (DisclosureState.VISIBLE, DisclosureEvent.BLUR): self._hide,
            (DisclosureState.VISIBLE, DisclosureEvent.ESCAPE): self._hide,
        }
        if event_bus is not None and trigger_entity is not None:
            self._attach(event_bus)

    @property
    def state(self) -> DisclosureState:
        return self._state

    @property
    def is_visible(self) -> bool:
        return self._state is DisclosureState.VISIBLE

    @property
    def pending(self) -> bool:
        return self._timer is not None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def handle_event(self, event: DisclosureEvent) -> None:
        if self._destroyed:
            return
        if event is DisclosureEvent.UNMOUNT:
            self.destroy()
            return
        transition = self._transitions.get((self._state, event))
        if transition is None:
            return
        transition()

    def destroy(self) -> None:
        """Cancel any pending show, force Hidden and detach listeners. Idempotent."""
        if self._destroyed:
            return
        self._destroyed = True
        self._invalidate_timer()
        was_visible = self._state is DisclosureState.VISIBLE
        self._state = DisclosureState.HIDDEN
        self._detach()
        if was_visible:
            self._remove()
        LOGGER.debug("Controller for trigger %s destroyed (was_visible=%s)", self.trigger_entity, was_visible)

    def displace(self) -> None:
        """Drop to Hidden without a remove signal; another trigger now owns the overlay layer."""
        if self._destroyed or self._state is not DisclosureState.VISIBLE:
            return
        self._invalidate_timer()
        self._state = DisclosureState.HIDDEN
        LOGGER.debug("Trigger %s displaced from the overlay layer", self.trigger_entity)

    # Transitions ---------------------------------------------------------

    def _schedule_show(self) -> None:
        if self.config.disabled:
            return
        self._invalidate_timer()
        token = self._generation
        self._timer = self._scheduler.call_later(self.config.delay_ms, lambda: self._on_timer(token))
        self._state = DisclosureState.PENDING
        LOGGER.debug("Trigger %s pending (delay=%dms token=%d)", self.trigger_entity, self.config.delay_ms, token)

    def _cancel_pending(self) -> None:
        self._invalidate_timer()
        self._state = DisclosureState.HIDDEN
        LOGGER.debug("Trigger %s pending show cancelled", self.trigger_entity)

    def _hide(self) -> None:
        self._state = DisclosureState.HIDDEN
        self._remove()
        LOGGER.debug("Trigger %s hidden", self.trigger_entity)

    def _on_timer(self, token: int) -> None:
        if token != self._generation or self._state is not DisclosureState.PENDING:
            LOGGER.debug("Dropping stale show timer for trigger %s (token=%d current=%d)", self.trigger_entity, token, self._generation)
            return
        self._timer = None
        try:
            anchor = self._measure()
        except LookupError:
            anchor = None
        if anchor is None:
            # Trigger left the layout tree; treat as a cancellation.
            self._generation += 1
            self._state = DisclosureState.HIDDEN
            LOGGER.debug("Trigger %s could not be measured; show cancelled", self.trigger_entity)
            return
        coordinate = compute_overlay_position(anchor, self.config.placement, self.config.offset)
        self._state = DisclosureState.VISIBLE
        self._render(coordinate)
        LOGGER.debug("Trigger %s visible at (%.1f, %.1f)", self.trigger_entity, coordinate.left, coordinate.top)

    def _invalidate_timer(self) -> None:
        self._generation += 1
        timer = self._timer
        self._timer = None
        if timer is not None:
            self._scheduler.cancel(timer)

    # Bus wiring ----------------------------------------------------------

    def _attach(self, event_bus: EventBus) -> None:
        for name, event in _BUS_EVENTS.items():
            listener = self._make_listener(event)
            event_bus.subscribe(name, listener)
            self._listeners.append((name, listener))

    def _detach(self) -> None:
        if self._event_bus is None:
            return
        for name, listener in self._listeners:
            self._event_bus.unsubscribe(name, listener)
        self._listeners.clear()

    def _make_listener(self, event: DisclosureEvent) -> Callable[..., None]:
        def _listener(sender: Any, **payload: Any) -> None:
            if payload.get("trigger_entity") != self.trigger_entity:
                return
            self.handle_event(event)
        return _listener
