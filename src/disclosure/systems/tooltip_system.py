from __future__ import annotations

import logging
from typing import Dict, List, Optional

from esper import World

from disclosure.components.placement import AnchorRect, OverlayCoordinate
from disclosure.components.tooltip_config import TooltipConfig
from disclosure.components.tooltip_trigger import TooltipTrigger
from disclosure.events.bus import (
    EventBus,
    EVENT_ESCAPE,
    EVENT_FOCUS_GAINED,
    EVENT_FOCUS_LOST,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_MOVE,
    EVENT_POINTER_ENTER,
    EVENT_POINTER_LEAVE,
    EVENT_TRIGGER_MOUNT,
    EVENT_TRIGGER_UNMOUNT,
)
from disclosure.systems.disclosure_controller import DisclosureController
from disclosure.systems.overlay_host import OverlayHost
from disclosure.utils.timers import Scheduler, TickScheduler

LOGGER = logging.getLogger("disclosure.tooltip_system")

ESCAPE_KEYS = {"escape", "esc"}


class TooltipSystem:
    """Mounts tooltip triggers and routes raw input to their controllers.

    Each mounted trigger entity gets exactly one :class:`DisclosureController`.
    Raw mouse motion is hit-tested against trigger bounds and turned into
    pointer enter/leave events; focus changes and escape presses are forwarded
    the same way. Ticks drive the shared scheduler.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        scheduler: Scheduler | None = None,
        host: OverlayHost | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.scheduler = scheduler if scheduler is not None else TickScheduler(event_bus)
        self.host = host or OverlayHost(world, event_bus)
        self._controllers: Dict[int, DisclosureController] = {}
        self._mount_order: List[int] = []
        self._hovered: Optional[int] = None
        self._focused: Optional[int] = None
        self.event_bus.subscribe(EVENT_TRIGGER_MOUNT, self.on_trigger_mount)
        self.event_bus.subscribe(EVENT_TRIGGER_UNMOUNT, self.on_trigger_unmount)
        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    # Lifecycle -----------------------------------------------------------

    def mount_trigger(
        self,
        bounds: AnchorRect,
        content: str = "",
        config: TooltipConfig | None = None,
        *,
        label: str = "",
    ) -> int:
        entity = self.world.create_entity()
        trigger = TooltipTrigger(
            bounds=bounds,
            content=content,
            config=config or TooltipConfig(),
            tooltip_id=f"tooltip-{entity}",
            label=label,
        )
        self.world.add_component(entity, trigger)
        self.event_bus.emit(EVENT_TRIGGER_MOUNT, trigger_entity=entity)
        return entity

    def unmount_trigger(self, entity: int) -> None:
        self.event_bus.emit(EVENT_TRIGGER_UNMOUNT, trigger_entity=entity)

    def on_trigger_mount(self, sender, **payload) -> None:
        entity = payload.get("trigger_entity")
        if entity is None or entity in self._controllers:
            return
        try:
            trigger = self.world.component_for_entity(entity, TooltipTrigger)
        except KeyError:
            return
        self._controllers[entity] = DisclosureController(
            trigger.config,
            measure=lambda: self._measure(entity),
            scheduler=self.scheduler,
            render=lambda coordinate: self._render(entity, coordinate),
            remove=lambda: self._remove(entity),
            event_bus=self.event_bus,
            trigger_entity=entity,
        )
        self._mount_order.append(entity)
        LOGGER.debug("Mounted tooltip trigger %s", entity)

    def on_trigger_unmount(self, sender, **payload) -> None:
        entity = payload.get("trigger_entity")
        controller = self._controllers.pop(entity, None)
        if controller is None:
            return
        controller.destroy()
        if entity in self._mount_order:
            self._mount_order.remove(entity)
        if self._hovered == entity:
            self._hovered = None
        if self._focused == entity:
            self._focused = None
        if self.world.entity_exists(entity):
            self.world.delete_entity(entity, immediate=True)
        LOGGER.debug("Unmounted tooltip trigger %s", entity)

    def shutdown(self) -> None:
        for entity in list(self._controllers):
            self.unmount_trigger(entity)

    def controller_for(self, entity: int) -> DisclosureController | None:
        return self._controllers.get(entity)

    @property
    def trigger_entities(self) -> List[int]:
        return list(self._mount_order)

    # Layout --------------------------------------------------------------

    def set_bounds(self, entity: int, bounds: AnchorRect) -> None:
        self.world.component_for_entity(entity, TooltipTrigger).bounds = bounds

    def trigger_at_point(self, x: float, y: float) -> Optional[int]:
        # Later mounts sit above earlier ones.
        for entity in reversed(self._mount_order):
            try:
                trigger = self.world.component_for_entity(entity, TooltipTrigger)
            except KeyError:
                continue
            if trigger.bounds.contains(x, y):
                return entity
        return None

    # Input routing -------------------------------------------------------

    def on_mouse_move(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        if x is None or y is None:
            return
        try:
            hit = self.trigger_at_point(float(x), float(y))
        except (TypeError, ValueError):
            return
        if hit == self._hovered:
            return
        previous = self._hovered
        self._hovered = hit
        if previous is not None:
            self._set_flag(previous, hovered=False)
            self.event_bus.emit(EVENT_POINTER_LEAVE, trigger_entity=previous)
        if hit is not None:
            self._set_flag(hit, hovered=True)
            self.event_bus.emit(EVENT_POINTER_ENTER, trigger_entity=hit)

    def focus(self, entity: Optional[int]) -> None:
        if entity is not None and entity not in self._controllers:
            return
        if entity == self._focused:
            return
        previous = self._focused
        self._focused = entity
        if previous is not None:
            self._set_flag(previous, focused=False)
            self.event_bus.emit(EVENT_FOCUS_LOST, trigger_entity=previous)
        if entity is not None:
            self._set_flag(entity, focused=True)
            self.event_bus.emit(EVENT_FOCUS_GAINED, trigger_entity=entity)

    def focus_next(self) -> Optional[int]:
        """Move focus to the next mounted trigger, wrapping around (tab order)."""
        if not self._mount_order:
            return None
        if self._focused not in self._mount_order:
            target = self._mount_order[0]
        else:
            index = self._mount_order.index(self._focused)
            target = self._mount_order[(index + 1) % len(self._mount_order)]
        self.focus(target)
        return target

    @property
    def focused(self) -> Optional[int]:
        return self._focused

    @property
    def hovered(self) -> Optional[int]:
        return self._hovered

    def on_key_press(self, sender, **payload) -> None:
        key = payload.get("key")
        if not isinstance(key, str) or key.lower() not in ESCAPE_KEYS:
            return
        explicit = payload.get("trigger_entity")
        if explicit is not None:
            targets = [explicit]
        else:
            targets = [entity for entity in (self._focused, self._hovered) if entity is not None]
        for entity in dict.fromkeys(targets):
            self.event_bus.emit(EVENT_ESCAPE, trigger_entity=entity)

    # Controller capabilities --------------------------------------------

    def _measure(self, entity: int) -> AnchorRect:
        # KeyError (a LookupError) when the trigger was deleted before the timer fired.
        return self.world.component_for_entity(entity, TooltipTrigger).bounds

    def _render(self, entity: int, coordinate: OverlayCoordinate) -> None:
        trigger = self.world.component_for_entity(entity, TooltipTrigger)
        layer = self.host.state
        if layer.visible and layer.trigger_entity is not None and layer.trigger_entity != entity:
            self._displace(layer.trigger_entity)
        self.host.render(
            entity,
            coordinate,
            content=trigger.content,
            config=trigger.config,
            tooltip_id=trigger.tooltip_id,
        )
        trigger.described_by = trigger.tooltip_id

    def _displace(self, entity: int) -> None:
        # Single overlay layer: the previous owner is no longer rendered.
        controller = self._controllers.get(entity)
        if controller is not None:
            controller.displace()
        try:
            trigger = self.world.component_for_entity(entity, TooltipTrigger)
        except KeyError:
            return
        trigger.described_by = None

    def _remove(self, entity: int) -> None:
        self.host.remove(entity)
        try:
            trigger = self.world.component_for_entity(entity, TooltipTrigger)
        except KeyError:
            return
        trigger.described_by = None

    def _set_flag(self, entity: int, **flags: bool) -> None:
        try:
            trigger = self.world.component_for_entity(entity, TooltipTrigger)
        except KeyError:
            return
        for name, value in flags.items():
            setattr(trigger, name, value)
