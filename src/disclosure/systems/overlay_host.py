from __future__ import annotations

import logging
import textwrap
from typing import Optional

from esper import World

from disclosure.components.overlay_state import OverlayState
from disclosure.components.placement import OverlayCoordinate
from disclosure.components.tooltip_config import TooltipConfig
from disclosure.constants import ARROW_SIZE, GLYPH_WIDTH_RATIO
from disclosure.events.bus import EventBus, EVENT_OVERLAY_HIDDEN, EVENT_OVERLAY_SHOWN
from disclosure.ui.placement import overlay_box

LOGGER = logging.getLogger("disclosure.overlay_host")


class OverlayHost:
    """Publishes the overlay into the world's render layer at supplied coordinates.

    The box is derived from the coordinate and the content size only; nothing
    here nudges it back on screen.
    """

    def __init__(self, world: World, event_bus: EventBus | None = None) -> None:
        self.world = world
        self.event_bus = event_bus
        self._state_entity: Optional[int] = None
        self._state = self._ensure_state()

    @property
    def state(self) -> OverlayState:
        return self._state

    def _ensure_state(self) -> OverlayState:
        entries = list(self.world.get_component(OverlayState))
        if entries:
            self._state_entity, state = entries[0]
            return state
        self._state_entity = self.world.create_entity(OverlayState())
        return self.world.component_for_entity(self._state_entity, OverlayState)

    def render(
        self,
        trigger_entity: int,
        coordinate: OverlayCoordinate,
        *,
        content: str = "",
        config: TooltipConfig | None = None,
        tooltip_id: str = "",
    ) -> OverlayState:
        config = config or TooltipConfig()
        metrics = config.size.metrics
        font_size = int(metrics["font_size"])
        padding_x = float(metrics["padding_x"])
        padding_y = float(metrics["padding_y"])
        line_height = float(metrics["line_height"])
        max_width = float(metrics["max_width"])
        glyph_width = font_size * GLYPH_WIDTH_RATIO

        lines = self._wrap(content, max_width - padding_x * 2, glyph_width)
        max_chars = max(len(line) for line in lines)
        width = min(max_width, padding_x * 2 + max_chars * glyph_width)
        height = padding_y * 2 + line_height * len(lines)
        box_left, box_top = overlay_box(coordinate, width, height)

        state = self._state
        state.visible = True
        state.trigger_entity = trigger_entity
        state.tooltip_id = tooltip_id
        state.lines = lines
        state.coordinate = coordinate
        state.box_left = box_left
        state.box_top = box_top
        state.width = width
        state.height = height
        state.padding_x = padding_x
        state.padding_y = padding_y
        state.line_height = line_height
        state.font_size = font_size
        state.show_arrow = config.show_arrow
        state.arrow_side = coordinate.arrow_side if config.show_arrow else None
        state.arrow_size = ARROW_SIZE
        if self.event_bus is not None:
            self.event_bus.emit(
                EVENT_OVERLAY_SHOWN,
                trigger_entity=trigger_entity,
                coordinate=coordinate,
                arrow_side=state.arrow_side,
                tooltip_id=tooltip_id,
            )
        return state

    def remove(self, trigger_entity: int) -> bool:
        state = self._state
        if not state.visible or state.trigger_entity != trigger_entity:
            # Another trigger already owns the layer.
            return False
        tooltip_id = state.tooltip_id
        state.visible = False
        state.trigger_entity = None
        state.tooltip_id = ""
        state.lines = ()
        state.coordinate = None
        state.width = 0.0
        state.height = 0.0
        state.arrow_side = None
        if self.event_bus is not None:
            self.event_bus.emit(EVENT_OVERLAY_HIDDEN, trigger_entity=trigger_entity, tooltip_id=tooltip_id)
        return True

    @staticmethod
    def _wrap(text: str, inner_width: float, glyph_width: float) -> tuple[str, ...]:
        chars_per_line = max(1, int(inner_width // glyph_width))
        wrapped: list[str] = []
        for segment in (text or "").split("\n"):
            stripped = segment.strip()
            if not stripped:
                wrapped.append("")
                continue
            wrapped.extend(textwrap.wrap(stripped, width=chars_per_line))
        # Empty content still produces one (blank) line so the overlay has a body.
        return tuple(wrapped) if wrapped else ("",)
