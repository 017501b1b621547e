from typing import Optional, Tuple

from esper import World

from disclosure.components.overlay_state import OverlayState
from disclosure.components.placement import Placement
from disclosure.constants import OVERLAY_BG_COLOR, OVERLAY_BORDER_COLOR, OVERLAY_TEXT_COLOR
from disclosure.rendering.context import RenderContext

Point = Tuple[float, float]


def arrow_points(state: OverlayState) -> Optional[Tuple[Point, Point, Point]]:
    """Top-down triangle (base, base, tip) for the overlay arrow, or None when hidden."""
    if not state.visible or state.arrow_side is None or state.coordinate is None:
        return None
    size = state.arrow_size
    left = state.box_left
    top = state.box_top
    right = left + state.width
    bottom = top + state.height
    cx = state.coordinate.left
    cy = state.coordinate.top
    side = state.arrow_side
    if side is Placement.BOTTOM:
        return (cx - size, bottom), (cx + size, bottom), (cx, bottom + size)
    if side is Placement.TOP:
        return (cx - size, top), (cx + size, top), (cx, top - size)
    if side is Placement.RIGHT:
        return (right, cy - size), (right, cy + size), (right + size, cy)
    return (left, cy - size), (left, cy + size), (left - size, cy)


class OverlayRenderer:
    """Draw the shared overlay layer above every other renderer."""

    def __init__(self, world: World):
        self.world = world
        self.last_bounds: Optional[Tuple[float, float, float, float]] = None

    def _current(self) -> OverlayState | None:
        entries = list(self.world.get_component(OverlayState))
        if not entries:
            return None
        return entries[0][1]

    def render(self, arcade, ctx: RenderContext, *, headless: bool = False) -> None:
        state = self._current()
        if state is None or not state.visible:
            self.last_bounds = None
            return
        left = state.box_left
        right = left + state.width
        top = ctx.to_screen_y(state.box_top)
        bottom = ctx.to_screen_y(state.box_top + state.height)
        # Screen-space (left, bottom, width, height) for hit tests and debugging.
        self.last_bounds = (left, bottom, state.width, state.height)
        if headless:
            return
        arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, OVERLAY_BG_COLOR)
        arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, OVERLAY_BORDER_COLOR, 1)
        points = arrow_points(state)
        if points is not None:
            (x1, y1), (x2, y2), (x3, y3) = points
            arcade.draw_triangle_filled(
                x1, ctx.to_screen_y(y1),
                x2, ctx.to_screen_y(y2),
                x3, ctx.to_screen_y(y3),
                OVERLAY_BG_COLOR,
            )
        text_x = left + state.padding_x
        text_y = top - state.padding_y - state.line_height
        for line in state.lines:
            arcade.draw_text(line, text_x, text_y, OVERLAY_TEXT_COLOR, state.font_size)
            text_y -= state.line_height
