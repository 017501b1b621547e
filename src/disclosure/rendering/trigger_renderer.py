from esper import World

from disclosure.components.tooltip_trigger import TooltipTrigger
from disclosure.rendering.context import RenderContext

IDLE_COLOR = (58, 62, 86)
HOVER_COLOR = (82, 88, 124)
DISABLED_COLOR = (44, 44, 50)
FOCUS_RING_COLOR = (120, 170, 255)
LABEL_COLOR = (230, 230, 235)


class TriggerRenderer:
    """Draw each tooltip trigger as a labelled button."""

    def __init__(self, world: World):
        self.world = world

    def render(self, arcade, ctx: RenderContext) -> None:
        for _, trigger in self.world.get_component(TooltipTrigger):
            bounds = trigger.bounds
            left = bounds.left
            right = bounds.right
            top = ctx.to_screen_y(bounds.top)
            bottom = ctx.to_screen_y(bounds.bottom)
            if trigger.config.disabled:
                fill = DISABLED_COLOR
            elif trigger.hovered:
                fill = HOVER_COLOR
            else:
                fill = IDLE_COLOR
            arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, fill)
            if trigger.focused:
                arcade.draw_lrbt_rectangle_outline(left - 2, right + 2, bottom - 2, top + 2, FOCUS_RING_COLOR, 2)
            if trigger.label:
                arcade.draw_text(
                    trigger.label,
                    bounds.center_x,
                    (top + bottom) / 2,
                    LABEL_COLOR,
                    12,
                    anchor_x="center",
                    anchor_y="center",
                )
