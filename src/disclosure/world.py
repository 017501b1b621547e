from esper import World

from disclosure.components.overlay_state import OverlayState
from disclosure.components.placement import AnchorRect, Placement
from disclosure.components.tooltip_config import TooltipConfig, TooltipSize
from disclosure.constants import SHOWCASE_TRIGGER_HEIGHT, SHOWCASE_TRIGGER_WIDTH
from disclosure.systems.tooltip_system import TooltipSystem


def create_world() -> World:
    world = World()
    # Single overlay render layer shared by every trigger.
    world.create_entity(OverlayState())
    return world


def spawn_showcase_triggers(tooltip_system: TooltipSystem, width: int, height: int) -> list[int]:
    """Mount one trigger per placement around the window centre, plus a disabled one."""
    w = SHOWCASE_TRIGGER_WIDTH
    h = SHOWCASE_TRIGGER_HEIGHT
    cx = width / 2
    cy = height / 2
    gap = 60
    layout = [
        ("Top", cx - w / 2, cy - h / 2 - h - gap, TooltipConfig(placement=Placement.TOP), "Saves your changes"),
        ("Bottom", cx - w / 2, cy + h / 2 + gap, TooltipConfig(placement=Placement.BOTTOM, size=TooltipSize.LG),
         "Opens the booking calendar for the selected court"),
        ("Left", cx - w / 2 - w - gap, cy - h / 2, TooltipConfig(placement=Placement.LEFT, size=TooltipSize.SM), "Back"),
        ("Right", cx + w / 2 + gap, cy - h / 2, TooltipConfig(placement=Placement.RIGHT, show_arrow=False),
         "No arrow on this one"),
        ("Disabled", cx - w / 2, cy - h / 2, TooltipConfig(disabled=True), "Never shown"),
    ]
    entities: list[int] = []
    for label, left, top, config, content in layout:
        entities.append(
            tooltip_system.mount_trigger(
                AnchorRect(top=top, left=left, width=w, height=h),
                content,
                config,
                label=label,
            )
        )
    return entities
