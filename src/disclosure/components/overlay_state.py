from dataclasses import dataclass
from typing import Optional, Tuple

from disclosure.components.placement import OverlayCoordinate, Placement


@dataclass(slots=True)
class OverlayState:
    """Single overlay render layer shared across the UI layer.

    Box geometry is top-down, matching the trigger bounds it was computed from.
    """

    visible: bool = False
    role: str = "tooltip"
    trigger_entity: Optional[int] = None
    tooltip_id: str = ""
    lines: Tuple[str, ...] = ()
    coordinate: Optional[OverlayCoordinate] = None
    box_left: float = 0.0
    box_top: float = 0.0
    width: float = 0.0
    height: float = 0.0
    padding_x: float = 8.0
    padding_y: float = 4.0
    line_height: float = 16.0
    font_size: int = 12
    show_arrow: bool = True
    arrow_side: Optional[Placement] = None
    arrow_size: float = 4.0
