from dataclasses import dataclass, field
from typing import Optional

from disclosure.components.placement import AnchorRect
from disclosure.components.tooltip_config import TooltipConfig


@dataclass
class TooltipTrigger:
    """Element whose hover or focus discloses a tooltip.

    ``bounds`` is mutable layout data owned by the host; the controller reads it
    only at the moment the overlay becomes visible.
    """
    bounds: AnchorRect
    content: str = ""
    config: TooltipConfig = field(default_factory=TooltipConfig)
    tooltip_id: str = ""
    label: str = ""
    # Mirrors aria-describedby: set to tooltip_id only while the overlay is visible.
    described_by: Optional[str] = None
    hovered: bool = False
    focused: bool = False
