from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from disclosure.components.placement import Placement
from disclosure.constants import DEFAULT_DELAY_MS, DEFAULT_OFFSET, TOOLTIP_SIZES


class TooltipSize(Enum):
    SM = "sm"
    MD = "md"
    LG = "lg"

    @property
    def metrics(self) -> dict:
        return TOOLTIP_SIZES[self.value]


@dataclass(frozen=True)
class TooltipConfig:
    """Static per-trigger settings, validated once at construction."""

    placement: Placement = Placement.TOP
    delay_ms: int = DEFAULT_DELAY_MS
    disabled: bool = False
    offset: float = DEFAULT_OFFSET
    show_arrow: bool = True
    size: TooltipSize = TooltipSize.MD

    def __post_init__(self) -> None:
        # Strings are accepted for convenience and normalised to the enums.
        object.__setattr__(self, "placement", Placement.parse(self.placement))
        if not isinstance(self.size, TooltipSize):
            try:
                object.__setattr__(self, "size", TooltipSize(str(self.size).strip().lower()))
            except ValueError:
                raise ValueError(f"Unknown tooltip size: {self.size!r}") from None
        for name in ("disabled", "show_arrow"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a bool, got {getattr(self, name)!r}")
        if isinstance(self.delay_ms, bool) or not isinstance(self.delay_ms, int):
            raise ValueError(f"delay_ms must be an integer, got {self.delay_ms!r}")
        if self.delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {self.delay_ms}")
        try:
            offset = float(self.offset)
        except (TypeError, ValueError):
            raise ValueError(f"offset must be a number, got {self.offset!r}") from None
        if not math.isfinite(offset) or offset < 0:
            raise ValueError(f"offset must be a non-negative finite number, got {self.offset!r}")
        object.__setattr__(self, "offset", offset)
