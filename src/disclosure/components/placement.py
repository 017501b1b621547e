"""Geometry value types shared by the placement calculator and the overlay host."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Placement(Enum):
    """Side of the trigger the overlay is anchored to."""
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: "Placement | str") -> "Placement":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown placement: {value!r}")

    @property
    def opposite(self) -> "Placement":
        return _OPPOSITES[self]


_OPPOSITES = {
    Placement.TOP: Placement.BOTTOM,
    Placement.BOTTOM: Placement.TOP,
    Placement.LEFT: Placement.RIGHT,
    Placement.RIGHT: Placement.LEFT,
}


@dataclass(frozen=True, slots=True)
class AnchorRect:
    """Trigger bounds in top-down surface coordinates (y grows downward)."""

    top: float
    left: float
    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("top", "left", "width", "height"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"AnchorRect.{name} must be finite, got {value!r}")
        if self.width < 0 or self.height < 0:
            raise ValueError(f"AnchorRect size must be non-negative, got {self.width}x{self.height}")

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2

    @property
    def center_y(self) -> float:
        return self.top + self.height / 2

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom


@dataclass(frozen=True, slots=True)
class OverlayCoordinate:
    """Overlay anchor point computed for one show cycle.

    ``top``/``left`` is the point the overlay attaches to; which edge of the
    overlay touches it depends on ``placement``. The arrow always sits on the
    overlay side facing the trigger.
    """

    top: float
    left: float
    placement: Placement

    @property
    def arrow_side(self) -> Placement:
        return self.placement.opposite
