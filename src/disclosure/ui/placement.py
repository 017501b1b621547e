from disclosure.components.placement import AnchorRect, OverlayCoordinate, Placement
from disclosure.constants import DEFAULT_OFFSET


def compute_overlay_position(anchor: AnchorRect, placement: Placement, offset: float = DEFAULT_OFFSET) -> OverlayCoordinate:
    """Return the overlay anchor point for ``placement`` around ``anchor``.

    Top/bottom placements centre the overlay horizontally on the returned
    ``left``; left/right placements centre it vertically on the returned ``top``.
    Placement is never flipped and the point is never clamped to the viewport.
    """
    if not isinstance(placement, Placement):
        raise TypeError(f"placement must be a Placement, got {type(placement).__name__}")
    if placement is Placement.TOP:
        return OverlayCoordinate(top=anchor.top - offset, left=anchor.center_x, placement=placement)
    if placement is Placement.BOTTOM:
        return OverlayCoordinate(top=anchor.bottom + offset, left=anchor.center_x, placement=placement)
    if placement is Placement.LEFT:
        return OverlayCoordinate(top=anchor.center_y, left=anchor.left - offset, placement=placement)
    return OverlayCoordinate(top=anchor.center_y, left=anchor.right + offset, placement=placement)


def arrow_side_for(placement: Placement) -> Placement:
    """Side of the overlay that faces the trigger."""
    return placement.opposite


def overlay_box(coordinate: OverlayCoordinate, width: float, height: float):
    """Return (box_left, box_top) for an overlay of the given size.

    Keeps input mapping consistent with compute_overlay_position: the overlay
    edge facing the trigger touches the anchor point.
    """
    placement = coordinate.placement
    if placement is Placement.TOP:
        return coordinate.left - width / 2, coordinate.top - height
    if placement is Placement.BOTTOM:
        return coordinate.left - width / 2, coordinate.top
    if placement is Placement.LEFT:
        return coordinate.left - width, coordinate.top - height / 2
    return coordinate.left, coordinate.top - height / 2
