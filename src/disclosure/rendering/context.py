from __future__ import annotations

from dataclasses import dataclass

from esper import World


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents.

    Components store top-down coordinates; arcade draws bottom-up, so every
    renderer converts through :meth:`to_screen_y`.
    """

    world: World
    window_width: int
    window_height: int

    def to_screen_y(self, y: float) -> float:
        return self.window_height - y


def build_render_context(world: World, window_width: int, window_height: int) -> RenderContext:
    """Populate a RenderContext for the current frame."""
    return RenderContext(world=world, window_width=int(window_width), window_height=int(window_height))
