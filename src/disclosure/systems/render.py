from esper import World

from disclosure.rendering.context import build_render_context
from disclosure.rendering.overlay_renderer import OverlayRenderer
from disclosure.rendering.trigger_renderer import TriggerRenderer


class RenderSystem:
    """Draws triggers first, then the overlay layer on top of everything."""

    def __init__(self, world: World, window):
        self.world = world
        self.window = window
        self._trigger_renderer = TriggerRenderer(world)
        self._overlay_renderer = OverlayRenderer(world)

    @property
    def overlay_renderer(self) -> OverlayRenderer:
        return self._overlay_renderer

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        ctx = build_render_context(self.world, self.window.width, self.window.height)
        if not headless:
            self._trigger_renderer.render(arcade, ctx)
        self._overlay_renderer.render(arcade, ctx, headless=headless)
