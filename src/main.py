"""Entry point for the tooltip disclosure showcase.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color, key

from disclosure.constants import SHOWCASE_HEIGHT, SHOWCASE_WIDTH
from disclosure.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_MOVE, EVENT_TICK, EventBus
from disclosure.systems.render import RenderSystem
from disclosure.systems.tooltip_system import TooltipSystem
from disclosure.world import create_world, spawn_showcase_triggers


class ShowcaseWindow(Window):
    def __init__(self):
        super().__init__(SHOWCASE_WIDTH, SHOWCASE_HEIGHT, "Tooltip placements")
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world()
        self.tooltip_system = TooltipSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self)
        spawn_showcase_triggers(self.tooltip_system, self.width, self.height)
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        # Arcade is bottom-up; trigger bounds are top-down.
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=self.height - y)

    def on_mouse_leave(self, x: float, y: float):
        # Report a point outside every trigger so the hovered one gets a pointer-leave.
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=-1, y=-1)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.TAB:
            self.tooltip_system.focus_next()
        elif symbol == key.ESCAPE:
            self.event_bus.emit(EVENT_KEY_PRESS, key="escape")

    def on_close(self):
        self.tooltip_system.shutdown()
        super().on_close()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    window = ShowcaseWindow()
    run()

if __name__ == "__main__":
    main()
