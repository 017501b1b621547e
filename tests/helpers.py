from __future__ import annotations

from disclosure.components.placement import AnchorRect, OverlayCoordinate
from disclosure.components.tooltip_config import TooltipConfig
from disclosure.systems.disclosure_controller import DisclosureController
from disclosure.utils.timers import TickScheduler


class FakeMeasure:
    """Measurement capability returning whatever rect is current, counting calls."""

    def __init__(self, rect: AnchorRect | None) -> None:
        self.rect = rect
        self.calls = 0
        self.error: Exception | None = None

    def __call__(self) -> AnchorRect | None:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.rect


class RecordingHost:
    """Collects render/remove signals in order."""

    def __init__(self) -> None:
        self.signals: list[tuple[str, OverlayCoordinate | None]] = []

    def render(self, coordinate: OverlayCoordinate) -> None:
        self.signals.append(("render", coordinate))

    def remove(self) -> None:
        self.signals.append(("remove", None))

    @property
    def renders(self) -> list[OverlayCoordinate]:
        return [coord for kind, coord in self.signals if kind == "render"]

    @property
    def removes(self) -> int:
        return sum(1 for kind, _ in self.signals if kind == "remove")


def make_controller(
    config: TooltipConfig | None = None,
    rect: AnchorRect | None = None,
    **kwargs,
) -> tuple[DisclosureController, TickScheduler, FakeMeasure, RecordingHost]:
    """Build a controller wired to a fresh scheduler, measure fixture and recording host."""

    scheduler = TickScheduler()
    measure = FakeMeasure(rect or AnchorRect(top=100, left=200, width=50, height=20))
    host = RecordingHost()
    controller = DisclosureController(
        config or TooltipConfig(),
        measure=measure,
        scheduler=scheduler,
        render=host.render,
        remove=host.remove,
        **kwargs,
    )
    return controller, scheduler, measure, host
