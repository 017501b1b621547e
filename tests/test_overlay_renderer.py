from types import SimpleNamespace

import pytest
from esper import World

from disclosure.components.placement import OverlayCoordinate, Placement
from disclosure.components.tooltip_config import TooltipConfig
from disclosure.rendering.context import build_render_context
from disclosure.rendering.overlay_renderer import OverlayRenderer, arrow_points
from disclosure.systems.overlay_host import OverlayHost


class _HeadlessArcade:
    def __getattr__(self, name):  # pragma: no cover - defensive path
        raise AssertionError(f"Unexpected draw call: {name}")


class _RecordingArcade:
    def __init__(self) -> None:
        self.calls = []

    def __getattr__(self, name):
        def _record(*args, **kwargs):
            self.calls.append((name, args))
        return _record


def _render_top_overlay(world: World, **config_kwargs) -> OverlayHost:
    host = OverlayHost(world)
    host.render(
        1,
        OverlayCoordinate(top=88, left=225, placement=Placement.TOP),
        content="Saves your changes",
        config=TooltipConfig(**config_kwargs),
    )
    return host


def test_headless_render_records_screen_bounds_without_drawing():
    world = World()
    host = _render_top_overlay(world)
    renderer = OverlayRenderer(world)
    ctx = build_render_context(world, 800, 600)

    renderer.render(_HeadlessArcade(), ctx, headless=True)

    left, bottom, width, height = renderer.last_bounds
    assert left == host.state.box_left
    assert bottom == 600 - 88
    assert (width, height) == (host.state.width, host.state.height)


def test_hidden_overlay_draws_nothing():
    world = World()
    OverlayHost(world)
    renderer = OverlayRenderer(world)

    renderer.render(_HeadlessArcade(), SimpleNamespace(window_height=600), headless=False)

    assert renderer.last_bounds is None


def test_draws_box_arrow_and_text():
    world = World()
    _render_top_overlay(world)
    arcade = _RecordingArcade()

    OverlayRenderer(world).render(arcade, build_render_context(world, 800, 600))

    names = [name for name, _ in arcade.calls]
    assert names[:3] == ["draw_lrbt_rectangle_filled", "draw_lrbt_rectangle_outline", "draw_triangle_filled"]
    assert names.count("draw_text") == 1
    triangle = dict(arcade.calls)["draw_triangle_filled"]
    # Tip points down at the trigger: screen y below the box bottom edge.
    assert triangle[5] == 600 - 88 - 4


def test_arrow_omitted_when_disabled():
    world = World()
    host = _render_top_overlay(world, show_arrow=False)
    arcade = _RecordingArcade()

    OverlayRenderer(world).render(arcade, build_render_context(world, 800, 600))

    assert arrow_points(host.state) is None
    assert "draw_triangle_filled" not in [name for name, _ in arcade.calls]


def test_arrow_points_face_the_trigger_for_each_side():
    world = World()
    host = OverlayHost(world)

    host.render(1, OverlayCoordinate(top=110, left=188, placement=Placement.LEFT), content="x")
    (_, _), (_, _), (tip_x, tip_y) = arrow_points(host.state)
    assert tip_x == pytest.approx(188 + 4)
    assert tip_y == 110

    host.render(1, OverlayCoordinate(top=132, left=225, placement=Placement.BOTTOM), content="x")
    (_, _), (_, _), (tip_x, tip_y) = arrow_points(host.state)
    assert (tip_x, tip_y) == (225, 132 - 4)
