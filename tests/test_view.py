import pytest

from pixelcraft.view import ZOOM_STEP, CanvasView


def test_identity_mapping_initially():
    view = CanvasView()
    assert view.map_to_scene(12.0, 34.0) == (12.0, 34.0)


def test_zoom_in_scales_by_step():
    view = CanvasView()
    view.zoom_in()
    assert view.zoom == pytest.approx(1.2)
    assert view.map_from_scene(10.0, 5.0) == pytest.approx((10.0 * ZOOM_STEP, 5.0 * ZOOM_STEP))


def test_zoom_in_then_out_restores():
    view = CanvasView()
    view.zoom_in()
    view.zoom_in()
    view.zoom_out()
    view.zoom_out()
    assert view.zoom == pytest.approx(1.0)


def test_wheel_direction():
    view = CanvasView()
    view.wheel_event(120)
    assert view.zoom > 1.0
    view = CanvasView()
    view.wheel_event(0)
    assert view.zoom < 1.0


def test_pan_at_unit_zoom():
    view = CanvasView()
    view.pan_by(3, 4)
    assert view.map_from_scene(0.0, 0.0) == (3.0, 4.0)


@pytest.mark.parametrize("steps", [0, 1, 3])
def test_mapping_round_trip(steps):
    view = CanvasView()
    for _ in range(steps):
        view.zoom_in()
    view.pan_by(7, -2)
    vx, vy = view.map_from_scene(13.25, 40.5)
    assert view.map_to_scene(vx, vy) == pytest.approx((13.25, 40.5))