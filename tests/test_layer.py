import pytest

from pixelcraft.layer import BLACK, TRANSPARENT, CanvasLayer, Rect


def test_new_layer_is_transparent():
    layer = CanvasLayer(8, 4)
    assert all(layer.pixel_at(x, y) == TRANSPARENT for x in range(8) for y in range(4))


def test_bounding_rect_matches_size():
    assert CanvasLayer(128, 64).bounding_rect() == Rect(0.0, 0.0, 128.0, 64.0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        CanvasLayer(-1, 10)


def test_draw_opaque_pixel_replaces():
    layer = CanvasLayer(10, 10)
    layer.draw_pixel(2, 3, (10, 20, 30))
    layer.draw_pixel(2, 3, BLACK)
    assert layer.pixel_at(2, 3) == BLACK
    assert layer.pixel_at(3, 2) == TRANSPARENT


def test_hex_colour_matches_tuple():
    layer = CanvasLayer(4, 4)
    layer.draw_pixel(0, 0, "#0a141e")
    layer.draw_pixel(1, 0, (10, 20, 30, 255))
    assert layer.pixel_at(0, 0) == layer.pixel_at(1, 0)


def test_transparent_colour_leaves_pixel_unchanged():
    layer = CanvasLayer(4, 4)
    layer.draw_pixel(1, 1, BLACK)
    layer.draw_pixel(1, 1, TRANSPARENT)
    assert layer.pixel_at(1, 1) == BLACK


def test_translucent_over_empty_keeps_colour():
    layer = CanvasLayer(4, 4)
    layer.draw_pixel(0, 0, (10, 20, 30, 128))
    assert layer.pixel_at(0, 0) == (10, 20, 30, 128)


def test_out_of_bounds_draw_is_clipped():
    layer = CanvasLayer(4, 4)
    layer.draw_pixel(10, 10, BLACK)
    layer.draw_pixel(-1, 0, BLACK)
    assert all(layer.pixel_at(x, y) == TRANSPARENT for x in range(4) for y in range(4))


def test_pixel_at_outside_raises():
    with pytest.raises(IndexError):
        CanvasLayer(4, 4).pixel_at(4, 0)


@pytest.mark.parametrize("bad", ["black", "#12345", (1, 2), (0, 0, 300), (0, 0, 0, -1)])
def test_invalid_colour_rejected(bad):
    with pytest.raises(ValueError):
        CanvasLayer(2, 2).draw_pixel(0, 0, bad)


def test_dirty_region_recorded_and_cleared():
    layer = CanvasLayer(16, 16)
    layer.draw_pixel(3, 4, BLACK)
    assert layer.take_dirty() == [Rect(3.0, 4.0, 5.0, 5.0)]
    assert layer.take_dirty() == []