import pytest

from ppmdecode import Raster


def test_new_raster_is_zeroed():
    img = Raster(3, 2)
    assert len(img.pix) == 3 * 2 * 4
    assert img.stride == 12
    assert img.rgba_at(2, 1) == (0, 0, 0, 0)


def test_set_and_get():
    img = Raster(2, 2)
    img.set_rgba(1, 0, 10, 20, 30)
    assert img.rgba_at(1, 0) == (10, 20, 30, 255)
    # x zmienia się najszybciej
    assert img.pix[4:8] == bytearray((10, 20, 30, 255))


@pytest.mark.parametrize("xy", [(2, 0), (0, 2), (-1, 0)])
def test_out_of_bounds(xy):
    with pytest.raises(IndexError):
        Raster(2, 2).rgba_at(*xy)


def test_buffer_size_mismatch():
    with pytest.raises(ValueError):
        Raster(2, 2, bytearray(15))


def test_rgb_pixels_and_image():
    img = Raster(2, 1)
    img.set_rgba(0, 0, 1, 2, 3)
    img.set_rgba(1, 0, 4, 5, 6)
    assert img.rgb_pixels() == [(1, 2, 3), (4, 5, 6)]
    pil = img.to_image()
    assert pil.mode == "RGBA"
    assert pil.size == (2, 1)
    assert pil.getpixel((1, 0)) == (4, 5, 6, 255)
