import pytest

from raycube.image import Image, channel_shifts, good_color

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def _fill(image, kind):
    for y in range(image.height):
        for x in range(image.width):
            image.put_pixel(x, y, _color_map(x, y, image.width, image.height, kind))


@pytest.mark.parametrize("size, kind", [((IM1_SX, IM1_SY), 1), ((IM3_SX, IM3_SY), 1), ((IM3_SX, IM3_SY), 2)])
def test_color_map_fill_reads_back(size, kind):
    image = Image(*size)
    _fill(image, kind)
    assert image.bits_per_pixel == 32
    assert image.endian == 0
    for y in range(0, image.height, 7):
        for x in range(0, image.width, 5):
            assert image.get_pixel(x, y) == _color_map(x, y, image.width, image.height, kind)


def test_layout_is_four_bytes_per_pixel():
    image = Image(IM1_SX, IM1_SY)
    assert image.line_length == IM1_SX * 4
    assert len(image.data) == IM1_SX * 4 * IM1_SY


def test_pixel_bytes_are_little_endian():
    image = Image(2, 2)
    image.put_pixel(1, 1, 0x11223344)
    offset = image.line_length + 4
    assert bytes(image.data[offset:offset + 4]) == bytes([0x44, 0x33, 0x22, 0x11])


def test_negative_color_stored_unsigned():
    image = Image(1, 1)
    image.put_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


def test_new_image_is_black():
    image = Image(3, 3)
    assert all(image.get_pixel(x, y) == 0 for x in range(3) for y in range(3))


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_size_rejected(size):
    with pytest.raises(ValueError):
        Image(*size)


@pytest.mark.parametrize("point", [(-1, 0), (0, -1), (4, 0), (0, 4)])
def test_out_of_bounds_access(point):
    image = Image(4, 4)
    with pytest.raises(IndexError):
        image.put_pixel(*point, 0xFF)
    with pytest.raises(IndexError):
        image.get_pixel(*point)


def test_fill_area_covers_only_rectangle():
    image = Image(6, 6)
    image.fill_area(1, 2, 3, 2, 0x00FDD663)
    for y in range(6):
        for x in range(6):
            inside = 1 <= x < 4 and 2 <= y < 4
            assert image.get_pixel(x, y) == (0x00FDD663 if inside else 0)


def test_blit_skips_transparent_pixels():
    source = Image(2, 2)
    source.fill_area(0, 0, 2, 2, 0xFF000000)
    source.put_pixel(1, 0, 0x00FF0000)
    target = Image(4, 4)
    target.fill_area(0, 0, 4, 4, 0x000000FF)
    source.blit(target, 2, 1, 0xFF000000)
    assert target.get_pixel(3, 1) == 0x00FF0000
    assert target.get_pixel(2, 1) == 0x000000FF
    assert target.get_pixel(2, 2) == 0x000000FF


def test_blit_clips_outside_target():
    source = Image(3, 3)
    source.fill_area(0, 0, 3, 3, 0x0000FF00)
    target = Image(2, 2)
    source.blit(target, -1, 1, 0xFF000000)
    assert target.get_pixel(0, 1) == 0x0000FF00
    assert target.get_pixel(1, 1) == 0x0000FF00
    assert target.get_pixel(0, 0) == 0


def test_good_color_deep_display_unchanged():
    assert good_color(0xFF99FF, 24, (16, 8, 8, 8, 0, 8)) == 0xFF99FF
    assert good_color(0x00FFFF, 32, ()) == 0x00FFFF


def test_channel_shifts_true_color():
    assert channel_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_channel_shifts_rgb565():
    assert channel_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


def test_good_color_rgb565():
    shifts = channel_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(0xFFFFFF, 16, shifts) == 0xFFFF
    assert good_color(0xFF0000, 16, shifts) == 0xF800
    assert good_color(0x00FF00, 16, shifts) == 0x07E0
    assert good_color(0x0000FF, 16, shifts) == 0x001F
    assert good_color(0x000000, 16, shifts) == 0


def test_channel_shifts_rejects_empty_mask():
    with pytest.raises(ValueError):
        channel_shifts(0, 0x00FF00, 0x0000FF)


def test_good_color_requires_six_shifts():
    with pytest.raises(ValueError):
        good_color(0x123456, 16, (1, 2, 3))