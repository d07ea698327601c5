import pytest

from raycube.image import Image
from raycube.raycast import AnimatedTexture, Key, Ray, Scene

ROOM = ["11111", "10001", "10001", "10001", "11111"]


def _texture(color):
    image = Image(4, 4)
    image.fill_area(0, 0, 4, 4, color)
    return AnimatedTexture([image])


def _scene(x=2.0, y=2.0, direction="E", minimap=None):
    return Scene(
        grid=list(ROOM),
        x=x,
        y=y,
        ray=Ray.from_direction(direction, 640),
        speed=0.1,
        north=_texture(0x000001),
        south=_texture(0x000002),
        east=_texture(0x000003),
        west=_texture(0x000004),
        minimap=minimap,
    )


@pytest.mark.parametrize("direction, angle", [("E", 0), ("S", 90), ("W", 180), ("N", 270)])
def test_ray_from_direction(direction, angle):
    ray = Ray.from_direction(direction, 640)
    assert ray.angle == angle
    assert ray.hfov == 30
    assert ray.precision == 70
    assert ray.limit == 11
    assert ray.increment == pytest.approx(60 / 640)


def test_ray_unknown_direction():
    with pytest.raises(ValueError):
        Ray.from_direction("Q", 640)


def test_animated_texture_cycles():
    a, b = Image(1, 1), Image(1, 1)
    texture = AnimatedTexture([a, b])
    assert texture.current() is a
    texture.advance()
    assert texture.current() is b
    texture.advance()
    assert texture.current() is a


def test_animated_texture_needs_frames():
    with pytest.raises(ValueError):
        AnimatedTexture([])


def test_move_forward_in_open_room():
    scene = _scene()
    scene.move(Key.W)
    assert scene.x == pytest.approx(2.1)
    assert scene.y == pytest.approx(2.0)


def test_move_blocked_by_wall():
    scene = _scene(x=3.3)
    scene.move(Key.W)
    assert scene.x == 3.3


def test_move_backward_reverses_forward():
    scene = _scene()
    scene.move(Key.W)
    scene.move(Key.S)
    assert scene.x == pytest.approx(2.0)
    assert scene.y == pytest.approx(2.0)


def test_apply_keys_turns():
    scene = _scene()
    scene.apply_keys([Key.LEFT])
    assert scene.ray.angle == -3
    scene.apply_keys([Key.RIGHT, Key.RIGHT])
    assert scene.ray.angle == 0


def test_cast_reaches_east_wall():
    scene = _scene()
    distance = scene.cast(0)
    assert 1.5 <= distance < 1.5 + 2 / 70
    assert int(scene.hit_x) == 4
    assert int(scene.hit_y) == 2


def test_wall_texture_and_colour_after_cast():
    scene = _scene()
    scene.cast(0)
    texture = scene.wall_texture()
    assert texture is scene.west.current()
    assert scene.texture_color(texture, 0) == 0x000004


def test_texture_colour_is_zero_off_wall():
    scene = _scene()
    scene.ray.limit = 0.5
    scene.cast(0)
    assert scene.texture_color(scene.west.current(), 0) == 0


def test_minimap_marks_player():
    minimap = Image(5, 5)
    scene = _scene(minimap=minimap)
    scene.cast(0)
    assert minimap.get_pixel(2, 2) == 0x00FDD663
    assert minimap.get_pixel(4, 2) == 0x00FF0000