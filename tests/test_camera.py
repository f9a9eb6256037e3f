import pytest

from masorpg.camera import Camera2D, Rect


def test_initial_view_is_at_origin():
    camera = Camera2D(800, 500, 10000, 10000)
    assert camera.view() == Rect(0, 0, 800, 500)


def test_map_size_defaults():
    camera = Camera2D(800, 500)
    assert (camera.map_width, camera.map_height) == (0, 0)


@pytest.mark.parametrize("target", [Rect(100, 100, 50, 50), Rect(5000, 3000, 20, 40), Rect(-60, -80, 10, 10)])
def test_follow_centres_target(target):
    camera = Camera2D(800, 500)
    camera.follow(target)
    view = camera.view()
    assert view.x + view.w // 2 == target.x + target.w // 2
    assert view.y + view.h // 2 == target.y + target.h // 2


def test_set_position_moves_view():
    camera = Camera2D(800, 500)
    camera.set_position(123, 456)
    assert camera.view() == Rect(123, 456, 800, 500)


def test_world_to_screen_round_trip():
    camera = Camera2D(800, 500)
    camera.set_position(300, 200)
    world = Rect(350, 260, 50, 50)
    screen = camera.world_to_screen(world)
    assert (screen.x + camera.x, screen.y + camera.y) == (world.x, world.y)
    assert (screen.w, screen.h) == (world.w, world.h)


def test_world_to_screen_at_camera_position_is_origin():
    camera = Camera2D(800, 500)
    camera.set_position(700, 400)
    screen = camera.world_to_screen(Rect(700, 400, 50, 50))
    assert (screen.x, screen.y) == (0, 0)


def test_clamp_negative_position():
    camera = Camera2D(800, 500)
    camera.set_position(-5, -7)
    camera.clamp_position(10000, 10000)
    assert (camera.x, camera.y) == (0, 0)


def test_clamp_past_map_edge():
    camera = Camera2D(800, 500)
    camera.set_position(9900, 9900)
    camera.clamp_position(10000, 10000)
    assert (camera.x, camera.y) == (10000 - 800, 10000 - 500)


def test_clamp_inside_map_unchanged():
    camera = Camera2D(800, 500)
    camera.set_position(1000, 2000)
    camera.clamp_position(10000, 10000)
    assert (camera.x, camera.y) == (1000, 2000)


def test_clamp_map_smaller_than_screen_goes_negative():
    camera = Camera2D(800, 500)
    camera.set_position(-10, -10)
    camera.clamp_position(400, 300)
    assert (camera.x, camera.y) == (400 - 800, 300 - 500)