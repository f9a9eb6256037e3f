from dataclasses import fields
from pathlib import Path

import pytest

from masorpg.camera import Rect
from masorpg.game import (
    AssetPaths,
    GameState,
    Key,
    Music,
    Scene,
    draw_number,
    draw_text,
    resolve_asset_paths,
)


class FakeFont:
    def __init__(self):
        self.rendered = []

    def render(self, text, antialias, color):
        self.rendered.append((text, antialias, color))
        return ("surface", text)


class FakeSurface:
    def __init__(self):
        self.blits = []

    def blit(self, source, position):
        self.blits.append((source, position))


BASE = Path("/tmp/game")


def test_no_args_leaves_every_path_unset():
    paths = resolve_asset_paths([], BASE)
    assert all(getattr(paths, f.name) is None for f in fields(AssetPaths))


def test_debug_paths_under_base():
    paths = resolve_asset_paths(["debug"], BASE)
    data = BASE / "compiler" / "run" / "data"
    assert paths.font_japanese == data / "fonts" / "ja-16-bit" / "DotGothic16-Regular.ttf"
    assert paths.font_latin == data / "fonts" / "8-bit-no-ja" / "8bitOperatorPlus8-Bold.ttf"
    assert paths.music_lethal_deal == data / "music" / "LETHAL_DEAL.wav"
    assert paths.image_wood_light == data / "image" / "woodLight.png"


def test_installed_paths_have_no_boss_track():
    paths = resolve_asset_paths(["play"], BASE)
    assert paths.music_lethal_chinpo == Path("opt/masorpg/run/data/music/lethalchinpo.wav")
    assert paths.music_lethal_deal is None


def test_last_argument_wins_but_keeps_boss_track():
    paths = resolve_asset_paths(["debug", "other"], BASE)
    assert paths.music_ikisugi == Path("opt/masorpg/run/data/music/ikisugiyou.wav")
    assert paths.music_lethal_deal == BASE / "compiler" / "run" / "data" / "music" / "LETHAL_DEAL.wav"


def test_initial_state():
    state = GameState()
    assert state.scene is Scene.TITLE
    assert state.room == 5
    assert state.cursor == Rect(3, 250, 10, 10)
    assert state.current_music is None
    assert state.running


def test_return_on_first_entry_starts_game():
    state = GameState()
    state.handle_key(Key.RETURN)
    assert state.scene is Scene.GAME


def test_second_entry_opens_settings_and_escape_returns():
    state = GameState()
    state.handle_key(Key.DOWN)
    state.handle_key(Key.RETURN)
    assert state.scene is Scene.SETTINGS
    state.handle_key(Key.ESCAPE)
    assert state.scene is Scene.TITLE


def test_third_entry_quits():
    state = GameState()
    state.handle_key(Key.DOWN)
    state.handle_key(Key.DOWN)
    state.handle_key(Key.RETURN)
    assert state.running is False
    assert state.scene is Scene.TITLE


def test_cursor_beyond_entries_selects_nothing_until_clamped():
    state = GameState()
    for _ in range(3):
        state.handle_key(Key.DOWN)
    state.handle_key(Key.RETURN)
    assert state.scene is Scene.TITLE and state.running
    state.clamp_cursor()
    assert state.cursor.y == 310


def test_cursor_clamped_at_top():
    state = GameState()
    state.handle_key(Key.UP)
    state.clamp_cursor()
    assert state.cursor.y == 250


def test_keys_ignored_in_game_scene():
    state = GameState(scene=Scene.GAME)
    state.handle_key(Key.ESCAPE)
    state.handle_key(Key.DOWN)
    assert state.scene is Scene.GAME
    assert state.cursor.y == 250


@pytest.mark.parametrize(
    "scene, room, current, expected",
    [
        (Scene.TITLE, 5, None, Music.LETHAL_CHINPO),
        (Scene.GAME, 5, Music.LETHAL_CHINPO, Music.LETHAL_DEAL),
        (Scene.GAME, 1, None, None),
        (Scene.SETTINGS, 5, Music.LETHAL_CHINPO, Music.LETHAL_CHINPO),
    ],
)
def test_desired_music(scene, room, current, expected):
    state = GameState(scene=scene, room=room, current_music=current)
    assert state.desired_music() is expected


def test_player_starting_far_away_is_pulled_into_field():
    state = GameState(scene=Scene.GAME)
    state.move_player(Key.RIGHT)
    assert (state.player.x, state.player.y) == (755, 450)


def test_player_moves_by_step():
    state = GameState(player=Rect(100, 100, 50, 50))
    state.move_player(Key.UP)
    state.move_player(Key.LEFT)
    assert (state.player.x, state.player.y) == (95, 95)


def test_player_held_at_lower_bounds():
    state = GameState(player=Rect(-15, -10, 50, 50))
    state.move_player(Key.LEFT)
    state.move_player(Key.UP)
    assert (state.player.x, state.player.y) == (-15, -10)


def test_no_key_leaves_player_in_place():
    state = GameState(player=Rect(200, 300, 50, 50))
    state.move_player(None)
    assert (state.player.x, state.player.y) == (200, 300)


def test_draw_number_renders_digits_at_position():
    font, surface = FakeFont(), FakeSurface()
    draw_number(surface, (0, 0, 0), font, 42, 40.0, 100.0)
    assert font.rendered == [("42", True, (0, 0, 0))]
    assert surface.blits == [(("surface", "42"), (40, 100))]


def test_draw_text_without_font_draws_nothing():
    surface = FakeSurface()
    draw_text(surface, (255, 0, 0), None, ">", 3, 250)
    assert surface.blits == []


def test_draw_text_truncates_coordinates():
    font, surface = FakeFont(), FakeSurface()
    draw_text(surface, (255.0, 0.0, 0.0), font, "MasoRPG", 10.7, 30.2)
    assert surface.blits[0][1] == (10, 30)
    assert font.rendered[0][2] == (255, 0, 0)