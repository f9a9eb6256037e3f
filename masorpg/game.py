"""The MasoRPG game: title menu, settings screen and the game field."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Optional, Sequence

from masorpg.camera import Camera2D, Rect

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 500
MAP_SIZE = 10000

CURSOR_TOP = 250
CURSOR_STEP = 30
CURSOR_BOTTOM = 310

PLAYER_STEP = 5
PLAYER_MIN_X = -15
PLAYER_MIN_Y = -10
PLAYER_MAX_X = 755
PLAYER_MAX_Y = 450

_MUSIC_DIR = ("run", "data", "music")
_LATIN_FONT = ("run", "data", "fonts", "8-bit-no-ja", "8bitOperatorPlus8-Bold.ttf")
_JAPANESE_FONT = ("run", "data", "fonts", "ja-16-bit", "DotGothic16-Regular.ttf")
_WOOD_LIGHT = ("run", "data", "image", "woodLight.png")


@dataclass
class AssetPaths:
    """Locations of the game's music, fonts and images; None where unset."""

    music_ikisugi: Optional[Path] = None
    music_lethal_chinpo: Optional[Path] = None
    music_lethal_deal: Optional[Path] = None
    font_latin: Optional[Path] = None
    font_japanese: Optional[Path] = None
    image_wood_light: Optional[Path] = None


def resolve_asset_paths(args: Sequence[str], base_path: Path) -> AssetPaths:
    """Work out asset locations from the command-line arguments.

    Each argument overrides the previous one: "debug" points at the build
    tree under base_path, anything else at the installed tree.
    """
    paths = AssetPaths()
    for arg in args:
        if arg == "debug":
            root = Path(base_path) / "compiler"
            paths = AssetPaths(
                music_ikisugi=root.joinpath(*_MUSIC_DIR, "ikisugiyou.wav"),
                music_lethal_chinpo=root.joinpath(*_MUSIC_DIR, "lethalchinpo.wav"),
                music_lethal_deal=root.joinpath(*_MUSIC_DIR, "LETHAL_DEAL.wav"),
                font_latin=root.joinpath(*_LATIN_FONT),
                font_japanese=root.joinpath(*_JAPANESE_FONT),
                image_wood_light=root.joinpath(*_WOOD_LIGHT),
            )
        else:
            root = Path("opt") / "masorpg"
            # The boss-battle track has no installed location; keep whatever was set.
            paths = replace(
                paths,
                music_ikisugi=root.joinpath(*_MUSIC_DIR, "ikisugiyou.wav"),
                music_lethal_chinpo=root.joinpath(*_MUSIC_DIR, "lethalchinpo.wav"),
                font_latin=root.joinpath(*_LATIN_FONT),
                font_japanese=root.joinpath(*_JAPANESE_FONT),
                image_wood_light=root.joinpath(*_WOOD_LIGHT),
            )
    return paths


class Scene(enum.Enum):
    TITLE = 1
    GAME = 2
    SETTINGS = 3


class Key(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    RETURN = "return"
    ESCAPE = "escape"


class Music(enum.Enum):
    IKISUGI = 1
    LETHAL_CHINPO = 2
    LETHAL_DEAL = 3


@dataclass
class GameState:
    """Everything the game loop tracks between frames."""

    scene: Scene = Scene.TITLE
    room: int = 5  # 1 village, 2 near the castle, 3 castle, 4 castle top, 5 boss
    cursor: Rect = field(default_factory=lambda: Rect(3, CURSOR_TOP, 10, 10))
    player: Rect = field(default_factory=lambda: Rect(5000, 5000, 50, 50))
    current_music: Optional[Music] = None
    running: bool = True

    def handle_key(self, key: Key) -> None:
        """React to a key press in the menu scenes."""
        if self.scene is Scene.TITLE:
            if key is Key.DOWN:
                self.cursor.y += CURSOR_STEP
            if key is Key.UP:
                self.cursor.y -= CURSOR_STEP
            if key is Key.RETURN:
                if self.cursor.y == CURSOR_TOP:
                    self.scene = Scene.GAME
                elif self.cursor.y == CURSOR_TOP + CURSOR_STEP:
                    self.scene = Scene.SETTINGS
                elif self.cursor.y == CURSOR_BOTTOM:
                    self.running = False
        if self.scene is Scene.SETTINGS and key is Key.ESCAPE:
            self.scene = Scene.TITLE

    def clamp_cursor(self) -> None:
        """Keep the menu cursor on one of the entries."""
        self.cursor.y = min(max(self.cursor.y, CURSOR_TOP), CURSOR_BOTTOM)

    def desired_music(self) -> Optional[Music]:
        """The track that should be playing in the current scene."""
        if self.scene is Scene.TITLE:
            return Music.LETHAL_CHINPO
        if self.scene is Scene.GAME and self.room == 5:
            return Music.LETHAL_DEAL
        return self.current_music

    def move_player(self, key: Optional[Key]) -> None:
        """Step the player for a held key and keep it inside the field."""
        if key is Key.UP:
            self.player.y -= PLAYER_STEP
        if key is Key.DOWN:
            self.player.y += PLAYER_STEP
        if key is Key.LEFT:
            self.player.x -= PLAYER_STEP
        if key is Key.RIGHT:
            self.player.x += PLAYER_STEP
        if self.player.x <= PLAYER_MIN_X:
            self.player.x = PLAYER_MIN_X
        if self.player.y <= PLAYER_MIN_Y:
            self.player.y = PLAYER_MIN_Y
        if self.player.x >= PLAYER_MAX_X:
            self.player.x = PLAYER_MAX_X
        if self.player.y >= PLAYER_MAX_Y:
            self.player.y = PLAYER_MAX_Y


def draw_text(surface, color, font, text: str, x: float, y: float) -> None:
    """Render text with the font and draw it at (x, y)."""
    if font is None:
        print("テキストのレンダリングに失敗しました: no font", file=sys.stderr)
        return
    try:
        rendered = font.render(text, True, tuple(int(c) for c in color))
    except Exception as exc:  # the font backend reports failures in its own error type
        print(f"テキストのレンダリングに失敗しました: {exc}", file=sys.stderr)
        return
    surface.blit(rendered, (int(x), int(y)))


def draw_number(surface, color, font, number: int, x: float, y: float) -> None:
    """Draw an integer as text."""
    draw_text(surface, color, font, str(number), x, y)


def _load_font(pygame, path: Optional[Path], size: int):
    if path is None:
        return None
    try:
        return pygame.font.Font(str(path), size)
    except (pygame.error, OSError):
        return None


def _load_image(pygame, path: Optional[Path]):
    if path is None:
        return None
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError, FileNotFoundError):
        return None


def _play_music(pygame, path: Optional[Path]) -> None:
    pygame.mixer.music.stop()
    if path is None:
        return
    try:
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.play(-1)
    except (pygame.error, OSError):
        # A missing track simply leaves the game silent.
        return


def run_game(paths: AssetPaths) -> int:
    """Open the window and run the game loop; returns the exit status."""
    import pygame

    try:
        pygame.display.init()
        pygame.font.init()
    except pygame.error as exc:
        print(f"SDL_Init Error: {exc}", file=sys.stderr)
        return 1

    try:
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error as exc:
            print(f"SDL_mixer Error: {exc}", file=sys.stderr)
            return 1

        try:
            screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        except pygame.error as exc:
            print(f"SDL_CreateWindow Error: {exc}", file=sys.stderr)
            return 1
        pygame.display.set_caption("SDL Window")

        tracks = {
            Music.IKISUGI: paths.music_ikisugi,
            Music.LETHAL_CHINPO: paths.music_lethal_chinpo,
            Music.LETHAL_DEAL: paths.music_lethal_deal,
        }
        title_font = _load_font(pygame, paths.font_latin, 50)
        japanese_font = _load_font(pygame, paths.font_japanese, 24)
        wood_light = _load_image(pygame, paths.image_wood_light)

        key_map = {
            pygame.K_UP: Key.UP,
            pygame.K_DOWN: Key.DOWN,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT,
            pygame.K_RETURN: Key.RETURN,
            pygame.K_ESCAPE: Key.ESCAPE,
        }

        camera = Camera2D(WINDOW_WIDTH, WINDOW_HEIGHT, MAP_SIZE, MAP_SIZE)
        state = GameState()
        black = (0, 0, 0)
        clear_color = (0, 0, 0)
        # The game field keeps moving the player with the most recent event
        # until another event replaces it.
        last_key: Optional[Key] = None

        while state.running:
            for event in pygame.event.get():
                last_key = key_map.get(event.key) if event.type == pygame.KEYDOWN else None
                if event.type == pygame.QUIT:
                    state.running = False
                if last_key is not None:
                    state.handle_key(last_key)

            wanted = state.desired_music()
            if wanted is not state.current_music:
                state.current_music = wanted
                _play_music(pygame, tracks.get(wanted) if wanted else None)

            if state.scene is Scene.TITLE:
                clear_color = (0, 184, 255)
                screen.fill(clear_color)
                state.clamp_cursor()
                draw_text(screen, black, title_font, "MasoRPG", 10, 30)
                draw_text(screen, black, japanese_font, "スタート", 20, 250)
                draw_text(screen, black, japanese_font, "設定", 20, 280)
                draw_text(screen, black, japanese_font, "おわり", 20, 310)
                draw_text(screen, (255, 0, 0), japanese_font, ">", state.cursor.x, state.cursor.y)
                pygame.display.flip()
                pygame.time.delay(8)
            elif state.scene is Scene.GAME:
                player = state.player
                camera.follow(player)
                camera.set_position(player.x, player.y)
                camera.clamp_position(MAP_SIZE, MAP_SIZE)
                screen.fill(clear_color)
                screen_rect = camera.world_to_screen(player)
                draw_text(screen, black, japanese_font, "X: ", 10, 100)
                draw_text(screen, black, japanese_font, "Y: ", 10, 130)
                draw_number(screen, black, japanese_font, player.x, 40, 100)
                draw_number(screen, black, japanese_font, player.y, 40, 130)
                state.move_player(last_key)
                if state.room in (1, 2, 3, 4) and wood_light is not None:
                    scaled = pygame.transform.scale(
                        wood_light, (max(screen_rect.w, 0), max(screen_rect.h, 0))
                    )
                    screen.blit(scaled, (screen_rect.x, screen_rect.y))
                pygame.display.flip()
                pygame.time.delay(16)
            else:
                clear_color = (0, 255, 255)
                screen.fill(clear_color)
                state.clamp_cursor()
                draw_text(screen, black, japanese_font, "何もないよ", 20, 250)
                pygame.display.flip()
                pygame.time.delay(8)

        pygame.mixer.music.stop()
        return 0
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game with asset paths taken from the arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    return run_game(resolve_asset_paths(args, Path.cwd()))


__all__ = [
    "AssetPaths",
    "GameState",
    "Key",
    "Music",
    "Scene",
    "draw_number",
    "draw_text",
    "fields",
    "main",
    "resolve_asset_paths",
    "run_game",
]

if __name__ == "__main__":
    raise SystemExit(main())