# masorpg

MasoRPG is a small role-playing game built on pygame. It opens on a title
menu where you can start the game, open the settings screen or quit. On the
game field a camera follows the player across a 10000 × 10000 map.

The package also ships `yajuiku`, a helper command that sets up a compiler,
builds the game binary, copies its assets, installs it under `/opt` and
resets the build tree.

## Installing

```
pip install .
```

To run the tests, install the test extra:

```
pip install ".[test]"
pytest
```

## Playing

```
masorpg debug
```

The window is 800 × 500. Where the game looks for its fonts, images and music
depends on the arguments:

- `debug`: under `compiler/run/data` in the current directory.
- any other argument: under `opt/masorpg/run/data` relative to the current
  directory. This location has no boss-battle track.
- no argument at all: no asset paths are set, so no text is drawn and no music
  plays.

Each argument overrides the one before it. A font or image that cannot be
loaded is skipped, a track that cannot be loaded leaves the game silent, and
text that cannot be drawn is reported on standard error.

Controls:

- Title menu: Up and Down move the cursor, Enter picks an item
  (スタート starts the game, 設定 opens settings, おわり quits).
- Game field: the arrow keys move the player by 5 pixels per frame; its
  position is shown as `X:` and `Y:`.
- Settings: Escape goes back to the title menu.

The title menu plays the "lethalchinpo" track and the boss room plays
"LETHAL_DEAL", both on a loop.

## What the game does not do

The game starts in the boss room, which draws nothing but the player's
coordinates: there are no enemies, battles, items or dialogue, and the player
itself is not drawn there. The settings screen has no settings; it only shows
何もないよ. Nothing is saved between runs.

## The `yajuiku` helper

`yajuiku` takes one or more commands and carries them out in order, from the
current directory. Unknown commands are ignored.

| Command     | What it does                                                                 |
|-------------|------------------------------------------------------------------------------|
| `help`      | Prints the list of commands                                                  |
| `bootstrap` | If `g++` is missing, installs it with the first of apt, dnf, yum, pacman or zypper found |
| `reset`     | Replaces `compiler/run` with a fresh copy of `compiler/sample`               |
| `build`     | Resets, compiles the game with `g++` and SDL2 (via `pkg-config`) into `compiler/run/bin/main`, then copies `fonts`, `image` and `music` into `compiler/run/data` and `fentanyL` into `compiler/run/bin` |
| `run`       | Starts `compiler/run/bin/main debug` after a one-second pause                |
| `builrun`   | Resets, builds and runs                                                      |
| `yajuiku`   | Compiles `compiler/src/main.cpp` into `./yajuiku`                            |
| `install`   | Resets, copies `compiler` to `/opt/masoRpgDebugData`, compiles the game and copies the assets into `/opt/masoRpgDebugData/compiler/run/data` |
| `remove`    | Deletes `/opt/masoRpgDebugData`                                              |
| `ruun`      | Starts `./opt/masorpg/bin/main`                                              |

For example:

```
yajuiku reset build
yajuiku run
```

Commands that touch `/opt` use `sudo`. Copy failures are reported on standard
error and stop the remaining copies of that command.

The same steps are available as functions in `masorpg.builder`:
`help_text()`, `command_exists(cmd)`, `bootstrap()`, `build(compiler_path)`,
`run(base_path)`, `yajuiku(base_path)`, `install(compiler_path)`, `remove()`,
`ruun()` and `reset(base_path)`.

## Using the camera in your own code

```python
from masorpg.camera import Camera2D, Rect

camera = Camera2D(800, 500, 10000, 10000)
camera.follow(Rect(5000, 5000, 50, 50))
camera.clamp_position(10000, 10000)
print(camera.view())                                  # Rect(x=4625, y=4775, w=800, h=500)
print(camera.world_to_screen(Rect(5100, 5100, 50, 50)))  # Rect(x=475, y=325, w=50, h=50)
```

`follow` centres the camera on a rectangle, `set_position` places its
top-left corner, and `clamp_position` keeps it inside a map of the given size.

## Driving the game logic without a window

`masorpg.game.GameState` holds the menu cursor, the current scene, the room,
the player and the music choice, and can be stepped without pygame:

```python
from masorpg.game import GameState, Key, Scene

state = GameState()
state.handle_key(Key.DOWN)
state.handle_key(Key.RETURN)
assert state.scene is Scene.SETTINGS
state.handle_key(Key.ESCAPE)
assert state.scene is Scene.TITLE
```

`resolve_asset_paths(args, base_path)` returns the `AssetPaths` the game would
use for a given argument list.