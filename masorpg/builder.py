"""The yajuiku helper: set up, build, run, install and reset MasoRPG."""

from __future__ import annotations

import shlex
import shutil
import subprocess
import sys
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

INSTALL_DIR = Path("/opt/masoRpgDebugData")
INSTALLED_GAME = "./opt/masorpg/bin/main"
GAME_SOURCES = "src/main.cpp src/Camera2D.cpp"
PKG_CONFIG = "$(pkg-config --cflags --libs sdl2 SDL2_image SDL2_ttf SDL2_mixer)"

# Asset directories copied next to the built binary, in the order they are copied.
_ASSETS = ("fonts", "image", "music")
_EXTRA = "fentanyL"

# Package managers tried in order, with the command that installs g++ through each.
_INSTALLERS = (
    ("apt", "sudo apt update && sudo apt install -y g++"),
    ("dnf", "sudo dnf install -y g++"),
    ("yum", "sudo yum install -y gcc-c++"),
    ("pacman", "sudo pacman -Sy --noconfirm gcc"),
    ("zypper", "sudo zypper install -y gcc-c++"),
)

_HELP_LINES = (
    "yajuiku  +  bootstrap     で環境構築(Linux)(開発中)",
    "yajuiku  +  build     でビルド",
    "yajuiku  +  run     で実行(開発中)",
    "yajuiku  +  yajuiku     でyajuikuをビルド",
    "yajuiku  +  builrun     でビルドと実行(開発中)",
    "yajuiku  +  install     でこのコンピューターにインストール(実装予定)",
    "yajuiku  +  ruun     でこのコンピューターにインストールされたMasoRPGを実行",
    "yajuiku  +  remove     でこのコンピューターにインストールされたMasoRPGを削除(実装予定)",
    "yajuiku  + reset     で、ビルドの設定とか削除",
)


def help_text() -> str:
    """The usage summary listing every command."""
    return "\n".join(_HELP_LINES)


def _shell(command: str) -> int:
    """Run a command line through the shell and return its exit status."""
    return subprocess.run(command, shell=True, check=False).returncode


def _copy(source: Path, destination: Path) -> None:
    """Copy a file or a directory tree, overwriting what is already there."""
    if source.is_dir():
        shutil.copytree(source, destination, dirs_exist_ok=True)
    else:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, destination)


def _copy_assets(pairs: Sequence[tuple]) -> None:
    """Copy each (source, destination) pair, stopping at the first failure."""
    try:
        for source, destination in pairs:
            _copy(Path(source), Path(destination))
    except (OSError, shutil.Error) as exc:
        print(f"コピーエラー: {exc}", file=sys.stderr)


def command_exists(cmd: str) -> bool:
    """Whether `cmd --version` runs and succeeds."""
    try:
        result = subprocess.run(
            [cmd, "--version"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0


def bootstrap() -> Optional[str]:
    """Install g++ with the first package manager found.

    Returns the install command that was issued, or None when nothing was run.
    """
    if command_exists("g++"):
        print("g++ is already installed.")
        return None

    print("g++ not found. Attempting to install...")
    for manager, command in _INSTALLERS:
        if command_exists(manager):
            _shell(command)
            return command

    print("Unsupported package manager. Please install g++ manually.", file=sys.stderr)
    return None


def build(compiler_path: Path) -> None:
    """Compile the game into compiler/run/bin and copy its assets beside it."""
    compiler_path = Path(compiler_path)
    data_path = compiler_path / "run" / "data"
    bin_dir = compiler_path / "run" / "bin"
    bin_path = bin_dir / "main"

    _shell(f"g++ -std=c++17 -o {shlex.quote(str(bin_path))} {GAME_SOURCES} {PKG_CONFIG}")

    pairs = [(name, data_path / name) for name in _ASSETS]
    pairs.append((_EXTRA, bin_dir / _EXTRA))
    _copy_assets(pairs)


def run(base_path: Path) -> None:
    """Start the built game in debug mode."""
    print("※開発中")
    time.sleep(1)
    exec_path = Path(base_path) / "compiler" / "run" / "bin" / "main"
    _shell(f"{shlex.quote(str(exec_path))} debug")


def yajuiku(base_path: Path) -> None:
    """Compile this helper's own source into an executable named yajuiku."""
    base_path = Path(base_path)
    output_path = base_path / "yajuiku"
    source_path = base_path / "compiler" / "src" / "main.cpp"
    _shell(
        f"g++ -std=c++17 {shlex.quote(str(source_path))} -o {shlex.quote(str(output_path))}"
    )


def install(compiler_path: Path) -> None:
    """Copy the build tree under /opt, compile the game and copy its assets there."""
    _shell(f"sudo cp -r {shlex.quote(str(compiler_path))} {INSTALL_DIR}")
    _shell(f"g++ -std=c++17 -o opt/compiler/run/bin/main {GAME_SOURCES} {PKG_CONFIG}")

    data_path = INSTALL_DIR / "compiler" / "run" / "data"
    pairs = [(name, data_path / name) for name in (*_ASSETS, _EXTRA)]
    _copy_assets(pairs)


def remove() -> None:
    """Delete the installed copy under /opt."""
    _shell(f"sudo rm -rf {INSTALL_DIR}")


def ruun() -> None:
    """Start the installed game."""
    _shell(INSTALLED_GAME)


def reset(base_path: Path) -> None:
    """Replace compiler/run with a fresh copy of compiler/sample."""
    compiler_path = Path(base_path) / "compiler"
    run_path = compiler_path / "run"
    sample_path = compiler_path / "sample"
    try:
        if run_path.exists():
            shutil.rmtree(run_path)
        shutil.copytree(sample_path, run_path, dirs_exist_ok=True)
    except (OSError, shutil.Error) as exc:
        print(f"リセットエラー: {exc}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Carry out each command named on the command line, in order."""
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    base_path = Path.cwd()
    compiler_path = base_path / "compiler"

    def build_all() -> None:
        reset(base_path)
        build(compiler_path)

    def build_and_run() -> None:
        build_all()
        run(base_path)

    def reset_and_install() -> None:
        reset(base_path)
        install(compiler_path)

    commands: Dict[str, Callable[[], object]] = {
        "bootstrap": bootstrap,
        "build": build_all,
        "run": lambda: run(base_path),
        "help": lambda: print(help_text()),
        "yajuiku": lambda: yajuiku(base_path),
        "builrun": build_and_run,
        "install": reset_and_install,
        "remove": remove,
        "reset": lambda: reset(base_path),
        "ruun": ruun,
    }

    for arg in args:
        action = commands.get(arg)
        if action is not None:
            action()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())