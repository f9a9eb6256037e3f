[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "masorpg"
version = "0.1.0"
description = "A small pygame role-playing game with a title menu, a following camera, and a helper command for building and installing it"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "rpg", "pygame", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
masorpg = "masorpg.game:main"
yajuiku = "masorpg.builder:main"

[tool.hatch.build.targets.wheel]
packages = ["masorpg"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
