[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeon"
version = "0.1.0"
description = "A terminal dungeon crawler that starts as a snake-like game, with the state machine, input and entity pieces it is built from."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "snake", "dungeon", "ansi", "state-machine"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dungeon = "dungeon.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
