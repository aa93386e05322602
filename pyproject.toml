[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termage"
version = "0.1.0"
description = "A small terminal game engine with two bundled arcade games: a space shooter and a side-scrolling jumper."
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "curses", "game", "engine", "arcade", "ascii"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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
termage-invaders = "termage.invaders:main"
termage-dash = "termage.dash:main"

[tool.hatch.build.targets.wheel]
packages = ["termage"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
