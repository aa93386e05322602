"""A small curses game engine with bundled space-invaders and geometry-dash games."""

__version__ = "0.1.0"