"""A small 2D game engine on pygame: application loop, worlds, actors, texture cache and a demo game."""

__version__ = "1.0.0"