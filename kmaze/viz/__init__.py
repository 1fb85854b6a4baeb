"""Maze rendering with pygame."""

from .pygame_renderer import Renderer

__all__ = ["Renderer"]
