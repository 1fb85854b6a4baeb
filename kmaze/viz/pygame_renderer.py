"""Pygame renderer for generated mazes.

Renders:
- One filled rectangle per cell, inset by the margin
- A margin-wide bridge towards every neighbor the cell is open to
- Background everywhere else, which reads as walls

Supports windowed (interactive) and headless modes. Returns frames for recording.
"""

from __future__ import annotations

from typing import Optional
import os

import pygame

from ..config import VizConfig
from ..types import Direction, Maze


def _snap(left: float, top: float, right: float, bottom: float) -> pygame.Rect:
    """Integer rect from rounded edges, so rects sharing an edge stay flush."""
    x0, y0 = round(left), round(top)
    return pygame.Rect(x0, y0, round(right) - x0, round(bottom) - y0)


class Renderer:
    def __init__(
        self,
        viz_cfg: Optional[VizConfig] = None,
        display: bool = True,
    ) -> None:
        self.viz = viz_cfg or VizConfig()
        self.colors = self.viz.colors
        self.width, self.height = self.viz.size_px
        self.margin = float(self.viz.margin_px)
        self.display = bool(display)

        if not self.display:
            os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

        pygame.init()
        if self.display:
            self.screen = pygame.display.set_mode((self.width, self.height))
        else:
            self.screen = pygame.Surface((self.width, self.height))
        pygame.display.set_caption(self.viz.caption)
        self.clock = pygame.time.Clock()

    def cell_size(self, maze: Maze) -> tuple[float, float]:
        """Pitch of one cell in pixels, margin included."""
        cell_w = (self.width - self.margin) / maze.width
        cell_h = (self.height - self.margin) / maze.height
        if cell_w <= self.margin or cell_h <= self.margin:
            raise ValueError(
                f"{self.width}x{self.height}px with margin {self.margin} is too small "
                f"for a {maze.height}x{maze.width} maze"
            )
        return cell_w, cell_h

    def _cell_edges(self, x: int, y: int, maze: Maze) -> tuple[float, float, float, float]:
        """(left, top, right, bottom) of cell (x, y) in float pixels."""
        cell_w, cell_h = self.cell_size(maze)
        m = self.margin
        return x * cell_w + m, y * cell_h + m, (x + 1) * cell_w, (y + 1) * cell_h

    def cell_rect(self, x: int, y: int, maze: Maze) -> pygame.Rect:
        return _snap(*self._cell_edges(x, y, maze))

    def gap_rect(self, x: int, y: int, direction: Direction, maze: Maze) -> pygame.Rect:
        """Strip between cell (x, y) and its neighbor on ``direction``.

        Edges reuse the neighbor's own edge expressions, so an open passage
        joins both cells without a seam.
        """
        cell_w, cell_h = self.cell_size(maze)
        m = self.margin
        left, top, right, bottom = self._cell_edges(x, y, maze)
        if direction is Direction.N:
            box = (left, y * cell_h, right, top)
        elif direction is Direction.E:
            box = (right, top, (x + 1) * cell_w + m, bottom)
        elif direction is Direction.S:
            box = (left, bottom, right, (y + 1) * cell_h + m)
        elif direction is Direction.W:
            box = (x * cell_w, top, left, bottom)
        else:
            raise TypeError(f"Expected Direction, got {type(direction).__name__}")
        return _snap(*box)

    def draw_maze(self, maze: Maze) -> None:
        color = self.colors.passage
        for x, y, dirs in maze.cells():
            pygame.draw.rect(self.screen, color, self.cell_rect(x, y, maze))
            for d in dirs:
                pygame.draw.rect(self.screen, color, self.gap_rect(x, y, d, maze))

    def render_frame(self, maze: Maze) -> "pygame.Surface":
        self.screen.fill(self.colors.background)
        self.draw_maze(maze)

        if self.display:
            pygame.display.flip()
            self.clock.tick(self.viz.fps)
        return self.screen

    def poll_events(self) -> bool:
        """Return False if a quit event is received."""
        if not self.display:
            return True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
        return True

    def close(self) -> None:
        if self.display:
            pygame.display.quit()
        pygame.quit()
