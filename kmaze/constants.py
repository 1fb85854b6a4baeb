from __future__ import annotations

# Grid
DEFAULT_HEIGHT: int = 100
DEFAULT_WIDTH: int = 100

# Rendering
WINDOW_SIZE_PX: tuple[int, int] = (800, 800)
MARGIN_PX: float = 2.0
FPS: int = 30
WINDOW_CAPTION: str = "Maze"

# Colors (RGB)
COLOR_BACKGROUND: tuple[int, int, int] = (0, 0, 0)
COLOR_PASSAGE: tuple[int, int, int] = (230, 41, 55)

# Component merge strategies accepted by the generator
MERGE_RELABEL: str = "relabel"
MERGE_UNION_FIND: str = "union_find"
MERGE_STRATEGIES: tuple[str, ...] = (MERGE_RELABEL, MERGE_UNION_FIND)
