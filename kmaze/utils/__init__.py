"""Helpers shared by the maze scripts and tests."""

from .config import (
    apply_overrides,
    load_config_any,
    load_config_dict,
    set_section_values,
)
from .connectivity import (
    MazeInvariantError,
    check_maze,
    count_components,
    is_perfect,
    is_symmetric,
    respects_boundary,
)

__all__ = [
    "apply_overrides",
    "load_config_any",
    "load_config_dict",
    "set_section_values",
    "MazeInvariantError",
    "check_maze",
    "count_components",
    "is_perfect",
    "is_symmetric",
    "respects_boundary",
]
