from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .constants import (
    COLOR_BACKGROUND,
    COLOR_PASSAGE,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    FPS,
    MARGIN_PX,
    MERGE_RELABEL,
    MERGE_STRATEGIES,
    WINDOW_CAPTION,
    WINDOW_SIZE_PX,
)


def _rgb(value: Any) -> tuple[int, int, int]:
    r, g, b = (int(c) for c in value)
    for c in (r, g, b):
        assert 0 <= c <= 255, f"color component {c} outside [0, 255]"
    return r, g, b


@dataclass
class MazeConfig:
    height: int = DEFAULT_HEIGHT
    width: int = DEFAULT_WIDTH
    seed: Optional[int] = None
    merge: str = MERGE_RELABEL

    def __post_init__(self) -> None:
        assert self.height >= 1, "height must be >= 1"
        assert self.width >= 1, "width must be >= 1"
        assert self.merge in MERGE_STRATEGIES, f"merge must be one of {MERGE_STRATEGIES}"


@dataclass
class Colors:
    background: tuple[int, int, int] = COLOR_BACKGROUND
    passage: tuple[int, int, int] = COLOR_PASSAGE

    def __post_init__(self) -> None:
        self.background = _rgb(self.background)
        self.passage = _rgb(self.passage)


@dataclass
class VizConfig:
    size_px: tuple[int, int] = WINDOW_SIZE_PX
    margin_px: float = MARGIN_PX
    fps: int = FPS
    caption: str = WINDOW_CAPTION
    colors: Colors = field(default_factory=Colors)

    def __post_init__(self) -> None:
        self.size_px = (int(self.size_px[0]), int(self.size_px[1]))
        assert self.size_px[0] > 0 and self.size_px[1] > 0, "size_px must be positive"
        assert self.margin_px >= 0.0, "margin_px must be >= 0"
        assert self.fps > 0, "fps must be > 0"


@dataclass
class AppConfig:
    maze: MazeConfig = field(default_factory=MazeConfig)
    viz: VizConfig = field(default_factory=VizConfig)

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any] | None) -> "AppConfig":
        d = cfg or {}
        maze_cfg = dict(d.get("maze") or {})
        viz_cfg = dict(d.get("viz") or {})
        colors = Colors(**(viz_cfg.pop("colors", None) or {}))
        if "size_px" in viz_cfg:
            viz_cfg["size_px"] = tuple(viz_cfg["size_px"])
        return cls(
            maze=MazeConfig(**maze_cfg),
            viz=VizConfig(colors=colors, **viz_cfg),
        )
