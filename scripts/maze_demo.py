#!/usr/bin/env python3
"""
Generate one maze and show it until the window is closed.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from kmaze import generate
from kmaze.config import AppConfig
from kmaze.constants import MERGE_STRATEGIES
from kmaze.export import to_ascii
from kmaze.utils import apply_overrides, load_config_dict, set_section_values


def main() -> None:
    parser = argparse.ArgumentParser(description="Random perfect maze (Kruskal)")
    parser.add_argument(
        "--config",
        type=str,
        default=str(project_root / "configs" / "maze.yaml"),
        help="YAML config with maze.* and viz.* sections",
    )
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--merge", choices=MERGE_STRATEGIES, default=None)
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Print the maze as text instead of opening a window",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Render one frame off-screen and exit",
    )
    parser.add_argument(
        "--snapshot",
        type=str,
        default=None,
        help="Save the rendered frame to this image path",
    )
    parser.add_argument(
        "--set",
        nargs="*",
        default=[],
        metavar="KEY=VALUE",
        help="Dotlist config overrides, e.g. viz.margin_px=4",
    )
    args = parser.parse_args()

    if Path(args.config).is_file():
        cfg_dict = load_config_dict(args.config)
    else:
        print(f"[WARN] Config not found at {args.config}; using defaults")
        cfg_dict = {}
    cfg_dict = apply_overrides(cfg_dict, args.set)
    cfg_dict = set_section_values(
        cfg_dict,
        "maze",
        {key: getattr(args, key) for key in ("height", "width", "seed", "merge")},
    )
    cfg = AppConfig.from_dict(cfg_dict)

    t0 = time.perf_counter()
    maze = generate(
        cfg.maze.height, cfg.maze.width, rng=cfg.maze.seed, merge=cfg.maze.merge
    )
    dt = time.perf_counter() - t0
    print(
        f"[INFO] Generated {maze.height}x{maze.width} maze "
        f"({maze.num_carved_edges} passages, merge={cfg.maze.merge}) in {dt:.3f}s"
    )

    if args.ascii:
        print(to_ascii(maze))
        return

    from kmaze.viz import Renderer
    import pygame

    renderer = Renderer(cfg.viz, display=not args.headless)
    try:
        frame = renderer.render_frame(maze)
        if args.snapshot:
            pygame.image.save(frame, args.snapshot)
            print(f"[INFO] Snapshot saved to {args.snapshot}")
        if args.headless:
            return
        while renderer.poll_events():
            renderer.render_frame(maze)
    finally:
        renderer.close()


if __name__ == "__main__":
    main()
