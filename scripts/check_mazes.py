from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from kmaze import generate
from kmaze.constants import MERGE_STRATEGIES
from kmaze.utils import MazeInvariantError, check_maze


def main():
    parser = argparse.ArgumentParser(
        description="Smoke test: seeded mazes must be perfect and strategies must agree"
    )
    parser.add_argument("--n", type=int, default=200)
    parser.add_argument("--max-size", type=int, default=12)
    parser.add_argument("--seed", type=int, default=1234)
    args = parser.parse_args()

    rng = np.random.default_rng(int(args.seed))
    failures = 0
    for k in range(int(args.n)):
        h = int(rng.integers(1, args.max_size + 1))
        w = int(rng.integers(1, args.max_size + 1))
        sd = int(rng.integers(0, 2**32 - 1))
        mazes = [generate(h, w, rng=sd, merge=m) for m in MERGE_STRATEGIES]
        try:
            for maze in mazes:
                check_maze(maze)
            if any(m != mazes[0] for m in mazes[1:]):
                raise MazeInvariantError("merge strategies disagree")
        except MazeInvariantError as exc:
            failures += 1
            print(f"[CHECK] FAIL k={k} size={h}x{w} seed={sd}: {exc}")

    print("[CHECK] N=", int(args.n))
    print("[CHECK] failures=", failures)
    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
