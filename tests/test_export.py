import numpy as np

from kmaze import generate
from kmaze.export import to_ascii, to_wall_grid


def test_corridor_ascii() -> None:
    maze = generate(1, 5, rng=0)
    assert to_ascii(maze) == "\n".join(["#" * 11, "#" + " " * 9 + "#", "#" * 11])


def test_wall_grid_counts() -> None:
    h, w = 6, 8
    maze = generate(h, w, rng=5)
    walls = to_wall_grid(maze)
    assert walls.shape == (2 * h + 1, 2 * w + 1)
    # Outer frame is solid
    assert walls[0, :].all() and walls[-1, :].all()
    assert walls[:, 0].all() and walls[:, -1].all()
    # Free squares: every cell plus one per carved passage
    assert int((~walls).sum()) == h * w + (h * w - 1)


def test_custom_characters() -> None:
    text = to_ascii(generate(2, 3, rng=1), wall="X", passage=".")
    rows = text.split("\n")
    assert len(rows) == 5
    assert all(len(r) == 7 for r in rows)
    assert set(text) <= {"X", ".", "\n"}
    assert np.array_equal(
        np.array([[c == "X" for c in r] for r in rows]),
        to_wall_grid(generate(2, 3, rng=1)),
    )
