"""Headless renderer smoke test to validate basic frame generation."""

import pytest

from kmaze import Direction, generate
from kmaze.config import VizConfig


def _renderer(size=(100, 100), margin=2.0):
    try:
        from kmaze.viz import Renderer
    except Exception:
        pytest.skip("pygame not available")
    return Renderer(VizConfig(size_px=size, margin_px=margin, fps=5), display=False)


def test_headless_renderer_smoke():
    rend = _renderer()
    maze = generate(4, 4, rng=0)
    frame = rend.render_frame(maze)
    assert frame.get_width() == 100 and frame.get_height() == 100
    passage = rend.colors.passage
    background = rend.colors.background
    # Cell (0, 0) spans pixels 2..23; the strip to (1, 0) is around x=25
    assert tuple(frame.get_at((12, 12)))[:3] == passage
    wall_px = tuple(frame.get_at((25, 12)))[:3]
    if maze.is_open(0, 0, Direction.E):
        assert wall_px == passage
    else:
        assert wall_px == background
    # Top-left corner is always outside every cell
    assert tuple(frame.get_at((0, 0)))[:3] == background
    rend.close()


def test_window_too_small_rejected():
    rend = _renderer(size=(20, 20), margin=2.0)
    with pytest.raises(ValueError):
        rend.render_frame(generate(10, 10, rng=0))
    rend.close()


@pytest.mark.parametrize("size,shape,seed", [((100, 100), (4, 4), 0), ((97, 131), (7, 5), 3)])
def test_open_passages_have_no_seams(size, shape, seed):
    rend = _renderer(size=size, margin=2.0)
    maze = generate(*shape, rng=seed)
    frame = rend.render_frame(maze)
    passage = rend.colors.passage
    for x, y, dirs in maze.cells():
        a = rend.cell_rect(x, y, maze)
        if Direction.E in dirs:
            b = rend.cell_rect(x + 1, y, maze)
            row = a.top + a.height // 2
            for px in range(a.left, b.right):
                assert tuple(frame.get_at((px, row)))[:3] == passage, (x, y, px)
        if Direction.S in dirs:
            b = rend.cell_rect(x, y + 1, maze)
            col = a.left + a.width // 2
            for py in range(a.top, b.bottom):
                assert tuple(frame.get_at((col, py)))[:3] == passage, (x, y, py)
    rend.close()
