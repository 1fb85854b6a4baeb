from pathlib import Path

import pytest

from kmaze.config import AppConfig, MazeConfig
from kmaze.utils import apply_overrides, load_config_dict, set_section_values

CONFIG_PATH = Path(__file__).resolve().parent.parent / "configs" / "maze.yaml"


def test_default_yaml_parses() -> None:
    cfg = AppConfig.from_dict(load_config_dict(str(CONFIG_PATH)))
    assert cfg.maze.height == 100 and cfg.maze.width == 100
    assert cfg.maze.seed is None
    assert cfg.maze.merge == "relabel"
    assert cfg.viz.size_px == (800, 800)
    assert cfg.viz.colors.background == (0, 0, 0)


def test_overrides_merge() -> None:
    d = apply_overrides(
        load_config_dict(str(CONFIG_PATH)),
        ["maze.height=20", "maze.merge=union_find", "viz.margin_px=4"],
    )
    cfg = AppConfig.from_dict(d)
    assert cfg.maze.height == 20
    assert cfg.maze.width == 100
    assert cfg.maze.merge == "union_find"
    assert cfg.viz.margin_px == 4


def test_empty_dict_gives_defaults() -> None:
    cfg = AppConfig.from_dict(None)
    assert cfg.maze == MazeConfig()


def test_invalid_values_rejected() -> None:
    with pytest.raises(AssertionError):
        MazeConfig(height=0)
    with pytest.raises(AssertionError):
        MazeConfig(merge="quick")
    with pytest.raises(AssertionError):
        AppConfig.from_dict({"viz": {"colors": {"passage": [300, 0, 0]}}})


def test_non_mapping_yaml_rejected(tmp_path) -> None:
    p = tmp_path / "list.yaml"
    p.write_text("- 1\n- 2\n")
    with pytest.raises(TypeError):
        load_config_dict(str(p))


def test_null_section_takes_cli_values(tmp_path) -> None:
    p = tmp_path / "null_maze.yaml"
    p.write_text("maze: null\n")
    d = set_section_values(
        load_config_dict(str(p)), "maze", {"height": 12, "width": None}
    )
    cfg = AppConfig.from_dict(d)
    assert cfg.maze.height == 12
    assert cfg.maze.width == MazeConfig().width


def test_section_values_keep_existing_keys() -> None:
    d = set_section_values({"maze": {"width": 7, "merge": "union_find"}}, "maze", {"width": 9})
    assert d["maze"] == {"width": 9, "merge": "union_find"}
    assert set_section_values({}, "maze", {"seed": None}) == {}


def test_empty_yaml_loads_as_empty_mapping(tmp_path) -> None:
    p = tmp_path / "empty.yaml"
    p.write_text("")
    assert load_config_dict(str(p)) == {}
