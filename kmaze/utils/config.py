"""YAML config loading for the maze scripts, built around OmegaConf."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from omegaconf import OmegaConf


def load_config_any(path: str) -> Any:
    """Load a YAML file with interpolations resolved into plain Python objects."""
    return OmegaConf.to_container(OmegaConf.load(path), resolve=True)


def load_config_dict(path: str) -> Dict[str, Any]:
    cfg = load_config_any(path)
    if not isinstance(cfg, dict):
        raise TypeError(f"Expected mapping at {path}, got {type(cfg)}")
    return cfg


def apply_overrides(
    cfg: Optional[Dict[str, Any]], overrides: Optional[List[str]]
) -> Dict[str, Any]:
    """Merge dotlist overrides such as ``maze.height=20`` into a config dict."""
    base = OmegaConf.create(cfg or {})
    if overrides:
        base = OmegaConf.merge(base, OmegaConf.from_dotlist(list(overrides)))
    out = OmegaConf.to_container(base, resolve=True)
    if not isinstance(out, dict):
        raise TypeError(f"Expected mapping after overrides, got {type(out)}")
    return out


def set_section_values(
    cfg: Dict[str, Any], section: str, values: Dict[str, Any]
) -> Dict[str, Any]:
    """Write non-None ``values`` into ``cfg[section]``.

    A missing or null section (``maze: null`` in YAML) starts out empty.
    """
    updates = {k: v for k, v in values.items() if v is not None}
    if updates:
        merged = dict(cfg.get(section) or {})
        merged.update(updates)
        cfg[section] = merged
    return cfg
