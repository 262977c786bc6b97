"""Load and expose table column configuration from YAML (with fallbacks)."""

from __future__ import annotations

from pathlib import Path

import yaml

from .config import COLLAB_TABLE_COLUMNS, METRIC_TABLE_COLUMNS, TICKET_TABLE_COLUMNS

_CACHE: dict[str, list[str]] | None = None


def _defaults() -> dict[str, list[str]]:
    return {
        "tickets": list(TICKET_TABLE_COLUMNS),
        "collaboration": list(COLLAB_TABLE_COLUMNS),
        "metrics": list(METRIC_TABLE_COLUMNS),
    }


def load_column_sets(base_path: str | Path | None = None, *, refresh: bool = False):
    global _CACHE
    if _CACHE is not None and not refresh:
        return _CACHE
    base = Path(base_path or Path(__file__).resolve().parent.parent)
    yaml_path = base / "columns.yaml"
    if not yaml_path.exists():
        _CACHE = _defaults()
        return _CACHE
    try:
        data = yaml.safe_load(yaml_path.read_text(encoding="utf-8")) or {}
        sets = data.get("sets", {})
        defaults = _defaults()
        _CACHE = {name: list(sets.get(name) or cols) for name, cols in defaults.items()}
        return _CACHE
    except (OSError, yaml.YAMLError, AttributeError, TypeError):
        _CACHE = _defaults()
        return _CACHE


def get_columns(set_name: str) -> list[str]:
    sets = load_column_sets()
    return sets.get(set_name, [])
