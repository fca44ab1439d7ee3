from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from platformdirs import PlatformDirs

from .rand import MIN_SEED

APP_NAME = "parkmiller"
CONFIG_NAME = "parkmiller.toml"
STATE_NAME = "state.json"

DRAW_KINDS: tuple[str, ...] = ("raw", "uniform", "int", "float", "bool", "bounded")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class DrawConfig:
    seed: int = MIN_SEED
    count: int = 10
    kind: str = "raw"
    low: float = 1.0
    high: float = 6.0


def _dirs() -> PlatformDirs:
    return PlatformDirs(appname=APP_NAME, appauthor=False)


def default_state_path() -> Path:
    return Path(_dirs().user_state_path) / STATE_NAME


def _coerce(name: str, expected: type, value: Any) -> Any:
    # bool is an int subclass; reject it for numeric keys.
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ConfigError(f"[draw].{name} has unsupported value {value!r}")
    if expected is int:
        if not isinstance(value, int):
            raise ConfigError(f"[draw].{name} must be an integer, got {value!r}")
        return value
    if expected is float:
        if isinstance(value, str):
            raise ConfigError(f"[draw].{name} must be a number, got {value!r}")
        return float(value)
    if not isinstance(value, str):
        raise ConfigError(f"[draw].{name} must be a string, got {value!r}")
    return value


_FIELD_TYPES: dict[str, type] = {"seed": int, "count": int, "kind": str, "low": float, "high": float}


def parse_config(data: dict[str, Any]) -> DrawConfig:
    table = data.get("draw", {})
    if not isinstance(table, dict):
        raise ConfigError("[draw] must be a table")
    known = {f.name for f in fields(DrawConfig)}
    unknown = sorted(set(table) - known)
    if unknown:
        raise ConfigError(f"unknown [draw] keys: {', '.join(unknown)}")
    values = {name: _coerce(name, _FIELD_TYPES[name], value) for name, value in table.items()}
    config = replace(DrawConfig(), **values)
    if config.kind not in DRAW_KINDS:
        raise ConfigError(f"[draw].kind must be one of {', '.join(DRAW_KINDS)}, got {config.kind!r}")
    if config.count < 0:
        raise ConfigError(f"[draw].count must be non-negative, got {config.count}")
    return config


def load_config(path: Path | None = None) -> DrawConfig:
    """Read `[draw]` defaults from a TOML file; a missing file yields the built-in defaults."""
    if path is None:
        path = Path(CONFIG_NAME)
    if not path.is_file():
        return DrawConfig()
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid config {path}: {exc}") from exc
    return parse_config(data)
