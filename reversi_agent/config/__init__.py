from __future__ import annotations

import logging
import os
import pathlib
from dataclasses import dataclass
from typing import Any, Dict, Optional

import tomli

from ..engine.search import BudgetTable

CONFIG_HOME = pathlib.Path(os.path.expanduser("~/.reversi_agent"))
CONFIG_PATH = CONFIG_HOME / "config.toml"
DEFAULTS_PATH = pathlib.Path(__file__).resolve().parent / "defaults.toml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Configuration file is unreadable or holds an invalid value."""


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_file: Optional[str]
    minimax_depth: int
    budgets: BudgetTable


def ensure_config() -> bool:
    """Create the user config from the packaged defaults; True if created."""
    CONFIG_HOME.mkdir(parents=True, exist_ok=True)
    if not CONFIG_PATH.exists():
        CONFIG_PATH.write_text(DEFAULTS_PATH.read_text(encoding="utf-8"), encoding="utf-8")
        logging.getLogger(__name__).info("Wrote default configuration to %s", CONFIG_PATH)
        return True
    return False


def _read_toml(path: pathlib.Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomli.load(f)
    except tomli.TOMLDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def load_config(path: Optional[pathlib.Path] = None) -> Dict[str, Any]:
    """Packaged defaults overlaid with `path` (or the user config if present)."""
    cfg = _read_toml(DEFAULTS_PATH)
    if path is None:
        path = CONFIG_PATH if CONFIG_PATH.exists() else None
    elif not path.exists():
        raise ConfigError(f"config file not found: {path}")
    if path is not None:
        cfg = _merge(cfg, _read_toml(path))
    return cfg


def _positive_int(section: Dict[str, Any], key: str) -> int:
    value = section.get(key)
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise ConfigError(f"{key} must be a positive integer, got {value!r}")
    return value


def settings_from_config(cfg: Dict[str, Any]) -> Settings:
    log_cfg = cfg.get("logging", {}) or {}
    engine_cfg = cfg.get("engine", {}) or {}
    budget_cfg = engine_cfg.get("budgets", {}) or {}

    level = str(log_cfg.get("level", "INFO")).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"unknown log level {level!r}")

    budgets = BudgetTable(
        shallow=_positive_int(budget_cfg, "shallow"),
        mid=_positive_int(budget_cfg, "mid"),
        deep=_positive_int(budget_cfg, "deep"),
        cap=_positive_int(engine_cfg, "node_budget_cap"),
    )
    return Settings(
        log_level=level,
        log_file=log_cfg.get("file") or None,
        minimax_depth=_positive_int(engine_cfg, "minimax_depth"),
        budgets=budgets,
    )


def load_settings(path: Optional[pathlib.Path] = None) -> Settings:
    return settings_from_config(load_config(path))
