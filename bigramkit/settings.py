#!/usr/bin/env python3
"""Settings loader for bigramkit."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional
import os

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"
CONFIG_ENV_VAR = "BIGRAMKIT_CONFIG"


def config_path() -> Path:
    """Active config file: $BIGRAMKIT_CONFIG if set, else the bundled app.yaml."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(os.path.expanduser(override))
    return APP_CONFIG_PATH


def load_app_config(path: Path | None = None) -> dict:
    """Load the YAML config at ``path`` (default: the active config file)."""
    return _load_config(Path(path) if path is not None else config_path())


@lru_cache(maxsize=8)
def _load_config(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Missing app config: {path}")
    data = yaml.safe_load(path.read_text())
    return data or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    data = load_app_config()
    current: Any = data
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Resolve a path string relative to the package root (unless absolute)."""
    if value is None:
        raise ValueError("path value is required")
    expanded = os.path.expanduser(str(value))
    path = Path(expanded)
    if not path.is_absolute():
        base = base or PACKAGE_ROOT
        path = (base / path).resolve()
    return path


@dataclass
class ModelSettings:
    """Defaults for training, reporting and sampling. None means 'from config'."""
    smoothing: Optional[float] = None
    corpus_path: Optional[Path] = None
    keep_blank: Optional[bool] = None
    show: Optional[int] = None
    samples: Optional[int] = None
    seed: Optional[int] = None
    max_attempts_factor: Optional[int] = None

    def __post_init__(self):
        if self.smoothing is None:
            self.smoothing = get_setting("model.smoothing", 1.0)
        if self.corpus_path is None:
            self.corpus_path = resolve_path(get_setting("corpus.path", "data/names.txt"))
        else:
            self.corpus_path = Path(self.corpus_path)
        if self.keep_blank is None:
            self.keep_blank = get_setting("corpus.keep_blank", False)
        if self.show is None:
            self.show = get_setting("report.show", 5)
        if self.samples is None:
            self.samples = get_setting("report.samples", 5)
        if self.seed is None:
            self.seed = get_setting("sampling.seed")
        if self.max_attempts_factor is None:
            self.max_attempts_factor = get_setting("sampling.max_attempts_factor", 20)

        self.smoothing = float(self.smoothing)
        if self.smoothing < 0:
            raise ValueError(f"smoothing must be >= 0, got {self.smoothing}")


__all__ = [
    "load_app_config",
    "get_setting",
    "resolve_path",
    "config_path",
    "ModelSettings",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
    "CONFIG_ENV_VAR",
]
