"""Centralized runtime configuration for mensura.

:func:`get_settings` returns the display and logging preferences used by the
CLI. Values come from ``MENSURA_*`` environment variables, or from a TOML/YAML
document referenced by ``MENSURA_CONFIG_FILE``; environment variables take
precedence over the file.
"""
from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

__all__ = ["Settings", "get_settings", "reset_settings"]

_CONFIG_CACHE: Optional["Settings"] = None
_CONFIG_SOURCE: Optional[Path] = None

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Resolved configuration values."""

    log_path: Optional[Path] = None
    log_level: str = "INFO"
    description_format: bool = False
    best_measure: bool = True

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    def as_dict(self) -> Dict[str, Any]:
        """Expose the settings as JSON-friendly values."""

        return {
            "log_path": str(self.log_path) if self.log_path else None,
            "log_level": self.log_level,
            "description_format": self.description_format,
            "best_measure": self.best_measure,
        }


def _load_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file '{path}' does not exist")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
            return loaded or {}
    raise ValueError(f"Unsupported config file format: '{suffix}'")


def _coalesce_mapping(source: Any) -> Mapping[str, Any]:
    if not isinstance(source, Mapping):
        return {}
    return source


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value!r}")


def _parse_level(value: Any) -> str:
    level = str(value).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def _normalize_path(value: Any, *, base: Optional[Path]) -> Optional[Path]:
    if value is None or value == "":
        return None
    candidate = Path(value).expanduser()
    if not candidate.is_absolute() and base is not None:
        candidate = base / candidate
    return candidate.resolve()


def _build_settings(config_file: Optional[Path]) -> Settings:
    config_data: Mapping[str, Any] = {}
    config_dir: Optional[Path] = None
    if config_file is not None:
        config_file = config_file.expanduser().resolve()
        config_data = _load_config_file(config_file)
        config_dir = config_file.parent

    logging_section = _coalesce_mapping(config_data.get("logging"))
    display_section = _coalesce_mapping(config_data.get("display"))
    env = os.environ

    log_path = _normalize_path(env.get("MENSURA_LOG_PATH") or logging_section.get("path"), base=config_dir)
    log_level = _parse_level(env.get("MENSURA_LOG_LEVEL") or logging_section.get("level") or "INFO")

    description = env.get("MENSURA_DESCRIPTION", display_section.get("description", False))
    best = env.get("MENSURA_BEST", display_section.get("best", True))

    return Settings(
        log_path=log_path,
        log_level=log_level,
        description_format=_parse_bool("description", description),
        best_measure=_parse_bool("best", best),
    )


def get_settings(*, refresh: bool = False, config_file: str | Path | None = None) -> Settings:
    """Return the cached :class:`Settings`.

    Parameters
    ----------
    refresh:
        When ``True`` the cached configuration is discarded and recomputed.
    config_file:
        Optional explicit configuration document. Settings built from it are
        not cached, so callers (e.g. tests) can override values temporarily.
    """

    global _CONFIG_CACHE, _CONFIG_SOURCE

    if config_file is not None:
        return _build_settings(Path(config_file))

    env_path = os.getenv("MENSURA_CONFIG_FILE")
    source_path = Path(env_path).expanduser() if env_path else None

    if refresh or _CONFIG_CACHE is None or _CONFIG_SOURCE != source_path:
        _CONFIG_CACHE = _build_settings(source_path)
        _CONFIG_SOURCE = source_path

    return _CONFIG_CACHE


def reset_settings() -> None:
    """Clear the cached configuration (mainly useful for tests)."""

    global _CONFIG_CACHE, _CONFIG_SOURCE
    _CONFIG_CACHE = None
    _CONFIG_SOURCE = None
