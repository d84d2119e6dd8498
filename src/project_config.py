"""Utility helpers for loading solver configuration.

Settings are layered: built-in defaults, then ``config.toml`` at the project
root (or the file named by ``NEWDOKU_CONFIG``), then ``NEWDOKU_*`` environment
variables, then explicit command line values.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]


_CONFIG_FILENAME = "config.toml"
_CONFIG_ENV = "NEWDOKU_CONFIG"
_ENV_PREFIX = "NEWDOKU_"


class ConfigError(RuntimeError):
    """Raised when an explicitly requested configuration cannot be loaded."""


@dataclass(frozen=True)
class SolverSettings:
    """Finalised solver settings after precedence resolution."""

    step_ms: int = 0
    quiet: bool = False
    iterative: bool = False
    strict: bool = False
    log_enabled: bool = False
    log_dir: str = "logs/solve"

    @property
    def solver_name(self) -> str:
        return "iterative" if self.iterative else "recursive"


_DEFAULTS = SolverSettings()


def _config_path() -> Path:
    return Path(__file__).resolve().parents[1] / _CONFIG_FILENAME


@lru_cache(maxsize=4)
def _load(path: str, required: bool) -> Dict[str, Any]:
    target = Path(path)
    try:
        with target.open("rb") as fh:
            return tomllib.load(fh)
    except FileNotFoundError as exc:
        if required:
            raise ConfigError(f"Configuration file '{target}' was not found") from exc
        return {}
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Configuration file '{target}' is not valid TOML: {exc}") from exc


def get_config(env: Mapping[str, str] | None = None) -> Dict[str, Any]:
    """Load and cache the project configuration as a dictionary."""

    source = os.environ if env is None else env
    explicit = source.get(_CONFIG_ENV)
    if explicit:
        return _load(str(Path(explicit).resolve()), True)
    return _load(str(_config_path()), False)


def reload() -> None:
    """Clear the cached configuration."""

    _load.cache_clear()


def get_section(path: str, default: Any = None, *, env: Mapping[str, str] | None = None) -> Any:
    """Retrieve a nested configuration value using dotted notation."""

    data: Any = get_config(env)
    for part in path.split("."):
        if isinstance(data, dict) and part in data:
            data = data[part]
        else:
            if default is not None:
                return default
            raise KeyError(f"Configuration path '{path}' not found")
    return data


def _coerce_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalised = value.strip().lower()
        if normalised in {"1", "true", "yes", "on"}:
            return True
        if normalised in {"0", "false", "no", "off"}:
            return False
    return None


def _coerce_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.strip():
            return int(value)
    except (TypeError, ValueError):
        return None
    return None


def _coerce_str(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


_COERCERS = {
    "step_ms": _coerce_int,
    "quiet": _coerce_bool,
    "iterative": _coerce_bool,
    "strict": _coerce_bool,
    "log_enabled": _coerce_bool,
    "log_dir": _coerce_str,
}


def _file_layer(config: Mapping[str, Any]) -> Dict[str, Any]:
    solver = config.get("solver")
    log = config.get("log")
    layer: Dict[str, Any] = {}
    if isinstance(solver, dict):
        for key in ("step_ms", "quiet", "iterative", "strict"):
            if key in solver:
                layer[key] = solver[key]
    if isinstance(log, dict):
        if "enabled" in log:
            layer["log_enabled"] = log["enabled"]
        if "dir" in log:
            layer["log_dir"] = log["dir"]
    return layer


def _env_layer(env: Mapping[str, str]) -> Dict[str, Any]:
    layer: Dict[str, Any] = {}
    for key in _COERCERS:
        value = env.get(_ENV_PREFIX + key.upper())
        if value is not None:
            layer[key] = value
    return layer


def resolve_settings(
    env: Mapping[str, str] | None = None,
    cli: Mapping[str, Any] | None = None,
) -> SolverSettings:
    """Merge defaults, TOML, environment and CLI values into settings.

    Values that fail to coerce are ignored so the lower layer wins. ``None``
    entries in ``cli`` mean the flag was not given.
    """

    source = os.environ if env is None else env
    resolved: Dict[str, Any] = {
        "step_ms": _DEFAULTS.step_ms,
        "quiet": _DEFAULTS.quiet,
        "iterative": _DEFAULTS.iterative,
        "strict": _DEFAULTS.strict,
        "log_enabled": _DEFAULTS.log_enabled,
        "log_dir": _DEFAULTS.log_dir,
    }
    layers = (_file_layer(get_config(source)), _env_layer(source), dict(cli or {}))
    for layer in layers:
        for key, raw in layer.items():
            coerce = _COERCERS.get(key)
            if coerce is None or raw is None:
                continue
            value = coerce(raw)
            if value is not None:
                resolved[key] = value

    resolved["step_ms"] = max(0, int(resolved["step_ms"]))
    return SolverSettings(**resolved)


__all__ = [
    "ConfigError",
    "SolverSettings",
    "get_config",
    "get_section",
    "reload",
    "resolve_settings",
]
