from __future__ import annotations

import pytest

from project_config import (
    ConfigError,
    SolverSettings,
    get_section,
    reload as reload_config,
    resolve_settings,
)


def setup_function():
    reload_config()


def _write_config(tmp_path, body: str) -> dict[str, str]:
    path = tmp_path / "newdoku.toml"
    path.write_text(body, encoding="utf-8")
    return {"NEWDOKU_CONFIG": str(path)}


def test_defaults_without_overrides(tmp_path) -> None:
    env = _write_config(tmp_path, "")
    settings = resolve_settings(env)

    assert settings == SolverSettings()
    assert settings.solver_name == "recursive"


def test_toml_overrides_defaults(tmp_path) -> None:
    env = _write_config(
        tmp_path,
        "[solver]\nstep_ms = 15\niterative = true\n\n[log]\nenabled = true\ndir = \"runs\"\n",
    )
    settings = resolve_settings(env)

    assert settings.step_ms == 15
    assert settings.iterative is True
    assert settings.solver_name == "iterative"
    assert settings.log_enabled is True
    assert settings.log_dir == "runs"


def test_environment_overrides_toml(tmp_path) -> None:
    env = _write_config(tmp_path, "[solver]\nstep_ms = 15\nquiet = false\n")
    env.update({"NEWDOKU_STEP_MS": "40", "NEWDOKU_QUIET": "yes"})
    settings = resolve_settings(env)

    assert settings.step_ms == 40
    assert settings.quiet is True


def test_cli_overrides_environment(tmp_path) -> None:
    env = _write_config(tmp_path, "")
    env.update({"NEWDOKU_STEP_MS": "40", "NEWDOKU_STRICT": "on"})
    settings = resolve_settings(env, {"step_ms": 5, "strict": None, "quiet": True})

    assert settings.step_ms == 5
    assert settings.strict is True
    assert settings.quiet is True


def test_unparseable_values_fall_back(tmp_path) -> None:
    env = _write_config(tmp_path, "[solver]\nstep_ms = 12\n")
    env.update({"NEWDOKU_STEP_MS": "soon", "NEWDOKU_QUIET": "maybe"})
    settings = resolve_settings(env)

    assert settings.step_ms == 12
    assert settings.quiet is False


def test_negative_step_is_clamped(tmp_path) -> None:
    env = _write_config(tmp_path, "")
    assert resolve_settings(env, {"step_ms": -10}).step_ms == 0


def test_missing_explicit_config_raises(tmp_path) -> None:
    with pytest.raises(ConfigError):
        resolve_settings({"NEWDOKU_CONFIG": str(tmp_path / "absent.toml")})


def test_malformed_config_raises(tmp_path) -> None:
    env = _write_config(tmp_path, "[solver\nstep_ms = ")
    with pytest.raises(ConfigError):
        resolve_settings(env)


def test_get_section_reads_dotted_paths(tmp_path) -> None:
    env = _write_config(tmp_path, "[log]\nmax_bytes = 2048\n")

    assert get_section("log.max_bytes", env=env) == 2048
    assert get_section("log.missing", 7, env=env) == 7
    with pytest.raises(KeyError):
        get_section("log.missing", env=env)
