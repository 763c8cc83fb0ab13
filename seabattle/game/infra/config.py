"""Application configuration and env loading."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

from seabattle.game.core.settings import GameConfig

_INT_FIELDS: dict[str, str] = {
    "SEABATTLE_BOARD_SIZE": "board_size",
    "SEABATTLE_NUM_SHIPS": "num_ships",
    "SEABATTLE_SHIP_LENGTH": "ship_length",
    "SEABATTLE_MISS_STREAK": "miss_streak_threshold",
    "SEABATTLE_MAX_SHIP_ATTEMPTS": "max_ship_attempts",
    "SEABATTLE_MAX_LAYOUT_ATTEMPTS": "max_layout_attempts",
}


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files with optional local overrides.

    Later files win. Default order:
    1) appdata/config/.env
    2) appdata/config/.env.local
    3) .env
    4) .env.local
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env",
            "appdata/config/.env.local",
            ".env",
            ".env.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_game_config(environ: Mapping[str, str] | None = None) -> GameConfig:
    """Build the game configuration from SEABATTLE_* variables."""
    env = os.environ if environ is None else environ
    overrides: dict[str, int] = {}
    for var_name, field_name in _INT_FIELDS.items():
        raw = env.get(var_name, "").strip()
        if not raw:
            continue
        try:
            overrides[field_name] = int(raw)
        except ValueError as exc:
            raise ValueError(f"{var_name} must be an integer, got {raw!r}.") from exc
    return GameConfig(**overrides)


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, frozen exe dir, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate

    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            frozen_dir_candidate = Path(executable).resolve().parent / path
            if frozen_dir_candidate.exists():
                return frozen_dir_candidate

    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[3]
    return project_root / path
