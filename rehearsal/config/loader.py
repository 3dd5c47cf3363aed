"""Layered TOML configuration: ``default.toml`` then ``{REHEARSAL_ENV}.toml``."""

import os
import tomllib
from pathlib import Path
from typing import Any

# Checkout root, used when the process is not started from it
_PROJECT_CONFIG = Path(__file__).resolve().parents[2] / "config"


def get_config_dir() -> Path:
    """Directory holding the TOML files.

    REHEARSAL_CONFIG_DIR wins and must exist. Otherwise ``./config`` is
    used when present, falling back to the checkout's ``config/``.
    """
    override = os.environ.get("REHEARSAL_CONFIG_DIR")
    if override:
        path = Path(override)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return path

    local = Path.cwd() / "config"
    return local if local.is_dir() else _PROJECT_CONFIG


def get_environment() -> str:
    return os.environ.get("REHEARSAL_ENV", "development")


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: The file does not exist
        tomllib.TOMLDecodeError: The file is not valid TOML
    """
    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``; tables merge recursively."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config() -> dict[str, Any]:
    """Read ``default.toml`` and overlay the optional environment file.

    Raises:
        FileNotFoundError: ``default.toml`` is missing
    """
    config_dir = get_config_dir()

    default_path = config_dir / "default.toml"
    if not default_path.is_file():
        raise FileNotFoundError(
            f"Missing {default_path}; set REHEARSAL_CONFIG_DIR to the directory "
            "holding default.toml"
        )
    config = load_toml(default_path)

    env_path = config_dir / f"{get_environment()}.toml"
    if env_path.is_file():
        config = deep_merge(config, load_toml(env_path))
    return config
