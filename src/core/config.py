"""Core configuration.

Why here:
- Centralises environment variables (pydantic-settings) without leaking
  them into the CLI.
- Lets the launcher and the doctor read the same settings consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.errors import ConfigError

APP_DIR_NAME = "azureauth-cli"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Write/update variables in the per-user .env file.

    Existing keys not present in `values` are kept; a `None` value removes the key.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    for key, value in values.items():
        if value is None:
            existing.pop(key, None)
        else:
            existing[key] = value

    lines = ["# azureauth-cli user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars, .env files).
    - A single configuration contract for the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="AZUREAUTH_CLI_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the per-user config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    helper_executable: str = Field(
        default="azureauth",
        min_length=1,
        description="Name or path of the authentication helper executable.",
    )
    helper_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        allow_inf_nan=False,
        description="Kill the helper if it runs longer than this (seconds). None waits forever.",
    )
    wait_for_helper: bool = Field(
        default=True,
        description="Wait for the helper to exit before returning.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Logging level name (DEBUG, INFO, WARNING, ...).",
    )


def load_settings() -> AppSettings:
    """Build `AppSettings`, turning validation errors into a `ConfigError`."""

    try:
        return AppSettings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigError(f"invalid configuration ({problems})") from exc
