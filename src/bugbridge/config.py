"""TOML configuration loader."""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from bugbridge.errors import ConfigError

SYSTEM_CONFIG_PATH = Path("/etc/bugbridge/config.toml")


class BridgeConfig(BaseModel):
    """How to find and call the ohmybug CLI."""

    binary_name: str = Field(
        default="ohmybug",
        description="Bare command name, resolved through PATH as the last candidate",
    )
    home_relative_path: str = Field(
        default="bin/ohmybug",
        description="Candidate path relative to the user's home directory",
    )
    system_paths: list[str] = Field(
        default_factory=lambda: [
            "/usr/local/bin/ohmybug",
            "/opt/homebrew/bin/ohmybug",
        ],
        description="Fixed install locations, probed in order",
    )
    version_flag: str = Field(default="--version", description="Health-check flag")
    subcommand: str = Field(default="check", description="Scan subcommand")
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds before a spawned process is killed (None waits forever)",
    )
    log_level: str | None = Field(default=None, description="Logging level override")

    def with_overrides(self, **overrides: object) -> BridgeConfig:
        """Copy with ``overrides`` applied and validated; None values are ignored."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return BridgeConfig.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(_describe(exc)) from exc


def home_dir() -> Path | None:
    """The user's home directory, or None when it can't be determined."""
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def default_config_paths() -> list[Path]:
    paths = [Path("bugbridge.toml")]
    home = home_dir()
    if home is not None:
        paths.append(home / ".config" / "bugbridge" / "config.toml")
    paths.append(SYSTEM_CONFIG_PATH)
    return paths


def load_config(config_path: Path | None = None) -> BridgeConfig:
    """Load config from TOML file, falling back to defaults.

    An explicit ``config_path`` must exist; the default locations are optional.
    """
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
        return _parse_toml(config_path)

    for path in default_config_paths():
        if path.is_file():
            return _parse_toml(path)

    return BridgeConfig()


def _parse_toml(path: Path) -> BridgeConfig:
    try:
        data = tomllib.loads(path.read_text())
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc

    try:
        return BridgeConfig.model_validate(data.get("bridge", {}))
    except ValidationError as exc:
        raise ConfigError(f"{path}: {_describe(exc)}") from exc


def _describe(exc: ValidationError) -> str:
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
        for err in exc.errors()
    )
    return f"Invalid configuration: {problems}"
