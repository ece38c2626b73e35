"""Optional `upkeep.toml` configuration.

Every field has a default, so running without a config file behaves exactly
like the plain maintenance script: `rustup update`, `cargo update`, then a
`cargo search twitch-irc` drift check against `twitch-irc_local/Cargo.toml`.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

__all__ = [
    "CONFIG_FILENAME",
    "CommandsConfig",
    "Config",
    "ConfigError",
    "ForkConfig",
    "load_config",
]


CONFIG_FILENAME = "upkeep.toml"


class ConfigError(Exception):
    """Raised when the config file cannot be read or has invalid values."""


@dataclass(frozen=True, slots=True)
class ForkConfig:
    path: str = "twitch-irc_local"
    package: str = "twitch-irc"


@dataclass(frozen=True, slots=True)
class CommandsConfig:
    toolchain: tuple[str, ...] = ("rustup", "update")
    dependencies: tuple[str, ...] = ("cargo", "update")
    search: tuple[str, ...] = ("cargo", "search")


@dataclass(frozen=True, slots=True)
class Config:
    fork: ForkConfig = field(default_factory=ForkConfig)
    commands: CommandsConfig = field(default_factory=CommandsConfig)


def load_config(path: Path) -> Config:
    """Load and validate a config file. Missing sections keep their defaults."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML in {path}: {e}") from e

    fork_raw = _section(data, "fork")
    commands_raw = _section(data, "commands")

    defaults_fork = ForkConfig()
    defaults_cmds = CommandsConfig()

    fork = ForkConfig(
        path=_string(fork_raw, "fork.path", defaults_fork.path),
        package=_string(fork_raw, "fork.package", defaults_fork.package),
    )
    commands = CommandsConfig(
        toolchain=_argv(commands_raw, "commands.toolchain", defaults_cmds.toolchain),
        dependencies=_argv(commands_raw, "commands.dependencies", defaults_cmds.dependencies),
        search=_argv(commands_raw, "commands.search", defaults_cmds.search),
    )
    return Config(fork=fork, commands=commands)


def _section(data: dict[str, object], name: str) -> dict[str, object]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table")
    return {str(k): v for k, v in value.items()}


def _string(section: dict[str, object], dotted: str, default: str) -> str:
    value = section.get(dotted.rsplit(".", 1)[1], default)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{dotted} must be a non-empty string")
    return value


def _argv(
    section: dict[str, object], dotted: str, default: tuple[str, ...]
) -> tuple[str, ...]:
    value = section.get(dotted.rsplit(".", 1)[1], default)
    if isinstance(value, tuple):
        return value
    if not isinstance(value, list) or not value:
        raise ConfigError(f"{dotted} must be a non-empty list of strings")
    argv: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item:
            raise ConfigError(f"{dotted} must be a non-empty list of strings")
        argv.append(item)
    return tuple(argv)
