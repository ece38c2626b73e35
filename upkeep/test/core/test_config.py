from __future__ import annotations

from pathlib import Path

import pytest

from upkeep.core.config import CommandsConfig, Config, ConfigError, ForkConfig, load_config


def test_defaults_match_the_plain_script() -> None:
    cfg = Config()
    assert cfg.fork == ForkConfig(path="twitch-irc_local", package="twitch-irc")
    assert cfg.commands.toolchain == ("rustup", "update")
    assert cfg.commands.dependencies == ("cargo", "update")
    assert cfg.commands.search == ("cargo", "search")


def test_load_overrides_and_keeps_missing_defaults(tmp_path: Path) -> None:
    path = tmp_path / "upkeep.toml"
    path.write_text(
        '[fork]\npath = "vendor/serde"\npackage = "serde"\n\n'
        '[commands]\ntoolchain = ["rustup", "update", "stable"]\n',
        encoding="utf-8",
    )

    cfg = load_config(path)

    assert cfg.fork == ForkConfig(path="vendor/serde", package="serde")
    assert cfg.commands == CommandsConfig(toolchain=("rustup", "update", "stable"))


def test_empty_file_is_all_defaults(tmp_path: Path) -> None:
    path = tmp_path / "upkeep.toml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == Config()


def test_invalid_toml_raises(tmp_path: Path) -> None:
    path = tmp_path / "upkeep.toml"
    path.write_text("[fork\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid TOML"):
        load_config(path)


@pytest.mark.parametrize(
    "body",
    [
        'fork = "x"\n',
        "[fork]\npackage = 3\n",
        '[fork]\npath = ""\n',
        "[commands]\nsearch = []\n",
        '[commands]\ndependencies = "cargo update"\n',
        '[commands]\ntoolchain = ["rustup", 1]\n',
    ],
)
def test_invalid_values_raise(tmp_path: Path, body: str) -> None:
    path = tmp_path / "upkeep.toml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)
