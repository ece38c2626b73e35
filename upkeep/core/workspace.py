from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from upkeep.core.config import CONFIG_FILENAME, ForkConfig


@dataclass(frozen=True, slots=True)
class Workspace:
    """The Rust project being maintained.

    All relative paths and subprocess working directories resolve against
    `root`, which is the directory upkeep was started from.
    """

    root: Path

    @classmethod
    def from_cwd(cls) -> Workspace:
        return cls(root=Path.cwd())

    @property
    def config_path(self) -> Path:
        return self.root / CONFIG_FILENAME

    def fork_dir(self, fork: ForkConfig) -> Path:
        return self.root / fork.path

    def fork_manifest(self, fork: ForkConfig) -> Path:
        return self.fork_dir(fork) / "Cargo.toml"
