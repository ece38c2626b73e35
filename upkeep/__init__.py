"""upkeep - Rust project maintenance (toolchain, lockfile, fork drift)."""

__version__ = "0.1.0"
