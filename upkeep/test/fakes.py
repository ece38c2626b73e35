from __future__ import annotations

import subprocess
from pathlib import Path


class RecordingRunner:
    """CommandRunner fake: records argv and replies per executable name.

    `replies` maps a command prefix (joined with spaces, e.g. "cargo search")
    to `(returncode, stdout, stderr)`. The longest matching prefix wins;
    unmatched commands succeed with empty output.
    """

    def __init__(self, replies: dict[str, tuple[int, str, str]] | None = None) -> None:
        self.calls: list[list[str]] = []
        self.captured: list[bool] = []
        self._replies = replies or {}

    def run(
        self, args: list[str], *, capture: bool = True, cwd: Path | None = None
    ) -> subprocess.CompletedProcess[str]:
        self.calls.append(args)
        self.captured.append(capture)
        joined = " ".join(args)
        best: tuple[int, str, str] = (0, "", "")
        best_len = -1
        for prefix, reply in self._replies.items():
            if (joined == prefix or joined.startswith(prefix + " ")) and len(prefix) > best_len:
                best, best_len = reply, len(prefix)
        returncode, stdout, stderr = best
        return subprocess.CompletedProcess(args, returncode, stdout, stderr)


def write_fork(
    root: Path, version_line: str = 'version = "5.0.1"', path: str = "twitch-irc_local"
) -> Path:
    manifest = root / path / "Cargo.toml"
    manifest.parent.mkdir(parents=True, exist_ok=True)
    manifest.write_text(
        "[package]\n"
        'name = "twitch-irc"\n'
        f"{version_line}\n"
        'edition = "2021"\n'
        "\n"
        "[dependencies]\n"
        'tokio = { version = "1", features = ["full"] }\n',
        encoding="utf-8",
    )
    return manifest


SEARCH_OUTPUT = (
    'twitch-irc = "5.0.1"    # Connect to Twitch chat from a Rust application.\n'
    'twitch-irc-ext = "0.2.0"    # Extensions for twitch-irc\n'
    "... and 4 crates more (use --limit N to see more)\n"
)
