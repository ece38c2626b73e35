"""Latest published version, scraped from `cargo search` output.

`cargo search <name>` prints one crate per line:

    twitch-irc = "5.0.1"    # Connect to Twitch chat from a Rust application.
    twitch-irc-foo = "0.1.0"    # ...
    ... and 3 crates more (use --limit N to see more)
"""

from __future__ import annotations

__all__ = ["parse_latest_version"]


def parse_latest_version(output: str, package: str) -> str:
    """Return the version of `package` from search output, or "" if absent.

    The value is the third whitespace-separated token of the first line that
    starts with `<package> =`, with quote characters removed.
    """
    prefix = f"{package} ="
    for line in output.splitlines():
        if not line.startswith(prefix):
            continue
        tokens = line.split()
        if len(tokens) < 3:
            return ""
        return tokens[2].replace('"', "")
    return ""
