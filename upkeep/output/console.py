"""Console output.

Services talk to a `ConsoleProtocol` rather than printing directly, so tests
can swap in `MockConsole` and assert on what the user would have seen.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Protocol

from rich.console import Console
from rich.markup import escape

__all__ = ["ConsoleProtocol", "MockConsole", "RichConsole", "Style"]


class Style(Enum):
    DEFAULT = auto()
    DIM = auto()
    INFO = auto()
    SUCCESS = auto()
    WARNING = auto()
    ERROR = auto()
    HEADER = auto()


_RICH_STYLES: dict[Style, str | None] = {
    Style.DEFAULT: None,
    Style.DIM: "dim",
    Style.INFO: "cyan",
    Style.SUCCESS: "green",
    Style.WARNING: "yellow",
    Style.ERROR: "red",
    Style.HEADER: "bold yellow",
}


class ConsoleProtocol(Protocol):
    def print(self, message: str, style: Style = Style.DEFAULT) -> None: ...

    def header(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def newline(self) -> None: ...


class RichConsole:
    """ConsoleProtocol backed by rich."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False, soft_wrap=True)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        # Messages contain command lines and paths; never interpret them as markup.
        self._console.print(escape(message), style=_RICH_STYLES[style])

    def header(self, message: str) -> None:
        self.print(message, Style.HEADER)

    def success(self, message: str) -> None:
        self.print(message, Style.SUCCESS)

    def warning(self, message: str) -> None:
        self.print(message, Style.WARNING)

    def error(self, message: str) -> None:
        self.print(message, Style.ERROR)

    def newline(self) -> None:
        self._console.print()


class MockConsole:
    """Records output for tests."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, Style]] = []

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.messages.append((message, style))

    def header(self, message: str) -> None:
        self.print(message, Style.HEADER)

    def success(self, message: str) -> None:
        self.print(message, Style.SUCCESS)

    def warning(self, message: str) -> None:
        self.print(message, Style.WARNING)

    def error(self, message: str) -> None:
        self.print(message, Style.ERROR)

    def newline(self) -> None:
        self.print("")

    @property
    def text(self) -> str:
        return "\n".join(message for message, _ in self.messages)

    def lines_with(self, style: Style) -> list[str]:
        return [message for message, s in self.messages if s is style]
