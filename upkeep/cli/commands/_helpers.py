from __future__ import annotations

from typing import NoReturn, Protocol, TypeVar

import typer

from upkeep.cli.context import CLIContext
from upkeep.core.errors import ErrorCode
from upkeep.core.result import Err, Ok, Result
from upkeep.output.console import Style

T = TypeVar("T")


class _ErrorLike(Protocol):
    @property
    def message(self) -> str: ...

    @property
    def hint(self) -> str | None: ...


def fail(ctx: CLIContext, error: _ErrorLike, *, error_code: ErrorCode) -> NoReturn:
    ctx.console.error(error.message)
    if error.hint:
        ctx.console.print(f"hint: {error.hint}", Style.DIM)
    raise typer.Exit(code=int(error_code))


def exit_on_error(
    result: Result[T, _ErrorLike], ctx: CLIContext, *, error_code: ErrorCode
) -> T:
    match result:
        case Ok(value):
            return value
        case Err(e):
            fail(ctx, e, error_code=error_code)
