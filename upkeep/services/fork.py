# SPDX-License-Identifier: MIT
"""Fork drift check.

Compares the version in a locally vendored fork's Cargo.toml with the latest
version of the upstream crate on crates.io (via `cargo search`).

Failure policy:
- fork manifest missing or unreadable: error (the run fails)
- no `version =` line in the manifest: local version is "" (not an error)
- latest version not found in search output: warning, comparison skipped
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from upkeep.core.manifest import read_local_version
from upkeep.core.registry import parse_latest_version
from upkeep.core.result import Err, Ok, Result
from upkeep.core.versions import VersionStatus, compare_versions
from upkeep.output.console import Style
from upkeep.platform.process import first_line
from upkeep.services.base import BaseService

__all__ = ["ForkError", "ForkReport", "ForkService"]


@dataclass(frozen=True, slots=True)
class ForkError:
    """Error from the fork drift check."""

    kind: Literal["manifest_missing", "manifest_unreadable"]
    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class ForkReport:
    package: str
    local_version: str
    latest_version: str
    status: VersionStatus


class ForkService(BaseService):
    def check(self) -> Result[ForkReport, ForkError]:
        fork = self._config.fork
        manifest = self._workspace.fork_manifest(fork)
        display_path = f"{fork.path}/Cargo.toml"

        if not manifest.is_file():
            return Err(
                ForkError(
                    kind="manifest_missing",
                    message=f"Error: Could not find local fork's config at '{display_path}'.",
                    hint=f"clone the fork into {fork.path}/ or set [fork].path in the config file",
                )
            )

        try:
            local = read_local_version(manifest)
        except OSError as e:
            return Err(
                ForkError(
                    kind="manifest_unreadable",
                    message=f"Error: Could not read '{display_path}': {e}",
                )
            )

        latest = self._latest_version(fork.package)
        status = compare_versions(local, latest)
        report = ForkReport(
            package=fork.package,
            local_version=local,
            latest_version=latest,
            status=status,
        )
        self._print_report(report)
        return Ok(report)

    def _latest_version(self, package: str) -> str:
        argv = [*self._config.commands.search, package]
        self._echo(argv)
        proc = self._runner.run(argv, capture=True, cwd=self._workspace.root)
        if proc.returncode != 0:
            stderr = first_line(proc.stderr or "")
            if stderr:
                self._console.print(stderr, Style.DIM)
        return parse_latest_version(proc.stdout or "", package)

    def _print_report(self, report: ForkReport) -> None:
        name = report.package
        if report.status is VersionStatus.UNKNOWN:
            self._console.warning(
                f"Warning: Could not determine the latest version of '{name}' from crates.io."
            )
            return

        self._console.print(f"Your local '{name}' version: {report.local_version}")
        self._console.print(f"Latest '{name}' on crates.io: {report.latest_version}")

        if report.status is VersionStatus.UP_TO_DATE:
            self._console.success("Your local fork is up-to-date with the official release.")
        else:
            self._console.warning(
                f"A new version of '{name}' is available! You may want to update your fork."
            )
