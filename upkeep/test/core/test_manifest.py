from __future__ import annotations

from pathlib import Path

import pytest

from upkeep.core.manifest import parse_local_version, read_local_version


def test_extracts_quoted_version() -> None:
    assert parse_local_version('version = "1.2.3"\n') == "1.2.3"


def test_first_version_line_wins() -> None:
    text = '[package]\nname = "x"\nversion = "0.9.0"\n\n[workspace.package]\nversion = "9.9.9"\n'
    assert parse_local_version(text) == "0.9.0"


def test_indented_and_dependency_versions_are_ignored() -> None:
    text = '[dependencies]\nserde = { version = "1.0" }\n  version = "3.0.0"\n'
    assert parse_local_version(text) == ""


def test_missing_version_line_yields_empty() -> None:
    assert parse_local_version('[package]\nname = "x"\n') == ""


def test_trailing_comment_is_not_part_of_value() -> None:
    assert parse_local_version('version = "2.0.0-rc.1" # pre-release\n') == "2.0.0-rc.1"


def test_unquoted_value_yields_empty() -> None:
    assert parse_local_version("version = 3\n") == ""


def test_read_local_version_from_file(tmp_path: Path) -> None:
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text('[package]\nname = "x"\nversion = "4.1.0"\n', encoding="utf-8")
    assert read_local_version(manifest) == "4.1.0"


def test_read_local_version_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_local_version(tmp_path / "missing" / "Cargo.toml")
