from __future__ import annotations

import pytest

from upkeep.core.versions import VersionStatus, compare_versions


@pytest.mark.parametrize(
    ("local", "latest", "expected"),
    [
        ("1.2.3", "1.2.3", VersionStatus.UP_TO_DATE),
        ("1.2.3", "1.3.0", VersionStatus.UPDATE_AVAILABLE),
        ("1.2.3", "1.2.30", VersionStatus.UPDATE_AVAILABLE),
        ("1.3.0", "1.2.3", VersionStatus.UPDATE_AVAILABLE),
        ("", "1.2.3", VersionStatus.UPDATE_AVAILABLE),
        ("1.2.3", "", VersionStatus.UNKNOWN),
    ],
)
def test_compare_is_plain_string_equality(local: str, latest: str, expected: VersionStatus) -> None:
    assert compare_versions(local, latest) is expected
