"""Fork drift comparison.

Versions are compared as opaque strings, without semver ordering:
"1.2.3" and "1.2.30" are simply different.
"""

from __future__ import annotations

from enum import Enum

__all__ = ["VersionStatus", "compare_versions"]


class VersionStatus(Enum):
    UP_TO_DATE = "up_to_date"
    UPDATE_AVAILABLE = "update_available"
    UNKNOWN = "unknown"  # latest version could not be determined


def compare_versions(local: str, latest: str) -> VersionStatus:
    if not latest:
        return VersionStatus.UNKNOWN
    if local == latest:
        return VersionStatus.UP_TO_DATE
    return VersionStatus.UPDATE_AVAILABLE
