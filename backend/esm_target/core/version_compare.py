"""Version Comparator — triplet ordering and semantic-version threshold checks.

Invariants:
    - All functions are PURE and never raise on malformed input
    - Missing components are 0: "91" == (91, 0, 0), "14.1" == (14, 1, 0)
    - A segment without leading digits invalidates the whole version (None)
    - Unparseable input is never "below" anything (fail-open)

Design Decisions:
    - Leading-digit parse per segment: browser versions carry build suffixes
      ("115.0a1", "16.5b") and still order by their numeric prefix
    - packaging.version for the Deno threshold: full semver precedence
      including pre-releases, no hand-rolled comparator
"""

import re

from packaging.version import InvalidVersion, Version

from esm_target.core.domain_types import VersionTriplet

_LEADING_DIGITS = re.compile(r"\d+")


def parse_version_triplet(version: str | None) -> VersionTriplet | None:
    """Parse "major[.minor[.patch[...]]]" into a zero-padded triplet.

    Only the first three segments are considered. Returns None when any of
    them has no leading integer.
    """
    if version is None:
        return None
    parts: list[int] = []
    for segment in version.split(".")[:3]:
        match = _LEADING_DIGITS.match(segment.strip())
        if match is None:
            return None
        parts.append(int(match.group()))
    while len(parts) < 3:
        parts.append(0)
    return VersionTriplet((parts[0], parts[1], parts[2]))


def compare_triplets(a: VersionTriplet, b: VersionTriplet) -> int:
    """-1 if a < b, 0 if equal, 1 if a > b (major, then minor, then patch)."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def is_semver_less(version: str, threshold: str) -> bool:
    """Semantic-version precedence check. Unparseable input → False."""
    try:
        return Version(version.strip()) < Version(threshold)
    except InvalidVersion:
        return False
