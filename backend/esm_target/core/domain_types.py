"""Domain Types — rich types that replace bare primitives across the resolver.

Invariants:
    - TargetLabel is a closed set of 12 labels, never extended at runtime
    - VersionTriplet is always (major, minor, patch), zero-padded
    - RuntimeIdentity and BaselineEntry are frozen — shared read-only across requests
    - ES_LEVELS is strictly descending (es2022 first, es2016 last)

Design Decisions:
    - str Enum for TargetLabel: serializes to JSON and compares equal to the raw
      label string, so path segments and query params match without conversion
    - NewType over a dataclass for VersionTriplet: tuples already order
      lexicographically, zero runtime cost
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

VersionTriplet = NewType("VersionTriplet", tuple[int, int, int])


# ─── Enums ───────────────────────────────────────────────────────

class TargetLabel(str, Enum):
    """Build variant served to a client — also used as a cache-partition key."""
    ES2015 = "es2015"
    ES2016 = "es2016"
    ES2017 = "es2017"
    ES2018 = "es2018"
    ES2019 = "es2019"
    ES2020 = "es2020"
    ES2021 = "es2021"
    ES2022 = "es2022"
    ESNEXT = "esnext"
    DENO = "deno"
    DENONEXT = "denonext"
    NODE = "node"


TARGET_LABELS: frozenset[str] = frozenset(t.value for t in TargetLabel)

# Candidate spec levels for browser clients, highest first
ES_LEVELS: tuple[TargetLabel, ...] = (
    TargetLabel.ES2022,
    TargetLabel.ES2021,
    TargetLabel.ES2020,
    TargetLabel.ES2019,
    TargetLabel.ES2018,
    TargetLabel.ES2017,
    TargetLabel.ES2016,
)

FLOOR_TARGET = TargetLabel.ES2015
FAIL_OPEN_TARGET = TargetLabel.ESNEXT


def parse_target(value: str | None) -> TargetLabel | None:
    """Map a raw label string to a TargetLabel, None if not a known label."""
    if value is None or value not in TARGET_LABELS:
        return None
    return TargetLabel(value)


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class RuntimeIdentity:
    """Runtime name + raw version string extracted from a client identity string.

    Either field may be None — that means "unknown, treat as fully capable".
    """
    name: str | None = None
    version: str | None = None

    @property
    def is_known(self) -> bool:
        return bool(self.name) and bool(self.version)


@dataclass(frozen=True)
class BaselineEntry:
    """Unsupported-feature count of the "ES" pseudo-runtime at one spec level."""
    target: TargetLabel
    unsupported_count: int

    @property
    def year(self) -> int:
        return int(self.target.value[2:])
