"""Unsupported-Feature Counter — which matrix features a runtime version lacks.

Invariants:
    - unsupported_features is PURE: same (name, version) → same frozenset
    - Runtime missing from a feature row → feature unsupported (never verified)
    - Unparseable version → empty set (unknown client assumed fully capable)
    - baseline_table() is built once per process and never mutated
    - Baselines treat the spec level itself as the "ES" pseudo-runtime, so
      empty-mapping features count against every level uniformly

Design Decisions:
    - lru_cache as the one-time initialization barrier for the baseline table,
      same pattern as get_settings(); a racing first call recomputes the same
      immutable tuple, so no lock is needed
    - Return a set, not a count: the HTTP layer reports the feature names
"""

from functools import lru_cache

from esm_target.core.domain_types import (
    BaselineEntry, ES_LEVELS, TargetLabel, VersionTriplet,
)
from esm_target.core.feature_matrix import ES_RUNTIME, JS_FEATURES, minimum_version
from esm_target.core.version_compare import compare_triplets, parse_version_triplet


def unsupported_features(name: str, version: str | None) -> frozenset[str]:
    """Features in the matrix that runtime `name` at `version` does not satisfy."""
    parsed = parse_version_triplet(version)
    if parsed is None:
        return frozenset()
    return _unsupported_at(name, parsed)


def _unsupported_at(name: str, version: VersionTriplet) -> frozenset[str]:
    unsupported = set()
    for feature in JS_FEATURES:
        minimum = minimum_version(feature, name)
        if minimum is None or compare_triplets(minimum, version) > 0:
            unsupported.add(feature)
    return frozenset(unsupported)


def es_level_unsupported(target: TargetLabel) -> frozenset[str]:
    """Features that postdate spec level `target` (e.g. es2020 lacks ClassField)."""
    year = int(target.value[2:])
    return _unsupported_at(ES_RUNTIME, VersionTriplet((year, 0, 0)))


@lru_cache
def baseline_table() -> tuple[BaselineEntry, ...]:
    """Baseline counts for es2022 down to es2016, highest level first."""
    return tuple(
        BaselineEntry(target=level, unsupported_count=len(es_level_unsupported(level)))
        for level in ES_LEVELS
    )
