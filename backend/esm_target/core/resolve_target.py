"""Target Resolution — client identity string to build-target label.

Invariants:
    - resolve_target always returns a TargetLabel, never raises
    - Rule order is fixed, first match wins:
        1. absent or curl/            → esnext
        2. Deno/ below 1.33.2         → deno, otherwise denonext
        3. Node/ or Bun/              → node
        4. unrecognized browser       → esnext
        5. highest ES level whose baseline count >= client's unsupported count
        6. nothing qualifies          → es2015 (floor, never refused)
    - Path detection requires at least two segments

Design Decisions:
    - Coarse label over per-feature decisions: cheap per request and usable as
      a cache key; exact down-leveling belongs to the bundler
    - Fail-open to esnext for unidentified clients (tooling, bots, new
      browsers); see DESIGN.md for the compatibility trade-off
"""

import logging
from dataclasses import dataclass, field

from esm_target.core.detect_runtime import detect_runtime
from esm_target.core.domain_types import (
    FAIL_OPEN_TARGET, FLOOR_TARGET, RuntimeIdentity, TargetLabel, parse_target,
)
from esm_target.core.unsupported_features import baseline_table, unsupported_features
from esm_target.core.version_compare import is_semver_less

logger = logging.getLogger(__name__)

DENO_NEXT_MIN_VERSION = "1.33.2"

_TOOLING_PREFIXES = ("curl/",)
_DENO_PREFIX = "Deno/"
_NODE_PREFIXES = ("Node/", "Bun/")


@dataclass(frozen=True)
class TargetResolution:
    """Resolved target plus the evidence it was derived from."""
    target: TargetLabel
    runtime: RuntimeIdentity = field(default_factory=RuntimeIdentity)
    unsupported: frozenset[str] = frozenset()


def resolve_target(user_agent: str | None) -> TargetLabel:
    """Newest target the client identified by `user_agent` can safely load."""
    return explain_target(user_agent).target


def explain_target(user_agent: str | None) -> TargetResolution:
    """Resolve a target and keep the detected runtime + unsupported features."""
    if not user_agent or user_agent.startswith(_TOOLING_PREFIXES):
        return TargetResolution(target=FAIL_OPEN_TARGET)

    if user_agent.startswith(_DENO_PREFIX):
        version = user_agent[len(_DENO_PREFIX):]
        target = (
            TargetLabel.DENO
            if is_semver_less(version, DENO_NEXT_MIN_VERSION)
            else TargetLabel.DENONEXT
        )
        return TargetResolution(
            target=target, runtime=RuntimeIdentity(name="Deno", version=version),
        )

    if user_agent.startswith(_NODE_PREFIXES):
        name, _, version = user_agent.partition("/")
        return TargetResolution(
            target=TargetLabel.NODE,
            runtime=RuntimeIdentity(name=name, version=version or None),
        )

    runtime = detect_runtime(user_agent)
    if not runtime.is_known:
        logger.debug("Unrecognized user agent, failing open: %s", user_agent)
        return TargetResolution(target=FAIL_OPEN_TARGET, runtime=runtime)

    unsupported = unsupported_features(runtime.name, runtime.version)
    return TargetResolution(
        target=_select_es_level(len(unsupported)),
        runtime=runtime,
        unsupported=unsupported,
    )


def _select_es_level(unsupported_count: int) -> TargetLabel:
    """Highest spec level the client is at least as capable as."""
    for entry in baseline_table():
        if unsupported_count <= entry.unsupported_count:
            return entry.target
    return FLOOR_TARGET


# ─── Path Target Detection ──────────────────────────────────────

def find_target_segment(path: str) -> TargetLabel | None:
    """First target label pinned as a segment of `path`, if any."""
    parts = path[1:].split("/")
    if len(parts) < 2:
        return None
    for part in parts:
        target = parse_target(part)
        if target is not None:
            return target
    return None


def has_target_segment(path: str) -> bool:
    """True when `path` (e.g. /v135/react@18.2.0/es2020/react.mjs) pins a target."""
    return find_target_segment(path) is not None
