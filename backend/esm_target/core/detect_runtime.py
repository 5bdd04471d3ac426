"""Runtime Detection — deterministic User-Agent to (runtime, version) mapping.

Invariants:
    - Always returns a RuntimeIdentity (never None, never raises)
    - Chrome/ and HeadlessChrome/ tokens short-circuit the generic parser
    - Unknown browsers yield RuntimeIdentity(None, None) — caller fails open
    - Returned names are always feature-matrix runtime names; any other family
      (CLI tools, HTTP libraries, bots) is unknown and fails open

Design Decisions:
    - Token scan before ua-parser: Chromium UAs are the bulk of traffic and the
      regex-heavy generic parser is the slow path
    - HeadlessChrome reports as Chrome: identical engine capabilities
    - Edge/Opera on Chromium carry a Chrome/ token and resolve as Chrome
    - ua-parser failures degrade to unknown (same policy as an unmatched UA)
"""

import logging

from ua_parser import parse_user_agent

from esm_target.core.domain_types import RuntimeIdentity
from esm_target.core.feature_matrix import ES_RUNTIME, known_runtimes

logger = logging.getLogger(__name__)

_TOKEN_PREFIXES: tuple[tuple[str, str], ...] = (
    ("Chrome/", "Chrome"),
    ("HeadlessChrome/", "Chrome"),
)

# ua-parser family -> feature-matrix runtime name
_FAMILY_ALIASES: dict[str, str] = {
    "Mobile Safari": "IOS",
    "Firefox Mobile": "Firefox",
    "Chrome Mobile": "Chrome",
    "Chromium": "Chrome",
}

# "ES" is the spec-level pseudo-runtime, never a client
_CLIENT_RUNTIMES = known_runtimes() - {ES_RUNTIME}


def detect_runtime(user_agent: str | None) -> RuntimeIdentity:
    """Extract the browser runtime and version from a User-Agent header."""
    if not user_agent:
        return RuntimeIdentity()

    for token in user_agent.split(" "):
        for prefix, name in _TOKEN_PREFIXES:
            if token.startswith(prefix):
                return RuntimeIdentity(name=name, version=token[len(prefix):])

    return _parse_generic(user_agent)


def _parse_generic(user_agent: str) -> RuntimeIdentity:
    """Fallback through ua-parser for non-Chromium browsers."""
    try:
        parsed = parse_user_agent(user_agent)
    except Exception:
        logger.warning("ua-parser failed, treating client as unknown", exc_info=True)
        return RuntimeIdentity()

    if parsed is None or not parsed.family:
        return RuntimeIdentity()

    name = _FAMILY_ALIASES.get(parsed.family, parsed.family)
    if name not in _CLIENT_RUNTIMES:
        logger.debug("Non-browser family %s, treating client as unknown", parsed.family)
        return RuntimeIdentity()

    return RuntimeIdentity(name=name, version=_join_version(
        parsed.major, parsed.minor, parsed.patch,
    ))


def _join_version(*components: str | None) -> str | None:
    """Join dotted components up to the first missing one."""
    parts: list[str] = []
    for component in components:
        if not component:
            break
        parts.append(component)
    return ".".join(parts) or None
