"""Target Routes — resolve which build variant a client should be served.

Invariants:
    - Precedence: explicit ?target= → target pinned in ?path= → User-Agent header
    - Unknown explicit target → 400 INVALID_TARGET (never silently ignored)
    - Resolution from the header sets Vary: User-Agent
    - Routes contain no resolution logic (delegate to core/)

Design Decisions:
    - GET with query params: the resolver is a pure lookup, safe to cache
    - module_path only when both package and version are supplied
"""

import logging

from fastapi import APIRouter, Header, Query, Response

from esm_target.config import get_settings
from esm_target.core.build_targets import (
    build_module_path, export_conditions, is_server_target, transpile_level,
)
from esm_target.core.domain_types import TargetLabel, parse_target
from esm_target.core.errors import ErrorContext, InvalidTargetError
from esm_target.core.resolve_target import (
    TargetResolution, explain_target, find_target_segment,
)
from esm_target.core.unsupported_features import baseline_table
from esm_target.schemas.target import (
    BaselineResponse, RuntimeInfo, TargetListResponse,
    TargetResolutionResponse, TargetSource,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/targets", tags=["targets"])


@router.get("/", response_model=TargetListResponse)
async def list_targets():
    """All target labels and the ES baselines used for browser clients."""
    return TargetListResponse(
        targets=list(TargetLabel),
        baselines=[
            BaselineResponse(target=e.target, unsupported_count=e.unsupported_count)
            for e in baseline_table()
        ],
    )


@router.get("/resolve", response_model=TargetResolutionResponse)
async def resolve(
    response: Response,
    target: str | None = Query(None, max_length=32),
    path: str | None = Query(None, max_length=2048),
    package: str | None = Query(None, max_length=214),
    version: str | None = Query(None, max_length=128),
    submodule: str | None = Query(None, max_length=512),
    dev: bool | None = None,
    bundle: bool = False,
    conditions: list[str] = Query([]),
    user_agent: str | None = Header(None),
):
    """Resolve the build target for this request."""
    settings = get_settings()
    resolution, source = _resolve_with_precedence(target, path, user_agent)
    if source == "user_agent":
        response.headers["Vary"] = "User-Agent"

    is_dev = settings.dev_mode if dev is None else dev
    module_path = None
    if package and version:
        module_path = build_module_path(
            settings.build_version, package, version, resolution.target,
            submodule=submodule, dev=is_dev, bundle=bundle,
        )

    logger.info(
        "Resolved target",
        extra={
            "target": resolution.target.value,
            "source": source,
            "runtime": resolution.runtime.name,
        },
    )
    return TargetResolutionResponse(
        target=resolution.target,
        source=source,
        runtime=RuntimeInfo(
            name=resolution.runtime.name, version=resolution.runtime.version,
        ),
        unsupported_count=len(resolution.unsupported),
        unsupported_features=sorted(resolution.unsupported),
        transpile_level=transpile_level(resolution.target),
        server_target=is_server_target(resolution.target),
        export_conditions=export_conditions(
            resolution.target, dev=is_dev, custom=conditions,
        ),
        module_path=module_path,
    )


def _resolve_with_precedence(
    target: str | None, path: str | None, user_agent: str | None,
) -> tuple[TargetResolution, TargetSource]:
    """Explicit query target, then pinned path segment, then User-Agent."""
    if target is not None:
        pinned = parse_target(target)
        if pinned is None:
            raise InvalidTargetError(target, ErrorContext(path=path, user_agent=user_agent))
        return TargetResolution(target=pinned), "query"

    if path:
        pinned = find_target_segment(path)
        if pinned is not None:
            return TargetResolution(target=pinned), "path"

    return explain_target(user_agent), "user_agent"
