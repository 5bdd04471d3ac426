"""Target Schemas — Pydantic response models for the target endpoints.

Invariants:
    - target is always one of the 12 TargetLabel values
    - source tells the caller which rule decided the target
    - unsupported_features is sorted for stable responses (cache friendly)

Design Decisions:
    - Literal type for source over str enum: Pydantic handles validation natively
"""

from typing import Literal

from pydantic import BaseModel, Field

from esm_target.core.domain_types import TargetLabel

TargetSource = Literal["query", "path", "user_agent"]


class RuntimeInfo(BaseModel):
    """Runtime identity recovered from the client's User-Agent."""
    name: str | None = None
    version: str | None = None


class TargetResolutionResponse(BaseModel):
    """Resolved build target and how it was derived."""
    target: TargetLabel
    source: TargetSource
    runtime: RuntimeInfo = Field(default_factory=RuntimeInfo)
    unsupported_count: int = Field(0, ge=0)
    unsupported_features: list[str] = Field(default_factory=list)
    transpile_level: str
    server_target: bool
    export_conditions: list[str]
    module_path: str | None = None


class BaselineResponse(BaseModel):
    """One row of the baseline table."""
    target: TargetLabel
    unsupported_count: int = Field(ge=0)


class TargetListResponse(BaseModel):
    """All known targets plus the ES-level baselines browsers are compared against."""
    targets: list[TargetLabel]
    baselines: list[BaselineResponse]
