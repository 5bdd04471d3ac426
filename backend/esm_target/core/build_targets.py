"""Build Targets — what a resolved target means to the build pipeline.

Invariants:
    - All functions are PURE: no IO, no filesystem, no bundler calls
    - Server targets (deno, denonext, node) always transpile to esnext
    - build_module_path output always contains the target as its own segment,
      so has_target_segment() recognizes it on the way back in

Design Decisions:
    - Condition order mirrors Node's package "exports" resolution: the first
      condition present in the package wins, so priority is list order
    - Deno targets fall back to "browser" after the generic conditions:
      Deno runs browser-flavoured builds when no deno/worker export exists
"""

from collections.abc import Iterable

from esm_target.core.domain_types import TargetLabel
from esm_target.core.errors import InvalidBuildRequestError

_SERVER_TARGETS = frozenset({TargetLabel.DENO, TargetLabel.DENONEXT, TargetLabel.NODE})
_DENO_TARGETS = frozenset({TargetLabel.DENO, TargetLabel.DENONEXT})

_MODULE_CONDITIONS = ("module", "import", "es2015")


def is_server_target(target: TargetLabel) -> bool:
    return target in _SERVER_TARGETS


def is_deno_target(target: TargetLabel) -> bool:
    return target in _DENO_TARGETS


def transpile_level(target: TargetLabel) -> str:
    """Syntax level handed to the bundler for `target`."""
    if is_server_target(target):
        return TargetLabel.ESNEXT.value
    return target.value


def export_conditions(
    target: TargetLabel, *, dev: bool = False, custom: Iterable[str] = (),
) -> list[str]:
    """Ordered package.json "exports" conditions to try for `target`."""
    if is_deno_target(target):
        target_conditions = ["deno", "worker"]
    elif target == TargetLabel.NODE:
        target_conditions = ["node"]
    else:
        target_conditions = ["browser"]
    if dev:
        target_conditions.append("development")

    conditions = [*custom, *target_conditions, *_MODULE_CONDITIONS]
    if is_deno_target(target):
        conditions.append("browser")

    # custom conditions may repeat built-in ones; keep first occurrence
    return list(dict.fromkeys(conditions))


def build_module_path(
    build_version: int,
    package: str,
    version: str,
    target: TargetLabel,
    *,
    submodule: str | None = None,
    dev: bool = False,
    bundle: bool = False,
) -> str:
    """Artifact path, e.g. /v135/react@18.2.0/es2020/react.mjs."""
    if build_version < 1:
        raise InvalidBuildRequestError(
            f"Build version must be positive, got {build_version}", "build_version",
        )
    if not package or not version:
        raise InvalidBuildRequestError(
            "Package name and version are required", "package",
        )

    # "" and "/" both mean the package entry point
    name = submodule.strip("/") if submodule else ""
    if name:
        extname = ".js"
    else:
        name = package.rsplit("/", 1)[-1].removesuffix(".js")
        extname = ".mjs"
    if dev:
        name += ".development"
    if bundle:
        name += ".bundle"

    return f"/v{build_version}/{package}@{version}/{target.value}/{name}{extname}"
