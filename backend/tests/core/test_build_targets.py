"""Build target helper tests — server targets, transpile levels, conditions, paths.

Tests:
    - Server / Deno target classification
    - Server targets transpile to esnext, ES targets to themselves
    - Export condition priority per target (dev, custom, dedup)
    - Artifact paths carry the target segment and naming suffixes
    - Invalid build inputs raise InvalidBuildRequestError
"""

import pytest

from esm_target.core.build_targets import (
    build_module_path, export_conditions, is_deno_target,
    is_server_target, transpile_level,
)
from esm_target.core.domain_types import TargetLabel
from esm_target.core.errors import InvalidBuildRequestError
from esm_target.core.resolve_target import find_target_segment


def test_server_and_deno_targets():
    assert {t for t in TargetLabel if is_server_target(t)} == {
        TargetLabel.DENO, TargetLabel.DENONEXT, TargetLabel.NODE,
    }
    assert {t for t in TargetLabel if is_deno_target(t)} == {
        TargetLabel.DENO, TargetLabel.DENONEXT,
    }


def test_transpile_level():
    assert transpile_level(TargetLabel.ES2019) == "es2019"
    assert transpile_level(TargetLabel.ESNEXT) == "esnext"
    assert transpile_level(TargetLabel.NODE) == "esnext"
    assert transpile_level(TargetLabel.DENO) == "esnext"


# --- Export conditions --------------------------------------------------------

def test_browser_conditions():
    assert export_conditions(TargetLabel.ES2020) == [
        "browser", "module", "import", "es2015",
    ]


def test_deno_conditions_fall_back_to_browser():
    assert export_conditions(TargetLabel.DENONEXT) == [
        "deno", "worker", "module", "import", "es2015", "browser",
    ]


def test_node_conditions():
    assert export_conditions(TargetLabel.NODE)[0] == "node"
    assert "browser" not in export_conditions(TargetLabel.NODE)


def test_dev_and_custom_conditions_take_priority():
    assert export_conditions(
        TargetLabel.ES2022, dev=True, custom=["react-server", "browser"],
    ) == ["react-server", "browser", "development", "module", "import", "es2015"]


# --- Artifact paths -----------------------------------------------------------

def test_build_module_path_main_entry():
    assert build_module_path(135, "react", "18.2.0", TargetLabel.ES2020) == (
        "/v135/react@18.2.0/es2020/react.mjs"
    )


def test_build_module_path_scoped_submodule_dev_bundle():
    path = build_module_path(
        135, "@sinclair/typebox", "0.28.5", TargetLabel.DENO,
        submodule="value", dev=True, bundle=True,
    )
    assert path == "/v135/@sinclair/typebox@0.28.5/deno/value.development.bundle.js"


def test_build_module_path_strips_js_suffix_from_name():
    assert build_module_path(1, "highlight.js", "11.0.0", TargetLabel.ESNEXT) == (
        "/v1/highlight.js@11.0.0/esnext/highlight.mjs"
    )


@pytest.mark.parametrize("submodule", ["", "/", "//"])
def test_blank_submodule_means_entry_point(submodule):
    assert build_module_path(
        135, "react", "18.2.0", TargetLabel.ES2020, submodule=submodule,
    ) == "/v135/react@18.2.0/es2020/react.mjs"


@pytest.mark.parametrize("target", list(TargetLabel))
def test_build_module_path_is_recognized_as_pinned(target):
    path = build_module_path(135, "preact", "10.19.3", target)
    assert find_target_segment(path) == target


def test_build_module_path_rejects_bad_input():
    with pytest.raises(InvalidBuildRequestError) as exc_info:
        build_module_path(0, "react", "18.2.0", TargetLabel.ES2020)
    assert exc_info.value.field == "build_version"
    assert exc_info.value.http_status == 400
    with pytest.raises(InvalidBuildRequestError):
        build_module_path(135, "", "18.2.0", TargetLabel.ES2020)
