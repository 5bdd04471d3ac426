"""Feature matrix tests — shape and immutability of the compat table.

Tests:
    - Every entry is a non-negative (major, minor, patch) triplet
    - Empty-mapping features exist and resolve to the "never supported" sentinel
    - Table cannot be mutated at runtime
"""

import pytest

from esm_target.core.feature_matrix import (
    ES_RUNTIME, JS_FEATURES, known_runtimes, minimum_version,
)


def test_matrix_has_all_features():
    assert len(JS_FEATURES) == 54
    assert "AsyncAwait" in JS_FEATURES
    assert "ClassPrivateField" in JS_FEATURES


def test_every_version_is_a_non_negative_triplet():
    for feature, runtimes in JS_FEATURES.items():
        for runtime, version in runtimes.items():
            assert len(version) == 3, (feature, runtime)
            assert all(isinstance(c, int) and c >= 0 for c in version)


def test_empty_mapping_features_are_never_supported():
    for feature in ("Decorators", "InlineScript", "RegexpSetNotation"):
        assert JS_FEATURES[feature] == {}
        assert minimum_version(feature, "Chrome") is None
        assert minimum_version(feature, ES_RUNTIME) is None


def test_minimum_version_lookup():
    assert minimum_version("AsyncAwait", "Chrome") == (55, 0, 0)
    assert minimum_version("AsyncAwait", "Node") == (7, 6, 0)
    assert minimum_version("Bigint", "Rhino") == (1, 7, 14)
    assert minimum_version("AsyncAwait", "Netscape") is None
    assert minimum_version("NoSuchFeature", "Chrome") is None


def test_known_runtimes():
    assert known_runtimes() == {
        "Chrome", "Deno", "Edge", "ES", "Firefox", "Hermes", "IE",
        "IOS", "Node", "Opera", "Rhino", "Safari",
    }


def test_matrix_is_read_only():
    with pytest.raises(TypeError):
        JS_FEATURES["AsyncAwait"] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        JS_FEATURES["AsyncAwait"]["Chrome"] = (1, 0, 0)  # type: ignore[index]
