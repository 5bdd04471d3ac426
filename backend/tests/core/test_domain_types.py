"""Domain Types — verifies the closed target set and value types.

Tests:
    - TargetLabel has exactly 12 members and serializes to its label
    - ES_LEVELS is strictly descending and excludes es2015/esnext
    - parse_target accepts only exact labels
"""

from esm_target.core.domain_types import (
    ES_LEVELS, FAIL_OPEN_TARGET, FLOOR_TARGET, TARGET_LABELS,
    BaselineEntry, RuntimeIdentity, TargetLabel, parse_target,
)


def test_target_label_is_closed_set_of_twelve():
    assert len(TargetLabel) == 12
    assert TARGET_LABELS == {
        "es2015", "es2016", "es2017", "es2018", "es2019", "es2020",
        "es2021", "es2022", "esnext", "deno", "denonext", "node",
    }


def test_target_label_compares_to_raw_string():
    assert TargetLabel.ES2020 == "es2020"
    assert TargetLabel.DENONEXT.value == "denonext"


def test_es_levels_descending():
    years = [int(t.value[2:]) for t in ES_LEVELS]
    assert years == sorted(years, reverse=True)
    assert years[0] == 2022 and years[-1] == 2016


def test_defaults():
    assert FLOOR_TARGET == TargetLabel.ES2015
    assert FAIL_OPEN_TARGET == TargetLabel.ESNEXT


def test_parse_target():
    assert parse_target("node") == TargetLabel.NODE
    assert parse_target("es5") is None
    assert parse_target("ES2020") is None
    assert parse_target(None) is None


def test_runtime_identity_known_requires_both_fields():
    assert RuntimeIdentity("Chrome", "91").is_known
    assert not RuntimeIdentity("Chrome", None).is_known
    assert not RuntimeIdentity(None, "91").is_known


def test_baseline_entry_year():
    assert BaselineEntry(TargetLabel.ES2019, 27).year == 2019
