"""
Unit tests for the locale differ.
"""

import copy
import dataclasses

import pytest

from i18n_parity.parity.differ import DiffResult, compute_diff, coverage
from i18n_parity.parity.flatten import flatten


class TestComputeDiff:
    """Test classification of reference keys."""

    def test_detects_missing_keys(self):
        reference = {"a": "value1", "b": "value2", "c": {"nested": "value3"}}
        candidate = {"a": "valor1", "c": {"nested": "valor3"}}

        result = compute_diff(reference, candidate, "test")

        assert result.missing_keys == ("b",)
        assert result.empty_keys == ()
        assert result.extra_keys == ()

    def test_detects_empty_keys(self):
        result = compute_diff({"a": "value1", "b": "value2"}, {"a": "valor1", "b": ""}, "test")

        assert result.missing_keys == ()
        assert result.empty_keys == ("b",)

    def test_detects_extra_keys(self):
        reference = {"a": "value1"}
        candidate = {"a": "valor1", "b": "valor2", "c": {"nested": "valor3"}}

        result = compute_diff(reference, candidate, "test")

        assert result.missing_keys == ()
        assert result.empty_keys == ()
        assert result.extra_keys == ("b", "c.nested")

    def test_handles_nested_objects(self):
        reference = {"level1": {"level2": {"level3": "deep value"}}}
        candidate = {"level1": {"level2": {}}}

        result = compute_diff(reference, candidate, "test")

        assert result.missing_keys == ("level1.level2.level3",)

    def test_calculates_coverage(self):
        reference = {"a": "1", "b": "2", "c": "3", "d": "4"}
        candidate = {"a": "1", "b": "", "d": "4"}

        result = compute_diff(reference, candidate, "test")

        assert result.total_leaf_keys == 4
        assert result.present_leaf_keys == 2
        assert result.coverage_percent == 50.0
        assert result.missing_keys == ("c",)
        assert result.empty_keys == ("b",)

    def test_full_coverage(self):
        result = compute_diff({"a": "value1", "b": "value2"}, {"a": "valor1", "b": "valor2"}, "test")

        assert result.coverage_percent == 100
        assert result.is_complete

    def test_whitespace_only_is_empty(self):
        result = compute_diff({"a": "value"}, {"a": "   "}, "test")
        assert result.empty_keys == ("a",)
        assert result.missing_keys == ()

    def test_null_is_empty_not_missing(self):
        result = compute_diff({"a": "value"}, {"a": None}, "test")
        assert result.empty_keys == ("a",)
        assert result.missing_keys == ()

    def test_sets_locale(self):
        assert compute_diff({}, {}, "es-ES").locale == "es-ES"

    def test_empty_reference_has_full_coverage(self):
        result = compute_diff({}, {"a": "x"}, "test")

        assert result.total_leaf_keys == 0
        assert result.coverage_percent == 100.0
        assert result.extra_keys == ("a",)

    def test_non_string_values_are_present(self):
        result = compute_diff({"n": 1, "b": True, "l": ["x"]}, {"n": 0, "b": False, "l": []}, "test")

        assert result.missing_keys == ()
        assert result.empty_keys == ()
        assert result.present_leaf_keys == 3

    def test_scalar_where_reference_has_tree(self):
        # Path strings differ, so both sides count
        result = compute_diff({"menu": {"open": "Open"}}, {"menu": "Menu"}, "test")

        assert result.missing_keys == ("menu.open",)
        assert result.extra_keys == ("menu",)

    def test_tree_where_reference_has_scalar(self):
        # "menu" resolves to a tree, which is present and not empty
        result = compute_diff({"menu": "Menu"}, {"menu": {"open": "Open"}}, "test")

        assert result.missing_keys == ()
        assert result.empty_keys == ()
        assert result.extra_keys == ("menu.open",)

    def test_dotted_key_collides_with_nested_path(self):
        result = compute_diff({"a": {"b": "x"}}, {"a.b": "x"}, "test")

        assert result.missing_keys == ("a.b",)
        assert result.extra_keys == ()

    def test_never_modifies_inputs(self, reference_tree):
        candidate = {"app": {"title": ""}, "extra": "x"}
        ref_copy, cand_copy = copy.deepcopy(reference_tree), copy.deepcopy(candidate)

        compute_diff(reference_tree, candidate, "test")

        assert reference_tree == ref_copy
        assert candidate == cand_copy


class TestDiffProperties:
    """Invariants that hold for any pair of trees."""

    CANDIDATES = [
        {},
        {"app": {"title": "x"}},
        {"app": {"title": None, "welcome": " "}, "navigation": "flat", "quit": "Q"},
        {"app": "flat", "navigation": {"port": "P", "starboard": "S", "bow": "B"}, "quit": ""},
        {"other": {"deep": {"key": "v"}}},
    ]

    @pytest.mark.parametrize("candidate", CANDIDATES)
    def test_leaf_count_is_reference_leaf_count(self, reference_tree, candidate):
        result = compute_diff(reference_tree, candidate, "test")
        assert result.total_leaf_keys == len(flatten(reference_tree))

    @pytest.mark.parametrize("candidate", CANDIDATES)
    def test_reference_keys_are_partitioned(self, reference_tree, candidate):
        result = compute_diff(reference_tree, candidate, "test")
        missing, empty = set(result.missing_keys), set(result.empty_keys)

        assert not missing & empty
        assert missing | empty <= set(flatten(reference_tree))
        assert result.present_leaf_keys == result.total_leaf_keys - len(missing) - len(empty)
        assert result.present_leaf_keys >= 0

    @pytest.mark.parametrize("candidate", CANDIDATES)
    def test_coverage_is_bounded(self, reference_tree, candidate):
        result = compute_diff(reference_tree, candidate, "test")
        assert 0 <= result.coverage_percent <= 100

    def test_identical_copy_is_complete(self, reference_tree):
        result = compute_diff(reference_tree, copy.deepcopy(reference_tree), "test")

        assert result.missing_keys == ()
        assert result.empty_keys == ()
        assert result.extra_keys == ()
        assert result.coverage_percent == 100

    def test_order_follows_traversal(self):
        reference = {"z": "1", "m": {"b": "2", "a": "3"}, "a": "4"}
        candidate = {"y": "1", "m": {"a": " "}, "x": {"q": "v", "p": "w"}}

        result = compute_diff(reference, candidate, "test")

        assert result.missing_keys == ("z", "m.b", "a")
        assert result.empty_keys == ("m.a",)
        assert result.extra_keys == ("y", "x.q", "x.p")


class TestCoverage:
    """Test coverage rounding."""

    @pytest.mark.parametrize("present,total,expected", [
        (0, 0, 100.0),
        (0, 5, 0.0),
        (1, 3, 33.33),
        (2, 3, 66.67),
        (5, 7, 71.43),
        (1, 8, 12.5),
        (7, 7, 100.0),
    ])
    def test_rounds_to_two_decimals(self, present, total, expected):
        assert coverage(present, total) == expected


class TestDiffResult:
    """Test result record."""

    def test_structure(self):
        result = compute_diff({"a": "1"}, {"a": "1"}, "test")

        assert isinstance(result.locale, str)
        assert isinstance(result.total_leaf_keys, int)
        assert isinstance(result.present_leaf_keys, int)
        assert isinstance(result.coverage_percent, float)
        assert isinstance(result.missing_keys, tuple)
        assert isinstance(result.empty_keys, tuple)
        assert isinstance(result.extra_keys, tuple)

    def test_is_immutable(self):
        result = compute_diff({"a": "1"}, {}, "test")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.locale = "other"

    def test_counts(self):
        result = compute_diff({"a": "1", "b": "2"}, {"b": "", "c": "3"}, "test")

        assert result.missing_count == 1
        assert result.empty_count == 1
        assert result.extra_count == 1
        assert not result.is_complete

    def test_to_dict_uses_report_field_names(self):
        result = DiffResult(
            locale="es",
            total_leaf_keys=4,
            present_leaf_keys=2,
            coverage_percent=50.0,
            missing_keys=("c",),
            empty_keys=("b",),
            extra_keys=(),
        )

        assert result.to_dict() == {
            "locale": "es",
            "totalLeafKeys": 4,
            "presentLeafKeys": 2,
            "coveragePercent": 50.0,
            "missingKeys": ["c"],
            "emptyKeys": ["b"],
            "extraKeys": [],
        }
