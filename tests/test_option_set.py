# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for validated option sets and their rendering."""

from __future__ import annotations

import copy

import pytest

from xqrun.options import (
    CannotDisableError,
    CannotEnableError,
    InvalidOptionValueError,
    OptionError,
    OptionNotSetError,
    OptionRegistry,
    OptionSet,
    UnknownOptionError,
)


def test_set_then_get_returns_value(small_registry: OptionRegistry) -> None:
    options = OptionSet(registry=small_registry)
    options.set("title", "report")
    options.set("count", 3)

    assert options.get("title") == "report"
    assert options.get("count") == 3
    assert options.has("title")
    assert "count" in options
    assert len(options) == 2


def test_set_unknown_option_raises(small_registry: OptionRegistry) -> None:
    options = OptionSet(registry=small_registry)

    with pytest.raises(UnknownOptionError) as excinfo:
        options.set("colour", "red")

    assert excinfo.value.name == "colour"
    assert not options.has("colour")


def test_invalid_value_leaves_previous_value(small_registry: OptionRegistry) -> None:
    options = OptionSet(registry=small_registry)
    options.set("mode", "fast")

    with pytest.raises(InvalidOptionValueError) as excinfo:
        options.set("mode", "warp")

    assert excinfo.value.value == "warp"
    assert "warp" in str(excinfo.value)
    assert options.get("mode") == "fast"


def test_repeatable_scalar_is_wrapped(small_registry: OptionRegistry) -> None:
    options = OptionSet(registry=small_registry)
    options.set("include", "lib.xq")

    assert options.get("include") == ["lib.xq"]
    assert options.render() == '--include "lib.xq"'


def test_repeatable_sequence_renders_in_order(small_registry: OptionRegistry) -> None:
    options = OptionSet(registry=small_registry)
    options.set("include", ("a.xq", "b.xq"))

    assert options.render() == '--include "a.xq" --include "b.xq"'


def test_repeatable_rejects_any_invalid_element(small_registry: OptionRegistry) -> None:
    options = OptionSet(registry=small_registry)
    options.set("level", [1])

    with pytest.raises(InvalidOptionValueError) as excinfo:
        options.set("level", [1, 9, 2])

    assert excinfo.value.value == 9
    assert options.get("level") == [1]


def test_set_replaces_rather_than_merges(small_registry: OptionRegistry) -> None:
    options = OptionSet(registry=small_registry)
    options.set("include", ["a.xq", "b.xq"])
    options.set("include", "c.xq")

    assert options.get("include") == ["c.xq"]


def test_get_returns_detached_copy(small_registry: OptionRegistry) -> None:
    options = OptionSet(registry=small_registry)
    options.set("include", ["a.xq"])

    values = options.get("include")
    values.append("b.xq")

    assert options.get("include") == ["a.xq"]
    options.set("include", values)
    assert options.get("include") == ["a.xq", "b.xq"]


def test_set_copies_caller_sequence(small_registry: OptionRegistry) -> None:
    values = ["a.xq"]
    options = OptionSet(registry=small_registry)
    options.set("include", values)
    values.append("b.xq")

    assert options.get("include") == ["a.xq"]


def test_append_extends_repeatable_values(small_registry: OptionRegistry) -> None:
    options = OptionSet(registry=small_registry)
    options.append("include", "a.xq")
    options.append("include", "b.xq")

    assert options.get("include") == ["a.xq", "b.xq"]


def test_append_rejects_single_options(small_registry: OptionRegistry) -> None:
    options = OptionSet(registry=small_registry)

    with pytest.raises(OptionError, match="not repeatable"):
        options.append("title", "x")


def test_enable_and_disable_boolean(small_registry: OptionRegistry) -> None:
    options = OptionSet(registry=small_registry)
    options.enable("verbose")

    assert options.get("verbose") is True
    assert options.render() == "--verbose"

    options.disable("verbose")

    assert not options.has("verbose")
    assert options.render() == ""


def test_enable_rejects_non_boolean(small_registry: OptionRegistry) -> None:
    options = OptionSet(registry=small_registry)

    with pytest.raises(CannotEnableError):
        options.enable("title")
    with pytest.raises(CannotEnableError):
        options.enable("missing")


def test_disable_rejects_non_boolean(small_registry: OptionRegistry) -> None:
    options = OptionSet({"count": 2}, registry=small_registry)

    with pytest.raises(CannotDisableError):
        options.disable("count")

    assert options.get("count") == 2


def test_get_missing_option_raises(small_registry: OptionRegistry) -> None:
    options = OptionSet(registry=small_registry)

    with pytest.raises(OptionNotSetError, match="title"):
        options.get("title")
    with pytest.raises(KeyError):
        options.get("title")


def test_unset_is_silent_for_absent_option(small_registry: OptionRegistry) -> None:
    options = OptionSet({"title": "x"}, registry=small_registry)
    options.unset("title")
    options.unset("title")

    assert len(options) == 0


def test_render_keeps_insertion_order_and_false_gaps(small_registry: OptionRegistry) -> None:
    options = OptionSet(registry=small_registry)
    options.set("title", "t")
    options.set("verbose", False)
    options.set("count", 5)

    assert options.render() == '--title "t"  --count "5"'


def test_render_trims_outer_whitespace(small_registry: OptionRegistry) -> None:
    options = OptionSet({"verbose": False, "title": "t", "parse-only": False}, registry=small_registry)

    assert options.render() == '--title "t"'


def test_render_uses_override_serializer(small_registry: OptionRegistry) -> None:
    options = OptionSet({"label": "draft"}, registry=small_registry)

    assert options.render() == "--label=DRAFT"


def _construct_into(options: OptionSet, initial: dict[str, object], registry: OptionRegistry) -> None:
    """Run the ``OptionSet`` initialiser on ``options`` so its state stays observable after a failure."""

    OptionSet.__init__(options, initial, registry=registry)


def test_construction_applies_entries_until_first_failure(small_registry: OptionRegistry) -> None:
    """Construction replays ``set`` per key, so keys before a rejected one stay applied."""

    options = OptionSet(registry=small_registry)

    with pytest.raises(InvalidOptionValueError):
        _construct_into(options, {"title": "ok", "count": "bad", "mode": "fast"}, small_registry)

    assert options.get("title") == "ok"
    assert not options.has("mode")


def test_construction_from_mapping_round_trip() -> None:
    options = OptionSet({"query": "a.xq", "indent": True})

    assert options.render() == '--query "a.xq" --indent'


def test_timing_flag_renders_bare() -> None:
    options = OptionSet()
    options.enable("timing")

    assert options.render() == "--timing"

    options.disable("timing")

    assert "timing" not in options
    assert options.render() == ""


def test_clone_is_independent() -> None:
    original = OptionSet({"query": ["a.xq"], "indent": True})
    clone = original.copy()
    clone.enable("parse-only")
    clone.append("query", "b.xq")

    assert original.render() == '--query "a.xq" --indent'
    assert clone.render() == '--query "a.xq" --query "b.xq" --indent --parse-only'
    assert clone.registry is original.registry


def test_deepcopy_matches_copy(small_registry: OptionRegistry) -> None:
    original = OptionSet({"include": ["a"]}, registry=small_registry)
    clone = copy.deepcopy(original)
    clone.set("include", ["b"])

    assert original.get("include") == ["a"]
    assert clone.registry is small_registry


def test_to_dict_and_items_are_detached(small_registry: OptionRegistry) -> None:
    options = OptionSet({"include": ["a"], "count": 1}, registry=small_registry)
    snapshot = options.to_dict()
    snapshot["include"].append("b")

    assert options.get("include") == ["a"]
    assert dict(options.items()) == {"include": ["a"], "count": 1}
    assert list(options) == ["include", "count"]


def test_repr_lists_assignments(small_registry: OptionRegistry) -> None:
    options = OptionSet({"count": 1}, registry=small_registry)

    assert repr(options) == "OptionSet({'count': 1})"
