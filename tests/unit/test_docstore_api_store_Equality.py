"""Tests for Equality, UpdateOutcome and DeleteOutcome."""

import pytest

from docstore.api.store.DeleteOutcome import DeleteOutcome
from docstore.api.store.Equality import Equality
from docstore.api.store.InvalidArgument import InvalidArgument
from docstore.api.store.UpdateOutcome import UpdateOutcome


def test_equality_builds_filter_and_set():
    equality = Equality("name", "Alice")
    assert equality.as_filter() == {"name": {"$eq": "Alice"}}
    assert equality.as_set() == {"$set": {"name": "Alice"}}


def test_coerce_accepts_all_input_forms():
    expected = Equality("age", 30)
    assert Equality.coerce(expected) is expected
    assert Equality.coerce({"age": 30}) == expected
    assert Equality.coerce(("age", 30)) == expected


def test_coerce_keeps_nested_values():
    assert Equality.coerce({"address": {"city": "Oslo"}}).value == {"city": "Oslo"}


@pytest.mark.parametrize("value", [{}, {"a": 1, "b": 2}, ("a", 1, 2), "a=1", None, 42])
def test_coerce_rejects_anything_but_one_pair(value):
    with pytest.raises(InvalidArgument):
        Equality.coerce(value)


def test_coerce_names_the_argument():
    with pytest.raises(InvalidArgument) as exc_info:
        Equality.coerce({"a": 1, "b": 2}, "update")
    assert str(exc_info.value).startswith("update must hold exactly one field/value pair")


@pytest.mark.parametrize("field", ["", "  ", 7])
def test_equality_rejects_blank_or_non_string_field(field):
    with pytest.raises(InvalidArgument):
        Equality(field, "x")


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        Equality("", "x")


def test_update_outcome_behaves_as_single_entry_mapping():
    outcome = UpdateOutcome("age", "31", matched_count=1, modified_count=1)
    assert outcome == {"age": "31"}
    assert dict(outcome) == {"age": "31"}
    assert outcome["age"] == "31"
    assert len(outcome) == 1
    assert list(outcome) == ["age"]
    with pytest.raises(KeyError):
        outcome["name"]


def test_update_outcome_distinguishes_match_from_no_match():
    assert UpdateOutcome("age", "31", matched_count=1, modified_count=0).matched is True
    assert UpdateOutcome("age", "31", matched_count=0, modified_count=0).matched is False


def test_update_outcome_to_dict():
    outcome = UpdateOutcome("age", "31", matched_count=1, modified_count=1)
    assert outcome.to_dict() == {"update": {"age": "31"}, "matched_count": 1, "modified_count": 1}
    assert "matched_count=1" in repr(outcome)


def test_delete_outcome():
    assert DeleteOutcome(1).deleted is True
    assert DeleteOutcome(0).deleted is False
