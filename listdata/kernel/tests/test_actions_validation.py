"""
ListData Actions -- Parsing and Validation Tests

Tests for structural action checks. The validator answers "is this a
well-formed action?", never "will it apply?".

Actions:
  - selection.set: requires selected_keys ("all" or a collection of keys)
  - filter.set: requires filter_text
  - item.insert: requires index
  - item.insert_before / item.insert_after / item.update / item.move: require key
  - item.move: requires to_index
  - item.remove_selected: no fields
"""

import pytest
from pydantic import ValidationError

from listdata.kernel.actions import (
    Append,
    Insert,
    MoveBefore,
    Remove,
    SetSelectedKeys,
    Update,
    parse_action,
    validate_action,
)

# ============================================================================
# parse_action
# ============================================================================


class TestParseAction:
    def test_parses_each_tag_to_its_model(self):
        assert isinstance(parse_action({"t": "item.insert", "index": 1, "values": [1]}), Insert)
        assert isinstance(parse_action({"t": "item.remove", "keys": ["a"]}), Remove)
        assert isinstance(parse_action({"t": "item.move_before", "key": "a", "keys": ["b"]}), MoveBefore)

    def test_values_become_a_tuple(self):
        action = parse_action({"t": "item.append", "values": [1, 2]})
        assert action.values == (1, 2)

    def test_values_keep_identity(self):
        item = {"name": "Devon"}
        action = parse_action({"t": "item.append", "values": [item]})
        assert action.values[0] is item

    def test_update_value_keeps_identity(self):
        item = {"name": "Devon"}
        action = parse_action({"t": "item.update", "key": "Sam", "value": item})
        assert isinstance(action, Update)
        assert action.value is item

    def test_selection_all(self):
        action = parse_action({"t": "selection.set", "selected_keys": "all"})
        assert action.selected_keys == "all"

    def test_selection_list_becomes_frozenset(self):
        action = parse_action({"t": "selection.set", "selected_keys": ["a", "b"]})
        assert isinstance(action, SetSelectedKeys)
        assert action.selected_keys == frozenset({"a", "b"})

    def test_model_passes_through(self):
        action = Append(values=(1,))
        assert parse_action(action) is action

    def test_malformed_raises(self):
        with pytest.raises(ValidationError):
            parse_action({"t": "item.move", "key": "a"})

    def test_unknown_tag_raises(self):
        with pytest.raises(ValidationError):
            parse_action({"t": "item.explode"})


# ============================================================================
# validate_action
# ============================================================================


class TestValidateAction:
    def test_valid_action(self):
        assert validate_action({"t": "item.insert", "index": 0, "values": ["x"]}) == []

    def test_valid_model(self):
        assert validate_action(Remove(keys=("a",))) == []

    def test_remove_selected_needs_nothing(self):
        assert validate_action({"t": "item.remove_selected"}) == []

    def test_not_a_mapping(self):
        errors = validate_action(["item.insert"])
        assert errors == ["Action must be a mapping"]

    def test_missing_type(self):
        errors = validate_action({"index": 0})
        assert len(errors) == 1
        assert "'t'" in errors[0]

    def test_unknown_type(self):
        errors = validate_action({"t": "item.explode"})
        assert errors == ["Unknown action type: item.explode"]

    def test_missing_to_index(self):
        errors = validate_action({"t": "item.move", "key": "a"})
        assert len(errors) >= 1
        assert any("to_index" in e for e in errors)

    def test_missing_key(self):
        errors = validate_action({"t": "item.update", "value": 1})
        assert any("key" in e for e in errors)

    def test_bad_index_type(self):
        errors = validate_action({"t": "item.insert", "index": "front", "values": []})
        assert any("index" in e for e in errors)

    def test_extra_field_rejected(self):
        errors = validate_action({"t": "filter.set", "filter_text": "a", "bogus": 1})
        assert any("bogus" in e for e in errors)

    def test_selection_must_be_all_or_keys(self):
        errors = validate_action({"t": "selection.set", "selected_keys": 5})
        assert errors

    def test_unhashable_key_rejected(self):
        errors = validate_action({"t": "item.move_before", "key": "a", "keys": ["b", {"c": 1}]})
        assert any("hashable" in e for e in errors)

    def test_unhashable_key_model(self):
        with pytest.raises(ValidationError):
            Update(key=["Sam"], value=1)
