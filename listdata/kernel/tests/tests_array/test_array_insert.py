"""
ListData Array -- insert()

insert(original, index, *values) splices values in before index.

Covers:
  - Inserting into an empty list (index is irrelevant)
  - Nothing to insert returns the original object
  - One and several values
  - Index clamping at both ends
  - Untouched elements keep their identity
  - The input list is never modified
"""

import pytest

from listdata.kernel.array import insert


@pytest.fixture
def original():
    return [0, 1, 2]


class TestInsertEmpty:
    def test_inserts_to_an_empty_list(self):
        original = []
        result = insert(original, 0, 4, 2)
        assert result is not original
        assert result == [4, 2]

    def test_index_does_not_matter_for_an_empty_list(self):
        assert insert([], 3, 4, 2) == [4, 2]
        assert insert([], -3, 4, 2) == [4, 2]

    def test_returns_original_if_nothing_to_insert(self, original):
        assert insert(original, 0) is original
        assert insert(original, 99) is original
        assert insert(original, -99) is original


class TestInsertPositions:
    def test_inserts_one_value(self, original):
        result = insert(original, 1, 3)
        assert result is not original
        assert result == [0, 3, 1, 2]

    def test_inserts_multiple_values_in_order(self, original):
        result = insert(original, 1, 3, 0, -1)
        assert result == [0, 3, 0, -1, 1, 2]

    def test_inserts_before_index_zero(self, original):
        assert insert(original, -1, 9) == [9, 0, 1, 2]

    def test_inserts_at_index_zero(self, original):
        assert insert(original, 0, 9) == [9, 0, 1, 2]

    def test_inserts_at_last_index(self, original):
        assert insert(original, len(original) - 1, 9) == [0, 1, 9, 2]

    def test_inserts_after_last_index(self, original):
        assert insert(original, len(original), 9) == [0, 1, 2, 9]

    def test_index_past_the_end_is_clamped(self, original):
        assert insert(original, 42, 9) == [0, 1, 2, 9]

    def test_length_grows_by_number_of_values(self, original):
        for index in range(-2, 6):
            assert len(insert(original, index, 7, 8)) == len(original) + 2


class TestInsertIdentity:
    def test_keeps_references_of_untouched_items(self):
        original = [{"id": "a"}, {"id": "b"}]
        d, c = {"id": "d"}, {"id": "c"}
        result = insert(original, 1, d, c)
        assert result is not original
        assert result[0] is original[0]
        assert result[1] is d
        assert result[2] is c
        assert result[3] is original[1]

    def test_does_not_modify_original(self, original):
        insert(original, 1, 5, 6)
        assert original == [0, 1, 2]

    def test_accepts_a_tuple(self):
        assert insert((0, 1), 1, 9) == [0, 9, 1]
