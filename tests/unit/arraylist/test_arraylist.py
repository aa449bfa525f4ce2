# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Unit tests for the dynamic array list."""

from __future__ import annotations

import pytest

from sequtils import ArrayList, ElementNotFoundError, IndexOutOfRangeError, ListElementNotFoundError

pytestmark = pytest.mark.unit


@pytest.fixture
def numbers() -> ArrayList[int]:
    """Return a list holding ``[1, 2, 3]``."""
    items: ArrayList[int] = ArrayList()
    items.add(1, 2, 3)
    return items


def test_new_list_is_empty() -> None:
    items: ArrayList[object] = ArrayList()
    assert items.is_empty()
    assert items.size() == 0
    assert items.to_list() == []


def test_add_appends_in_order(numbers: ArrayList[int]) -> None:
    assert numbers.size() == 3
    assert numbers.get(0) == 1
    assert numbers.get(2) == 3
    assert not numbers.is_empty()


def test_add_without_elements_is_noop(numbers: ArrayList[int]) -> None:
    numbers.add()
    assert numbers.to_list() == [1, 2, 3]


def test_constructor_and_of_seed_elements() -> None:
    assert ArrayList([4, 5]).to_list() == [4, 5]
    assert ArrayList.of("a", "b").to_list() == ["a", "b"]


def test_add_first_keeps_given_order(numbers: ArrayList[int]) -> None:
    numbers.add_first(7, 8)
    assert numbers.to_list() == [7, 8, 1, 2, 3]


def test_add_at_inserts_in_middle(numbers: ArrayList[int]) -> None:
    numbers.add_at(1, 99)
    assert numbers.to_list() == [1, 99, 2, 3]


def test_add_at_inserts_several_elements(numbers: ArrayList[int]) -> None:
    numbers.add_at(2, 10, 11)
    assert numbers.to_list() == [1, 2, 10, 11, 3]


@pytest.mark.parametrize(
    ("position", "expected"),
    [
        (0, [9, 8, 1, 2, 3]),
        (3, [1, 2, 3, 9, 8]),
    ],
)
def test_add_at_boundaries_match_general_insertion(
    numbers: ArrayList[int],
    position: int,
    expected: list[int],
) -> None:
    numbers.add_at(position, 9, 8)
    reference = [1, 2, 3]
    reference[position:position] = [9, 8]
    assert numbers.to_list() == expected == reference


def test_add_at_on_empty_list() -> None:
    items: ArrayList[str] = ArrayList()
    items.add_at(0, "a")
    assert items.to_list() == ["a"]


@pytest.mark.parametrize("position", [-1, 4, 10])
def test_add_at_out_of_range_leaves_list_unchanged(numbers: ArrayList[int], position: int) -> None:
    with pytest.raises(IndexOutOfRangeError) as excinfo:
        numbers.add_at(position, 5)
    assert excinfo.value.position == position
    assert excinfo.value.size == 3
    assert numbers.to_list() == [1, 2, 3]


def test_get_out_of_range_reports_position_and_size(numbers: ArrayList[int]) -> None:
    with pytest.raises(IndexOutOfRangeError) as excinfo:
        _ = numbers.get(5)
    assert str(excinfo.value) == "Index 5 is out of range from a list size of 3"
    assert isinstance(excinfo.value, IndexError)


def test_get_rejects_negative_positions(numbers: ArrayList[int]) -> None:
    with pytest.raises(IndexOutOfRangeError):
        _ = numbers.get(-1)


def test_index_of_and_last_index_of(numbers: ArrayList[int]) -> None:
    numbers.add(2, 1)
    assert numbers.index_of(2) == 1
    assert numbers.last_index_of(2) == 3
    assert numbers.index_of(1) == 0
    assert numbers.last_index_of(1) == 4


def test_index_lookups_return_sentinel_when_missing(numbers: ArrayList[int]) -> None:
    assert numbers.index_of(42) == -1
    assert numbers.last_index_of(42) == -1


def test_index_of_uses_structural_equality() -> None:
    items = ArrayList.of([1, 2], {"a": (1,)})
    assert items.index_of([1, 2]) == 0
    assert items.last_index_of({"a": (1,)}) == 1


def test_remove_only_first_occurrence() -> None:
    items = ArrayList.of(1, 2, 3, 2)
    items.remove(2)
    assert items.to_list() == [1, 3, 2]


def test_remove_missing_element_reports_target(numbers: ArrayList[int]) -> None:
    with pytest.raises(ListElementNotFoundError) as excinfo:
        numbers.remove(42)
    assert str(excinfo.value) == "42 element was not found in this list."
    assert excinfo.value.target == 42
    assert isinstance(excinfo.value, ElementNotFoundError)
    assert numbers.to_list() == [1, 2, 3]


def test_remove_missing_string_renders_without_quotes() -> None:
    items = ArrayList.of("a")
    with pytest.raises(ListElementNotFoundError, match="^b element was not found in this list.$"):
        items.remove("b")


def test_remove_at_shifts_left_and_returns_element() -> None:
    items = ArrayList.of(1, 99, 2, 3)
    assert items.remove_at(1) == 99
    assert items.to_list() == [1, 2, 3]


@pytest.mark.parametrize("position", [-1, 3])
def test_remove_at_out_of_range(numbers: ArrayList[int], position: int) -> None:
    with pytest.raises(IndexOutOfRangeError) as excinfo:
        _ = numbers.remove_at(position)
    assert excinfo.value.size == 3
    assert numbers.size() == 3


def test_clear_empties_list(numbers: ArrayList[int]) -> None:
    numbers.clear()
    assert numbers.size() == 0
    assert numbers.is_empty()
    with pytest.raises(IndexOutOfRangeError):
        _ = numbers.get(0)


def test_to_list_returns_independent_copy(numbers: ArrayList[int]) -> None:
    copy = numbers.to_list()
    copy.append(4)
    copy[0] = 100
    assert numbers.size() == 3
    assert numbers.get(0) == 1
    assert numbers.to_list() == [1, 2, 3]


def test_constructor_copies_seed_iterable() -> None:
    seed = [1, 2]
    items = ArrayList(seed)
    seed.append(3)
    assert items.to_list() == [1, 2]


def test_len_and_repr(numbers: ArrayList[int]) -> None:
    assert len(numbers) == 3
    assert repr(numbers) == "ArrayList([1, 2, 3])"
