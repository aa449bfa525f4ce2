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

"""Unit tests for combination generation."""

from __future__ import annotations

import pytest

from sequtils import NotSequenceError, combination

pytestmark = pytest.mark.unit


def test_combination_two_sequences_in_row_major_order() -> None:
    result = combination([1, 2, 3], ["a", "b"])
    assert result == [
        (1, "a"),
        (1, "b"),
        (2, "a"),
        (2, "b"),
        (3, "a"),
        (3, "b"),
    ]


def test_combination_three_sequences_last_varies_fastest() -> None:
    result = combination([0, 1], [0, 1], [0, 1])
    assert result == [
        (0, 0, 0),
        (0, 0, 1),
        (0, 1, 0),
        (0, 1, 1),
        (1, 0, 0),
        (1, 0, 1),
        (1, 1, 0),
        (1, 1, 1),
    ]


def test_combination_single_sequence_wraps_each_element() -> None:
    assert combination(["x", "y"]) == [("x",), ("y",)]


def test_combination_without_arguments_is_empty() -> None:
    assert combination() == []


@pytest.mark.parametrize(
    "sequences",
    [
        ([], [1, 2]),
        ([1, 2], []),
        ([1], [], [2]),
    ],
)
def test_combination_with_empty_sequence_is_empty(sequences: tuple[list[int], ...]) -> None:
    assert combination(*sequences) == []


def test_combination_accepts_tuples_and_ranges() -> None:
    assert combination((1, 2), range(2)) == [(1, 0), (1, 1), (2, 0), (2, 1)]


def test_combination_accepts_heterogeneous_elements() -> None:
    assert combination([None, "a"], [1.5]) == [(None, 1.5), ("a", 1.5)]


def test_combination_results_do_not_alias_each_other() -> None:
    result = combination([[1], [2]], ["z"])
    first, second = result
    assert first is not second
    assert first == ([1], "z")
    assert second == ([2], "z")


@pytest.mark.parametrize("bad", ["ab", b"ab", 42, None, {1, 2}, {"a": 1}])
def test_combination_rejects_non_sequence_argument(bad: object) -> None:
    with pytest.raises(NotSequenceError) as excinfo:
        _ = combination([1, 2], bad)  # type: ignore[arg-type]
    assert excinfo.value.value is bad


def test_combination_validates_every_argument_before_building() -> None:
    with pytest.raises(NotSequenceError):
        _ = combination([], 5)  # type: ignore[arg-type]
