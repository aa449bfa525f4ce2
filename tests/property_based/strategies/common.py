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

"""Common Hypothesis strategies shared across property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = [
    "element_lists",
    "elements",
    "non_sequences",
    "small_sequences",
]


def elements() -> st.SearchStrategy[object]:
    """Return a strategy for hashable-or-not scalar and nested list elements.

    Floats are excluded so that NaN never breaks equality-based assertions.
    """
    scalars = st.one_of(st.none(), st.integers(-5, 5), st.text(max_size=3), st.booleans())
    return st.one_of(scalars, st.lists(st.integers(-3, 3), max_size=3))


def element_lists(max_size: int = 12) -> st.SearchStrategy[list[object]]:
    """Return a strategy that yields lists of mixed elements."""
    return st.lists(elements(), max_size=max_size)


def small_sequences(max_count: int = 4, max_size: int = 4) -> st.SearchStrategy[list[list[int]]]:
    """Strategy that emits a short list of short integer sequences.

    Args:
        max_count: Maximum number of sequences emitted.
        max_size: Maximum length of each sequence.

    Returns:
        Hypothesis strategy producing lists of integer lists, kept small so the
        Cartesian product stays cheap to enumerate.
    """
    return st.lists(st.lists(st.integers(0, 9), max_size=max_size), max_size=max_count)


def non_sequences() -> st.SearchStrategy[object]:
    """Inputs that must be rejected by the sequence helpers."""
    return st.one_of(
        st.text(),
        st.binary(),
        st.integers(),
        st.none(),
        st.sets(st.integers(), max_size=3),
        st.dictionaries(st.text(max_size=2), st.integers(), max_size=3),
    )
