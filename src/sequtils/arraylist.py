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

"""Dynamic array list with positional insertion, removal, and lookup.

``ArrayList`` is not safe for concurrent mutation; callers sharing an
instance across threads must synchronise access themselves.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, NoReturn, TypeVar

from sequtils._internal.exceptions import IndexOutOfRangeError, ListElementNotFoundError
from sequtils._internal.logging_utils import structured_extra
from sequtils.compat import override
from sequtils.core.model_types import LogComponent

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sequtils.compat import Self

T = TypeVar("T")

logger = logging.getLogger("sequtils.arraylist")


class ArrayList(Generic[T]):
    """Mutable, ordered, indexable container.

    Valid positions are ``0 <= position < size()``; negative positions are
    always out of range. Elements are compared with ``==`` for value lookups.
    Every operation validates its arguments before mutating, so a failed call
    leaves the list unchanged.

    Example:
        >>> items = ArrayList([1, 2, 3])
        >>> items.add_at(1, 99)
        >>> items.to_list()
        [1, 99, 2, 3]
    """

    __slots__ = ("_items",)

    def __init__(self, elements: Iterable[T] | None = None) -> None:
        """Create a list, optionally seeded with ``elements`` in order."""
        self._items: list[T] = list(elements) if elements is not None else []

    @classmethod
    def of(cls, *elements: T) -> Self:
        """Create a list holding ``elements`` in the given order."""
        return cls(elements)

    def add(self, *elements: T) -> None:
        """Append ``elements`` to the end of this list."""
        self._items.extend(elements)

    def add_first(self, *elements: T) -> None:
        """Insert ``elements`` at the beginning; the first given ends up first."""
        self._items[0:0] = elements

    def add_at(self, position: int, *elements: T) -> None:
        """Insert ``elements`` starting at ``position``.

        Args:
            position: Insertion point, ``0 <= position <= size()``.
            *elements: Elements to insert, in order.

        Raises:
            IndexOutOfRangeError: If ``position`` is outside ``[0, size()]``.
        """
        self._check_insert_range(position)
        if position == 0:
            self.add_first(*elements)
        elif position == self.size():
            self.add(*elements)
        else:
            self._insert(position, elements)

    def clear(self) -> None:
        """Remove all elements from this list."""
        self._items = []

    def get(self, position: int) -> T:
        """Return the element at ``position``.

        Raises:
            IndexOutOfRangeError: If ``position`` is outside ``[0, size())``.
        """
        self._check_range(position)
        return self._items[position]

    def index_of(self, target: object) -> int:
        """Return the index of the first element equal to ``target``, or -1."""
        for index, item in enumerate(self._items):
            if item == target:
                return index
        return -1

    def last_index_of(self, target: object) -> int:
        """Return the index of the last element equal to ``target``, or -1."""
        for index in range(self.size() - 1, -1, -1):
            if self._items[index] == target:
                return index
        return -1

    def is_empty(self) -> bool:
        return self.size() == 0

    def remove(self, target: object) -> None:
        """Remove the first element equal to ``target``.

        Later duplicates are left in place.

        Raises:
            ListElementNotFoundError: If no element equals ``target``.
        """
        index = self.index_of(target)
        if index == -1:
            logger.debug(
                "Element %r not found for removal",
                target,
                extra=structured_extra(
                    component=LogComponent.ARRAYLIST,
                    operation="remove",
                    size=self.size(),
                ),
            )
            raise ListElementNotFoundError(target)
        _ = self.remove_at(index)

    def remove_at(self, position: int) -> T:
        """Remove and return the element at ``position``.

        Subsequent elements shift one place to the left.

        Raises:
            IndexOutOfRangeError: If ``position`` is outside ``[0, size())``.
        """
        self._check_range(position)
        return self._items.pop(position)

    def size(self) -> int:
        return len(self._items)

    def to_list(self) -> list[T]:
        """Return a shallow copy of the elements.

        Mutating the returned list never affects this list.
        """
        return list(self._items)

    def __len__(self) -> int:
        return self.size()

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def _insert(self, position: int, elements: tuple[T, ...]) -> None:
        self._items[position:position] = elements

    def _check_insert_range(self, position: int) -> None:
        if position < 0 or position > self.size():
            self._raise_out_of_range(position, "add_at")

    def _check_range(self, position: int) -> None:
        if position < 0 or position >= self.size():
            self._raise_out_of_range(position, "access")

    def _raise_out_of_range(self, position: int, operation: str) -> NoReturn:
        logger.debug(
            "Position %d rejected for list of size %d",
            position,
            self.size(),
            extra=structured_extra(
                component=LogComponent.ARRAYLIST,
                operation=operation,
                position=position,
                size=self.size(),
            ),
        )
        raise IndexOutOfRangeError(position, self.size())


__all__ = ["ArrayList"]
