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

"""Helper functions for ordered operations over sequence-shaped collections.

Every function validates its collection arguments at runtime and raises
``NotSequenceError`` when an argument is not sequence-shaped. Results are
always new lists; inputs are never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Final, TypeAlias, TypeVar, cast

from sequtils._internal.exceptions import (
    ElementNotFoundError,
    NilMapFunctionError,
    NilSelectFunctionError,
    NotSequenceError,
)
from sequtils._internal.logging_utils import structured_extra
from sequtils.core.model_types import LogComponent

T = TypeVar("T")
R = TypeVar("R")

MapFunc: TypeAlias = Callable[[T], R]
SelectFunc: TypeAlias = Callable[[T], object]

logger = logging.getLogger("sequtils.collections")

# Sequence subclasses that behave like scalars rather than collections.
_SCALAR_SEQUENCE_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray, memoryview)


def is_sequence(value: object) -> bool:
    """Return True when ``value`` is an ordered, indexable collection.

    Text and binary values are excluded even though they implement the
    ``Sequence`` protocol.
    """
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_SEQUENCE_TYPES)


def _require_sequence(value: Sequence[T]) -> Sequence[T]:
    if not is_sequence(value):
        logger.debug(
            "Rejected non-sequence argument of type %s",
            type(value).__name__,
            extra=structured_extra(component=LogComponent.COLLECTIONS, operation="validate"),
        )
        raise NotSequenceError(value)
    return value


def combination(*sequences: Sequence[T]) -> list[tuple[T, ...]]:
    """Return every combination drawing one element from each sequence.

    Combinations are produced in nested-loop order: the first sequence varies
    slowest and the last varies fastest.

    Args:
        *sequences: Sequences to combine. Each combination has one position
            per sequence.

    Returns:
        A list of tuples. Empty when no sequences are given or when any
        sequence is empty.

    Raises:
        NotSequenceError: If any argument is not sequence-shaped. All
            arguments are checked before any combination is built.

    Example:
        >>> combination([1, 2], ["a", "b"])
        [(1, 'a'), (1, 'b'), (2, 'a'), (2, 'b')]
    """
    validated = [_require_sequence(sequence) for sequence in sequences]
    combinations: list[tuple[T, ...]] = []
    if not validated:
        return combinations

    buffer = cast("list[T]", [None] * len(validated))
    _combine(validated, buffer, combinations, 0)
    logger.debug(
        "Generated %d combinations from %d sequences",
        len(combinations),
        len(validated),
        extra=structured_extra(
            component=LogComponent.COLLECTIONS,
            operation="combination",
            count=len(combinations),
        ),
    )
    return combinations


def _combine(
    sequences: list[Sequence[T]],
    buffer: list[T],
    combinations: list[tuple[T, ...]],
    depth: int,
) -> None:
    last_level = depth == len(sequences) - 1
    for item in sequences[depth]:
        buffer[depth] = item
        if last_level:
            # snapshot; the buffer keeps being overwritten
            combinations.append(tuple(buffer))
        else:
            _combine(sequences, buffer, combinations, depth + 1)


def compact(collection: Sequence[T | None]) -> list[T]:
    """Return a copy of ``collection`` with every ``None`` element removed.

    Other falsy values such as ``0``, ``""`` or ``False`` are kept.

    Raises:
        NotSequenceError: If ``collection`` is not sequence-shaped.
    """
    items = _require_sequence(collection)
    return [item for item in items if item is not None]


def is_included(collection: Sequence[T], target: T, *, strict: bool = True) -> bool:
    """Return True if ``target`` is equal to an element of ``collection``.

    Elements are compared with ``==`` in order, stopping at the first match.

    Args:
        collection: Sequence to scan.
        target: Element to look for.
        strict: When True (default) a missing element raises
            ``ElementNotFoundError``; when False it returns False instead.

    Returns:
        True when the element is present; False only when ``strict`` is False
        and the element is absent.

    Raises:
        NotSequenceError: If ``collection`` is not sequence-shaped, regardless
            of ``strict``.
        ElementNotFoundError: If ``strict`` is True and ``target`` is absent.
    """
    items = _require_sequence(collection)
    for item in items:
        if item == target:
            return True
    if strict:
        raise ElementNotFoundError(target)
    return False


def map_sequence(collection: Sequence[T], map_fn: MapFunc[T, R] | None) -> list[R]:
    """Apply ``map_fn`` to each element and return the results in order.

    ``map_fn`` is expected to be free of side effects; this is not enforced.

    Raises:
        NotSequenceError: If ``collection`` is not sequence-shaped.
        NilMapFunctionError: If ``map_fn`` is None.
    """
    items = _require_sequence(collection)
    if map_fn is None:
        raise NilMapFunctionError
    return [map_fn(item) for item in items]


def select(collection: Sequence[T], predicate: SelectFunc[T] | None) -> list[T]:
    """Return the elements for which ``predicate`` returns a truthy value.

    Raises:
        NotSequenceError: If ``collection`` is not sequence-shaped.
        NilSelectFunctionError: If ``predicate`` is None.
    """
    items = _require_sequence(collection)
    if predicate is None:
        raise NilSelectFunctionError
    return [item for item in items if predicate(item)]


__all__ = [
    "MapFunc",
    "SelectFunc",
    "combination",
    "compact",
    "is_included",
    "is_sequence",
    "map_sequence",
    "select",
]
