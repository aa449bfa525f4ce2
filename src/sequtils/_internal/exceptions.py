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

"""Common exception hierarchy for sequtils."""

from __future__ import annotations

__all__ = [
    "ElementNotFoundError",
    "IndexOutOfRangeError",
    "ListElementNotFoundError",
    "NilCallbackError",
    "NilMapFunctionError",
    "NilSelectFunctionError",
    "NotSequenceError",
    "SequtilsError",
    "SequtilsTypeError",
    "SequtilsValidationError",
]


class SequtilsError(Exception):
    """Base error for all sequtils exceptions."""


class SequtilsValidationError(SequtilsError, ValueError):
    """Raised when input data fails validation checks."""


class SequtilsTypeError(SequtilsError, TypeError):
    """Raised when input data has an unexpected type."""


class NotSequenceError(SequtilsTypeError):
    """Raised when a collection argument is not sequence-shaped."""

    def __init__(self, value: object) -> None:
        """Initialize the exception with the offending argument.

        Args:
            value: The argument that failed the sequence check.
        """
        self.value = value
        super().__init__(f"collection value is not a sequence: got {type(value).__name__}")


class NilCallbackError(SequtilsValidationError):
    """Raised when a required callback argument is ``None``."""


class NilMapFunctionError(NilCallbackError):
    """Raised when ``map_sequence`` receives no map function."""

    def __init__(self) -> None:
        super().__init__("map function is nil")


class NilSelectFunctionError(NilCallbackError):
    """Raised when ``select`` receives no predicate."""

    def __init__(self) -> None:
        super().__init__("select function is nil")


class ElementNotFoundError(SequtilsError, LookupError):
    """Raised when a scanned sequence does not contain the requested element."""

    def __init__(self, target: object, message: str | None = None) -> None:
        """Initialize the exception with the missing target.

        Args:
            target: The element that was searched for.
            message: Optional override for the default message.
        """
        self.target = target
        super().__init__(message or "element not found")


class ListElementNotFoundError(ElementNotFoundError):
    """Raised when ``ArrayList.remove`` cannot find the target element."""

    def __init__(self, target: object) -> None:
        super().__init__(target, f"{target} element was not found in this list.")


class IndexOutOfRangeError(SequtilsError, IndexError):
    """Raised when a list position falls outside the valid range."""

    def __init__(self, position: int, size: int) -> None:
        """Initialize the exception with the position and the list size.

        Args:
            position: The requested position.
            size: The list size at the time of the call.
        """
        self.position = position
        self.size = size
        super().__init__(f"Index {position} is out of range from a list size of {size}")
