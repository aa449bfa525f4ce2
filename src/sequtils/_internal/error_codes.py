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

"""Stable error code registry used across sequtils."""

from __future__ import annotations

from typing import TYPE_CHECKING, NewType

from sequtils.config import (
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    UnsupportedConfigVersionError,
)

from .exceptions import (
    ElementNotFoundError,
    IndexOutOfRangeError,
    ListElementNotFoundError,
    NilCallbackError,
    NilMapFunctionError,
    NilSelectFunctionError,
    NotSequenceError,
    SequtilsError,
    SequtilsTypeError,
    SequtilsValidationError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

ErrorCode = NewType("ErrorCode", str)

_ERROR_CODES: dict[type[BaseException], ErrorCode] = {
    SequtilsError: ErrorCode("SQ000"),
    SequtilsValidationError: ErrorCode("SQ100"),
    SequtilsTypeError: ErrorCode("SQ101"),
    NotSequenceError: ErrorCode("SQ110"),
    NilCallbackError: ErrorCode("SQ120"),
    NilMapFunctionError: ErrorCode("SQ121"),
    NilSelectFunctionError: ErrorCode("SQ122"),
    ElementNotFoundError: ErrorCode("SQ200"),
    ListElementNotFoundError: ErrorCode("SQ201"),
    IndexOutOfRangeError: ErrorCode("SQ210"),
    ConfigValidationError: ErrorCode("SQ300"),
    ConfigReadError: ErrorCode("SQ301"),
    InvalidConfigFileError: ErrorCode("SQ302"),
    UnsupportedConfigVersionError: ErrorCode("SQ303"),
}


def error_code_for(exc: BaseException) -> ErrorCode:
    """Return a stable error code for a structured sequtils exception.

    The most specific registered class in the exception's MRO wins; unknown
    exceptions map to ``SQ000``.
    """
    for cls in type(exc).__mro__:
        code = _ERROR_CODES.get(cls)
        if code:
            return code
    return ErrorCode("SQ000")


def error_code_catalog() -> Mapping[str, ErrorCode]:
    """Return a stable mapping of fully-qualified exception names to error codes.

    Intended for diagnostics, tests, and documentation generation.
    """
    result: dict[str, ErrorCode] = {}
    for exc_type, code in _ERROR_CODES.items():
        key = f"{exc_type.__module__}.{exc_type.__name__}"
        result[key] = code
    return result


__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
