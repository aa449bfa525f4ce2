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

"""sequtils - generic sequence helpers and a dynamic array list.

Provides free functions over sequence-shaped collections (combination,
compaction, membership, map, select) and ``ArrayList``, a mutable ordered
container with positional insertion and removal.
"""

from __future__ import annotations

from sequtils.exceptions import (
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

from .arraylist import ArrayList
from .collections import (
    MapFunc,
    SelectFunc,
    combination,
    compact,
    is_included,
    is_sequence,
    map_sequence,
    select,
)
from .config import Config, load_config
from .logging import configure_logging

__all__ = [
    "ArrayList",
    "Config",
    "ElementNotFoundError",
    "IndexOutOfRangeError",
    "ListElementNotFoundError",
    "MapFunc",
    "NilCallbackError",
    "NilMapFunctionError",
    "NilSelectFunctionError",
    "NotSequenceError",
    "SelectFunc",
    "SequtilsError",
    "SequtilsTypeError",
    "SequtilsValidationError",
    "__version__",
    "combination",
    "compact",
    "configure_logging",
    "is_included",
    "is_sequence",
    "load_config",
    "map_sequence",
    "select",
]

__version__ = "0.1.0"
